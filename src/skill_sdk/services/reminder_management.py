# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""Reminder management service client."""

from __future__ import annotations

from typing import Any

from skill_sdk.runtime.base_client import BaseServiceClient
from skill_sdk.services._common import json_headers, require_param

_UNAUTHORIZED = (
    "UserAuthenticationException. Request is not authorized/authenticated e.g. "
    "If customer does not have permission to create a reminder."
)
_THROTTLED = "RateExceededException e.g. When the skill is throttled for exceeding the max rate"


class ReminderManagementServiceClient(BaseServiceClient):
    """Creates, reads, updates and deletes reminders for the current customer."""

    async def _call(
        self,
        method: str,
        path: str,
        path_params: dict[str, str],
        body: Any,
        errors: dict[int, str],
    ) -> Any:
        response = await self.invoke(
            method,
            self.api_configuration.api_endpoint,
            path,
            path_params,
            [],
            json_headers(self, self.api_configuration.authorization_value),
            body,
            errors,
        )
        return response.body

    async def get_reminders(self) -> Any:
        errors = {
            200: "Success",
            401: _UNAUTHORIZED,
            429: _THROTTLED,
            500: "Internal Server Error",
        }
        return await self._call("GET", "/v1/alerts/reminders/", {}, None, errors)

    async def create_reminder(self, reminder_request: Any) -> Any:
        require_param(reminder_request, "reminderRequest", "createReminder")
        errors = {
            200: "Success",
            400: "Bad Request",
            403: "Forbidden",
            429: _THROTTLED,
            500: "Internal Server Error",
            503: "Service Unavailable",
            504: "Gateway Timeout",
        }
        return await self._call("POST", "/v1/alerts/reminders/", {}, reminder_request, errors)

    async def get_reminder(self, alert_token: str) -> Any:
        require_param(alert_token, "alertToken", "getReminder")
        errors = {
            200: "Success",
            401: _UNAUTHORIZED,
            429: _THROTTLED,
            500: "Internal Server Error",
        }
        return await self._call(
            "GET", "/v1/alerts/reminders/{alertToken}", {"alertToken": alert_token}, None, errors
        )

    async def update_reminder(self, alert_token: str, reminder_request: Any) -> Any:
        require_param(alert_token, "alertToken", "updateReminder")
        require_param(reminder_request, "reminderRequest", "updateReminder")
        errors = {
            200: "Success",
            400: "Bad Request",
            404: "NotFoundException e.g. Retured when reminder is not found",
            409: _UNAUTHORIZED,
            429: _THROTTLED,
            500: "Internal Server Error",
        }
        return await self._call(
            "PUT",
            "/v1/alerts/reminders/{alertToken}",
            {"alertToken": alert_token},
            reminder_request,
            errors,
        )

    async def delete_reminder(self, alert_token: str) -> None:
        require_param(alert_token, "alertToken", "deleteReminder")
        errors = {
            200: "Success",
            401: _UNAUTHORIZED,
            429: _THROTTLED,
            500: "Internal Server Error",
        }
        await self._call(
            "DELETE", "/v1/alerts/reminders/{alertToken}", {"alertToken": alert_token}, None, errors
        )
