# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
Customer profile and device settings (UPS) service client.

Every operation is a GET of a single setting; they differ only by path.
"""

from __future__ import annotations

from typing import Any

from skill_sdk.runtime.base_client import BaseServiceClient
from skill_sdk.services._common import json_headers, require_param

_ERRORS = {
    204: "The query did not return any results.",
    401: "The authentication token is malformed or invalid.",
    403: "The authentication token does not have access to resource.",
    429: "The skill has been throttled due to an excessive number of requests.",
    0: "An unexpected error occurred.",
}
_PROFILE_ERRORS = {200: "Successfully retrieved the requested information.", **_ERRORS}
_DEVICE_ERRORS = {200: "Successfully get the setting", **_ERRORS}


class UpsServiceClient(BaseServiceClient):
    async def _get_setting(
        self, path: str, path_params: dict[str, str], errors: dict[int, str]
    ) -> Any:
        response = await self.invoke(
            "GET",
            self.api_configuration.api_endpoint,
            path,
            path_params,
            [],
            json_headers(self, self.api_configuration.authorization_value),
            None,
            errors,
        )
        return response.body

    async def get_profile_email(self) -> Any:
        return await self._get_setting(
            "/v2/accounts/~current/settings/Profile.email", {}, _PROFILE_ERRORS
        )

    async def get_profile_given_name(self) -> Any:
        return await self._get_setting(
            "/v2/accounts/~current/settings/Profile.givenName", {}, _PROFILE_ERRORS
        )

    async def get_profile_mobile_number(self) -> Any:
        """Returns ``{"countryCode": ..., "phoneNumber": ...}``."""
        return await self._get_setting(
            "/v2/accounts/~current/settings/Profile.mobileNumber", {}, _PROFILE_ERRORS
        )

    async def get_profile_name(self) -> Any:
        return await self._get_setting(
            "/v2/accounts/~current/settings/Profile.name", {}, _PROFILE_ERRORS
        )

    async def get_system_distance_units(self, device_id: str) -> Any:
        require_param(device_id, "deviceId", "getSystemDistanceUnits")
        return await self._get_setting(
            "/v2/devices/{deviceId}/settings/System.distanceUnits",
            {"deviceId": device_id},
            _DEVICE_ERRORS,
        )

    async def get_system_temperature_unit(self, device_id: str) -> Any:
        require_param(device_id, "deviceId", "getSystemTemperatureUnit")
        return await self._get_setting(
            "/v2/devices/{deviceId}/settings/System.temperatureUnit",
            {"deviceId": device_id},
            _DEVICE_ERRORS,
        )

    async def get_system_time_zone(self, device_id: str) -> Any:
        require_param(device_id, "deviceId", "getSystemTimeZone")
        return await self._get_setting(
            "/v2/devices/{deviceId}/settings/System.timeZone",
            {"deviceId": device_id},
            _DEVICE_ERRORS,
        )
