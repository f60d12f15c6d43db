# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""Skill messaging service client (out-of-session messages to a skill)."""

from __future__ import annotations

from typing import Any

from skill_sdk.runtime.base_client import ApiConfiguration, BaseServiceClient
from skill_sdk.runtime.lwa import AuthenticationConfiguration, LwaServiceClient
from skill_sdk.services._common import json_headers, require_param

SKILL_MESSAGING_SCOPE = "alexa:skill_messaging"


class SkillMessagingServiceClient(BaseServiceClient):
    def __init__(
        self,
        api_configuration: ApiConfiguration,
        authentication_configuration: AuthenticationConfiguration,
        *,
        custom_user_agent: str | None = None,
    ) -> None:
        super().__init__(api_configuration, custom_user_agent=custom_user_agent)
        self._lwa_service_client = LwaServiceClient(
            api_configuration=api_configuration,
            authentication_configuration=authentication_configuration,
            custom_user_agent=custom_user_agent,
        )

    async def send_skill_message(self, user_id: str, send_skill_messaging_request: Any) -> None:
        """
        Send a message to the skill on behalf of ``user_id``.

        Args:
            user_id: User the message is for.
            send_skill_messaging_request: Body with ``data`` and optional
                ``expiresAfterSeconds``.
        """
        require_param(user_id, "userId", "sendSkillMessage")
        require_param(send_skill_messaging_request, "sendSkillMessagingRequest", "sendSkillMessage")

        access_token = await self._lwa_service_client.get_access_token_for_scope(
            SKILL_MESSAGING_SCOPE
        )

        errors = {
            202: "Message has been successfully accepted, and will be sent to the skill ",
            400: "Data is missing or not valid ",
            403: "The skill messaging authentication token is expired or not valid ",
            404: "The passed userId does not exist ",
            429: "The requester has exceeded their maximum allowable rate of messages ",
            500: "The SkillMessaging service encountered an internal error for a valid request. ",
            0: "Unexpected error",
        }
        await self.invoke(
            "POST",
            self.api_configuration.api_endpoint,
            "/v1/skillmessages/users/{userId}",
            {"userId": user_id},
            [],
            json_headers(self, access_token),
            send_skill_messaging_request,
            errors,
        )
