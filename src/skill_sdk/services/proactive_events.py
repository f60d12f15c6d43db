# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
Proactive events service client.

Authorizes itself with an LWA token for the ``alexa::proactive_events``
scope instead of the configured ``authorization_value``.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from skill_sdk.runtime.base_client import ApiConfiguration, BaseServiceClient
from skill_sdk.runtime.lwa import AuthenticationConfiguration, LwaServiceClient
from skill_sdk.services._common import json_headers, require_param

PROACTIVE_EVENTS_SCOPE = "alexa::proactive_events"


class SkillStage(StrEnum):
    DEVELOPMENT = "DEVELOPMENT"
    LIVE = "LIVE"


class ProactiveEventsServiceClient(BaseServiceClient):
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

    async def create_proactive_event(
        self,
        create_proactive_event_request: Any,
        stage: SkillStage | str,
    ) -> None:
        """
        Publish a proactive event to customers subscribed to the skill.

        ``SkillStage.DEVELOPMENT`` targets the development stage endpoint.
        """
        require_param(
            create_proactive_event_request,
            "createProactiveEventRequest",
            "createProactiveEvent",
        )
        require_param(stage, "stage", "createProactiveEvent")

        access_token = await self._lwa_service_client.get_access_token_for_scope(
            PROACTIVE_EVENTS_SCOPE
        )

        path = "/v1/proactiveEvents"
        if stage == SkillStage.DEVELOPMENT:
            path += "/stages/development"

        errors = {
            202: "Request accepted",
            400: "A required parameter is not present or is incorrectly formatted, or the "
            "requested creation of a resource has already been completed by a previous request. ",
            403: "The authentication token is invalid or doesn't have authentication to access the resource",
            409: "A skill attempts to create duplicate events using the same referenceId for the same customer.",
            429: "The client has made more calls than the allowed limit.",
            500: "The ProactiveEvents service encounters an internal error for a valid request.",
            0: "Unexpected error",
        }
        await self.invoke(
            "POST",
            self.api_configuration.api_endpoint,
            path,
            {},
            [],
            json_headers(self, access_token),
            create_proactive_event_request,
            errors,
        )
