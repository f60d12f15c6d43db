# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""Progressive response (directive) service client."""

from __future__ import annotations

from typing import Any

from skill_sdk.runtime.base_client import BaseServiceClient
from skill_sdk.services._common import json_headers, require_param


class DirectiveServiceClient(BaseServiceClient):
    async def enqueue(self, send_directive_request: Any) -> None:
        """
        Send a directive (e.g. ``VoicePlayer.Speak``) while the skill is
        still processing a request.

        Args:
            send_directive_request: JSON-serializable body or pydantic model
                with ``header.requestId`` and ``directive``.
        """
        require_param(send_directive_request, "sendDirectiveRequest", "enqueue")

        errors = {
            204: "Directive sent successfully.",
            400: "Directive not valid.",
            401: "Not Authorized.",
            403: "The skill is not allowed to send directives at the moment.",
            0: "Unexpected error.",
        }
        await self.invoke(
            "POST",
            self.api_configuration.api_endpoint,
            "/v1/directives",
            {},
            [],
            json_headers(self, self.api_configuration.authorization_value),
            send_directive_request,
            errors,
        )
