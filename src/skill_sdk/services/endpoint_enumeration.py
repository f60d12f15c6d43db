# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""Endpoint enumeration service client."""

from __future__ import annotations

from typing import Any

from skill_sdk.runtime.base_client import BaseServiceClient
from skill_sdk.services._common import json_headers


class EndpointEnumerationServiceClient(BaseServiceClient):
    async def get_endpoints(self) -> Any:
        """List the endpoints (devices) connected to the customer's account."""
        errors = {
            200: "Successfully retrieved the list of connected endpoints.",
            400: "Bad request. Returned when a required parameter is not present or badly formatted.",
            401: "Unauthenticated. Returned when the request is not authenticated.",
            403: "Forbidden. Returned when the request is authenticated but does not have sufficient permission.",
            500: "Server Error. Returned when the server encountered an error processing the request.",
            503: "Service Unavailable. Returned when the server is not ready to handle the request.",
            0: "Unexpected error",
        }
        response = await self.invoke(
            "GET",
            self.api_configuration.api_endpoint,
            "/v1/endpoints/",
            {},
            [],
            json_headers(self, self.api_configuration.authorization_value),
            None,
            errors,
        )
        return response.body
