# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""Device Address service client."""

from __future__ import annotations

from typing import Any

from skill_sdk.runtime.base_client import BaseServiceClient
from skill_sdk.services._common import json_headers, require_param

_ERRORS = {
    204: "No content could be queried out",
    403: "The authentication token is invalid or doesn't have access to the resource",
    405: "The method is not supported",
    429: "The request is throttled",
    0: "Unexpected error",
}


class DeviceAddressServiceClient(BaseServiceClient):
    """Reads the address a customer configured for a device."""

    async def get_country_and_postal_code(self, device_id: str) -> Any:
        """
        Get the country and postal code of a device.

        Returns:
            Parsed body, e.g. ``{"countryCode": "US", "postalCode": "98109"}``.
        """
        require_param(device_id, "deviceId", "getCountryAndPostalCode")

        errors = {200: "Successfully get the country and postal code of the deviceId", **_ERRORS}
        response = await self.invoke(
            "GET",
            self.api_configuration.api_endpoint,
            "/v1/devices/{deviceId}/settings/address/countryAndPostalCode",
            {"deviceId": device_id},
            [],
            json_headers(self, self.api_configuration.authorization_value),
            None,
            errors,
        )
        return response.body

    async def get_full_address(self, device_id: str) -> Any:
        """Get the full postal address of a device."""
        require_param(device_id, "deviceId", "getFullAddress")

        errors = {200: "Successfully get the address of the device", **_ERRORS}
        response = await self.invoke(
            "GET",
            self.api_configuration.api_endpoint,
            "/v1/devices/{deviceId}/settings/address",
            {"deviceId": device_id},
            [],
            json_headers(self, self.api_configuration.authorization_value),
            None,
            errors,
        )
        return response.body
