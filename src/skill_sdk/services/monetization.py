# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""In-skill purchasing (monetization) service client."""

from __future__ import annotations

from typing import Any

from skill_sdk.runtime.base_client import BaseServiceClient
from skill_sdk.runtime.errors import Header
from skill_sdk.runtime.url import QueryParam
from skill_sdk.services._common import json_headers, require_param

_UNAUTHORIZED = "The authentication token is invalid or doesn't have access to make this request"


def _optional_query(**params: Any) -> list[QueryParam]:
    """Query pairs for the parameters that were given, in keyword order."""
    return [(key, str(value)) for key, value in params.items() if value is not None]


class MonetizationServiceClient(BaseServiceClient):
    """Reads in-skill products, entitlements and purchase transactions."""

    def _headers(self, accept_language: str | None = None) -> list[Header]:
        headers = json_headers(self, self.api_configuration.authorization_value)
        if accept_language is not None:
            headers.insert(1, ("Accept-Language", accept_language))
        return headers

    async def get_in_skill_products(
        self,
        accept_language: str,
        purchasable: str | None = None,
        entitled: str | None = None,
        product_type: str | None = None,
        next_token: str | None = None,
        max_results: int | None = None,
    ) -> Any:
        """
        List the in-skill products available to the current user.

        Args:
            accept_language: Locale of the request, e.g. "en-US".
            purchasable: "PURCHASABLE" or "NOT_PURCHASABLE".
            entitled: "ENTITLED" or "NOT_ENTITLED".
            product_type: "SUBSCRIPTION", "ENTITLEMENT" or "CONSUMABLE".
            next_token: Continuation token from a truncated response.
            max_results: Page size, at most 100.
        """
        require_param(accept_language, "acceptLanguage", "getInSkillProducts")

        errors = {
            200: "Returns a list of In-Skill products on success.",
            400: "Invalid request",
            401: _UNAUTHORIZED,
            500: "Internal Server Error",
        }
        response = await self.invoke(
            "GET",
            self.api_configuration.api_endpoint,
            "/v1/users/~current/skills/~current/inSkillProducts",
            {},
            _optional_query(
                purchasable=purchasable,
                entitled=entitled,
                productType=product_type,
                nextToken=next_token,
                maxResults=max_results,
            ),
            self._headers(accept_language),
            None,
            errors,
        )
        return response.body

    async def get_in_skill_product(self, accept_language: str, product_id: str) -> Any:
        require_param(accept_language, "acceptLanguage", "getInSkillProduct")
        require_param(product_id, "productId", "getInSkillProduct")

        errors = {
            200: "Returns an In-Skill Product on success.",
            400: "Invalid request.",
            401: _UNAUTHORIZED,
            404: "Requested resource not found.",
            500: "Internal Server Error.",
        }
        response = await self.invoke(
            "GET",
            self.api_configuration.api_endpoint,
            "/v1/users/~current/skills/~current/inSkillProducts/{productId}",
            {"productId": product_id},
            [],
            self._headers(accept_language),
            None,
            errors,
        )
        return response.body

    async def get_in_skill_products_transactions(
        self,
        accept_language: str,
        product_id: str | None = None,
        status: str | None = None,
        from_last_modified_time: str | None = None,
        to_last_modified_time: str | None = None,
        next_token: str | None = None,
        max_results: int | None = None,
    ) -> Any:
        """List in-skill purchase transactions from the last 30 days."""
        require_param(accept_language, "acceptLanguage", "getInSkillProductsTransactions")

        errors = {
            200: "Returns a list of transactions of all in skill products purchases in last 30 days on success.",
            400: "Invalid request",
            401: _UNAUTHORIZED,
            403: "Forbidden request",
            404: "Product id doesn't exist / invalid / not found.",
            412: "Non-Child Directed Skill is not supported.",
            429: "The request is throttled.",
            500: "Internal Server Error",
        }
        response = await self.invoke(
            "GET",
            self.api_configuration.api_endpoint,
            "/v1/users/~current/skills/~current/inSkillProductsTransactions",
            {},
            _optional_query(
                productId=product_id,
                status=status,
                fromLastModifiedTime=from_last_modified_time,
                toLastModifiedTime=to_last_modified_time,
                nextToken=next_token,
                maxResults=max_results,
            ),
            self._headers(accept_language),
            None,
            errors,
        )
        return response.body

    async def get_voice_purchase_setting(self) -> Any:
        """Return whether voice purchasing is enabled for the account."""
        errors = {
            200: "Returns a boolean value for voice purchase setting on success.",
            400: "Invalid request.",
            401: _UNAUTHORIZED,
            500: "Internal Server Error.",
        }
        response = await self.invoke(
            "GET",
            self.api_configuration.api_endpoint,
            "/v1/users/~current/skills/~current/settings/voicePurchasing.enabled",
            {},
            [],
            self._headers(),
            None,
            errors,
        )
        return response.body
