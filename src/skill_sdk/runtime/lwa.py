# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
Login With Amazon (LWA) access token client.

Exchanges client credentials (scope grant) or a refresh token for a bearer
access token and caches it per scope until it is within
``EXPIRY_OFFSET_MILLIS`` of expiry.

Example:
    >>> lwa = LwaServiceClient(
    ...     api_configuration=ApiConfiguration(api_client=DefaultApiClient()),
    ...     authentication_configuration=AuthenticationConfiguration(
    ...         client_id="amzn1.application-oa2-client.xyz",
    ...         client_secret="secret",
    ...     ),
    ... )
    >>> token = await lwa.get_access_token_for_scope("alexa:skill_messaging")
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import StrEnum

import pydantic
import structlog
from pydantic import BaseModel, ConfigDict, Field

from skill_sdk.runtime.base_client import ApiConfiguration, BaseServiceClient
from skill_sdk.runtime.errors import ResponseParseError, ValidationError

logger = structlog.get_logger(__name__)

DEFAULT_AUTH_ENDPOINT = "https://api.amazon.com"
AUTH_TOKEN_PATH = "/auth/O2/token"


class GrantType(StrEnum):
    """Token exchange mode."""

    CLIENT_CREDENTIALS = "client_credentials"
    REFRESH_TOKEN = "refresh_token"


@dataclass
class AccessToken:
    """Cached access token; ``expiry`` is an absolute timestamp in milliseconds."""

    token: str
    expiry: float


@dataclass
class AccessTokenRequest:
    client_id: str | None
    client_secret: str | None
    scope: str | None = None
    refresh_token: str | None = None


class AccessTokenResponse(BaseModel):
    """Token endpoint response body."""

    access_token: str
    expires_in: int
    scope: str | None = None
    token_type: str | None = None


class AuthenticationConfiguration(BaseModel):
    """Client credentials used to request access tokens."""

    model_config = ConfigDict(frozen=True)

    client_id: str | None = Field(default=None, description="LWA client ID.")
    client_secret: str | None = Field(default=None, description="LWA client secret.")
    refresh_token: str | None = Field(
        default=None,
        description="Refresh token; mutually exclusive with an explicit scope.",
    )
    auth_endpoint: str | None = Field(
        default=None,
        description=f"Authorization authority, defaults to {DEFAULT_AUTH_ENDPOINT}.",
    )


def _now_millis() -> float:
    return time.time() * 1000


class LwaServiceClient(BaseServiceClient):
    """
    Retrieves and caches LWA access tokens.

    The cache is per instance and keyed by scope (or a fixed key in refresh
    token mode). Concurrent misses on the same key may each request a token;
    the last response to arrive wins the cache slot.
    """

    EXPIRY_OFFSET_MILLIS = 60_000
    REFRESH_ACCESS_TOKEN = "refresh_access_token"

    def __init__(
        self,
        api_configuration: ApiConfiguration,
        authentication_configuration: AuthenticationConfiguration,
        grant_type: GrantType | str | None = None,
        *,
        custom_user_agent: str | None = None,
    ) -> None:
        super().__init__(api_configuration, custom_user_agent=custom_user_agent)
        if authentication_configuration is None:
            raise ValidationError("AuthenticationConfiguration cannot be None.")
        try:
            self._grant_type = GrantType(grant_type or GrantType.CLIENT_CREDENTIALS)
        except ValueError as e:
            raise ValidationError(f"Unsupported grant type: {grant_type}") from e
        self._authentication_configuration = authentication_configuration
        self._token_store: dict[str, AccessToken] = {}

    @property
    def grant_type(self) -> GrantType:
        return self._grant_type

    async def get_access_token_for_scope(self, scope: str) -> str:
        """Return an access token for ``scope``, requesting one if needed."""
        if scope is None:
            raise ValidationError("Scope cannot be None.")
        return await self.get_access_token(scope)

    async def get_access_token(self, scope: str | None = None) -> str:
        """
        Return a cached access token or request a fresh one.

        Args:
            scope: Permission scope for the client credentials grant. Leave
                unset when the configuration carries a refresh token.

        Raises:
            ValidationError: Both or neither of scope and refresh token are
                available.
            ServiceError: The token endpoint rejected the request.
        """
        cache_key = scope or self.REFRESH_ACCESS_TOKEN
        cached = self._token_store.get(cache_key)

        if cached is not None and cached.expiry > _now_millis() + self.EXPIRY_OFFSET_MILLIS:
            logger.debug("lwa.token_cache_hit", cache_key=cache_key)
            return cached.token

        refresh_token = self._authentication_configuration.refresh_token
        request = AccessTokenRequest(
            client_id=self._authentication_configuration.client_id,
            client_secret=self._authentication_configuration.client_secret,
        )
        if scope and refresh_token:
            raise ValidationError("Cannot support both refreshToken and scope.")
        elif not scope and refresh_token is None:
            raise ValidationError("Either refreshToken or scope must be specified.")
        elif not scope:
            request.refresh_token = refresh_token
        else:
            request.scope = scope

        response = await self.generate_access_token(request)

        self._token_store[cache_key] = AccessToken(
            token=response.access_token,
            expiry=_now_millis() + response.expires_in * 1000,
        )
        logger.info("lwa.token_acquired", cache_key=cache_key, expires_in=response.expires_in)
        return response.access_token

    async def generate_access_token(self, request: AccessTokenRequest) -> AccessTokenResponse:
        """Call the token endpoint once, without consulting the cache."""
        if request is None:
            raise ValidationError(
                "Required parameter accessTokenRequest was null or undefined "
                "when calling generateAccessToken."
            )
        if not request.client_id or not request.client_secret:
            raise ValidationError(
                "Required parameter accessTokenRequest didn't specify clientId or clientSecret"
            )

        if self._grant_type is GrantType.REFRESH_TOKEN:
            if not request.refresh_token:
                raise ValidationError("The refresh_token grant requires a refresh token.")
            param_info = f"&refresh_token={request.refresh_token}"
        else:
            if not request.scope:
                raise ValidationError("The client_credentials grant requires a scope.")
            param_info = f"&scope={request.scope}"

        body = (
            f"grant_type={self._grant_type.value}"
            f"&client_secret={request.client_secret}"
            f"&client_id={request.client_id}" + param_info
        )

        errors = {
            200: "Token request sent.",
            400: "Bad Request",
            401: "Authentication Failed",
            500: "Internal Server Error",
        }

        api_response = await self.invoke(
            "POST",
            self._authentication_configuration.auth_endpoint or DEFAULT_AUTH_ENDPOINT,
            AUTH_TOKEN_PATH,
            {},
            [],
            [("Content-type", "application/x-www-form-urlencoded")],
            body,
            errors,
            non_json_body=True,
        )

        try:
            return AccessTokenResponse.model_validate(api_response.body or {})
        except pydantic.ValidationError as e:
            raise ResponseParseError(
                "Token response is missing access_token or expires_in"
            ) from e
