# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""Tests for LwaServiceClient."""

from __future__ import annotations

import json
from unittest.mock import patch

import pytest

from skill_sdk.runtime.errors import ResponseParseError, ServiceError, ValidationError
from skill_sdk.runtime.lwa import (
    AccessTokenRequest,
    AuthenticationConfiguration,
    GrantType,
    LwaServiceClient,
)

NOW = 1_700_000_000_000.0
TOKEN_URL = "https://api.amazon.com/auth/O2/token"


def _token_body(token: str = "test_token", expires_in: int = 3600) -> str:
    return json.dumps({"access_token": token, "expires_in": expires_in, "token_type": "bearer"})


@pytest.fixture
def lwa(api_configuration, authentication_configuration) -> LwaServiceClient:
    return LwaServiceClient(api_configuration, authentication_configuration)


class TestScopeGrant:
    @pytest.mark.asyncio
    async def test_token_request(self, lwa, api_client) -> None:
        """Client credentials grant posts a form body to the token endpoint."""
        api_client.respond(200, _token_body())

        token = await lwa.get_access_token_for_scope("test_scope")

        request = api_client.request
        assert token == "test_token"
        assert request.method == "POST"
        assert request.url == TOKEN_URL
        assert request.headers == [("Content-type", "application/x-www-form-urlencoded")]
        assert request.body == (
            "grant_type=client_credentials&client_secret=test_client_secret"
            "&client_id=test_client_id&scope=test_scope"
        )

    @pytest.mark.asyncio
    async def test_token_cached(self, lwa, api_client) -> None:
        """A second call for the same scope is served from cache."""
        api_client.respond(200, _token_body())

        with patch("skill_sdk.runtime.lwa._now_millis", return_value=NOW):
            first = await lwa.get_access_token_for_scope("test_scope")
            second = await lwa.get_access_token_for_scope("test_scope")

        assert first == second == "test_token"
        assert api_client.counter == 1

    @pytest.mark.asyncio
    async def test_cache_is_per_scope(self, lwa, api_client) -> None:
        api_client.respond(200, _token_body())

        await lwa.get_access_token_for_scope("scope_a")
        await lwa.get_access_token_for_scope("scope_b")

        assert api_client.counter == 2

    @pytest.mark.asyncio
    async def test_token_refetched_within_expiry_offset(self, lwa, api_client) -> None:
        """A cached token within 60 seconds of expiry is replaced."""
        api_client.respond(200, _token_body("first", expires_in=3600))

        with patch("skill_sdk.runtime.lwa._now_millis", return_value=NOW):
            await lwa.get_access_token_for_scope("test_scope")

        api_client.respond(200, _token_body("second"))
        # 3600s lifetime, 59s left
        with patch("skill_sdk.runtime.lwa._now_millis", return_value=NOW + 3_541_000):
            token = await lwa.get_access_token_for_scope("test_scope")

        assert token == "second"
        assert api_client.counter == 2

    @pytest.mark.asyncio
    async def test_token_reused_outside_expiry_offset(self, lwa, api_client) -> None:
        api_client.respond(200, _token_body("first", expires_in=3600))

        with patch("skill_sdk.runtime.lwa._now_millis", return_value=NOW):
            await lwa.get_access_token_for_scope("test_scope")
        with patch("skill_sdk.runtime.lwa._now_millis", return_value=NOW + 3_539_000):
            token = await lwa.get_access_token_for_scope("test_scope")

        assert token == "first"
        assert api_client.counter == 1

    @pytest.mark.asyncio
    async def test_custom_auth_endpoint(self, api_configuration, api_client) -> None:
        lwa = LwaServiceClient(
            api_configuration,
            AuthenticationConfiguration(
                client_id="id", client_secret="secret", auth_endpoint="https://auth.test.com/"
            ),
        )
        api_client.respond(200, _token_body())

        await lwa.get_access_token_for_scope("test_scope")

        assert api_client.request.url == "https://auth.test.com/auth/O2/token"


class TestRefreshGrant:
    @pytest.mark.asyncio
    async def test_refresh_token_request(self, api_configuration, api_client) -> None:
        """Refresh token grant sends the refresh token instead of a scope."""
        lwa = LwaServiceClient(
            api_configuration,
            AuthenticationConfiguration(
                client_id="test_client_id",
                client_secret="test_client_secret",
                refresh_token="test_refresh_token",
            ),
            GrantType.REFRESH_TOKEN,
        )
        api_client.respond(200, _token_body())

        token = await lwa.get_access_token()
        await lwa.get_access_token()

        assert token == "test_token"
        assert api_client.counter == 1
        assert api_client.request.body == (
            "grant_type=refresh_token&client_secret=test_client_secret"
            "&client_id=test_client_id&refresh_token=test_refresh_token"
        )

    @pytest.mark.asyncio
    async def test_refresh_token_and_scope_conflict(self, api_configuration, api_client) -> None:
        lwa = LwaServiceClient(
            api_configuration,
            AuthenticationConfiguration(client_id="id", client_secret="s", refresh_token="r"),
            "refresh_token",
        )
        with pytest.raises(ValidationError, match="Cannot support both refreshToken and scope."):
            await lwa.get_access_token("test_scope")
        assert api_client.counter == 0

    @pytest.mark.asyncio
    async def test_neither_refresh_token_nor_scope(self, lwa, api_client) -> None:
        with pytest.raises(ValidationError, match="Either refreshToken or scope must be specified."):
            await lwa.get_access_token()
        assert api_client.counter == 0

    @pytest.mark.asyncio
    async def test_refresh_grant_requires_refresh_token(self, api_configuration) -> None:
        lwa = LwaServiceClient(
            api_configuration,
            AuthenticationConfiguration(client_id="id", client_secret="s"),
            GrantType.REFRESH_TOKEN,
        )
        with pytest.raises(ValidationError, match="requires a refresh token"):
            await lwa.generate_access_token(AccessTokenRequest("id", "s", scope="x"))


class TestValidation:
    @pytest.mark.asyncio
    async def test_none_scope(self, lwa) -> None:
        with pytest.raises(ValidationError, match="Scope cannot be None."):
            await lwa.get_access_token_for_scope(None)

    @pytest.mark.asyncio
    async def test_missing_client_secret(self, api_configuration, api_client) -> None:
        """Credentials are checked before any network I/O."""
        lwa = LwaServiceClient(api_configuration, AuthenticationConfiguration(client_id="id"))
        with pytest.raises(ValidationError, match="didn't specify clientId or clientSecret"):
            await lwa.get_access_token_for_scope("test_scope")
        assert api_client.counter == 0

    def test_none_authentication_configuration(self, api_configuration) -> None:
        with pytest.raises(ValidationError, match="AuthenticationConfiguration cannot be None."):
            LwaServiceClient(api_configuration, None)

    def test_unsupported_grant_type(self, api_configuration, authentication_configuration) -> None:
        with pytest.raises(ValidationError, match="Unsupported grant type"):
            LwaServiceClient(api_configuration, authentication_configuration, "password")

    def test_default_grant_type(self, lwa) -> None:
        assert lwa.grant_type is GrantType.CLIENT_CREDENTIALS


class TestTokenErrors:
    @pytest.mark.asyncio
    async def test_unauthorized(self, lwa, api_client) -> None:
        """Token endpoint failures surface as ServiceError and nothing is cached."""
        api_client.respond(401, '{"error":"invalid_client"}')

        with pytest.raises(ServiceError) as exc_info:
            await lwa.get_access_token_for_scope("test_scope")

        assert exc_info.value.message == "Authentication Failed"
        assert exc_info.value.status_code == 401
        assert exc_info.value.response == {"error": "invalid_client"}

        api_client.respond(200, _token_body())
        assert await lwa.get_access_token_for_scope("test_scope") == "test_token"
        assert api_client.counter == 2

    @pytest.mark.asyncio
    async def test_unmapped_status(self, lwa, api_client) -> None:
        api_client.respond(503)
        with pytest.raises(ServiceError, match="Unknown error"):
            await lwa.get_access_token_for_scope("test_scope")

    @pytest.mark.asyncio
    async def test_incomplete_token_response(self, lwa, api_client) -> None:
        api_client.respond(200, '{"token_type":"bearer"}')
        with pytest.raises(ResponseParseError, match="missing access_token or expires_in"):
            await lwa.get_access_token_for_scope("test_scope")
