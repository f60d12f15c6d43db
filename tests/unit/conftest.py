# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for unit tests."""

from __future__ import annotations

import pytest

from skill_sdk.runtime.base_client import ApiConfiguration
from skill_sdk.runtime.lwa import AuthenticationConfiguration
from skill_sdk.runtime.transport import ApiClient, ApiClientRequest, ApiClientResponse


class MockApiClient(ApiClient):
    """Records every request and answers with queued (or a default) response."""

    def __init__(self, response: ApiClientResponse | None = None) -> None:
        self.requests: list[ApiClientRequest] = []
        self.response = response or ApiClientResponse(status_code=200, headers=[], body=None)
        self.queued: list[ApiClientResponse] = []

    @property
    def counter(self) -> int:
        return len(self.requests)

    @property
    def request(self) -> ApiClientRequest:
        return self.requests[-1]

    def respond(self, status_code: int, body: str | None = None, headers=None) -> None:
        self.response = ApiClientResponse(
            status_code=status_code, headers=list(headers or []), body=body
        )

    async def invoke(self, request: ApiClientRequest) -> ApiClientResponse:
        self.requests.append(request)
        if self.queued:
            return self.queued.pop(0)
        return self.response


class MockErrorApiClient(ApiClient):
    """Fails every request the way a broken transport would."""

    def __init__(self, error: Exception | None = None) -> None:
        self.error = error or ValueError("Unable to connect")

    async def invoke(self, request: ApiClientRequest) -> ApiClientResponse:
        raise self.error


@pytest.fixture
def api_client() -> MockApiClient:
    return MockApiClient()


@pytest.fixture
def error_api_client() -> MockErrorApiClient:
    return MockErrorApiClient()


@pytest.fixture
def api_configuration(api_client: MockApiClient) -> ApiConfiguration:
    """ApiConfiguration routed through ``api_client``."""
    return ApiConfiguration(
        api_client=api_client,
        authorization_value="test_token",
        api_endpoint="https://api.test.com",
    )


@pytest.fixture
def authentication_configuration() -> AuthenticationConfiguration:
    return AuthenticationConfiguration(client_id="test_client_id", client_secret="test_client_secret")
