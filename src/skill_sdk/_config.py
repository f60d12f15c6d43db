# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
SDK configuration.

Environment-driven defaults for the transport, the service endpoints and
logging. ``ApiConfiguration`` and ``AuthenticationConfiguration`` are built
from it by the CLI; library callers may construct those directly.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, Field

from skill_sdk.runtime.base_client import ApiConfiguration
from skill_sdk.runtime.lwa import DEFAULT_AUTH_ENDPOINT, AuthenticationConfiguration
from skill_sdk.runtime.transport import ApiClient, DefaultApiClient
from skill_sdk.services._common import DEFAULT_API_ENDPOINT


class SDKConfig(BaseModel):
    """Configuration for the skill SDK."""

    # Endpoints
    api_endpoint: str = Field(
        default=DEFAULT_API_ENDPOINT,
        description="Base URL of the skill service APIs.",
    )
    auth_endpoint: str = Field(
        default=DEFAULT_AUTH_ENDPOINT,
        description="LWA authority the token client posts to.",
    )

    # HTTP client settings
    timeout_seconds: float = Field(
        default=30.0,
        description="Timeout for each service call in seconds.",
    )
    custom_user_agent: str | None = Field(
        default=None,
        description="Suffix appended to the SDK user agent.",
    )

    log_level: str = Field(
        default="WARNING",
        description="Log level applied by configure_logging().",
    )

    @classmethod
    def from_env(cls) -> SDKConfig:
        """Build config from environment variables."""
        return cls(
            api_endpoint=os.getenv("SKILL_SDK_API_ENDPOINT", DEFAULT_API_ENDPOINT),
            auth_endpoint=os.getenv("SKILL_SDK_AUTH_ENDPOINT", DEFAULT_AUTH_ENDPOINT),
            timeout_seconds=float(os.getenv("SKILL_SDK_TIMEOUT", "30")),
            custom_user_agent=os.getenv("SKILL_SDK_USER_AGENT"),
            log_level=os.getenv("SKILL_SDK_LOG_LEVEL", "WARNING").upper(),
        )

    def api_configuration(
        self,
        authorization_value: str | None = None,
        api_client: ApiClient | None = None,
    ) -> ApiConfiguration:
        return ApiConfiguration(
            api_client=api_client or DefaultApiClient(timeout=self.timeout_seconds),
            authorization_value=authorization_value,
            api_endpoint=self.api_endpoint,
        )

    def authentication_configuration(
        self,
        client_id: str,
        client_secret: str,
        refresh_token: str | None = None,
    ) -> AuthenticationConfiguration:
        return AuthenticationConfiguration(
            client_id=client_id,
            client_secret=client_secret,
            refresh_token=refresh_token,
            auth_endpoint=self.auth_endpoint,
        )
