# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
Service invocation runtime.

Shared by every generated service client: the ``ApiClient`` transport
contract, URL building, the ``BaseServiceClient.invoke`` dispatch path and
the LWA access token client.
"""

from skill_sdk.runtime.base_client import ApiConfiguration, ApiResponse, BaseServiceClient
from skill_sdk.runtime.errors import (
    ResponseParseError,
    ServiceClientFactoryError,
    ServiceError,
    SkillSdkError,
    TransportError,
    ValidationError,
)
from skill_sdk.runtime.lwa import (
    AccessToken,
    AccessTokenRequest,
    AccessTokenResponse,
    AuthenticationConfiguration,
    GrantType,
    LwaServiceClient,
)
from skill_sdk.runtime.transport import (
    ApiClient,
    ApiClientMessage,
    ApiClientRequest,
    ApiClientResponse,
    DefaultApiClient,
)
from skill_sdk.runtime.url import build_url
from skill_sdk.runtime.user_agent import create_user_agent

__all__ = [
    # Transport
    "ApiClient",
    "ApiClientMessage",
    "ApiClientRequest",
    "ApiClientResponse",
    "DefaultApiClient",
    # Invocation
    "ApiConfiguration",
    "ApiResponse",
    "BaseServiceClient",
    "build_url",
    "create_user_agent",
    # LWA
    "AccessToken",
    "AccessTokenRequest",
    "AccessTokenResponse",
    "AuthenticationConfiguration",
    "GrantType",
    "LwaServiceClient",
    # Errors
    "SkillSdkError",
    "TransportError",
    "ResponseParseError",
    "ServiceError",
    "ValidationError",
    "ServiceClientFactoryError",
]
