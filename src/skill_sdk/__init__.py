# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
skill-sdk: service clients and invocation runtime for voice assistant skills.

Example:
    >>> from skill_sdk import ApiConfiguration, DefaultApiClient
    >>> from skill_sdk.services import DeviceAddressServiceClient
    >>>
    >>> config = ApiConfiguration(
    ...     api_client=DefaultApiClient(),
    ...     api_endpoint="https://api.amazonalexa.com",
    ...     authorization_value=api_access_token,
    ... )
    >>> client = DeviceAddressServiceClient(config)
    >>> address = await client.get_country_and_postal_code(device_id)
"""

from __future__ import annotations

__version__ = "1.0.0"

from skill_sdk._config import SDKConfig
from skill_sdk.runtime import (
    ApiClient,
    ApiClientRequest,
    ApiClientResponse,
    ApiConfiguration,
    ApiResponse,
    AuthenticationConfiguration,
    BaseServiceClient,
    DefaultApiClient,
    LwaServiceClient,
    ResponseParseError,
    ServiceError,
    SkillSdkError,
    TransportError,
    ValidationError,
)
from skill_sdk.services import ServiceClientFactory

__all__ = [
    "__version__",
    "SDKConfig",
    "ApiClient",
    "ApiClientRequest",
    "ApiClientResponse",
    "ApiConfiguration",
    "ApiResponse",
    "AuthenticationConfiguration",
    "BaseServiceClient",
    "DefaultApiClient",
    "LwaServiceClient",
    "ServiceClientFactory",
    "SkillSdkError",
    "TransportError",
    "ResponseParseError",
    "ServiceError",
    "ValidationError",
]
