# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""Tests for ServiceClientFactory."""

from __future__ import annotations

import pytest

from skill_sdk.runtime.errors import ServiceClientFactoryError, ValidationError
from skill_sdk.services import (
    DeviceAddressServiceClient,
    ServiceClientFactory,
    SkillMessagingServiceClient,
    UpsServiceClient,
)


class TestServiceClientFactory:
    def test_builds_clients_with_shared_configuration(self, api_configuration) -> None:
        factory = ServiceClientFactory(api_configuration)

        device_client = factory.get_device_address_service_client()
        ups_client = factory.get_ups_service_client()

        assert isinstance(device_client, DeviceAddressServiceClient)
        assert isinstance(ups_client, UpsServiceClient)
        assert device_client.api_configuration is api_configuration

    def test_token_authorized_client(
        self, api_configuration, authentication_configuration
    ) -> None:
        factory = ServiceClientFactory(api_configuration, authentication_configuration)
        assert isinstance(
            factory.get_skill_messaging_service_client(), SkillMessagingServiceClient
        )

    def test_missing_authentication_configuration(self, api_configuration) -> None:
        """Construction failures name the client and chain the cause."""
        factory = ServiceClientFactory(api_configuration)

        with pytest.raises(ServiceClientFactoryError) as exc_info:
            factory.get_proactive_events_service_client()

        assert str(exc_info.value) == (
            "ServiceClientFactory Error while initializing ProactiveEventsServiceClient: "
            "AuthenticationConfiguration cannot be None."
        )
        assert exc_info.value.client_name == "ProactiveEventsServiceClient"
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_missing_api_configuration(self) -> None:
        factory = ServiceClientFactory(None)

        with pytest.raises(ServiceClientFactoryError, match="ApiConfiguration cannot be None."):
            factory.get_monetization_service_client()
