# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
ServiceClientFactory: one place to build every service client from a shared
``ApiConfiguration``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import structlog

from skill_sdk.runtime.base_client import ApiConfiguration, BaseServiceClient
from skill_sdk.runtime.errors import ServiceClientFactoryError
from skill_sdk.runtime.lwa import AuthenticationConfiguration
from skill_sdk.services.device_address import DeviceAddressServiceClient
from skill_sdk.services.directive import DirectiveServiceClient
from skill_sdk.services.endpoint_enumeration import EndpointEnumerationServiceClient
from skill_sdk.services.list_management import ListManagementServiceClient
from skill_sdk.services.monetization import MonetizationServiceClient
from skill_sdk.services.proactive_events import ProactiveEventsServiceClient
from skill_sdk.services.reminder_management import ReminderManagementServiceClient
from skill_sdk.services.skill_messaging import SkillMessagingServiceClient
from skill_sdk.services.ups import UpsServiceClient

logger = structlog.get_logger(__name__)

ClientT = TypeVar("ClientT", bound=BaseServiceClient)


class ServiceClientFactory:
    """
    Builds service clients that share one ``ApiConfiguration``.

    Construction failures are reported as ``ServiceClientFactoryError`` naming
    the client that could not be built; the underlying exception is chained.
    """

    def __init__(
        self,
        api_configuration: ApiConfiguration,
        authentication_configuration: AuthenticationConfiguration | None = None,
    ) -> None:
        self.api_configuration = api_configuration
        self.authentication_configuration = authentication_configuration

    def _build(self, client_name: str, builder: Callable[[], ClientT]) -> ClientT:
        try:
            return builder()
        except Exception as e:
            logger.debug("factory.client_init_failed", client=client_name, error=str(e))
            raise ServiceClientFactoryError(client_name, str(e)) from e

    def get_device_address_service_client(self) -> DeviceAddressServiceClient:
        return self._build(
            "DeviceAddressServiceClient",
            lambda: DeviceAddressServiceClient(self.api_configuration),
        )

    def get_directive_service_client(self) -> DirectiveServiceClient:
        return self._build(
            "DirectiveServiceClient",
            lambda: DirectiveServiceClient(self.api_configuration),
        )

    def get_endpoint_enumeration_service_client(self) -> EndpointEnumerationServiceClient:
        return self._build(
            "EndpointEnumerationServiceClient",
            lambda: EndpointEnumerationServiceClient(self.api_configuration),
        )

    def get_list_management_service_client(self) -> ListManagementServiceClient:
        return self._build(
            "ListManagementServiceClient",
            lambda: ListManagementServiceClient(self.api_configuration),
        )

    def get_monetization_service_client(self) -> MonetizationServiceClient:
        return self._build(
            "MonetizationServiceClient",
            lambda: MonetizationServiceClient(self.api_configuration),
        )

    def get_reminder_management_service_client(self) -> ReminderManagementServiceClient:
        return self._build(
            "ReminderManagementServiceClient",
            lambda: ReminderManagementServiceClient(self.api_configuration),
        )

    def get_ups_service_client(self) -> UpsServiceClient:
        return self._build(
            "UpsServiceClient",
            lambda: UpsServiceClient(self.api_configuration),
        )

    def get_proactive_events_service_client(self) -> ProactiveEventsServiceClient:
        """Requires ``authentication_configuration``."""
        return self._build(
            "ProactiveEventsServiceClient",
            lambda: ProactiveEventsServiceClient(
                self.api_configuration, self.authentication_configuration
            ),
        )

    def get_skill_messaging_service_client(self) -> SkillMessagingServiceClient:
        """Requires ``authentication_configuration``."""
        return self._build(
            "SkillMessagingServiceClient",
            lambda: SkillMessagingServiceClient(
                self.api_configuration, self.authentication_configuration
            ),
        )
