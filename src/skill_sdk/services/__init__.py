# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
Service clients.

Each client wraps one service API; every operation goes through
``BaseServiceClient.invoke`` and returns the parsed response body.
"""

from skill_sdk.services.device_address import DeviceAddressServiceClient
from skill_sdk.services.directive import DirectiveServiceClient
from skill_sdk.services.endpoint_enumeration import EndpointEnumerationServiceClient
from skill_sdk.services.factory import ServiceClientFactory
from skill_sdk.services.list_management import ListManagementServiceClient
from skill_sdk.services.monetization import MonetizationServiceClient
from skill_sdk.services.proactive_events import ProactiveEventsServiceClient, SkillStage
from skill_sdk.services.reminder_management import ReminderManagementServiceClient
from skill_sdk.services.skill_messaging import SkillMessagingServiceClient
from skill_sdk.services.ups import UpsServiceClient

__all__ = [
    "ServiceClientFactory",
    "DeviceAddressServiceClient",
    "DirectiveServiceClient",
    "EndpointEnumerationServiceClient",
    "ListManagementServiceClient",
    "MonetizationServiceClient",
    "ProactiveEventsServiceClient",
    "ReminderManagementServiceClient",
    "SkillMessagingServiceClient",
    "SkillStage",
    "UpsServiceClient",
]
