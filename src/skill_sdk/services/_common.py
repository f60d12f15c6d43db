# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""Helpers shared by the generated service clients."""

from __future__ import annotations

from typing import Any

from skill_sdk.runtime.base_client import BaseServiceClient
from skill_sdk.runtime.errors import Header, ValidationError

DEFAULT_API_ENDPOINT = "https://api.amazonalexa.com"


def require_param(value: Any, name: str, operation_id: str) -> None:
    """Fail fast when a required operation parameter is missing."""
    if value is None:
        raise ValidationError(
            f"Required parameter {name} was null or undefined when calling {operation_id}."
        )


def json_headers(client: BaseServiceClient, bearer_token: str | None) -> list[Header]:
    """Standard headers for a JSON operation authorized with ``bearer_token``."""
    return [
        ("Content-type", "application/json"),
        ("User-Agent", client.user_agent),
        ("Authorization", f"Bearer {bearer_token}"),
    ]
