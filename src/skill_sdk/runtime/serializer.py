# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""JSON serialization of request bodies and parsing of response bodies."""

from __future__ import annotations

import json
from datetime import date, datetime
from enum import Enum
from typing import Any

from pydantic import BaseModel

from skill_sdk.runtime.errors import ResponseParseError


def _default(obj: Any) -> Any:
    if isinstance(obj, BaseModel):
        return obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(obj, (datetime, date)):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def serialize(body: Any) -> str:
    """Serialize ``body`` to compact JSON text."""
    return json.dumps(body, default=_default, separators=(",", ":"), ensure_ascii=False)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


def deserialize(payload: str | None) -> Any:
    """
    Parse a response body.

    An empty or missing payload parses to None.

    Raises:
        ResponseParseError: The payload is not valid JSON, including
            the NaN and Infinity extensions.
    """
    if not payload:
        return None
    try:
        return json.loads(payload, parse_constant=_reject_constant)
    except ValueError as e:
        raise ResponseParseError(
            f"Failed trying to parse the response body: {payload}", body=payload
        ) from e
