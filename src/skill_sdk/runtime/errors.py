# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
Error taxonomy for the service runtime.

Every failure raised by the runtime is a ``SkillSdkError`` subclass so
callers can tell programming errors (``ValidationError``) apart from
network failures (``TransportError``), malformed payloads
(``ResponseParseError``) and non-2xx outcomes (``ServiceError``).
"""

from __future__ import annotations

from typing import Any

Header = tuple[str, str]


class SkillSdkError(Exception):
    """Base class for all skill-sdk errors."""

    @property
    def message(self) -> str:
        return str(self.args[0]) if self.args else ""


class TransportError(SkillSdkError):
    """Network-level failure raised by an ``ApiClient`` implementation."""

    def __init__(self, scope: str, message: str) -> None:
        super().__init__(message)
        self.scope = scope

    @property
    def name(self) -> str:
        return f"SkillSdkRuntime.{self.scope} Error"


class ResponseParseError(SkillSdkError, ValueError):
    """Response body was present but is not valid JSON."""

    def __init__(self, message: str, body: str | None = None) -> None:
        super().__init__(message)
        self.body = body


class ServiceError(SkillSdkError):
    """
    A response was received with a status code outside [200, 300).

    Attributes:
        status_code: HTTP status code returned by the service.
        headers: Response headers as ordered (key, value) pairs.
        response: Parsed response body, or None when the body was empty.
    """

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        headers: list[Header] | None = None,
        response: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.headers = headers or []
        self.response = response

    def __repr__(self) -> str:
        return f"ServiceError(status_code={self.status_code}, message={self.message!r})"


class ValidationError(SkillSdkError, ValueError):
    """Raised before any network I/O when a required argument is missing or conflicting."""


class ServiceClientFactoryError(SkillSdkError):
    """A service client could not be constructed by ``ServiceClientFactory``."""

    def __init__(self, client_name: str, message: str) -> None:
        super().__init__(f"ServiceClientFactory Error while initializing {client_name}: {message}")
        self.client_name = client_name
