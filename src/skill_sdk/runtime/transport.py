# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
Transport contract between service clients and the network.

Service clients hand an ``ApiClientRequest`` to an ``ApiClient`` and get an
``ApiClientResponse`` back. Implementations resolve for every HTTP outcome,
including non-2xx status codes; only network-level failures raise.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import httpx
import structlog

from skill_sdk.runtime.errors import Header, TransportError

logger = structlog.get_logger(__name__)


@dataclass
class ApiClientMessage:
    """Headers and optional raw body shared by requests and responses."""

    # Ordered (key, value) pairs; a repeated key is a multi-valued header.
    headers: list[Header] = field(default_factory=list)
    body: str | None = None


@dataclass
class ApiClientRequest(ApiClientMessage):
    """Outbound request dispatched by a service client."""

    url: str = ""
    method: str = ""


@dataclass
class ApiClientResponse(ApiClientMessage):
    """Raw response returned by an ``ApiClient`` implementation."""

    status_code: int = 0


class ApiClient(ABC):
    """Abstract base for request dispatchers."""

    @abstractmethod
    async def invoke(self, request: ApiClientRequest) -> ApiClientResponse:
        """
        Dispatch ``request`` to the endpoint it describes.

        Non-2xx outcomes are returned, not raised; translating a status code
        into an error is the caller's job.

        Raises:
            TransportError: On connection, DNS, TLS or timeout failures.
        """
        ...


class DefaultApiClient(ApiClient):
    """
    ``ApiClient`` backed by ``httpx.AsyncClient``.

    Usage::

        api_client = DefaultApiClient(timeout=10.0)
        response = await api_client.invoke(
            ApiClientRequest(url="https://example.com/", method="GET")
        )

    Pass ``http_client`` to reuse a pooled client owned by the caller, or
    ``transport`` to swap the network layer (e.g. ``httpx.MockTransport``).
    """

    def __init__(
        self,
        *,
        timeout: float | None = 30.0,
        http_client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._timeout = timeout
        self._http_client = http_client
        self._transport = transport

    async def invoke(self, request: ApiClientRequest) -> ApiClientResponse:
        logger.debug("transport.request", method=request.method, url=request.url)

        try:
            if self._http_client is not None:
                response = await self._send(self._http_client, request)
            else:
                async with httpx.AsyncClient(
                    timeout=self._timeout, transport=self._transport
                ) as client:
                    response = await self._send(client, request)
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeEncodeError) as e:
            logger.debug(
                "transport.failed",
                url=request.url,
                error_type=type(e).__name__,
                error=str(e),
            )
            raise TransportError(type(self).__name__, str(e)) from e

        return ApiClientResponse(
            status_code=response.status_code,
            headers=_to_header_list(response.headers),
            body=response.text,
        )

    @staticmethod
    async def _send(client: httpx.AsyncClient, request: ApiClientRequest) -> httpx.Response:
        return await client.request(
            request.method,
            request.url,
            headers=_to_httpx_headers(request.headers),
            content=request.body.encode("utf-8") if request.body else None,
        )


def _to_httpx_headers(headers: list[Header]) -> httpx.Headers:
    """Convert ordered header pairs to ``httpx.Headers``, keeping repeated keys."""
    return httpx.Headers([(key, value) for key, value in headers or []])


def _to_header_list(headers: httpx.Headers) -> list[Header]:
    """Flatten ``httpx.Headers`` into ordered pairs, one entry per value."""
    return list(headers.multi_items())
