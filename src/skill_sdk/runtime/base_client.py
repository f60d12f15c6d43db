# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
Base class for generated service clients.

``BaseServiceClient.invoke`` is the single code path every generated
operation goes through: build the URL, serialize the body, dispatch through
the configured ``ApiClient``, parse the response and classify it by status
code. One request per call, no retries, no caching.
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import structlog
from pydantic import BaseModel, ConfigDict, Field

from skill_sdk.runtime import serializer
from skill_sdk.runtime.errors import Header, ServiceError, ValidationError
from skill_sdk.runtime.transport import ApiClient, ApiClientRequest, ApiClientResponse
from skill_sdk.runtime.url import QueryParam, build_url
from skill_sdk.runtime.user_agent import create_user_agent

logger = structlog.get_logger(__name__)

UNKNOWN_ERROR_MESSAGE = "Unknown error"
JSON_MEDIA_TYPE = "application/json"

RequestInterceptor = Callable[[ApiClientRequest], Awaitable[None] | None]
ResponseInterceptor = Callable[[ApiClientResponse], Awaitable[None] | None]


class ApiConfiguration(BaseModel):
    """Dependencies shared by every call of a service client instance."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    api_client: ApiClient = Field(description="ApiClient used to dispatch requests.")
    authorization_value: str | None = Field(
        default=None,
        description="Bearer credential attached by generated operations.",
    )
    api_endpoint: str | None = Field(
        default=None,
        description="Base URL the service client calls.",
    )


@dataclass
class ApiResponse:
    """Response with its body parsed from JSON."""

    headers: list[Header] = field(default_factory=list)
    body: Any = None
    status_code: int = 0


def is_code_successful(status_code: int) -> bool:
    return 200 <= status_code < 300


def _sends_non_json_content(headers: Sequence[Header]) -> bool:
    """True when a Content-Type header declares a media type other than JSON."""
    for key, value in headers:
        if key.lower() == "content-type":
            media_type = value.split(";", 1)[0].strip().lower()
            return media_type != JSON_MEDIA_TYPE
    return False


async def _run_interceptors(interceptors: Sequence[Callable[[Any], Any]], message: Any) -> None:
    for interceptor in interceptors:
        result = interceptor(message)
        if inspect.isawaitable(result):
            await result


class BaseServiceClient:
    """
    Base class for service clients.

    Subclasses implement one method per service operation and delegate to
    ``invoke`` with the operation's method, path template, parameters and
    error table.
    """

    def __init__(
        self,
        api_configuration: ApiConfiguration,
        *,
        custom_user_agent: str | None = None,
    ) -> None:
        if api_configuration is None:
            raise ValidationError("ApiConfiguration cannot be None.")
        self._api_configuration = api_configuration
        self._custom_user_agent = custom_user_agent
        self._request_interceptors: list[RequestInterceptor] = []
        self._response_interceptors: list[ResponseInterceptor] = []

    @property
    def api_configuration(self) -> ApiConfiguration:
        return self._api_configuration

    @property
    def user_agent(self) -> str:
        from skill_sdk import __version__

        return create_user_agent(__version__, self._custom_user_agent)

    def with_request_interceptors(self, *interceptors: RequestInterceptor) -> BaseServiceClient:
        """Register callables run on every outbound request, just before dispatch."""
        self._request_interceptors.extend(interceptors)
        return self

    def with_response_interceptors(self, *interceptors: ResponseInterceptor) -> BaseServiceClient:
        """Register callables run on every raw response, before it is classified."""
        self._response_interceptors.extend(interceptors)
        return self

    async def invoke(
        self,
        method: str,
        endpoint: str | None,
        path: str,
        path_params: Mapping[str, str] | None,
        query_params: Sequence[QueryParam] | None,
        header_params: Sequence[Header] | None,
        body: Any,
        errors: Mapping[int, str] | None,
        non_json_body: bool = False,
    ) -> ApiResponse:
        """
        Call a service operation and classify the outcome.

        Args:
            method: HTTP method, such as "POST", "GET" or "DELETE".
            endpoint: Base API url.
            path: Path template with ``{name}`` placeholders.
            path_params: Placeholder name to raw value.
            query_params: Ordered (key, value) query pairs.
            header_params: Ordered (key, value) header pairs.
            body: Request body, or None for no body.
            errors: Status code to message table consulted on failure.
            non_json_body: Send ``body`` verbatim instead of as JSON.

        Returns:
            ApiResponse for status codes in [200, 300).

        Raises:
            ServiceError: The service answered with any other status code.
            ResponseParseError: The response body is not valid JSON.
            Exception: Whatever the ApiClient raised, with its message
                prefixed by "Call to service failed: ".
        """
        headers = list(header_params or [])
        request = ApiClientRequest(
            url=build_url(endpoint, path, query_params, path_params),
            method=method,
            headers=headers,
        )
        if body is not None:
            if non_json_body or _sends_non_json_content(headers):
                request.body = body
            else:
                request.body = serializer.serialize(body)

        await _run_interceptors(self._request_interceptors, request)

        logger.debug("runtime.invoke", method=method, url=request.url)

        api_client = self._api_configuration.api_client
        try:
            response = await api_client.invoke(request)
        except Exception as e:
            e.args = (f"Call to service failed: {e}",)
            logger.debug("runtime.invoke_failed", url=request.url, error_type=type(e).__name__)
            raise

        await _run_interceptors(self._response_interceptors, response)

        parsed_body = serializer.deserialize(response.body)

        if is_code_successful(response.status_code):
            return ApiResponse(
                headers=response.headers,
                body=parsed_body,
                status_code=response.status_code,
            )

        message = UNKNOWN_ERROR_MESSAGE
        if errors and response.status_code in errors:
            message = errors[response.status_code]

        logger.debug(
            "runtime.service_error",
            url=request.url,
            status_code=response.status_code,
            message=message,
        )
        raise ServiceError(
            message,
            status_code=response.status_code,
            headers=response.headers,
            response=parsed_body,
        )
