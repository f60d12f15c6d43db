# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
URL construction for service calls.

Pure helpers: an endpoint, a path template with ``{name}`` placeholders and
ordered query parameters go in, an absolute URL string comes out.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from urllib.parse import quote

QueryParam = tuple[str, str]

# Characters left unescaped, matching encodeURIComponent.
_SAFE_CHARS = "-_.!~*'()"


def encode_component(value: object) -> str:
    """Percent-encode a single path or query component."""
    return quote(str(value), safe=_SAFE_CHARS)


def interpolate_params(path: str, params: Mapping[str, str] | None) -> str:
    """
    Replace ``{name}`` placeholders in ``path`` with encoded values.

    Only the first occurrence of each placeholder is replaced. ``None``
    leaves the template unchanged.
    """
    if not params:
        return path

    result = path
    for name, value in params.items():
        result = result.replace("{" + name + "}", encode_component(value), 1)
    return result


def build_query_string(params: Sequence[QueryParam] | None, is_query_start: bool) -> str:
    """
    Build the query string for ``params``.

    Starts with ``&`` when the path already carries a query string
    (``is_query_start``), otherwise with ``?``. Duplicate keys are kept in
    order. ``None`` or an empty sequence yields an empty string.
    """
    if not params:
        return ""

    pairs = "&".join(f"{encode_component(key)}={encode_component(value)}" for key, value in params)
    return ("&" if is_query_start else "?") + pairs


def build_url(
    endpoint: str | None,
    path: str,
    query_params: Sequence[QueryParam] | None,
    path_params: Mapping[str, str] | None,
) -> str:
    """
    Build the absolute URL for a service call.

    Args:
        endpoint: Base API url; a single trailing ``/`` is dropped.
        path: Path template with optional ``{name}`` placeholders and
            optionally a literal query string.
        query_params: Ordered (key, value) pairs, duplicates allowed.
        path_params: Placeholder name to raw value.

    Example:
        >>> build_url("fake://url/", "/some/{path}/{id}/", [], {"path": "sub", "id": "123"})
        'fake://url/some/sub/123/'
    """
    endpoint = endpoint or ""
    processed_endpoint = endpoint[:-1] if endpoint.endswith("/") else endpoint
    path_with_params = interpolate_params(path, path_params)
    query_string = build_query_string(query_params, "?" in path_with_params)
    return processed_endpoint + path_with_params + query_string
