# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""User-Agent header value for outbound service calls."""

from __future__ import annotations

import platform

USER_AGENT_PREFIX = "skill-sdk-python"


def create_user_agent(sdk_version: str, custom_user_agent: str | None = None) -> str:
    """
    Build the User-Agent string.

    Example:
        >>> create_user_agent("1.0.0", "my-skill/2.1")  # doctest: +SKIP
        'skill-sdk-python/1.0.0 Python/3.12.4 my-skill/2.1'
    """
    user_agent = f"{USER_AGENT_PREFIX}/{sdk_version} Python/{platform.python_version()}"
    if custom_user_agent:
        user_agent += f" {custom_user_agent}"
    return user_agent
