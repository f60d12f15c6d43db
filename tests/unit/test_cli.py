# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""Unit tests for CLI commands."""

import json
import re
from unittest.mock import AsyncMock, patch

from typer.testing import CliRunner

from skill_sdk.cli.main import app
from skill_sdk.runtime.errors import ServiceError, TransportError

runner = CliRunner()

_ANSI_RE = re.compile(r"\x1b\[[0-9;]*m")


def _strip_ansi(text: str) -> str:
    """Strip ANSI escape codes from Rich/Typer output for reliable assertions."""
    return _ANSI_RE.sub("", text)


class TestVersion:
    """Test version display."""

    def test_version_flag(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "skill-sdk version 1.0.0" in result.output

    def test_no_args_shows_help(self):
        result = runner.invoke(app, [])
        assert "skill service APIs" in result.output


class TestTokenCommand:
    """Test the token command."""

    def test_scope_token(self):
        with patch(
            "skill_sdk.runtime.lwa.LwaServiceClient.get_access_token",
            new=AsyncMock(return_value="Atc|token"),
        ) as mock_get:
            result = runner.invoke(
                app,
                ["token", "--client-id", "id", "--client-secret", "secret", "--scope", "s1"],
            )

        assert result.exit_code == 0
        assert "Atc|token" in result.output
        mock_get.assert_awaited_once_with("s1")

    def test_refresh_token_json(self):
        with patch(
            "skill_sdk.runtime.lwa.LwaServiceClient.get_access_token",
            new=AsyncMock(return_value="Atza|token"),
        ) as mock_get:
            result = runner.invoke(
                app,
                [
                    "token",
                    "--client-id",
                    "id",
                    "--client-secret",
                    "secret",
                    "--refresh-token",
                    "Atzr|refresh",
                    "--json",
                ],
            )

        assert result.exit_code == 0
        output = json.loads(_strip_ansi(result.output))
        assert output["access_token"] == "Atza|token"
        assert output["grant_type"] == "refresh_token"
        mock_get.assert_awaited_once_with(None)

    def test_requires_exactly_one_grant_input(self):
        result = runner.invoke(app, ["token", "--client-id", "id", "--client-secret", "secret"])
        assert result.exit_code == 1
        assert "exactly one of --scope or --refresh-token" in _strip_ansi(result.output)

    def test_service_error_exits_1(self):
        error = ServiceError("Authentication Failed", status_code=401)
        with patch(
            "skill_sdk.runtime.lwa.LwaServiceClient.get_access_token",
            new=AsyncMock(side_effect=error),
        ):
            result = runner.invoke(
                app,
                ["token", "--client-id", "id", "--client-secret", "bad", "--scope", "s1"],
            )

        assert result.exit_code == 1
        assert "Error (401): Authentication Failed" in _strip_ansi(result.output)


class TestAddressCommand:
    """Test the address command."""

    def test_short_address_table(self):
        with patch(
            "skill_sdk.services.device_address.DeviceAddressServiceClient.get_country_and_postal_code",
            new=AsyncMock(return_value={"countryCode": "US", "postalCode": "98109"}),
        ) as mock_get:
            result = runner.invoke(
                app,
                ["address", "--device-id", "dev-1", "--api-access-token", "tok", "--short"],
            )

        assert result.exit_code == 0
        output = _strip_ansi(result.output)
        assert "countryCode" in output
        assert "98109" in output
        mock_get.assert_awaited_once_with("dev-1")

    def test_full_address_json(self):
        with patch(
            "skill_sdk.services.device_address.DeviceAddressServiceClient.get_full_address",
            new=AsyncMock(return_value={"city": "Seattle"}),
        ):
            result = runner.invoke(
                app,
                ["address", "--device-id", "dev-1", "--api-access-token", "tok", "--json"],
            )

        assert result.exit_code == 0
        assert json.loads(_strip_ansi(result.output)) == {"city": "Seattle"}

    def test_no_address(self):
        with patch(
            "skill_sdk.services.device_address.DeviceAddressServiceClient.get_full_address",
            new=AsyncMock(return_value=None),
        ):
            result = runner.invoke(
                app, ["address", "--device-id", "dev-1", "--api-access-token", "tok"]
            )

        assert result.exit_code == 0
        assert "No address set for device dev-1" in _strip_ansi(result.output)

    def test_transport_error_exits_1(self):
        with patch(
            "skill_sdk.services.device_address.DeviceAddressServiceClient.get_full_address",
            new=AsyncMock(side_effect=TransportError("DefaultApiClient", "connection refused")),
        ):
            result = runner.invoke(
                app, ["--quiet", "address", "--device-id", "dev-1", "--api-access-token", "tok"]
            )

        assert result.exit_code == 1
        assert "Error: connection refused" in _strip_ansi(result.output)
