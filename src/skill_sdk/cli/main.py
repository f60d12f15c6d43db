# Copyright 2024-2026 The skill-sdk Authors
# SPDX-License-Identifier: Apache-2.0

"""
skill-sdk Command Line Interface.

Usage:
    skill-sdk token     Request an LWA access token
    skill-sdk address   Look up the address configured for a device
"""

from __future__ import annotations

import asyncio
import json
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from skill_sdk.runtime.errors import ServiceError, SkillSdkError

app = typer.Typer(
    name="skill-sdk",
    help="Call voice assistant skill service APIs",
    no_args_is_help=True,
)

console = Console()
error_console = Console(stderr=True)


def run_async(coro):
    """Run async function in sync context."""
    return asyncio.run(coro)


def _fail(error: Exception) -> typer.Exit:
    if isinstance(error, ServiceError):
        error_console.print(f"[red]Error ({error.status_code}): {error.message}[/red]")
    else:
        error_console.print(f"[red]Error: {error}[/red]")
    return typer.Exit(1)


# ============================================================================
# TOKEN COMMAND
# ============================================================================


@app.command()
def token(
    client_id: Annotated[str, typer.Option("--client-id", help="LWA client ID")],
    client_secret: Annotated[str, typer.Option("--client-secret", help="LWA client secret")],
    scope: Annotated[
        str | None,
        typer.Option("--scope", "-s", help="Scope to request (client credentials grant)"),
    ] = None,
    refresh_token: Annotated[
        str | None,
        typer.Option("--refresh-token", help="Refresh token to exchange (refresh token grant)"),
    ] = None,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
):
    """
    Request an access token from Login With Amazon.

    Pass exactly one of --scope or --refresh-token.

    Example:
        skill-sdk token --client-id ID --client-secret SECRET --scope alexa:skill_messaging
    """
    from skill_sdk._config import SDKConfig
    from skill_sdk.runtime.lwa import GrantType, LwaServiceClient

    if (scope is None) == (refresh_token is None):
        error_console.print("[red]Error: pass exactly one of --scope or --refresh-token[/red]")
        raise typer.Exit(1)

    config = SDKConfig.from_env()
    grant_type = GrantType.REFRESH_TOKEN if refresh_token else GrantType.CLIENT_CREDENTIALS
    lwa = LwaServiceClient(
        api_configuration=config.api_configuration(),
        authentication_configuration=config.authentication_configuration(
            client_id, client_secret, refresh_token
        ),
        grant_type=grant_type,
        custom_user_agent=config.custom_user_agent,
    )

    try:
        access_token = run_async(lwa.get_access_token(scope))
    except SkillSdkError as e:
        raise _fail(e) from None

    if json_output:
        output = {"access_token": access_token, "grant_type": grant_type.value, "scope": scope}
        console.print_json(json.dumps(output))
        return

    console.print(access_token)


# ============================================================================
# ADDRESS COMMAND
# ============================================================================


@app.command()
def address(
    device_id: Annotated[str, typer.Option("--device-id", "-d", help="Device ID from the request")],
    api_access_token: Annotated[
        str, typer.Option("--api-access-token", "-t", help="API access token from the request")
    ],
    short: Annotated[
        bool, typer.Option("--short", help="Only fetch country and postal code")
    ] = False,
    json_output: Annotated[bool, typer.Option("--json", "-j", help="Output as JSON")] = False,
):
    """
    Look up the address a customer configured for a device.

    Example:
        skill-sdk address --device-id amzn1.ask.device.XYZ --api-access-token TOKEN --short
    """
    from skill_sdk._config import SDKConfig
    from skill_sdk.services.device_address import DeviceAddressServiceClient

    config = SDKConfig.from_env()
    client = DeviceAddressServiceClient(
        config.api_configuration(authorization_value=api_access_token),
        custom_user_agent=config.custom_user_agent,
    )

    operation = client.get_country_and_postal_code if short else client.get_full_address
    try:
        result = run_async(operation(device_id))
    except SkillSdkError as e:
        raise _fail(e) from None

    if json_output:
        console.print_json(json.dumps(result))
        return

    if not result:
        console.print(f"[yellow]No address set for device {device_id}[/yellow]")
        return

    table = Table(show_header=True, header_style="bold")
    table.add_column("Field")
    table.add_column("Value")
    for key, value in result.items():
        if value is not None:
            table.add_row(key, str(value))
    console.print(table)


# ============================================================================
# VERSION
# ============================================================================


def version_callback(value: bool):
    if value:
        from skill_sdk import __version__

        console.print(f"skill-sdk version {__version__}")
        raise typer.Exit()


def quiet_callback(value: bool):
    if value:
        from skill_sdk.utils.logging import silence_logging

        silence_logging()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option("--version", callback=version_callback, is_eager=True, help="Show version"),
    ] = None,
    quiet: Annotated[
        bool | None,
        typer.Option("--quiet", "-q", callback=quiet_callback, is_eager=True, help="Suppress logs"),
    ] = None,
):
    """
    skill-sdk: call voice assistant skill service APIs from the command line.
    """
    from dotenv import load_dotenv

    load_dotenv()

    if not quiet:
        from skill_sdk._config import SDKConfig
        from skill_sdk.utils.logging import configure_logging

        configure_logging(SDKConfig.from_env().log_level)


if __name__ == "__main__":
    app()
