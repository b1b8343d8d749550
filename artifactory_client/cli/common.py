"""
Helpers shared by the CLI commands.

This module resolves connection settings from the configuration file and
command line, and runs one client coroutine to completion.
"""

import asyncio
import logging
from pathlib import Path
from typing import Any, Awaitable, Callable, Dict, TypeVar

import click

from ..api import ArtifactoryClient
from ..models.context import ClientSettings, CliContext
from ..utils.config_manager import ConfigManager
from ..utils.constants import DEFAULT_CONFIG_PATH

T = TypeVar("T")


def resolve_settings(context: CliContext) -> ClientSettings:
    """
    Merge the configuration file with command-line overrides.

    The default configuration file is only consulted when no --config was
    given and --base-url/--credential do not already describe the server.

    Raises:
        click.UsageError: If no server URL or credential can be determined
    """
    values: Dict[str, Any] = {}
    config_path = context.config
    if config_path is None and not (context.base_url and context.credential):
        if Path(DEFAULT_CONFIG_PATH).expanduser().exists():
            config_path = DEFAULT_CONFIG_PATH
            logging.debug("Using default config path: %s", config_path)

    if config_path:
        try:
            values.update(ConfigManager(config_path).client_settings().model_dump())
        except (FileNotFoundError, ValueError) as e:
            raise click.UsageError(str(e)) from e

    overrides = {
        "base_url": context.base_url,
        "credential": context.credential,
        "api_version": context.api_version,
        "verify_ssl": context.verify_ssl,
    }
    values.update({key: value for key, value in overrides.items() if value is not None})

    if not values.get("base_url") or not values.get("credential"):
        raise click.UsageError("Must provide either --config OR both --base-url and --credential")
    return ClientSettings(**values)


def run_with_client(
    settings: ClientSettings, operation: Callable[[ArtifactoryClient], Awaitable[T]], detect_api: bool = False
) -> T:
    """
    Run ``operation`` against a fresh client and close it afterwards.

    Args:
        settings: Connection settings
        operation: Coroutine function receiving the client
        detect_api: Probe the server's API root before running the operation
    """

    async def runner() -> T:
        async with ArtifactoryClient.from_settings(settings) as client:
            if detect_api:
                await client.check_api_version()
            return await operation(client)

    return asyncio.run(runner())


__all__ = ["resolve_settings", "run_with_client"]
