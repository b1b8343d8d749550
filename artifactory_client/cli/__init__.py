"""
Unified CLI entry point for artifactory-client operations using Click.

This module provides the main CLI group and its shared options.
"""

import sys
from typing import Optional

import click

from .._version import __version__
from ..models.context import CliContext
from ..utils import setup_logging
from . import query, transfer


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(version=__version__, prog_name="artifactory-client")
@click.option(
    "--config",
    type=click.Path(exists=True, dir_okay=False),
    help="Path to config file (default: ~/.config/artifactory/cli.toml)",
)
@click.option("--base-url", help="Artifactory base URL (e.g., https://artifactory.example.com)")
@click.option("--credential", help="Base64 encoded username:password")
@click.option("--api-version", type=int, help="API generation hint (4 and above: '/', below 4: '/artifactory/')")
@click.option(
    "--verify-ssl/--no-verify-ssl",
    default=None,
    help="Verify server TLS certificates (verification is OFF unless enabled here or in the config)",
)
@click.option("--detect-api", is_flag=True, help="Probe the server's API root before running the command")
@click.option(
    "-d",
    "--debug",
    count=True,
    help="Increase verbosity (use -d for INFO, -dd for DEBUG, -ddd for DEBUG with HTTP logs)",
)
@click.pass_context
def cli(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    ctx: click.Context,
    config: Optional[str],
    base_url: Optional[str],
    credential: Optional[str],
    api_version: Optional[int],
    verify_ssl: Optional[bool],
    detect_api: bool,
    debug: int,
) -> None:
    """Artifactory Client - Upload, download and inspect artifacts in Artifactory repositories."""
    setup_logging(debug)
    ctx.obj = CliContext(
        config=config,
        base_url=base_url,
        credential=credential,
        api_version=api_version,
        verify_ssl=verify_ssl,
        detect_api=detect_api,
        debug=debug,
    )


# Register subcommands
cli.add_command(query.version)
cli.add_command(query.info)
cli.add_command(query.exists)
cli.add_command(query.delete)
cli.add_command(transfer.upload)
cli.add_command(transfer.download)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()  # pylint: disable=no-value-for-parameter  # Click handles parameters
    except KeyboardInterrupt:
        click.echo("\n\nOperation cancelled by user", err=True)
        sys.exit(130)


__all__ = ["cli", "main"]
