"""
Metadata and management commands for the artifactory-client CLI.

This module provides the version, info, exists and delete commands.
"""

import json

import click

from ..models.context import ClientSettings
from ..utils.error_handling import with_error_handling
from .common import resolve_settings, run_with_client


@click.command()
@click.pass_context
def version(ctx: click.Context) -> None:
    """Detect the server's API root and print its version."""
    settings = resolve_settings(ctx.obj)
    server_version, prefix = _detect_version(settings)
    click.echo(f"{server_version} (API root {prefix})")


@with_error_handling("check API version", exit_on_error=True)
def _detect_version(settings: ClientSettings):
    async def operation(client):
        detected = await client.check_api_version()
        return detected, client.api_root.prefix

    return run_with_client(settings, operation)


@click.command()
@click.argument("repo_key")
@click.argument("remote_path")
@click.pass_context
def info(ctx: click.Context, repo_key: str, remote_path: str) -> None:
    """Print the stored metadata of an artifact as JSON."""
    settings = resolve_settings(ctx.obj)
    file_info = _file_info(settings, repo_key, remote_path, ctx.obj.detect_api)
    click.echo(json.dumps(file_info.model_dump(by_alias=True, exclude_none=True), indent=2))


@with_error_handling("get file info", exit_on_error=True)
def _file_info(settings: ClientSettings, repo_key: str, remote_path: str, detect_api: bool):
    return run_with_client(settings, lambda client: client.get_file_info(repo_key, remote_path), detect_api)


@click.command()
@click.argument("repo_key")
@click.argument("remote_path")
@click.pass_context
def exists(ctx: click.Context, repo_key: str, remote_path: str) -> None:
    """Check whether an artifact exists (exit code 1 if it does not)."""
    settings = resolve_settings(ctx.obj)
    found = _file_exists(settings, repo_key, remote_path, ctx.obj.detect_api)
    click.echo("true" if found else "false")
    if not found:
        ctx.exit(1)


@with_error_handling("check file existence", exit_on_error=True)
def _file_exists(settings: ClientSettings, repo_key: str, remote_path: str, detect_api: bool):
    return run_with_client(settings, lambda client: client.file_exists(repo_key, remote_path), detect_api)


@click.command()
@click.argument("repo_key")
@click.argument("remote_path")
@click.pass_context
def delete(ctx: click.Context, repo_key: str, remote_path: str) -> None:
    """Delete an artifact or folder."""
    settings = resolve_settings(ctx.obj)
    _delete_item(settings, repo_key, remote_path, ctx.obj.detect_api)
    click.echo(f"Deleted {repo_key}/{remote_path.lstrip('/')}")


@with_error_handling("delete item", exit_on_error=True)
def _delete_item(settings: ClientSettings, repo_key: str, remote_path: str, detect_api: bool):
    return run_with_client(settings, lambda client: client.delete_item(repo_key, remote_path), detect_api)


__all__ = ["version", "info", "exists", "delete"]
