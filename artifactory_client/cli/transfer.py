"""
Transfer commands for the artifactory-client CLI.

This module provides the upload and download commands.
"""

import json

import click

from ..models.context import ClientSettings
from ..utils.error_handling import with_error_handling
from .common import resolve_settings, run_with_client


@click.command()
@click.argument("repo_key")
@click.argument("remote_path")
@click.argument("source")
@click.option("--force", is_flag=True, help="Overwrite the artifact if it already exists")
@click.pass_context
def upload(ctx: click.Context, repo_key: str, remote_path: str, source: str, force: bool) -> None:
    """Upload a local file or http(s) URL to REPO_KEY/REMOTE_PATH."""
    settings = resolve_settings(ctx.obj)
    deployed = _upload_file(settings, repo_key, remote_path, source, force, ctx.obj.detect_api)
    click.echo(json.dumps(deployed.to_dict(), indent=2))


@with_error_handling("upload file", exit_on_error=True)
def _upload_file(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    settings: ClientSettings, repo_key: str, remote_path: str, source: str, force: bool, detect_api: bool
):
    return run_with_client(
        settings, lambda client: client.upload_file(repo_key, remote_path, source, force_upload=force), detect_api
    )


@click.command()
@click.argument("repo_key")
@click.argument("remote_path")
@click.argument("destination", type=click.Path(dir_okay=False))
@click.option("--check-checksum", is_flag=True, help="Verify the MD5 checksum after downloading")
@click.pass_context
def download(ctx: click.Context, repo_key: str, remote_path: str, destination: str, check_checksum: bool) -> None:
    """Download REPO_KEY/REMOTE_PATH into DESTINATION."""
    settings = resolve_settings(ctx.obj)
    result = _download_file(settings, repo_key, remote_path, destination, check_checksum, ctx.obj.detect_api)
    click.echo(result.message)


@with_error_handling("download file", exit_on_error=True)
def _download_file(  # pylint: disable=too-many-arguments,too-many-positional-arguments
    settings: ClientSettings, repo_key: str, remote_path: str, destination: str, check_checksum: bool, detect_api: bool
):
    return run_with_client(
        settings,
        lambda client: client.download_file(repo_key, remote_path, destination, check_checksum=check_checksum),
        detect_api,
    )


__all__ = ["upload", "download"]
