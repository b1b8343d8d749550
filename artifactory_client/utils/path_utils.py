"""
File path handling utilities.

This module provides helpers for normalizing repository paths and checking
local source and destination locations before a transfer starts.
"""

import os

from .constants import REMOTE_SOURCE_PREFIXES


def normalize_remote_path(remote_path: str) -> str:
    """
    Strip every leading slash from a repository path.

    Args:
        remote_path: Artifact location within a repository

    Returns:
        The path with zero leading slashes

    Example:
        >>> normalize_remote_path("///org/app/1.0/app.jar")
        'org/app/1.0/app.jar'
    """
    return remote_path.lstrip("/")


def is_remote_source(source: str) -> bool:
    """
    Check whether an upload source is an http(s) URL rather than a local path.

    Example:
        >>> is_remote_source("https://mirror.example.com/app.jar")
        True
        >>> is_remote_source("./build/app.jar")
        False
    """
    return source.lower().startswith(REMOTE_SOURCE_PREFIXES)


def destination_directory(destination: str) -> str:
    """
    Return the directory a download destination will be written into.

    Relative destinations without a directory component resolve to the
    current working directory.
    """
    return os.path.dirname(os.path.abspath(destination))


def remove_partial_file(file_path: str) -> None:
    """Delete a partially written file if it exists."""
    try:
        os.remove(file_path)
    except FileNotFoundError:
        return


__all__ = ["normalize_remote_path", "is_remote_source", "destination_directory", "remove_partial_file"]
