"""
Artifactory Client - A Python client for Artifactory file operations.

This package provides an asynchronous client for uploading, downloading,
inspecting and deleting artifacts, with API root detection for both
Artifactory API generations and optional MD5 verification of downloads.
"""

from ._version import __version__

__author__ = "Artifactory Client Developers"

# Import main classes and functions for easy access
from .api import ArtifactoryClient, PrecomputedBasicAuth, ApiRoot
from .exceptions import (
    ArtifactoryClientError,
    PreconditionError,
    ArtifactExistsError,
    TransportError,
    UnexpectedStatusError,
    IntegrityError,
    ParseError,
)
from .models import DeployResponse, DownloadResult, FileInfoResponse, TransferRequest
from .utils import ConfigManager, setup_logging, create_async_session
from .cli import main as cli_main, cli as cli_group

__all__ = [
    "__version__",
    "ArtifactoryClient",
    "PrecomputedBasicAuth",
    "ApiRoot",
    "ArtifactoryClientError",
    "PreconditionError",
    "ArtifactExistsError",
    "TransportError",
    "UnexpectedStatusError",
    "IntegrityError",
    "ParseError",
    "DeployResponse",
    "DownloadResult",
    "FileInfoResponse",
    "TransferRequest",
    "ConfigManager",
    "setup_logging",
    "create_async_session",
    "cli_main",
    "cli_group",
]
