"""
Pydantic models for artifactory-client.

- artifactory_api: Models for Artifactory API responses
- base, context, transfer: Client-side models
"""

from .artifactory_api import ArtifactoryApiModel, Checksums, DeployResponse, FileInfoResponse, VersionResponse
from .base import ArtifactoryBaseModel
from .context import ClientSettings, CliContext
from .transfer import DownloadResult, TransferRequest

__all__ = [
    "ArtifactoryApiModel",
    "Checksums",
    "DeployResponse",
    "FileInfoResponse",
    "VersionResponse",
    "ArtifactoryBaseModel",
    "ClientSettings",
    "CliContext",
    "DownloadResult",
    "TransferRequest",
]
