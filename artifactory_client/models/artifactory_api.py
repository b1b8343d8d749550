"""
Pydantic models for Artifactory API responses.

These models validate the JSON documents returned by the server while
keeping every field the server sends, including ones not modelled here.
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


# ============================================================================
# Base Models
# ============================================================================


class ArtifactoryApiModel(BaseModel):
    """Base model for all Artifactory API responses."""

    model_config = ConfigDict(extra="allow", frozen=True, populate_by_name=True)


class Checksums(ArtifactoryApiModel):
    """Checksum map of a stored artifact."""

    md5: Optional[str] = None
    sha1: Optional[str] = None
    sha256: Optional[str] = None


# ============================================================================
# System Models
# ============================================================================


class VersionResponse(ArtifactoryApiModel):
    """Response from the system version endpoint."""

    version: str
    revision: Optional[str] = None
    addons: List[str] = Field(default_factory=list)
    license: Optional[str] = None


# ============================================================================
# Storage Models
# ============================================================================


class FileInfoResponse(ArtifactoryApiModel):
    """
    Metadata of a stored artifact, as returned by the storage endpoint.

    Artifactory reports ``size`` as a string, so it is kept as one.
    """

    checksums: Checksums
    repo: Optional[str] = None
    path: Optional[str] = None
    created: Optional[str] = None
    created_by: Optional[str] = Field(default=None, alias="createdBy")
    last_modified: Optional[str] = Field(default=None, alias="lastModified")
    modified_by: Optional[str] = Field(default=None, alias="modifiedBy")
    last_updated: Optional[str] = Field(default=None, alias="lastUpdated")
    download_uri: Optional[str] = Field(default=None, alias="downloadUri")
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    size: Optional[str] = None
    original_checksums: Optional[Checksums] = Field(default=None, alias="originalChecksums")
    uri: Optional[str] = None

    @property
    def md5(self) -> Optional[str]:
        """MD5 checksum reported by the server."""
        return self.checksums.md5


class DeployResponse(ArtifactoryApiModel):
    """Creation metadata returned by a successful upload (HTTP 201)."""

    repo: Optional[str] = None
    path: Optional[str] = None
    created: Optional[str] = None
    created_by: Optional[str] = Field(default=None, alias="createdBy")
    download_uri: Optional[str] = Field(default=None, alias="downloadUri")
    mime_type: Optional[str] = Field(default=None, alias="mimeType")
    size: Optional[str] = None
    checksums: Optional[Checksums] = None
    original_checksums: Optional[Checksums] = Field(default=None, alias="originalChecksums")
    uri: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return the document with the server's own field names."""
        return self.model_dump(by_alias=True, exclude_none=True)


__all__ = [
    "ArtifactoryApiModel",
    "Checksums",
    "VersionResponse",
    "FileInfoResponse",
    "DeployResponse",
]
