"""Models describing a single upload or download."""

from typing import Optional

from pydantic import field_validator

from .base import ArtifactoryBaseModel


class TransferRequest(ArtifactoryBaseModel):
    """
    One upload or download, alive only for the duration of the call.

    Attributes:
        repo_key: Repository the artifact lives in
        remote_path: Artifact path within the repository (leading slashes stripped)
        local_path: Upload source (local path or http(s) URL) or download destination
        force_upload: Overwrite an existing artifact on upload
        check_checksum: Verify the MD5 of a downloaded file against the server
    """

    repo_key: str
    remote_path: str
    local_path: str
    force_upload: bool = False
    check_checksum: bool = False

    @field_validator("remote_path")
    @classmethod
    def strip_leading_slashes(cls, v: str) -> str:
        """Remote paths never start with a slash."""
        return v.lstrip("/")

    @property
    def artifact_path(self) -> str:
        """Repository-qualified artifact path (``<repo_key>/<remote_path>``)."""
        return f"{self.repo_key}/{self.remote_path}"


class DownloadResult(ArtifactoryBaseModel):
    """
    Result of a completed download.

    Attributes:
        destination: Local path the artifact was written to
        checksum: MD5 that was verified, or None when verification was not requested
        message: Human readable summary
    """

    destination: str
    checksum: Optional[str] = None
    message: str

    @property
    def verified(self) -> bool:
        """Whether the checksum was verified."""
        return self.checksum is not None


__all__ = ["TransferRequest", "DownloadResult"]
