"""
Artifactory API client modules.

This package provides:
- Basic authentication from a pre-encoded credential
- API root selection for the modern and legacy API generations
- The main ArtifactoryClient for file operations
"""

from .api_root import ApiRoot, legacy_root, modern_root, root_candidates, root_for_version
from .artifactory_client import ArtifactoryClient
from .auth import PrecomputedBasicAuth

# Import Artifactory API models for convenience
from ..models.artifactory_api import Checksums, DeployResponse, FileInfoResponse, VersionResponse

__all__ = [
    "ApiRoot",
    "legacy_root",
    "modern_root",
    "root_candidates",
    "root_for_version",
    "ArtifactoryClient",
    "PrecomputedBasicAuth",
    # API Models
    "Checksums",
    "DeployResponse",
    "FileInfoResponse",
    "VersionResponse",
]
