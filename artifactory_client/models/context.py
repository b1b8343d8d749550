"""Context and configuration models for artifactory-client."""

from typing import Optional

from pydantic import Field, field_validator

from ..utils.constants import DEFAULT_CONTEXT, DEFAULT_TIMEOUT, MODERN_API_VERSION
from .base import ArtifactoryBaseModel


class ClientSettings(ArtifactoryBaseModel):
    """
    Connection settings for an ArtifactoryClient.

    Attributes:
        base_url: Server URL without the API root (e.g. https://artifactory.example.com)
        credential: Pre-encoded basic-auth token (base64 of username:password)
        api_version: API generation hint used until version detection runs
        context: Context path legacy servers are served under
        verify_ssl: Verify server TLS certificates
        timeout: Request timeout in seconds
    """

    base_url: str
    credential: str
    api_version: int = MODERN_API_VERSION
    context: str = DEFAULT_CONTEXT
    verify_ssl: bool = False
    timeout: float = Field(default=DEFAULT_TIMEOUT, gt=0)

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slashes(cls, v: str) -> str:
        """Strip trailing slashes so endpoint paths can be appended directly."""
        v = v.rstrip("/")
        if not v:
            raise ValueError("base_url must not be empty")
        return v

    @field_validator("context")
    @classmethod
    def strip_context_slashes(cls, v: str) -> str:
        """Context is stored without surrounding slashes."""
        return v.strip("/")


class CliContext(ArtifactoryBaseModel):
    """
    Shared options collected by the CLI group.

    Attributes:
        config: Optional path to the TOML configuration file
        base_url: Optional server URL overriding the configuration file
        credential: Optional credential overriding the configuration file
        api_version: Optional API generation hint overriding the configuration file
        verify_ssl: Optional TLS verification override
        detect_api: Probe the server's API root before running a command
        debug: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)
    """

    config: Optional[str] = None
    base_url: Optional[str] = None
    credential: Optional[str] = None
    api_version: Optional[int] = None
    verify_ssl: Optional[bool] = None
    detect_api: bool = False
    debug: int = 0


__all__ = ["ClientSettings", "CliContext"]
