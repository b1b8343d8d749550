"""Base models for artifactory-client."""

from pydantic import BaseModel, ConfigDict


class ArtifactoryBaseModel(BaseModel):
    """Base model for client-side (non-API) models."""

    model_config = ConfigDict(
        extra="forbid",  # Don't allow extra fields
        frozen=True,  # Client-side values never change after construction
    )


__all__ = ["ArtifactoryBaseModel"]
