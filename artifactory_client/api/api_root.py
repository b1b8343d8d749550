"""
API root selection for the two server API generations.

Modern servers (version 4 and later) serve the API from ``/``; legacy
servers serve it below a context path such as ``/artifactory/``. Version
detection walks the ordered candidate list until one root answers.
"""

from typing import List

from pydantic import BaseModel, ConfigDict

from ..utils.constants import DEFAULT_CONTEXT, LEGACY_API_VERSION, MODERN_API_VERSION


class ApiRoot(BaseModel):
    """A URL path prefix identifying one API generation."""

    model_config = ConfigDict(frozen=True)

    generation: int
    prefix: str

    @property
    def is_modern(self) -> bool:
        """Whether this root belongs to the modern API generation."""
        return self.generation >= MODERN_API_VERSION

    def endpoint(self, base_url: str, path: str) -> str:
        """Join the base URL, this root and a relative endpoint path."""
        return f"{base_url}{self.prefix}{path}"


def modern_root() -> ApiRoot:
    """Root used by version 4 and later."""
    return ApiRoot(generation=MODERN_API_VERSION, prefix="/")


def legacy_root(context: str = DEFAULT_CONTEXT) -> ApiRoot:
    """Root used before version 4, below the given context path."""
    context = context.strip("/")
    return ApiRoot(generation=LEGACY_API_VERSION, prefix=f"/{context}/" if context else "/")


def root_for_version(api_version: int, context: str = DEFAULT_CONTEXT) -> ApiRoot:
    """
    Select the root matching an API version hint.

    Example:
        >>> root_for_version(4).prefix
        '/'
        >>> root_for_version(3).prefix
        '/artifactory/'
    """
    if api_version >= MODERN_API_VERSION:
        return modern_root()
    return legacy_root(context)


def root_candidates(context: str = DEFAULT_CONTEXT) -> List[ApiRoot]:
    """Roots in the order version detection tries them (newest generation first)."""
    return [modern_root(), legacy_root(context)]


__all__ = ["ApiRoot", "modern_root", "legacy_root", "root_for_version", "root_candidates"]
