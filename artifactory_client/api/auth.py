"""
Basic authentication for the Artifactory API.

This module provides an httpx.Auth implementation that sends a
pre-encoded basic-auth credential with every request.
"""

# Standard library imports
import logging
from typing import Generator

# Third-party imports
import httpx


class PrecomputedBasicAuth(httpx.Auth):
    """
    Basic authentication from an already encoded ``username:password`` token.

    Unlike httpx.BasicAuth the credential is never decoded or re-encoded;
    it is sent exactly as configured.
    """

    def __init__(self, credential: str) -> None:
        """
        Initialize basic authentication.

        Args:
            credential: Base64 encoded ``username:password`` token
        """
        if not credential:
            raise ValueError("credential must not be empty")
        self._credential = credential

    @property
    def header_value(self) -> str:
        """Value sent in the Authorization header."""
        return f"Basic {self._credential}"

    def auth_flow(self, request: httpx.Request) -> Generator[httpx.Request, httpx.Response, None]:
        """Attach the Authorization header and send the request once."""
        request.headers["Authorization"] = self.header_value
        response = yield request

        if response.status_code == 401:
            logging.debug("Credential rejected by %s (401)", request.url.host)

    def __repr__(self) -> str:
        return "PrecomputedBasicAuth(credential=[REDACTED])"


__all__ = ["PrecomputedBasicAuth"]
