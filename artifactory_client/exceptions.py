"""
Exception hierarchy for artifactory-client.

All errors raised by the client inherit from ArtifactoryClientError, so
callers can catch everything with a single except clause or pick out the
specific failure kind they care about.

Example:
    >>> from artifactory_client.exceptions import IntegrityError, UnexpectedStatusError
    >>> try:
    ...     await client.download_file("libs-release", "app.jar", "/tmp/app.jar", check_checksum=True)
    ... except IntegrityError as e:
    ...     print(e.expected, e.actual)
    ... except UnexpectedStatusError as e:
    ...     print(e.status_code)
"""

from typing import Optional


class ArtifactoryClientError(Exception):
    """Base exception for all artifactory-client errors."""


class PreconditionError(ArtifactoryClientError):
    """
    Raised when an operation cannot start.

    Covers a missing local source file, a missing destination directory
    and an upload target that already exists without the force flag.
    No network transfer has taken place when this is raised.
    """


class ArtifactExistsError(PreconditionError):
    """Raised when an upload target already exists and force_upload is off."""

    def __init__(self, repo_key: str, remote_path: str) -> None:
        self.repo_key = repo_key
        self.remote_path = remote_path
        super().__init__(f"File already exists: {repo_key}/{remote_path}")


class TransportError(ArtifactoryClientError):
    """
    Raised for network-level failures (connection refused, DNS, timeout).

    The message is the underlying transport error's own description.
    """


class UnexpectedStatusError(ArtifactoryClientError):
    """Raised when a response status code is outside the expected set."""

    def __init__(self, status_code: int, operation: str, detail: Optional[str] = None) -> None:
        self.status_code = status_code
        self.operation = operation
        self.detail = detail
        message = f"Failed to {operation}: unexpected status code {status_code}"
        if detail:
            message += f" - {detail}"
        super().__init__(message)


class IntegrityError(ArtifactoryClientError):
    """Raised when a downloaded file does not match the server checksum."""

    def __init__(self, expected: Optional[str], actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Checksum mismatch: expected {expected}, got {actual}")


class ParseError(ArtifactoryClientError, ValueError):
    """Raised when a response body is not the JSON document that was expected."""


__all__ = [
    "ArtifactoryClientError",
    "PreconditionError",
    "ArtifactExistsError",
    "TransportError",
    "UnexpectedStatusError",
    "IntegrityError",
    "ParseError",
]
