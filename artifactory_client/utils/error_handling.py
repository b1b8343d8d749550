"""
Error handling utilities for standardized error logging and handling.

This module turns client exceptions into actionable log messages and
provides the decorator the CLI commands are wrapped in.
"""

import logging
import sys
import traceback
from functools import wraps
from typing import Any, Callable, TypeVar

from ..exceptions import (
    ArtifactoryClientError,
    IntegrityError,
    ParseError,
    PreconditionError,
    TransportError,
    UnexpectedStatusError,
)

# Type variable for generic function decorators
F = TypeVar("F", bound=Callable[..., Any])


def handle_status_error(error: UnexpectedStatusError, operation: str) -> None:
    """
    Log an unexpected status code with a hint matching the code.

    Args:
        error: The status error to handle
        operation: Description of the operation that failed
    """
    if error.status_code == 401:
        logging.error(
            "Authentication failed during %s: Invalid credentials. "
            "Please check the credential in your configuration file.",
            operation,
        )
    elif error.status_code == 403:
        logging.error(
            "Authentication failed during %s: You don't have permission to access this resource.",
            operation,
        )
    elif error.status_code == 404:
        logging.error("Resource not found during %s: %s", operation, error)
    elif error.status_code >= 500:
        logging.error("Server error during %s: %s", operation, error)
    else:
        logging.error("HTTP error during %s: %s", operation, error)


def handle_client_error(error: ArtifactoryClientError, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle client errors with standardized logging.

    Args:
        error: The client error to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback at debug level
    """
    if isinstance(error, UnexpectedStatusError):
        handle_status_error(error, operation)
    elif isinstance(error, TransportError):
        logging.error("Network error during %s: %s", operation, error)
    elif isinstance(error, IntegrityError):
        logging.error("Integrity check failed during %s: %s", operation, error)
    elif isinstance(error, PreconditionError):
        logging.error("Cannot %s: %s", operation, error)
    elif isinstance(error, ParseError):
        logging.error("Invalid response during %s: %s", operation, error)
    else:
        logging.error("Error during %s: %s", operation, error)

    if log_traceback:
        logging.debug("Traceback: %s", traceback.format_exc())


def handle_generic_error(error: Exception, operation: str, *, log_traceback: bool = True) -> None:
    """
    Handle generic errors with standardized logging.

    Args:
        error: The exception to handle
        operation: Description of the operation that failed
        log_traceback: Whether to log the full traceback
    """
    logging.error("Unexpected error during %s: %s", operation, error)

    if log_traceback:
        logging.error("Traceback: %s", traceback.format_exc())


def with_error_handling(
    operation: str, *, exit_on_error: bool = False, exit_code: int = 1, reraise: bool = True
) -> Callable[[F], F]:
    """
    Decorator to wrap functions with consistent error handling.

    Args:
        operation: Description of the operation for logging
        exit_on_error: If True, call sys.exit on error
        exit_code: Exit code to use if exit_on_error is True
        reraise: If True, reraise the exception after logging (unless exiting)

    Example:
        @with_error_handling("download file", exit_on_error=True)
        def download():
            ...
    """

    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except ArtifactoryClientError as e:
                handle_client_error(e, operation)
                if exit_on_error:
                    sys.exit(exit_code)
                if reraise:
                    raise
            except Exception as e:
                handle_generic_error(e, operation)
                if exit_on_error:
                    sys.exit(exit_code)
                if reraise:
                    raise
            return None

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = [
    "handle_status_error",
    "handle_client_error",
    "handle_generic_error",
    "with_error_handling",
]
