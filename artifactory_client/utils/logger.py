"""
Logging configuration for the artifactory-client package.

The library itself only emits records through the standard logging module;
this module is what the CLI uses to decide where those records go.
"""

import logging

# ============================================================================
# Logging Configuration Constants
# ============================================================================

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"

# Loggers of the HTTP stack, silenced below maximum verbosity
HTTP_LOGGERS = ("httpx", "httpcore")


def verbosity_to_level(verbosity: int) -> int:
    """
    Map a -d count to a logging level.

    Args:
        verbosity: 0=WARNING, 1=INFO, 2 or more=DEBUG

    Returns:
        Logging level constant
    """
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(verbosity: int = 0) -> None:
    """
    Setup logging configuration with multi-level verbosity.

    Args:
        verbosity: Verbosity level (0=WARNING, 1=INFO, 2=DEBUG, 3+=DEBUG with HTTP logs)

    Example:
        >>> from artifactory_client.utils import setup_logging
        >>> setup_logging(2)  # DEBUG level
    """
    logging.basicConfig(level=verbosity_to_level(verbosity), format=LOG_FORMAT)

    # httpx logs every request at INFO, which drowns out the client's own messages
    http_level = logging.DEBUG if verbosity >= 3 else logging.WARNING
    for name in HTTP_LOGGERS:
        logging.getLogger(name).setLevel(http_level)


__all__ = ["setup_logging", "verbosity_to_level"]
