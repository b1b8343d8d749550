"""
Session utilities for Artifactory operations.

This module provides the factory for the pooled async HTTP client shared by
all operations of one ArtifactoryClient.
"""

import logging
from typing import Optional

import httpx

from .constants import CONNECT_TIMEOUT, DEFAULT_MAX_CONNECTIONS, DEFAULT_TIMEOUT

# Every request is a single attempt; callers decide whether to try again
TRANSPORT_RETRIES = 0


def create_async_session(
    auth: Optional[httpx.Auth] = None,
    verify_ssl: bool = False,
    timeout: float = DEFAULT_TIMEOUT,
    max_connections: int = DEFAULT_MAX_CONNECTIONS,
) -> httpx.AsyncClient:
    """
    Create an httpx async client with connection pooling.

    Args:
        auth: Authentication attached to every request unless overridden per request
        verify_ssl: Verify server TLS certificates (off by default, see ArtifactoryClient)
        timeout: Total timeout in seconds (default: 120.0)
        max_connections: Maximum number of connections in the pool (default: 100)

    Returns:
        Configured httpx.AsyncClient

    Example:
        >>> session = create_async_session(verify_ssl=True, timeout=30.0)
        >>> response = await session.get("https://artifactory.example.com/api/system/version")
    """
    limits = httpx.Limits(
        max_connections=max_connections,
        max_keepalive_connections=max(20, max_connections // 5),
    )
    timeout_config = httpx.Timeout(timeout, connect=CONNECT_TIMEOUT)

    if not verify_ssl:
        logging.warning(
            "TLS certificate verification is DISABLED (verify_ssl=False). "
            "Enable verify_ssl for servers with trusted certificates."
        )

    transport = httpx.AsyncHTTPTransport(
        limits=limits,
        retries=TRANSPORT_RETRIES,
        verify=verify_ssl,
    )

    return httpx.AsyncClient(
        auth=auth,
        transport=transport,
        timeout=timeout_config,
        follow_redirects=True,
    )


__all__ = ["create_async_session"]
