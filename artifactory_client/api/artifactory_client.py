"""
Artifactory API client for storing and retrieving artifacts.

This module provides the ArtifactoryClient class, which maps the file
operations of an Artifactory server onto coroutines:

    - check_api_version: detect which API root the server answers on
    - get_file_info / file_exists / delete_item: metadata and management
    - upload_file / download_file: streamed transfers with optional MD5 check

Key Features:
    - One shared httpx.AsyncClient per client, safe for concurrent calls
    - Automatic API root detection (modern "/" or legacy "/<context>/")
    - Streams are scoped so file handles and connections are always released
    - Errors raised as the artifactory_client.exceptions hierarchy

Known limitation: upload_file checks for an existing artifact before it
uploads. The two steps are separate requests, so a concurrent writer can
create the artifact in between.
"""

# Standard library imports
import asyncio
import logging
import os
from contextlib import asynccontextmanager
from typing import IO, Any, AsyncIterator, Iterable, Optional, Type, TypeVar

# Third-party imports
import httpx
from pydantic import BaseModel, ValidationError

# Local imports
from ..exceptions import (
    ArtifactExistsError,
    ArtifactoryClientError,
    IntegrityError,
    ParseError,
    PreconditionError,
    TransportError,
    UnexpectedStatusError,
)
from ..models import ClientSettings, DeployResponse, DownloadResult, FileInfoResponse, TransferRequest, VersionResponse
from ..utils import (
    ConfigManager,
    checksums_match,
    compute_md5,
    create_async_session,
    destination_directory,
    is_remote_source,
    normalize_remote_path,
    remove_partial_file,
)
from ..utils.constants import (
    DEFAULT_CONTEXT,
    DEFAULT_TIMEOUT,
    MODERN_API_VERSION,
    SENSITIVE_HEADERS,
    STORAGE_ENDPOINT,
    SYSTEM_VERSION_ENDPOINT,
    TRANSFER_CHUNK_SIZE,
)
from .api_root import ApiRoot, root_candidates, root_for_version
from .auth import PrecomputedBasicAuth

ModelT = TypeVar("ModelT", bound=BaseModel)

# Longest response body quoted in an UnexpectedStatusError message
MAX_ERROR_DETAIL = 200


async def _aiter_file(f: IO[bytes], chunk_size: int = TRANSFER_CHUNK_SIZE) -> AsyncIterator[bytes]:
    """Yield an open binary file in chunks as an async request body."""
    while True:
        chunk = await asyncio.to_thread(f.read, chunk_size)
        if not chunk:
            break
        yield chunk


class ArtifactoryClient:
    """
    A client for the file operations of an Artifactory server.

    API documentation:
    - https://jfrog.com/help/r/jfrog-rest-apis/artifactory-rest-apis

    Every public method is a coroutine. The client holds no per-call state,
    so one instance can serve many concurrent operations. The only mutation
    after construction is check_api_version() adopting the root that answered.

    TLS certificate verification is disabled unless verify_ssl=True is given.
    This matches servers deployed with self-signed certificates; a warning is
    logged whenever an unverified session is created.

    Example:
        >>> async with ArtifactoryClient("https://artifactory.example.com", credential) as client:
        ...     await client.check_api_version()
        ...     await client.upload_file("libs-release", "org/app/app.jar", "./app.jar")
    """

    def __init__(  # pylint: disable=too-many-arguments
        self,
        base_url: str,
        credential: str,
        api_version: int = MODERN_API_VERSION,
        *,
        context: str = DEFAULT_CONTEXT,
        verify_ssl: bool = False,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        """Initialize the Artifactory client.

        Args:
            base_url: Server URL; trailing slashes are stripped
            credential: Pre-encoded basic-auth token (base64 of username:password)
            api_version: API generation hint; 4 and above use "/", below 4 use "/<context>/"
            context: Context path of legacy servers (default: "artifactory")
            verify_ssl: Verify server TLS certificates (default: False)
            timeout: Request timeout in seconds
        """
        self.settings = ClientSettings(
            base_url=base_url,
            credential=credential,
            api_version=api_version,
            context=context,
            verify_ssl=verify_ssl,
            timeout=timeout,
        )
        self.base_url = self.settings.base_url
        self.api_root: ApiRoot = root_for_version(self.settings.api_version, self.settings.context)
        self._auth = PrecomputedBasicAuth(self.settings.credential)
        self._session: Optional[httpx.AsyncClient] = None
        logging.debug("ArtifactoryClient initialized for %s (API root %s)", self.base_url, self.api_root.prefix)

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "ArtifactoryClient":
        """Create a client from validated settings."""
        return cls(
            settings.base_url,
            settings.credential,
            settings.api_version,
            context=settings.context,
            verify_ssl=settings.verify_ssl,
            timeout=settings.timeout,
        )

    @classmethod
    def create_from_config_file(cls, path: Optional[str] = None) -> "ArtifactoryClient":
        """
        Create a client from the [cli] section of a TOML configuration file.

        Args:
            path: Configuration file (default: ~/.config/artifactory/cli.toml)
        """
        return cls.from_settings(ConfigManager(path).client_settings())

    def __repr__(self) -> str:
        return f"ArtifactoryClient(base_url={self.base_url!r}, api_root={self.api_root.prefix!r})"

    # ============================================================================
    # Session Management
    # ============================================================================

    @property
    def auth(self) -> PrecomputedBasicAuth:
        """Authentication attached to every repository request."""
        return self._auth

    def _get_session(self) -> httpx.AsyncClient:
        """Get or create the shared async session."""
        if self._session is None or self._session.is_closed:
            self._session = create_async_session(
                auth=self._auth,
                verify_ssl=self.settings.verify_ssl,
                timeout=self.settings.timeout,
            )
        return self._session

    async def aclose(self) -> None:
        """Close the session and release all connections."""
        if self._session is not None and not self._session.is_closed:
            await self._session.aclose()
            logging.debug("ArtifactoryClient session closed and connections released")

    async def __aenter__(self) -> "ArtifactoryClient":
        return self

    async def __aexit__(self, exc_type: Optional[type], exc_val: Optional[BaseException], exc_tb: Optional[Any]) -> None:
        await self.aclose()

    # ============================================================================
    # URL Construction
    # ============================================================================

    def _url(self, endpoint: str) -> str:
        """Build a fully qualified URL below the current API root."""
        return self.api_root.endpoint(self.base_url, endpoint)

    def _storage_url(self, repo_key: str, remote_path: str) -> str:
        return self._url(f"{STORAGE_ENDPOINT}/{repo_key}/{normalize_remote_path(remote_path)}")

    def _artifact_url(self, repo_key: str, remote_path: str) -> str:
        return self._url(f"{repo_key}/{normalize_remote_path(remote_path)}")

    # ============================================================================
    # Request Primitives
    # ============================================================================

    async def _request(self, method: str, url: str, operation: str, **kwargs: Any) -> httpx.Response:
        """
        Send a single request and return the response, whatever its status.

        Raises:
            TransportError: If the request could not be completed, including
                redirect loops and bodies that fail to decode
        """
        logging.debug("%s %s (%s)", method, url, operation)
        try:
            return await self._get_session().request(method, url, **kwargs)
        except httpx.RequestError as e:
            logging.debug("Transport error during %s: %r", operation, e)
            raise TransportError(str(e) or type(e).__name__) from e

    @asynccontextmanager
    async def _stream(self, method: str, url: str, operation: str, **kwargs: Any) -> AsyncIterator[httpx.Response]:
        """
        Open a streamed response that is closed when the block exits.

        Transport errors raised while the body is being consumed inside the
        block are converted as well.
        """
        logging.debug("%s %s (%s, streamed)", method, url, operation)
        try:
            async with self._get_session().stream(method, url, **kwargs) as response:
                yield response
        except httpx.RequestError as e:
            logging.debug("Transport error during %s: %r", operation, e)
            raise TransportError(str(e) or type(e).__name__) from e

    def _log_server_error(self, response: httpx.Response, operation: str) -> None:
        """Log request and response details of a 5xx response, without credentials."""
        logging.error("=" * 80)
        logging.error("SERVER ERROR (%s) during %s", response.status_code, operation)
        logging.error("  Method: %s", response.request.method)
        logging.error("  URL: %s", response.url)
        safe_headers = dict(response.request.headers)
        for key in SENSITIVE_HEADERS:
            if key in safe_headers:
                safe_headers[key] = "[REDACTED]"
        logging.error("  Request Headers: %s", safe_headers)
        logging.error("  Response Headers: %s", dict(response.headers))
        logging.error("  Response Body: %s", response.text[:500])
        logging.error("=" * 80)

    def _check_status(self, response: httpx.Response, expected: Iterable[int], operation: str) -> None:
        """
        Raise UnexpectedStatusError unless the status code is one of ``expected``.

        Streamed responses must have been read before they are checked.
        """
        if response.status_code in expected:
            return

        if response.status_code >= 500:
            self._log_server_error(response, operation)
        else:
            logging.debug("Failed to %s: %s - %s", operation, response.status_code, response.text[:MAX_ERROR_DETAIL])

        detail = response.text.strip()[:MAX_ERROR_DETAIL] or None
        raise UnexpectedStatusError(response.status_code, operation, detail)

    def _parse_json(self, response: httpx.Response, operation: str, model: Type[ModelT]) -> ModelT:
        """
        Parse a JSON response body into ``model``.

        Raises:
            ParseError: If the body is not JSON or does not match the model
        """
        try:
            data = response.json()
        except ValueError as e:
            raise ParseError(f"Invalid JSON during {operation}: {e}") from e

        try:
            return model.model_validate(data)
        except ValidationError as e:
            raise ParseError(f"Unexpected response during {operation}: {e}") from e

    # ============================================================================
    # Version Detection
    # ============================================================================

    async def check_api_version(self) -> str:
        """
        Detect the API root the server answers on and return its version.

        Each root candidate is probed in order (modern first). The first one
        answering 200 with a version document becomes the client's API root.

        Returns:
            Version string reported by the server

        Raises:
            ArtifactoryClientError: The error of the last probe if no root answered
        """
        operation = "check API version"
        last_error: Optional[ArtifactoryClientError] = None

        for candidate in root_candidates(self.settings.context):
            url = candidate.endpoint(self.base_url, SYSTEM_VERSION_ENDPOINT)
            try:
                response = await self._request("GET", url, operation)
                self._check_status(response, (200,), operation)
                version = self._parse_json(response, operation, VersionResponse)
            except ArtifactoryClientError as e:
                logging.debug("API root %s did not answer: %s", candidate.prefix, e)
                last_error = e
                continue

            self.api_root = candidate
            logging.info("Detected Artifactory %s (API root %s)", version.version, candidate.prefix)
            return version.version

        if last_error is None:
            raise ArtifactoryClientError("No API root candidates to probe")
        raise last_error

    # ============================================================================
    # Metadata and Management
    # ============================================================================

    async def get_file_info(self, repo_key: str, remote_path: str) -> FileInfoResponse:
        """
        Fetch the stored metadata of an artifact, including its checksums.

        Raises:
            UnexpectedStatusError: If the server does not answer 200
            ParseError: If the body is not a file info document
        """
        operation = "get file info"
        response = await self._request("GET", self._storage_url(repo_key, remote_path), operation)
        self._check_status(response, (200,), operation)
        return self._parse_json(response, operation, FileInfoResponse)

    async def file_exists(self, repo_key: str, remote_path: str) -> bool:
        """
        Check whether an artifact exists.

        Returns:
            True on 200, False on 404

        Raises:
            UnexpectedStatusError: For any other status code
        """
        operation = "check file existence"
        response = await self._request("HEAD", self._artifact_url(repo_key, remote_path), operation)
        if response.status_code == 404:
            return False
        self._check_status(response, (200,), operation)
        return True

    async def delete_item(self, repo_key: str, remote_path: str) -> None:
        """
        Delete an artifact or folder.

        Raises:
            UnexpectedStatusError: Unless the server answers exactly 204
        """
        operation = "delete item"
        response = await self._request("DELETE", self._artifact_url(repo_key, remote_path), operation)
        self._check_status(response, (204,), operation)
        logging.info("Deleted %s/%s", repo_key, normalize_remote_path(remote_path))

    # ============================================================================
    # Transfers
    # ============================================================================

    async def upload_file(
        self, repo_key: str, remote_path: str, source: str, force_upload: bool = False
    ) -> DeployResponse:
        """
        Upload a local file or the content of an http(s) URL.

        Args:
            repo_key: Target repository
            remote_path: Target path within the repository
            source: Local file path or http(s) URL to stream from
            force_upload: Overwrite the artifact if it already exists

        Returns:
            Creation metadata reported by the server

        Raises:
            PreconditionError: If a local source does not exist
            ArtifactExistsError: If the target exists and force_upload is False
            UnexpectedStatusError: If the server does not answer 201
            TransportError: If the transfer fails at network level
        """
        request = TransferRequest(
            repo_key=repo_key, remote_path=remote_path, local_path=source, force_upload=force_upload
        )
        remote = is_remote_source(source)

        if not remote and not os.path.isfile(source):
            raise PreconditionError(f"Local file does not exist: {source}")
        logging.debug("Upload %s: precondition checked", request.artifact_path)

        if await self.file_exists(request.repo_key, request.remote_path):
            if not request.force_upload:
                raise ArtifactExistsError(request.repo_key, request.remote_path)
            logging.info("Overwriting existing artifact %s", request.artifact_path)

        logging.debug("Upload %s: transferring from %s", request.artifact_path, source)
        url = self._storage_url(request.repo_key, request.remote_path)
        if remote:
            response = await self._upload_from_url(url, source)
        else:
            response = await self._upload_from_file(url, source)

        self._check_status(response, (201,), "upload file")
        result = self._parse_json(response, "upload file", DeployResponse)
        logging.info("Uploaded %s to %s", source, request.artifact_path)
        return result

    async def _upload_from_file(self, url: str, file_path: str) -> httpx.Response:
        with open(file_path, "rb") as f:
            headers = {"Content-Length": str(os.fstat(f.fileno()).st_size)}
            return await self._request("PUT", url, "upload file", content=_aiter_file(f), headers=headers)

    async def _upload_from_url(self, url: str, source_url: str) -> httpx.Response:
        # Repository credentials are not sent to the source server
        async with self._stream("GET", source_url, "fetch upload source", auth=None) as source:
            if source.status_code != 200:
                await source.aread()
                self._check_status(source, (200,), "fetch upload source")
            return await self._request(
                "PUT", url, "upload file", content=source.aiter_bytes(TRANSFER_CHUNK_SIZE)
            )

    async def download_file(
        self, repo_key: str, remote_path: str, destination: str, check_checksum: bool = False
    ) -> DownloadResult:
        """
        Download an artifact into a local file.

        The destination's directory must already exist. If the transfer fails
        the partially written file is removed; after a checksum mismatch the
        complete file is left in place.

        Args:
            repo_key: Source repository
            remote_path: Source path within the repository
            destination: Local file to write
            check_checksum: Compare the MD5 of the written file with the server's

        Raises:
            PreconditionError: If the destination directory does not exist
            UnexpectedStatusError: If the server does not answer 200
            IntegrityError: If the checksums differ
        """
        request = TransferRequest(
            repo_key=repo_key, remote_path=remote_path, local_path=destination, check_checksum=check_checksum
        )

        directory = destination_directory(destination)
        if not os.path.isdir(directory):
            raise PreconditionError(f"Destination directory does not exist: {directory}")
        logging.debug("Download %s: precondition checked", request.artifact_path)

        await self._download_to(self._artifact_url(request.repo_key, request.remote_path), destination)
        logging.debug("Download %s: transfer completed", request.artifact_path)

        if not request.check_checksum:
            message = f"Downloaded {request.artifact_path} to {destination}"
            logging.info(message)
            return DownloadResult(destination=destination, message=message)

        file_info = await self.get_file_info(request.repo_key, request.remote_path)
        actual = await asyncio.to_thread(compute_md5, destination)
        expected = file_info.md5
        if expected is None or not checksums_match(expected, actual):
            raise IntegrityError(expected, actual)

        message = f"Downloaded {request.artifact_path} to {destination}, MD5 checksum verified: {actual}"
        logging.info(message)
        return DownloadResult(destination=destination, checksum=actual, message=message)

    async def _download_to(self, url: str, destination: str) -> None:
        async with self._stream("GET", url, "download file") as response:
            if response.status_code != 200:
                await response.aread()
                self._check_status(response, (200,), "download file")

            # Only a file this call opened for writing is removed on failure
            with open(destination, "wb") as f:
                try:
                    async for chunk in response.aiter_bytes(TRANSFER_CHUNK_SIZE):
                        f.write(chunk)
                except BaseException:  # includes cancellation
                    f.close()
                    remove_partial_file(destination)
                    raise


__all__ = ["ArtifactoryClient"]
