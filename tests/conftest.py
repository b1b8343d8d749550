"""
Test fixtures and mock data for artifactory-client tests.

This module provides common fixtures, mock server responses and URL
helpers shared by the test modules.
"""

import hashlib

import pytest
import respx

BASE_URL = "https://artifactory.example.com"
CREDENTIAL = "YWRtaW46cGFzc3dvcmQ="  # admin:password
EMPTY_MD5 = "d41d8cd98f00b204e9800998ecf8427e"


def modern_url(path: str) -> str:
    """URL below the modern API root."""
    return f"{BASE_URL}/{path}"


def legacy_url(path: str) -> str:
    """URL below the legacy API root."""
    return f"{BASE_URL}/artifactory/{path}"


def md5_of(content: bytes) -> str:
    """MD5 hex digest of in-memory content."""
    return hashlib.md5(content).hexdigest()


@pytest.fixture
def mock_settings():
    """Mock client configuration."""
    return {
        "base_url": BASE_URL,
        "credential": CREDENTIAL,
        "api_version": 4,
        "context": "artifactory",
        "verify_ssl": False,
        "timeout": 30.0,
    }


@pytest.fixture
def httpx_mock():
    """Provide respx mock for HTTP mocking.

    Routes that a test expects NOT to be called are allowed, so the
    fixture does not assert that every route was hit.
    """
    with respx.mock(assert_all_called=False) as router:
        yield router


@pytest.fixture
def client():
    """Client against the modern API root."""
    from artifactory_client.api import ArtifactoryClient

    return ArtifactoryClient(BASE_URL, CREDENTIAL)


@pytest.fixture
def legacy_client():
    """Client against the legacy API root."""
    from artifactory_client.api import ArtifactoryClient

    return ArtifactoryClient(BASE_URL, CREDENTIAL, api_version=3)


@pytest.fixture
def mock_file_info():
    """File info document as returned by the storage endpoint."""

    def _build(md5: str = EMPTY_MD5, path: str = "/org/app/app.jar"):
        return {
            "repo": "libs-release",
            "path": path,
            "created": "2024-01-01T10:00:00.000Z",
            "createdBy": "admin",
            "lastModified": "2024-01-01T10:00:00.000Z",
            "downloadUri": f"{BASE_URL}/libs-release{path}",
            "mimeType": "application/java-archive",
            "size": "0",
            "checksums": {"md5": md5, "sha1": "da39a3ee5e6b4b0d3255bfef95601890afd80709"},
            "originalChecksums": {"md5": md5},
            "uri": f"{BASE_URL}/api/storage/libs-release{path}",
        }

    return _build


@pytest.fixture
def mock_deploy_response():
    """Creation document returned by a successful upload."""
    return {
        "repo": "libs-release",
        "path": "/org/app/app.jar",
        "created": "2024-01-01T10:00:00.000Z",
        "createdBy": "admin",
        "downloadUri": f"{BASE_URL}/libs-release/org/app/app.jar",
        "mimeType": "application/java-archive",
        "size": "12",
        "checksums": {"md5": md5_of(b"test content")},
        "uri": f"{BASE_URL}/api/storage/libs-release/org/app/app.jar",
    }


@pytest.fixture
def temp_artifact(tmp_path):
    """Local file to upload."""
    path = tmp_path / "app.jar"
    path.write_bytes(b"test content")
    return str(path)


@pytest.fixture
def temp_config_file(tmp_path):
    """Create a temporary TOML config file."""
    path = tmp_path / "cli.toml"
    path.write_text(
        "[cli]\n"
        f'base_url = "{BASE_URL}/"\n'
        f'credential = "{CREDENTIAL}"\n'
        "api_version = 3\n"
        "verify_ssl = true\n"
        "timeout = 45.0\n"
    )
    return str(path)
