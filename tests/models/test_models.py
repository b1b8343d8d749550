"""
Tests for pydantic models.
"""

import pytest
from pydantic import ValidationError

from artifactory_client.models import (
    Checksums,
    ClientSettings,
    CliContext,
    DeployResponse,
    DownloadResult,
    FileInfoResponse,
    TransferRequest,
    VersionResponse,
)

from conftest import BASE_URL, CREDENTIAL, EMPTY_MD5


class TestApiModels:
    """Test Artifactory API response models."""

    def test_version_response(self):
        """Test VersionResponse keeps unknown fields."""
        version = VersionResponse.model_validate({"version": "7.55.0", "revision": "1", "extra": "kept"})

        assert version.version == "7.55.0"
        assert version.addons == []
        assert version.model_extra == {"extra": "kept"}

    def test_version_response_requires_version(self):
        """Test a document without version is rejected."""
        with pytest.raises(ValidationError):
            VersionResponse.model_validate({"revision": "1"})

    def test_file_info_aliases(self, mock_file_info):
        """Test camelCase server fields map to attributes."""
        info = FileInfoResponse.model_validate(mock_file_info())

        assert info.md5 == EMPTY_MD5
        assert info.created_by == "admin"
        assert info.mime_type == "application/java-archive"
        assert info.original_checksums.md5 == EMPTY_MD5
        assert info.size == "0"

    def test_file_info_requires_checksums(self):
        """Test file info without checksums is rejected."""
        with pytest.raises(ValidationError):
            FileInfoResponse.model_validate({"repo": "libs-release"})

    def test_file_info_md5_missing(self):
        """Test md5 is None when the server reports only other checksums."""
        info = FileInfoResponse.model_validate({"checksums": {"sha1": "abc"}})

        assert info.md5 is None

    def test_deploy_response_to_dict(self, mock_deploy_response):
        """Test to_dict uses server field names and drops empty values."""
        deployed = DeployResponse.model_validate(mock_deploy_response)
        data = deployed.to_dict()

        assert data["downloadUri"] == mock_deploy_response["downloadUri"]
        assert data["createdBy"] == "admin"
        assert "originalChecksums" not in data

    def test_checksums_optional(self):
        """Test every checksum is optional."""
        assert Checksums().md5 is None


class TestTransferModels:
    """Test transfer models."""

    @pytest.mark.parametrize("remote_path", ["a/b.jar", "/a/b.jar", "///a/b.jar"])
    def test_transfer_request_strips_leading_slashes(self, remote_path):
        """Test remote paths never keep a leading slash."""
        request = TransferRequest(repo_key="libs", remote_path=remote_path, local_path="b.jar")

        assert request.remote_path == "a/b.jar"
        assert request.artifact_path == "libs/a/b.jar"
        assert request.force_upload is False
        assert request.check_checksum is False

    def test_transfer_request_is_frozen(self):
        """Test a transfer request cannot be modified."""
        request = TransferRequest(repo_key="libs", remote_path="a.jar", local_path="a.jar")

        with pytest.raises(ValidationError):
            request.force_upload = True

    def test_transfer_request_rejects_extra_fields(self):
        """Test unknown fields are rejected."""
        with pytest.raises(ValidationError):
            TransferRequest(repo_key="libs", remote_path="a.jar", local_path="a.jar", unknown=1)

    def test_download_result_verified(self):
        """Test verified reflects whether a checksum was checked."""
        assert DownloadResult(destination="a", checksum=EMPTY_MD5, message="ok").verified
        assert not DownloadResult(destination="a", message="ok").verified


class TestContextModels:
    """Test settings and CLI context models."""

    def test_client_settings_defaults(self):
        """Test ClientSettings defaults."""
        settings = ClientSettings(base_url=f"{BASE_URL}/", credential=CREDENTIAL)

        assert settings.base_url == BASE_URL
        assert settings.api_version == 4
        assert settings.context == "artifactory"
        assert settings.verify_ssl is False
        assert settings.timeout == 120.0

    def test_client_settings_empty_base_url(self):
        """Test a base URL of only slashes is rejected."""
        with pytest.raises(ValidationError):
            ClientSettings(base_url="///", credential=CREDENTIAL)

    def test_client_settings_timeout_positive(self):
        """Test the timeout must be positive."""
        with pytest.raises(ValidationError):
            ClientSettings(base_url=BASE_URL, credential=CREDENTIAL, timeout=0)

    def test_client_settings_context_slashes(self):
        """Test the context is stored without slashes."""
        settings = ClientSettings(base_url=BASE_URL, credential=CREDENTIAL, context="/ctx/")

        assert settings.context == "ctx"

    def test_cli_context_defaults(self):
        """Test CliContext defaults to no overrides."""
        context = CliContext()

        assert context.config is None
        assert context.verify_ssl is None
        assert context.detect_api is False
        assert context.debug == 0
