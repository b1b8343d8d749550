"""Tests for path utilities."""

import os

import pytest

from artifactory_client.utils import (
    destination_directory,
    is_remote_source,
    normalize_remote_path,
    remove_partial_file,
)


class TestNormalizeRemotePath:
    """Tests for normalize_remote_path."""

    @pytest.mark.parametrize("leading", range(0, 6))
    def test_leading_slashes_removed(self, leading):
        """Test N leading slashes always become zero."""
        normalized = normalize_remote_path("/" * leading + "org/app/app.jar")

        assert normalized == "org/app/app.jar"
        assert not normalized.startswith("/")

    def test_inner_and_trailing_slashes_kept(self):
        """Test only leading slashes are touched."""
        assert normalize_remote_path("/org//app/") == "org//app/"

    def test_empty_path(self):
        """Test an empty path stays empty."""
        assert normalize_remote_path("") == ""


class TestIsRemoteSource:
    """Tests for is_remote_source."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("http://mirror.example.com/a.jar", True),
            ("https://mirror.example.com/a.jar", True),
            ("HTTPS://MIRROR.EXAMPLE.COM/A.JAR", True),
            ("./build/a.jar", False),
            ("/tmp/a.jar", False),
            ("ftp://mirror.example.com/a.jar", False),
        ],
    )
    def test_is_remote_source(self, source, expected):
        """Test only http(s) URLs count as remote sources."""
        assert is_remote_source(source) is expected


class TestDestinationDirectory:
    """Tests for destination_directory."""

    def test_absolute_destination(self, tmp_path):
        """Test the parent of an absolute destination."""
        assert destination_directory(str(tmp_path / "a.jar")) == str(tmp_path)

    def test_bare_filename(self):
        """Test a bare filename resolves to the working directory."""
        assert destination_directory("a.jar") == os.getcwd()


class TestRemovePartialFile:
    """Tests for remove_partial_file."""

    def test_removes_existing_file(self, tmp_path):
        """Test an existing file is deleted."""
        path = tmp_path / "partial.bin"
        path.write_bytes(b"partial")

        remove_partial_file(str(path))

        assert not path.exists()

    def test_missing_file_is_ignored(self, tmp_path):
        """Test removing a file that was never created does nothing."""
        remove_partial_file(str(tmp_path / "never-created.bin"))
