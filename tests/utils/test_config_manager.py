"""Tests for ConfigManager class."""

from pathlib import Path

import pytest

from artifactory_client.utils.config_manager import ConfigManager, encode_credential

from conftest import BASE_URL, CREDENTIAL


class TestConfigManagerInit:
    """Tests for ConfigManager initialization."""

    def test_init_with_path(self):
        """Test ConfigManager initialization with explicit path."""
        manager = ConfigManager("/tmp/test_config.toml")

        assert manager.config_path == Path("/tmp/test_config.toml")
        assert manager._config is None

    def test_init_without_path(self):
        """Test ConfigManager initialization with default path."""
        manager = ConfigManager()

        assert manager.config_path == Path("~/.config/artifactory/cli.toml").expanduser()


class TestConfigManagerLoad:
    """Tests for ConfigManager.load()."""

    def test_load_file_not_found(self, tmp_path):
        """Test load() raises FileNotFoundError when file doesn't exist."""
        config_path = tmp_path / "nonexistent.toml"

        with pytest.raises(FileNotFoundError) as exc_info:
            ConfigManager(str(config_path)).load()

        assert str(config_path) in str(exc_info.value)

    def test_load_invalid_toml(self, tmp_path):
        """Test load() raises ValueError for invalid TOML."""
        config_path = tmp_path / "bad.toml"
        config_path.write_text("[cli\nbase_url = ")

        with pytest.raises(ValueError, match="Invalid TOML"):
            ConfigManager(str(config_path)).load()

    def test_load_is_cached(self, temp_config_file):
        """Test a loaded configuration is reused."""
        manager = ConfigManager(temp_config_file)

        assert manager.load() is manager.load()

    def test_reload(self, temp_config_file):
        """Test reload() reads the file again."""
        manager = ConfigManager(temp_config_file)
        manager.load()
        Path(temp_config_file).write_text('[cli]\nbase_url = "https://other.example.com"\n')

        manager.reload()

        assert manager.get("cli.base_url") == "https://other.example.com"


class TestConfigManagerAccess:
    """Tests for get, get_section and has_key."""

    def test_get_nested(self, temp_config_file):
        """Test dot notation lookups."""
        manager = ConfigManager(temp_config_file)

        assert manager.get("cli.api_version") == 3
        assert manager.get("cli.missing", "default") == "default"
        assert manager.get("missing.key") is None

    def test_get_section(self, temp_config_file):
        """Test a whole section is returned."""
        section = ConfigManager(temp_config_file).get_section("cli")

        assert section["credential"] == CREDENTIAL
        assert ConfigManager(temp_config_file).get_section("missing") == {}

    def test_has_key(self, temp_config_file, tmp_path):
        """Test key existence checks."""
        assert ConfigManager(temp_config_file).has_key("cli.timeout")
        assert not ConfigManager(temp_config_file).has_key("cli.nothing")
        assert not ConfigManager(str(tmp_path / "missing.toml")).has_key("cli.timeout")


class TestClientSettings:
    """Tests for ConfigManager.client_settings()."""

    def test_client_settings(self, temp_config_file):
        """Test the [cli] section becomes validated settings."""
        settings = ConfigManager(temp_config_file).client_settings()

        assert settings.base_url == BASE_URL
        assert settings.credential == CREDENTIAL
        assert settings.api_version == 3
        assert settings.verify_ssl is True
        assert settings.timeout == 45.0

    def test_username_and_password_encoded(self, tmp_path):
        """Test username and password are encoded into a credential."""
        config_path = tmp_path / "cli.toml"
        config_path.write_text(f'[cli]\nbase_url = "{BASE_URL}"\nusername = "admin"\npassword = "password"\n')

        settings = ConfigManager(str(config_path)).client_settings()

        assert settings.credential == CREDENTIAL

    def test_missing_required_values(self, tmp_path):
        """Test a section without a credential raises ValueError."""
        config_path = tmp_path / "cli.toml"
        config_path.write_text(f'[cli]\nbase_url = "{BASE_URL}"\n')

        with pytest.raises(ValueError, match="Invalid \\[cli\\] section"):
            ConfigManager(str(config_path)).client_settings()


def test_encode_credential():
    """Test basic-auth credential encoding."""
    assert encode_credential("admin", "password") == CREDENTIAL
