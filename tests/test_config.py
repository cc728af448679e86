"""
Tests for configuration loading
"""
import pytest

from src.utils.config import (
    ENV_OVERRIDES,
    Config,
    ConfigDefaults,
    describe_api_key,
    load_config,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without override variables"""
    for var_name in ENV_OVERRIDES.values():
        monkeypatch.delenv(var_name, raising=False)


class TestConfig:
    """Test configuration loading"""

    def test_defaults_without_file(self, tmp_path):
        """Test that a missing config file yields defaults"""
        config = load_config(str(tmp_path / "missing.yaml"))

        assert config.motion.api_key is None
        assert config.motion.base_url == "https://api.usemotion.com/v1"
        assert config.motion.timeout == 10.0
        assert config.server.port == 3000
        assert config.storage.preference_file == ConfigDefaults.PREFERENCE_FILE_DEFAULT
        assert config.client.proxy_url == "http://localhost:3000"
        assert config.logging.level == "INFO"

    def test_yaml_values(self, tmp_path):
        """Test values read from the YAML file"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(
            "motion:\n"
            "  base_url: https://motion.test/v1\n"
            "  timeout: 5\n"
            "server:\n"
            "  port: 8080\n"
            "storage:\n"
            "  preference_file: /var/lib/motion/default.json\n"
        )

        config = load_config(str(config_file))

        assert config.motion.base_url == "https://motion.test/v1"
        assert config.motion.timeout == 5.0
        assert config.server.port == 8080
        assert config.storage.preference_file == "/var/lib/motion/default.json"

    def test_placeholder_substitution(self, tmp_path, monkeypatch):
        """Test ${VAR} placeholders are replaced from the environment"""
        monkeypatch.setenv("CUSTOM_MOTION_KEY", "abc123")
        config_file = tmp_path / "config.yaml"
        config_file.write_text("motion:\n  api_key: ${CUSTOM_MOTION_KEY}\n")

        config = load_config(str(config_file))

        assert config.motion.api_key == "abc123"

    def test_unset_placeholder_uses_default(self, tmp_path):
        """Test an unset placeholder falls back to the model default"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("logging:\n  level: ${UNSET_LOG_LEVEL_FOR_TEST}\n")

        config = load_config(str(config_file))

        assert config.logging.level == "INFO"

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        """Test environment variables win over the YAML file"""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("server:\n  port: 8080\n")
        monkeypatch.setenv("PORT", "4000")
        monkeypatch.setenv("MOTION_API_KEY", "env-key")
        monkeypatch.setenv("DEFAULT_WORKSPACE_FILE", "/tmp/ws.json")

        config = load_config(str(config_file))

        assert config.server.port == 4000
        assert config.motion.api_key == "env-key"
        assert config.storage.preference_file == "/tmp/ws.json"

    def test_describe_api_key(self):
        """Test the key is described without being revealed"""
        assert describe_api_key(Config()) == "Not set"

        config = Config(motion={"api_key": "secret-key"})
        assert describe_api_key(config) == "Set (length: 10)"
        assert "secret" not in describe_api_key(config)
