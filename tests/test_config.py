"""Tests for configuration loading."""

from __future__ import annotations

import pytest

from src.core.config import load_config, resolve_config_dir
from src.core.errors import ConfigError
from src.core.models import HttpRequestConfig

ENV_VARS = (
    "COMMON_CLI_CONNECT_TIMEOUT",
    "COMMON_CLI_READ_TIMEOUT",
    "COMMON_CLI_VERIFY_SSL",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Unset config variables and remove anything a .env file sets during the test."""
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


class TestLoadConfig:
    def test_missing_directory_uses_defaults(self, tmp_path):
        config = load_config(tmp_path / "absent")
        print(f"\n OUTPUT: {config}")
        assert config.http == HttpRequestConfig.DEFAULT
        assert config.log_level == "INFO"

    def test_config_dir_must_be_a_directory(self, tmp_path):
        not_a_dir = tmp_path / "file"
        not_a_dir.write_text("x", encoding="utf-8")
        with pytest.raises(ConfigError):
            resolve_config_dir(not_a_dir)

    def test_yaml_values(self, tmp_path):
        (tmp_path / "config.yaml").write_text(
            "log_level: debug\n"
            "http:\n"
            "  connect_timeout: 1000\n"
            "  read_timeout: 2000\n"
            "  verify_ssl_cert: false\n",
            encoding="utf-8",
        )
        config = load_config(tmp_path)
        assert config.http == HttpRequestConfig(1000, 2000, False)
        assert config.log_level == "DEBUG"
        assert config.config_dir == tmp_path.resolve()

    def test_env_overrides_yaml(self, tmp_path, monkeypatch):
        (tmp_path / "config.yaml").write_text("http:\n  read_timeout: 2000\n", encoding="utf-8")
        monkeypatch.setenv("COMMON_CLI_READ_TIMEOUT", "9000")
        monkeypatch.setenv("COMMON_CLI_VERIFY_SSL", "no")
        config = load_config(tmp_path)
        assert config.http.read_timeout == 9000
        assert config.http.verify_ssl_cert is False

    def test_dotenv_file_is_loaded(self, tmp_path):
        (tmp_path / ".env").write_text("COMMON_CLI_CONNECT_TIMEOUT=4321\n", encoding="utf-8")
        config = load_config(tmp_path)
        assert config.http.connect_timeout == 4321

    def test_empty_yaml_file(self, tmp_path):
        (tmp_path / "config.yaml").write_text("", encoding="utf-8")
        assert load_config(tmp_path).http == HttpRequestConfig.DEFAULT

    @pytest.mark.parametrize(
        "content",
        [
            "- just\n- a list\n",
            "http: [1, 2]\n",
            "http:\n  connect_timeout: soon\n",
            "http:\n  verify_ssl_cert: maybe\n",
            "http:\n  read_timeout: -5\n",
            "http: {unclosed\n",
        ],
    )
    def test_invalid_config(self, tmp_path, content):
        (tmp_path / "config.yaml").write_text(content, encoding="utf-8")
        with pytest.raises(ConfigError):
            load_config(tmp_path)
