"""Configuration loader."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict

import yaml
from dotenv import load_dotenv

from .errors import ConfigError
from .models import HttpRequestConfig

LOGGER = logging.getLogger(__name__)

DEFAULT_CONFIG_DIR = Path("~/.common-cli").expanduser()
ENV_FILE_NAME = ".env"
CONFIG_FILE = "config.yaml"

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class Config:
    http: HttpRequestConfig = field(default_factory=lambda: HttpRequestConfig.DEFAULT)
    log_level: str = "INFO"
    config_dir: Path | None = None


def resolve_config_dir(config_dir: Path | str | None) -> Path:
    """Resolve the directory containing .env + config.yaml."""
    target = (
        Path(config_dir).expanduser() if config_dir else DEFAULT_CONFIG_DIR
    ).resolve()
    if target.exists() and not target.is_dir():
        raise ConfigError(f"Config directory {target} is not a directory")
    return target


def load_config(config_dir: Path | str | None = None) -> Config:
    """Load common-cli configuration from the provided or default directory."""
    root = resolve_config_dir(config_dir)
    _load_env_file(root / ENV_FILE_NAME)
    data = _load_config_file(root / CONFIG_FILE)

    http = _load_http(data.get("http") or {})
    log_level = str(os.getenv("LOG_LEVEL") or data.get("log_level") or "INFO").upper()
    return Config(http=http, log_level=log_level, config_dir=root)


def _load_env_file(path: Path) -> None:
    if not path.exists():
        LOGGER.debug("No .env file found at %s; relying on shell environment.", path)
        return
    load_dotenv(dotenv_path=path, override=False)


def _load_config_file(path: Path) -> Dict[str, Any]:
    if not path.exists():
        LOGGER.debug("No %s found at %s; using defaults.", CONFIG_FILE, path)
        return {}
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigError(f"Failed to read {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {path}: {exc}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Invalid {CONFIG_FILE} structure at {path}")
    return data


def _load_http(cfg: Any) -> HttpRequestConfig:
    if not isinstance(cfg, dict):
        raise ConfigError("http section must be a mapping")

    defaults = HttpRequestConfig.DEFAULT
    connect_timeout = _parse_int(
        os.getenv("COMMON_CLI_CONNECT_TIMEOUT", cfg.get("connect_timeout", defaults.connect_timeout)),
        "connect_timeout",
    )
    read_timeout = _parse_int(
        os.getenv("COMMON_CLI_READ_TIMEOUT", cfg.get("read_timeout", defaults.read_timeout)),
        "read_timeout",
    )
    verify = _parse_bool(
        os.getenv("COMMON_CLI_VERIFY_SSL", cfg.get("verify_ssl_cert", defaults.verify_ssl_cert)),
        "verify_ssl_cert",
    )
    return HttpRequestConfig(
        connect_timeout=connect_timeout,
        read_timeout=read_timeout,
        verify_ssl_cert=verify,
    )


def _parse_int(value: Any, name: str) -> int:
    if isinstance(value, bool):
        raise ConfigError(f"{name} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError) as exc:
        raise ConfigError(f"{name} must be an integer, got {value!r}") from exc


def _parse_bool(value: Any, name: str) -> bool:
    if isinstance(value, bool):
        return value
    lowered = str(value).strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ConfigError(f"{name} must be a boolean, got {value!r}")
