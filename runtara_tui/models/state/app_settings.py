"""Application settings models."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from runtara_tui.constants.defaults import (
    REFRESH_INTERVAL_DEFAULT,
    SERVER_DEFAULT,
    SKIP_CERT_VERIFICATION_DEFAULT,
)
from runtara_tui.constants.limits import (
    LIST_LIMIT_DEFAULT,
    LIST_LIMIT_MAX,
    REFRESH_INTERVAL_MIN,
)
from runtara_tui.constants.timeouts import CONNECT_TIMEOUT, REQUEST_TIMEOUT

logger = logging.getLogger(__name__)


class AppSettings(BaseModel):
    """Application settings model with validation."""

    model_config = ConfigDict(populate_by_name=True)

    # Connection
    server: str = SERVER_DEFAULT
    skip_cert_verification: bool = SKIP_CERT_VERIFICATION_DEFAULT
    connect_timeout: float = CONNECT_TIMEOUT
    request_timeout: float = REQUEST_TIMEOUT

    # Scope
    tenant_id: str | None = None

    # Refresh
    refresh_interval: float = REFRESH_INTERVAL_DEFAULT  # seconds
    list_limit: int = LIST_LIMIT_DEFAULT

    @field_validator("server")
    @classmethod
    def _validate_server(cls, value: str) -> str:
        host, sep, port = value.strip().rpartition(":")
        if not sep or not host or not port.isdigit() or not 0 < int(port) < 65536:
            raise ValueError(f"server must be HOST:PORT, got {value!r}")
        return value.strip()

    @field_validator("tenant_id")
    @classmethod
    def _normalize_tenant(cls, value: str | None) -> str | None:
        if value is None:
            return None
        return value.strip() or None

    @field_validator("refresh_interval")
    @classmethod
    def _validate_refresh_interval(cls, value: float) -> float:
        if value < REFRESH_INTERVAL_MIN:
            raise ValueError(
                f"refresh interval must be at least {REFRESH_INTERVAL_MIN}s"
            )
        return value

    @field_validator("connect_timeout", "request_timeout")
    @classmethod
    def _validate_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("timeouts must be positive")
        return value

    @field_validator("list_limit")
    @classmethod
    def _validate_list_limit(cls, value: int) -> int:
        if not 0 < value <= LIST_LIMIT_MAX:
            raise ValueError(f"list limit must be between 1 and {LIST_LIMIT_MAX}")
        return value

    @property
    def base_url(self) -> str:
        return f"https://{self.server}"


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigLoadError(ConfigError):
    """Raised when settings fail to load."""


class ConfigManager:
    """Loads settings from an optional YAML file merged with overrides."""

    @staticmethod
    def read_file(path: Path) -> dict[str, Any]:
        """Read a YAML settings mapping from ``path``."""
        try:
            with path.open(encoding="utf-8") as handle:
                content = yaml.safe_load(handle)
        except (OSError, yaml.YAMLError) as e:
            raise ConfigLoadError(f"Cannot read config file {path}: {e}") from e
        if content is None:
            return {}
        if not isinstance(content, dict):
            raise ConfigLoadError(f"Config file {path} must contain a mapping")
        return content

    @classmethod
    def load(
        cls,
        path: Path | None = None,
        overrides: dict[str, Any] | None = None,
    ) -> AppSettings:
        """Build settings from defaults, then the config file, then overrides.

        ``None`` override values are ignored so that unset CLI options do not
        mask values from the config file.
        """
        data: dict[str, Any] = {}
        if path is not None:
            data.update(cls.read_file(path))
            logger.debug(f"Loaded settings from {path}")
        for key, value in (overrides or {}).items():
            if value is not None:
                data[key] = value
        try:
            return AppSettings.model_validate(data)
        except ValidationError as e:
            raise ConfigLoadError(str(e)) from e


__all__ = [
    "AppSettings",
    "ConfigError",
    "ConfigLoadError",
    "ConfigManager",
]
