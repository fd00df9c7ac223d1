"""Settings file loading for humanize-time."""
from __future__ import annotations

import logging
import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, Field, ValidationError

from .local_time import FixedOffset, LocalTimeConverter, SystemLocalTime

logger = logging.getLogger(__name__)

APP_NAME = "humanize-time"
CONFIG_ENV_VAR = "HUMANIZE_TIME_CONFIG"


class ConfigError(Exception):
    """Raised when a config file exists but cannot be read or validated."""


def _get_xdg_config_home() -> Path:
    if xdg_config := os.environ.get("XDG_CONFIG_HOME"):
        return Path(xdg_config)
    return Path.home() / ".config"


class Settings(BaseModel):
    convert_to_local: bool = False
    precise: bool = False
    # Seconds east of UTC; overrides the system time zone when set
    utc_offset: int | None = Field(default=None, ge=-14 * 3600, le=14 * 3600)
    refresh_interval: float = Field(default=1.0, gt=0)


class Config(BaseModel):
    settings: Settings = Settings()


def _get_config_path() -> Path:
    return _get_xdg_config_home() / APP_NAME / "config.toml"


def resolve_config_path(cli_arg: Path | None = None) -> Path:
    """Pick the config path: CLI argument, then env var, then the XDG default."""
    if cli_arg:
        return cli_arg.expanduser().resolve()
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        return Path(env_path).expanduser().resolve()
    return _get_config_path()


def load_config(config_path: Path | None = None) -> Config:
    path = config_path or _get_config_path()
    if not path.exists():
        logger.debug("No config file at %s, using defaults", path)
        return Config()
    try:
        with path.open("rb") as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Failed to read config {path}: {exc}") from exc
    try:
        return Config.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {path}: {exc}") from exc


def build_converter(settings: Settings) -> LocalTimeConverter:
    if settings.utc_offset is not None:
        return FixedOffset(settings.utc_offset)
    return SystemLocalTime()
