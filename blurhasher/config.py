"""Configuration loading and validation using Pydantic models."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from .components import DEFAULT_COMPONENTS_X, DEFAULT_COMPONENTS_Y, MAX_COMPONENTS, MIN_COMPONENTS
from .errors import ConfigError

CONFIG_ENV_VAR = "BLURHASHER_CONFIG"


class EncoderConfig(BaseModel):
    default_components_x: int = Field(
        DEFAULT_COMPONENTS_X,
        ge=MIN_COMPONENTS,
        le=MAX_COMPONENTS,
        description="X components used when neither -x nor -y is given.",
    )
    default_components_y: int = Field(
        DEFAULT_COMPONENTS_Y,
        ge=MIN_COMPONENTS,
        le=MAX_COMPONENTS,
        description="Y components used when neither -x nor -y is given.",
    )


class FetchConfig(BaseModel):
    fetch_timeout_s: Optional[float] = Field(
        None,
        gt=0.0,
        description="Network timeout in seconds; unset blocks until the server answers.",
    )
    user_agent: str = Field("blurhasher")
    follow_redirects: bool = Field(True)


class LoggingConfig(BaseModel):
    level: str = Field("WARNING")
    log_dir: Optional[Path] = Field(
        None, description="Directory for the rotating log file; unset disables it."
    )


class AppConfig(BaseModel):
    encoder: EncoderConfig = EncoderConfig()
    fetch: FetchConfig = FetchConfig()
    logging: LoggingConfig = LoggingConfig()


def resolve_config_path(path: Path | str | None = None) -> Path | None:
    if path:
        return Path(path)
    env_value = os.environ.get(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value)
    return None


def load_config(path: Path | str | None = None) -> AppConfig:
    """Load YAML configuration from disk, falling back to defaults."""

    config_path = resolve_config_path(path)
    if config_path is None:
        return AppConfig()
    try:
        with config_path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except OSError as exc:
        raise ConfigError(f"Cannot read config {config_path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc
    if data is None:
        return AppConfig()
    if not isinstance(data, dict):
        raise ConfigError("Config root must be a mapping")
    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config {config_path}: {exc}") from exc


__all__ = [
    "AppConfig",
    "CONFIG_ENV_VAR",
    "EncoderConfig",
    "FetchConfig",
    "LoggingConfig",
    "load_config",
    "resolve_config_path",
]
