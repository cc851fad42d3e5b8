"""Compute BlurHash strings for images named by a local path or a URL."""

from __future__ import annotations

from .classify import (
    Classification,
    SourceMode,
    classify_source,
    looks_like_local_path,
    looks_like_url,
)
from .components import ComponentCounts, validate_components
from .config import AppConfig, load_config
from .errors import (
    BlurhasherError,
    ComponentsError,
    ConfigError,
    EncodeFailure,
    LoadError,
    MismatchedComponents,
    OutOfRangeComponents,
)
from .logging_utils import configure_logging, logger

# Silent as a library until configure_logging() installs sinks.
logger.disable(__name__)

__version__ = "0.3.0"

__all__ = [
    "AppConfig",
    "BlurhasherError",
    "Classification",
    "ComponentCounts",
    "ComponentsError",
    "ConfigError",
    "EncodeFailure",
    "LoadError",
    "MismatchedComponents",
    "OutOfRangeComponents",
    "SourceMode",
    "__version__",
    "classify_source",
    "configure_logging",
    "load_config",
    "looks_like_local_path",
    "looks_like_url",
    "validate_components",
]
