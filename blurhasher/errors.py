"""Error types raised while resolving, loading and encoding an image."""

from __future__ import annotations


class BlurhasherError(RuntimeError):
    """Base error for the blurhasher pipeline."""


class ComponentsError(BlurhasherError, ValueError):
    """Component counts rejected before any I/O."""


class MismatchedComponents(ComponentsError):
    """Only one of the x/y component counts was supplied."""


class OutOfRangeComponents(ComponentsError):
    """A component count falls outside 1-9."""


class LoadError(BlurhasherError):
    """The image could not be fetched, read or decoded."""


class EncodeFailure(BlurhasherError):
    """The encoder rejected the decoded image."""


class ConfigError(BlurhasherError):
    """Invalid or unreadable configuration file."""
