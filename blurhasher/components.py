"""Validation of the BlurHash component counts."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import MismatchedComponents, OutOfRangeComponents

MIN_COMPONENTS = 1
MAX_COMPONENTS = 9
DEFAULT_COMPONENTS_X = 4
DEFAULT_COMPONENTS_Y = 3


@dataclass(frozen=True)
class ComponentCounts:
    x: int
    y: int


def validate_components(
    x: int | None,
    y: int | None,
    *,
    default_x: int = DEFAULT_COMPONENTS_X,
    default_y: int = DEFAULT_COMPONENTS_Y,
) -> ComponentCounts:
    """Return the validated (x, y) pair.

    Both counts must be given together or not at all; when neither is given the
    defaults apply. Every resulting value must lie in 1-9 inclusive.
    """

    if (x is None) != (y is None):
        raise MismatchedComponents(
            "If specifying components, both -x and -y must be provided"
        )
    if x is None or y is None:
        x, y = default_x, default_y
    if not _in_range(x) or not _in_range(y):
        raise OutOfRangeComponents(
            f"The values of each component need to be {MIN_COMPONENTS}-{MAX_COMPONENTS} "
            f"(got x={x}, y={y})"
        )
    return ComponentCounts(x=x, y=y)


def _in_range(value: int) -> bool:
    return MIN_COMPONENTS <= value <= MAX_COMPONENTS
