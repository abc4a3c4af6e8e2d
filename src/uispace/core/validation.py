"""Input validation with clear error messages for host integrations."""

from __future__ import annotations

import math
from typing import Any

from ..geometry.rect import Rect
from .footprint import ElementFootprint


def validate_rect(rect: Any, name: str = "rect") -> Rect:
    """Validate that rect is a Rect with finite coordinates.

    Returns the validated Rect (unchanged).
    """
    if not isinstance(rect, Rect):
        raise TypeError(
            f"{name} must be a Rect, got {type(rect).__name__}. "
            "Build one with Rect.from_xywh(x, y, width, height) "
            "or Rect.min_max(x_min, y_min, x_max, y_max)."
        )
    coords = (rect.x_min, rect.y_min, rect.x_max, rect.y_max)
    if not all(math.isfinite(c) for c in coords):
        raise ValueError(f"{name} has non-finite coordinates: {rect!r}")
    return rect


def validate_footprints(elements: Any) -> tuple[ElementFootprint, ...]:
    """Validate a sequence of ElementFootprint.

    Returns the footprints as a tuple so the caller can iterate twice.
    """
    if isinstance(elements, (str, bytes)) or not hasattr(elements, "__iter__"):
        raise TypeError(
            f"Expected a sequence of ElementFootprint, got {type(elements).__name__}."
        )
    footprints = tuple(elements)
    bad = [
        (i, type(e).__name__) for i, e in enumerate(footprints)
        if not isinstance(e, ElementFootprint)
    ]
    if bad:
        raise TypeError(
            f"All elements must be ElementFootprint. Found: {bad[:5]}"
            + (f" (and {len(bad) - 5} more)" if len(bad) > 5 else "")
            + ". Use ElementFootprint.from_rect or ElementFootprint.from_element."
        )
    for i, fp in enumerate(footprints):
        validate_rect(fp.max_bounds, f"elements[{i}].max_bounds")
        validate_rect(fp.horizontal_band, f"elements[{i}].horizontal_band")
        validate_rect(fp.vertical_band, f"elements[{i}].vertical_band")
    return footprints
