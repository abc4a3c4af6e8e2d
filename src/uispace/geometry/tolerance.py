"""Float-tolerant comparison used on rectangle boundaries."""

from __future__ import annotations

import math

from ..config import SpaceConfig, settings


def approximately(a: float, b: float, config: SpaceConfig | None = None) -> bool:
    """True if a and b are equal within the configured tolerance.

    Relative to the larger magnitude, with ``abs_tol`` as a floor so values
    near zero compare sensibly. Tolerances come from config, or from the
    module-level ``settings`` when config is None.
    """
    config = config or settings
    return math.isclose(a, b, rel_tol=config.rel_tol, abs_tol=config.abs_tol)
