"""uispace: split a UI canvas into covered (positive) and uncovered (negative) space."""

from ._version import __version__
from .config import SpaceConfig, settings
from .geometry import Rect, NamedRect, Side, Axis
from .core.groups import RectGroup, NamedRectGroup, EMPTY
from .core.footprint import (
    ElementFootprint,
    ElementSnapshot,
    Insets,
    CornerRadii,
    select_footprints,
)
from .analysis import SpaceAnalyzer, SpaceReduction, SpaceNotifier
from .viewport import ViewportApplier, flip_y


def analyze(canvas, elements, config=None):
    """Reduce one snapshot to positive and negative space.

    Parameters
    ----------
    canvas : Rect
        Full bounds of the UI surface.
    elements : iterable of ElementFootprint
        One footprint per visible, opaque element.
    config : SpaceConfig, optional
        Thresholds. Defaults to ``uispace.settings``.

    Returns
    -------
    SpaceReduction
        ``.positive`` and ``.negative`` RectGroups.
    """
    from .core.validation import validate_footprints, validate_rect

    canvas = validate_rect(canvas, "canvas")
    footprints = validate_footprints(elements)
    return SpaceAnalyzer(config).reduce(canvas, footprints)


__all__ = [
    "__version__",
    "analyze",
    "SpaceConfig",
    "settings",
    "Rect",
    "NamedRect",
    "Side",
    "Axis",
    "RectGroup",
    "NamedRectGroup",
    "EMPTY",
    "ElementFootprint",
    "ElementSnapshot",
    "Insets",
    "CornerRadii",
    "select_footprints",
    "SpaceAnalyzer",
    "SpaceReduction",
    "SpaceNotifier",
    "ViewportApplier",
    "flip_y",
]
