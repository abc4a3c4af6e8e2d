"""Axis-aligned rectangle geometry: value types, side flags and RectOps."""

from .rect import Rect, NamedRect
from .sides import Side, Axis
from .tolerance import approximately
from .ops import (
    overlaps_horizontally,
    overlaps_vertically,
    overlaps_or_touches_sides,
    touches_side_approximately,
    overlaps_or_touches_entirely,
    all_adjacent,
    intersect_slice_many,
    intersection,
    encapsulate,
    encapsulate_many,
    punch,
    normalize,
)

__all__ = [
    "Rect",
    "NamedRect",
    "Side",
    "Axis",
    "approximately",
    "overlaps_horizontally",
    "overlaps_vertically",
    "overlaps_or_touches_sides",
    "touches_side_approximately",
    "overlaps_or_touches_entirely",
    "all_adjacent",
    "intersect_slice_many",
    "intersection",
    "encapsulate",
    "encapsulate_many",
    "punch",
    "normalize",
]
