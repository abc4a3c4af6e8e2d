"""Geometric primitives for space analysis."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..display_utils import format_point, format_rect
from .tolerance import approximately

if TYPE_CHECKING:
    from ..config import SpaceConfig


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in canvas space (y grows downwards).

    Stored as min/max corners so edges derived from other rectangles
    compare exactly. Construction normalizes coordinate order, so
    ``x_min <= x_max`` and ``y_min <= y_max`` always hold.
    """

    x_min: float
    y_min: float
    x_max: float
    y_max: float

    def __post_init__(self) -> None:
        if self.x_min > self.x_max:
            x_min, x_max = self.x_max, self.x_min
            object.__setattr__(self, "x_min", x_min)
            object.__setattr__(self, "x_max", x_max)
        if self.y_min > self.y_max:
            y_min, y_max = self.y_max, self.y_min
            object.__setattr__(self, "y_min", y_min)
            object.__setattr__(self, "y_max", y_max)

    @classmethod
    def min_max(cls, x_min: float, y_min: float, x_max: float, y_max: float) -> Rect:
        """Create a Rect from its corner coordinates (any order)."""
        return cls(x_min, y_min, x_max, y_max)

    @classmethod
    def from_xywh(cls, x: float, y: float, width: float, height: float) -> Rect:
        """Create a Rect from a position and a size."""
        return cls(x, y, x + width, y + height)

    @property
    def x(self) -> float:
        return self.x_min

    @property
    def y(self) -> float:
        return self.y_min

    @property
    def width(self) -> float:
        return self.x_max - self.x_min

    @property
    def height(self) -> float:
        return self.y_max - self.y_min

    @property
    def center(self) -> tuple[float, float]:
        return ((self.x_min + self.x_max) * 0.5, (self.y_min + self.y_max) * 0.5)

    @property
    def area(self) -> float:
        return self.width * self.height

    def has_zero_area(self, config: SpaceConfig | None = None) -> bool:
        """True if width or height is approximately zero."""
        return approximately(self.width, 0.0, config) or approximately(self.height, 0.0, config)

    def overlaps(self, other: Rect) -> bool:
        """Strict overlap test: rectangles sharing only an edge do not overlap."""
        return (
            other.x_max > self.x_min
            and other.x_min < self.x_max
            and other.y_max > self.y_min
            and other.y_min < self.y_max
        )

    def contains(self, px: float, py: float) -> bool:
        return self.x_min <= px <= self.x_max and self.y_min <= py <= self.y_max

    def contains_rect(self, other: Rect) -> bool:
        """True if other lies inside this rect (edges inclusive)."""
        return (
            other.x_min >= self.x_min
            and other.x_max <= self.x_max
            and other.y_min >= self.y_min
            and other.y_max <= self.y_max
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}

    def __str__(self) -> str:
        return format_rect(self.x, self.y, self.width, self.height)


@dataclass(frozen=True)
class NamedRect:
    """A rectangle carrying a label, e.g. the UI element it came from.

    An empty label defaults to the rectangle's center, e.g. ``"(5.00, 5.00)"``.
    """

    rect: Rect
    name: str | None = None

    def __post_init__(self) -> None:
        if not self.name:
            object.__setattr__(self, "name", format_point(*self.rect.center))

    def to_dict(self) -> dict:
        return {"name": self.name, **self.rect.to_dict()}

    def __str__(self) -> str:
        return f"NamedRect <{self.name}>: {self.rect}"
