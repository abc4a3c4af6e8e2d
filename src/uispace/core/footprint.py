"""Element footprints: the analyzer's per-element input.

A footprint describes how much of the canvas one opaque element hides.
Rounded corners cannot hide their corner pixels, so the footprint is
modelled as two bands through the element's unrounded interior: a
full-width horizontal band and a full-height vertical band.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..config import SpaceConfig, settings
from ..geometry.rect import Rect
from ..geometry.tolerance import approximately


@dataclass(frozen=True)
class Insets:
    """Per-edge distances, e.g. element margins."""

    left: float = 0.0
    top: float = 0.0
    right: float = 0.0
    bottom: float = 0.0


@dataclass(frozen=True)
class CornerRadii:
    """Per-corner border radii. Negative values are treated as 0."""

    top_left: float = 0.0
    top_right: float = 0.0
    bottom_right: float = 0.0
    bottom_left: float = 0.0


@dataclass(frozen=True)
class ElementFootprint:
    """Occlusion footprint of one visible, opaque element."""

    max_bounds: Rect
    horizontal_band: Rect
    vertical_band: Rect
    label: str | None = None

    @classmethod
    def from_rect(cls, rect: Rect, label: str | None = None) -> ElementFootprint:
        """Footprint of a square-cornered element: all three rects are equal."""
        return cls(max_bounds=rect, horizontal_band=rect, vertical_band=rect, label=label)

    @classmethod
    def from_element(
        cls,
        world_bound: Rect,
        margins: Insets = Insets(),
        radii: CornerRadii = CornerRadii(),
        label: str | None = None,
    ) -> ElementFootprint:
        """Derive the bands from an element's world box, margins and radii.

        The world box shrinks by the margins to give ``max_bounds``. The
        inner box shrinks further on each edge by the larger radius of
        the two corners on that edge. If the radii exceed the element's
        size on an axis, that inner axis collapses to its midpoint.
        """
        max_bounds = Rect.min_max(
            world_bound.x_min + margins.left,
            world_bound.y_min + margins.top,
            world_bound.x_max - margins.right,
            world_bound.y_max - margins.bottom,
        )

        tl = max(0.0, radii.top_left)
        tr = max(0.0, radii.top_right)
        br = max(0.0, radii.bottom_right)
        bl = max(0.0, radii.bottom_left)

        inner_x = _shrink(max_bounds.x_min, max_bounds.x_max, max(bl, tl), max(tr, br))
        inner_y = _shrink(max_bounds.y_min, max_bounds.y_max, max(tl, tr), max(bl, br))

        horizontal = Rect(max_bounds.x_min, inner_y[0], max_bounds.x_max, inner_y[1])
        vertical = Rect(inner_x[0], max_bounds.y_min, inner_x[1], max_bounds.y_max)
        return cls(
            max_bounds=max_bounds,
            horizontal_band=horizontal,
            vertical_band=vertical,
            label=label,
        )

    @property
    def is_unrounded(self) -> bool:
        """True if both bands are the same rect."""
        return self.horizontal_band == self.vertical_band


def _shrink(low: float, high: float, inset_low: float, inset_high: float) -> tuple[float, float]:
    new_low = low + inset_low
    new_high = high - inset_high
    if new_low > new_high:
        new_low = new_high = (new_low + new_high) * 0.5
    return new_low, new_high


@dataclass(frozen=True)
class ElementSnapshot:
    """Host-agnostic snapshot of one UI element, as read from a layout pass.

    ``parent`` links to the enclosing element so effective opacity can be
    resolved over all ancestors.
    """

    name: str | None
    world_bound: Rect
    visible: bool = True
    opacity: float = 1.0
    background_alpha: float = 1.0
    margins: Insets = Insets()
    radii: CornerRadii = CornerRadii()
    parent: ElementSnapshot | None = None

    def ancestors_and_self(self) -> Iterable[ElementSnapshot]:
        element: ElementSnapshot | None = self
        while element is not None:
            yield element
            element = element.parent

    def is_occluder(self, config: SpaceConfig | None = None) -> bool:
        """Visible, larger than the insignificance threshold and fully opaque."""
        config = config or settings
        return (
            self.visible
            and self.world_bound.area > config.insignificant_area
            and all(approximately(e.opacity, 1.0, config) for e in self.ancestors_and_self())
            and approximately(self.background_alpha, 1.0, config)
        )

    def to_footprint(self) -> ElementFootprint:
        return ElementFootprint.from_element(
            self.world_bound, margins=self.margins, radii=self.radii, label=self.name,
        )


def select_footprints(
    snapshots: Iterable[ElementSnapshot],
    config: SpaceConfig | None = None,
) -> list[ElementFootprint]:
    """Footprints of every snapshot that hides what is behind it."""
    return [s.to_footprint() for s in snapshots if s.is_occluder(config)]
