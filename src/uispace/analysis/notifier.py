"""SpaceNotifier: cached analysis passes + change callbacks."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable

from ..config import SpaceConfig
from ..core.footprint import ElementFootprint
from ..core.groups import EMPTY, RectGroup
from ..core.validation import validate_footprints, validate_rect
from ..geometry.rect import NamedRect, Rect
from .analyzer import SpaceAnalyzer

logger = logging.getLogger(__name__)


# fn(group, canvas, normalized_bounds)
SpaceChangedCallback = Callable[[RectGroup, Rect, Rect], Any]


class SpaceNotifier:
    """Runs analysis passes and notifies callbacks when a space changes.

    Holds the last positive and negative groups and the last canvas.
    A callback fires only when its group differs structurally from the
    cached one, or on every pass when forced. Positive-space callbacks
    always run before negative-space callbacks.
    """

    def __init__(
        self,
        analyzer: SpaceAnalyzer | None = None,
        config: SpaceConfig | None = None,
    ) -> None:
        self._analyzer = analyzer or SpaceAnalyzer(config)
        self._last_known_canvas = Rect(0.0, 0.0, 0.0, 0.0)
        self._positive_space: RectGroup[NamedRect] = EMPTY
        self._negative_space: RectGroup[NamedRect] = EMPTY
        self._positive_callbacks: list[SpaceChangedCallback] = []
        self._negative_callbacks: list[SpaceChangedCallback] = []

    @property
    def last_known_canvas(self) -> Rect:
        return self._last_known_canvas

    @property
    def positive_space(self) -> RectGroup[NamedRect]:
        return self._positive_space

    @property
    def negative_space(self) -> RectGroup[NamedRect]:
        return self._negative_space

    def on_positive_space_changed(self, callback: SpaceChangedCallback) -> None:
        """Register a callback: fn(group, canvas, normalized_bounds)."""
        self._positive_callbacks.append(callback)

    def on_negative_space_changed(self, callback: SpaceChangedCallback) -> None:
        """Register a callback: fn(group, canvas, normalized_bounds)."""
        self._negative_callbacks.append(callback)

    def remove_callback(self, callback: SpaceChangedCallback) -> None:
        """Unregister a callback from both surfaces. Unknown callbacks are ignored."""
        for callbacks in (self._positive_callbacks, self._negative_callbacks):
            while callback in callbacks:
                callbacks.remove(callback)

    def analyze(
        self,
        canvas: Rect,
        elements: Iterable[ElementFootprint],
        force_notify: bool = False,
    ) -> tuple[RectGroup[NamedRect], RectGroup[NamedRect]]:
        """Run one pass, notify on change, and cache the result.

        Returns (positive_space, negative_space).
        """
        canvas = validate_rect(canvas, "canvas")
        footprints = validate_footprints(elements)

        reduction = self._analyzer.reduce(canvas, footprints)
        positive, negative = reduction.positive, reduction.negative
        positive_changed = force_notify or positive != self._positive_space
        negative_changed = force_notify or negative != self._negative_space

        # Cache is complete before any callback runs
        self._last_known_canvas = canvas
        self._positive_space = positive
        self._negative_space = negative

        if positive_changed:
            self._emit(self._positive_callbacks, positive, canvas, "positive")
        if negative_changed:
            self._emit(self._negative_callbacks, negative, canvas, "negative")
        return positive, negative

    @staticmethod
    def _emit(
        callbacks: list[SpaceChangedCallback],
        group: RectGroup[NamedRect],
        canvas: Rect,
        kind: str,
    ) -> None:
        normalized = group.normalized_bounds(canvas)
        logger.debug(
            "%s space changed: %d rects, normalized bounds %s",
            kind.capitalize(), len(group), normalized,
        )
        for cb in list(callbacks):
            cb(group, canvas, normalized)

    def __repr__(self) -> str:
        return (
            f"SpaceNotifier(positive={len(self._positive_space)}, "
            f"negative={len(self._negative_space)})"
        )
