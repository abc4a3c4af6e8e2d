"""ViewportApplier: constrain camera viewports to negative space."""

from __future__ import annotations

import logging
from typing import Any, Iterable

from .core.groups import RectGroup
from .geometry.rect import Rect

logger = logging.getLogger(__name__)


def flip_y(normalized: Rect) -> Rect:
    """Convert a normalized rect from a top-left origin to a bottom-left origin.

    Space analysis uses y growing downwards; camera viewports usually
    grow upwards.
    """
    return Rect(normalized.x_min, 1.0 - normalized.y_max, normalized.x_max, 1.0 - normalized.y_min)


class ViewportApplier:
    """Assigns normalized negative-space bounds to viewports.

    A viewport is any object with a writable ``rect`` attribute. None
    entries are skipped. Use as a notifier callback, or call ``attach``.
    """

    def __init__(self, viewports: Iterable[Any] = ()) -> None:
        self.viewports: list[Any] = list(viewports)

    def __call__(self, group: RectGroup, canvas: Rect, normalized_bounds: Rect) -> None:
        if not self.viewports:
            return
        flipped = flip_y(normalized_bounds)
        applied = 0
        for viewport in self.viewports:
            if viewport is not None:
                viewport.rect = flipped
                applied += 1
        logger.debug("Applied viewport rect %s to %d viewports", flipped, applied)

    def attach(self, notifier) -> None:
        """Apply the notifier's current negative space, then follow its changes."""
        space = notifier.negative_space
        if not space.is_empty:
            canvas = notifier.last_known_canvas
            self(space, canvas, space.normalized_bounds(canvas))
        notifier.on_negative_space_changed(self)

    def detach(self, notifier) -> None:
        notifier.remove_callback(self)
