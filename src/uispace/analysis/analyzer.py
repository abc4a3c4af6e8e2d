"""SpaceAnalyzer: reduce element footprints to positive and negative space."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass
from typing import Iterable

from ..config import SpaceConfig, settings
from ..core.footprint import ElementFootprint
from ..core.groups import EMPTY, RectGroup
from ..display_utils import format_point
from ..geometry.ops import punch
from ..geometry.rect import NamedRect, Rect

logger = logging.getLogger(__name__)

CANVAS_LABEL = "Canvas"


@dataclass(frozen=True)
class SpaceReduction:
    """Result of one analysis pass."""

    positive: RectGroup[NamedRect]
    negative: RectGroup[NamedRect]


class SpaceAnalyzer:
    """Partitions a canvas into UI-covered and uncovered rectangles.

    Positive space is the containment-reduced set of footprint bands.
    Negative space is what remains after punching every positive rect
    out of the canvas, ignoring slivers no larger than
    ``config.insignificant_area``.

    Stateless between calls; the same input always gives the same output.
    """

    def __init__(self, config: SpaceConfig | None = None) -> None:
        self._config = config or settings

    @property
    def config(self) -> SpaceConfig:
        return self._config

    def reduce(self, canvas: Rect, footprints: Iterable[ElementFootprint]) -> SpaceReduction:
        """Compute positive then negative space for one snapshot."""
        positive = self.reduce_positive_space(canvas, footprints)
        negative = self.reduce_negative_space(canvas, positive)
        return SpaceReduction(positive=positive, negative=negative)

    def reduce_positive_space(
        self,
        canvas: Rect,
        footprints: Iterable[ElementFootprint],
    ) -> RectGroup[NamedRect]:
        """Collect footprint bands, dropping any contained by another.

        Each band is skipped if an existing entry already contains it;
        otherwise entries it contains are removed and it is appended.
        The vertical band is only considered when it differs from the
        horizontal one.
        """
        config = self._config
        if canvas.has_zero_area(config):
            return EMPTY

        rects: list[NamedRect] = []
        for fp in footprints:
            if fp.max_bounds.has_zero_area(config) or not fp.max_bounds.overlaps(canvas):
                logger.debug("Skipping footprint %r outside canvas or without area", fp.label)
                continue

            label = fp.label or format_point(*fp.max_bounds.center)
            bands = [fp.horizontal_band]
            if not fp.is_unrounded:
                bands.append(fp.vertical_band)

            for band in bands:
                # Radii larger than the element collapse a band to a line
                if band.has_zero_area(config):
                    continue
                if any(entry.rect.contains_rect(band) for entry in rects):
                    continue
                rects = [entry for entry in rects if not band.contains_rect(entry.rect)]
                rects.append(NamedRect(band, label))

        if not rects:
            return EMPTY
        return RectGroup.from_collection(rects)

    def reduce_negative_space(
        self,
        canvas: Rect,
        positive: RectGroup[NamedRect],
    ) -> RectGroup[NamedRect]:
        """Punch every positive rect out of the canvas, breadth first.

        Each positive rect punches every fragment currently queued; only
        fragments above the insignificance threshold are kept.
        """
        config = self._config
        if positive.is_empty or positive.bounds.has_zero_area(config) or canvas.has_zero_area(config):
            return RectGroup(bounds=canvas, collection=(NamedRect(canvas, CANVAS_LABEL),))

        threshold = config.insignificant_area
        queue: deque[Rect] = deque([canvas])
        for hole in positive.rects:
            for _ in range(len(queue)):
                fragment = queue.popleft()
                queue.extend(p for p in punch(fragment, hole) if p.area > threshold)
            if not queue:
                break

        if not queue:
            logger.debug("Canvas %s fully covered by positive space", canvas)
            return EMPTY

        logger.debug("Punch queue contents:\n%s", "\n".join(str(r) for r in queue))
        negative = RectGroup.from_collection(NamedRect(r) for r in queue)
        logger.debug("Negative space bounds calculated to be: %s", negative.bounds)
        return negative
