"""RectGroup: a rectangle collection bundled with its encapsulating bounds.

Immutable. Every analysis pass builds new groups; nothing is edited in place.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

import numpy as np
import pandas as pd

from ..geometry.ops import encapsulate_many, normalize
from ..geometry.rect import NamedRect, Rect

R = TypeVar("R", Rect, NamedRect)


def _as_rect(item: Union[Rect, NamedRect]) -> Rect:
    return item.rect if isinstance(item, NamedRect) else item


@dataclass(frozen=True)
class RectGroup(Generic[R]):
    """Rectangles (plain or named) plus the bounds that encapsulate them.

    For any non-empty group built with ``from_collection``, ``bounds`` is
    the union of every rect in ``collection``. The ``EMPTY`` group has zero
    bounds and no rects; check ``is_empty`` rather than relying on bounds.

    Equality is structural and order sensitive.
    """

    bounds: Rect
    collection: tuple[R, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.collection, tuple):
            object.__setattr__(self, "collection", tuple(self.collection))

    @classmethod
    def from_collection(cls, collection: Iterable[R]) -> RectGroup[R]:
        """Create a group whose bounds encapsulate the collection.

        Raises ValueError for an empty collection; use ``EMPTY`` instead.
        """
        items = tuple(collection)
        return cls(bounds=encapsulate_many(_as_rect(i) for i in items), collection=items)

    @classmethod
    def empty(cls) -> RectGroup:
        return EMPTY

    @property
    def rects(self) -> tuple[Rect, ...]:
        """The collection as plain Rects."""
        return tuple(_as_rect(i) for i in self.collection)

    @property
    def names(self) -> tuple[str | None, ...]:
        """Labels of named rects; None for plain rects."""
        return tuple(i.name if isinstance(i, NamedRect) else None for i in self.collection)

    @property
    def is_empty(self) -> bool:
        return len(self.collection) == 0

    @property
    def total_area(self) -> float:
        """Sum of rect areas (counts overlaps twice)."""
        if self.is_empty:
            return 0.0
        return float(np.sum([r.area for r in self.rects]))

    def normalized_bounds(self, canvas: Rect) -> Rect:
        """Bounds expressed relative to canvas (canvas -> (0, 0, 1, 1))."""
        return normalize(self.bounds, canvas)

    def to_array(self) -> np.ndarray:
        """(n, 4) float64 array of (x_min, y_min, x_max, y_max) rows."""
        if self.is_empty:
            return np.empty((0, 4), dtype=np.float64)
        return np.array(
            [(r.x_min, r.y_min, r.x_max, r.y_max) for r in self.rects],
            dtype=np.float64,
        )

    def to_frame(self) -> pd.DataFrame:
        """One row per rect, for tabular inspection of a pass."""
        coords = self.to_array()
        df = pd.DataFrame(coords, columns=["x_min", "y_min", "x_max", "y_max"])
        df.insert(0, "name", list(self.names))
        df["width"] = df["x_max"] - df["x_min"]
        df["height"] = df["y_max"] - df["y_min"]
        df["area"] = df["width"] * df["height"]
        return df

    def to_dict(self) -> dict:
        """Serialize for JSON transfer."""
        return {
            "bounds": self.bounds.to_dict(),
            "collection": [i.to_dict() for i in self.collection],
        }

    def __len__(self) -> int:
        return len(self.collection)

    def __iter__(self) -> Iterator[R]:
        return iter(self.collection)

    def __str__(self) -> str:
        return f"RectGroup: bounds = {self.bounds}\n{len(self.collection)} in collection"


NamedRectGroup = RectGroup[NamedRect]

EMPTY: RectGroup = RectGroup(bounds=Rect(0.0, 0.0, 0.0, 0.0))
