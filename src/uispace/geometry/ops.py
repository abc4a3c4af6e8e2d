"""RectOps: predicates and operators over axis-aligned rectangles.

Pure functions, no state. Boundary comparisons that decide whether two
rectangles *touch* go through ``approximately``; containment and overlap
tests are exact.
"""

from __future__ import annotations

from collections.abc import Iterable

import numpy as np

from .rect import Rect
from .sides import SINGLE_SIDES, Axis, Side
from .tolerance import approximately


# Emission order of punch fragments: clockwise from the (x_min, y_min) corner
_PUNCH_SECTIONS = (
    Side.X0Y0,
    Side.Y_MIN,
    Side.X1Y0,
    Side.X_MAX,
    Side.X1Y1,
    Side.Y_MAX,
    Side.X0Y1,
    Side.X_MIN,
)


# --- Axis overlap ---

def _flatten_y(rect: Rect) -> Rect:
    half = rect.height * 0.5
    return Rect(rect.x_min, -half, rect.x_max, half)


def _flatten_x(rect: Rect) -> Rect:
    half = rect.width * 0.5
    return Rect(-half, rect.y_min, half, rect.y_max)


def overlaps_horizontally(a: Rect, b: Rect) -> bool:
    """True if the x intervals of a and b overlap, regardless of y."""
    return _flatten_y(a).overlaps(_flatten_y(b))


def overlaps_vertically(a: Rect, b: Rect) -> bool:
    """True if the y intervals of a and b overlap, regardless of x."""
    return _flatten_x(a).overlaps(_flatten_x(b))


def _axis_overlap(a: Rect, b: Rect) -> tuple[bool, bool]:
    return overlaps_horizontally(a, b), overlaps_vertically(a, b)


# --- Side classification ---

def _check_sides(sides: Side | int) -> Side:
    if int(sides) & ~int(Side.ALL):
        raise ValueError(
            f"Invalid side flags {int(sides)!r}. "
            f"Combine Side.X_MIN, Side.Y_MIN, Side.X_MAX and Side.Y_MAX."
        )
    return Side(sides)


def _touches_sides(
    alpha: Rect,
    beta: Rect,
    sides: Side,
    horizontal: bool,
    vertical: bool,
) -> bool:
    """Every requested side of beta must be touched by alpha.

    A side counts as touched when alpha's opposite edge sits on it
    (external adjacency) or alpha's same edge does (internal alignment).
    """
    for side in SINGLE_SIDES:
        if not sides & side:
            continue
        if side is Side.X_MIN:
            ok = vertical and (
                approximately(alpha.x_max, beta.x_min)
                or approximately(alpha.x_min, beta.x_min)
            )
        elif side is Side.Y_MIN:
            ok = horizontal and (
                approximately(alpha.y_max, beta.y_min)
                or approximately(alpha.y_min, beta.y_min)
            )
        elif side is Side.X_MAX:
            ok = vertical and (
                approximately(alpha.x_min, beta.x_max)
                or approximately(alpha.x_max, beta.x_max)
            )
        elif side is Side.Y_MAX:
            ok = horizontal and (
                approximately(alpha.y_min, beta.y_max)
                or approximately(alpha.y_max, beta.y_max)
            )
        else:
            raise ValueError(f"Should be a single side flag: {side!r}")
        if not ok:
            return False
    return True


def touches_side_approximately(rect: Rect, other: Rect, sides: Side | int) -> bool:
    """True if rect touches *all* of the requested sides of other.

    Requesting several flags at once is a logical AND, which differs from
    OR-ing the results of single-side calls. ``Side.NONE`` asks whether
    the rectangles do not overlap at all.
    """
    sides = _check_sides(sides)
    if sides == Side.NONE:
        return not rect.overlaps(other)
    horizontal, vertical = _axis_overlap(rect, other)
    if not (horizontal or vertical):
        return False
    return _touches_sides(rect, other, sides, horizontal, vertical)


def overlaps_or_touches_sides(rect: Rect, other: Rect) -> tuple[bool, Side]:
    """Whether rect touches or overlaps other, and through which of other's sides.

    Equal rectangles report ``Side.ALL``. Rectangles overlapping on
    neither axis report ``(False, Side.NONE)``.
    """
    horizontal, vertical = _axis_overlap(rect, other)
    if not (horizontal or vertical):
        return False, Side.NONE

    sides = Side.NONE
    if _touches_sides(rect, other, Side.X_MIN, horizontal, vertical) or (
        vertical and rect.x_min <= other.x_min < rect.x_max
    ):
        sides |= Side.X_MIN
    if _touches_sides(rect, other, Side.Y_MIN, horizontal, vertical) or (
        horizontal and rect.y_min <= other.y_min < rect.y_max
    ):
        sides |= Side.Y_MIN
    if _touches_sides(rect, other, Side.X_MAX, horizontal, vertical) or (
        vertical and rect.x_min < other.x_max <= rect.x_max
    ):
        sides |= Side.X_MAX
    if _touches_sides(rect, other, Side.Y_MAX, horizontal, vertical) or (
        horizontal and rect.y_min < other.y_max <= rect.y_max
    ):
        sides |= Side.Y_MAX

    return sides != Side.NONE, sides


def overlaps_or_touches_entirely(rect: Rect, other: Rect) -> tuple[bool, Side]:
    """Like ``overlaps_or_touches_sides``, but only for sides rect spans fully.

    A side is a candidate only when rect covers other's full extent along
    that side (full height for the x sides, full width for the y sides).
    """
    full_horizontal = rect.x_min <= other.x_min and rect.x_max >= other.x_max
    full_vertical = rect.y_min <= other.y_min and rect.y_max >= other.y_max

    sides = Side.NONE
    if full_vertical and (
        touches_side_approximately(rect, other, Side.X_MIN)
        or rect.x_min <= other.x_min <= rect.x_max
    ):
        sides |= Side.X_MIN
    if full_horizontal and (
        touches_side_approximately(rect, other, Side.Y_MIN)
        or rect.y_min <= other.y_min <= rect.y_max
    ):
        sides |= Side.Y_MIN
    if full_vertical and (
        touches_side_approximately(rect, other, Side.X_MAX)
        or rect.x_min <= other.x_max <= rect.x_max
    ):
        sides |= Side.X_MAX
    if full_horizontal and (
        touches_side_approximately(rect, other, Side.Y_MAX)
        or rect.y_min <= other.y_max <= rect.y_max
    ):
        sides |= Side.Y_MAX

    return sides != Side.NONE, sides


def all_adjacent(start: Rect, others: Iterable[Rect]) -> list[Rect]:
    """Grow a connected group of rectangles outward from a seed.

    Candidates are visited nearest-first by center distance from start;
    each pass confirms the first candidate touching or overlapping any
    confirmed rectangle. Stops when no candidate qualifies. Returns the
    confirmed rects, start first.

    O(n^2). Distance ordering only affects growth order, not the result.
    """
    candidates = list(others)
    confirmed = [start]
    if not candidates:
        return confirmed

    cx, cy = start.center
    centers = np.array([r.center for r in candidates], dtype=np.float64)
    distances = np.hypot(centers[:, 0] - cx, centers[:, 1] - cy)
    unconfirmed = [candidates[i] for i in np.argsort(distances, kind="stable")]

    while unconfirmed:
        idx = next(
            (
                i for i, u in enumerate(unconfirmed)
                if any(overlaps_or_touches_sides(u, c)[0] for c in confirmed)
            ),
            None,
        )
        if idx is None:
            break  # nothing left touches the confirmed group
        confirmed.append(unconfirmed.pop(idx))

    return confirmed


# --- Combination ---

def _common_band(lows: np.ndarray, highs: np.ndarray) -> tuple[float, float]:
    """Tightest interval shared by all (low, high) pairs; midpoint if none."""
    low = float(lows.max())
    high = float(highs.min())
    if low > high:
        low = high = (low + high) * 0.5
    return low, high


def intersect_slice_many(rects: Iterable[Rect], axis: Axis = Axis.NONE) -> list[Rect]:
    """Constrain rectangles to their common band on an axis.

    ``Axis.NONE`` returns the intersection of all rects as a one-element
    list. ``Axis.X`` / ``Axis.Y`` return one rect per input: all share the
    same min/max on that axis, each keeps its own extent on the other.
    A missing common band collapses to its midpoint (zero width/height)
    rather than producing an inverted rectangle.
    """
    rects = list(rects)
    if not rects:
        return []

    coords = np.array(
        [(r.x_min, r.y_min, r.x_max, r.y_max) for r in rects], dtype=np.float64
    )
    x_band = _common_band(coords[:, 0], coords[:, 2])
    y_band = _common_band(coords[:, 1], coords[:, 3])

    if axis is Axis.NONE:
        return [Rect(x_band[0], y_band[0], x_band[1], y_band[1])]
    if axis is Axis.X:
        return [Rect(x_band[0], r.y_min, x_band[1], r.y_max) for r in rects]
    if axis is Axis.Y:
        return [Rect(r.x_min, y_band[0], r.x_max, y_band[1]) for r in rects]
    raise ValueError(f"Unknown axis {axis!r}. Use Axis.NONE, Axis.X or Axis.Y.")


def intersection(a: Rect, b: Rect) -> Rect | None:
    """Overlapping region of a and b, or None if they do not overlap."""
    if not a.overlaps(b):
        return None
    return Rect(
        max(a.x_min, b.x_min),
        max(a.y_min, b.y_min),
        min(a.x_max, b.x_max),
        min(a.y_max, b.y_max),
    )


def encapsulate(a: Rect, b: Rect) -> Rect:
    """Smallest rect containing both a and b."""
    return Rect(
        min(a.x_min, b.x_min),
        min(a.y_min, b.y_min),
        max(a.x_max, b.x_max),
        max(a.y_max, b.y_max),
    )


def encapsulate_many(rects: Iterable[Rect]) -> Rect:
    """Smallest rect containing every rect. Raises ValueError if empty."""
    iterator = iter(rects)
    try:
        output = next(iterator)
    except StopIteration:
        raise ValueError(
            "Cannot encapsulate an empty collection of rects. "
            "Check for emptiness before calling."
        ) from None
    for rect in iterator:
        output = encapsulate(output, rect)
    return output


# --- Subtraction ---

def _cut_sides(canvas: Rect, inner: Rect) -> Side:
    """Sides of canvas where inner stops short of the canvas edge."""
    sides = Side.NONE
    if inner.x_min > canvas.x_min:
        sides |= Side.X_MIN
    if inner.x_max < canvas.x_max:
        sides |= Side.X_MAX
    if inner.y_min > canvas.y_min:
        sides |= Side.Y_MIN
    if inner.y_max < canvas.y_max:
        sides |= Side.Y_MAX
    return sides


def _punch_section(canvas: Rect, inner: Rect, section: Side) -> Rect:
    if section == Side.Y_MIN:
        return Rect(inner.x_min, canvas.y_min, inner.x_max, inner.y_min)
    if section == Side.X_MAX:
        return Rect(inner.x_max, inner.y_min, canvas.x_max, inner.y_max)
    if section == Side.Y_MAX:
        return Rect(inner.x_min, inner.y_max, inner.x_max, canvas.y_max)
    if section == Side.X_MIN:
        return Rect(canvas.x_min, inner.y_min, inner.x_min, inner.y_max)
    if section == Side.X0Y0:
        return Rect(canvas.x_min, canvas.y_min, inner.x_min, inner.y_min)
    if section == Side.X1Y0:
        return Rect(inner.x_max, canvas.y_min, canvas.x_max, inner.y_min)
    if section == Side.X1Y1:
        return Rect(inner.x_max, inner.y_max, canvas.x_max, canvas.y_max)
    if section == Side.X0Y1:
        return Rect(canvas.x_min, inner.y_max, inner.x_min, canvas.y_max)
    raise ValueError(f"Not a punch section: {section!r}")


def punch(canvas: Rect, remove: Rect) -> list[Rect]:
    """Subtract remove from canvas.

    Returns ``[canvas]`` when they do not overlap and ``[]`` when remove
    covers canvas. Otherwise returns up to 8 fragments (4 edge strips,
    4 corner blocks) that together with the intersection tile canvas
    exactly, without overlaps.
    """
    inner = intersection(canvas, remove)
    if inner is None:
        return [canvas]
    if inner == canvas:
        return []

    cut = _cut_sides(canvas, inner)
    return [
        _punch_section(canvas, inner, section)
        for section in _PUNCH_SECTIONS
        if (cut & section) == section
    ]


# --- Coordinate mapping ---

def _inverse_lerp(a: float, b: float, value: float) -> float:
    if a == b:
        return 0.0
    return (value - a) / (b - a)


def normalize(rect: Rect, limits: Rect) -> Rect:
    """Map rect into limits-relative coordinates (limits -> (0, 0, 1, 1)).

    Not clamped: edges outside limits map outside [0, 1]. A zero-size
    limits axis maps to 0.
    """
    return Rect.min_max(
        _inverse_lerp(limits.x_min, limits.x_max, rect.x_min),
        _inverse_lerp(limits.y_min, limits.y_max, rect.y_min),
        _inverse_lerp(limits.x_min, limits.x_max, rect.x_max),
        _inverse_lerp(limits.y_min, limits.y_max, rect.y_max),
    )
