"""Side flags and slicing axes."""

from __future__ import annotations

import enum


class Side(enum.IntFlag):
    """Which boundary (or boundaries) of a reference rectangle is involved.

    Corner names combine one x side and one y side: ``X0Y0`` is the
    ``X_MIN | Y_MIN`` corner, ``X1Y1`` the ``X_MAX | Y_MAX`` corner.
    """

    NONE = 0
    X_MIN = 1
    Y_MIN = 2
    X_MAX = 4
    Y_MAX = 8
    X0Y0 = X_MIN | Y_MIN
    X1Y0 = X_MAX | Y_MIN
    X1Y1 = X_MAX | Y_MAX
    X0Y1 = X_MIN | Y_MAX
    ALL = X_MIN | Y_MIN | X_MAX | Y_MAX


# Single-bit sides in ascending bit order
SINGLE_SIDES = (Side.X_MIN, Side.Y_MIN, Side.X_MAX, Side.Y_MAX)


class Axis(enum.Enum):
    """Dimension constrained by a slicing operation."""

    NONE = "none"
    X = "x"
    Y = "y"
