"""Shared test fixtures for uispace."""

import numpy as np
import pytest

from uispace.geometry.rect import Rect


@pytest.fixture
def baseline():
    """10x10 rect at the origin, the reference for side classification."""
    return Rect.from_xywh(0, 0, 10, 10)


@pytest.fixture
def canvas():
    """100x100 canvas at the origin."""
    return Rect.from_xywh(0, 0, 100, 100)


@pytest.fixture
def rng():
    """Seeded generator for randomized geometry checks."""
    return np.random.default_rng(42)


@pytest.fixture
def random_rect(rng):
    """Factory for integer-aligned rects with positive area."""

    def make(low=-20, high=120, max_size=80):
        x, y = rng.integers(low, high, size=2)
        w, h = rng.integers(1, max_size, size=2)
        return Rect.from_xywh(float(x), float(y), float(w), float(h))

    return make
