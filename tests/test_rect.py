"""Tests for Rect and NamedRect value types."""

import math

import pytest

from uispace.config import SpaceConfig, settings
from uispace.geometry.rect import NamedRect, Rect


class TestRect:
    def test_properties(self):
        r = Rect.from_xywh(10, 20, 100, 50)
        assert (r.x_min, r.y_min, r.x_max, r.y_max) == (10, 20, 110, 70)
        assert r.x == 10
        assert r.y == 20
        assert r.width == 100
        assert r.height == 50
        assert r.center == (60.0, 45.0)
        assert r.area == 5000

    def test_min_max_normalizes_order(self):
        assert Rect.min_max(10, 10, 0, 0) == Rect(0, 0, 10, 10)
        r = Rect(5, 8, -5, 2)
        assert (r.x_min, r.y_min, r.x_max, r.y_max) == (-5, 2, 5, 8)

    def test_negative_size_normalized(self):
        r = Rect.from_xywh(10, 10, -4, -6)
        assert r == Rect(6, 4, 10, 10)
        assert r.width == 4
        assert r.height == 6

    def test_equality_is_exact(self):
        assert Rect(0, 0, 1, 1) == Rect(0.0, 0.0, 1.0, 1.0)
        assert Rect(0, 0, 1, 1) != Rect(0, 0, 1, 1 + 1e-9)

    def test_has_zero_area(self):
        assert Rect(0, 0, 0, 10).has_zero_area()
        assert Rect(0, 0, 10, 0).has_zero_area()
        assert Rect(0, 0, 10, 1e-12).has_zero_area()
        assert not Rect(0, 0, 10, 0.5).has_zero_area()

    def test_zero_area_respects_settings(self):
        with settings.param.update(abs_tol=1.0):
            assert Rect(0, 0, 10, 0.5).has_zero_area()
        assert not Rect(0, 0, 10, 0.5).has_zero_area()

    def test_zero_area_with_config(self):
        assert Rect(0, 0, 10, 0.5).has_zero_area(SpaceConfig(abs_tol=1.0))
        assert not Rect(0, 0, 10, 0.5).has_zero_area(SpaceConfig())

    def test_overlaps_is_strict(self, baseline):
        assert baseline.overlaps(Rect.from_xywh(5, 5, 10, 10))
        # Shared edge only
        assert not baseline.overlaps(Rect.from_xywh(10, 0, 10, 10))
        # Shared corner only
        assert not baseline.overlaps(Rect.from_xywh(10, 10, 10, 10))
        assert baseline.overlaps(baseline)

    def test_contains_point(self):
        r = Rect.from_xywh(10, 20, 100, 50)
        assert r.contains(50, 40)
        assert r.contains(10, 20)
        assert not r.contains(5, 40)
        assert not r.contains(50, 80)

    def test_contains_rect(self, baseline):
        assert baseline.contains_rect(Rect.from_xywh(2, 2, 6, 6))
        assert baseline.contains_rect(baseline)
        assert not baseline.contains_rect(Rect.from_xywh(2, 2, 9, 6))
        assert not Rect.from_xywh(2, 2, 6, 6).contains_rect(baseline)

    def test_to_dict(self):
        r = Rect.from_xywh(10, 20, 100, 50)
        assert r.to_dict() == {"x": 10, "y": 20, "width": 100, "height": 50}

    def test_str(self):
        assert str(Rect.from_xywh(0, 0, 10, 10)) == "(x:0.00, y:0.00, width:10.00, height:10.00)"

    def test_hashable(self):
        assert len({Rect(0, 0, 1, 1), Rect(0, 0, 1, 1), Rect(0, 0, 2, 2)}) == 2

    def test_nan_is_not_reordered(self):
        r = Rect(math.nan, 0, 1, 1)
        assert math.isnan(r.x_min)


class TestNamedRect:
    def test_default_name_is_center(self, baseline):
        assert NamedRect(baseline).name == "(5.00, 5.00)"

    def test_empty_name_uses_center(self, baseline):
        assert NamedRect(baseline, "").name == "(5.00, 5.00)"

    def test_explicit_name(self, baseline):
        assert NamedRect(baseline, "sidebar").name == "sidebar"

    def test_equality_includes_name(self, baseline):
        assert NamedRect(baseline, "a") == NamedRect(baseline, "a")
        assert NamedRect(baseline, "a") != NamedRect(baseline, "b")
        assert NamedRect(baseline, "a") != NamedRect(Rect(0, 0, 1, 1), "a")

    def test_to_dict(self, baseline):
        d = NamedRect(baseline, "panel").to_dict()
        assert d["name"] == "panel"
        assert d["width"] == 10

    def test_str(self, baseline):
        assert str(NamedRect(baseline, "panel")).startswith("NamedRect <panel>:")
