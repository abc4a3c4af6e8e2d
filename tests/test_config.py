"""Tests for SpaceConfig parameters and approximate comparison."""

import pytest

from uispace.config import SpaceConfig, settings
from uispace.geometry.tolerance import approximately


class TestSpaceConfig:
    def test_defaults(self):
        config = SpaceConfig()
        assert config.insignificant_area == 4.0
        assert config.rel_tol == 1e-6
        assert config.abs_tol == 1e-9

    def test_negative_threshold_rejected(self):
        with pytest.raises(ValueError):
            SpaceConfig(insignificant_area=-1.0)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValueError):
            SpaceConfig(rel_tol="tight")

    def test_instances_independent(self):
        config = SpaceConfig(insignificant_area=10.0)
        assert settings.insignificant_area == 4.0
        assert config.insignificant_area == 10.0


class TestApproximately:
    def test_equal(self):
        assert approximately(10.0, 10.0)

    def test_relative(self):
        assert approximately(1000.0, 1000.0005)
        assert not approximately(1000.0, 1000.01)

    def test_near_zero(self):
        assert approximately(0.0, 1e-12)
        assert not approximately(0.0, 1e-6)

    def test_explicit_config_overrides_settings(self):
        loose = SpaceConfig(rel_tol=0.1)
        assert approximately(100.0, 105.0, loose)
        assert not approximately(100.0, 105.0)
        assert loose.rel_tol == 0.1 and settings.rel_tol == 1e-6

    def test_follows_settings(self):
        with settings.param.update(rel_tol=0.1):
            assert approximately(100.0, 105.0)
        assert not approximately(100.0, 105.0)
