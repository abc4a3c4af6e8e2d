"""Tests for the viewport applier."""

import logging
from types import SimpleNamespace

import pytest

from uispace.analysis.notifier import SpaceNotifier
from uispace.core.footprint import ElementFootprint
from uispace.geometry.rect import Rect
from uispace.viewport import ViewportApplier, flip_y

xywh = Rect.from_xywh


def approx_rect(actual, expected):
    got = (actual.x_min, actual.y_min, actual.x_max, actual.y_max)
    want = (expected.x_min, expected.y_min, expected.x_max, expected.y_max)
    assert got == pytest.approx(want)


class TestFlipY:
    def test_full_rect_unchanged(self):
        assert flip_y(Rect(0, 0, 1, 1)) == Rect(0, 0, 1, 1)

    def test_top_band_moves_to_top(self):
        # y in [0, 0.25] from the top is y in [0.75, 1] from the bottom
        approx_rect(flip_y(Rect(0, 0, 1, 0.25)), Rect(0, 0.75, 1, 1))

    def test_height_preserved(self):
        flipped = flip_y(Rect(0.1, 0.2, 0.6, 0.5))
        assert flipped.height == pytest.approx(0.3)
        approx_rect(flipped, Rect(0.1, 0.5, 0.6, 0.8))


class TestViewportApplier:
    def test_sets_rect_on_viewports(self):
        cams = [SimpleNamespace(rect=None), None, SimpleNamespace(rect=None)]
        applier = ViewportApplier(cams)
        applier(None, Rect(0, 0, 100, 100), Rect(0.3, 0, 1, 1))
        assert cams[0].rect == Rect(0.3, 0, 1, 1)
        assert cams[2].rect == Rect(0.3, 0, 1, 1)

    def test_log_counts_assigned_viewports(self, caplog):
        caplog.set_level(logging.DEBUG, logger="uispace.viewport")
        applier = ViewportApplier([SimpleNamespace(rect=None), None, None])
        applier(None, Rect(0, 0, 100, 100), Rect(0, 0, 1, 1))
        assert "to 1 viewports" in caplog.text

    def test_no_viewports(self):
        ViewportApplier()(None, Rect(0, 0, 1, 1), Rect(0, 0, 1, 1))

    def test_attach_follows_negative_space(self, canvas):
        notifier = SpaceNotifier()
        cam = SimpleNamespace(rect=None)
        applier = ViewportApplier([cam])
        applier.attach(notifier)
        notifier.analyze(canvas, [ElementFootprint.from_rect(xywh(0, 0, 100, 25), "header")])
        approx_rect(cam.rect, Rect(0, 0, 1, 0.75))

    def test_attach_replays_current_space(self, canvas):
        notifier = SpaceNotifier()
        notifier.analyze(canvas, [ElementFootprint.from_rect(xywh(0, 0, 30, 100))])
        cam = SimpleNamespace(rect=None)
        ViewportApplier([cam]).attach(notifier)
        approx_rect(cam.rect, Rect(0.3, 0, 1, 1))

    def test_attach_before_any_pass_does_not_apply(self):
        cam = SimpleNamespace(rect="untouched")
        ViewportApplier([cam]).attach(SpaceNotifier())
        assert cam.rect == "untouched"

    def test_detach(self, canvas):
        notifier = SpaceNotifier()
        cam = SimpleNamespace(rect=None)
        applier = ViewportApplier([cam])
        applier.attach(notifier)
        applier.detach(notifier)
        notifier.analyze(canvas, [])
        assert cam.rect is None
