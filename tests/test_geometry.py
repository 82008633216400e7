"""Tests for geometry conversions."""

import pytest

from geometry import (
    corners_to_rect,
    normalized_center_to_rect,
    rect_to_corners,
    rect_to_normalized_center,
)


def test_corners_to_rect():
    assert corners_to_rect(10, 20, 40, 60) == (10, 20, 30, 40)


def test_corners_to_rect_clamps_inverted_corners():
    assert corners_to_rect(40, 60, 10, 20) == (40, 60, 0.0, 0.0)


def test_rect_to_corners():
    assert rect_to_corners(10, 20, 30, 40) == (10, 20, 40, 60)


def test_normalized_center_to_rect():
    assert normalized_center_to_rect(0.5, 0.5, 0.2, 0.2, 100, 100) == pytest.approx((40, 40, 20, 20))


def test_rect_to_normalized_center():
    assert rect_to_normalized_center(40, 40, 20, 20, 100, 200) == pytest.approx((0.5, 0.25, 0.2, 0.1))


def test_normalized_center_is_not_clamped():
    xc, yc, w, h = rect_to_normalized_center(90, 0, 20, 10, 100, 100)
    assert xc == pytest.approx(1.0)
    assert w == pytest.approx(0.2)
