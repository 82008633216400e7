"""Shared geometry conversions between box conventions.

Every annotation format stores a rectangle differently; these helpers
convert to and from the canonical (x_min, y_min, width, height) form.
"""

from __future__ import annotations

import math

# Canonical rectangle: (x_min, y_min, width, height) in pixels
Rect = tuple[float, float, float, float]


def corners_to_rect(x_min: float, y_min: float, x_max: float, y_max: float) -> Rect:
    """Convert corner coordinates to (x_min, y_min, width, height).

    Inverted corners give a zero extent rather than a negative one.
    """
    return x_min, y_min, max(0.0, x_max - x_min), max(0.0, y_max - y_min)


def rect_to_corners(x_min: float, y_min: float, width: float, height: float) -> tuple[float, float, float, float]:
    """Convert (x_min, y_min, width, height) to (x_min, y_min, x_max, y_max)."""
    return x_min, y_min, x_min + width, y_min + height


def normalized_center_to_rect(
    x_center: float,
    y_center: float,
    width: float,
    height: float,
    img_width: float,
    img_height: float,
) -> Rect:
    """Convert a normalized center box (YOLO convention) to a pixel rect."""
    w = width * img_width
    h = height * img_height
    return x_center * img_width - w / 2, y_center * img_height - h / 2, w, h


def rect_to_normalized_center(
    x_min: float,
    y_min: float,
    width: float,
    height: float,
    img_width: float,
    img_height: float,
) -> tuple[float, float, float, float]:
    """Convert a pixel rect to a normalized (x_center, y_center, w, h) box.

    No clamping: boxes that run past the image edge keep their true extent.
    """
    return (
        (x_min + width / 2) / img_width,
        (y_min + height / 2) / img_height,
        width / img_width,
        height / img_height,
    )


def is_finite_rect(x_min: float, y_min: float, width: float, height: float) -> bool:
    """True when the rect and both of its far corners are finite.

    Corner differences of huge inputs (``-1e308 .. 1e308``) overflow to inf.
    """
    return all(math.isfinite(v) for v in (x_min, y_min, width, height, x_min + width, y_min + height))
