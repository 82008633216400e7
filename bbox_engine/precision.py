"""Decimal-place policy for serialized coordinates."""

from __future__ import annotations

import math

import config


def decimal_places_for_image(img_width: float, img_height: float) -> int:
    """Number of decimals to write coordinates with for an image size.

    Precision follows the digit count of the largest dimension (1920x1080
    gets 4, 100x50 gets 3), capped at ``config.DECIMAL_PLACES_CAP``. An
    unknown size (0x0) uses ``config.DECIMAL_PLACES_FALLBACK``.
    """
    max_dim = max(0, img_width, img_height)
    if max_dim == 0:
        return config.DECIMAL_PLACES_FALLBACK
    digits = len(str(math.floor(max_dim)))
    return min(config.DECIMAL_PLACES_CAP, digits)


def format_coord(value: float, decimals: int) -> str:
    """Render ``value`` in fixed point with exactly ``decimals`` fractional digits."""
    return f"{value:.{decimals}f}"
