"""
COCO-style text format: ``x_min y_min width height [label...]`` in pixels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import ClassVar

from geometry import is_finite_rect

from ..precision import decimal_places_for_image, format_coord
from ..tokens import is_digits, join_label, majority_match, parse_numbers, split_lines, tokenize
from ..types import Box

logger = logging.getLogger(__name__)


def parse_coco_line(line: str) -> Box | None:
    """Parse one COCO line, or return None if it is malformed.

    Negative extents are clamped to zero.
    """
    parts = tokenize(line)
    if len(parts) < 4:
        return None
    values = parse_numbers(parts[:4])
    if values is None:
        return None
    x_min, y_min, width, height = values
    if width < 0 or height < 0:
        logger.warning("Clamping negative extent to zero: %r", line)
        width, height = max(0.0, width), max(0.0, height)
    if not is_finite_rect(x_min, y_min, width, height):
        return None
    label = join_label(parts[4:]) if len(parts) > 4 else None
    return Box(x_min=x_min, y_min=y_min, width=width, height=height, label=label)


def is_coco_line(line: str) -> bool:
    """Detection shape: the first four tokens are plain unsigned integers.

    Stricter than ``parse_coco_line`` on purpose; only used for sniffing.
    """
    parts = tokenize(line)
    return len(parts) >= 4 and all(is_digits(p) for p in parts[:4])


@dataclass(frozen=True)
class CocoFormat:
    """Pixel ``x_min y_min width height`` boxes with an optional trailing label."""

    id: ClassVar[str] = "coco"
    requires_image_size: ClassVar[bool] = False

    def parse(self, content: str, img_width: float = 0, img_height: float = 0) -> list[Box]:
        boxes = []
        for line in split_lines(content):
            box = parse_coco_line(line)
            if box is not None:
                boxes.append(box)
        return boxes

    def serialize(self, boxes: list[Box], img_width: float = 0, img_height: float = 0) -> str:
        decimals = decimal_places_for_image(img_width, img_height)
        lines = []
        for box in boxes:
            coords = " ".join(
                format_coord(v, decimals)
                for v in (box.x_min, box.y_min, box.width, box.height)
            )
            lines.append(f"{coords} {box.label}" if box.label else coords)
        return "\n".join(lines)

    def detect(self, content: str) -> bool:
        return majority_match(split_lines(content), is_coco_line)
