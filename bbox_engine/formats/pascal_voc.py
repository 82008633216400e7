"""
Pascal VOC corner format: ``x_min y_min x_max y_max [label...]`` in pixels.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from geometry import corners_to_rect, is_finite_rect, rect_to_corners

from ..precision import decimal_places_for_image, format_coord
from ..tokens import join_label, majority_match, parse_numbers, split_lines, tokenize
from ..types import Box


def parse_pascal_voc_line(line: str) -> Box | None:
    """Parse one corner line; inverted corners clamp to a zero extent."""
    parts = tokenize(line)
    if len(parts) < 4:
        return None
    values = parse_numbers(parts[:4])
    if values is None:
        return None
    x_min, y_min, width, height = corners_to_rect(*values)
    if not is_finite_rect(x_min, y_min, width, height):
        return None
    label = join_label(parts[4:]) if len(parts) > 4 else None
    return Box(x_min=x_min, y_min=y_min, width=width, height=height, label=label)


def is_pascal_voc_line(line: str) -> bool:
    """Detection shape: four numbers with x_max > x_min and y_max > y_min."""
    parts = tokenize(line)
    if len(parts) < 4:
        return False
    values = parse_numbers(parts[:4])
    if values is None:
        return False
    x_min, y_min, x_max, y_max = values
    return x_max > x_min and y_max > y_min


@dataclass(frozen=True)
class PascalVocFormat:
    """Pixel corner boxes with an optional trailing label."""

    id: ClassVar[str] = "pascal_voc"
    requires_image_size: ClassVar[bool] = False

    def parse(self, content: str, img_width: float = 0, img_height: float = 0) -> list[Box]:
        boxes = []
        for line in split_lines(content):
            box = parse_pascal_voc_line(line)
            if box is not None:
                boxes.append(box)
        return boxes

    def serialize(self, boxes: list[Box], img_width: float = 0, img_height: float = 0) -> str:
        decimals = decimal_places_for_image(img_width, img_height)
        lines = []
        for box in boxes:
            coords = " ".join(
                format_coord(v, decimals)
                for v in rect_to_corners(box.x_min, box.y_min, box.width, box.height)
            )
            lines.append(f"{coords} {box.label}" if box.label else coords)
        return "\n".join(lines)

    def detect(self, content: str) -> bool:
        return majority_match(split_lines(content), is_pascal_voc_line)
