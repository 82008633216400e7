"""
YOLO format: normalized center boxes, class first or last.

Accepted line shapes (all geometry in [0, 1]):

    class x_center y_center width height
    x_center y_center width height class [more class words]

Neither parse nor serialize can work without the image size; both return
an empty result when it is unknown.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

import config
from geometry import normalized_center_to_rect, rect_to_normalized_center

from ..precision import decimal_places_for_image, format_coord
from ..tokens import is_normalized, join_label, majority_match, parse_number, split_lines, tokenize
from ..types import Box, LabelPosition

# (class label, [x_center, y_center, width, height] tokens)
YoloLine = tuple[str, list[str]]


def _class_first(parts: list[str]) -> YoloLine | None:
    # A leading token that is integer-valued or outside [0, 1] is a class,
    # not a coordinate.
    if not all(is_normalized(p) for p in parts[1:5]):
        return None
    first = parse_number(parts[0])
    looks_like_class = (first is not None and first.is_integer()) or not is_normalized(parts[0])
    if not looks_like_class:
        return None
    return parts[0], parts[1:5]


def _coords_first(parts: list[str]) -> YoloLine | None:
    if not all(is_normalized(p) for p in parts[:4]):
        return None
    return join_label(parts[4:]), parts[:4]


def _coords_last(parts: list[str]) -> YoloLine | None:
    if not all(is_normalized(p) for p in parts[-4:]):
        return None
    return join_label(parts[:-4]), parts[-4:]


# Tried in order; the first interpretation that fits wins
_INTERPRETATIONS = (_class_first, _coords_first, _coords_last)


def interpret_yolo_line(line: str) -> YoloLine | None:
    """Split a YOLO line into its class label and four geometry tokens."""
    parts = tokenize(line)
    if len(parts) < 5:
        return None
    for interpretation in _INTERPRETATIONS:
        result = interpretation(parts)
        if result is not None:
            return result
    return None


def is_yolo_line(line: str) -> bool:
    """Detection shape: tokens 1..4 (after a leading class) are normalized."""
    parts = tokenize(line)
    return len(parts) >= 5 and all(is_normalized(p) for p in parts[1:5])


@dataclass(frozen=True)
class YoloFormat:
    """Normalized ``x_center y_center width height`` boxes with a class token.

    Attributes:
        label_position: Default class placement on output lines.
        default_class: Class written for unlabeled boxes.
    """

    label_position: LabelPosition = config.YOLO_DEFAULT_LABEL_POSITION
    default_class: str = config.YOLO_DEFAULT_CLASS
    id: ClassVar[str] = "yolo"
    requires_image_size: ClassVar[bool] = True

    def parse(self, content: str, img_width: float = 0, img_height: float = 0) -> list[Box]:
        if img_width <= 0 or img_height <= 0:
            return []
        boxes = []
        for line in split_lines(content):
            interpreted = interpret_yolo_line(line)
            if interpreted is None:
                continue
            label, geometry = interpreted
            x_center, y_center, width, height = (float(t) for t in geometry)
            x_min, y_min, w, h = normalized_center_to_rect(
                x_center, y_center, width, height, img_width, img_height
            )
            boxes.append(Box(x_min=x_min, y_min=y_min, width=w, height=h, label=label))
        return boxes

    def serialize(
        self,
        boxes: list[Box],
        img_width: float = 0,
        img_height: float = 0,
        label_position: LabelPosition | None = None,
    ) -> str:
        if img_width <= 0 or img_height <= 0:
            return ""
        position = label_position or self.label_position
        decimals = decimal_places_for_image(img_width, img_height)
        lines = []
        for box in boxes:
            normalized = rect_to_normalized_center(
                box.x_min, box.y_min, box.width, box.height, img_width, img_height
            )
            coords = " ".join(format_coord(v, decimals) for v in normalized)
            cls = box.label or self.default_class
            lines.append(f"{cls} {coords}" if position == "first" else f"{coords} {cls}")
        return "\n".join(lines)

    def detect(self, content: str) -> bool:
        return majority_match(split_lines(content), is_yolo_line)
