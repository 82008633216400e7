"""
Tesseract ``.box`` format: ``label x_min y_min x_max y_max [page]`` in pixels.

Hand-edited box files vary in shape, so each line is matched against an
ordered list of interpretations and the first one whose four box tokens
are all numbers wins:

1. ``multi word label x_min y_min x_max y_max page`` (seven or more tokens)
2. ``label x_min y_min x_max y_max page``
3. ``[multi word label] x_min y_min x_max y_max``

A ``label page x_min y_min x_max y_max`` line cannot be told apart from 2
(its last five tokens are numbers too) and is read as 2.

A line of exactly five numbers is an unlabeled box followed by its page,
which is how unlabeled boxes are written back.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

import config
from geometry import corners_to_rect, is_finite_rect, rect_to_corners

from ..precision import decimal_places_for_image, format_coord
from ..tokens import join_label, majority_match, parse_number, parse_numbers, split_lines, tokenize
from ..types import Box

_NUMERIC_LABEL = re.compile(r"[0-9]+\.?[0-9]*")

# (label, [x_min, y_min, x_max, y_max])
TesseractLine = tuple[str, list[float]]


def _label_box_page(parts: list[str]) -> TesseractLine | None:
    if len(parts) < 6 or parse_number(parts[5]) is None:
        return None
    values = parse_numbers(parts[1:5])
    return (parts[0], values) if values is not None else None


def _words_box_page(parts: list[str]) -> TesseractLine | None:
    if len(parts) < 7 or parse_number(parts[-1]) is None:
        return None
    values = parse_numbers(parts[-5:-1])
    return (join_label(parts[:-5]), values) if values is not None else None


def _words_box(parts: list[str]) -> TesseractLine | None:
    values = parse_numbers(parts[-4:])
    return (join_label(parts[:-4]), values) if values is not None else None


_INTERPRETATIONS = (_words_box_page, _label_box_page, _words_box)


def interpret_tesseract_line(parts: list[str]) -> TesseractLine | None:
    """Find the label and corner values of a tokenized line."""
    if len(parts) < 5:
        return None
    if len(parts) == 5:
        values = parse_numbers(parts)
        if values is not None:
            return "", values[:4]
    for interpretation in _INTERPRETATIONS:
        result = interpretation(parts)
        if result is not None:
            return result
    return None


def parse_tesseract_line(line: str) -> Box | None:
    """Parse one ``.box`` line, or return None if no interpretation fits."""
    interpreted = interpret_tesseract_line(tokenize(line))
    if interpreted is None:
        return None
    label, corners = interpreted
    x_min, y_min, width, height = corners_to_rect(*corners)
    if not is_finite_rect(x_min, y_min, width, height):
        return None
    return Box(x_min=x_min, y_min=y_min, width=width, height=height, label=label.strip() or None)


def is_tesseract_line(line: str) -> bool:
    """Detection shape: a non-numeric first token plus four box numbers.

    The numeric first token is what separates COCO and VOC lines from
    box files.
    """
    parts = tokenize(line)
    if len(parts) <= 4:
        return False
    if _NUMERIC_LABEL.fullmatch(parts[0]):
        return False
    return any(interpretation(parts) is not None for interpretation in _INTERPRETATIONS)


@dataclass(frozen=True)
class TesseractBoxFormat:
    """Tesseract training ``.box`` files (one glyph or word per line)."""

    page_index: str = config.TESSERACT_PAGE_INDEX
    id: ClassVar[str] = "tesseract_box"
    requires_image_size: ClassVar[bool] = False

    def parse(self, content: str, img_width: float = 0, img_height: float = 0) -> list[Box]:
        boxes = []
        for line in split_lines(content):
            box = parse_tesseract_line(line)
            if box is not None:
                boxes.append(box)
        return boxes

    def serialize(self, boxes: list[Box], img_width: float = 0, img_height: float = 0) -> str:
        decimals = decimal_places_for_image(img_width, img_height)
        lines = []
        for box in boxes:
            corners = rect_to_corners(box.x_min, box.y_min, box.width, box.height)
            fields = [format_coord(v, decimals) for v in corners]
            if box.label:
                fields.insert(0, box.label)
            fields.append(self.page_index)
            lines.append(" ".join(fields))
        return "\n".join(lines)

    def detect(self, content: str) -> bool:
        return majority_match(split_lines(content), is_tesseract_line)
