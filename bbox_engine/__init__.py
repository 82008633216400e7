"""
Bounding box format engine.

Detects, parses and serializes plain-text bounding box annotations in four
interchangeable formats (COCO-style, Pascal VOC, YOLO, Tesseract .box).
The engine is pure: no file I/O and no global state. Per-image format
choices are kept in an explicit ``FormatResolutionCache``.

Key components:
- types: The canonical ``Box`` model and format ids
- precision: Decimal-place policy shared by all serializers
- formats: One codec per on-disk convention
- registry: Ordered detection, lookup by id, per-image format resolution
- editing: Index-based edits on box sequences

Typical use::

    registry = FormatRegistry()
    cache = FormatResolutionCache()
    provider = resolve_format(registry, cache, "img/cat.png", content=text)
    boxes = provider.parse(text, 640, 480)
    text = provider.serialize(boxes, 640, 480)
"""

from .types import Box, BboxFormatId, FORMAT_IDS, LabelPosition
from .precision import decimal_places_for_image, format_coord
from .formats import BboxFormat, CocoFormat, PascalVocFormat, TesseractBoxFormat, YoloFormat
from .registry import FormatRegistry, FormatResolutionCache, resolve_format
from .editing import (
    append_box,
    describe_box,
    display_label,
    relabel_box_at,
    remove_box_at,
    replace_box_at,
)

__all__ = [
    "Box",
    "BboxFormatId",
    "FORMAT_IDS",
    "LabelPosition",
    "decimal_places_for_image",
    "format_coord",
    "BboxFormat",
    "CocoFormat",
    "PascalVocFormat",
    "TesseractBoxFormat",
    "YoloFormat",
    "FormatRegistry",
    "FormatResolutionCache",
    "resolve_format",
    "append_box",
    "describe_box",
    "display_label",
    "relabel_box_at",
    "remove_box_at",
    "replace_box_at",
]
