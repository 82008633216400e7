"""
On-disk annotation formats.

Each format implements the ``BboxFormat`` interface: parse, serialize and
detect for one text convention.
"""

from .base import BboxFormat
from .coco import CocoFormat
from .pascal_voc import PascalVocFormat
from .tesseract_box import TesseractBoxFormat
from .yolo import YoloFormat

__all__ = [
    "BboxFormat",
    "CocoFormat",
    "PascalVocFormat",
    "TesseractBoxFormat",
    "YoloFormat",
]
