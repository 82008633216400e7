"""
Type definitions for the bounding box format engine.

Every on-disk format converts to and from the canonical ``Box`` defined here.
"""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# On-disk annotation conventions understood by the engine
BboxFormatId = Literal["coco", "pascal_voc", "yolo", "tesseract_box"]
FORMAT_IDS: tuple[str, ...] = ("coco", "pascal_voc", "yolo", "tesseract_box")

# Where the class token goes on a YOLO line
LabelPosition = Literal["first", "last"]


class Box(BaseModel):
    """A single axis-aligned annotation rectangle.

    Coordinates are in pixels and may be fractional. A document is an
    ordered ``list[Box]``; the list index is the only identity a box has.

    Attributes:
        x_min: Left edge.
        y_min: Top edge.
        width: Horizontal extent, never negative.
        height: Vertical extent, never negative.
        label: Optional label or class; may contain spaces. None = unlabeled.
    """

    x_min: float
    y_min: float
    width: float = Field(ge=0)
    height: float = Field(ge=0)
    label: str | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def x_max(self) -> float:
        return self.x_min + self.width

    @property
    def y_max(self) -> float:
        return self.y_min + self.height

    @property
    def has_label(self) -> bool:
        return bool(self.label)

    def with_label(self, label: str | None) -> Box:
        """Return a copy of this box carrying ``label``."""
        return self.model_copy(update={"label": label})
