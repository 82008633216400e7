"""Workspace settings for the bounding box editor.

Settings live in ``.bbox-editor.json`` at the workspace root::

    {
      "image_directory": "images",
      "bbox_directory": "labels",
      "bbox_format": "yolo",
      "auto_detect": true,
      "yolo_label_position": "first",
      "allowed_extensions": [".txt", "box"],
      "default_bounding_boxes": [{"x": 10, "y": 10, "w": 50, "h": 50, "label": "item"}]
    }

Every key is optional; a missing file means all defaults.
"""

from __future__ import annotations

import json
import logging
import math
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

import config
from bbox_engine.types import BboxFormatId, Box, LabelPosition

logger = logging.getLogger(__name__)


def normalize_extension(ext: str) -> str:
    """``"box"`` -> ``".box"``; ``".txt"`` and ``"*"`` are kept as is."""
    ext = ext.strip()
    if not ext or ext == config.WILDCARD_EXTENSION or ext.startswith("."):
        return ext
    return f".{ext}"


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def parse_default_boxes(raw: Any) -> list[Box]:
    """Turn the ``default_bounding_boxes`` setting into boxes.

    All or nothing: if any entry is not a mapping with finite numeric
    ``x``, ``y``, ``w``, ``h`` (``w`` and ``h`` > 0), no defaults are used.
    """
    if not isinstance(raw, list) or not raw:
        return []
    boxes = []
    for entry in raw:
        if not isinstance(entry, dict):
            return []
        x, y, w, h = (entry.get(k) for k in ("x", "y", "w", "h"))
        if not all(_is_number(v) for v in (x, y, w, h)) or w <= 0 or h <= 0:
            return []
        label = entry.get("label")
        boxes.append(Box(
            x_min=x,
            y_min=y,
            width=w,
            height=h,
            label=label if isinstance(label, str) else None,
        ))
    return boxes


class EditorSettings(BaseModel):
    """Per-workspace editor configuration.

    Attributes:
        image_directory: Image folder, relative to the workspace.
        bbox_directory: Annotation folder, relative to the workspace.
            Empty means annotation files sit next to their images.
        bbox_format: Format used when an image's format is not detected.
        auto_detect: Sniff the format of existing files before falling back
            to ``bbox_format``. Off means ``bbox_format`` always wins.
        yolo_label_position: Class placement on written YOLO lines.
        allowed_extensions: Annotation file extensions, in priority order.
            ``"*"`` accepts any ``<image stem>.*`` file.
        default_bounding_boxes: Boxes a new annotation starts with.
    """

    image_directory: str = "."
    bbox_directory: str = ""
    bbox_format: BboxFormatId = config.DEFAULT_BBOX_FORMAT
    auto_detect: bool = True
    yolo_label_position: LabelPosition = config.YOLO_DEFAULT_LABEL_POSITION
    allowed_extensions: list[str] = Field(
        default_factory=lambda: list(config.DEFAULT_ALLOWED_EXTENSIONS)
    )
    default_bounding_boxes: Any = None

    model_config = ConfigDict(extra="ignore")

    @field_validator("image_directory")
    @classmethod
    def _default_image_directory(cls, v: str) -> str:
        return v.strip() or "."

    @field_validator("bbox_directory")
    @classmethod
    def _strip_bbox_directory(cls, v: str) -> str:
        return v.strip()

    @field_validator("allowed_extensions")
    @classmethod
    def _normalize_extensions(cls, v: list[str]) -> list[str]:
        normalized = []
        for ext in v:
            ext = normalize_extension(ext)
            if ext and ext not in normalized:
                normalized.append(ext)
        return normalized

    @property
    def default_boxes(self) -> list[Box]:
        return parse_default_boxes(self.default_bounding_boxes)


# =============================================================================
# File paths & load/save
# =============================================================================


def get_settings_path(workspace: Path) -> Path:
    return Path(workspace) / config.SETTINGS_FILENAME


def load_settings(path: Path | None = None) -> EditorSettings:
    if path is None:
        path = get_settings_path(Path.cwd())
    if not path.exists():
        return EditorSettings()
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")
    return EditorSettings.model_validate(data)


def save_settings(settings: EditorSettings, path: Path | None = None) -> None:
    if path is None:
        path = get_settings_path(Path.cwd())
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        json.dump(settings.model_dump(exclude_none=True), f, indent=2)
    logger.debug("Saved settings to %s", path)
