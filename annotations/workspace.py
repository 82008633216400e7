"""One annotation workspace: settings, registry and format cache together."""

from __future__ import annotations

import logging
from pathlib import Path

from bbox_engine.registry import FormatRegistry, FormatResolutionCache
from bbox_engine.types import Box

from .images import list_images, read_image_size
from .settings import EditorSettings, get_settings_path, load_settings, save_settings
from .store import (
    ImageSize,
    MergedAnnotations,
    candidate_paths,
    load_annotations,
    primary_annotation_path,
    resource_key,
    save_annotations,
)

logger = logging.getLogger(__name__)


class AnnotationWorkspace:
    """Reads and writes the annotations of one workspace directory.

    The format cache lives as long as the workspace object, so an image
    keeps the format it first resolved to across loads and saves.
    """

    def __init__(self, root: Path, settings: EditorSettings | None = None) -> None:
        self.root = Path(root)
        self.settings = settings if settings is not None else load_settings(get_settings_path(self.root))
        self.registry = FormatRegistry(yolo_label_position=self.settings.yolo_label_position)
        self.cache = FormatResolutionCache()

    def save_settings(self) -> Path:
        path = get_settings_path(self.root)
        save_settings(self.settings, path)
        return path

    def list_images(self, recursive: bool = False) -> list[Path]:
        return list_images(self.root, self.settings, recursive=recursive)

    def image_size(self, image_path: Path) -> ImageSize | None:
        """Image (width, height), or None when the image cannot be read."""
        try:
            return read_image_size(image_path)
        except ValueError as e:
            logger.warning("%s", e)
            return None

    def candidates(self, image_path: Path) -> list[Path]:
        return candidate_paths(image_path, self.root, self.settings)

    def primary_path(self, image_path: Path) -> Path:
        return primary_annotation_path(image_path, self.root, self.settings)

    def load(self, image_path: Path) -> MergedAnnotations:
        return load_annotations(
            image_path,
            self.root,
            self.settings,
            self.registry,
            self.cache,
            image_size=self.image_size(image_path),
        )

    def save(self, image_path: Path, boxes: list[Box]) -> Path:
        return save_annotations(
            image_path,
            boxes,
            self.root,
            self.settings,
            self.registry,
            self.cache,
            image_size=self.image_size(image_path),
        )

    def forget_format(self, image_path: Path) -> None:
        """Drop the cached format so the next load detects again."""
        self.cache.remove(resource_key(image_path))
