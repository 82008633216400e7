"""Format registry, detection and per-image format resolution."""

from __future__ import annotations

import logging
import os

import config

from .formats.base import BboxFormat
from .formats.coco import CocoFormat
from .formats.pascal_voc import PascalVocFormat
from .formats.tesseract_box import TesseractBoxFormat
from .formats.yolo import YoloFormat
from .types import Box, LabelPosition

logger = logging.getLogger(__name__)

ResourceId = str | os.PathLike


class FormatRegistry:
    """The fixed, ordered set of annotation formats.

    Detection tries the most specific heuristic first:
    tesseract_box, yolo, pascal_voc, coco.
    """

    def __init__(self, yolo_label_position: LabelPosition = config.YOLO_DEFAULT_LABEL_POSITION) -> None:
        self._providers: tuple[BboxFormat, ...] = (
            TesseractBoxFormat(),
            YoloFormat(label_position=yolo_label_position),
            PascalVocFormat(),
            CocoFormat(),
        )
        self._by_id = {provider.id: provider for provider in self._providers}

    @property
    def providers(self) -> tuple[BboxFormat, ...]:
        """Providers in detection priority order."""
        return self._providers

    @property
    def default(self) -> BboxFormat:
        return self._by_id[config.DEFAULT_BBOX_FORMAT]

    def get_provider(self, format_id: str | None) -> BboxFormat | None:
        """Look up a provider by format id (e.g. ``"pascal_voc"``)."""
        if format_id is None:
            return None
        return self._by_id.get(format_id)

    def detect(self, content: str) -> BboxFormat | None:
        """Return the first provider whose heuristic accepts ``content``."""
        for provider in self._providers:
            if provider.detect(content):
                logger.debug("Detected %s content", provider.id)
                return provider
        return None

    def parse(self, content: str, format_id: str, img_width: float = 0, img_height: float = 0) -> list[Box]:
        """Parse with the named format; unknown ids fall back to the default."""
        provider = self.get_provider(format_id) or self.default
        return provider.parse(content, img_width, img_height)

    def serialize(self, boxes: list[Box], format_id: str, img_width: float = 0, img_height: float = 0) -> str:
        """Serialize with the named format; unknown ids fall back to the default."""
        provider = self.get_provider(format_id) or self.default
        return provider.serialize(boxes, img_width, img_height)


class FormatResolutionCache:
    """Remembers which format each image resolved to for one session.

    Once an image's format is known, later reads and writes keep using it
    even if the file content would now detect differently. Keys are the
    string form of the resource id, so ``Path`` and ``str`` ids match.
    """

    def __init__(self) -> None:
        self._entries: dict[str, BboxFormat] = {}

    def get(self, resource_id: ResourceId) -> BboxFormat | None:
        return self._entries.get(os.fspath(resource_id))

    def set(self, resource_id: ResourceId, provider: BboxFormat) -> None:
        self._entries[os.fspath(resource_id)] = provider

    def remove(self, resource_id: ResourceId) -> bool:
        return self._entries.pop(os.fspath(resource_id), None) is not None

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, resource_id: ResourceId) -> bool:
        return os.fspath(resource_id) in self._entries

    def __len__(self) -> int:
        return len(self._entries)


def resolve_format(
    registry: FormatRegistry,
    cache: FormatResolutionCache,
    resource_id: ResourceId,
    content: str | None = None,
    configured: str | None = None,
    auto_detect: bool = True,
) -> BboxFormat:
    """Pick the format for an image and remember it in ``cache``.

    Order: cached format, then detection on ``content`` (when
    ``auto_detect``), then the ``configured`` format id, then the default.
    """
    provider = cache.get(resource_id)
    if provider is not None:
        return provider

    source = "default"
    if auto_detect and content:
        provider = registry.detect(content)
        source = "detected"
    if provider is None and configured is not None:
        provider = registry.get_provider(configured)
        if provider is None:
            logger.warning("Unknown bbox format %r, using %s", configured, config.DEFAULT_BBOX_FORMAT)
        source = "configured"
    if provider is None:
        provider = registry.default
        source = "default"

    logger.debug("Resolved %s to %s (%s)", os.fspath(resource_id), provider.id, source)
    cache.set(resource_id, provider)
    return provider
