"""Annotation files on disk: candidate lookup, merged reads, primary writes.

An image ``cat.png`` can have several annotation files at once (for example
``cat.txt`` and ``cat.box`` when both extensions are allowed). Reads merge
all of them with one shared format; writes go to a single primary file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

import config
from bbox_engine.formats.base import BboxFormat
from bbox_engine.registry import FormatRegistry, FormatResolutionCache, resolve_format
from bbox_engine.types import Box

from .images import IMAGE_EXTENSIONS
from .settings import EditorSettings

logger = logging.getLogger(__name__)

# (width, height) in pixels
ImageSize = tuple[int, int]


@dataclass
class MergedAnnotations:
    """All boxes for one image, merged from its annotation files.

    Attributes:
        image_path: The annotated image.
        boxes: Boxes from every source file, in source order.
        format_id: Format every source was parsed with.
        sources: Annotation files that were read.
        primary_path: File that a save would write.
    """

    image_path: Path
    boxes: list[Box]
    format_id: str
    sources: list[Path] = field(default_factory=list)
    primary_path: Path | None = None

    @property
    def is_new(self) -> bool:
        """True when no annotation file exists yet."""
        return not self.sources


def resource_key(image_path: Path) -> str:
    """Cache key for an image, stable across relative and absolute paths."""
    return str(Path(image_path).resolve())


def bbox_directory_for(image_path: Path, workspace: Path, settings: EditorSettings) -> Path:
    """Directory holding an image's annotation files.

    The configured bbox directory (relative to the workspace), or the
    image's own directory when none is configured.
    """
    if settings.bbox_directory:
        return Path(workspace) / settings.bbox_directory
    return Path(image_path).parent


def _default_extension(settings: EditorSettings) -> str:
    for ext in settings.allowed_extensions:
        if ext != config.WILDCARD_EXTENSION:
            return ext
    return config.DEFAULT_BBOX_EXTENSION


def _wildcard_matches(directory: Path, stem: str) -> list[Path]:
    if not directory.is_dir():
        return []
    return sorted(
        path for path in directory.iterdir()
        if path.is_file()
        and path.stem == stem
        and path.suffix
        and path.suffix.lower() not in IMAGE_EXTENSIONS
    )


def candidate_paths(image_path: Path, workspace: Path, settings: EditorSettings) -> list[Path]:
    """Existing annotation files for an image, in allowed-extension order.

    Files matched by ``"*"`` are ordered by path. Each file appears once.
    """
    image_path = Path(image_path)
    directory = bbox_directory_for(image_path, workspace, settings)
    stem = image_path.stem

    found: list[Path] = []
    for ext in settings.allowed_extensions:
        if ext == config.WILDCARD_EXTENSION:
            matches = _wildcard_matches(directory, stem)
        else:
            path = directory / f"{stem}{ext}"
            matches = [path] if path.is_file() else []
        for path in matches:
            if path not in found:
                found.append(path)
    return found


def primary_annotation_path(image_path: Path, workspace: Path, settings: EditorSettings) -> Path:
    """File that saves for this image go to.

    The first existing candidate, otherwise ``<stem><first allowed extension>``
    in the bbox directory.
    """
    candidates = candidate_paths(image_path, workspace, settings)
    if candidates:
        return candidates[0]
    directory = bbox_directory_for(image_path, workspace, settings)
    return directory / f"{Path(image_path).stem}{_default_extension(settings)}"


def _read_sources(paths: list[Path]) -> list[tuple[Path, str]]:
    contents = []
    for path in paths:
        try:
            contents.append((path, path.read_text(encoding="utf-8")))
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Skipping unreadable annotation file %s: %s", path, e)
    return contents


def resolve_image_format(
    image_path: Path,
    settings: EditorSettings,
    registry: FormatRegistry,
    cache: FormatResolutionCache,
    content: str | None = None,
) -> BboxFormat:
    """Resolve (and cache) the format for an image using the settings."""
    return resolve_format(
        registry,
        cache,
        resource_key(image_path),
        content=content,
        configured=settings.bbox_format,
        auto_detect=settings.auto_detect,
    )


def load_annotations(
    image_path: Path,
    workspace: Path,
    settings: EditorSettings,
    registry: FormatRegistry,
    cache: FormatResolutionCache,
    image_size: ImageSize | None = None,
) -> MergedAnnotations:
    """Read and merge every annotation file of an image.

    The format is resolved once from the first readable file and used for
    all of them. An image without annotation files starts with the
    configured default boxes.
    """
    image_path = Path(image_path)
    sources = candidate_paths(image_path, workspace, settings)
    contents = _read_sources(sources)

    first_content = contents[0][1] if contents else None
    provider = resolve_image_format(image_path, settings, registry, cache, first_content)

    img_width, img_height = image_size or (0, 0)
    if provider.requires_image_size and image_size is None and contents:
        logger.warning("%s needs the image size; no boxes read for %s", provider.id, image_path.name)

    boxes: list[Box] = []
    for path, text in contents:
        parsed = provider.parse(text, img_width, img_height)
        logger.debug("Read %d boxes from %s", len(parsed), path)
        boxes.extend(parsed)

    if not sources:
        boxes = settings.default_boxes

    return MergedAnnotations(
        image_path=image_path,
        boxes=boxes,
        format_id=provider.id,
        sources=[path for path, _ in contents],
        primary_path=primary_annotation_path(image_path, workspace, settings),
    )


def save_annotations(
    image_path: Path,
    boxes: list[Box],
    workspace: Path,
    settings: EditorSettings,
    registry: FormatRegistry,
    cache: FormatResolutionCache,
    image_size: ImageSize | None = None,
) -> Path:
    """Serialize boxes into the image's primary annotation file.

    Returns:
        The path written.

    Raises:
        ValueError: If the format needs the image size and none is given.
    """
    path = primary_annotation_path(image_path, workspace, settings)
    existing = None
    if path.is_file() and resource_key(image_path) not in cache:
        existing = _read_sources([path])
    content = existing[0][1] if existing else None
    provider = resolve_image_format(image_path, settings, registry, cache, content)

    if provider.requires_image_size and image_size is None and boxes:
        raise ValueError(f"Saving {provider.id} annotations needs the size of {image_path}")

    img_width, img_height = image_size or (0, 0)
    text = provider.serialize(boxes, img_width, img_height)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    logger.debug("Wrote %d boxes to %s as %s", len(boxes), path, provider.id)
    return path
