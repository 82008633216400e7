"""
Workspace image discovery and image dimensions.
"""

from __future__ import annotations

from pathlib import Path

from PIL import Image

from .settings import EditorSettings

# Supported image extensions
IMAGE_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".bmp", ".webp", ".tiff", ".tif"}


def is_image_file(path: Path) -> bool:
    """Check if a path is a supported image file."""
    return path.is_file() and path.suffix.lower() in IMAGE_EXTENSIONS


def image_directory(workspace: Path, settings: EditorSettings) -> Path:
    """Resolve the configured image directory against the workspace."""
    return Path(workspace) / settings.image_directory


def list_images(workspace: Path, settings: EditorSettings, recursive: bool = False) -> list[Path]:
    """Find the workspace's images.

    Args:
        workspace: Workspace root directory.
        settings: Editor settings (provides the image directory).
        recursive: Whether to scan subdirectories.

    Returns:
        Sorted list of image paths.

    Raises:
        FileNotFoundError: If the image directory does not exist.
        NotADirectoryError: If it is not a directory.
    """
    directory = image_directory(workspace, settings)
    if not directory.exists():
        raise FileNotFoundError(f"Image directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    pattern = "**/*" if recursive else "*"
    return sorted(path for path in directory.glob(pattern) if is_image_file(path))


def read_image_size(image_path: Path) -> tuple[int, int]:
    """Get image (width, height) without decoding pixel data.

    Raises:
        ValueError: If the file cannot be opened or is not an image
            (Pillow's UnidentifiedImageError is an OSError).
    """
    try:
        with Image.open(image_path) as img:
            return img.size
    except OSError as e:
        raise ValueError(f"Cannot read image: {image_path}") from e
