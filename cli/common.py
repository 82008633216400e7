"""Helpers shared by the bbe subcommands."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from annotations import AnnotationWorkspace
from annotations.images import image_directory

logger = logging.getLogger(__name__)

# Failures a command reports as exit code 1 instead of a traceback
COMMAND_ERRORS = (ValueError, IndexError, FileNotFoundError, NotADirectoryError)


def open_workspace(args: argparse.Namespace) -> AnnotationWorkspace:
    return AnnotationWorkspace(Path(args.workspace))


def resolve_image_path(workspace: AnnotationWorkspace, image: str) -> Path:
    """Find an image given as a path or as a name inside the image directory."""
    path = Path(image)
    if path.is_file():
        return path
    in_workspace = image_directory(workspace.root, workspace.settings) / image
    if in_workspace.is_file():
        return in_workspace
    raise FileNotFoundError(f"Image not found: {image}")
