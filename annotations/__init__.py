"""
Workspace glue around the format engine.

Key components:
- settings: ``.bbox-editor.json`` model and load/save helpers
- images: Image discovery and dimensions (Pillow)
- store: Candidate annotation files, merged reads, primary writes
- workspace: ``AnnotationWorkspace`` tying settings, registry and cache together
"""

from .settings import EditorSettings, load_settings, save_settings, get_settings_path
from .images import IMAGE_EXTENSIONS, is_image_file, list_images, read_image_size
from .store import (
    MergedAnnotations,
    bbox_directory_for,
    candidate_paths,
    load_annotations,
    primary_annotation_path,
    save_annotations,
)
from .workspace import AnnotationWorkspace

__all__ = [
    "EditorSettings",
    "load_settings",
    "save_settings",
    "get_settings_path",
    "IMAGE_EXTENSIONS",
    "is_image_file",
    "list_images",
    "read_image_size",
    "MergedAnnotations",
    "bbox_directory_for",
    "candidate_paths",
    "load_annotations",
    "primary_annotation_path",
    "save_annotations",
    "AnnotationWorkspace",
]
