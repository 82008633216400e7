"""Pytest configuration: shared workspace and image fixtures.

Every test that touches files works in its own ``tmp_path`` workspace, so
no test depends on the current directory or on another test's format cache.
"""
import json

import pytest
from PIL import Image


@pytest.fixture
def workspace(tmp_path):
    """Empty workspace directory."""
    return tmp_path


@pytest.fixture
def make_image(workspace):
    """Create a blank image file inside the workspace and return its path."""

    def _make(name="cat.png", size=(100, 100)):
        path = workspace / name
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGB", size).save(path)
        return path

    return _make


@pytest.fixture
def write_settings(workspace):
    """Write ``.bbox-editor.json`` with the given keys."""

    def _write(**settings):
        path = workspace / ".bbox-editor.json"
        path.write_text(json.dumps(settings))
        return path

    return _write
