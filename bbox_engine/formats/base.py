"""
Annotation format interface.
"""

from __future__ import annotations

from typing import Protocol

from ..types import Box


class BboxFormat(Protocol):
    """Interface implemented by each on-disk annotation format.

    Implementations never raise for textual input: malformed lines are
    skipped and unusable input yields an empty result.
    """

    id: str
    requires_image_size: bool

    def parse(self, content: str, img_width: float = 0, img_height: float = 0) -> list[Box]:
        """Parse annotation text into boxes, preserving line order."""

    def serialize(self, boxes: list[Box], img_width: float = 0, img_height: float = 0) -> str:
        """Write boxes as annotation text, one line per box."""

    def detect(self, content: str) -> bool:
        """True when most lines of ``content`` look like this format."""
