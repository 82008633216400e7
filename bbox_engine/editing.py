"""Whole-document edits on box sequences.

Boxes are identified by their index only. Every edit returns a new list;
the input sequence is never modified.
"""

from __future__ import annotations

from .types import Box


def _check_index(boxes: list[Box], index: int) -> None:
    if index < 0 or index >= len(boxes):
        raise IndexError(f"Box index {index} out of range (document has {len(boxes)} boxes)")


def remove_box_at(boxes: list[Box], index: int) -> list[Box]:
    """Return ``boxes`` without the box at ``index``."""
    _check_index(boxes, index)
    return boxes[:index] + boxes[index + 1:]


def replace_box_at(boxes: list[Box], index: int, box: Box) -> list[Box]:
    """Return ``boxes`` with the entry at ``index`` replaced by ``box``."""
    _check_index(boxes, index)
    return boxes[:index] + [box] + boxes[index + 1:]


def relabel_box_at(boxes: list[Box], index: int, label: str | None) -> list[Box]:
    """Return ``boxes`` with a new label on the box at ``index``.

    An empty label removes it.
    """
    _check_index(boxes, index)
    return replace_box_at(boxes, index, boxes[index].with_label(label or None))


def append_box(boxes: list[Box], box: Box) -> list[Box]:
    return [*boxes, box]


def display_label(box: Box, index: int) -> str:
    """Label shown for a box in listings: its own label or ``Box N`` (1-based)."""
    return box.label if box.label else f"Box {index + 1}"


def describe_box(box: Box) -> str:
    """Short pixel summary, e.g. ``x:10 y:20 w:30 h:40``."""
    return (
        f"x:{round(box.x_min)} y:{round(box.y_min)} "
        f"w:{round(box.width)} h:{round(box.height)}"
    )
