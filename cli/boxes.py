"""Box listing and editing commands."""

from __future__ import annotations

import argparse
import logging

from bbox_engine.editing import (
    append_box,
    describe_box,
    display_label,
    relabel_box_at,
    remove_box_at,
)
from bbox_engine.types import Box

from .common import COMMAND_ERRORS, open_workspace, resolve_image_path

logger = logging.getLogger(__name__)


def add_boxes_subparsers(subparsers: argparse._SubParsersAction) -> None:
    show_parser = subparsers.add_parser(
        "show",
        help="Show the boxes of an image",
    )
    show_parser.add_argument("image", help="Image path or name inside the image directory")
    show_parser.set_defaults(_cmd=cmd_show)

    list_parser = subparsers.add_parser(
        "list",
        help="List workspace images and their box counts",
    )
    list_parser.add_argument(
        "-r", "--recursive",
        action="store_true",
        help="Include images in subdirectories",
    )
    list_parser.set_defaults(_cmd=cmd_list)

    add_parser = subparsers.add_parser(
        "add",
        help="Append a box (pixel coordinates) to an image",
    )
    add_parser.add_argument("image", help="Image path or name inside the image directory")
    add_parser.add_argument("x", type=float, help="Left edge")
    add_parser.add_argument("y", type=float, help="Top edge")
    add_parser.add_argument("width", type=float, help="Box width")
    add_parser.add_argument("height", type=float, help="Box height")
    add_parser.add_argument("--label", help="Optional box label")
    add_parser.set_defaults(_cmd=cmd_add)

    remove_parser = subparsers.add_parser(
        "remove",
        help="Remove one box",
    )
    remove_parser.add_argument("image", help="Image path or name inside the image directory")
    remove_parser.add_argument("index", type=int, help="Box number as shown by 'show' (1-based)")
    remove_parser.set_defaults(_cmd=cmd_remove)

    rename_parser = subparsers.add_parser(
        "rename",
        help="Change the label of one box",
    )
    rename_parser.add_argument("image", help="Image path or name inside the image directory")
    rename_parser.add_argument("index", type=int, help="Box number as shown by 'show' (1-based)")
    rename_parser.add_argument("label", help="New label (empty string removes it)")
    rename_parser.set_defaults(_cmd=cmd_rename)

    clear_parser = subparsers.add_parser(
        "clear",
        help="Remove all boxes of an image",
    )
    clear_parser.add_argument("image", help="Image path or name inside the image directory")
    clear_parser.add_argument(
        "-f", "--force",
        action="store_true",
        help="Skip confirmation prompt",
    )
    clear_parser.set_defaults(_cmd=cmd_clear)


def cmd_show(args: argparse.Namespace) -> int:
    try:
        workspace = open_workspace(args)
        image_path = resolve_image_path(workspace, args.image)
        merged = workspace.load(image_path)
    except COMMAND_ERRORS as e:
        logger.error("%s", e)
        return 1

    sources = ", ".join(str(p) for p in merged.sources) or "(none)"
    logger.info("Image:   %s", image_path)
    logger.info("Format:  %s", merged.format_id)
    logger.info("Sources: %s", sources)
    if not merged.boxes:
        logger.info("No boxes.")
        return 0
    for i, box in enumerate(merged.boxes):
        logger.info("%3d. %-20s %s", i + 1, display_label(box, i), describe_box(box))
    return 0


def cmd_list(args: argparse.Namespace) -> int:
    try:
        workspace = open_workspace(args)
        images = workspace.list_images(recursive=args.recursive)
    except COMMAND_ERRORS as e:
        logger.error("%s", e)
        return 1

    if not images:
        logger.info("No images found.")
        return 0

    logger.info("%-40s %-14s %s", "Image", "Format", "Boxes")
    logger.info("%s", "-" * 62)
    for image_path in images:
        merged = workspace.load(image_path)
        count = "(new)" if merged.is_new else len(merged.boxes)
        logger.info("%-40s %-14s %s", image_path.name, merged.format_id, count)
    return 0


def _edit(args: argparse.Namespace, edit) -> int:
    try:
        workspace = open_workspace(args)
        image_path = resolve_image_path(workspace, args.image)
        merged = workspace.load(image_path)
        boxes = edit(merged.boxes)
        path = workspace.save(image_path, boxes)
    except COMMAND_ERRORS as e:
        logger.error("%s", e)
        return 1
    logger.info("Saved %d boxes to %s", len(boxes), path)
    return 0


def cmd_add(args: argparse.Namespace) -> int:
    try:
        box = Box(x_min=args.x, y_min=args.y, width=args.width, height=args.height, label=args.label or None)
    except ValueError as e:
        logger.error("Invalid box: %s", e)
        return 1
    return _edit(args, lambda boxes: append_box(boxes, box))


def cmd_remove(args: argparse.Namespace) -> int:
    return _edit(args, lambda boxes: remove_box_at(boxes, args.index - 1))


def cmd_rename(args: argparse.Namespace) -> int:
    return _edit(args, lambda boxes: relabel_box_at(boxes, args.index - 1, args.label))


def cmd_clear(args: argparse.Namespace) -> int:
    if not args.force:
        confirm = input(f"Remove all boxes from '{args.image}'? (y/N): ").strip().lower()
        if confirm not in {"y", "yes"}:
            logger.info("Canceled.")
            return 1
    return _edit(args, lambda boxes: [])
