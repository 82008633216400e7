"""Format detection, conversion and selection commands."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from bbox_engine.registry import FormatRegistry
from bbox_engine.types import FORMAT_IDS

from .common import COMMAND_ERRORS, open_workspace, resolve_image_path

logger = logging.getLogger(__name__)


def add_formats_subparsers(subparsers: argparse._SubParsersAction) -> None:
    detect_parser = subparsers.add_parser(
        "detect",
        help="Detect the format of an annotation file",
    )
    detect_parser.add_argument("file", help="Annotation file to inspect")
    detect_parser.set_defaults(_cmd=cmd_detect)

    convert_parser = subparsers.add_parser(
        "convert",
        help="Rewrite an image's boxes in another format",
    )
    convert_parser.add_argument("image", help="Image path or name inside the image directory")
    convert_parser.add_argument(
        "--to",
        required=True,
        choices=FORMAT_IDS,
        help="Target format",
    )
    convert_parser.add_argument(
        "-o", "--output",
        help="Write to this file (default: stdout)",
    )
    convert_parser.set_defaults(_cmd=cmd_convert)

    set_format_parser = subparsers.add_parser(
        "set-format",
        help="Set the workspace's default annotation format",
    )
    set_format_parser.add_argument("format", choices=FORMAT_IDS, help="Format id")
    detect_group = set_format_parser.add_mutually_exclusive_group()
    detect_group.add_argument(
        "--auto-detect",
        dest="auto_detect",
        action="store_true",
        default=None,
        help="Keep detecting the format of existing files",
    )
    detect_group.add_argument(
        "--no-auto-detect",
        dest="auto_detect",
        action="store_false",
        help="Always use the configured format",
    )
    set_format_parser.set_defaults(_cmd=cmd_set_format)


def cmd_detect(args: argparse.Namespace) -> int:
    path = Path(args.file)
    try:
        content = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("Cannot read %s: %s", path, e)
        return 1

    provider = FormatRegistry().detect(content)
    if provider is None:
        logger.info("%s: unknown format", path)
        return 1
    logger.info("%s: %s", path, provider.id)
    return 0


def cmd_convert(args: argparse.Namespace) -> int:
    try:
        workspace = open_workspace(args)
        image_path = resolve_image_path(workspace, args.image)
        merged = workspace.load(image_path)
        target = workspace.registry.get_provider(args.to)
        size = workspace.image_size(image_path)
        if target.requires_image_size and size is None and merged.boxes:
            raise ValueError(f"Converting to {target.id} needs the size of {image_path}")
    except COMMAND_ERRORS as e:
        logger.error("%s", e)
        return 1

    img_width, img_height = size or (0, 0)
    text = target.serialize(merged.boxes, img_width, img_height)
    logger.debug("Converted %d boxes from %s to %s", len(merged.boxes), merged.format_id, target.id)

    if args.output:
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(text, encoding="utf-8")
        logger.info("Wrote %d boxes to %s", len(merged.boxes), output)
    else:
        sys.stdout.write(text + "\n" if text else "")
    return 0


def cmd_set_format(args: argparse.Namespace) -> int:
    try:
        workspace = open_workspace(args)
    except COMMAND_ERRORS as e:
        logger.error("%s", e)
        return 1

    workspace.settings.bbox_format = args.format
    if args.auto_detect is not None:
        workspace.settings.auto_detect = args.auto_detect
    path = workspace.save_settings()
    logger.info(
        "Default format set to %s (auto-detect %s) in %s",
        args.format,
        "on" if workspace.settings.auto_detect else "off",
        path,
    )
    return 0
