#!/usr/bin/env python3
"""
Command line for the bounding box annotation editor.

Usage:
    bbe list                          # List images with their format and box count
    bbe show <image>                  # Show the boxes of an image
    bbe detect <file>                 # Detect the format of an annotation file
    bbe convert <image> --to yolo     # Print an image's boxes in another format
    bbe add <image> X Y W H --label L # Append a box
    bbe remove <image> N              # Remove box N
    bbe rename <image> N <label>      # Relabel box N
    bbe clear <image>                 # Remove all boxes
    bbe set-format pascal_voc         # Set the workspace default format
"""

import argparse
import logging
import sys

from logging_utils import configure_logging, add_logging_args
from cli.boxes import add_boxes_subparsers
from cli.formats import add_formats_subparsers

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bbe",
        description="Bounding box editor - read, convert and edit plain-text box annotations",
    )
    parser.add_argument(
        "-w", "--workspace",
        default=".",
        help="Workspace directory holding .bbox-editor.json (default: current directory)",
    )
    add_logging_args(parser)
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    add_boxes_subparsers(subparsers)
    add_formats_subparsers(subparsers)
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level, args.verbose, args.quiet)

    cmd = getattr(args, "_cmd", None)
    if cmd is None:
        parser.print_help()
        return 1
    return cmd(args)


if __name__ == "__main__":
    sys.exit(main())
