"""Logging configuration shared by the bbe command line."""

from __future__ import annotations

import logging
import sys
from typing import Iterable

LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}

LOG_LEVEL_CHOICES: Iterable[str] = tuple(LOG_LEVELS.keys())

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Third-party loggers that stay at INFO unless -vv is given
NOISY_LOGGERS = ("PIL",)


def add_logging_args(parser) -> None:
    """Add --log-level, -v and -q options to an argparse parser."""
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVEL_CHOICES,
        help="Set log verbosity explicitly (overrides -v/-q)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Show more detail, e.g. format detection decisions (-vv for everything)",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="Show less output (-qq for errors only)",
    )


def resolve_log_level(
    log_level: str | None = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    """Pick a numeric log level from an explicit name or -v/-q counts."""
    if log_level:
        return LOG_LEVELS[log_level.lower()]

    offset = verbose - quiet
    if offset >= 1:
        return logging.DEBUG
    if offset == 0:
        return logging.INFO
    if offset == -1:
        return logging.WARNING
    return logging.ERROR


def configure_logging(
    log_level: str | None = None,
    verbose: int = 0,
    quiet: int = 0,
) -> int:
    """Configure the root logger for command line use and return the level.

    Log records go to stderr so command output on stdout stays pipeable.
    """
    level = resolve_log_level(log_level=log_level, verbose=verbose, quiet=quiet)
    root_logger = logging.getLogger()
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.DEBUG if verbose >= 2 else max(level, logging.INFO))

    if root_logger.handlers:
        root_logger.setLevel(level)
        for handler in root_logger.handlers:
            handler.setLevel(level)
        return level

    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        stream=sys.stderr,
    )
    return level
