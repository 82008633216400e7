"""Line and token helpers shared by the format codecs.

All codecs read whitespace-separated text, one box per line. Blank lines
and surrounding whitespace are ignored everywhere.
"""

from __future__ import annotations

import math
import re
from typing import Callable, Iterable

_LINE_BREAK = re.compile(r"\r?\n")
_DIGITS = re.compile(r"[0-9]+")


def split_lines(content: str) -> list[str]:
    """Split annotation text into stripped, non-blank lines."""
    lines = (line.strip() for line in _LINE_BREAK.split(content.strip()))
    return [line for line in lines if line]


def tokenize(line: str) -> list[str]:
    """Split a line on runs of whitespace."""
    return line.split()


def parse_number(token: str) -> float | None:
    """Parse a token as a finite number, or return None.

    ``inf``, ``nan`` and underscore digit groups are rejected.
    """
    if "_" in token:
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_numbers(tokens: Iterable[str]) -> list[float] | None:
    """Parse every token as a finite number; None if any of them is not."""
    values = []
    for token in tokens:
        value = parse_number(token)
        if value is None:
            return None
        values.append(value)
    return values


def is_digits(token: str) -> bool:
    """True for unsigned integer tokens such as ``"42"``."""
    return _DIGITS.fullmatch(token) is not None


def is_normalized(token: str) -> bool:
    """True when the token is a finite number within [0, 1]."""
    value = parse_number(token)
    return value is not None and 0 <= value <= 1


def join_label(tokens: list[str]) -> str:
    """Rejoin label tokens with single spaces."""
    return " ".join(tokens)


def majority_match(lines: list[str], predicate: Callable[[str], bool]) -> bool:
    """True when at least half of ``lines`` (rounded up) satisfy ``predicate``.

    Used by every codec's ``detect``; empty content never matches.
    """
    if not lines:
        return False
    matching = sum(1 for line in lines if predicate(line))
    return matching >= math.ceil(len(lines) / 2)
