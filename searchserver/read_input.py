"""Line-oriented input helpers."""

from __future__ import annotations

import re
import sys
from typing import TextIO

_NUMBER = re.compile(r"\s*([+-]?\d+)")


def read_line(stream: TextIO | None = None) -> str:
    """Read one line without its line terminator."""
    source = sys.stdin if stream is None else stream
    return source.readline().rstrip("\r\n")


def read_line_with_number(stream: TextIO | None = None) -> int:
    """Read an integer, skipping blank lines, and discard the rest of its line."""
    source = sys.stdin if stream is None else stream
    for line in source:
        if not line.strip():
            continue
        match = _NUMBER.match(line)
        if match is None:
            raise ValueError(f"Expected a number, got {line.rstrip()!r}")
        return int(match.group(1))
    raise EOFError("No number in input")