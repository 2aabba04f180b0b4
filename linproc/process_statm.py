"""Reader for /proc/<pid>/statm."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from pathlib import Path

_UINT_RE = re.compile(r"[0-9]+")


def _parse_uint(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value >= 1 << 64:
        raise ValueError(f"value out of range: {text!r}")
    return value


@dataclass
class ProcessStatm:
    """Memory usage of a process, measured in pages."""

    size: int = 0  # total program size
    resident: int = 0  # resident set size
    share: int = 0  # shared pages
    text: int = 0  # text (code)
    lib: int = 0  # library, unused since Linux 2.6
    data: int = 0  # data + stack
    dirty: int = 0  # dirty pages, unused since Linux 2.6


_FIELD_NAMES = [item.name for item in fields(ProcessStatm)]


def read_process_statm(path) -> ProcessStatm:
    """Parse a statm file; every field must be a number."""
    numbers = [_parse_uint(token) for token in Path(path).read_text().split()]
    return ProcessStatm(**dict(zip(_FIELD_NAMES, numbers)))