"""Reader for /proc/<pid>/io."""

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
class ProcessIO:
    """I/O statistics of a process; names match the file's keys."""

    rchar: int = 0  # chars read
    wchar: int = 0  # chars written
    syscr: int = 0  # read syscalls
    syscw: int = 0  # write syscalls
    read_bytes: int = 0  # bytes read
    write_bytes: int = 0  # bytes written
    cancelled_write_bytes: int = 0  # bytes truncated


_FIELD_NAMES = frozenset(item.name for item in fields(ProcessIO))


def read_process_io(path) -> ProcessIO:
    """Parse ``key: value`` lines; every value must be a number."""
    values = {}
    for line in Path(path).read_text().split("\n"):
        if ": " not in line:
            continue
        parts = line.split(": ")
        values[parts[0]] = _parse_uint(parts[1])
    return ProcessIO(**{name: value for name, value in values.items() if name in _FIELD_NAMES})