"""Reader for /proc/loadavg."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_UINT_RE = re.compile(r"[0-9]+")


def _parse_uint(text: str) -> int:
    if not _UINT_RE.fullmatch(text) or int(text) >= 1 << 64:
        raise ValueError(f"invalid unsigned integer: {text!r}")
    return int(text)


@dataclass
class LoadAvg:
    """System load averages and process counts."""

    last_1min: float
    last_5min: float
    last_15min: float
    process_running: int
    process_total: int
    last_pid: int


def read_loadavg(path) -> LoadAvg:
    """Parse a loadavg file."""
    content = Path(path).read_text().strip()
    fields = content.split()
    if len(fields) < 5:
        raise ValueError("Cannot parse loadavg: " + content)
    process = fields[3].split("/")
    if len(process) != 2:
        raise ValueError("Cannot parse loadavg: " + content)
    return LoadAvg(
        last_1min=float(fields[0]),
        last_5min=float(fields[1]),
        last_15min=float(fields[2]),
        process_running=_parse_uint(process[0]),
        process_total=_parse_uint(process[1]),
        last_pid=_parse_uint(fields[4]),
    )