"""Reader for /proc/<pid>/schedstat."""

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
class ProcessSchedStat:
    """Scheduler statistics of a process."""

    run_time: int = 0  # time spent on the cpu
    runqueue_time: int = 0  # time spent waiting on a runqueue
    run_periods: int = 0  # number of timeslices run on this cpu


_FIELD_NAMES = [item.name for item in fields(ProcessSchedStat)]


def read_process_sched_stat(path) -> ProcessSchedStat:
    """Parse a schedstat file; every field must be a number."""
    numbers = [_parse_uint(token) for token in Path(path).read_text().split()]
    return ProcessSchedStat(**dict(zip(_FIELD_NAMES, numbers)))