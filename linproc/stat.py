"""Reader for /proc/stat."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from pathlib import Path

_UINT_RE = re.compile(r"[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT64_MAX = (1 << 64) - 1


def _uint_or_zero(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        return 0
    return min(int(text), _UINT64_MAX)


def _int_or_zero(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        return 0
    return max(-(1 << 63), min(int(text), (1 << 63) - 1))


@dataclass
class CPUStat:
    """Time counters of one CPU line, in clock ticks."""

    id: str = ""
    user: int = 0
    nice: int = 0
    system: int = 0
    idle: int = 0
    iowait: int = 0
    irq: int = 0
    softirq: int = 0
    steal: int = 0
    guest: int = 0
    guest_nice: int = 0


_CPU_COUNTERS = [item.name for item in fields(CPUStat) if item.name != "id"]


@dataclass
class Stat:
    """Kernel and CPU activity counters."""

    cpu_all: CPUStat = field(default_factory=CPUStat)
    cpus: list[CPUStat] = field(default_factory=list)
    interrupts: int = 0
    context_switches: int = 0
    boot_time: datetime | None = None
    processes: int = 0
    procs_running: int = 0
    procs_blocked: int = 0


def _cpu_stat(fields_: list[str]) -> CPUStat:
    counters = {name: _uint_or_zero(value) for name, value in zip(_CPU_COUNTERS, fields_[1:])}
    return CPUStat(id=fields_[0], **counters)


def _value(fields_: list[str]) -> str:
    if len(fields_) < 2:
        raise ValueError(f"Cannot parse stat line: {' '.join(fields_)}")
    return fields_[1]


_SIMPLE = {
    "intr": "interrupts",
    "ctxt": "context_switches",
    "processes": "processes",
    "procs_running": "procs_running",
    "procs_blocked": "procs_blocked",
}


def read_stat(path) -> Stat:
    """Parse a stat file; only a cpu line on the first line is the total."""
    stat = Stat()
    for index, line in enumerate(Path(path).read_text().split("\n")):
        parts = line.split()
        if not parts:
            continue
        name = parts[0]
        if name.startswith("cpu"):
            cpu = _cpu_stat(parts)
            if index == 0:
                stat.cpu_all = cpu
            else:
                stat.cpus.append(cpu)
        elif name in _SIMPLE:
            setattr(stat, _SIMPLE[name], _uint_or_zero(_value(parts)))
        elif name == "btime":
            seconds = _int_or_zero(_value(parts))
            stat.boot_time = datetime.fromtimestamp(seconds, tz=timezone.utc)
    return stat