"""Reader for /proc/<pid>/stat."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from pathlib import Path

_LINE_RE = re.compile(r"^(\d+)( \(.*?\) )(.*)$", re.DOTALL)
_UINT_RE = re.compile(r"[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_uint(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value >= 1 << 64:
        raise ValueError(f"value out of range: {text!r}")
    return value


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not -(1 << 63) <= value < 1 << 63:
        raise ValueError(f"value out of range: {text!r}")
    return value


@dataclass
class ProcessStat:
    """Status information about a process; missing trailing fields stay 0."""

    pid: int = 0
    comm: str = ""
    state: str = ""
    ppid: int = 0
    pgrp: int = 0
    session: int = 0
    tty_nr: int = 0
    tpgid: int = 0
    flags: int = 0
    minflt: int = 0
    cminflt: int = 0
    majflt: int = 0
    cmajflt: int = 0
    utime: int = 0
    stime: int = 0
    cutime: int = 0
    cstime: int = 0
    priority: int = 0
    nice: int = 0
    num_threads: int = 0
    itrealvalue: int = 0
    starttime: int = 0
    vsize: int = 0
    rss: int = 0
    rsslim: int = 0
    startcode: int = 0
    endcode: int = 0
    startstack: int = 0
    kstkesp: int = 0
    kstkeip: int = 0
    signal: int = 0
    blocked: int = 0
    sigignore: int = 0
    sigcatch: int = 0
    wchan: int = 0
    nswap: int = 0
    cnswap: int = 0
    exit_signal: int = 0
    processor: int = 0
    rt_priority: int = 0
    policy: int = 0
    delayacct_blkio_ticks: int = 0
    guest_time: int = 0
    cguest_time: int = 0
    start_data: int = 0
    end_data: int = 0
    start_brk: int = 0
    arg_start: int = 0
    arg_end: int = 0
    env_start: int = 0
    env_end: int = 0
    exit_code: int = 0


_TEXT = frozenset({"comm", "state"})
_SIGNED = frozenset(
    {
        "ppid",
        "pgrp",
        "session",
        "tty_nr",
        "tpgid",
        "cutime",
        "cstime",
        "priority",
        "nice",
        "num_threads",
        "itrealvalue",
        "rss",
        "exit_signal",
        "processor",
        "cguest_time",
        "exit_code",
    }
)
_FIELD_NAMES = [item.name for item in fields(ProcessStat)]


def _convert(name: str, text: str):
    if name in _TEXT:
        return text
    if name in _SIGNED:
        return _parse_int(text)
    return _parse_uint(text)


def read_process_stat(path) -> ProcessStat:
    """Parse a process stat file; the command name keeps its parentheses."""
    content = Path(path).read_text().strip()
    match = _LINE_RE.match(content)
    if match is None:
        raise ValueError(f"Cannot parse process stat: {content}")
    pid, comm, rest = match.groups()
    tokens = [pid, comm.strip(), *rest.split()]
    values = {name: _convert(name, text) for name, text in zip(_FIELD_NAMES, tokens)}
    return ProcessStat(**values)