"""Process id discovery under a proc directory."""

from __future__ import annotations

import os
import re
import stat
from pathlib import Path

_UINT_RE = re.compile(r"[0-9]+")


def read_max_pid(path) -> int:
    """Read the largest process id from a pid_max file."""
    text = Path(path).read_text().strip()
    if not _UINT_RE.fullmatch(text) or int(text) >= 1 << 64:
        raise ValueError(f"invalid pid_max value: {text!r}")
    return int(text)


def list_pids(path, max_pid: int) -> list[int]:
    """Return, in order, the ids from 1 to ``max_pid`` that are directories in ``path``."""
    pids = []
    for pid in range(1, max_pid + 1):
        try:
            info = os.stat(os.path.join(path, str(pid)))
        except FileNotFoundError:
            continue
        if stat.S_ISDIR(info.st_mode):
            pids.append(pid)
    return pids