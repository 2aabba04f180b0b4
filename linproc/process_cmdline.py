"""Reader for /proc/<pid>/cmdline."""

from __future__ import annotations

import re
from pathlib import Path

_SEPARATOR_RE = re.compile(rb"\x00(?=[^\x00])")


def read_process_cmdline(path) -> str:
    """Return the command line with its NUL separators turned into spaces.

    Trailing NUL bytes are dropped, and a NUL directly followed by another
    byte becomes a space.
    """
    data = Path(path).read_bytes()
    end = 0
    for index in range(len(data) - 1, 0, -1):
        if data[index] != 0:
            end = index + 1
            break
    useful = _SEPARATOR_RE.sub(b" ", data[:end])
    return useful.decode("utf-8", errors="replace").strip()