"""Filesystem capacity of a mounted path."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass
class Disk:
    """Capacity figures in bytes, plus free inodes."""

    total: int
    used: int
    free: int
    free_inodes: int


def read_disk(path) -> Disk:
    """Return capacity figures of the filesystem holding ``path``."""
    stats = os.statvfs(path)
    total = stats.f_blocks * stats.f_bsize
    free = stats.f_bfree * stats.f_bsize
    return Disk(total=total, used=total - free, free=free, free_inodes=stats.f_ffree)