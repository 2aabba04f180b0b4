"""Reader for /proc/diskstats."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path

_UINT_RE = re.compile(r"[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")
_UINT64_MAX = (1 << 64) - 1
_INT64_MIN = -(1 << 63)
_INT64_MAX = (1 << 63) - 1
_SECTOR_SIZE = 512


def _uint_or_zero(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        return 0
    return min(int(text), _UINT64_MAX)


def _int_or_zero(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        return 0
    return max(_INT64_MIN, min(int(text), _INT64_MAX))


@dataclass
class DiskStat:
    """Activity counters of one block device.

    Counters may wrap on busy or long-lived systems, and the kernel updates
    them without locking, so small inaccuracies are possible.
    """

    major: int = 0
    minor: int = 0
    name: str = ""
    read_ios: int = 0
    read_merges: int = 0
    read_sectors: int = 0
    read_ticks: int = 0
    write_ios: int = 0
    write_merges: int = 0
    write_sectors: int = 0
    write_ticks: int = 0
    in_flight: int = 0
    io_ticks: int = 0
    time_in_queue: int = 0

    def read_bytes(self) -> int:
        """Bytes read, from 512-byte sectors."""
        return self.read_sectors * _SECTOR_SIZE

    def write_bytes(self) -> int:
        """Bytes written, from 512-byte sectors."""
        return self.write_sectors * _SECTOR_SIZE

    def read_wait(self) -> timedelta:
        """Total time waited for read requests."""
        return timedelta(milliseconds=self.read_ticks)

    def write_wait(self) -> timedelta:
        """Total time waited for write requests."""
        return timedelta(milliseconds=self.write_ticks)

    def io_time(self) -> timedelta:
        """Total time the device has been active."""
        return timedelta(milliseconds=self.io_ticks)

    def queue_time(self) -> timedelta:
        """Total time waited for all requests."""
        return timedelta(milliseconds=self.time_in_queue)


def _parse_line(line: str) -> DiskStat:
    fields = line.split()
    if len(fields) < 14:
        raise ValueError(f"Cannot parse diskstats line: {line}")
    counters = [_uint_or_zero(value) for value in fields[3:14]]
    return DiskStat(_int_or_zero(fields[0]), _int_or_zero(fields[1]), fields[2], *counters)


def read_disk_stats(path) -> list[DiskStat]:
    """Parse a diskstats file; the text after the last newline is ignored."""
    lines = Path(path).read_text().split("\n")
    return [_parse_line(line) for line in lines[:-1]]