"""Reader for /proc/net/dev."""

from __future__ import annotations

import re
from dataclasses import dataclass, fields
from pathlib import Path

_UINT_RE = re.compile(r"[0-9]+")
_UINT64_MAX = (1 << 64) - 1


def _uint_or_zero(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        return 0
    return min(int(text), _UINT64_MAX)


@dataclass
class NetworkStat:
    """Receive and transmit counters of one network interface."""

    iface: str = ""
    rx_bytes: int = 0
    rx_packets: int = 0
    rx_errs: int = 0
    rx_drop: int = 0
    rx_fifo: int = 0
    rx_frame: int = 0
    rx_compressed: int = 0
    rx_multicast: int = 0
    tx_bytes: int = 0
    tx_packets: int = 0
    tx_errs: int = 0
    tx_drop: int = 0
    tx_fifo: int = 0
    tx_colls: int = 0
    tx_carrier: int = 0
    tx_compressed: int = 0


_COUNTERS = [item.name for item in fields(NetworkStat) if item.name != "iface"]


def _parse_line(line: str) -> NetworkStat:
    colon = line.find(":")
    if colon <= 0:
        return NetworkStat()
    values = line[colon + 1:].split()
    if len(values) < len(_COUNTERS):
        raise ValueError(f"Cannot parse net dev line: {line}")
    return NetworkStat(
        iface=line[:colon].replace(" ", ""),
        **{name: _uint_or_zero(value) for name, value in zip(_COUNTERS, values)},
    )


def read_network_stat(path) -> list[NetworkStat]:
    """Parse a net dev table, skipping its two header lines.

    Every body line up to the last newline yields one entry; a line without
    an interface name yields an empty one.
    """
    lines = Path(path).read_text().split("\n")
    return [_parse_line(line) for line in lines[2:-1]]