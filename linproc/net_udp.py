"""Reader for /proc/net/udp and /proc/net/udp6."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import asdict, dataclass
from pathlib import Path

from linproc.net_ip import NetSocket, parse_net_socket

_UINT_RE = re.compile(r"[0-9]+")


def _parse_uint(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value >= 1 << 64:
        raise ValueError(f"value out of range: {text!r}")
    return value


@dataclass
class NetUDPSocket(NetSocket):
    """One UDP socket with its drop counter."""

    drops: int = 0


def read_net_udp_sockets(path, decoder: Callable[[str], str]) -> list[NetUDPSocket]:
    """Read a UDP socket table, decoding addresses with ``decoder``."""
    lines = Path(path).read_text().split("\n")
    sockets = []
    for line in lines[1:]:
        fields = line.split()
        if len(fields) < 13:
            continue
        base = parse_net_socket(fields, decoder)
        sockets.append(NetUDPSocket(**asdict(base), drops=_parse_uint(fields[12])))
    return sockets