"""Reader for /proc/net/tcp and /proc/net/tcp6."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import asdict, dataclass
from pathlib import Path

from linproc.net_ip import NetSocket, parse_net_socket

_UINT_RE = re.compile(r"[0-9]+")
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_uint(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text)
    if value >= 1 << 64:
        raise ValueError(f"value out of range: {text!r}")
    return value


def _parse_int(text: str, bits: int) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ValueError(f"value out of range: {text!r}")
    return value


@dataclass
class NetTCPSocket(NetSocket):
    """One TCP socket; timer fields are only present for some states."""

    retransmit_timeout: int = 0
    predicted_tick: int = 0
    ack_quick: int = 0
    ack_pingpong: bool = False
    sending_congestion_window: int = 0
    slow_start_size_threshold: int = 0


def read_net_tcp_sockets(path, decoder: Callable[[str], str]) -> list[NetTCPSocket]:
    """Read a TCP socket table, decoding addresses with ``decoder``."""
    lines = Path(path).read_text().rstrip("\n ").split("\n")
    sockets = []
    for line in lines[1:]:
        fields = line.split()
        base = parse_net_socket(fields, decoder)
        extra = {}
        # Depending on socket state the line holds either 12 or 17 fields.
        if len(fields) >= 17:
            retransmit_timeout = _parse_uint(fields[12])
            predicted_tick = _parse_uint(fields[13])
            quick = _parse_int(fields[14], 8)
            extra = {
                "retransmit_timeout": retransmit_timeout,
                "predicted_tick": predicted_tick,
                "ack_quick": (quick >> 1) & 0xFF,
                "ack_pingpong": (quick & 1) == 1,
                "sending_congestion_window": _parse_uint(fields[15]),
                "slow_start_size_threshold": _parse_int(fields[16], 32),
            }
        sockets.append(NetTCPSocket(**asdict(base), **extra))
    return sockets