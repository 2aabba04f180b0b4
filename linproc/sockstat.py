"""Reader for /proc/net/sockstat and /proc/net/sockstat6."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from pathlib import Path

_UINT_RE = re.compile(r"[0-9]+")
_UINT64_MAX = (1 << 64) - 1


def _uint_or_zero(text: str) -> int:
    if not _UINT_RE.fullmatch(text):
        return 0
    return min(int(text), _UINT64_MAX)


def _key(name: str):
    return field(default=0, metadata={"key": name})


@dataclass
class SockStat:
    """Socket usage per protocol; absent entries stay 0."""

    sockets_used: int = _key("sockets.used")
    tcp_in_use: int = _key("TCP.inuse")
    tcp_orphan: int = _key("TCP.orphan")
    tcp_time_wait: int = _key("TCP.tw")
    tcp_allocated: int = _key("TCP.alloc")
    tcp_memory: int = _key("TCP.mem")
    tcp6_in_use: int = _key("TCP6.inuse")
    udp_in_use: int = _key("UDP.inuse")
    udp_memory: int = _key("UDP.mem")
    udp6_in_use: int = _key("UDP6.inuse")
    udplite_in_use: int = _key("UDPLITE.inuse")
    udplite6_in_use: int = _key("UDPLITE6.inuse")
    raw_in_use: int = _key("RAW.inuse")
    raw6_in_use: int = _key("RAW6.inuse")
    frag_in_use: int = _key("FRAG.inuse")
    frag_memory: int = _key("FRAG.memory")
    frag6_in_use: int = _key("FRAG6.inuse")
    frag6_memory: int = _key("FRAG6.memory")


def read_sockstat(path) -> SockStat:
    """Parse lines such as ``TCP: inuse 27 orphan 1 tw 23``."""
    values = {}
    for line in Path(path).read_text().split("\n"):
        protocol, sep, rest = line.partition(":")
        if not sep:
            continue
        key = ""
        for position, token in enumerate(rest.split()):
            if position % 2 == 0:
                key = token
                continue
            values[f"{protocol}.{key}"] = _uint_or_zero(token)
    return SockStat(
        **{
            item.name: values[item.metadata["key"]]
            for item in fields(SockStat)
            if item.metadata["key"] in values
        }
    )