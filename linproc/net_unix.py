"""Reader for /proc/net/unix."""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path

_DIGITS = {10: re.compile(r"[0-9]+"), 16: re.compile(r"[0-9a-fA-F]+")}


def _parse_field(text: str, base: int, name: str) -> int:
    if not _DIGITS[base].fullmatch(text) or int(text, base) >= 1 << 64:
        raise ValueError(f"Cannot parse unix domain socket [invalid {name}]: {text}")
    return int(text, base)


@dataclass
class NetUnixDomainSocket:
    """One bound unix domain socket."""

    protocol: int
    ref_count: int
    flags: int
    type: int
    state: int
    inode: int
    path: str


def read_net_unix_domain_sockets(path) -> list[NetUnixDomainSocket]:
    """Read the unix socket table; sockets without a path are skipped."""
    lines = Path(path).read_text().split("\n")
    sockets = []
    for line in lines[1:]:
        fields = line.split()
        if len(fields) < 8:
            continue
        ref_count = _parse_field(fields[1], 16, "RefCount")
        protocol = _parse_field(fields[2], 10, "Protocol")
        flags = _parse_field(fields[3], 10, "Flags")
        socket_type = _parse_field(fields[4], 10, "Type")
        state = _parse_field(fields[5], 10, "State")
        inode = _parse_field(fields[6], 10, "Inode")
        sockets.append(
            NetUnixDomainSocket(
                protocol=protocol,
                ref_count=ref_count,
                flags=flags,
                type=socket_type,
                state=state,
                inode=inode,
                path=fields[7],
            )
        )
    return sockets