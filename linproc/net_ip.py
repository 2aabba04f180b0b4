"""Address decoding and common socket parsing for the /proc/net socket tables."""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

_IPV4_RE = re.compile(r"[0-9a-fA-F]{8}:[0-9a-fA-F]{4}")
_IPV6_RE = re.compile(r"[0-9a-fA-F]{32}:[0-9a-fA-F]{4}")
_DIGITS = {10: re.compile(r"[0-9]+"), 16: re.compile(r"[0-9a-fA-F]+")}


def _parse_uint(text: str, base: int = 10, bits: int = 64) -> int:
    if not _DIGITS[base].fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text, base)
    if value >= 1 << bits:
        raise ValueError(f"value out of range: {text!r}")
    return value


@dataclass
class NetSocket:
    """Fields shared by every entry of the TCP and UDP socket tables."""

    local_address: str
    remote_address: str
    status: int
    tx_queue: int
    rx_queue: int
    uid: int
    inode: int
    ref_count: int


def decode_ipv4(s: str) -> str:
    """Decode a kernel hex ``ADDR:PORT`` pair into ``a.b.c.d:port``."""
    if not _IPV4_RE.fullmatch(s):
        raise ValueError(f"Cannot decode ipv4 address: {s}")
    host, port = s.split(":")
    address = ipaddress.IPv4Address(bytes.fromhex(host)[::-1])
    return f"{address}:{int(port, 16)}"


def decode_ipv6(s: str) -> str:
    """Decode a kernel hex ``ADDR:PORT`` pair into ``ipv6:port``."""
    if not _IPV6_RE.fullmatch(s):
        raise ValueError(f"Cannot decode ipv6 address: {s}")
    host, port = s.split(":")
    raw = bytes.fromhex(host)
    # The kernel prints the address as four host-order 32-bit words.
    packed = b"".join(raw[start:start + 4][::-1] for start in range(0, 16, 4))
    address = ipaddress.IPv6Address(packed)
    mapped = address.ipv4_mapped
    text = str(mapped) if mapped is not None else str(address)
    return f"{text}:{int(port, 16)}"


def parse_net_socket(fields: Sequence[str], decoder: Callable[[str], str]) -> NetSocket:
    """Parse the leading columns of a socket table line split into fields."""
    if len(fields) < 11:
        raise ValueError("Cannot parse net socket line: " + " ".join(fields))
    if ":" not in fields[4]:
        raise ValueError("Cannot parse tx/rx queues: " + fields[4])
    queues = fields[4].split(":")
    return NetSocket(
        local_address=decoder(fields[1]),
        remote_address=decoder(fields[2]),
        status=_parse_uint(fields[3], 16, 8),
        tx_queue=_parse_uint(queues[0], 16),
        rx_queue=_parse_uint(queues[1], 16),
        uid=_parse_uint(fields[7], 10, 32),
        inode=_parse_uint(fields[9]),
        ref_count=_parse_uint(fields[10]),
    )