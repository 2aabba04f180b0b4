"""Reader for /proc/interrupts."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_count(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid interrupt count: {text!r}")
    value = int(text)
    if not -(1 << 63) <= value < 1 << 63:
        raise ValueError(f"interrupt count out of range: {text!r}")
    return value % (1 << 64)


@dataclass
class Interrupt:
    """One interrupt source with its per-CPU counts."""

    name: str
    counts: list[int] = field(default_factory=list)
    description: str = ""


def read_interrupts(path) -> list[Interrupt]:
    """Parse an interrupts table; the header line gives the number of CPUs."""
    lines = Path(path).read_text().split("\n")
    num_cpus = len(lines[0].split())
    interrupts = []
    for line in lines[1:]:
        fields = line.split()
        if not fields:
            continue
        counts = []
        for text in fields[1:num_cpus + 1]:
            counts.append(_parse_count(text))
        interrupts.append(
            Interrupt(
                name=fields[0].removesuffix(":"),
                counts=counts,
                description=" ".join(fields[len(counts) + 1:]),
            )
        )
    return interrupts