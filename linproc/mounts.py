"""Reader for /proc/mounts."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Mount:
    """One mounted filesystem."""

    device: str
    mount_point: str
    fs_type: str
    options: str


def read_mounts(path) -> list[Mount]:
    """Parse a mounts table, one mount per line."""
    mounts = []
    with open(path) as handle:
        for line in handle:
            fields = line.split()
            if len(fields) < 4:
                raise ValueError(f"Cannot parse mount line: {line.rstrip()}")
            mounts.append(Mount(*fields[:4]))
    return mounts