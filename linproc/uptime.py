"""Reader for /proc/uptime."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from pathlib import Path


@dataclass
class Uptime:
    """Seconds since boot and seconds spent idle summed over all CPUs."""

    total: float
    idle: float

    def total_duration(self) -> timedelta:
        """Uptime truncated to whole seconds."""
        return timedelta(seconds=int(self.total))

    def idle_duration(self) -> timedelta:
        """Idle time truncated to whole seconds."""
        return timedelta(seconds=int(self.idle))


def read_uptime(path) -> Uptime:
    """Parse an uptime file."""
    content = Path(path).read_text()
    fields = content.split()
    if len(fields) < 2:
        raise ValueError("Cannot parse uptime: " + content.strip())
    return Uptime(total=float(fields[0]), idle=float(fields[1]))