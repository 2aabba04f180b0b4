"""Reader for /proc/cpuinfo."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

_LINE_RE = re.compile(r"([^:]*?)\s*:\s*(.*)$")


def _int_or_zero(text: str) -> int:
    try:
        return int(text)
    except ValueError:
        return 0


def _float_or_zero(text: str) -> float:
    try:
        return float(text)
    except ValueError:
        return 0.0


@dataclass
class Processor:
    """One logical processor entry."""

    id: int = 0
    vendor_id: str = ""
    model: int = 0
    model_name: str = ""
    flags: list[str] = field(default_factory=list)
    cores: int = 0
    mhz: float = 0.0
    cache_size: int = 0  # KB
    physical_id: int = -1
    core_id: int = -1


@dataclass
class CPUInfo:
    """All processors listed in a cpuinfo file."""

    processors: list[Processor] = field(default_factory=list)

    def num_cpu(self) -> int:
        """Number of logical processors."""
        return len(self.processors)

    def num_core(self) -> int:
        """Number of distinct cores, or the CPU count if topology is unknown."""
        cores = set()
        for processor in self.processors:
            if processor.physical_id == -1:
                return self.num_cpu()
            cores.add((processor.physical_id, processor.core_id))
        return len(cores)

    def num_physical_cpu(self) -> int:
        """Number of physical packages, or the CPU count if topology is unknown."""
        packages = set()
        for processor in self.processors:
            if processor.physical_id == -1:
                return self.num_cpu()
            packages.add(processor.physical_id)
        return len(packages)


def _apply(processor: Processor, line: str) -> None:
    match = _LINE_RE.match(line)
    if match is None:
        raise ValueError(f"Cannot parse cpuinfo line: {line}")
    key, value = match.groups()
    if key == "processor":
        processor.id = _int_or_zero(value)
    elif key == "vendor_id":
        processor.vendor_id = value
    elif key == "model":
        processor.model = _int_or_zero(value)
    elif key == "model name":
        processor.model_name = value
    elif key == "flags":
        processor.flags = value.split()
    elif key == "cpu cores":
        processor.cores = _int_or_zero(value)
    elif key == "cpu MHz":
        processor.mhz = _float_or_zero(value)
    elif key == "cache size":
        parts = value.split(maxsplit=1)
        processor.cache_size = _int_or_zero(parts[0] if parts else "")
        if line.endswith("MB"):
            processor.cache_size *= 1024
    elif key == "physical id":
        processor.physical_id = _int_or_zero(value)
    elif key == "core id":
        processor.core_id = _int_or_zero(value)


def read_cpuinfo(path) -> CPUInfo:
    """Parse a cpuinfo file; each blank line closes a processor entry."""
    lines = Path(path).read_text().split("\n")
    info = CPUInfo()
    processor = Processor()
    last = len(lines) - 1
    for index, line in enumerate(lines):
        if index == last:
            continue
        if not line:
            info.processors.append(processor)
            processor = Processor()
            continue
        _apply(processor, line)
    return info