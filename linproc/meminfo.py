"""Reader for /proc/meminfo."""

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
class MemInfo:
    """Memory figures, mostly in kB; absent entries stay 0."""

    mem_total: int = _key("MemTotal")
    mem_free: int = _key("MemFree")
    mem_available: int = _key("MemAvailable")
    buffers: int = _key("Buffers")
    cached: int = _key("Cached")
    swap_cached: int = _key("SwapCached")
    active: int = _key("Active")
    inactive: int = _key("Inactive")
    active_anon: int = _key("Active(anon)")
    inactive_anon: int = _key("Inactive(anon)")
    active_file: int = _key("Active(file)")
    inactive_file: int = _key("Inactive(file)")
    unevictable: int = _key("Unevictable")
    mlocked: int = _key("Mlocked")
    swap_total: int = _key("SwapTotal")
    swap_free: int = _key("SwapFree")
    dirty: int = _key("Dirty")
    writeback: int = _key("Writeback")
    anon_pages: int = _key("AnonPages")
    mapped: int = _key("Mapped")
    shmem: int = _key("Shmem")
    slab: int = _key("Slab")
    s_reclaimable: int = _key("SReclaimable")
    s_unreclaim: int = _key("SUnreclaim")
    kernel_stack: int = _key("KernelStack")
    page_tables: int = _key("PageTables")
    nfs_unstable: int = _key("NFS_Unstable")
    bounce: int = _key("Bounce")
    writeback_tmp: int = _key("WritebackTmp")
    commit_limit: int = _key("CommitLimit")
    committed_as: int = _key("Committed_AS")
    vmalloc_total: int = _key("VmallocTotal")
    vmalloc_used: int = _key("VmallocUsed")
    vmalloc_chunk: int = _key("VmallocChunk")
    hardware_corrupted: int = _key("HardwareCorrupted")
    anon_huge_pages: int = _key("AnonHugePages")
    huge_pages_total: int = _key("HugePages_Total")
    huge_pages_free: int = _key("HugePages_Free")
    huge_pages_rsvd: int = _key("HugePages_Rsvd")
    huge_pages_surp: int = _key("HugePages_Surp")
    hugepagesize: int = _key("Hugepagesize")
    direct_map_4k: int = _key("DirectMap4k")
    direct_map_2m: int = _key("DirectMap2M")
    direct_map_1g: int = _key("DirectMap1G")


def read_meminfo(path) -> MemInfo:
    """Parse a meminfo file; unknown entries are ignored."""
    values = {}
    for line in Path(path).read_text().split("\n"):
        name, sep, rest = line.partition(":")
        if not sep:
            continue
        parts = rest.split()
        if not parts:
            raise ValueError(f"Cannot parse meminfo line: {line}")
        values[name] = _uint_or_zero(parts[0])
    return MemInfo(
        **{
            item.name: values[item.metadata["key"]]
            for item in fields(MemInfo)
            if item.metadata["key"] in values
        }
    )