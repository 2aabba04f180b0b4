"""Reader for /proc/vmstat."""

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
class VMStat:
    """Virtual memory counters; absent entries stay 0."""

    nr_free_pages: int = _key("nr_free_pages")
    nr_alloc_batch: int = _key("nr_alloc_batch")
    nr_inactive_anon: int = _key("nr_inactive_anon")
    nr_active_anon: int = _key("nr_active_anon")
    nr_inactive_file: int = _key("nr_inactive_file")
    nr_active_file: int = _key("nr_active_file")
    nr_unevictable: int = _key("nr_unevictable")
    nr_mlock: int = _key("nr_mlock")
    nr_anon_pages: int = _key("nr_anon_pages")
    nr_mapped: int = _key("nr_mapped")
    nr_file_pages: int = _key("nr_file_pages")
    nr_dirty: int = _key("nr_dirty")
    nr_writeback: int = _key("nr_writeback")
    nr_slab_reclaimable: int = _key("nr_slab_reclaimable")
    nr_slab_unreclaimable: int = _key("nr_slab_unreclaimable")
    nr_page_table_pages: int = _key("nr_page_table_pages")
    nr_kernel_stack: int = _key("nr_kernel_stack")
    nr_unstable: int = _key("nr_unstable")
    nr_bounce: int = _key("nr_bounce")
    nr_vmscan_write: int = _key("nr_vmscan_write")
    nr_vmscan_immediate_reclaim: int = _key("nr_vmscan_immediate_reclaim")
    nr_writeback_temp: int = _key("nr_writeback_temp")
    nr_isolated_anon: int = _key("nr_isolated_anon")
    nr_isolated_file: int = _key("nr_isolated_file")
    nr_shmem: int = _key("nr_shmem")
    nr_dirtied: int = _key("nr_dirtied")
    nr_written: int = _key("nr_written")
    numa_hit: int = _key("numa_hit")
    numa_miss: int = _key("numa_miss")
    numa_foreign: int = _key("numa_foreign")
    numa_interleave: int = _key("numa_interleave")
    numa_local: int = _key("numa_local")
    numa_other: int = _key("numa_other")
    workingset_refault: int = _key("workingset_refault")
    workingset_activate: int = _key("workingset_activate")
    workingset_nodereclaim: int = _key("workingset_nodereclaim")
    nr_anon_transparent_hugepages: int = _key("nr_anon_transparent_hugepages")
    nr_free_cma: int = _key("nr_free_cma")
    nr_dirty_threshold: int = _key("nr_dirty_threshold")
    nr_dirty_background_threshold: int = _key("nr_dirty_background_threshold")
    page_pagein: int = _key("pgpgin")
    page_pageout: int = _key("pgpgout")
    page_swapin: int = _key("pswpin")
    page_swapout: int = _key("pswpout")
    page_alloc_dma: int = _key("pgalloc_dma")
    page_alloc_dma32: int = _key("pgalloc_dma32")
    page_alloc_normal: int = _key("pgalloc_normal")
    page_alloc_movable: int = _key("pgalloc_movable")
    page_free: int = _key("pgfree")
    page_activate: int = _key("pgactivate")
    page_deactivate: int = _key("pgdeactivate")
    page_fault: int = _key("pgfault")
    page_major_fault: int = _key("pgmajfault")
    page_refill_dma: int = _key("pgrefill_dma")
    page_refill_dma32: int = _key("pgrefill_dma32")
    page_refill_normal: int = _key("pgrefill_normal")
    page_refill_movable: int = _key("pgrefill_movable")
    page_steal_kswapd_dma: int = _key("pgsteal_kswapd_dma")
    page_steal_kswapd_dma32: int = _key("pgsteal_kswapd_dma32")
    page_steal_kswapd_normal: int = _key("pgsteal_kswapd_normal")
    page_steal_kswapd_movable: int = _key("pgsteal_kswapd_movable")
    page_steal_direct_dma: int = _key("pgsteal_direct_dma")
    page_steal_direct_dma32: int = _key("pgsteal_direct_dma32")
    page_steal_direct_normal: int = _key("pgsteal_direct_normal")
    page_steal_direct_movable: int = _key("pgsteal_direct_movable")
    page_scan_kswapd_dma: int = _key("pgscan_kswapd_dma")
    page_scan_kswapd_dma32: int = _key("pgscan_kswapd_dma32")
    page_scan_kswapd_normal: int = _key("pgscan_kswapd_normal")
    page_scan_kswapd_movable: int = _key("pgscan_kswapd_movable")
    page_scan_direct_dma: int = _key("pgscan_direct_dma")
    page_scan_direct_dma32: int = _key("pgscan_direct_dma32")
    page_scan_direct_normal: int = _key("pgscan_direct_normal")
    page_scan_direct_movable: int = _key("pgscan_direct_movable")
    page_scan_direct_throttle: int = _key("pgscan_direct_throttle")
    zone_reclaim_failed: int = _key("zone_reclaim_failed")
    page_inode_steal: int = _key("pginodesteal")
    slabs_scanned: int = _key("slabs_scanned")
    kswapd_inodesteal: int = _key("kswapd_inodesteal")
    kswapd_low_watermark_hit_quickly: int = _key("kswapd_low_wmark_hit_quickly")
    kswapd_high_watermark_hit_quickly: int = _key("kswapd_high_wmark_hit_quickly")
    pageout_run: int = _key("pageoutrun")
    alloc_stall: int = _key("allocstall")
    page_rotated: int = _key("pgrotated")
    drop_pagecache: int = _key("drop_pagecache")
    drop_slab: int = _key("drop_slab")
    numa_pte_updates: int = _key("numa_pte_updates")
    numa_huge_pte_updates: int = _key("numa_huge_pte_updates")
    numa_hint_faults: int = _key("numa_hint_faults")
    numa_hint_faults_local: int = _key("numa_hint_faults_local")
    numa_pages_migrated: int = _key("numa_pages_migrated")
    page_migrate_success: int = _key("pgmigrate_success")
    page_migrate_fail: int = _key("pgmigrate_fail")
    compact_migrate_scanned: int = _key("compact_migrate_scanned")
    compact_free_scanned: int = _key("compact_free_scanned")
    compact_isolated: int = _key("compact_isolated")
    compact_stall: int = _key("compact_stall")
    compact_fail: int = _key("compact_fail")
    compact_success: int = _key("compact_success")
    htlb_buddy_alloc_success: int = _key("htlb_buddy_alloc_success")
    htlb_buddy_alloc_fail: int = _key("htlb_buddy_alloc_fail")
    unevictable_pages_culled: int = _key("unevictable_pgs_culled")
    unevictable_pages_scanned: int = _key("unevictable_pgs_scanned")
    unevictable_pages_rescued: int = _key("unevictable_pgs_rescued")
    unevictable_pages_mlocked: int = _key("unevictable_pgs_mlocked")
    unevictable_pages_munlocked: int = _key("unevictable_pgs_munlocked")
    unevictable_pages_cleared: int = _key("unevictable_pgs_cleared")
    unevictable_pages_stranded: int = _key("unevictable_pgs_stranded")
    thp_fault_alloc: int = _key("thp_fault_alloc")
    thp_fault_fallback: int = _key("thp_fault_fallback")
    thp_collapse_alloc: int = _key("thp_collapse_alloc")
    thp_collapse_alloc_failed: int = _key("thp_collapse_alloc_failed")
    thp_split: int = _key("thp_split")
    thp_zero_page_alloc: int = _key("thp_zero_page_alloc")
    thp_zero_page_alloc_failed: int = _key("thp_zero_page_alloc_failed")


_FIELD_BY_KEY = {item.metadata["key"]: item.name for item in fields(VMStat)}


def read_vmstat(path) -> VMStat:
    """Parse ``name value`` lines; other lines and unknown names are ignored."""
    values = {}
    for line in Path(path).read_text().split("\n"):
        parts = line.split()
        if len(parts) != 2:
            continue
        name, value = parts
        attribute = _FIELD_BY_KEY.get(name)
        if attribute is not None:
            values[attribute] = _uint_or_zero(value)
    return VMStat(**values)