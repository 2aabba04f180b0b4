"""Reader for /proc/net/netstat."""

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
class NetStat:
    """Extended TCP and IP counters; absent entries stay 0."""

    # TcpExt
    syncookies_sent: int = _key("SyncookiesSent")
    syncookies_recv: int = _key("SyncookiesRecv")
    syncookies_failed: int = _key("SyncookiesFailed")
    embryonic_rsts: int = _key("EmbryonicRsts")
    prune_called: int = _key("PruneCalled")
    rcv_pruned: int = _key("RcvPruned")
    ofo_pruned: int = _key("OfoPruned")
    out_of_window_icmps: int = _key("OutOfWindowIcmps")
    lock_dropped_icmps: int = _key("LockDroppedIcmps")
    arp_filter: int = _key("ArpFilter")
    tw: int = _key("TW")
    tw_recycled: int = _key("TWRecycled")
    tw_killed: int = _key("TWKilled")
    paws_passive: int = _key("PAWSPassive")
    paws_active: int = _key("PAWSActive")
    paws_estab: int = _key("PAWSEstab")
    delayed_acks: int = _key("DelayedACKs")
    delayed_ack_locked: int = _key("DelayedACKLocked")
    delayed_ack_lost: int = _key("DelayedACKLost")
    listen_overflows: int = _key("ListenOverflows")
    listen_drops: int = _key("ListenDrops")
    tcp_prequeued: int = _key("TCPPrequeued")
    tcp_direct_copy_from_backlog: int = _key("TCPDirectCopyFromBacklog")
    tcp_direct_copy_from_prequeue: int = _key("TCPDirectCopyFromPrequeue")
    tcp_prequeue_dropped: int = _key("TCPPrequeueDropped")
    tcp_hp_hits: int = _key("TCPHPHits")
    tcp_hp_hits_to_user: int = _key("TCPHPHitsToUser")
    tcp_pure_acks: int = _key("TCPPureAcks")
    tcp_hp_acks: int = _key("TCPHPAcks")
    tcp_reno_recovery: int = _key("TCPRenoRecovery")
    tcp_sack_recovery: int = _key("TCPSackRecovery")
    tcp_sack_reneging: int = _key("TCPSACKReneging")
    tcp_fack_reorder: int = _key("TCPFACKReorder")
    tcp_sack_reorder: int = _key("TCPSACKReorder")
    tcp_reno_reorder: int = _key("TCPRenoReorder")
    tcp_ts_reorder: int = _key("TCPTSReorder")
    tcp_full_undo: int = _key("TCPFullUndo")
    tcp_partial_undo: int = _key("TCPPartialUndo")
    tcp_dsack_undo: int = _key("TCPDSACKUndo")
    tcp_loss_undo: int = _key("TCPLossUndo")
    tcp_loss: int = _key("TCPLoss")
    tcp_lost_retransmit: int = _key("TCPLostRetransmit")
    tcp_reno_failures: int = _key("TCPRenoFailures")
    tcp_sack_failures: int = _key("TCPSackFailures")
    tcp_loss_failures: int = _key("TCPLossFailures")
    tcp_fast_retrans: int = _key("TCPFastRetrans")
    tcp_forward_retrans: int = _key("TCPForwardRetrans")
    tcp_slow_start_retrans: int = _key("TCPSlowStartRetrans")
    tcp_timeouts: int = _key("TCPTimeouts")
    tcp_loss_probes: int = _key("TCPLossProbes")
    tcp_loss_probe_recovery: int = _key("TCPLossProbeRecovery")
    tcp_reno_recovery_fail: int = _key("TCPRenoRecoveryFail")
    tcp_sack_recovery_fail: int = _key("TCPSackRecoveryFail")
    tcp_scheduler_failed: int = _key("TCPSchedulerFailed")
    tcp_rcv_collapsed: int = _key("TCPRcvCollapsed")
    tcp_dsack_old_sent: int = _key("TCPDSACKOldSent")
    tcp_dsack_ofo_sent: int = _key("TCPDSACKOfoSent")
    tcp_dsack_recv: int = _key("TCPDSACKRecv")
    tcp_dsack_ofo_recv: int = _key("TCPDSACKOfoRecv")
    tcp_abort_on_syn: int = _key("TCPAbortOnSyn")
    tcp_abort_on_data: int = _key("TCPAbortOnData")
    tcp_abort_on_close: int = _key("TCPAbortOnClose")
    tcp_abort_on_memory: int = _key("TCPAbortOnMemory")
    tcp_abort_on_timeout: int = _key("TCPAbortOnTimeout")
    tcp_abort_on_linger: int = _key("TCPAbortOnLinger")
    tcp_abort_failed: int = _key("TCPAbortFailed")
    tcp_memory_pressures: int = _key("TCPMemoryPressures")
    tcp_sack_discard: int = _key("TCPSACKDiscard")
    tcp_dsack_ignored_old: int = _key("TCPDSACKIgnoredOld")
    tcp_dsack_ignored_no_undo: int = _key("TCPDSACKIgnoredNoUndo")
    tcp_spurious_rtos: int = _key("TCPSpuriousRTOs")
    tcp_md5_not_found: int = _key("TCPMD5NotFound")
    tcp_md5_unexpected: int = _key("TCPMD5Unexpected")
    tcp_sack_shifted: int = _key("TCPSackShifted")
    tcp_sack_merged: int = _key("TCPSackMerged")
    tcp_sack_shift_fallback: int = _key("TCPSackShiftFallback")
    tcp_backlog_drop: int = _key("TCPBacklogDrop")
    tcp_min_ttl_drop: int = _key("TCPMinTTLDrop")
    tcp_defer_accept_drop: int = _key("TCPDeferAcceptDrop")
    ip_reverse_path_filter: int = _key("IPReversePathFilter")
    tcp_time_wait_overflow: int = _key("TCPTimeWaitOverflow")
    tcp_req_q_full_do_cookies: int = _key("TCPReqQFullDoCookies")
    tcp_req_q_full_drop: int = _key("TCPReqQFullDrop")
    tcp_retrans_fail: int = _key("TCPRetransFail")
    tcp_rcv_coalesce: int = _key("TCPRcvCoalesce")
    tcp_ofo_queue: int = _key("TCPOFOQueue")
    tcp_ofo_drop: int = _key("TCPOFODrop")
    tcp_ofo_merge: int = _key("TCPOFOMerge")
    tcp_challenge_ack: int = _key("TCPChallengeACK")
    tcp_syn_challenge: int = _key("TCPSYNChallenge")
    tcp_fast_open_active: int = _key("TCPFastOpenActive")
    tcp_fast_open_active_fail: int = _key("TCPFastOpenActiveFail")
    tcp_fast_open_passive: int = _key("TCPFastOpenPassive")
    tcp_fast_open_passive_fail: int = _key("TCPFastOpenPassiveFail")
    tcp_fast_open_listen_overflow: int = _key("TCPFastOpenListenOverflow")
    tcp_fast_open_cookie_reqd: int = _key("TCPFastOpenCookieReqd")
    tcp_spurious_rtx_host_queues: int = _key("TCPSpuriousRtxHostQueues")
    busy_poll_rx_packets: int = _key("BusyPollRxPackets")
    tcp_auto_corking: int = _key("TCPAutoCorking")
    tcp_from_zero_window_adv: int = _key("TCPFromZeroWindowAdv")
    tcp_to_zero_window_adv: int = _key("TCPToZeroWindowAdv")
    tcp_want_zero_window_adv: int = _key("TCPWantZeroWindowAdv")
    tcp_syn_retrans: int = _key("TCPSynRetrans")
    tcp_orig_data_sent: int = _key("TCPOrigDataSent")
    # IpExt
    in_no_routes: int = _key("InNoRoutes")
    in_truncated_pkts: int = _key("InTruncatedPkts")
    in_mcast_pkts: int = _key("InMcastPkts")
    out_mcast_pkts: int = _key("OutMcastPkts")
    in_bcast_pkts: int = _key("InBcastPkts")
    out_bcast_pkts: int = _key("OutBcastPkts")
    in_octets: int = _key("InOctets")
    out_octets: int = _key("OutOctets")
    in_mcast_octets: int = _key("InMcastOctets")
    out_mcast_octets: int = _key("OutMcastOctets")
    in_bcast_octets: int = _key("InBcastOctets")
    out_bcast_octets: int = _key("OutBcastOctets")
    in_csum_errors: int = _key("InCsumErrors")
    in_no_ect_pkts: int = _key("InNoECTPkts")
    in_ect1_pkts: int = _key("InECT1Pkts")
    in_ect0_pkts: int = _key("InECT0Pkts")
    in_ce_pkts: int = _key("InCEPkts")


def _after_colon(line: str) -> list[str]:
    return line[line.find(":") + 1:].split()


def read_netstat(path) -> NetStat:
    """Parse header/value line pairs such as ``TcpExt: SyncookiesSent ...``."""
    lines = Path(path).read_text().split("\n")
    values: dict[str, str] = {}
    for header_line, value_line in zip(lines[0::2], lines[1::2]):
        headers = _after_colon(header_line)
        row = _after_colon(value_line)
        if len(row) < len(headers):
            raise ValueError(f"Cannot parse netstat values: {value_line}")
        values.update(zip(headers, row))
    return NetStat(
        **{
            item.name: _uint_or_zero(values[item.metadata["key"]])
            for item in fields(NetStat)
            if item.metadata["key"] in values
        }
    )