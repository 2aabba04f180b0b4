"""Reader for /proc/net/snmp."""

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
class Snmp:
    """SNMP counters per protocol; absent or unparsable entries stay 0."""

    # Ip
    ip_forwarding: int = _key("IpForwarding")
    ip_default_ttl: int = _key("IpDefaultTTL")
    ip_in_receives: int = _key("IpInReceives")
    ip_in_hdr_errors: int = _key("IpInHdrErrors")
    ip_in_addr_errors: int = _key("IpInAddrErrors")
    ip_forw_datagrams: int = _key("IpForwDatagrams")
    ip_in_unknown_protos: int = _key("IpInUnknownProtos")
    ip_in_discards: int = _key("IpInDiscards")
    ip_in_delivers: int = _key("IpInDelivers")
    ip_out_requests: int = _key("IpOutRequests")
    ip_out_discards: int = _key("IpOutDiscards")
    ip_out_no_routes: int = _key("IpOutNoRoutes")
    ip_reasm_timeout: int = _key("IpReasmTimeout")
    ip_reasm_reqds: int = _key("IpReasmReqds")
    ip_reasm_oks: int = _key("IpReasmOKs")
    ip_reasm_fails: int = _key("IpReasmFails")
    ip_frag_oks: int = _key("IpFragOKs")
    ip_frag_fails: int = _key("IpFragFails")
    ip_frag_creates: int = _key("IpFragCreates")
    # Icmp
    icmp_in_msgs: int = _key("IcmpInMsgs")
    icmp_in_errors: int = _key("IcmpInErrors")
    icmp_in_csum_errors: int = _key("IcmpInCsumErrors")
    icmp_in_dest_unreachs: int = _key("IcmpInDestUnreachs")
    icmp_in_time_excds: int = _key("IcmpInTimeExcds")
    icmp_in_parm_probs: int = _key("IcmpInParmProbs")
    icmp_in_src_quenchs: int = _key("IcmpInSrcQuenchs")
    icmp_in_redirects: int = _key("IcmpInRedirects")
    icmp_in_echos: int = _key("IcmpInEchos")
    icmp_in_echo_reps: int = _key("IcmpInEchoReps")
    icmp_in_timestamps: int = _key("IcmpInTimestamps")
    icmp_in_timestamp_reps: int = _key("IcmpInTimestampReps")
    icmp_in_addr_masks: int = _key("IcmpInAddrMasks")
    icmp_in_addr_mask_reps: int = _key("IcmpInAddrMaskReps")
    icmp_out_msgs: int = _key("IcmpOutMsgs")
    icmp_out_errors: int = _key("IcmpOutErrors")
    icmp_out_dest_unreachs: int = _key("IcmpOutDestUnreachs")
    icmp_out_time_excds: int = _key("IcmpOutTimeExcds")
    icmp_out_parm_probs: int = _key("IcmpOutParmProbs")
    icmp_out_src_quenchs: int = _key("IcmpOutSrcQuenchs")
    icmp_out_redirects: int = _key("IcmpOutRedirects")
    icmp_out_echos: int = _key("IcmpOutEchos")
    icmp_out_echo_reps: int = _key("IcmpOutEchoReps")
    icmp_out_timestamps: int = _key("IcmpOutTimestamps")
    icmp_out_timestamp_reps: int = _key("IcmpOutTimestampReps")
    icmp_out_addr_masks: int = _key("IcmpOutAddrMasks")
    icmp_out_addr_mask_reps: int = _key("IcmpOutAddrMaskReps")
    # IcmpMsg
    icmpmsg_in_type0: int = _key("IcmpMsgInType0")
    icmpmsg_in_type3: int = _key("IcmpMsgInType3")
    icmpmsg_in_type5: int = _key("IcmpMsgInType5")
    icmpmsg_in_type8: int = _key("IcmpMsgInType8")
    icmpmsg_in_type11: int = _key("IcmpMsgInType11")
    icmpmsg_in_type13: int = _key("IcmpMsgInType13")
    icmpmsg_out_type0: int = _key("IcmpMsgOutType0")
    icmpmsg_out_type3: int = _key("IcmpMsgOutType3")
    icmpmsg_out_type8: int = _key("IcmpMsgOutType8")
    icmpmsg_out_type14: int = _key("IcmpMsgOutType14")
    icmpmsg_out_type69: int = _key("IcmpMsgOutType69")
    # Tcp
    tcp_rto_algorithm: int = _key("TcpRtoAlgorithm")
    tcp_rto_min: int = _key("TcpRtoMin")
    tcp_rto_max: int = _key("TcpRtoMax")
    tcp_max_conn: int = _key("TcpMaxConn")
    tcp_active_opens: int = _key("TcpActiveOpens")
    tcp_passive_opens: int = _key("TcpPassiveOpens")
    tcp_attempt_fails: int = _key("TcpAttemptFails")
    tcp_estab_resets: int = _key("TcpEstabResets")
    tcp_curr_estab: int = _key("TcpCurrEstab")
    tcp_in_segs: int = _key("TcpInSegs")
    tcp_out_segs: int = _key("TcpOutSegs")
    tcp_retrans_segs: int = _key("TcpRetransSegs")
    tcp_in_errs: int = _key("TcpInErrs")
    tcp_out_rsts: int = _key("TcpOutRsts")
    tcp_in_csum_errors: int = _key("TcpInCsumErrors")
    # Udp
    udp_in_datagrams: int = _key("UdpInDatagrams")
    udp_no_ports: int = _key("UdpNoPorts")
    udp_in_errors: int = _key("UdpInErrors")
    udp_out_datagrams: int = _key("UdpOutDatagrams")
    udp_rcvbuf_errors: int = _key("UdpRcvbufErrors")
    udp_sndbuf_errors: int = _key("UdpSndbufErrors")
    udp_in_csum_errors: int = _key("UdpInCsumErrors")
    # UdpLite
    udp_lite_in_datagrams: int = _key("UdpLiteInDatagrams")
    udp_lite_no_ports: int = _key("UdpLiteNoPorts")
    udp_lite_in_errors: int = _key("UdpLiteInErrors")
    udp_lite_out_datagrams: int = _key("UdpLiteOutDatagrams")
    udp_lite_rcvbuf_errors: int = _key("UdpLiteRcvbufErrors")
    udp_lite_sndbuf_errors: int = _key("UdpLiteSndbufErrors")
    udp_lite_in_csum_errors: int = _key("UdpLiteInCsumErrors")


def _after_colon(line: str) -> list[str]:
    return line[line.find(":") + 1:].split()


def read_snmp(path) -> Snmp:
    """Parse header/value line pairs such as ``Ip: Forwarding DefaultTTL ...``.

    Each counter is keyed by its protocol prefix joined to its header name;
    headers without a matching value read as 0.
    """
    lines = Path(path).read_text().split("\n")
    values: dict[str, str] = {}
    for header_line, value_line in zip(lines[0::2], lines[1::2]):
        words = header_line.split()
        if not words:
            raise ValueError("Cannot parse snmp: empty header line")
        protocol = words[0].replace(":", "")
        row = _after_colon(value_line)
        for position, header in enumerate(_after_colon(header_line)):
            values[protocol + header] = row[position] if position < len(row) else ""
    return Snmp(
        **{
            item.name: _uint_or_zero(values[item.metadata["key"]])
            for item in fields(Snmp)
            if item.metadata["key"] in values
        }
    )