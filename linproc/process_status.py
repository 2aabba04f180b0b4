"""Reader for /proc/<pid>/status."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path

_DIGITS = {10: re.compile(r"[0-9]+"), 16: re.compile(r"[0-9a-fA-F]+")}
_INT_RE = re.compile(r"[+-]?[0-9]+")


def _parse_uint(text: str, base: int = 10, bits: int = 64) -> int:
    if not _DIGITS[base].fullmatch(text):
        raise ValueError(f"invalid unsigned integer: {text!r}")
    value = int(text, base)
    if value >= 1 << bits:
        raise ValueError(f"value out of range: {text!r}")
    return value


def _parse_int(text: str) -> int:
    if not _INT_RE.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    value = int(text)
    if not -(1 << 63) <= value < 1 << 63:
        raise ValueError(f"value out of range: {text!r}")
    return value


@dataclass
class ProcessStatus:
    """Human-oriented status of a process; sizes of ``vm_*`` are in kB."""

    name: str = ""
    state: str = ""
    tgid: int = 0
    pid: int = 0
    ppid: int = 0
    tracer_pid: int = 0
    real_uid: int = 0
    effective_uid: int = 0
    saved_set_uid: int = 0
    filesystem_uid: int = 0
    real_gid: int = 0
    effective_gid: int = 0
    saved_set_gid: int = 0
    filesystem_gid: int = 0
    fd_size: int = 0
    groups: list[int] = field(default_factory=list)
    ns_pid: list[int] = field(default_factory=list)
    vm_peak: int = 0
    vm_size: int = 0
    vm_lck: int = 0
    vm_hwm: int = 0
    vm_rss: int = 0
    vm_data: int = 0
    vm_stk: int = 0
    vm_exe: int = 0
    vm_lib: int = 0
    vm_pte: int = 0
    vm_swap: int = 0
    threads: int = 0
    sig_q_length: int = 0
    sig_q_limit: int = 0
    sig_pnd: int = 0
    shd_pnd: int = 0
    sig_blk: int = 0
    sig_ign: int = 0
    sig_cgt: int = 0
    cap_inh: int = 0
    cap_prm: int = 0
    cap_eff: int = 0
    cap_bnd: int = 0
    seccomp: int = 0
    cpus_allowed: list[int] = field(default_factory=list)
    mems_allowed: list[int] = field(default_factory=list)
    voluntary_ctxt_switches: int = 0
    nonvoluntary_ctxt_switches: int = 0


_TEXT = {"Name": "name", "State": "state"}
_DECIMAL = {
    "Tgid": "tgid",
    "Pid": "pid",
    "TracerPid": "tracer_pid",
    "FDSize": "fd_size",
    "Threads": "threads",
    "voluntary_ctxt_switches": "voluntary_ctxt_switches",
    "nonvoluntary_ctxt_switches": "nonvoluntary_ctxt_switches",
}
_HEX = {
    "SigPnd": "sig_pnd",
    "ShdPnd": "shd_pnd",
    "SigBlk": "sig_blk",
    "SigIgn": "sig_ign",
    "SigCgt": "sig_cgt",
    "CapInh": "cap_inh",
    "CapPrm": "cap_prm",
    "CapEff": "cap_eff",
    "CapBnd": "cap_bnd",
}
_KILOBYTES = {
    "VmPeak": "vm_peak",
    "VmSize": "vm_size",
    "VmLck": "vm_lck",
    "VmHWM": "vm_hwm",
    "VmRSS": "vm_rss",
    "VmData": "vm_data",
    "VmStk": "vm_stk",
    "VmExe": "vm_exe",
    "VmLib": "vm_lib",
    "VmPTE": "vm_pte",
    "VmSwap": "vm_swap",
}
_ID_SETS = {
    "Uid": ("real_uid", "effective_uid", "saved_set_uid", "filesystem_uid"),
    "Gid": ("real_gid", "effective_gid", "saved_set_gid", "filesystem_gid"),
}
_INT_LISTS = {"Groups": "groups", "NSpid": "ns_pid"}
_MASKS = {"Cpus_allowed": "cpus_allowed", "Mems_allowed": "mems_allowed"}


def _apply(status: ProcessStatus, key: str, value: str) -> None:
    if key in _TEXT:
        setattr(status, _TEXT[key], value)
    elif key in _DECIMAL:
        setattr(status, _DECIMAL[key], _parse_uint(value))
    elif key in _HEX:
        setattr(status, _HEX[key], _parse_uint(value, 16))
    elif key in _KILOBYTES:
        parts = value.split()
        if not parts:
            raise ValueError(f"missing value for {key}")
        setattr(status, _KILOBYTES[key], _parse_uint(parts[0]))
    elif key in _ID_SETS:
        parts = value.split()
        if len(parts) == 4:
            for name, text in zip(_ID_SETS[key], parts):
                setattr(status, name, _parse_uint(text))
    elif key in _INT_LISTS:
        setattr(status, _INT_LISTS[key], [_parse_int(text) for text in value.split()])
    elif key in _MASKS:
        setattr(status, _MASKS[key], [_parse_uint(text, 16, 32) for text in value.split(",")])
    elif key == "PPid":
        status.ppid = _parse_int(value)
    elif key == "SigQ":
        parts = value.split("/")
        if len(parts) == 2:
            status.sig_q_length = _parse_uint(parts[0])
            status.sig_q_limit = _parse_uint(parts[1])
    elif key == "Seccomp":
        status.seccomp = _parse_uint(value, 10, 8)


def read_process_status(path) -> ProcessStatus:
    """Parse ``Key: value`` lines; unknown keys are ignored."""
    status = ProcessStatus()
    for line in Path(path).read_text().split("\n"):
        if ":" not in line:
            continue
        parts = line.split(":")
        _apply(status, parts[0].strip(), parts[1].strip())
    return status