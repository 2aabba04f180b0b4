"""Aggregate reader for everything known about one process."""

from __future__ import annotations

import os
from dataclasses import dataclass

from linproc.process_cmdline import read_process_cmdline
from linproc.process_io import ProcessIO, read_process_io
from linproc.process_stat import ProcessStat, read_process_stat
from linproc.process_statm import ProcessStatm, read_process_statm
from linproc.process_status import ProcessStatus, read_process_status


@dataclass
class Process:
    """Status, memory, stat, I/O figures and command line of one process."""

    status: ProcessStatus
    statm: ProcessStatm
    stat: ProcessStat
    io: ProcessIO
    cmdline: str


def read_process(pid: int, path) -> Process:
    """Read the process directory ``<path>/<pid>``."""
    directory = os.path.join(path, str(pid))
    os.stat(directory)
    io = read_process_io(os.path.join(directory, "io"))
    stat = read_process_stat(os.path.join(directory, "stat"))
    statm = read_process_statm(os.path.join(directory, "statm"))
    status = read_process_status(os.path.join(directory, "status"))
    cmdline = read_process_cmdline(os.path.join(directory, "cmdline"))
    return Process(status=status, statm=statm, stat=stat, io=io, cmdline=cmdline)