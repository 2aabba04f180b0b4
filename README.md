# linproc

Small, dependency-free parsers for the files the Linux kernel exposes under
`/proc`. Each reader takes a path and returns plain Python objects
(dataclasses, lists, ints and strings), so any reader can be pointed at a
saved copy of a `/proc` file as easily as at the live one.

## Installation

```
pip install linproc
```

## System-wide readers

```python
from linproc.cpuinfo import read_cpuinfo
from linproc.meminfo import read_meminfo
from linproc.loadavg import read_loadavg
from linproc.uptime import read_uptime

cpu = read_cpuinfo("/proc/cpuinfo")
print(cpu.num_cpu(), cpu.num_core(), cpu.num_physical_cpu())

mem = read_meminfo("/proc/meminfo")
print(mem.mem_total, mem.mem_free, mem.mem_available)

load = read_loadavg("/proc/loadavg")
print(load.last_1min, load.process_running, load.process_total, load.last_pid)

up = read_uptime("/proc/uptime")
print(up.total, up.idle, up.total_duration(), up.idle_duration())
```

`num_core()` and `num_physical_cpu()` fall back to the processor count when
the file gives no `physical id`.

The other system-wide readers, each in the module of the same name:

| Module | Function | Returns |
| --- | --- | --- |
| `linproc.stat` | `read_stat(path)` | `Stat` with `cpu_all`, `cpus`, `interrupts`, `context_switches`, `boot_time` (UTC `datetime` or `None`), `processes`, `procs_running`, `procs_blocked` |
| `linproc.vmstat` | `read_vmstat(path)` | `VMStat` |
| `linproc.interrupts` | `read_interrupts(path)` | list of `Interrupt` (`name`, per-CPU `counts`, `description`) |
| `linproc.mounts` | `read_mounts(path)` | list of `Mount` (`device`, `mount_point`, `fs_type`, `options`) |
| `linproc.diskstat` | `read_disk_stats(path)` | list of `DiskStat` |
| `linproc.disk` | `read_disk(path)` | `Disk` (`total`, `used`, `free` in bytes, `free_inodes`) for the filesystem holding `path` |
| `linproc.network_stat` | `read_network_stat(path)` | list of `NetworkStat`, one per interface of `/proc/net/dev` |
| `linproc.netstat` | `read_netstat(path)` | `NetStat` from `/proc/net/netstat` |
| `linproc.snmp` | `read_snmp(path)` | `Snmp` from `/proc/net/snmp` |
| `linproc.sockstat` | `read_sockstat(path)` | `SockStat` from `/proc/net/sockstat` |

`DiskStat` also offers `read_bytes()` and `write_bytes()` (512-byte sectors
turned into bytes) and `read_wait()`, `write_wait()`, `io_time()` and
`queue_time()` as `timedelta` values.

Counter readers (`read_meminfo`, `read_vmstat`, `read_netstat`, `read_snmp`,
`read_sockstat`) leave a field at 0 when the file does not list it.

## Sockets

```python
from linproc.net_ip import decode_ipv4, decode_ipv6
from linproc.net_tcp import read_net_tcp_sockets
from linproc.net_udp import read_net_udp_sockets
from linproc.net_unix import read_net_unix_domain_sockets

for sock in read_net_tcp_sockets("/proc/net/tcp", decode_ipv4):
    print(sock.local_address, sock.remote_address, sock.status, sock.uid)

udp6 = read_net_udp_sockets("/proc/net/udp6", decode_ipv6)
unix = read_net_unix_domain_sockets("/proc/net/unix")
```

`decode_ipv4("0100007F:1F90")` gives `"127.0.0.1:8080"` and
`decode_ipv6("00000000000000000000000001000000:2328")` gives `"::1:9000"`.
Both raise `ValueError` for input that is not in the kernel's hex form.
`parse_net_socket(fields, decoder)` parses the columns shared by TCP and UDP
lines into a `NetSocket`; `NetTCPSocket` adds the timer and congestion fields
and `NetUDPSocket` adds `drops`. Unix sockets without a path are skipped.

## Processes

```python
from linproc.process_pid import read_max_pid, list_pids
from linproc.process import read_process

max_pid = read_max_pid("/proc/sys/kernel/pid_max")
for pid in list_pids("/proc", max_pid):
    proc = read_process(pid, "/proc")
    print(pid, proc.cmdline, proc.status.vm_rss, proc.stat.comm)
```

`read_process` reads `io`, `stat`, `statm`, `status` and `cmdline` of
`<path>/<pid>` into a `Process`. Each of those files can also be read on its
own with `read_process_io`, `read_process_stat`, `read_process_statm`,
`read_process_status` and `read_process_cmdline`; `read_process_sched_stat`
reads `schedstat`. `list_pids` tries every id from 1 to `max_pid`, so it
takes time proportional to `max_pid`.

## Errors

Readers raise `OSError` when a file cannot be read and `ValueError` when its
contents cannot be parsed.

## What it does not do

linproc is a library only: it has no command-line tool, collects nothing on
a schedule, keeps no history and computes no rates. Every call reads the
given file once and returns what it holds at that moment.