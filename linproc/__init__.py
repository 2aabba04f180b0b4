"""Parsers for Linux /proc files: CPU, memory, disks, network sockets and processes."""

__version__ = "0.1.0"