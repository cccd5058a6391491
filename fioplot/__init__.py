"""Aggregate fio JSON results and plot read/write throughput or IOPS."""

__version__ = "0.1.0"
