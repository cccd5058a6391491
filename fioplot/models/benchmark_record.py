from dataclasses import dataclass


@dataclass(frozen=True)
class BenchmarkRecord:
    """
    Read/write measurement pair taken from one fio result file.

    Values are already unit-adjusted (MB/s for bandwidth, raw IOPS otherwise).
    """
    label: str
    read_value: float
    write_value: float
