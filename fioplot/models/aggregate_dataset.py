"""Aggregated chart data."""

from dataclasses import dataclass, field
from typing import List, Tuple

import numpy as np

from fioplot.models.benchmark_record import BenchmarkRecord


@dataclass
class AggregateDataset:
    """
    Parallel sequences of labels, read values and write values.

    The same index in each list always refers to the same source file.
    """
    labels: List[str] = field(default_factory=list)
    read_values: List[float] = field(default_factory=list)
    write_values: List[float] = field(default_factory=list)

    def __post_init__(self):
        self._check_lengths()

    def _check_lengths(self) -> None:
        if not (len(self.labels) == len(self.read_values) == len(self.write_values)):
            raise ValueError(
                "AggregateDataset sequences out of step: "
                f"labels={len(self.labels)} read={len(self.read_values)} write={len(self.write_values)}"
            )

    def append(self, record: BenchmarkRecord) -> "AggregateDataset":
        self.labels.append(record.label)
        self.read_values.append(record.read_value)
        self.write_values.append(record.write_value)
        self._check_lengths()
        return self

    def __len__(self) -> int:
        return len(self.labels)

    def is_empty(self) -> bool:
        return not self.read_values and not self.write_values

    def as_arrays(self) -> Tuple[Tuple[str, ...], np.ndarray, np.ndarray]:
        """Return read-only copies for rendering."""
        read = np.array(self.read_values, dtype=float)
        write = np.array(self.write_values, dtype=float)
        read.setflags(write=False)
        write.setflags(write=False)
        return tuple(self.labels), read, write
