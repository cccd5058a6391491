"""Models for fio result data structures."""

from .aggregate_dataset import AggregateDataset
from .benchmark_record import BenchmarkRecord

__all__ = ["AggregateDataset", "BenchmarkRecord"]
