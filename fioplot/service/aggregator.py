from functools import reduce
from typing import Iterable

from fioplot.errors import EmptyDatasetError
from fioplot.models.aggregate_dataset import AggregateDataset
from fioplot.models.benchmark_record import BenchmarkRecord


def aggregate(records: Iterable[BenchmarkRecord]) -> AggregateDataset:
    """
    Fold records into an AggregateDataset in the order they arrive.

    Raises:
        EmptyDatasetError: If no records were produced.
    """
    dataset = reduce(AggregateDataset.append, records, AggregateDataset())
    if dataset.is_empty():
        raise EmptyDatasetError("No data points found for plotting")
    return dataset
