#!/usr/bin/env python3
"""
fio result plotter.

Walks a directory of fio JSON reports, aggregates the first job's read/write
bandwidth (MB/s) or IOPS per file and renders a grouped bar chart.
"""
import sys
from pathlib import Path
from typing import List, Optional

from fioplot.cli.cli import parse_plot_args, resolve_chart_config
from fioplot.config.chart_config import ChartConfig
from fioplot.errors import FioPlotError
from fioplot.models.aggregate_dataset import AggregateDataset
from fioplot.service.aggregator import aggregate
from fioplot.service.chart_renderer import render_chart
from fioplot.service.record_extractor import extract_records
from fioplot.util.file_utils import discover_json_files
from fioplot.util.log_config import configure_logging, setup_logger

logger = setup_logger(__name__)


def collect_dataset(config: ChartConfig) -> AggregateDataset:
    """Discover, extract and aggregate; the first error aborts the whole run."""
    paths = discover_json_files(config.input_dir)
    records = extract_records(paths, config.value_type)
    return aggregate(records)


def run(config: ChartConfig) -> Path:
    logger.info(f"Reading fio results from {config.input_dir} ({config.value_type.value})")
    logger.debug(str(config))

    dataset = collect_dataset(config)
    logger.info(f"Aggregated {len(dataset)} result file(s)")

    return render_chart(dataset, config)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main entry point.

    Returns:
        int: 0 on success, 1 on any pipeline error
    """
    args = parse_plot_args(argv)

    try:
        configure_logging(verbose=args.verbose, log_file=Path(args.log_file) if args.log_file else None)
        config = resolve_chart_config(args)
        output_path = run(config)
    except FioPlotError as e:
        logger.debug("Run aborted", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Plot saved as {output_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
