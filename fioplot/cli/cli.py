#!/usr/bin/env python3
"""
Command-line interface for the fio result plotter.
"""
import argparse
from pathlib import Path
from typing import List, Optional

from fioplot.config.chart_config import DEFAULT_TITLE, DEFAULT_XLABEL, ChartConfig
from fioplot.config.chart_style import ChartStyle
from fioplot.config.style_loader import StyleLoader
from fioplot.consts.ValueType import ValueType
from fioplot.errors import ConfigError


def build_plot_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Plot read/write bandwidth or IOPS from a directory of fio JSON results"
    )
    ap.add_argument("--input", type=str, default="",
                    help="Input directory containing JSON files from fio")
    ap.add_argument("--output", type=str, default="",
                    help="Output image file for the plot (format follows the extension, PNG if none)")
    ap.add_argument("--title", type=str, default=DEFAULT_TITLE,
                    help=f"Title of the plot (default: {DEFAULT_TITLE!r})")
    ap.add_argument("--xlabel", type=str, default=DEFAULT_XLABEL,
                    help=f"Label for the x-axis (default: {DEFAULT_XLABEL!r})")
    ap.add_argument("--ylabel", type=str, default="",
                    help="Label for the y-axis")
    ap.add_argument("--value-type", type=str, default=ValueType.BW.value,
                    help="Type of value to plot: 'bw' for bandwidth in MB/s, 'iops' for IOPS (default: bw)")
    ap.add_argument("--style", type=str, default=None,
                    help="Optional YAML file overriding chart style defaults")
    ap.add_argument("--env", type=str, default=None,
                    help=(
                        "Environment name for style override (e.g., 'print'). "
                        "Loads <style>_<env>.yaml in addition to the --style file."
                    ))
    ap.add_argument("--verbose", action="store_true",
                    help="Enable debug logging")
    ap.add_argument("--log-file", type=str, default=None,
                    help="Also write log output to this file")
    return ap


def resolve_chart_config(args: argparse.Namespace) -> ChartConfig:
    """
    Validate parsed arguments and build the immutable run configuration.

    Raises:
        ConfigError: If a required option is missing or empty, or the style
                     files cannot be loaded.
    """
    required = {"input": args.input, "output": args.output, "ylabel": args.ylabel}
    missing = [name for name, value in required.items() if not value]
    if missing:
        raise ConfigError(f"{', '.join(missing)} must be specified")

    if args.env and not args.style:
        raise ConfigError("--env requires --style")

    style = StyleLoader(Path(args.style), env=args.env).style if args.style else ChartStyle()

    return ChartConfig(
        input_dir=Path(args.input),
        output_path=Path(args.output),
        title=args.title,
        xlabel=args.xlabel,
        ylabel=args.ylabel,
        value_type=ValueType.from_selector(args.value_type),
        style=style,
    )


def parse_plot_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_plot_parser().parse_args(argv)
