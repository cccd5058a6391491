"""
Grouped bar chart rendering for aggregated fio results.
"""
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np

from fioplot.config.chart_config import ChartConfig
from fioplot.errors import RenderError
from fioplot.models.aggregate_dataset import AggregateDataset
from fioplot.util.file_utils import atomic_write
from fioplot.util.log_config import setup_logger

logger = setup_logger(__name__)

DEFAULT_FORMAT = "png"


def output_format(output_path: Path) -> str:
    suffix = Path(output_path).suffix
    return suffix[1:].lower() if suffix else DEFAULT_FORMAT


def build_figure(dataset: AggregateDataset, config: ChartConfig):
    """Create the figure; the caller owns it and must close it."""
    style = config.style
    labels, read_values, write_values = dataset.as_arrays()
    x = np.arange(len(labels))

    fig, ax = plt.subplots(figsize=style.figsize)

    # Grid beneath the bars
    ax.set_axisbelow(True)
    ax.grid(True, alpha=style.grid_alpha)

    ax.bar(x - style.bar_offset, read_values, style.bar_width,
           color=style.read_color, linewidth=0, label=style.read_label)
    ax.bar(x + style.bar_offset, write_values, style.bar_width,
           color=style.write_color, linewidth=0, label=style.write_label)

    ax.set_title(config.title, pad=30)
    ax.set_xlabel(config.xlabel)
    ax.set_ylabel(config.ylabel)
    ax.set_xticks(x)
    ax.set_xticklabels(labels, rotation=style.xtick_rotation, ha="right" if style.xtick_rotation else "center")
    ax.tick_params(axis="both", labelsize=style.tick_fontsize)

    # Legend above the plot area, below the title
    ax.legend(loc="lower center", bbox_to_anchor=(0.5, 1.0), ncol=style.legend_columns, frameon=False)

    fig.tight_layout()
    return fig


def render_chart(dataset: AggregateDataset, config: ChartConfig) -> Path:
    """
    Render the dataset as a grouped read/write bar chart and save it to config.output_path.

    Returns:
        Path: The written output path

    Raises:
        RenderError: If the chart cannot be built or written. No partial file is left behind.
    """
    output_path = Path(config.output_path)
    fmt = output_format(output_path)

    fig = None
    try:
        fig = build_figure(dataset, config)
        supported = fig.canvas.get_supported_filetypes()
        if fmt not in supported:
            raise RenderError(
                f"Unsupported output format '{fmt}' for {output_path}; "
                f"supported: {', '.join(sorted(supported))}"
            )
        atomic_write(output_path, lambda tmp: fig.savefig(tmp, format=fmt))
    except RenderError:
        raise
    except Exception as e:
        raise RenderError(f"Failed to render chart to {output_path}: {e}") from e
    finally:
        if fig is not None:
            plt.close(fig)

    logger.debug(f"Rendered {len(dataset)} groups as {fmt}")
    return output_path
