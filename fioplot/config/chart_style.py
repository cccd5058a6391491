"""
Chart style data class.

Holds the visual constants of the grouped bar chart so they can be
overridden from a YAML style file.
"""

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ChartStyle:

    figsize: Tuple[float, float] = (12.0, 8.0)
    # In x-axis units; read and write bars sit at -width/2 and +width/2.
    bar_width: float = 0.35
    read_color: str = "#1f77b4"
    write_color: str = "#ff7f0e"
    read_label: str = "Read"
    write_label: str = "Write"
    tick_fontsize: float = 10
    xtick_rotation: float = 45
    grid_alpha: float = 0.3
    legend_columns: int = 2

    @property
    def bar_offset(self) -> float:
        return self.bar_width / 2
