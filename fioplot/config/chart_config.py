from dataclasses import dataclass, field
from pathlib import Path

from fioplot.config.chart_style import ChartStyle
from fioplot.consts.ValueType import ValueType

DEFAULT_TITLE = "SSD Benchmark Results"
DEFAULT_XLABEL = "Test Type"


@dataclass(frozen=True)
class ChartConfig:
    input_dir: Path
    output_path: Path
    ylabel: str
    title: str = DEFAULT_TITLE
    xlabel: str = DEFAULT_XLABEL
    value_type: ValueType = ValueType.BW
    style: ChartStyle = field(default_factory=ChartStyle)

    def __str__(self):
        return (f"ChartConfig(\n"
                f"  input_dir={self.input_dir},\n"
                f"  output_path={self.output_path},\n"
                f"  title={self.title},\n"
                f"  xlabel={self.xlabel},\n"
                f"  ylabel={self.ylabel},\n"
                f"  value_type={self.value_type.value}\n"
                f")")
