"""Configuration module for chart rendering."""

from .chart_config import ChartConfig
from .chart_style import ChartStyle

__all__ = ["ChartConfig", "ChartStyle"]
