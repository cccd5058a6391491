"""
Style loader for chart rendering.

This module provides the StyleLoader class for loading ChartStyle overrides
from YAML files.
"""
from dataclasses import fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from fioplot.config.chart_style import ChartStyle
from fioplot.errors import ConfigError


class StyleLoader:

    def __init__(self, style_file: Path, env: Optional[str] = None):
        self.style_file = Path(style_file)
        self.env = env
        self.style = self._load_style()

    @property
    def env_file(self) -> Optional[Path]:
        if not self.env:
            return None
        return self.style_file.with_name(f"{self.style_file.stem}_{self.env}{self.style_file.suffix}")

    def _load_style(self) -> ChartStyle:
        """
        Load the base style file and merge the environment override on top.

        Supports environment-specific overrides via <stem>_<env>.yaml next to
        the base file.

        Returns:
            ChartStyle: defaults updated with every key found in the files
        """
        data = self._read_yaml(self.style_file)

        if self.env_file is not None:
            # dict.update() will overwrite existing keys
            data.update(self._read_yaml(self.env_file))

        return self._build_style(data)

    @staticmethod
    def _read_yaml(path: Path) -> Dict[str, Any]:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read style file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in style file {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(f"Style file {path} must contain a mapping, got {type(data).__name__}")
        return data

    @staticmethod
    def _build_style(data: Dict[str, Any]) -> ChartStyle:
        known = {f.name for f in fields(ChartStyle)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown style option(s): {', '.join(unknown)}")

        if "figsize" in data:
            figsize = data["figsize"]
            if not isinstance(figsize, (list, tuple)) or len(figsize) != 2:
                raise ConfigError(f"figsize must be a [width, height] pair, got {figsize!r}")
            try:
                data["figsize"] = (float(figsize[0]), float(figsize[1]))
            except (TypeError, ValueError) as e:
                raise ConfigError(f"figsize must hold two numbers, got {figsize!r}") from e

        if "bar_width" in data:
            width = data["bar_width"]
            if isinstance(width, bool) or not isinstance(width, (int, float)) or not 0 < width <= 0.5:
                raise ConfigError(f"bar_width must be a number in (0, 0.5] so bars do not overlap, got {width!r}")

        return ChartStyle(**data)
