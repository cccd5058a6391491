"""
Error types raised by the fio plotting pipeline.

Every failure is fatal: the CLI reports the message on stderr and exits
with a non-zero status.
"""
from pathlib import Path


class FioPlotError(Exception):
    """Base class for all pipeline errors."""


class ConfigError(FioPlotError):
    pass


class DiscoveryError(FioPlotError):
    pass


class ParseError(FioPlotError):

    def __init__(self, path: Path, reason: str):
        self.path = path
        super().__init__(f"Error loading fio JSON file {path}: {reason}")


class EmptyJobsError(FioPlotError):

    def __init__(self, path: Path):
        self.path = path
        super().__init__(f"No jobs found in fio JSON file {path}")


class EmptyDatasetError(FioPlotError):
    pass


class RenderError(FioPlotError):
    pass
