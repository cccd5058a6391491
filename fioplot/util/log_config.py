"""
Logging configuration for the plotting tool.

Provides centralized logging setup with clean, concise terminal output.
"""
import logging
import sys
from pathlib import Path
from typing import Optional

from fioplot.errors import ConfigError

PACKAGE_LOGGER = "fioplot"


def _build_file_handler(log_file: Path) -> logging.FileHandler:
    log_file.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(
        fmt='%(asctime)s [%(levelname)s] %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))
    return file_handler


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    file_handler: Optional[logging.Handler] = None
) -> logging.Logger:
    """
    Configure and return a logger with consistent formatting.

    Args:
        name: Logger name (typically __name__)
        level: Logging level (default: INFO)
        log_file: Optional file path for log output
        file_handler: Optional already-open handler, shared between loggers

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(fmt='[%(levelname)s] %(message)s'))
    logger.addHandler(console_handler)

    if file_handler is None and log_file:
        file_handler = _build_file_handler(log_file)
    if file_handler is not None:
        logger.addHandler(file_handler)

    logger.propagate = False

    return logger


def configure_logging(verbose: bool = False, log_file: Optional[Path] = None) -> None:
    """
    Re-apply level and file output to every logger already created in the package.

    Module loggers are set up at import time with defaults; the CLI calls
    this once its options are known. All loggers write through one file handler.

    Raises:
        ConfigError: If log_file cannot be opened.
    """
    level = logging.DEBUG if verbose else logging.INFO

    file_handler = None
    if log_file:
        try:
            file_handler = _build_file_handler(Path(log_file))
        except OSError as e:
            raise ConfigError(f"Cannot open log file {log_file}: {e}") from e

    names = [
        name for name in logging.root.manager.loggerDict
        if name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")
    ]
    for name in names:
        setup_logger(name, level=level, file_handler=file_handler)
