import logging

import pytest

from fioplot.errors import ConfigError
from fioplot.util.log_config import configure_logging, setup_logger


def test_setup_logger_replaces_handlers():
    logger = setup_logger("fioplot.test_replace")
    logger = setup_logger("fioplot.test_replace", level=logging.DEBUG)

    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG
    assert logger.propagate is False


def test_configure_logging_shares_one_file_handler(tmp_path):
    first = setup_logger("fioplot.test_first")
    second = setup_logger("fioplot.test_second")
    log_file = tmp_path / "logs" / "run.log"

    configure_logging(verbose=True, log_file=log_file)

    first_files = [h for h in first.handlers if isinstance(h, logging.FileHandler)]
    second_files = [h for h in second.handlers if isinstance(h, logging.FileHandler)]
    assert len(first_files) == 1
    assert first_files == second_files
    assert first.level == logging.DEBUG

    first.debug("from first")
    second.info("from second")
    first_files[0].flush()
    content = log_file.read_text(encoding="utf-8")
    assert "[DEBUG] fioplot.test_first - from first" in content
    assert "[INFO] fioplot.test_second - from second" in content


def test_configure_logging_rejects_unopenable_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")

    with pytest.raises(ConfigError, match="Cannot open log file"):
        configure_logging(log_file=blocker / "run.log")
