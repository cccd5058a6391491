import json
from pathlib import Path

import pytest

from fioplot.util.log_config import configure_logging


def fio_report(read_bw=0, read_iops=0, write_bw=0, write_iops=0, extra_jobs=0):
    job = {
        "jobname": "test",
        "read": {"bw": read_bw, "iops": read_iops},
        "write": {"bw": write_bw, "iops": write_iops},
    }
    jobs = [job] + [
        {"read": {"bw": 1, "iops": 1}, "write": {"bw": 1, "iops": 1}} for _ in range(extra_jobs)
    ]
    return {"fio version": "fio-3.36", "jobs": jobs}


@pytest.fixture
def write_report(tmp_path):
    """Write a JSON document under tmp_path and return its path."""

    def _write(relative, content) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def example_dir(write_report, tmp_path):
    write_report("results/read-4k.json", fio_report(102400, 25600, 51200, 12800))
    write_report("results/read-128k.json", fio_report(204800, 1600, 102400, 800))
    return tmp_path / "results"


@pytest.fixture(autouse=True)
def reset_logging():
    """Rebind package loggers to the current stdout at default level after each test."""
    yield
    configure_logging()
