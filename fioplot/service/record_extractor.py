"""
Extraction of read/write measurements from fio JSON reports.

Only the first job of each report is consulted. Bandwidth is reported by fio
in KB/s and converted to MB/s; IOPS are taken verbatim.
"""
import json
import math
from pathlib import Path
from typing import Any, Dict, Iterable, Iterator

from fioplot.consts.ValueType import ValueType
from fioplot.errors import EmptyJobsError, ParseError
from fioplot.models.benchmark_record import BenchmarkRecord
from fioplot.util.file_utils import strip_extension
from fioplot.util.log_config import setup_logger

logger = setup_logger(__name__)

KB_PER_MB = 1024


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


def load_fio_json(path: Path) -> Dict[str, Any]:
    """
    Load a fio JSON report.

    Args:
        path (Path): Path to the report

    Returns:
        dict: Parsed top-level object

    Raises:
        ParseError: If the file cannot be read, is not valid JSON, or is not a JSON object
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f, parse_constant=_reject_constant)
    except OSError as e:
        raise ParseError(path, str(e)) from e
    except ValueError as e:
        # JSONDecodeError, UnicodeDecodeError and rejected NaN/Infinity
        raise ParseError(path, f"invalid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ParseError(path, f"expected a JSON object at top level, got {type(data).__name__}")
    return data


def first_job(path: Path, report: Dict[str, Any]) -> Dict[str, Any]:
    jobs = report.get("jobs")
    if jobs is None:
        raise EmptyJobsError(path)
    if not isinstance(jobs, list):
        raise ParseError(path, f"'jobs' must be an array, got {type(jobs).__name__}")
    if not jobs:
        raise EmptyJobsError(path)

    # null decodes like an absent object: every field zero
    job = jobs[0] if jobs[0] is not None else {}
    if not isinstance(job, dict):
        raise ParseError(path, f"jobs[0] must be an object, got {type(job).__name__}")
    return job


def _metric(path: Path, job: Dict[str, Any], direction: str, name: str) -> float:
    # Absent or null sections and fields count as zero.
    section = job.get(direction)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise ParseError(path, f"jobs[0].{direction} must be an object")

    value = section.get(name)
    if value is None:
        value = 0
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(path, f"jobs[0].{direction}.{name} must be a number, got {value!r}")

    try:
        number = float(value)
    except OverflowError as e:
        raise ParseError(path, f"jobs[0].{direction}.{name} is out of range") from e
    if not math.isfinite(number):
        raise ParseError(path, f"jobs[0].{direction}.{name} is out of range, got {number}")
    return number


def extract_record(path: Path, value_type: ValueType) -> BenchmarkRecord:
    """
    Parse one fio report into a BenchmarkRecord.

    Raises:
        ParseError: On unreadable or malformed content
        EmptyJobsError: If the report has no jobs
    """
    path = Path(path)
    job = first_job(path, load_fio_json(path))

    if value_type == ValueType.IOPS:
        read_value = _metric(path, job, "read", "iops")
        write_value = _metric(path, job, "write", "iops")
    else:
        read_value = _metric(path, job, "read", "bw") / KB_PER_MB
        write_value = _metric(path, job, "write", "bw") / KB_PER_MB

    record = BenchmarkRecord(label=strip_extension(path), read_value=read_value, write_value=write_value)
    logger.debug(f"Extracted {record}")
    return record


def extract_records(paths: Iterable[Path], value_type: ValueType) -> Iterator[BenchmarkRecord]:
    """Lazily map paths to records; the first failure stops the sequence."""
    for path in paths:
        yield extract_record(path, value_type)
