import os
import stat
import tempfile
from pathlib import Path
from typing import Callable, Iterator

from fioplot.errors import DiscoveryError
from fioplot.util.log_config import setup_logger

logger = setup_logger(__name__)

RESULT_EXTENSION = ".json"


def discover_json_files(input_dir: Path) -> Iterator[Path]:
    """
    Recursively yield every non-directory entry under input_dir whose name ends in .json.

    Entries are visited in lexical order within each directory, with files and
    subdirectories interleaved. Symlinked directories are not descended into.

    Raises:
        DiscoveryError: If input_dir is missing, is not a directory, or cannot be listed.
    """
    input_dir = Path(input_dir)
    if not input_dir.exists():
        raise DiscoveryError(f"Input directory does not exist: {input_dir}")
    if not input_dir.is_dir():
        raise DiscoveryError(f"Input path is not a directory: {input_dir}")

    yield from _walk(input_dir)


def _walk(directory: Path) -> Iterator[Path]:
    try:
        children = sorted(directory.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise DiscoveryError(f"Error walking through input directory {directory}: {e}") from e

    for child in children:
        if child.is_dir() and not child.is_symlink():
            yield from _walk(child)
        elif child.name.endswith(RESULT_EXTENSION):
            logger.debug(f"Discovered {child}")
            yield child


def strip_extension(path: Path) -> str:
    """Return the file name without its .json extension."""
    name = Path(path).name
    if name.endswith(RESULT_EXTENSION):
        return name[: -len(RESULT_EXTENSION)]
    return name


def default_file_mode() -> int:
    """Mode a newly created file gets under the current umask."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def atomic_write(output_path: Path, write: Callable[[Path], None]) -> None:
    """
    Call write() with a temporary path next to output_path, then rename it into place.

    The temporary file is removed if write() or the rename fails, so output_path
    is either the complete new file or untouched. The result keeps the mode of an
    existing output_path, otherwise gets the umask default.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    if output_path.exists():
        mode = stat.S_IMODE(output_path.stat().st_mode)
    else:
        mode = default_file_mode()

    fd, tmp_name = tempfile.mkstemp(
        prefix=f".{output_path.name}.", suffix=".tmp", dir=output_path.parent
    )
    os.close(fd)
    tmp_path = Path(tmp_name)
    try:
        write(tmp_path)
        # mkstemp creates 0600
        os.chmod(tmp_path, mode)
        os.replace(tmp_path, output_path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
