"""Man page file discovery and batch parsing."""
from __future__ import annotations

import gzip
import logging
import zlib
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from ..config import DEFAULT_WORKERS
from ..errors import ManPageReadError, NoSyntaxesFound
from .models import Command
from .parser import parse_man_page

logger = logging.getLogger(__name__)


def get_file_list(path: Path) -> List[Path]:
    """List the regular files directly inside a man directory, sorted by name."""
    path = Path(path)
    try:
        return sorted(p for p in path.iterdir() if p.is_file())
    except OSError as e:
        logger.warning("Failed to read directory %s: %s", path, e)
        return []


def select_range(files: Sequence[Path], lower: int = 0, upper: int = 0) -> List[Path]:
    """Pick files[lower:upper]; a 0/0 range means all files."""
    if lower == 0 and upper == 0:
        return list(files)
    return list(files[lower:upper])


def load_file_to_lines(file_path: Path) -> List[str]:
    """Read a man page source file, handling compression."""
    file_path = Path(file_path)
    try:
        if file_path.suffix == '.gz':
            with gzip.open(file_path, 'rt', encoding='utf-8', errors='ignore') as f:
                data = f.read()
        else:
            with open(file_path, 'r', encoding='utf-8', errors='ignore') as f:
                data = f.read()
    except (OSError, EOFError, zlib.error) as e:
        raise ManPageReadError(f"Failed to read file at path: {file_path}") from e
    return data.split('\n')


def man_file_to_command(file_path: Path) -> Command:
    """Parse one man page file.

    Raises:
        ManPageReadError: if the file cannot be read.
        NoSyntaxesFound: if the page has no usable SYNOPSIS macros.
    """
    return parse_man_page(load_file_to_lines(file_path))


def _process_file(file_path: Path) -> Optional[Command]:
    try:
        return man_file_to_command(file_path)
    except NoSyntaxesFound:
        logger.debug("No syntaxes in %s, skipping", file_path)
    except ManPageReadError as e:
        logger.warning("%s", e)
    return None


def parse_man_files(
    path: Path,
    lower: int = 0,
    upper: int = 0,
    max_workers: int = DEFAULT_WORKERS,
    progress_callback: Optional[Callable[[str, int, int, str], None]] = None
) -> List[Tuple[Path, Command]]:
    """Parse every man page in a directory using parallel processing.

    Args:
        path: Directory holding man page sources.
        lower: Start of the file range to process.
        upper: End of the file range; 0/0 selects every file.
        max_workers: Number of parallel workers.
        progress_callback: Optional callback function(stage, current, total, message).

    Returns:
        (file path, command) pairs in file order. Pages without extractable
        syntaxes and unreadable files are skipped.
    """
    files = select_range(get_file_list(path), lower, upper)
    if progress_callback:
        progress_callback("discovery", len(files), len(files), f"Found {len(files)} man pages")

    commands: Dict[Path, Command] = {}
    with ThreadPoolExecutor(max_workers=max_workers) as executor:
        future_to_file = {executor.submit(_process_file, f): f for f in files}

        completed = 0
        for future in as_completed(future_to_file):
            command = future.result()
            if command is not None:
                commands[future_to_file[future]] = command
            completed += 1

            if progress_callback:
                progress_callback("parsing", completed, len(files), f"Parsed {len(commands)} commands")

    logger.debug("Parsed %d of %d man pages in %s", len(commands), len(files), path)
    if progress_callback:
        progress_callback("complete", len(files), len(files), f"Parsed {len(commands)} commands")

    # Completion order varies between runs; keep results in file order
    return [(f, commands[f]) for f in files if f in commands]
