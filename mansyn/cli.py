"""Command-line interface for mansyn."""
from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from .config import DEFAULT_MAN_DIR, DEFAULT_WORKERS, MAN_DIR_ENV_VAR
from .manpage import Command, parse_man_files
from .ui import render_command, render_json


def print_results(results: List[Tuple[Path, Command]], as_json: bool = False):
    """Print parsed commands to stdout."""
    if as_json:
        print(render_json(results))
        return

    if not results:
        print("No syntaxes found.")
        return

    for path, command in results:
        print(path)
        print(render_command(command))


def print_progress(stage: str, current: int, total: int, message: str):
    """Progress callback writing a single updating line to stderr."""
    sys.stderr.write(f'\r  [{current}/{total}] {message}...')
    if stage == "complete":
        sys.stderr.write('\n')
    sys.stderr.flush()


def default_man_dir() -> Path:
    """Man directory from the environment, else the built-in default."""
    return Path(os.environ.get(MAN_DIR_ENV_VAR, DEFAULT_MAN_DIR))


def build_parser() -> argparse.ArgumentParser:
    man_dir = default_man_dir()
    parser = argparse.ArgumentParser(
        prog="mansyn",
        description="Extract command-line syntaxes from mdoc manual page SYNOPSIS sections.",
        epilog="Example: mansyn /usr/share/man/man1 --start 0 --end 50"
    )
    parser.add_argument("path", nargs='?', type=Path, default=man_dir, help=f"Directory of man page sources (default: {man_dir}, or ${MAN_DIR_ENV_VAR})")
    parser.add_argument("--start", type=int, default=0, help="Index of the first file to process (default: 0)")
    parser.add_argument("--end", type=int, default=0, help="Index after the last file to process; 0 with --start 0 means all files")
    parser.add_argument("--workers", type=int, default=DEFAULT_WORKERS, help=f"Number of parallel workers (default: {DEFAULT_WORKERS})")
    parser.add_argument("--json", action="store_true", help="Print results as JSON")
    parser.add_argument("--progress", action="store_true", help="Show progress on stderr")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    results = parse_man_files(
        args.path,
        lower=args.start,
        upper=args.end,
        max_workers=args.workers,
        progress_callback=print_progress if args.progress else None,
    )
    print_results(results, as_json=args.json)
    return 0
