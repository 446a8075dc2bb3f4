"""filesort scan — group the files of one directory by category and print them."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from filesort.config import get_display_config
from filesort.group import Grouping, group, iter_entries, printable
from filesort.report import render, summarize

logger = logging.getLogger("filesort.scan")


class ScanError(Exception):
    """Fatal error: nothing is scanned or printed beyond the diagnostic."""


class InvalidDirectoryError(ScanError):
    pass


class DirectoryOpenError(ScanError):
    pass


def resolve_directory(raw_path: Optional[str]) -> Path:
    """Return the directory to scan: raw_path if given, else the cwd."""
    if raw_path is not None:
        if not raw_path:
            raise InvalidDirectoryError("invalid directory: empty path")
        directory = Path(raw_path)
    else:
        try:
            directory = Path(os.getcwd())
        except OSError as e:
            raise InvalidDirectoryError(f"invalid directory: cannot determine current directory ({e})") from e

    if not directory.exists():
        raise InvalidDirectoryError(f"invalid directory: {printable(str(directory))} does not exist")
    if not directory.is_dir():
        raise InvalidDirectoryError(f"invalid directory: {printable(str(directory))} is not a directory")
    return directory


def scan_directory(directory: Path) -> Grouping:
    """Open directory and group its entries; raises DirectoryOpenError if unreadable."""
    try:
        it = os.scandir(directory)
    except OSError as e:
        raise DirectoryOpenError(f"cannot read directory {printable(str(directory))}: {e.strerror or e}") from e
    with it:
        grouping = group(iter_entries(it))
    total, categories = summarize(grouping)
    logger.debug("%s: %d files in %d categories", directory, total, categories)
    return grouping


def cmd_scan(args) -> None:
    directory = resolve_directory(getattr(args, "directory", None))
    grouping = scan_directory(directory)

    display = get_display_config()
    order = getattr(args, "order", None) or display["order"]

    total, categories = summarize(grouping)
    print(f"Scanning directory: {printable(str(directory))}")
    print()
    print(f"Found {total} files in {categories} categories:")
    print()
    for line in render(grouping, icon=display["icon"], order=order):
        print(line)
