"""Group directory entries by file category."""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Iterable, Iterator

from filesort.classify import Category, category_of, classify, split_extension

logger = logging.getLogger("filesort.group")


def printable(name: str) -> str:
    """Undo surrogate escapes from undecodable filename bytes, substituting U+FFFD."""
    return os.fsencode(name).decode("utf-8", "replace")


@dataclass(frozen=True)
class FileEntry:
    name: str
    path: str
    is_file: bool

    @property
    def display_name(self) -> str:
        return printable(self.name)


Grouping = dict[Category, list[FileEntry]]


def iter_entries(dir_iter: Iterator[os.DirEntry]) -> Iterator[FileEntry]:
    """
    Convert os.scandir() results to FileEntry values.
    Entries that cannot be stat'ed are skipped; if the listing itself fails
    part-way, iteration stops with whatever was read so far.
    """
    while True:
        try:
            entry = next(dir_iter)
        except StopIteration:
            return
        except OSError as e:
            logger.debug("directory listing ended early: %s", e)
            return
        try:
            is_file = entry.is_file()
        except OSError as e:
            logger.debug("skipping %s: %s", entry.path, e)
            continue
        yield FileEntry(name=entry.name, path=entry.path, is_file=is_file)


def new_grouping() -> Grouping:
    return {category: [] for category in Category}


def group(entries: Iterable[FileEntry]) -> Grouping:
    """Place every regular file into exactly one category, keeping input order."""
    grouping = new_grouping()
    for entry in entries:
        if not entry.is_file:
            continue
        ext = split_extension(entry.name)
        if ext is None:
            category = Category.OTHERS
        else:
            category = category_of(classify(ext))
        grouping[category].append(entry)
    return grouping
