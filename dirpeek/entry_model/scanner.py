"""Time- and capacity-bounded directory scanning."""

from __future__ import annotations

import logging
import os
import stat
import time
from collections.abc import Callable
from pathlib import Path

from .types import DirectoryEntry, FileType, ScanOutcome

LOGGER = logging.getLogger(__name__)

MIN_TAB_WIDTH = 8
TIME_LIMIT_NS = 10_000_000
HIDDEN_PREFIX = "."


def file_type_from_mode(mode: int) -> FileType:
    """Map ``st_mode`` bits to a :class:`FileType`."""
    if stat.S_ISDIR(mode):
        return FileType.DIRECTORY
    if stat.S_ISLNK(mode):
        return FileType.SYMLINK
    if stat.S_ISSOCK(mode):
        return FileType.SOCKET
    if stat.S_ISFIFO(mode):
        return FileType.FIFO
    if stat.S_ISBLK(mode):
        return FileType.BLOCK_DEVICE
    if stat.S_ISCHR(mode):
        return FileType.CHAR_DEVICE
    if stat.S_ISREG(mode):
        return FileType.REGULAR_FILE
    return FileType.OTHER


def entry_file_type(entry: os.DirEntry) -> FileType:
    """Return the type of ``entry`` without following symlinks.

    The common kinds come from the cached ``d_type``; only special files need
    an ``lstat``. ``OSError`` propagates.
    """
    if entry.is_symlink():
        return FileType.SYMLINK
    if entry.is_dir(follow_symlinks=False):
        return FileType.DIRECTORY
    if entry.is_file(follow_symlinks=False):
        return FileType.REGULAR_FILE
    return file_type_from_mode(entry.stat(follow_symlinks=False).st_mode)


def scan_capacity(terminal_width: int | None, max_lines: int) -> int:
    """Upper bound on how many names could ever be shown in ``max_lines`` rows."""
    columns = max(1, (terminal_width or 0) // MIN_TAB_WIDTH)
    return columns * max_lines


def scan_directory(
    directory: Path | str,
    max_items: int,
    *,
    time_limit_ns: int = TIME_LIMIT_NS,
    clock: Callable[[], int] | None = None,
) -> ScanOutcome:
    """Enumerate visible children of ``directory`` in enumeration order.

    Stops after the entry that brings the directory count to ``max_items``
    (``over_capacity``), or after an entry whose processing took longer than
    ``time_limit_ns`` since the previous one (``timed_out``). The entry that
    triggers either stop is kept. Raises ``OSError`` when the directory cannot
    be listed or an entry's type cannot be read.
    """
    if clock is None:
        clock = time.perf_counter_ns
    entries: list[DirectoryEntry] = []
    step_times: list[tuple[int, int]] = []
    directory_count = 0
    timed_out = False
    over_capacity = False

    now = clock()
    index = 0
    with os.scandir(directory) as children:
        for child in children:
            name = child.name
            if name.startswith(HIDDEN_PREFIX):
                continue
            file_type = entry_file_type(child)
            if file_type is FileType.DIRECTORY:
                directory_count += 1
            entries.append(DirectoryEntry(name=name, file_type=file_type))
            if directory_count >= max_items:
                over_capacity = True
                LOGGER.debug("directory cap reached after %d directories", directory_count)
                break

            previous, now = now, clock()
            elapsed = now - previous
            step_times.append((index, elapsed))
            if elapsed > time_limit_ns:
                timed_out = True
                LOGGER.debug("scan step %d took %d ns, stopping", index, elapsed)
                break
            index += 1

    if step_times:
        slowest = max(step_times, key=lambda item: item[1])
        LOGGER.debug("slowest scan step: index %d, %d ns", *slowest)

    return ScanOutcome(
        entries=tuple(entries),
        directory_count=directory_count,
        timed_out=timed_out,
        over_capacity=over_capacity,
        step_times_ns=tuple(step_times),
    )


__all__ = [
    "MIN_TAB_WIDTH",
    "TIME_LIMIT_NS",
    "HIDDEN_PREFIX",
    "file_type_from_mode",
    "entry_file_type",
    "scan_capacity",
    "scan_directory",
]
