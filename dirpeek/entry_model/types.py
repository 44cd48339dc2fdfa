"""Domain datatypes for scanned directory entries."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class FileType(enum.Enum):
    """Closed set of entry kinds distinguished by the preview."""

    DIRECTORY = "directory"
    SYMLINK = "symlink"
    SOCKET = "socket"
    FIFO = "fifo"
    BLOCK_DEVICE = "block_device"
    CHAR_DEVICE = "char_device"
    REGULAR_FILE = "regular_file"
    OTHER = "other"


@dataclass(frozen=True)
class DirectoryEntry:
    """One visible directory child as observed during a scan."""

    name: str
    file_type: FileType

    @property
    def is_dir(self) -> bool:
        return self.file_type is FileType.DIRECTORY

    @property
    def display_name(self) -> str:
        """Name safe to write to a UTF-8 terminal.

        Bytes that did not decode are shown as replacement characters.
        """
        return self.name.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


@dataclass(frozen=True)
class ScanOutcome:
    """Result of one bounded scan.

    ``step_times_ns`` holds ``(index, elapsed_ns)`` for every entry whose
    elapsed time was measured, in scan order.
    """

    entries: tuple[DirectoryEntry, ...]
    directory_count: int
    timed_out: bool = False
    over_capacity: bool = False
    step_times_ns: tuple[tuple[int, int], ...] = ()

    @property
    def stopped_early(self) -> bool:
        return self.timed_out or self.over_capacity


__all__ = [
    "FileType",
    "DirectoryEntry",
    "ScanOutcome",
]
