"""Domain model for directory entries plus the bounded scanner.

This package contains non-UI primitives:
- entry datatypes and the closed file-type enum
- time- and capacity-bounded directory scanning
"""

from __future__ import annotations

from .types import DirectoryEntry, FileType, ScanOutcome
from .scanner import (
    HIDDEN_PREFIX,
    MIN_TAB_WIDTH,
    TIME_LIMIT_NS,
    entry_file_type,
    file_type_from_mode,
    scan_capacity,
    scan_directory,
)

__all__ = [
    "DirectoryEntry",
    "FileType",
    "ScanOutcome",
    "HIDDEN_PREFIX",
    "MIN_TAB_WIDTH",
    "TIME_LIMIT_NS",
    "entry_file_type",
    "file_type_from_mode",
    "scan_capacity",
    "scan_directory",
]
