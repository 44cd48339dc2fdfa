"""Build the bounded multi-column preview of one directory.

The scan is capped twice: by how many directories could ever be displayed and
by a per-entry time budget. If either cap trips, or more entries were read than
the grid could hold, only directories are shown. Output text is assembled
completely before anything is written.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import TextIO

from .entry_model import scan_capacity, scan_directory
from .layout import LayoutEntry, render_entries_in_columns
from .terminal import terminal_width as query_terminal_width

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_LINES = 2


def build_directory_preview(
    directory: Path | str,
    max_lines: int = DEFAULT_MAX_LINES,
    terminal_width: int | None = None,
) -> str:
    """Return the styled preview text for ``directory``.

    Returns an empty string when there is nothing visible to show. Raises
    ``ValueError`` for ``max_lines < 1`` and lets ``OSError`` from the scan
    propagate.
    """
    if max_lines < 1:
        raise ValueError("max_lines must be at least 1")

    max_items = scan_capacity(terminal_width, max_lines)
    LOGGER.debug("terminal width %s, scan capacity %d", terminal_width, max_items)

    outcome = scan_directory(directory, max_items)
    must_show_dirs_only = outcome.stopped_early or len(outcome.entries) > max_items
    if must_show_dirs_only:
        LOGGER.debug(
            "showing directories only (timed_out=%s, over_capacity=%s, scanned=%d)",
            outcome.timed_out,
            outcome.over_capacity,
            len(outcome.entries),
        )
        candidates = [entry for entry in outcome.entries if entry.is_dir]
    else:
        candidates = list(outcome.entries)

    if not candidates:
        return ""

    layout_entries = [LayoutEntry.from_entry(entry) for entry in candidates]
    return render_entries_in_columns(
        layout_entries,
        terminal_width,
        max_lines,
        consider_dirs_only=not must_show_dirs_only,
        more_available=outcome.stopped_early,
    )


def run_preview(
    directory: Path | str,
    max_lines: int = DEFAULT_MAX_LINES,
    stream: TextIO | None = None,
    terminal_width: int | None = None,
    *,
    detect_width: bool = True,
) -> None:
    """Query the terminal width when needed, then print the preview.

    An explicit ``terminal_width`` wins over detection; ``detect_width=False``
    leaves an unset width unknown.
    """
    if terminal_width is None and detect_width:
        terminal_width = query_terminal_width()
    text = build_directory_preview(directory, max_lines, terminal_width)
    if not text:
        return
    target = stream if stream is not None else sys.stdout
    target.write(text)
    target.flush()
