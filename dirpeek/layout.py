"""Column layout for directory previews.

Names are placed row-major into a grid of equal-width columns. Column width is
the widest name rounded up to the next tab stop, and the column count is
however many such columns fit the terminal. When the full set would not fit
in ``max_lines`` rows, the grid can be narrowed once to directories only;
anything still left over is cut off with a ``....`` line.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TextIO

from .ansi import display_width
from .entry_model import MIN_TAB_WIDTH, DirectoryEntry
from .ui_theme import decorate_name

LOGGER = logging.getLogger(__name__)

TRUNCATION_MARKER = "...."


@dataclass(frozen=True)
class LayoutEntry:
    """Entry paired with the display width of its name."""

    entry: DirectoryEntry
    display_width: int

    @classmethod
    def from_entry(cls, entry: DirectoryEntry) -> LayoutEntry:
        return cls(entry=entry, display_width=display_width(entry.display_name))


@dataclass(frozen=True)
class LayoutPlan:
    column_width: int
    column_count: int

    def capacity(self, max_lines: int) -> int:
        return self.column_count * max_lines


def round_up_to_tab(width: int) -> int:
    """Round ``width`` up to a positive multiple of :data:`MIN_TAB_WIDTH`."""
    stops = max(1, -(-width // MIN_TAB_WIDTH))
    return stops * MIN_TAB_WIDTH


def plan_layout(entries: Sequence[LayoutEntry], terminal_width: int | None) -> LayoutPlan:
    """Compute column width and count for ``entries`` (must be non-empty)."""
    if not entries:
        raise ValueError("cannot lay out an empty entry set")
    max_width = max(item.display_width for item in entries)
    column_width = round_up_to_tab(max_width)
    column_count = max(1, (terminal_width or 0) // column_width)
    return LayoutPlan(column_width=column_width, column_count=column_count)


def _render_grid(entries: Sequence[LayoutEntry], plan: LayoutPlan, max_lines: int, more_available: bool) -> str:
    out: list[str] = []
    limit = plan.capacity(max_lines)
    truncated = len(entries) > limit or (more_available and len(entries) >= limit)
    last = len(entries) - 1
    for i, item in enumerate(entries):
        # The marker takes the last grid cell.
        if truncated and i == limit - 1:
            if i % plan.column_count != 0:
                out.append("\n")
            out.append(f"{TRUNCATION_MARKER}\n")
            break

        out.append(decorate_name(item.entry.display_name, item.entry.file_type))

        ends_row = (i + 1) % plan.column_count == 0
        if not ends_row:
            out.append(" " * (plan.column_width - item.display_width))
        if ends_row or i == last:
            out.append("\n")
    return "".join(out)


def render_entries_in_columns(
    entries: Sequence[LayoutEntry],
    terminal_width: int | None,
    max_lines: int,
    consider_dirs_only: bool,
    more_available: bool = False,
) -> str:
    """Render ``entries`` as a sorted grid of at most ``max_lines`` rows.

    With ``consider_dirs_only`` set, a set that overflows the grid and holds
    at least one directory is narrowed to its directories and laid out again
    (once; the narrowed pass never narrows further).

    ``more_available`` says the directory holds entries that were never
    scanned, so a set that exactly fills the grid is still marked truncated.
    """
    if max_lines < 1:
        raise ValueError("max_lines must be at least 1")
    plan = plan_layout(entries, terminal_width)

    if consider_dirs_only and len(entries) > plan.capacity(max_lines):
        directories = [item for item in entries if item.entry.is_dir]
        if directories:
            LOGGER.debug(
                "%d entries overflow %d slots, narrowing to %d directories",
                len(entries),
                plan.capacity(max_lines),
                len(directories),
            )
            return render_entries_in_columns(directories, terminal_width, max_lines, False, more_available)

    LOGGER.debug("layout: %d columns of width %d", plan.column_count, plan.column_width)
    ordered = sorted(entries, key=lambda item: item.entry.name)
    return _render_grid(ordered, plan, max_lines, more_available)


def print_entries_in_columns(
    entries: Sequence[LayoutEntry],
    terminal_width: int | None,
    max_lines: int,
    consider_dirs_only: bool,
    stream: TextIO | None = None,
    more_available: bool = False,
) -> None:
    """Write :func:`render_entries_in_columns` output to ``stream`` (stdout by default)."""
    target = stream if stream is not None else sys.stdout
    target.write(render_entries_in_columns(entries, terminal_width, max_lines, consider_dirs_only, more_available))
