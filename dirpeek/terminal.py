"""Terminal width lookup.

The width is read from the controlling terminal rather than stdin/stdout so it
stays correct when output is piped or redirected.
"""

from __future__ import annotations

import contextlib
import logging
import os

LOGGER = logging.getLogger(__name__)

CONTROLLING_TTY = "/dev/tty"


def terminal_width(tty_path: str = CONTROLLING_TTY) -> int | None:
    """Return the column count of the controlling terminal, or ``None``.

    ``None`` means there is no controlling terminal, the size query failed,
    or the terminal reported zero columns.
    """
    try:
        fd = os.open(tty_path, os.O_RDONLY | os.O_NOCTTY)
    except OSError as exc:
        LOGGER.debug("no controlling terminal: %s", exc)
        return None
    try:
        columns = os.get_terminal_size(fd).columns
    except OSError as exc:
        LOGGER.debug("terminal size query failed: %s", exc)
        return None
    finally:
        with contextlib.suppress(OSError):
            os.close(fd)
    if columns <= 0:
        return None
    return columns
