"""Entry styles and type indicators.

Every file type maps to one ANSI style plus a one-character trailing
indicator (or none). Colors are always emitted, also when piping.
"""

from __future__ import annotations

from dataclasses import dataclass

from .entry_model import FileType

RESET = "\033[0m"


@dataclass(frozen=True)
class Style:
    """SGR parameters applied around a piece of text."""

    codes: tuple[str, ...] = ()

    @property
    def prefix(self) -> str:
        if not self.codes:
            return ""
        return f"\033[{';'.join(self.codes)}m"

    def apply(self, text: str) -> str:
        if not self.codes:
            return text
        return f"{self.prefix}{text}{RESET}"


PLAIN = Style()
DIRECTORY_STYLE = Style(("1", "34"))
SYMLINK_STYLE = Style(("35",))
SOCKET_STYLE = Style(("35",))
FIFO_STYLE = Style(("33",))
BLOCK_DEVICE_STYLE = Style(("34", "46"))
CHAR_DEVICE_STYLE = Style(("34", "43"))

FILE_TYPE_DECORATIONS: dict[FileType, tuple[Style, str]] = {
    FileType.DIRECTORY: (DIRECTORY_STYLE, "/"),
    FileType.SYMLINK: (SYMLINK_STYLE, "@"),
    FileType.SOCKET: (SOCKET_STYLE, "="),
    FileType.FIFO: (FIFO_STYLE, "|"),
    FileType.BLOCK_DEVICE: (BLOCK_DEVICE_STYLE, ""),
    FileType.CHAR_DEVICE: (CHAR_DEVICE_STYLE, ""),
    FileType.REGULAR_FILE: (PLAIN, ""),
    FileType.OTHER: (PLAIN, ""),
}


def classify(file_type: FileType) -> tuple[Style, str]:
    """Return ``(style, indicator)`` for ``file_type``."""
    return FILE_TYPE_DECORATIONS[file_type]


def decorate_name(name: str, file_type: FileType) -> str:
    """Return ``name`` wrapped in its type style, followed by its indicator."""
    style, indicator = classify(file_type)
    return f"{style.apply(name)}{indicator}"
