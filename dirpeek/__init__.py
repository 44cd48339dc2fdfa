"""Public package surface for dirpeek.

Exports ``main`` for programmatic CLI invocation and ``build_directory_preview``
for callers that want the preview text without printing it.
"""

from __future__ import annotations

__version__ = "0.1.0"


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


def build_directory_preview(*args, **kwargs):
    from .preview import build_directory_preview as _build

    return _build(*args, **kwargs)


__all__ = ["__version__", "main", "build_directory_preview"]
