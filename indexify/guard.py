"""Decide whether an index file may be written at a given path.

Only files that carry the generated marker may be replaced. The marker is a
plain substring match so pages produced by earlier releases stay replaceable.
"""

from __future__ import annotations

from pathlib import Path

from .errors import TargetExistsForeignError, TargetIsDirectoryError

GENERATED_MARKER = "Index generated with"


def is_generated_content(data: bytes) -> bool:
    return GENERATED_MARKER.encode("utf-8") in data


def check_render_target(path: Path) -> None:
    """Return when writing ``path`` is safe, raise a skip error otherwise.

    Missing or unopenable paths count as new files. The read handle is closed
    before this function returns.
    """
    if path.is_dir():
        raise TargetIsDirectoryError(path)
    try:
        with path.open("rb") as handle:
            data = handle.read()
    except OSError:
        return
    if is_generated_content(data):
        return
    raise TargetExistsForeignError(path)


__all__ = ["GENERATED_MARKER", "is_generated_content", "check_render_target"]
