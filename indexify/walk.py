"""Depth-first directory traversal feeding the recursive sweep."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path


def _raise(exc: OSError) -> None:
    raise exc


def iter_directories(top: Path | str) -> Iterator[Path]:
    """Yield ``top`` and every directory below it in pre-order.

    Children are visited in lexical name order and paths are joined onto
    ``top`` as given. Symlinked directories are listed but not descended.
    """
    for dirpath, dirnames, _filenames in os.walk(top, onerror=_raise):
        dirnames.sort()
        yield Path(dirpath)


__all__ = ["iter_directories"]
