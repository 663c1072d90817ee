"""Immutable run options shared by every directory visit."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_INDEX_NAME = "index.html"


@dataclass(frozen=True)
class IndexOptions:
    """Flags for one run; built once by the CLI and passed to each pipeline call.

    ``root`` is the declared root as given by the user. It is made absolute and
    validated by :class:`indexify.paths.RootContext`.
    """

    root: Path
    include_hidden: bool = False
    dry_run: bool = False
    recursive: bool = False
    stdout: bool = False
    index_name: str = DEFAULT_INDEX_NAME
    base_url: str = ""


__all__ = ["DEFAULT_INDEX_NAME", "IndexOptions"]
