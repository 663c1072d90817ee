"""Error kinds raised by the index generation pipeline.

Every error carries a ``skippable`` flag. Skippable errors mean "leave this
directory alone and keep going"; all others abort the run.
"""

from __future__ import annotations

from pathlib import Path


class IndexifyError(Exception):
    """Base class for all indexify failures."""

    skippable = False


class InvalidRootError(IndexifyError):
    """The declared root is missing, not a directory, or unreadable."""

    def __init__(self, root: Path, reason: str) -> None:
        super().__init__(f"invalid root {reason}: {root}")
        self.root = root
        self.reason = reason


class OutsideRootError(IndexifyError):
    """Target directory is not contained in the declared root."""

    def __init__(self, target: Path, root: Path) -> None:
        super().__init__(f"directory is outside root: {target} (root: {root})")
        self.target = target
        self.root = root


class MetadataError(IndexifyError):
    """Metadata for a directory entry could not be read."""

    def __init__(self, path: Path, cause: OSError) -> None:
        super().__init__(f"cannot read metadata for {path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause


class SkipDirectory(IndexifyError):
    """Base for conditions that skip one directory without aborting."""

    skippable = True
    reason = "skipped"

    def __init__(self, path: Path) -> None:
        super().__init__(f"{self.reason}: {path}")
        self.path = path


class TargetIsDirectoryError(SkipDirectory):
    reason = "target is a directory"


class TargetExistsForeignError(SkipDirectory):
    reason = "target already exists and is not a generated file"


__all__ = [
    "IndexifyError",
    "InvalidRootError",
    "OutsideRootError",
    "MetadataError",
    "SkipDirectory",
    "TargetIsDirectoryError",
    "TargetExistsForeignError",
]
