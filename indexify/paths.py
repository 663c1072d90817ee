"""Resolve target directories against the declared root.

Targets are made absolute without resolving symlinks, then expressed relative
to the root. The chrooted form (``/sub/dir``) is used for titles and
breadcrumbs only, never for filesystem access.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from .errors import InvalidRootError, OutsideRootError


def absolute_path(path: Path | str) -> Path:
    """Return ``path`` made absolute against the cwd, normalized but unresolved."""
    return Path(os.path.abspath(os.fspath(path)))


@dataclass(frozen=True)
class RootContext:
    """Absolute root shared read-only by every directory visit."""

    root_path: Path

    @classmethod
    def from_path(cls, root: Path | str) -> RootContext:
        """Build a context for ``root``, requiring a readable directory."""
        root_path = absolute_path(root)
        if not root_path.exists():
            raise InvalidRootError(root_path, "does not exist")
        if not root_path.is_dir():
            raise InvalidRootError(root_path, "is not a directory")
        if not os.access(root_path, os.R_OK | os.X_OK):
            raise InvalidRootError(root_path, "is not readable")
        return cls(root_path=root_path)


@dataclass(frozen=True)
class TargetDirectory:
    """One directory visit expressed in every form the pipeline needs."""

    relative_path_as_given: Path
    absolute_path: Path
    path_relative_to_root: PurePosixPath
    chrooted_path: str
    can_navigate_up: bool


def resolve_target(root: RootContext, target: Path | str) -> TargetDirectory:
    """Locate ``target`` inside ``root``.

    Raises ``OutsideRootError`` when the root-relative path starts with a
    ``..`` segment or cannot be computed at all (different drives).
    """
    given = Path(target)
    target_absolute = absolute_path(given)
    try:
        relative = os.path.relpath(target_absolute, root.root_path)
    except ValueError as exc:
        raise OutsideRootError(target_absolute, root.root_path) from exc

    parts = tuple(part for part in Path(relative).parts if part != ".")
    if parts and parts[0] == os.pardir:
        raise OutsideRootError(target_absolute, root.root_path)

    relative_to_root = PurePosixPath(*parts) if parts else PurePosixPath()
    chrooted = str(PurePosixPath("/", *parts))
    return TargetDirectory(
        relative_path_as_given=given,
        absolute_path=target_absolute,
        path_relative_to_root=relative_to_root,
        chrooted_path=chrooted,
        can_navigate_up=target_absolute != root.root_path,
    )


__all__ = ["absolute_path", "RootContext", "TargetDirectory", "resolve_target"]
