"""Collect and classify the immediate children of a directory."""

from __future__ import annotations

import logging
import math
import os
import stat
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from urllib.parse import quote

from .errors import MetadataError

logger = logging.getLogger(__name__)

HIDDEN_PREFIX = "."
IEC_UNITS = ("B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB")


def human_size(size_bytes: int) -> str:
    """Return IEC binary size text like ``10 B``, ``1.0 KiB`` or ``15 KiB``."""
    if size_bytes < 10:
        return f"{size_bytes} B"
    exponent = 0
    scaled = float(size_bytes)
    while scaled >= 1024 and exponent < len(IEC_UNITS) - 1:
        scaled /= 1024
        exponent += 1
    value = math.floor(scaled * 10 + 0.5) / 10
    if value < 10:
        return f"{value:.1f} {IEC_UNITS[exponent]}"
    return f"{value:.0f} {IEC_UNITS[exponent]}"


def item_link(name: str, base_url: str = "") -> str:
    """Join ``name`` under ``base_url``; without a base URL the bare name is used."""
    if not base_url:
        return name
    return f"{base_url.rstrip('/')}/{name}"


def item_href(name: str, base_url: str = "") -> str:
    """Like ``item_link`` but with the name percent-encoded from its raw bytes."""
    return item_link(quote(os.fsencode(name)), base_url)


@dataclass(frozen=True)
class ListingItem:
    """One visible child row of a listed directory."""

    link: str
    is_directory: bool
    is_symlink: bool
    name: str
    size_in_bytes: int
    modified_time_utc: datetime
    href: str

    @property
    def human_size(self) -> str:
        return human_size(self.size_in_bytes)

    def human_mod_time(self, fmt: str = "%Y-%m-%d %H:%M:%S") -> str:
        """Format the UTC modification time with a ``strftime`` pattern."""
        return self.modified_time_utc.strftime(fmt)


@dataclass(frozen=True)
class Listing:
    """Collected items in directory-read order plus per-kind counts."""

    items: tuple[ListingItem, ...]
    directory_count: int
    file_count: int


def is_listed(name: str, include_hidden: bool, index_name: str) -> bool:
    """Return whether an entry named ``name`` belongs in the listing."""
    if name == index_name:
        return False
    if not include_hidden and name.startswith(HIDDEN_PREFIX):
        return False
    return True


def _read_item(entry: os.DirEntry[str], base_url: str) -> ListingItem:
    """Build a listing row from ``entry``; symlinks are described by their target."""
    try:
        is_symlink = entry.is_symlink()
        info = entry.stat(follow_symlinks=True)
    except OSError as exc:
        raise MetadataError(Path(entry.path), exc) from exc

    return ListingItem(
        link=item_link(entry.name, base_url),
        is_directory=stat.S_ISDIR(info.st_mode),
        is_symlink=is_symlink,
        name=entry.name,
        size_in_bytes=int(info.st_size),
        modified_time_utc=datetime.fromtimestamp(info.st_mtime, tz=timezone.utc),
        href=item_href(entry.name, base_url),
    )


def collect_entries(
    directory: Path,
    include_hidden: bool,
    index_name: str,
    base_url: str = "",
) -> Listing:
    """List visible children of ``directory`` without re-sorting them.

    Raises ``MetadataError`` when an entry cannot be stat'ed (for example a
    broken symlink). Failing to open the directory itself propagates the
    underlying ``OSError``.
    """
    items: list[ListingItem] = []
    directory_count = 0
    file_count = 0

    with os.scandir(directory) as entries:
        for entry in entries:
            if not is_listed(entry.name, include_hidden, index_name):
                continue
            item = _read_item(entry, base_url)
            items.append(item)
            if item.is_directory:
                directory_count += 1
            else:
                file_count += 1

    logger.debug("collected %d dirs, %d files from %s", directory_count, file_count, directory)
    return Listing(items=tuple(items), directory_count=directory_count, file_count=file_count)


__all__ = [
    "HIDDEN_PREFIX",
    "human_size",
    "item_link",
    "item_href",
    "ListingItem",
    "Listing",
    "is_listed",
    "collect_entries",
]
