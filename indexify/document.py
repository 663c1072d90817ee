"""Assemble the per-directory index document from collector and breadcrumbs."""

from __future__ import annotations

from dataclasses import dataclass

from .breadcrumbs import Breadcrumb, build_breadcrumbs
from .listing import ListingItem, collect_entries
from .options import IndexOptions
from .paths import TargetDirectory


@dataclass(frozen=True)
class IndexDocument:
    title: str
    breadcrumbs: tuple[Breadcrumb, ...]
    directory_count: int
    file_count: int
    can_navigate_up: bool
    items: tuple[ListingItem, ...]


def build_index_document(target: TargetDirectory, options: IndexOptions) -> IndexDocument:
    """Collect ``target`` and build its document; consumed once by the renderer."""
    listing = collect_entries(
        target.absolute_path,
        include_hidden=options.include_hidden,
        index_name=options.index_name,
        base_url=options.base_url,
    )
    return IndexDocument(
        title=f"Index: {target.chrooted_path}",
        breadcrumbs=build_breadcrumbs(target.chrooted_path),
        directory_count=listing.directory_count,
        file_count=listing.file_count,
        can_navigate_up=target.can_navigate_up,
        items=listing.items,
    )


__all__ = ["IndexDocument", "build_index_document"]
