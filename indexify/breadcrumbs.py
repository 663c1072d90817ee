"""Turn a chrooted path into a navigable breadcrumb trail."""

from __future__ import annotations

from dataclasses import dataclass
from urllib.parse import unquote

ROOT_MARKER = "/"


@dataclass(frozen=True)
class Breadcrumb:
    display_text: str
    relative_link: str


def build_breadcrumbs(chrooted_path: str) -> tuple[Breadcrumb, ...]:
    """Return one breadcrumb per segment of ``chrooted_path``.

    Each link climbs ``../`` once per segment that follows it, so the last
    crumb links to ``""``. Segments are percent-decoded one at a time because a
    directory name may itself contain an encoded ``/``.
    """
    if not chrooted_path:
        return ()

    path = chrooted_path[:-1] if chrooted_path.endswith("/") else chrooted_path
    parts = path.split("/")
    crumbs: list[Breadcrumb] = []
    for idx, part in enumerate(parts):
        if idx == 0 and part == "":
            part = ROOT_MARKER
        crumbs.append(
            Breadcrumb(
                display_text=unquote(part),
                relative_link="../" * (len(parts) - idx - 1),
            )
        )
    return tuple(crumbs)


__all__ = ["ROOT_MARKER", "Breadcrumb", "build_breadcrumbs"]
