"""Render index documents to HTML and write them behind the target guard."""

from __future__ import annotations

import contextlib
import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import TextIO

from jinja2 import Environment, PackageLoader, select_autoescape

from . import __version__
from .document import IndexDocument
from .guard import check_render_target
from .options import IndexOptions
from .paths import TargetDirectory

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "index.html"


@lru_cache(maxsize=1)
def template_environment() -> Environment:
    """Return the shared Jinja environment loading ``indexify/templates``."""
    return Environment(
        loader=PackageLoader("indexify", "templates"),
        autoescape=select_autoescape(["html"]),
        keep_trailing_newline=True,
    )


def render_document(document: IndexDocument) -> str:
    template = template_environment().get_template(TEMPLATE_NAME)
    return template.render(doc=document, version=__version__)


def encode_html(html: str) -> bytes:
    """Encode rendered HTML, passing undecodable filename bytes through unchanged."""
    return html.encode("utf-8", "surrogateescape")


def write_stdout(html: str, stream: TextIO) -> None:
    """Write ``html`` to a text stream, using its byte buffer when it has one."""
    buffer = getattr(stream, "buffer", None)
    if buffer is None:
        stream.write(html)
        return
    stream.flush()
    buffer.write(encode_html(html))
    buffer.flush()


def render_target_path(target: TargetDirectory, options: IndexOptions) -> Path:
    """Return where the index for ``target`` goes, keeping the user's spelling."""
    return target.relative_path_as_given / options.index_name


def _replace_file(path: Path, data: bytes) -> None:
    """Write ``data`` beside ``path`` and move it into place in one step."""
    temp_path = path.with_name(f".{path.name}.{os.getpid()}.tmp")
    fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
        os.replace(temp_path, path)
    except BaseException:
        with contextlib.suppress(FileNotFoundError):
            temp_path.unlink()
        raise


def write_index(html: str, path: Path, dry_run: bool = False) -> bool:
    """Write ``html`` to ``path`` once the guard allows it.

    Guard skip errors propagate to the caller. Returns ``False`` for dry runs,
    which report the path and leave the filesystem untouched. A failed write
    leaves any previous file at ``path`` as it was.
    """
    check_render_target(path)
    if dry_run:
        logger.info("[dry-run] write %s", path)
        return False
    _replace_file(path, encode_html(html))
    logger.debug("wrote %s", path)
    return True


__all__ = [
    "TEMPLATE_NAME",
    "template_environment",
    "render_document",
    "encode_html",
    "write_stdout",
    "render_target_path",
    "write_index",
]
