"""Run the index pipeline for one directory or a whole tree.

Each visit resolves, collects, builds breadcrumbs, guards, and renders before
the next directory starts. Only skippable errors are absorbed here.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .document import build_index_document
from .errors import SkipDirectory
from .options import IndexOptions
from .paths import RootContext, resolve_target
from .render import render_document, render_target_path, write_index, write_stdout
from .walk import iter_directories

logger = logging.getLogger(__name__)

OUTCOME_WRITTEN = "written"
OUTCOME_DRY_RUN = "dry-run"
OUTCOME_STDOUT = "stdout"
OUTCOME_SKIPPED = "skipped"


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of one directory visit."""

    directory: Path
    outcome: str
    target_path: Path | None = None
    skip: SkipDirectory | None = None


def generate_index(
    root: RootContext,
    directory: Path | str,
    options: IndexOptions,
    stdout: TextIO | None = None,
) -> GenerationResult:
    """Generate the index for ``directory`` and report what happened."""
    directory = Path(directory)
    target = resolve_target(root, directory)
    document = build_index_document(target, options)
    html = render_document(document)

    if options.stdout:
        write_stdout(html, stdout or sys.stdout)
        return GenerationResult(directory, OUTCOME_STDOUT)

    path = render_target_path(target, options)
    try:
        written = write_index(html, path, dry_run=options.dry_run)
    except SkipDirectory as exc:
        logger.info("skipped: %s", exc)
        return GenerationResult(directory, OUTCOME_SKIPPED, target_path=path, skip=exc)
    return GenerationResult(directory, OUTCOME_WRITTEN if written else OUTCOME_DRY_RUN, target_path=path)


def iter_generate(
    target: Path | str,
    options: IndexOptions,
    stdout: TextIO | None = None,
) -> Iterator[GenerationResult]:
    """Yield one result per visited directory; recursive runs walk ``target``."""
    root = RootContext.from_path(options.root)
    directories = iter_directories(target) if options.recursive else iter([Path(target)])
    for directory in directories:
        yield generate_index(root, directory, options, stdout=stdout)


def generate(
    target: Path | str,
    options: IndexOptions,
    stdout: TextIO | None = None,
) -> list[GenerationResult]:
    """Run the pipeline for ``target`` and return every visit's result."""
    return list(iter_generate(target, options, stdout=stdout))


__all__ = [
    "OUTCOME_WRITTEN",
    "OUTCOME_DRY_RUN",
    "OUTCOME_STDOUT",
    "OUTCOME_SKIPPED",
    "GenerationResult",
    "generate_index",
    "iter_generate",
    "generate",
]
