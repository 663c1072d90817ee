"""indexify: static HTML directory listings for plain file servers.

``main`` runs the command line; the pipeline pieces live in submodules
(``paths``, ``listing``, ``breadcrumbs``, ``guard``, ``render``, ``generator``).
"""

from __future__ import annotations

__version__ = "1.2.1"


def main(*args, **kwargs):
    """Run the indexify command line; the CLI module is imported on first use."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["__version__", "main"]
