"""Build-time enrichment passes for rendered documentation pages.

This package annotates already rendered pages with status banners
(secure-context, experimental, deprecated) and previous/next navigation for
guide sequences. It exposes the CLI entry points used by ``uv run enrich`` as
well as the building blocks for embedding the passes in another pipeline.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``BuildSession``: Per-build caches and collaborators.

Examples
--------
>>> from docs_enrich import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main
from .session import BuildSession, FileInfo

__all__ = ["BuildSession", "FileInfo", "app", "main"]
