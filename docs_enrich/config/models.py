"""Typed dataclasses describing docs_enrich configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from .._constants import DEFAULT_LOCALE


class EnrichConfigError(ValueError):
    """Raised when the enrichment configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class EnrichConfig:
    """A fully resolved enrichment run definition.

    Attributes
    ----------
    root : Path
        Repository root holding ``jsondata/L10n-Common.json``.
    content_root : Path
        Tree of page directories, each with an ``index.md``.
    build_root : Path
        Rendered HTML mirroring ``content_root``.
    locale : str
        Locale of the pages being enriched.
    default_locale : str
        Fallback locale for localized strings.
    html_filename : str
        Name of the rendered file inside each page directory.
    compat_data : Path | None
        Optional browser-compat-data JSON file.
    """

    root: Path
    content_root: Path
    build_root: Path
    locale: str = DEFAULT_LOCALE
    default_locale: str = DEFAULT_LOCALE
    html_filename: str = "index.html"
    compat_data: Path | None = None


__all__ = ["EnrichConfig", "EnrichConfigError"]
