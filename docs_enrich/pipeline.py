"""High-level orchestration for enriching rendered documentation pages.

This module walks a content tree of page directories, pairs each ``index.md``
with its rendered HTML under the build root, and applies both enrichment
passes: status banners at the top of ``div#_body`` and previous/next buttons
for guide sequences. Files are rewritten in place only when something was
inserted.

Example
-------
>>> from pathlib import Path
>>> from docs_enrich.config import load_enrich_config
>>> from docs_enrich.pipeline import PageEnricher
>>> config = load_enrich_config(Path("config/enrich.yaml"))  # doctest: +SKIP
>>> PageEnricher(config).run()  # doctest: +SKIP
[PosixPath('build/learn/forms/basics/index.html'), ...]
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from bs4 import BeautifulSoup

from ._constants import CONTENT_FILENAME
from .compat import JsonCompatResolver
from .frontmatter import FrontMatterError, read_front_matter
from .injector import FragmentRenderer, inject_banners, inject_previous_next
from .session import BuildSession, FileInfo

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import EnrichConfig
    from .frontmatter import PageMetadata

logger = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class PageResult:
    """What the enricher inserted into one page."""

    path: Path
    banners: int = 0
    navigation: bool = False

    @property
    def changed(self) -> bool:
        """Return whether the page needs rewriting."""
        return bool(self.banners) or self.navigation


class PageEnricher:
    """Apply banner and previous/next enrichment to every rendered page."""

    def __init__(
        self,
        config: EnrichConfig,
        *,
        session: BuildSession | None = None,
        renderer: FragmentRenderer | None = None,
    ) -> None:
        """Initialize the enricher with configuration and shared state.

        Parameters
        ----------
        config : EnrichConfig
            Paths and locales for the run.
        session : BuildSession, optional
            Caches shared across pages; one is created from ``config`` when
            omitted.
        renderer : FragmentRenderer, optional
            Template renderer for the inserted markup.
        """
        self.config = config
        self.session = session or _session_from_config(config)
        self.renderer = renderer or FragmentRenderer()

    def run(self) -> list[Path]:
        """Enrich every page under the content root.

        Returns
        -------
        list[Path]
            Rendered HTML files that were rewritten, in content-tree order.
        """
        written: list[Path] = []
        for document in sorted(self.config.content_root.rglob(CONTENT_FILENAME)):
            page_dir = document.parent
            folder = page_dir.relative_to(self.config.content_root).as_posix()
            result = self.enrich_page(FileInfo(self.config.content_root, folder))
            if result is not None and result.changed:
                written.append(result.path)
        return written

    def enrich_page(self, file_info: FileInfo) -> PageResult | None:
        """Enrich one page in place.

        Returns
        -------
        PageResult | None
            ``None`` when the page metadata or rendered HTML is unavailable.
        """
        page_dir = file_info.root / file_info.folder
        try:
            metadata = read_front_matter(page_dir)
        except FrontMatterError as exc:
            logger.warning("Skipping %s: %s", page_dir, exc)
            return None

        build_dir = self.config.build_root / file_info.folder
        html_path = build_dir / self.config.html_filename
        if not html_path.is_file():
            logger.debug("No rendered page at %s", html_path)
            return None

        try:
            html = html_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Skipping %s: %s", html_path, exc)
            return None
        soup = BeautifulSoup(html, "html.parser")
        result = self.enrich_soup(soup, metadata, file_info)
        result.path = html_path
        if result.changed:
            html_path.write_text(str(soup), encoding="utf-8")
        return result

    def enrich_soup(
        self, soup: BeautifulSoup, metadata: PageMetadata, file_info: FileInfo
    ) -> PageResult:
        """Apply both passes to an already parsed page."""
        locale = self.config.locale
        result = PageResult(path=self.config.build_root / file_info.folder)

        banners = self.session.banners(metadata, locale)
        result.banners = inject_banners(soup, banners, self.renderer)

        if metadata.slug:
            entries = self.session.previous_next(file_info, metadata.slug)
            if entries:
                markup = self.renderer.previous_next(
                    locale, metadata.slug, entries, self.session.nav_labels(locale)
                )
                result.navigation = inject_previous_next(soup, markup)
        return result


def _session_from_config(config: EnrichConfig) -> BuildSession:
    compat = None
    if config.compat_data:
        compat = JsonCompatResolver.from_path(config.compat_data)
    return BuildSession(
        config.root, default_locale=config.default_locale, compat=compat
    )


__all__ = ["PageEnricher", "PageResult"]
