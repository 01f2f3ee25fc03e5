"""Render enrichment fragments and insert them into parsed HTML pages.

Fragments are rendered from the Jinja templates shipped in
``docs_enrich/templates`` and parsed back with BeautifulSoup before being
inserted, so callers only deal with ``BeautifulSoup`` trees.

Banners go to the top of ``div#_body`` in the order they were selected; the
first selected banner ends up first in the document. The previous/next list
is prepended to ``<body>``.
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from bs4 import BeautifulSoup
from jinja2 import Environment, FileSystemLoader, select_autoescape

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from bs4 import Tag

    from .banners import Banner
    from .sequences import PreviousNext

logger = logging.getLogger(__name__)

BODY_SELECTOR = "div#_body"
DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"


class FragmentRenderer:
    """Render banner and navigation markup from Jinja templates."""

    def __init__(self, *, templates_dir: Path | None = None) -> None:
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._banner_template = self.env.get_template("banner.jinja")
        self._prev_next_template = self.env.get_template("prev_next.jinja")

    def banner(self, banner: Banner) -> str:
        """Return the ``notecard`` markup for ``banner``.

        The message is trusted markup from the localization table and is not
        escaped.
        """
        return self._banner_template.render(banner=banner).strip()

    def previous_next(
        self,
        locale: str,
        slug: str,
        entries: PreviousNext,
        labels: cabc.Mapping[str, str],
    ) -> str | None:
        """Return the ``prev-next`` list, or None when there is nowhere to go.

        Parameters
        ----------
        locale : str
            Locale segment of the generated ``/{locale}/docs/{slug}`` links.
        slug : str
            Slug of the current page; its parent slug backs the Overview link.
        entries : PreviousNext
            Neighbouring pages.
        labels : Mapping[str, str]
            Button labels keyed by ``previous``, ``overview`` and ``next``.
        """
        if not entries:
            return None
        html = self._prev_next_template.render(
            locale=locale,
            entries=entries,
            parent_slug=parent_slug(slug),
            labels=labels,
        )
        return html.strip()


def parent_slug(slug: str) -> str:
    """Return ``slug`` without its last path segment."""
    return "/".join(slug.split("/")[:-1])


def _parse_fragment(markup: str, name: str) -> Tag | None:
    fragment = BeautifulSoup(markup, "html.parser")
    return fragment.find(name)


def inject_banners(
    soup: BeautifulSoup, banners: cabc.Iterable[Banner], renderer: FragmentRenderer
) -> int:
    """Insert ``banners`` at the top of ``div#_body`` in the given order.

    Returns
    -------
    int
        Number of banners inserted; zero when the page has no ``div#_body``.
    """
    container = soup.select_one(BODY_SELECTOR)
    if container is None:
        logger.debug("No %s element; skipping banners", BODY_SELECTOR)
        return 0
    inserted = 0
    for banner in banners:
        element = _parse_fragment(renderer.banner(banner), "div")
        if element is None:  # pragma: no cover - template always yields a div
            continue
        container.insert(inserted, element)
        inserted += 1
    return inserted


def inject_previous_next(soup: BeautifulSoup, markup: str | None) -> bool:
    """Prepend the navigation list to ``<body>``, or the document root.

    Returns
    -------
    bool
        ``True`` when a list was inserted.
    """
    if not markup:
        return False
    element = _parse_fragment(markup, "ul")
    if element is None:  # pragma: no cover - template always yields a ul
        return False
    target = soup.body or soup
    target.insert(0, element)
    return True


__all__ = [
    "BODY_SELECTOR",
    "FragmentRenderer",
    "inject_banners",
    "inject_previous_next",
    "parent_slug",
]
