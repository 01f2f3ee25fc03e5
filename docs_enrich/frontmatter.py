r"""Read page front-matter into explicit metadata records.

Every documentation page lives in its own directory next to an ``index.md``
whose head carries a ``---`` delimited YAML block. This module extracts that
block, parses it with ``ruamel.yaml`` and normalises the loosely typed keys
the enrichment passes care about into :class:`PageMetadata`.

Example
-------
>>> from docs_enrich.frontmatter import parse_front_matter
>>> meta = parse_front_matter("---\npage-type: guide\nweight: 2\n---\nBody")
>>> meta.page_type, meta.weight
('guide', 2)
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from ._constants import CONTENT_FILENAME

_DELIMITER = "---"


class FrontMatterError(ValueError):
    """Raised when a page document is missing or its front-matter is unusable."""


class MissingDocumentError(FrontMatterError):
    """Raised when a page directory has no readable content document."""


class CompatKind(enum.Enum):
    """Shape of the ``browser-compat`` key."""

    ABSENT = "absent"
    SINGLE = "single"
    MULTIPLE = "multiple"


@dc.dataclass(frozen=True, slots=True)
class BrowserCompat:
    """Tagged view over the ``browser-compat`` front-matter value.

    Attributes
    ----------
    kind : CompatKind
        ``ABSENT`` when the key is missing, ``SINGLE`` for one query and
        ``MULTIPLE`` for a list. Only ``SINGLE`` can drive status banners.
    queries : tuple[str, ...]
        Compatibility identifiers in declaration order.
    """

    kind: CompatKind = CompatKind.ABSENT
    queries: tuple[str, ...] = ()

    @property
    def query(self) -> str | None:
        """Return the single query, or ``None`` for absent and list forms."""
        if self.kind is CompatKind.SINGLE:
            return self.queries[0]
        return None


@dc.dataclass(frozen=True, slots=True)
class PageMetadata:
    """Front-matter fields consumed by the enrichment passes.

    Attributes
    ----------
    page_type : str | None
        Value of ``page-type``.
    weight : int | float | None
        Ordering weight; ``None`` when absent. Zero is a valid weight.
    slug : str | None
        Page slug used to build ``/{locale}/docs/{slug}`` links.
    title : str | None
        Human readable page title.
    security_requirements : tuple[str, ...]
        Requirement tags such as ``"secure-context"``.
    browser_compat : BrowserCompat
        Compatibility query descriptor.
    """

    page_type: str | None = None
    weight: int | float | None = None
    slug: str | None = None
    title: str | None = None
    security_requirements: tuple[str, ...] = ()
    browser_compat: BrowserCompat = dc.field(default_factory=BrowserCompat)

    @classmethod
    def from_mapping(cls, payload: typ.Mapping[str, typ.Any]) -> PageMetadata:
        """Build metadata from a raw front-matter mapping."""
        return cls(
            page_type=_optional_str(payload.get("page-type")),
            weight=_coerce_weight(payload.get("weight")),
            slug=_optional_str(payload.get("slug")),
            title=_optional_str(payload.get("title")),
            security_requirements=_as_tags(payload.get("security-requirements")),
            browser_compat=_build_browser_compat(payload.get("browser-compat")),
        )


def read_front_matter(page_dir: Path) -> PageMetadata:
    """Return the metadata of the page stored in ``page_dir``.

    Parameters
    ----------
    page_dir : Path
        Directory containing the page's ``index.md``.

    Returns
    -------
    PageMetadata
        Parsed front-matter record.

    Raises
    ------
    FrontMatterError
        If the document is not UTF-8 or its block is missing, malformed, or
        not a YAML mapping.
    MissingDocumentError
        If the content document cannot be read.
    """
    document = page_dir / CONTENT_FILENAME
    try:
        text = document.read_text(encoding="utf-8")
    except OSError as exc:
        msg = f"Cannot read '{document}': {exc}"
        raise MissingDocumentError(msg) from exc
    except UnicodeDecodeError as exc:
        msg = f"'{document}' is not valid UTF-8: {exc}"
        raise FrontMatterError(msg) from exc
    return parse_front_matter(text, source=str(document))


def parse_front_matter(text: str, *, source: str = "<string>") -> PageMetadata:
    """Parse the leading front-matter block of ``text``.

    Raises
    ------
    FrontMatterError
        If the block is missing, unterminated, malformed, or not a mapping.
    """
    block = _extract_block(text, source)
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(block)
    except YAMLError as exc:
        msg = f"Malformed front-matter in '{source}': {exc}"
        raise FrontMatterError(msg) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = f"Front-matter in '{source}' must be a mapping."
        raise FrontMatterError(msg)
    return PageMetadata.from_mapping(loaded)


def _extract_block(text: str, source: str) -> str:
    """Return the YAML between the opening and closing ``---`` lines."""
    lines = text.lstrip("\ufeff").splitlines()
    if not lines or lines[0].strip() != _DELIMITER:
        msg = f"No front-matter block in '{source}'."
        raise FrontMatterError(msg)
    for idx in range(1, len(lines)):
        if lines[idx].strip() == _DELIMITER:
            return "\n".join(lines[1:idx])
    msg = f"Unterminated front-matter block in '{source}'."
    raise FrontMatterError(msg)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_weight(value: object | None) -> int | float | None:
    """Return a numeric weight, or None when absent or not a number."""
    match value:
        case bool():
            return None
        case int() | float():
            return value
        case _:
            return None


def _as_tags(value: object | None) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value.strip(),) if value.strip() else ()
    if isinstance(value, list):
        return tuple(str(item).strip() for item in value if str(item).strip())
    return ()


def _build_browser_compat(value: object | None) -> BrowserCompat:
    """Classify the raw ``browser-compat`` value into a tagged variant."""
    match value:
        case list():
            queries = tuple(str(item) for item in value)
            return BrowserCompat(kind=CompatKind.MULTIPLE, queries=queries)
        case str() if value.strip():
            return BrowserCompat(kind=CompatKind.SINGLE, queries=(value.strip(),))
        case _:
            return BrowserCompat()


__all__ = [
    "BrowserCompat",
    "CompatKind",
    "FrontMatterError",
    "MissingDocumentError",
    "PageMetadata",
    "parse_front_matter",
    "read_front_matter",
]
