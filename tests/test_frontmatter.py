"""Unit tests for front-matter parsing and metadata normalisation."""

from __future__ import annotations

import typing as typ

import pytest

from docs_enrich.frontmatter import (
    BrowserCompat,
    CompatKind,
    FrontMatterError,
    MissingDocumentError,
    PageMetadata,
    parse_front_matter,
    read_front_matter,
)

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_parse_guide_front_matter() -> None:
    """Known keys should map onto explicit metadata fields."""
    meta = parse_front_matter(
        "---\n"
        "title: Your first form\n"
        "slug: Learn/Forms/Your_first_form\n"
        "page-type: guide\n"
        "weight: 2\n"
        "---\n"
        "Body text\n"
    )
    assert meta == PageMetadata(
        page_type="guide",
        weight=2,
        slug="Learn/Forms/Your_first_form",
        title="Your first form",
    )
    assert meta.browser_compat.kind is CompatKind.ABSENT
    assert meta.browser_compat.query is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("0", 0),
        ("1.5", 1.5),
        ("null", None),
        ("~", None),
        ("", None),
        ("true", None),
        ("'3'", None),
    ],
)
def test_weight_must_be_numeric(raw: str, expected: object) -> None:
    """Only real numbers count as weights; zero is kept."""
    meta = parse_front_matter(f"---\nweight: {raw}\n---\n")
    assert meta.weight == expected
    assert type(meta.weight) is type(expected)


def test_security_requirements_accepts_string_or_list() -> None:
    """A single requirement string is normalised into a one-item tuple."""
    single = parse_front_matter("---\nsecurity-requirements: secure-context\n---\n")
    listed = parse_front_matter(
        "---\nsecurity-requirements:\n  - secure-context\n  - user-activation\n---\n"
    )
    assert single.security_requirements == ("secure-context",)
    assert listed.security_requirements == ("secure-context", "user-activation")


def test_browser_compat_variants() -> None:
    """Single queries and query lists are tagged differently."""
    single = parse_front_matter("---\nbrowser-compat: api.Navigator.share\n---\n")
    multiple = parse_front_matter(
        "---\nbrowser-compat:\n  - api.Window.open\n  - api.Document.open\n---\n"
    )
    assert single.browser_compat == BrowserCompat(
        kind=CompatKind.SINGLE, queries=("api.Navigator.share",)
    )
    assert single.browser_compat.query == "api.Navigator.share"
    assert multiple.browser_compat.kind is CompatKind.MULTIPLE
    assert multiple.browser_compat.query is None
    assert multiple.browser_compat.queries == ("api.Window.open", "api.Document.open")


def test_empty_front_matter_block_is_allowed() -> None:
    """An empty block parses to metadata with every field absent."""
    assert parse_front_matter("---\n---\nBody") == PageMetadata()


@pytest.mark.parametrize(
    "text",
    [
        "No front-matter here\n",
        "---\ntitle: never closed\n",
        "---\n- just\n- a list\n---\n",
        "---\ntitle: [broken\n---\n",
    ],
)
def test_invalid_front_matter_raises(text: str) -> None:
    """Missing, unterminated, non-mapping, or malformed blocks are errors."""
    with pytest.raises(FrontMatterError):
        parse_front_matter(text)


def test_read_front_matter_missing_document(tmp_path: Path) -> None:
    """A page directory without ``index.md`` raises the dedicated error."""
    with pytest.raises(MissingDocumentError):
        read_front_matter(tmp_path)


def test_read_front_matter_from_directory(tmp_path: Path) -> None:
    """The reader loads ``index.md`` from the given directory."""
    (tmp_path / "index.md").write_text(
        "\ufeff---\npage-type: guide\nslug: Learn/Start\n---\n", encoding="utf-8"
    )
    meta = read_front_matter(tmp_path)
    assert meta.slug == "Learn/Start"
    assert meta.page_type == "guide"


def test_read_front_matter_rejects_invalid_utf8(tmp_path: Path) -> None:
    """Undecodable documents surface as front-matter errors."""
    (tmp_path / "index.md").write_bytes(b"---\nslug: \xff\xfe\n---\n")
    with pytest.raises(FrontMatterError, match="not valid UTF-8") as info:
        read_front_matter(tmp_path)
    assert not isinstance(info.value, MissingDocumentError)
    assert isinstance(info.value.__cause__, UnicodeDecodeError)
