"""Behaviour tests for status banners on reference pages.

These scenarios, backed by ``features/page_banners.feature``, write a
reference page with security and compatibility front-matter, a
browser-compat-data shaped JSON file, and a rendered HTML stub, then run the
page enricher and inspect the ``notecard`` banners at the top of
``div#_body``.
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from docs_enrich.config import EnrichConfig
from docs_enrich.pipeline import PageEnricher
from docs_enrich.session import FileInfo

if typ.TYPE_CHECKING:
    from ..conftest import PageWriter

FEATURE_FILE = Path(__file__).resolve().parents[2] / "features" / "page_banners.feature"
scenarios(FEATURE_FILE)

ScenarioState = dict[str, typ.Any]
PAGE_FOLDER = "api/legacy"


@pytest.fixture
def scenario_state(tmp_path: Path) -> ScenarioState:
    """Share paths across steps."""
    return {
        "content": tmp_path / "content",
        "build": tmp_path / "build",
        "compat": tmp_path / "bcd.json",
    }


def _write_reference_page(
    scenario_state: ScenarioState,
    page_writer: PageWriter,
    extra: dict[str, str],
) -> None:
    page_writer(
        scenario_state["content"] / "api",
        "legacy",
        page_type="web-api-interface",
        slug="Web/API/Legacy",
        extra=extra,
    )
    html_path = scenario_state["build"] / PAGE_FOLDER / "index.html"
    html_path.parent.mkdir(parents=True, exist_ok=True)
    html_path.write_text(
        '<html><body><div id="_body"><h1>Legacy</h1></div></body></html>',
        encoding="utf-8",
    )


@given(parsers.parse('a reference page requiring a secure context for "{query}"'))
def given_secure_page(
    query: str, scenario_state: ScenarioState, page_writer: PageWriter
) -> None:
    """Write a page needing a secure context with one compat query."""
    _write_reference_page(
        scenario_state,
        page_writer,
        {"security-requirements": "[secure-context]", "browser-compat": query},
    )


@given(parsers.parse('a reference page with compatibility list "{queries}"'))
def given_listed_page(
    queries: str, scenario_state: ScenarioState, page_writer: PageWriter
) -> None:
    """Write a page whose ``browser-compat`` is a list."""
    _write_reference_page(
        scenario_state, page_writer, {"browser-compat": f"[{queries}]"}
    )


@given(
    parsers.parse('compatibility data marking "{query}" experimental and deprecated')
)
def given_compat_data(query: str, scenario_state: ScenarioState) -> None:
    """Write compatibility data flagging ``query`` as experimental and deprecated."""
    node: dict[str, typ.Any] = {
        "__compat": {"status": {"experimental": True, "deprecated": True}}
    }
    for segment in reversed(query.split(".")):
        node = {segment: node}
    scenario_state["compat"].write_text(json.dumps(node), encoding="utf-8")


@when("I enrich the reference page")
def when_enrich_reference(scenario_state: ScenarioState, l10n_root: Path) -> None:
    """Run the enricher on the reference page."""
    config = EnrichConfig(
        root=l10n_root,
        content_root=scenario_state["content"],
        build_root=scenario_state["build"],
        compat_data=scenario_state["compat"],
    )
    PageEnricher(config).enrich_page(FileInfo(config.content_root, PAGE_FOLDER))
    html_path = scenario_state["build"] / PAGE_FOLDER / "index.html"
    scenario_state["soup"] = BeautifulSoup(
        html_path.read_text(encoding="utf-8"), "html.parser"
    )


@then(parsers.parse('the banners read "{kinds}" from the top'))
def then_banner_order(kinds: str, scenario_state: ScenarioState) -> None:
    """Verify banner kinds in document order."""
    soup: BeautifulSoup = scenario_state["soup"]
    expected = [kind.strip() for kind in kinds.split(",")]
    actual = [card["class"][1] for card in soup.select("div#_body > div.notecard")]
    assert actual == expected, f"expected banners {expected!r}, got {actual!r}"


@then("the page has no banners")
def then_no_banners(scenario_state: ScenarioState) -> None:
    """Verify that no banner was inserted."""
    soup: BeautifulSoup = scenario_state["soup"]
    assert soup.select(".notecard") == [], "expected no banners"
