"""Shared fixtures for building throwaway content trees.

Pages are written as ``<parent>/<name>/index.md`` with a YAML front-matter
block, mirroring the layout the sequence builder scans. Fixtures here only
touch ``tmp_path``.
"""

from __future__ import annotations

import json
import typing as typ

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

PageWriter = typ.Callable[..., "Path"]

_UNSET = object()


def write_page(
    parent: Path,
    name: str,
    *,
    page_type: str | None = "guide",
    weight: object = _UNSET,
    slug: str | None = None,
    extra: cabc.Mapping[str, str] | None = None,
) -> Path:
    """Write a page directory with front-matter built from the arguments."""
    page_dir = parent / name
    page_dir.mkdir(parents=True, exist_ok=True)
    lines = ["---"]
    if page_type is not None:
        lines.append(f"page-type: {page_type}")
    if weight is not _UNSET:
        lines.append(f"weight: {weight}")
    lines.append(f"slug: {slug or name.title()}")
    for key, value in (extra or {}).items():
        lines.append(f"{key}: {value}")
    lines.extend(["---", "", f"# {name}", ""])
    (page_dir / "index.md").write_text("\n".join(lines), encoding="utf-8")
    return page_dir


@pytest.fixture
def page_writer() -> PageWriter:
    """Return the page-writing helper for use inside tests."""
    return write_page


@pytest.fixture
def l10n_root(tmp_path: Path) -> Path:
    """Create ``jsondata/L10n-Common.json`` with banner and nav strings."""
    strings = {
        "SecureContextBanner": {
            "en-US": "<strong>Secure context:</strong> HTTPS only.",
            "fr": "<strong>Contexte sécurisé :</strong> HTTPS uniquement.",
        },
        "ExperimentalBanner": {"en-US": "Experimental technology."},
        "DeprecatedBanner": {"en-US": "Deprecated feature.", "fr": ""},
        "PreviousNextPrevious": {"en-US": "Previous", "fr": "Précédent"},
    }
    root = tmp_path / "repo"
    data_dir = root / "jsondata"
    data_dir.mkdir(parents=True)
    (data_dir / "L10n-Common.json").write_text(
        json.dumps(strings, ensure_ascii=False), encoding="utf-8"
    )
    return root
