"""Load enrichment configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .._constants import DEFAULT_LOCALE
from .models import EnrichConfig, EnrichConfigError


def load_enrich_config(path: Path) -> EnrichConfig:
    """Load the YAML configuration describing an enrichment run.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration (for example,
        ``config/enrich.yaml``). Relative paths inside the file resolve
        against the file's directory.

    Returns
    -------
    EnrichConfig
        Parsed configuration with every path resolved.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    EnrichConfigError
        If ``content_root`` or ``build_root`` is missing, or a locale is empty.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docs_enrich.config import load_enrich_config
    >>> config = load_enrich_config(Path("config/enrich.yaml"))  # doctest: +SKIP
    >>> config.locale  # doctest: +SKIP
    'en-US'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    base = path.resolve().parent

    content_root = _required_path(raw, "content_root", base)
    build_root = _required_path(raw, "build_root", base)
    root = _resolve(raw.get("root") or ".", base)
    compat_raw = raw.get("compat_data")
    compat_data = _resolve(compat_raw, base) if compat_raw else None

    return EnrichConfig(
        root=root,
        content_root=content_root,
        build_root=build_root,
        locale=_locale(raw, "locale"),
        default_locale=_locale(raw, "default_locale"),
        html_filename=str(raw.get("html_filename") or "index.html"),
        compat_data=compat_data,
    )


def _resolve(value: object, base: Path) -> Path:
    """Return ``value`` as a path, anchored at ``base`` when relative."""
    candidate = Path(str(value)).expanduser()
    if candidate.is_absolute():
        return candidate
    return base / candidate


def _required_path(raw: typ.Mapping[str, typ.Any], key: str, base: Path) -> Path:
    value = raw.get(key)
    if not value:
        msg = f"Configuration is missing '{key}'."
        raise EnrichConfigError(msg)
    return _resolve(value, base)


def _locale(raw: typ.Mapping[str, typ.Any], key: str) -> str:
    value = raw.get(key, DEFAULT_LOCALE)
    text = str(value).strip() if value is not None else ""
    if not text:
        msg = f"Configuration key '{key}' must be a non-empty locale code."
        raise EnrichConfigError(msg)
    return text


__all__ = ["load_enrich_config"]
