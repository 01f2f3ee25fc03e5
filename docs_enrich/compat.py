"""Resolve browser-compatibility status flags for page metadata.

Pages reference compatibility data with a dotted identifier such as
``api.Navigator.share``. The :class:`JsonCompatResolver` walks a JSON tree in
the browser-compat-data shape, where each feature node carries a
``__compat.status`` object, and reduces it to a :class:`CompatStatus`.

Example
-------
>>> from docs_enrich.compat import JsonCompatResolver
>>> resolver = JsonCompatResolver.from_mapping(
...     {"api": {"Foo": {"__compat": {"status": {"experimental": True}}}}}
... )
>>> resolver.resolve("api.Foo").experimental
True
>>> resolver.resolve("api.Missing") is None
True
"""

from __future__ import annotations

import dataclasses as dc
import json
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

_COMPAT_KEY = "__compat"


@dc.dataclass(frozen=True, slots=True)
class CompatStatus:
    """Status flags of a single compatibility feature."""

    experimental: bool = False
    deprecated: bool = False
    standard_track: bool = True


class CompatResolver(typ.Protocol):
    """Anything that turns a compatibility query into a status record."""

    def resolve(self, query: str) -> CompatStatus | None:
        """Return the status for ``query`` or ``None`` when unknown."""
        ...


class NullCompatResolver:
    """Resolver used when no compatibility data is configured."""

    def resolve(self, query: str) -> CompatStatus | None:  # noqa: ARG002
        """Return ``None`` for every query."""
        return None


class JsonCompatResolver:
    """Resolve dotted queries against a browser-compat-data style tree."""

    def __init__(self, data: typ.Mapping[str, typ.Any]) -> None:
        self._data = data
        self._cache: dict[str, CompatStatus | None] = {}

    @classmethod
    def from_mapping(cls, data: typ.Mapping[str, typ.Any]) -> JsonCompatResolver:
        """Wrap an in-memory compatibility tree."""
        return cls(data)

    @classmethod
    def from_path(cls, path: Path) -> JsonCompatResolver:
        """Load the compatibility tree from a JSON file.

        Raises
        ------
        FileNotFoundError
            If ``path`` does not exist.
        TypeError
            If the top-level JSON value is not an object.
        """
        if not path.exists():
            msg = f"Compatibility data '{path}' not found."
            raise FileNotFoundError(msg)
        payload = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(payload, dict):
            msg = "Top-level compatibility data must be an object."
            raise TypeError(msg)
        return cls(payload)

    def resolve(self, query: str) -> CompatStatus | None:
        """Return the status record for ``query``, caching the answer."""
        if query not in self._cache:
            self._cache[query] = self._lookup(query)
        return self._cache[query]

    def _lookup(self, query: str) -> CompatStatus | None:
        node: object = self._data
        for segment in query.split("."):
            if not isinstance(node, dict) or segment not in node:
                return None
            node = node[segment]
        if not isinstance(node, dict):
            return None
        compat = node.get(_COMPAT_KEY)
        if not isinstance(compat, dict):
            return None
        status = compat.get("status")
        if not isinstance(status, dict):
            return CompatStatus()
        return CompatStatus(
            experimental=bool(status.get("experimental", False)),
            deprecated=bool(status.get("deprecated", False)),
            standard_track=bool(status.get("standard_track", True)),
        )


__all__ = [
    "CompatResolver",
    "CompatStatus",
    "JsonCompatResolver",
    "NullCompatResolver",
]
