"""Lazily loaded localized strings shared by banners and navigation labels.

The table is a JSON document mapping message identifiers to per-locale
strings::

    {"SecureContextBanner": {"en-US": "Secure context: ...", "fr": "..."}}

It is read on first lookup and never reloaded. Lookups fall back to the
default locale and return ``None`` when neither locale has a non-empty
string, so callers can omit the element entirely.
"""

from __future__ import annotations

import json
import threading
import typing as typ
from pathlib import Path

from ._constants import DEFAULT_LOCALE, L10N_RELATIVE_PATH

StringTable = dict[str, dict[str, str]]


class LocalizationError(ValueError):
    """Raised when the localization file is not a table of strings."""


class LocalizationTable:
    """Message lookup backed by a single JSON file, loaded once."""

    def __init__(self, path: Path, *, default_locale: str = DEFAULT_LOCALE) -> None:
        self.path = path
        self.default_locale = default_locale
        self._strings: StringTable | None = None
        self._lock = threading.Lock()

    @classmethod
    def for_root(
        cls, root: Path, *, default_locale: str = DEFAULT_LOCALE
    ) -> LocalizationTable:
        """Return a table reading ``jsondata/L10n-Common.json`` under ``root``."""
        return cls(root.joinpath(*L10N_RELATIVE_PATH), default_locale=default_locale)

    @classmethod
    def from_mapping(
        cls,
        strings: typ.Mapping[str, typ.Mapping[str, str]],
        *,
        default_locale: str = DEFAULT_LOCALE,
    ) -> LocalizationTable:
        """Return an already loaded table, bypassing the filesystem."""
        table = cls(Path(), default_locale=default_locale)
        table._strings = _validate(dict(strings), "<mapping>")
        return table

    @property
    def loaded(self) -> bool:
        """Return whether the backing file has been read."""
        return self._strings is not None

    def get(self, message_id: str, locale: str) -> str | None:
        """Return the string for ``message_id`` in ``locale`` or the default.

        Parameters
        ----------
        message_id : str
            Identifier such as ``"SecureContextBanner"``.
        locale : str
            Requested locale code, e.g. ``"fr"`` or ``"en-US"``.

        Returns
        -------
        str | None
            The localized string, the default-locale string, or ``None`` when
            the identifier is unknown or both strings are empty.
        """
        block = self._table().get(message_id)
        if not block:
            return None
        return block.get(locale) or block.get(self.default_locale) or None

    def _table(self) -> StringTable:
        if self._strings is None:
            with self._lock:
                if self._strings is None:
                    self._strings = self._load()
        return self._strings

    def _load(self) -> StringTable:
        """Read and validate the JSON table.

        Raises
        ------
        FileNotFoundError
            If the localization file does not exist.
        LocalizationError
            If the file is not valid JSON or not a mapping of mappings.
        """
        if not self.path.is_file():
            msg = f"Localization file '{self.path}' not found."
            raise FileNotFoundError(msg)
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            msg = f"Localization file '{self.path}' is not valid JSON: {exc}"
            raise LocalizationError(msg) from exc
        return _validate(payload, str(self.path))


def _validate(payload: object, source: str) -> StringTable:
    if not isinstance(payload, dict):
        msg = f"Localization table in '{source}' must be a mapping."
        raise LocalizationError(msg)
    table: StringTable = {}
    for message_id, block in payload.items():
        if not isinstance(block, dict):
            msg = f"Entry '{message_id}' in '{source}' must map locales to strings."
            raise LocalizationError(msg)
        table[str(message_id)] = {
            str(locale): text for locale, text in block.items() if isinstance(text, str)
        }
    return table


__all__ = ["LocalizationError", "LocalizationTable"]
