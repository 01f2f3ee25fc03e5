"""Per-build state shared by every page processed in one run.

A :class:`BuildSession` owns the sequence cache, the localization table, and
the compatibility resolver. Pages processed through the same session share
those caches; separate sessions never see each other's state, which keeps
parallel builds and tests isolated.

Example
-------
>>> from pathlib import Path
>>> from docs_enrich.session import BuildSession, FileInfo
>>> session = BuildSession(Path("."))  # doctest: +SKIP
>>> info = FileInfo(root=Path("files/en-us"), folder="learn/forms/basics")
>>> session.previous_next(info, "Learn/Forms/Basics")  # doctest: +SKIP
PreviousNext(previous=None, next=SequenceEntry(...))
"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ
from pathlib import Path

from ._constants import DEFAULT_LOCALE, NAV_LABELS
from .banners import Banner, select_banners
from .compat import CompatResolver, NullCompatResolver
from .frontmatter import read_front_matter
from .l10n import LocalizationTable
from .sequences import (
    MetadataReader,
    PreviousNext,
    Sequence,
    SequenceCache,
    resolve_previous_next,
)

if typ.TYPE_CHECKING:
    from .frontmatter import PageMetadata


@dc.dataclass(frozen=True, slots=True)
class FileInfo:
    """Location of a page directory as reported by the render pipeline.

    Attributes
    ----------
    root : Path
        Content root the page belongs to.
    folder : str
        Page directory relative to ``root``, POSIX separators.
    """

    root: Path
    folder: str

    @property
    def parent(self) -> Path:
        """Return the directory holding this page and its siblings."""
        return Path(os.path.normpath(self.root / self.folder / os.pardir))


class BuildSession:
    """Caches and collaborators scoped to a single documentation build."""

    def __init__(
        self,
        root: Path,
        *,
        default_locale: str = DEFAULT_LOCALE,
        compat: CompatResolver | None = None,
        l10n: LocalizationTable | None = None,
        reader: MetadataReader = read_front_matter,
    ) -> None:
        """Create a session rooted at ``root``.

        Parameters
        ----------
        root : Path
            Repository root; the localization table is read from
            ``root/jsondata/L10n-Common.json`` on first use.
        default_locale : str, optional
            Fallback locale for localized strings.
        compat : CompatResolver, optional
            Compatibility lookup; without one no status banners are produced.
        l10n : LocalizationTable, optional
            Preloaded table overriding the file under ``root``.
        reader : MetadataReader, optional
            Metadata accessor used when scanning sibling directories.
        """
        self.root = root
        self.default_locale = default_locale
        self.compat: CompatResolver = compat or NullCompatResolver()
        self.l10n = l10n or LocalizationTable.for_root(
            root, default_locale=default_locale
        )
        self.sequences = SequenceCache(reader)

    def sequence_for(self, parent: Path) -> Sequence:
        """Return the cached sequence for ``parent``."""
        return self.sequences.get(parent)

    def previous_next(self, file_info: FileInfo, slug: str) -> PreviousNext:
        """Return the neighbours of the page ``slug`` located by ``file_info``."""
        sequence = self.sequence_for(file_info.parent)
        return resolve_previous_next(slug, sequence)

    def banners(self, metadata: PageMetadata, locale: str) -> list[Banner]:
        """Return the banners that apply to a page, in reading order."""
        return select_banners(metadata, locale, l10n=self.l10n, compat=self.compat)

    def nav_labels(self, locale: str) -> dict[str, str]:
        """Return localized Previous/Overview/Next labels keyed by role."""
        labels: dict[str, str] = {}
        for message_id, fallback in NAV_LABELS.items():
            role = message_id.removeprefix("PreviousNext").lower()
            labels[role] = self.l10n.get(message_id, locale) or fallback
        return labels


__all__ = ["BuildSession", "FileInfo"]
