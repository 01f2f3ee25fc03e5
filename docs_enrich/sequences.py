"""Derive ordered guide sequences and previous/next navigation.

A *sequence* is the set of sibling page directories under one parent where
every child is a guide page with an explicit ``weight``. Sequences are all or
nothing: a single sibling that is missing its document, fails to parse, is not
a guide, or has no weight invalidates the whole parent, and the empty tuple is
returned instead. The empty tuple doubles as the "already checked" marker in
:class:`SequenceCache`, so invalid parents are not rescanned.

Typical usage goes through a :class:`~docs_enrich.session.BuildSession`, but
the pieces compose directly:

>>> from pathlib import Path
>>> from docs_enrich.sequences import SequenceCache, resolve_previous_next
>>> cache = SequenceCache()
>>> sequence = cache.get(Path("files/en-us/learn/forms"))  # doctest: +SKIP
>>> resolve_previous_next("Learn/Forms/Basics", sequence)  # doctest: +SKIP
PreviousNext(previous=None, next=SequenceEntry(slug='Learn/Forms/Widgets', ...))
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import enum
import logging
import threading
from pathlib import Path

from ._constants import GUIDE_PAGE_TYPE
from .frontmatter import (
    FrontMatterError,
    MissingDocumentError,
    PageMetadata,
    read_front_matter,
)

logger = logging.getLogger(__name__)

MetadataReader = cabc.Callable[[Path], PageMetadata]


@dc.dataclass(frozen=True, slots=True)
class SequenceEntry:
    """A sibling page and its declared ordering weight."""

    slug: str
    weight: int | float


Sequence = tuple[SequenceEntry, ...]


@dc.dataclass(frozen=True, slots=True)
class PreviousNext:
    """Neighbouring entries of a page within its sequence."""

    previous: SequenceEntry | None = None
    next: SequenceEntry | None = None

    def __bool__(self) -> bool:
        return self.previous is not None or self.next is not None


class SkipReason(enum.Enum):
    """Why a child directory did not contribute a sequence entry."""

    MISSING_DOCUMENT = "missing-document"
    UNPARSABLE = "unparsable"
    NOT_A_GUIDE = "not-a-guide"
    MISSING_WEIGHT = "missing-weight"
    MISSING_SLUG = "missing-slug"


@dc.dataclass(frozen=True, slots=True)
class ChildOutcome:
    """Result of inspecting one child directory.

    Exactly one of ``entry`` and ``reason`` is set.
    """

    name: str
    entry: SequenceEntry | None = None
    reason: SkipReason | None = None


def scan_children(
    parent: Path, reader: MetadataReader = read_front_matter
) -> list[ChildOutcome]:
    """Inspect every immediate subdirectory of ``parent``.

    Parameters
    ----------
    parent : Path
        Directory whose children are candidate sequence members.
    reader : MetadataReader, optional
        Callable returning the :class:`PageMetadata` for a page directory and
        raising :class:`FrontMatterError` when it cannot.

    Returns
    -------
    list[ChildOutcome]
        One outcome per subdirectory, in sorted name order. Plain files are
        not represented.
    """
    try:
        children = sorted(
            (entry for entry in parent.iterdir() if entry.is_dir()),
            key=lambda entry: entry.name,
        )
    except OSError as exc:
        logger.debug("Cannot list %s: %s", parent, exc)
        return []
    return [_inspect_child(child, reader) for child in children]


def _inspect_child(child: Path, reader: MetadataReader) -> ChildOutcome:
    try:
        metadata = reader(child)
    except MissingDocumentError:
        return ChildOutcome(child.name, reason=SkipReason.MISSING_DOCUMENT)
    except FrontMatterError as exc:
        logger.debug("Skipping %s: %s", child, exc)
        return ChildOutcome(child.name, reason=SkipReason.UNPARSABLE)
    if metadata.page_type != GUIDE_PAGE_TYPE:
        return ChildOutcome(child.name, reason=SkipReason.NOT_A_GUIDE)
    if metadata.weight is None:
        return ChildOutcome(child.name, reason=SkipReason.MISSING_WEIGHT)
    if metadata.slug is None:
        return ChildOutcome(child.name, reason=SkipReason.MISSING_SLUG)
    entry = SequenceEntry(slug=metadata.slug, weight=metadata.weight)
    return ChildOutcome(child.name, entry=entry)


def build_sequence(
    parent: Path, reader: MetadataReader = read_front_matter
) -> Sequence:
    """Return the weight-ordered sequence of guide pages under ``parent``.

    Parameters
    ----------
    parent : Path
        Directory whose immediate subdirectories are the candidate pages.
    reader : MetadataReader, optional
        Metadata accessor used for each child; defaults to
        :func:`~docs_enrich.frontmatter.read_front_matter`.

    Returns
    -------
    Sequence
        Every child ordered by ascending weight, or an empty tuple when the
        parent has no subdirectories or any subdirectory failed to qualify.

    Notes
    -----
    Sorting is stable: children with equal weights keep their scan order.
    """
    outcomes = scan_children(parent, reader)
    entries = [outcome.entry for outcome in outcomes if outcome.entry is not None]
    if len(entries) != len(outcomes):
        for outcome in outcomes:
            if outcome.reason is not None:
                logger.debug(
                    "%s/%s is not sequenceable: %s",
                    parent,
                    outcome.name,
                    outcome.reason.value,
                )
        logger.debug(
            "No sequence for %s (%d of %d children qualify)",
            parent,
            len(entries),
            len(outcomes),
        )
        return ()
    return tuple(sorted(entries, key=lambda entry: entry.weight))


class SequenceCache:
    """Lazily computed sequences keyed by resolved parent directory.

    Entries are written once and never refreshed, so the cache assumes the
    content tree does not change during a build. Builds run outside the lock;
    two threads racing on the same key may both scan, but the first stored
    result is the one every caller sees.
    """

    def __init__(self, reader: MetadataReader = read_front_matter) -> None:
        self._reader = reader
        self._sequences: dict[Path, Sequence] = {}
        self._lock = threading.Lock()

    def __contains__(self, parent: object) -> bool:
        if not isinstance(parent, Path):
            return False
        return self._key(parent) in self._sequences

    def __len__(self) -> int:
        return len(self._sequences)

    def is_populated(self, parent: Path) -> bool:
        """Return whether ``parent`` has been computed, whatever the result."""
        return parent in self

    def get(self, parent: Path) -> Sequence:
        """Return the cached sequence for ``parent``, building it on first use."""
        key = self._key(parent)
        cached = self._sequences.get(key)
        if cached is not None:
            return cached
        sequence = build_sequence(key, self._reader)
        with self._lock:
            return self._sequences.setdefault(key, sequence)

    @staticmethod
    def _key(parent: Path) -> Path:
        return parent.resolve()


def resolve_previous_next(
    slug: str, sequence: cabc.Sequence[SequenceEntry]
) -> PreviousNext:
    """Return the entries immediately before and after ``slug``.

    Parameters
    ----------
    slug : str
        Slug of the current page, compared by exact string match.
    sequence : Sequence[SequenceEntry]
        The page and its siblings ordered by weight.

    Returns
    -------
    PreviousNext
        ``previous`` is ``None`` for the first entry and ``next`` is ``None``
        for the last. Both are ``None`` when the sequence is empty or does not
        contain ``slug``.
    """
    index = next(
        (idx for idx, entry in enumerate(sequence) if entry.slug == slug), None
    )
    if index is None:
        return PreviousNext()
    previous = sequence[index - 1] if index > 0 else None
    following = sequence[index + 1] if index < len(sequence) - 1 else None
    return PreviousNext(previous=previous, next=following)


__all__ = [
    "ChildOutcome",
    "MetadataReader",
    "PreviousNext",
    "Sequence",
    "SequenceCache",
    "SequenceEntry",
    "SkipReason",
    "build_sequence",
    "resolve_previous_next",
    "scan_children",
]
