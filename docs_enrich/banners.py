"""Select the informational banners that apply to a page.

Three banners exist and are always considered in the same order:

1. ``secure``: the page lists ``secure-context`` in ``security-requirements``.
2. ``experimental``: the page's single ``browser-compat`` feature is
   experimental.
3. ``deprecated``: the same feature is deprecated.

Pages whose ``browser-compat`` is a list cover several features whose status
may disagree, so neither compatibility banner is considered for them. A
banner whose message has no localized string is dropped rather than rendered
empty.
"""

from __future__ import annotations

import dataclasses as dc
import enum
import typing as typ

from ._constants import SECURE_CONTEXT_REQUIREMENT
from .frontmatter import CompatKind

if typ.TYPE_CHECKING:
    from .compat import CompatResolver, CompatStatus
    from .frontmatter import PageMetadata
    from .l10n import LocalizationTable


class BannerKind(enum.Enum):
    """Banner variants; the value doubles as the ``notecard`` CSS modifier."""

    SECURE = "secure"
    EXPERIMENTAL = "experimental"
    DEPRECATED = "deprecated"

    @property
    def message_id(self) -> str:
        """Return the localization identifier for this banner's text."""
        return _MESSAGE_IDS[self]


_MESSAGE_IDS: dict[BannerKind, str] = {
    BannerKind.SECURE: "SecureContextBanner",
    BannerKind.EXPERIMENTAL: "ExperimentalBanner",
    BannerKind.DEPRECATED: "DeprecatedBanner",
}


@dc.dataclass(frozen=True, slots=True)
class Banner:
    """A banner kind paired with its localized message markup."""

    kind: BannerKind
    message: str


def select_banners(
    metadata: PageMetadata,
    locale: str,
    *,
    l10n: LocalizationTable,
    compat: CompatResolver,
) -> list[Banner]:
    """Return the banners for a page in reading order.

    Parameters
    ----------
    metadata : PageMetadata
        Front-matter of the page being enriched.
    locale : str
        Locale of the page; the table's default locale is the fallback.
    l10n : LocalizationTable
        Source of banner messages.
    compat : CompatResolver
        Resolver for the page's ``browser-compat`` query.

    Returns
    -------
    list[Banner]
        Zero to three banners ordered secure, experimental, deprecated.
    """
    kinds: list[BannerKind] = []
    if SECURE_CONTEXT_REQUIREMENT in metadata.security_requirements:
        kinds.append(BannerKind.SECURE)

    status = _resolve_status(metadata, compat)
    if status is not None:
        if status.experimental:
            kinds.append(BannerKind.EXPERIMENTAL)
        if status.deprecated:
            kinds.append(BannerKind.DEPRECATED)

    banners: list[Banner] = []
    for kind in kinds:
        message = l10n.get(kind.message_id, locale)
        if message:
            banners.append(Banner(kind=kind, message=message))
    return banners


def _resolve_status(
    metadata: PageMetadata, compat: CompatResolver
) -> CompatStatus | None:
    """Return the compat status, or None for absent and list-valued queries."""
    browser_compat = metadata.browser_compat
    if browser_compat.kind is not CompatKind.SINGLE or browser_compat.query is None:
        return None
    return compat.resolve(browser_compat.query)


__all__ = ["Banner", "BannerKind", "select_banners"]
