"""Common literal values used across docs_enrich.

These constants keep filenames, locale defaults, and message identifiers
centralized so the session, injector, and tests can import the same values
without drifting. Intended for internal use within the docs_enrich package.

Examples
--------
>>> from docs_enrich import _constants
>>> _constants.DEFAULT_LOCALE
'en-US'
>>> "/".join(_constants.L10N_RELATIVE_PATH)
'jsondata/L10n-Common.json'
"""

DEFAULT_LOCALE = "en-US"
CONTENT_FILENAME = "index.md"
L10N_RELATIVE_PATH = ("jsondata", "L10n-Common.json")

GUIDE_PAGE_TYPE = "guide"
SECURE_CONTEXT_REQUIREMENT = "secure-context"

NAV_LABELS: dict[str, str] = {
    "PreviousNextPrevious": "Previous",
    "PreviousNextOverview": "Overview",
    "PreviousNextNext": "Next",
}
