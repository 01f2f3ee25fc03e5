"""Load and validate enrichment configuration YAML.

This subpackage parses the project's ``enrich.yaml`` file, resolves the
content, build and data paths relative to the file, and produces a typed
:class:`EnrichConfig` that the page enricher consumes. The primary entry point
is :func:`load_enrich_config`.

Examples
--------
>>> from pathlib import Path
>>> from docs_enrich.config import load_enrich_config
>>> config = load_enrich_config(Path("config/enrich.yaml"))  # doctest: +SKIP
>>> config.content_root  # doctest: +SKIP
PosixPath('/srv/content/files/en-us')
"""

from .loader import load_enrich_config
from .models import EnrichConfig, EnrichConfigError

__all__ = ["EnrichConfig", "EnrichConfigError", "load_enrich_config"]
