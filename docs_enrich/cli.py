"""Cyclopts CLI entrypoint for enriching rendered documentation pages.

The ``enrich`` console script defined here rewrites a build tree in place,
adding status banners and previous/next navigation for guide sequences, and
can print the sequence computed for a single directory when debugging page
weights.

Examples
--------
Enrich every page described by the default configuration:

>>> from docs_enrich.cli import main
>>> main()  # doctest: +SKIP

Inspect the sequence of a guide directory:

>>> from docs_enrich.cli import app
>>> app(["sequence", "files/en-us/learn/forms"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_enrich_config
from .pipeline import PageEnricher
from .sequences import SequenceCache

DEFAULT_CONFIG = Path("config/enrich.yaml")

app = App(name="enrich", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Add banners and previous/next links to rendered pages.")
def run(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to enrich config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    locale: typ.Annotated[
        str | None, Parameter(help="Override the page locale", env_var="INPUT_LOCALE")
    ] = None,
    build_root: typ.Annotated[
        Path | None,
        Parameter(help="Override the rendered HTML folder", env_var="INPUT_BUILD_ROOT"),
    ] = None,
    verbose: bool = False,
) -> None:
    """Enrich every rendered page described by the configuration.

    Parameters
    ----------
    config : Path, optional
        Path to the ``enrich.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    locale : str or None, optional
        Locale used for links and banner text instead of the configured one.
    build_root : Path or None, optional
        Rendered HTML tree to rewrite instead of the configured one.
    verbose : bool, optional
        Log skipped pages and sequence decisions at DEBUG level.

    Returns
    -------
    None
        Rewrites HTML files in place and prints the paths written.
    """
    _configure_logging(verbose)
    enrich_config = load_enrich_config(config)
    if locale:
        enrich_config.locale = locale
    if build_root:
        enrich_config.build_root = build_root

    written = PageEnricher(enrich_config).run()
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Print the guide sequence computed for a directory.")
def sequence(
    directory: Path,
    *,
    verbose: bool = False,
) -> None:
    """Print the sequence of ``directory`` as ``weight<TAB>slug`` lines.

    Parameters
    ----------
    directory : Path
        Parent directory whose child pages form the candidate sequence.
    verbose : bool, optional
        Log why children were rejected.
    """
    _configure_logging(verbose)
    entries = SequenceCache().get(directory)
    if not entries:
        print("no sequence")
        return
    for entry in entries:
        print(f"{entry.weight}\t{entry.slug}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `enrich` console command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
