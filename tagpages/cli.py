"""Cyclopts CLI entrypoint for building tag listing pages.

The ``tagpages`` console script defined here loads a site's ``_config.yml``,
runs the tag page generator, and renders one ``<tag>.html`` file per tag into
the site destination. ``tagpages tags`` lists the tag index without writing
anything, which is handy when checking which pages a build would produce.

Examples
--------
Build every tag page for the site in the current directory:

>>> from tagpages.cli import main
>>> main()  # doctest: +SKIP

Build into a custom directory with only safe generators enabled:

>>> from tagpages.cli import app
>>> app(["build", "--destination", "dist", "--safe"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import CONFIG_FILENAME
from .build import SiteBuilder
from .config import load_site_config
from .site import Site

if typ.TYPE_CHECKING:
    from .config import SiteConfig

DEFAULT_CONFIG = Path(CONFIG_FILENAME)

app = App(name="tagpages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _load_config(config: Path, source: Path | None) -> SiteConfig:
    """Load ``config`` when it exists, otherwise fall back to defaults."""
    if config.exists():
        return load_site_config(config, source=source)
    return load_site_config(None, source=source or config.parent)


@app.command(help="Generate one listing page per tag and render it to HTML.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    source: typ.Annotated[
        Path | None,
        Parameter(help="Override the site source folder", env_var="INPUT_SOURCE"),
    ] = None,
    destination: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_DESTINATION"),
    ] = None,
    safe: typ.Annotated[
        bool | None,
        Parameter(help="Only run generators marked safe", env_var="INPUT_SAFE"),
    ] = None,
) -> None:
    """Build tag listing pages for the configured site.

    Parameters
    ----------
    config : Path, optional
        Path to ``_config.yml`` (overridable via ``INPUT_CONFIG``). Defaults
        are used when the file does not exist.
    source : Path or None, optional
        Site source directory; overrides the ``source`` key in the config.
    destination : Path or None, optional
        Output directory; overrides the ``destination`` key in the config.
    safe : bool or None, optional
        Force safe mode on or off; ``None`` keeps the config's ``safe`` value.

    Returns
    -------
    None
        Writes rendered pages and prints each written path.

    Raises
    ------
    LayoutNotFoundError
        If the tag page layout is missing; nothing is written.
    """
    site_config = _load_config(config, source)
    if destination is not None:
        site_config.destination = destination.resolve()
    result = SiteBuilder(site_config, safe_mode=safe).run()
    for name in result.report.skipped:
        print(f"skipped {name} (not safe)")
    for path in result.written:
        print(f"wrote {_format_path(path)}")


@app.command(help="List every tag in the site with its post count.")
def tags(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    source: typ.Annotated[
        Path | None,
        Parameter(help="Override the site source folder", env_var="INPUT_SOURCE"),
    ] = None,
) -> None:
    """Print ``<tag>: <count>`` for each tag, sorted by tag name."""
    site = Site.from_config(_load_config(config, source))
    for tag, posts in sorted(site.tags.items()):
        print(f"{tag}: {len(posts)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the `tagpages` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
