"""Run a complete tag page build for one site.

:class:`SiteBuilder` reads posts, indexes their tags, runs the registered
generators once, and only then renders the page collection. A generator
failure (for example a missing ``home.html`` layout) therefore stops the
build before anything is written.

>>> from pathlib import Path
>>> from tagpages.build import SiteBuilder
>>> from tagpages.config import load_site_config
>>> config = load_site_config(Path("site/_config.yml"))  # doctest: +SKIP
>>> result = SiteBuilder(config).run()  # doctest: +SKIP
>>> [path.name for path in result.written]  # doctest: +SKIP
['jekyll.html', 'ruby.html']
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .generator import GeneratorReport, default_generators, run_generators
from .renderer import PageRenderer
from .site import Site

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import SiteConfig
    from .generator import GeneratorSpec


@dc.dataclass(slots=True)
class BuildResult:
    """Outcome of a build: the site context, generator report, and output."""

    site: Site
    report: GeneratorReport
    written: list[Path]


class SiteBuilder:
    """Build the generated pages for a single site configuration."""

    def __init__(
        self,
        config: SiteConfig,
        *,
        generators: cabc.Sequence[GeneratorSpec] | None = None,
        safe_mode: bool | None = None,
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        config : SiteConfig
            Resolved site configuration.
        generators : Sequence[GeneratorSpec], optional
            Generators to run; defaults to :func:`default_generators`.
        safe_mode : bool, optional
            Overrides ``config.safe`` when given.
        """
        self.config = config
        self.generators = (
            list(generators) if generators is not None else default_generators(config)
        )
        self.safe_mode = config.safe if safe_mode is None else safe_mode

    def run(self) -> BuildResult:
        """Generate and render every page, returning the written paths.

        Raises
        ------
        LayoutNotFoundError
            If a generator cannot find its layout; nothing is written.
        UnsafeTagError, DuplicateTagPageError
            If tags cannot be mapped to distinct, safe file names.
        """
        site = Site.from_config(self.config)
        report = run_generators(site, self.generators, safe_mode=self.safe_mode)
        renderer = PageRenderer(site)
        written = [renderer.write(page) for page in site.pages]
        return BuildResult(site=site, report=report, written=written)


__all__ = ["BuildResult", "SiteBuilder"]
