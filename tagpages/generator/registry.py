"""Register page generators and run them once per build.

Each generator is wrapped in a :class:`GeneratorSpec` that records whether it
may run in safe mode. :func:`run_generators` invokes every eligible spec once,
in registration order, and reports which ones ran and which were skipped.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from .tag_page import TagPageGenerator

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from tagpages.config import SiteConfig
    from tagpages.site import Site


class Generator(typ.Protocol):
    """Anything with a ``generate(site)`` hook."""

    def generate(self, site: Site) -> None: ...


@dc.dataclass(frozen=True, slots=True)
class GeneratorSpec:
    """A generator plus the capability flags it was registered with."""

    name: str
    generator: Generator
    safe: bool = False

    @classmethod
    def register(
        cls,
        generator: Generator,
        *,
        name: str | None = None,
        safe: bool | None = None,
    ) -> GeneratorSpec:
        """Wrap ``generator``, reading ``safe`` from its class when not given."""
        resolved_safe = getattr(generator, "safe", False) if safe is None else safe
        return cls(
            name=name or type(generator).__name__,
            generator=generator,
            safe=bool(resolved_safe),
        )


@dc.dataclass(slots=True)
class GeneratorReport:
    """Names of generators that ran and of those skipped by safe mode."""

    ran: list[str] = dc.field(default_factory=list)
    skipped: list[str] = dc.field(default_factory=list)


def default_generators(config: SiteConfig) -> list[GeneratorSpec]:
    """Return the built-in generators configured for ``config``."""
    tag_pages = TagPageGenerator(
        layout=config.tag_pages.layout, policy=config.tag_pages.policy
    )
    return [GeneratorSpec.register(tag_pages, name="tag_pages")]


def run_generators(
    site: Site, specs: cabc.Iterable[GeneratorSpec], *, safe_mode: bool
) -> GeneratorReport:
    """Run each spec's generator against ``site`` once.

    Parameters
    ----------
    site : Site
        Site context handed to every generator.
    specs : Iterable[GeneratorSpec]
        Registered generators in the order they should run.
    safe_mode : bool
        When true, specs not declared safe are skipped.

    Returns
    -------
    GeneratorReport
        Which generators ran and which were skipped.

    Notes
    -----
    Exceptions raised by a generator propagate unchanged and stop the run.
    """
    report = GeneratorReport()
    for spec in specs:
        if safe_mode and not spec.safe:
            report.skipped.append(spec.name)
            continue
        spec.generator.generate(site)
        report.ran.append(spec.name)
    return report


__all__ = [
    "Generator",
    "GeneratorReport",
    "GeneratorSpec",
    "default_generators",
    "run_generators",
]
