"""Typed dataclasses describing tagpages site configuration structures."""

from __future__ import annotations

import dataclasses as dc
import enum
from pathlib import Path

from tagpages._constants import (
    DESTINATION_DIR,
    LAYOUTS_DIR,
    POSTS_DIR,
    TAG_PAGE_LAYOUT,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


class TagNamePolicy(enum.StrEnum):
    """How tag strings that are unsafe as file names are handled."""

    REJECT = "reject"
    SANITIZE = "sanitize"


@dc.dataclass(slots=True)
class TagPagesConfig:
    """Settings for the tag listing page generator."""

    layout: str = TAG_PAGE_LAYOUT
    policy: TagNamePolicy = TagNamePolicy.REJECT


@dc.dataclass(slots=True)
class SiteConfig:
    """A fully resolved site definition sourced from ``_config.yml``.

    Attributes
    ----------
    source : Path
        Root directory holding ``_posts`` and ``_layouts``.
    destination : Path
        Output directory for rendered pages.
    posts_dir : str
        Directory name, relative to ``source``, holding content items.
    layouts_dir : str
        Directory name, relative to ``source``, holding layouts.
    safe : bool
        When true only generators declared safe are run.
    title : str
        Site title exposed to templates as ``site.title``.
    tag_pages : TagPagesConfig
        Tag listing page settings.
    """

    source: Path
    destination: Path
    posts_dir: str = POSTS_DIR
    layouts_dir: str = LAYOUTS_DIR
    safe: bool = False
    title: str = ""
    tag_pages: TagPagesConfig = dc.field(default_factory=TagPagesConfig)

    @property
    def posts_path(self) -> Path:
        """Return the absolute directory that holds posts."""
        return self.source / self.posts_dir

    @property
    def layouts_path(self) -> Path:
        """Return the absolute directory that holds layouts."""
        return self.source / self.layouts_dir

    @classmethod
    def for_source(cls, source: Path) -> SiteConfig:
        """Return a default configuration rooted at ``source``."""
        return cls(source=source, destination=source / DESTINATION_DIR)


__all__ = [
    "SiteConfig",
    "SiteConfigError",
    "TagNamePolicy",
    "TagPagesConfig",
]
