"""Load and validate site configuration YAML for tagpages builds.

This subpackage parses a site's ``_config.yml``, applies defaults, resolves
the source, destination, posts, and layouts paths, and produces typed
dataclasses (:class:`SiteConfig`, :class:`TagPagesConfig`) that the builder
and generators consume. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from tagpages.config import load_site_config
>>> site = load_site_config(Path("site/_config.yml"))  # doctest: +SKIP
>>> site.layouts_path  # doctest: +SKIP
PosixPath('/srv/site/_layouts')
"""

from .loader import load_site_config
from .models import SiteConfig, SiteConfigError, TagNamePolicy, TagPagesConfig

__all__ = [
    "SiteConfig",
    "SiteConfigError",
    "TagNamePolicy",
    "TagPagesConfig",
    "load_site_config",
]
