"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from tagpages._constants import DESTINATION_DIR, LAYOUTS_DIR, POSTS_DIR

from .helpers import _build_tag_pages_config, _coerce_bool, _optional_str
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path | None, *, source: Path | None = None) -> SiteConfig:
    """Load the YAML configuration describing the site layout.

    Parameters
    ----------
    path : Path or None
        Filesystem path to ``_config.yml``. When ``None`` the defaults are
        used and ``source`` must be supplied.
    source : Path, optional
        Site source directory. Overrides the ``source`` key of the config
        file; defaults to the directory holding the config file.

    Returns
    -------
    SiteConfig
        Parsed configuration with every path resolved.

    Raises
    ------
    FileNotFoundError
        If ``path`` is given but does not exist.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a field holds a value of the wrong kind, or neither ``path`` nor
        ``source`` is given.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from tagpages.config import load_site_config
    >>> config = load_site_config(Path("site/_config.yml"))  # doctest: +SKIP
    >>> config.tag_pages.layout  # doctest: +SKIP
    'home.html'
    """
    raw: dict[str, typ.Any] = {}
    if path is not None:
        if not path.exists():
            msg = f"Configuration file '{path}' not found."
            raise FileNotFoundError(msg)
        raw = _read_yaml_mapping(path)
        config_root = path.parent
    elif source is not None:
        config_root = source
    else:
        msg = "Either a configuration file or a source directory is required."
        raise SiteConfigError(msg)

    if source is None:
        source = config_root / (_optional_str(raw.get("source")) or ".")
    source = source.resolve()
    destination = source / (_optional_str(raw.get("destination")) or DESTINATION_DIR)

    return SiteConfig(
        source=source,
        destination=destination,
        posts_dir=_optional_str(raw.get("posts_dir")) or POSTS_DIR,
        layouts_dir=_optional_str(raw.get("layouts_dir")) or LAYOUTS_DIR,
        safe=_coerce_bool("safe", raw.get("safe", False)),
        title=_optional_str(raw.get("title")) or "",
        tag_pages=_build_tag_pages_config(raw.get("tag_pages")),
    )


def _read_yaml_mapping(path: Path) -> dict[str, typ.Any]:
    """Return the top-level mapping stored in the YAML file at ``path``."""
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    return dict(loaded)


__all__ = ["load_site_config"]
