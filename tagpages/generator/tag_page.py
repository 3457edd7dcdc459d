"""Generate one listing page per tag known to the site.

:class:`TagPageGenerator` walks the site's tag index and, for each tag,
builds a :class:`TagPage` bound to the shared ``home.html`` layout from the
site's ``_layouts`` directory. The page carries the tag in its metadata so the
layout can list the tagged posts, and it is rendered later to ``<tag>.html``
at the root of the output directory.

Example
-------
>>> from pathlib import Path
>>> from tagpages.config import SiteConfig
>>> from tagpages.generator import TagPageGenerator
>>> from tagpages.site import Site
>>> site = Site.from_config(SiteConfig.for_source(Path("site")))  # doctest: +SKIP
>>> TagPageGenerator().generate(site)  # doctest: +SKIP
>>> sorted(page.name for page in site.pages)  # doctest: +SKIP
['jekyll.html', 'ruby.html']
"""

from __future__ import annotations

import dataclasses as dc
import posixpath
import typing as typ
from types import MappingProxyType

from tagpages._constants import TAG_PAGE_LAYOUT
from tagpages.config import TagNamePolicy

from .naming import tag_page_name

if typ.TYPE_CHECKING:
    from pathlib import Path

    from tagpages.layouts import Layout
    from tagpages.site import Site


class DuplicateTagPageError(ValueError):
    """Raised when two distinct tags would be written to the same file."""

    def __init__(self, name: str, first: str, second: str) -> None:
        self.name = name
        self.tags = (first, second)
        super().__init__(f"Tags {first!r} and {second!r} both map to '{name}'.")


@dc.dataclass(frozen=True, slots=True)
class TagPage:
    """Virtual listing page for a single tag.

    Attributes
    ----------
    tag : str
        Tag the page lists, exactly as it appears in the tag index.
    name : str
        Output file name, ``"<tag>.html"``.
    base : Path
        Site source directory the page belongs to.
    layout : str
        Name of the layout the page was read from.
    data : Mapping[str, Any]
        Layout front matter with ``tag`` set to :attr:`tag`.
    content : str
        Layout body, rendered later as the page template.
    dir : str
        Output directory relative to the site root; empty for the root.
    """

    tag: str
    name: str
    base: Path
    layout: str
    data: typ.Mapping[str, typ.Any]
    content: str
    dir: str = ""

    @classmethod
    def from_layout(
        cls, base: Path, tag: str, layout: Layout, *, name: str | None = None
    ) -> TagPage:
        """Bind ``tag`` to ``layout`` and return the resulting page."""
        data = dict(layout.data)
        data["tag"] = tag
        return cls(
            tag=tag,
            name=name or tag_page_name(tag),
            base=base,
            layout=layout.name,
            data=MappingProxyType(data),
            content=layout.content,
        )

    @property
    def basename(self) -> str:
        """Return the file name without its extension."""
        return posixpath.splitext(self.name)[0]

    @property
    def ext(self) -> str:
        """Return the file extension including the leading dot."""
        return posixpath.splitext(self.name)[1]

    @property
    def url(self) -> str:
        """Return the site-relative URL of the rendered page."""
        return "/" + posixpath.join(self.dir, self.name)


class TagPageGenerator:
    """Append a :class:`TagPage` to the site for every distinct tag."""

    safe = True

    def __init__(
        self,
        *,
        layout: str = TAG_PAGE_LAYOUT,
        policy: TagNamePolicy = TagNamePolicy.REJECT,
    ) -> None:
        """Initialize the generator.

        Parameters
        ----------
        layout : str, optional
            Layout file name looked up in the site's layouts directory.
            Defaults to ``"home.html"``.
        policy : TagNamePolicy, optional
            How tags that are unsafe as file names are handled.
        """
        self.layout = layout
        self.policy = policy

    def generate(self, site: Site) -> None:
        """Append one tag page per tag in ``site.tags`` to ``site.pages``.

        Raises
        ------
        LayoutNotFoundError
            If the layout is missing from the site's layouts directory. The
            lookup happens only when at least one tag exists.
        UnsafeTagError
            If a tag is unusable as a file name under the configured policy.
        DuplicateTagPageError
            If two tags map to the same file name.

        Notes
        -----
        Every page is built before any is appended, so a failure leaves
        ``site.pages`` untouched. Existing entries are never modified.
        """
        claimed: dict[str, str] = {}
        pages: list[TagPage] = []
        for tag in site.tags:
            name = tag_page_name(tag, self.policy)
            if name in claimed:
                raise DuplicateTagPageError(name, claimed[name], tag)
            claimed[name] = tag
            layout = site.layouts.load(site.config.layouts_path, self.layout)
            pages.append(TagPage.from_layout(site.source, tag, layout, name=name))
        site.pages.extend(pages)


__all__ = ["DuplicateTagPageError", "TagPage", "TagPageGenerator"]
