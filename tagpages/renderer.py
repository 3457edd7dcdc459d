"""Render generated pages through Jinja2 and write them to the destination.

Each page's ``content`` (the body of the layout it was bound to) is compiled
as a Jinja template. Templates receive the page metadata as ``page``, the
:class:`~tagpages.site.Site` as ``site``, the posts carrying ``page.tag`` as
``posts``, and the build timestamp as ``generated_at``. Post bodies written in
Markdown are converted to HTML before being handed to the template.

>>> from tagpages.renderer import PageRenderer
>>> renderer = PageRenderer(site)  # doctest: +SKIP
>>> renderer.write(site.pages[0])  # doctest: +SKIP
PosixPath('_site/ruby.html')
"""

from __future__ import annotations

import datetime as dt
import typing as typ

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markdown import markdown
from markupsafe import Markup

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .site import Page, Post, Site


class PageRenderer:
    """Render pages from a site's page collection into HTML files."""

    def __init__(self, site: Site, *, generated_at: dt.datetime | None = None) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        site : Site
            Site whose pages are rendered. Its layouts directory is the
            template search path, so layouts may include or extend each other.
        generated_at : datetime, optional
            Build timestamp exposed to templates; defaults to now in UTC.
        """
        self.site = site
        self.generated_at = generated_at or dt.datetime.now(dt.UTC)
        self.env = Environment(
            loader=FileSystemLoader(str(site.config.layouts_path)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._markdown_extensions = ["fenced_code", "tables", "sane_lists"]
        self._post_cache: dict[int, dict[str, typ.Any]] = {}

    def render(self, page: Page) -> str:
        """Return the rendered HTML for ``page``, ending with a newline."""
        template = self.env.from_string(page.content)
        tag = page.data.get("tag")
        tagged = self.site.tags.get(tag, []) if isinstance(tag, str) else []
        context = {
            "page": page.data,
            "site": self.site,
            "posts": [self._post_context(post) for post in tagged],
            "generated_at": self.generated_at,
        }
        html = template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return html

    def write(self, page: Page) -> Path:
        """Render ``page`` and write it under the site destination."""
        destination = self.site.config.destination
        output_path = destination / getattr(page, "dir", "") / page.name
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.render(page), encoding="utf-8")
        return output_path

    def _post_context(self, post: Post) -> dict[str, typ.Any]:
        key = id(post)
        if key not in self._post_cache:
            self._post_cache[key] = {
                "title": post.title,
                "url": post.url,
                "date": post.date,
                "tags": post.tags,
                "data": post.data,
                "html": Markup(self._render_body(post)),
            }
        return self._post_cache[key]

    def _render_body(self, post: Post) -> str:
        if not post.is_markdown:
            return post.content
        normalized = post.content.strip()
        if not normalized:
            return ""
        return markdown(
            normalized,
            extensions=self._markdown_extensions,
            output_format="html5",
        )


__all__ = ["PageRenderer"]
