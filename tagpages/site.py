"""Site context consumed by page generators.

A :class:`Site` gathers everything a generator may read during a build: the
resolved configuration, the posts found under ``_posts``, the tag index built
from their front matter, a layout loader, and the mutable page collection that
generators append to. It is passed explicitly to every generator rather than
being held in module state, so a generation step can be exercised in isolation
with a hand-built site.

Typical usage mirrors the build pipeline:

>>> from pathlib import Path
>>> from tagpages.config import SiteConfig
>>> from tagpages.site import Site
>>> site = Site.from_config(SiteConfig.for_source(Path("site")))  # doctest: +SKIP
>>> sorted(site.tags)  # doctest: +SKIP
['jekyll', 'ruby']
"""

from __future__ import annotations

import dataclasses as dc
import datetime as dt
import re
import typing as typ

from tagpages._constants import PAGE_EXTENSION
from tagpages.config.helpers import _parse_timestamp

from .front_matter import read_document
from .layouts import LayoutLoader

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import SiteConfig

MARKDOWN_SUFFIXES = frozenset({".md", ".markdown"})
POST_SUFFIXES = MARKDOWN_SUFFIXES | {".html"}
POST_FILENAME_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})-(.+)$")


class Page(typ.Protocol):
    """Interface the renderer relies on for any page in the collection."""

    @property
    def name(self) -> str: ...

    @property
    def url(self) -> str: ...

    @property
    def layout(self) -> str: ...

    @property
    def data(self) -> typ.Mapping[str, typ.Any]: ...

    @property
    def content(self) -> str: ...


@dc.dataclass(slots=True)
class Post:
    """A content item read from the posts directory.

    Attributes
    ----------
    slug : str
        File stem with any ``YYYY-MM-DD-`` prefix removed.
    title : str
        Front matter ``title`` or a title derived from the slug.
    date : datetime or None
        Front matter ``date`` or the date encoded in the file name, in UTC.
    tags : list[str]
        Distinct tags in the order they were declared.
    data : dict[str, Any]
        Complete front matter mapping.
    content : str
        Markdown or HTML body following the front matter.
    url : str
        Front matter ``permalink`` or ``/YYYY/MM/DD/<slug>.html``.
    is_markdown : bool
        Whether ``content`` is Markdown rather than HTML.
    """

    slug: str
    title: str
    date: dt.datetime | None
    tags: list[str]
    data: dict[str, typ.Any]
    content: str
    url: str
    is_markdown: bool = True


@dc.dataclass(slots=True)
class Site:
    """Build-time view of a site handed to generators."""

    config: SiteConfig
    posts: list[Post] = dc.field(default_factory=list)
    tags: dict[str, list[Post]] = dc.field(default_factory=dict)
    pages: list[Page] = dc.field(default_factory=list)
    layouts: LayoutLoader = dc.field(default_factory=LayoutLoader)

    @property
    def source(self) -> Path:
        """Return the site source directory."""
        return self.config.source

    @property
    def title(self) -> str:
        """Return the configured site title."""
        return self.config.title

    @classmethod
    def from_config(cls, config: SiteConfig) -> Site:
        """Read posts for ``config`` and index them by tag."""
        posts = load_posts(config.posts_path)
        return cls(config=config, posts=posts, tags=build_tag_index(posts))


def load_posts(posts_dir: Path) -> list[Post]:
    """Return published posts from ``posts_dir``, newest first.

    Files without front matter are ignored, as are posts whose front matter
    sets ``published: false``. A missing directory yields an empty list.
    """
    if not posts_dir.is_dir():
        return []
    posts: list[Post] = []
    for path in sorted(posts_dir.iterdir()):
        if not path.is_file() or path.suffix.lower() not in POST_SUFFIXES:
            continue
        document = read_document(path)
        if not document.has_front_matter:
            continue
        if document.data.get("published", True) is False:
            continue
        post = _build_post(path.stem, document.data, document.content)
        post.is_markdown = path.suffix.lower() in MARKDOWN_SUFFIXES
        posts.append(post)
    posts.sort(key=_post_sort_key, reverse=True)
    return posts


def build_tag_index(posts: cabc.Iterable[Post]) -> dict[str, list[Post]]:
    """Group ``posts`` by tag, keeping each tag's posts in the given order."""
    index: dict[str, list[Post]] = {}
    for post in posts:
        for tag in post.tags:
            index.setdefault(tag, []).append(post)
    return index


def _build_post(stem: str, data: dict[str, typ.Any], content: str) -> Post:
    filename_date: dt.datetime | None = None
    slug = stem
    if match := POST_FILENAME_PATTERN.match(stem):
        year, month, day, slug = match.groups()
        try:
            filename_date = dt.datetime(
                int(year), int(month), int(day), tzinfo=dt.UTC
            )
        except ValueError:
            filename_date = None
    date = _parse_timestamp(data.get("date")) or filename_date
    title = str(data.get("title") or slug.replace("-", " ").title())
    return Post(
        slug=slug,
        title=title,
        date=date,
        tags=_normalize_tags(data),
        data=data,
        content=content,
        url=_post_url(data, slug, date),
    )


def _normalize_tags(data: typ.Mapping[str, typ.Any]) -> list[str]:
    """Return distinct tags from ``tags`` (list or string) and ``tag`` keys."""
    raw: list[object] = []
    for key in ("tags", "tag"):
        match data.get(key):
            case None:
                continue
            case str() as text:
                raw.extend(text.split() if key == "tags" else [text])
            case list() as items:
                raw.extend(items)
            case other:
                raw.append(other)
    tags: list[str] = []
    for item in raw:
        if item is None:
            continue
        text = str(item).strip()
        if text and text not in tags:
            tags.append(text)
    return tags


def _post_url(
    data: typ.Mapping[str, typ.Any], slug: str, date: dt.datetime | None
) -> str:
    permalink = data.get("permalink")
    if isinstance(permalink, str) and permalink.strip():
        return permalink.strip()
    if date is None:
        return f"/{slug}{PAGE_EXTENSION}"
    return f"/{date:%Y/%m/%d}/{slug}{PAGE_EXTENSION}"


def _post_sort_key(post: Post) -> tuple[dt.datetime, str]:
    return (post.date or dt.datetime.min.replace(tzinfo=dt.UTC), post.slug)


__all__ = ["Page", "Post", "Site", "build_tag_index", "load_posts"]
