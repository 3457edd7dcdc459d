"""Shared fixtures for building throwaway sites on disk."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

HOME_LAYOUT = dedent(
    """\
    ---
    title: Tagged posts
    ---
    <h1 class="tag-title">{{ page.title }}: {{ page.tag }}</h1>
    <ul class="tag-posts">
    {% for post in posts %}
      <li><a href="{{ post.url }}">{{ post.title }}</a></li>
    {% endfor %}
    </ul>
    """
)


def write_post(
    root: Path, filename: str, *, title: str, tags: cabc.Sequence[str] | str | None
) -> Path:
    """Write a post with YAML front matter under ``root/_posts``."""
    posts_dir = root / "_posts"
    posts_dir.mkdir(parents=True, exist_ok=True)
    lines = ["---", f"title: {title}"]
    if isinstance(tags, str):
        lines.append(f"tags: {tags}")
    elif tags is not None:
        lines.append("tags: [" + ", ".join(tags) + "]")
    lines.extend(["---", f"Body of *{title}*.", ""])
    path = posts_dir / filename
    path.write_text("\n".join(lines), encoding="utf-8")
    return path


def write_home_layout(root: Path, text: str = HOME_LAYOUT) -> Path:
    """Write ``_layouts/home.html`` under ``root``."""
    layouts_dir = root / "_layouts"
    layouts_dir.mkdir(parents=True, exist_ok=True)
    path = layouts_dir / "home.html"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def site_root(tmp_path: Path) -> Path:
    """Return a site source with a home layout and two tagged posts."""
    root = tmp_path / "site"
    root.mkdir()
    write_home_layout(root)
    write_post(root, "2024-01-02-hello-ruby.md", title="Hello Ruby", tags=["ruby"])
    write_post(
        root,
        "2024-02-03-jekyll-tips.md",
        title="Jekyll Tips",
        tags=["jekyll", "ruby"],
    )
    return root


@pytest.fixture
def make_post() -> cabc.Callable[..., Path]:
    """Expose :func:`write_post` to tests."""
    return write_post


@pytest.fixture
def make_home_layout() -> cabc.Callable[..., Path]:
    """Expose :func:`write_home_layout` to tests."""
    return write_home_layout
