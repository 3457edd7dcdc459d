r"""Split site documents into YAML front matter and body text.

Layouts and posts both start with an optional YAML block fenced by ``---``
lines. This module separates that block from the body with
``python-frontmatter`` and returns a :class:`Document` that the layout loader
and post reader consume. The YAML itself is read by ruamel.yaml as YAML 1.2,
the same loader the site configuration uses.

Example
-------
>>> from tagpages.front_matter import parse_document
>>> doc = parse_document("---\ntitle: Home\n---\n<h1>{{ page.title }}</h1>\n")
>>> doc.data["title"]
'Home'
>>> doc.content
'<h1>{{ page.title }}</h1>'
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import frontmatter
from frontmatter.default_handlers import YAMLHandler
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

if typ.TYPE_CHECKING:
    from pathlib import Path


class FrontMatterError(ValueError):
    """Raised when a document's front matter cannot be parsed."""


class RuamelYAMLHandler(YAMLHandler):
    """Front matter handler that loads the block with ruamel.yaml (YAML 1.2)."""

    def load(self, fm: str, **kwargs: object) -> dict[str, typ.Any]:  # noqa: ARG002
        """Return the front matter mapping, or raise when it is not one."""
        loader = YAML(typ="safe")
        loader.version = (1, 2)
        loaded = loader.load(fm)
        if loaded is None:
            return {}
        if not isinstance(loaded, dict):
            msg = "must be a mapping"
            raise FrontMatterError(msg)
        return dict(loaded)


@dc.dataclass(slots=True)
class Document:
    """Front matter mapping and the body that follows it.

    Attributes
    ----------
    data : dict[str, Any]
        Parsed front matter; empty when the block is empty.
    content : str
        Text after the closing fence, with surrounding whitespace removed.
    has_front_matter : bool
        Whether the source opened with a front matter fence at all.
    """

    data: dict[str, typ.Any]
    content: str
    has_front_matter: bool


def parse_document(text: str, *, origin: str = "<string>") -> Document:
    """Return the front matter and body of ``text``.

    Parameters
    ----------
    text : str
        Full document source.
    origin : str, optional
        Label used in error messages, usually the file path.

    Raises
    ------
    FrontMatterError
        If the YAML block is malformed or is not a mapping.
    """
    text = text.removeprefix("\ufeff")
    handler = RuamelYAMLHandler()
    if not _has_front_matter(handler, text.strip()):
        return Document(data={}, content=text.strip(), has_front_matter=False)
    try:
        metadata, content = frontmatter.parse(text, handler=handler)
    except FrontMatterError as exc:
        msg = f"Front matter in {origin} {exc}."
        raise FrontMatterError(msg) from exc
    except YAMLError as exc:
        msg = f"Invalid front matter in {origin}: {exc}"
        raise FrontMatterError(msg) from exc
    return Document(
        data=dict(metadata),
        content=content,
        has_front_matter=True,
    )


def _has_front_matter(handler: YAMLHandler, text: str) -> bool:
    """Return whether ``text`` opens with a fenced block that is closed."""
    if not handler.detect(text):
        return False
    try:
        handler.split(text)
    except ValueError:
        return False
    return True


def read_document(path: Path) -> Document:
    """Read ``path`` as UTF-8 and split it with :func:`parse_document`."""
    return parse_document(path.read_text(encoding="utf-8"), origin=str(path))


__all__ = [
    "Document",
    "FrontMatterError",
    "RuamelYAMLHandler",
    "parse_document",
    "read_document",
]
