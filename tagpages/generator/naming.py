"""Map tag strings to output file names under a configurable policy."""

from __future__ import annotations

import re
import unicodedata

from tagpages._constants import TAG_PAGE_NAME_TEMPLATE
from tagpages.config import TagNamePolicy

RESERVED_NAMES = frozenset({".", ".."})
SANITIZE_PATTERN = re.compile(r"[^a-z0-9_-]+")


class UnsafeTagError(ValueError):
    """Raised when a tag cannot be turned into a safe output file name."""

    def __init__(self, tag: str, reason: str) -> None:
        self.tag = tag
        self.reason = reason
        super().__init__(f"Tag {tag!r} cannot be used as a page name: {reason}.")


def tag_page_name(tag: str, policy: TagNamePolicy = TagNamePolicy.REJECT) -> str:
    """Return the output file name for ``tag``.

    Parameters
    ----------
    tag : str
        Tag exactly as it appears in the site's tag index.
    policy : TagNamePolicy, optional
        ``REJECT`` keeps the tag verbatim and refuses unsafe ones; ``SANITIZE``
        folds the tag into a lowercase slug.

    Returns
    -------
    str
        ``"<tag>.html"`` (or ``"<slug>.html"`` when sanitizing).

    Raises
    ------
    UnsafeTagError
        If the tag is empty, names a directory, contains a path separator or
        a control character under ``REJECT``, or sanitizes to nothing.

    Examples
    --------
    >>> tag_page_name("ruby")
    'ruby.html'
    >>> tag_page_name("C++ Tips", TagNamePolicy.SANITIZE)
    'c-tips.html'
    """
    if policy is TagNamePolicy.SANITIZE:
        return TAG_PAGE_NAME_TEMPLATE.format(tag=_sanitize(tag))
    _check_safe(tag)
    return TAG_PAGE_NAME_TEMPLATE.format(tag=tag)


def _check_safe(tag: str) -> None:
    if not tag.strip():
        raise UnsafeTagError(tag, "it is empty")
    if tag in RESERVED_NAMES:
        raise UnsafeTagError(tag, "it names a directory")
    if "/" in tag or "\\" in tag:
        raise UnsafeTagError(tag, "it contains a path separator")
    if any(unicodedata.category(char) == "Cc" for char in tag):
        raise UnsafeTagError(tag, "it contains a control character")


def _sanitize(tag: str) -> str:
    folded = unicodedata.normalize("NFKD", tag)
    ascii_only = folded.encode("ascii", "ignore").decode("ascii").lower()
    slug = SANITIZE_PATTERN.sub("-", ascii_only).strip("-")
    if not slug:
        raise UnsafeTagError(tag, "nothing remains after sanitizing")
    return slug


__all__ = ["UnsafeTagError", "tag_page_name"]
