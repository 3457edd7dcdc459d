"""Unit tests for mapping tags to output file names."""

from __future__ import annotations

import pytest

from tagpages.config import TagNamePolicy
from tagpages.generator import UnsafeTagError, tag_page_name


@pytest.mark.parametrize("tag", ["ruby", "Jekyll", "c++", "año", "two words"])
def test_reject_policy_keeps_safe_tags_verbatim(tag: str) -> None:
    """Safe tags map to ``<tag>.html`` unchanged."""
    assert tag_page_name(tag) == f"{tag}.html"


@pytest.mark.parametrize(
    ("tag", "reason"),
    [
        ("", "empty"),
        ("   ", "empty"),
        (".", "directory"),
        ("..", "directory"),
        ("a/b", "path separator"),
        ("a\\b", "path separator"),
        ("bad\x00tag", "control character"),
        ("line\nbreak", "control character"),
    ],
)
def test_reject_policy_refuses_unsafe_tags(tag: str, reason: str) -> None:
    """Unsafe tags raise with a reason naming the problem."""
    with pytest.raises(UnsafeTagError) as excinfo:
        tag_page_name(tag, TagNamePolicy.REJECT)
    assert reason in excinfo.value.reason
    assert excinfo.value.tag == tag


@pytest.mark.parametrize(
    ("tag", "expected"),
    [
        ("Ruby", "ruby.html"),
        ("C++ Tips", "c-tips.html"),
        ("../etc/passwd", "etc-passwd.html"),
        ("año nuevo", "ano-nuevo.html"),
        ("snake_case-tag", "snake_case-tag.html"),
    ],
)
def test_sanitize_policy_slugifies(tag: str, expected: str) -> None:
    """Sanitizing folds tags into lowercase ASCII slugs."""
    assert tag_page_name(tag, TagNamePolicy.SANITIZE) == expected


def test_sanitize_policy_refuses_empty_result() -> None:
    """A tag with no usable characters cannot be sanitized."""
    with pytest.raises(UnsafeTagError):
        tag_page_name("!!!", TagNamePolicy.SANITIZE)
