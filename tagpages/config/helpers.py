"""Utility helpers shared by the tagpages configuration loader."""

from __future__ import annotations

import datetime as dt
import typing as typ

from .models import SiteConfigError, TagNamePolicy, TagPagesConfig


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_bool(key: str, value: object) -> bool:
    """Return ``value`` as a bool, rejecting anything that is not one."""
    if isinstance(value, bool):
        return value
    msg = f"'{key}' must be true or false, got {value!r}."
    raise SiteConfigError(msg)


def _build_tag_pages_config(
    payload: typ.Mapping[str, typ.Any] | None,
) -> TagPagesConfig:
    """Build a TagPagesConfig from the ``tag_pages`` mapping payload."""
    base = TagPagesConfig()
    if payload is None:
        return base
    if not isinstance(payload, dict):
        msg = "'tag_pages' must be a mapping."
        raise SiteConfigError(msg)
    if not payload:
        return base
    layout = _optional_str(payload.get("layout")) or base.layout
    if "/" in layout or "\\" in layout:
        msg = (
            f"Tag page layout '{layout}' must be a file name inside the "
            "layouts directory."
        )
        raise SiteConfigError(msg)
    raw_policy = _optional_str(payload.get("policy")) or base.policy.value
    try:
        policy = TagNamePolicy(raw_policy.lower())
    except ValueError as exc:
        known = ", ".join(member.value for member in TagNamePolicy)
        msg = f"Unknown tag name policy '{raw_policy}'. Known policies: {known}"
        raise SiteConfigError(msg) from exc
    return TagPagesConfig(layout=layout, policy=policy)


def _parse_timestamp(value: dt.datetime | dt.date | str | None) -> dt.datetime | None:
    """Return a timezone-aware UTC datetime parsed from ``value``, or None."""
    match value:
        case dt.datetime():
            parsed = value
        case dt.date():
            parsed = dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                parsed = dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=dt.UTC)
    return parsed.astimezone(dt.UTC)


__all__ = [
    "_build_tag_pages_config",
    "_coerce_bool",
    "_optional_str",
    "_parse_timestamp",
]
