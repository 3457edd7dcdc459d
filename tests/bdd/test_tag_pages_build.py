"""Behaviour tests for building tag listing pages.

These scenarios build a throwaway site with pytest-bdd and check the
``<tag>.html`` files that come out of it: one per tag when the ``home.html``
layout exists, none for an untagged site, and a layout-not-found failure with
no output when the layout is removed.

Usage:
    pytest tests/bdd/test_tag_pages_build.py -v

Prerequisites:
    - The test extra installed (``pip install -e .[test]``).
    - The feature file at ``features/tag_pages_build.feature``.
"""

from __future__ import annotations

import collections.abc as cabc
from pathlib import Path

import pytest
from bs4 import BeautifulSoup
from pytest_bdd import given, parsers, scenarios, then, when

from tagpages.build import SiteBuilder
from tagpages.config import SiteConfig
from tagpages.layouts import LayoutNotFoundError

FEATURE_FILE = (
    Path(__file__).resolve().parents[2] / "features" / "tag_pages_build.feature"
)
scenarios(FEATURE_FILE)


@pytest.fixture
def scenario_state() -> dict[str, object]:
    """Return a mutable dict used to share scenario state across BDD steps."""
    return {}


@given(parsers.parse('a site with posts tagged "{first}" and "{second}"'))
def given_tagged_site(
    tmp_path: Path,
    scenario_state: dict[str, object],
    make_post: cabc.Callable[..., Path],
    make_home_layout: cabc.Callable[..., Path],
    first: str,
    second: str,
) -> None:
    """Create a site whose posts carry ``first`` and ``second`` tags."""
    root = tmp_path / "site"
    make_home_layout(root)
    make_post(root, "2024-01-01-one.md", title="One", tags=[first])
    make_post(root, "2024-01-02-two.md", title="Two", tags=[second])
    scenario_state["root"] = root


@given("a site with untagged posts")
def given_untagged_site(
    tmp_path: Path,
    scenario_state: dict[str, object],
    make_post: cabc.Callable[..., Path],
    make_home_layout: cabc.Callable[..., Path],
) -> None:
    """Create a site whose posts have no tags at all."""
    root = tmp_path / "site"
    make_home_layout(root)
    make_post(root, "2024-01-01-plain.md", title="Plain", tags=None)
    scenario_state["root"] = root


@given("the home layout has been removed")
def given_layout_removed(scenario_state: dict[str, object]) -> None:
    """Delete ``_layouts/home.html`` from the scenario site."""
    root: Path = scenario_state["root"]  # type: ignore[assignment]
    (root / "_layouts" / "home.html").unlink()


@when("I build the site")
def when_build(scenario_state: dict[str, object]) -> None:
    """Run a full build and keep the written paths."""
    root: Path = scenario_state["root"]  # type: ignore[assignment]
    result = SiteBuilder(SiteConfig.for_source(root)).run()
    scenario_state["written"] = result.written


@when("I try to build the site")
def when_try_build(scenario_state: dict[str, object]) -> None:
    """Run a build that is expected to fail and keep the error."""
    root: Path = scenario_state["root"]  # type: ignore[assignment]
    try:
        result = SiteBuilder(SiteConfig.for_source(root)).run()
    except LayoutNotFoundError as exc:
        scenario_state["error"] = exc
        scenario_state["written"] = []
    else:
        scenario_state["written"] = result.written


@then(parsers.parse('the pages "{first}" and "{second}" are written'))
def then_pages_written(
    scenario_state: dict[str, object], first: str, second: str
) -> None:
    """Exactly the two named pages exist in the destination."""
    written: list[Path] = scenario_state["written"]  # type: ignore[assignment]
    assert sorted(path.name for path in written) == sorted([first, second])
    assert all(path.exists() for path in written)


@then(parsers.parse('the "{name}" page lists only posts tagged "{tag}"'))
def then_page_lists_posts(
    scenario_state: dict[str, object], name: str, tag: str
) -> None:
    """The rendered page names the tag and links only its posts."""
    root: Path = scenario_state["root"]  # type: ignore[assignment]
    soup = BeautifulSoup(
        (root / "_site" / name).read_text(encoding="utf-8"), "html.parser"
    )
    title = soup.select_one(".tag-title")
    assert title is not None
    assert title.get_text(strip=True).endswith(f": {tag}")
    assert [a.get_text(strip=True) for a in soup.select(".tag-posts a")] == ["One"]


@then("no pages are written")
def then_nothing_written(scenario_state: dict[str, object]) -> None:
    """The build produced no files and no destination directory."""
    root: Path = scenario_state["root"]  # type: ignore[assignment]
    assert scenario_state["written"] == []
    assert not (root / "_site").exists()


@then("the build fails with a layout-not-found error")
def then_layout_error(scenario_state: dict[str, object]) -> None:
    """The captured error names the missing layout."""
    error = scenario_state.get("error")
    assert isinstance(error, LayoutNotFoundError)
    assert error.name == "home.html"
