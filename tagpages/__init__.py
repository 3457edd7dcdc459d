"""Generate one listing page per tag for a static site.

This package reads a site's posts, indexes them by tag, and for every tag
binds a virtual page to the shared ``_layouts/home.html`` layout before
rendering it to ``<tag>.html``. It exposes the CLI entry points used by the
``tagpages`` console script.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from tagpages import main
>>> main()  # doctest: +SKIP
>>> from tagpages import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
