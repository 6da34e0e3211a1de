"""Project a static site's content graph into template-ready views.

This package turns the pages and sections held by a :class:`ContentIndex`
into flat, serializable records for a template engine, resolving sibling
navigation, translations, ancestors and includers without ever expanding a
reference chain more than one level deep.

Exports
-------
- ``app``: Cyclopts application entry for the ``views`` subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from site_views import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
