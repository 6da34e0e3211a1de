"""Common literal values used across site_views.

Relation names and default paths shared by the loader, projectors and
integrity check. Intended for internal use within the site_views package.

Examples
--------
>>> from site_views import _constants
>>> len(_constants.NAVIGATION_FIELDS)
8
>>> "title_next" in _constants.NAVIGATION_FIELDS
True
"""

from pathlib import Path

NAVIGATION_FIELDS = (
    "lighter",
    "heavier",
    "earlier_updated",
    "later_updated",
    "earlier",
    "later",
    "title_prev",
    "title_next",
)
DEFAULT_CONTENT_GRAPH = Path("content/graph.yaml")
