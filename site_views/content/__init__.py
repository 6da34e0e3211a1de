"""Content graph records and the read-only index the projectors query.

This subpackage holds the immutable page and section records produced by the
upstream content pipeline, the :class:`ContentIndex` that serves them by key,
and a YAML loader (:func:`load_content_index`) used by the CLI and tests to
describe a graph without running the full pipeline.

Examples
--------
>>> from pathlib import Path
>>> from site_views.content import load_content_index
>>> index = load_content_index(Path("content/graph.yaml"))  # doctest: +SKIP
>>> index.get_section_path("blog")  # doctest: +SKIP
'blog/_index.md'
"""

from .index import ContentIndex
from .integrity import BrokenReference, find_broken_references
from .loader import load_content_index
from .models import (
    BrokenReferenceError,
    ContentGraphError,
    ContentKey,
    FileInfo,
    Heading,
    Page,
    PageMeta,
    Section,
    SectionMeta,
    TranslationScope,
)

__all__ = [
    "BrokenReference",
    "BrokenReferenceError",
    "ContentGraphError",
    "ContentIndex",
    "ContentKey",
    "FileInfo",
    "Heading",
    "Page",
    "PageMeta",
    "Section",
    "SectionMeta",
    "TranslationScope",
    "find_broken_references",
    "load_content_index",
]
