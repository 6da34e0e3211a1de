"""Unit tests for section projection."""

from __future__ import annotations

import typing as typ

import pytest

from site_views.content import BrokenReferenceError, ContentIndex
from site_views.views import (
    Fidelity,
    project_page_basic,
    project_section,
    project_section_basic,
    project_section_full,
)

if typ.TYPE_CHECKING:
    from site_views.content import Section

    SectionFactory = typ.Callable[..., Section]


def test_full_section_embeds_basic_page_views(site_index: ContentIndex) -> None:
    """Child pages appear as basic views in stored order."""
    view = project_section_full(site_index.get_section("blog"), site_index)
    expected = tuple(
        project_page_basic(site_index.get_page(key), site_index)
        for key in ("en/older.md", "en/post.md")
    )
    assert view.pages == expected
    assert view.pages[0].later is None, "child pages must not nest siblings"


def test_subsections_and_includers_are_paths(site_index: ContentIndex) -> None:
    """Related sections are referenced by relative path, never nested."""
    blog = project_section_full(site_index.get_section("blog"), site_index)
    yearly = project_section_full(site_index.get_section("blog/2024"), site_index)
    assert blog.subsections == ("blog/2024",)
    assert yearly.includers == ("blog",)
    assert yearly.ancestors == ("blog",)
    assert all(isinstance(path, str) for path in blog.subsections)


def test_mutual_includers_terminate(section_factory: SectionFactory) -> None:
    """Two sections including each other still project."""
    first = section_factory("a", includers=("b",), subsections=("b",))
    second = section_factory("b", includers=("a",), subsections=("a",))
    index = ContentIndex.build(sections=[first, second])
    view = project_section_full(first, index)
    assert view.includers == ("b",)
    assert view.subsections == ("b",)


def test_basic_section_with_index_has_no_pages(site_index: ContentIndex) -> None:
    """Basic fidelity resolves references but skips child pages."""
    view = project_section_basic(site_index.get_section("blog"), site_index)
    assert view.pages == ()
    assert view.subsections == ("blog/2024",)
    assert [ref.lang for ref in view.translations] == ["fr"]


def test_basic_section_without_index_is_bare(site_index: ContentIndex) -> None:
    """Without an index every relational field is empty."""
    view = project_section_basic(site_index.get_section("blog/2024"))
    assert view.pages == ()
    assert view.subsections == ()
    assert view.includers == ()
    assert view.ancestors == ()
    assert view.translations == ()
    assert view.title == "2024"
    assert view.relative_path == "blog/2024"


def test_section_translations(site_index: ContentIndex) -> None:
    """The French blog lists the English blog by source path."""
    view = project_section_full(site_index.get_section("fr/blog"), site_index)
    assert [(ref.lang, ref.path, ref.title) for ref in view.translations] == [
        ("en", "blog/_index.md", "Blog")
    ]
    assert [page.lang for page in view.pages] == ["fr"]


def test_missing_child_page_aborts(section_factory: SectionFactory) -> None:
    """A section naming an unknown page cannot be projected in full."""
    section = section_factory("docs", pages=("docs/gone.md",))
    index = ContentIndex.build(sections=[section])
    with pytest.raises(BrokenReferenceError) as excinfo:
        project_section_full(section, index)
    assert excinfo.value.kind == "page"


def test_missing_subsection_aborts(section_factory: SectionFactory) -> None:
    """Unknown subsection keys are fatal at both fidelities."""
    section = section_factory("docs", subsections=("docs/gone",))
    index = ContentIndex.build(sections=[section])
    with pytest.raises(BrokenReferenceError):
        project_section_basic(section, index)


def test_full_section_requires_index(site_index: ContentIndex) -> None:
    """Full fidelity without an index is rejected."""
    with pytest.raises(ValueError, match="needs a content index"):
        project_section(site_index.get_section("blog"), None, fidelity=Fidelity.FULL)
