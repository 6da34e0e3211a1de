"""Unit tests for the read-only content index."""

from __future__ import annotations

import typing as typ

import pytest

from site_views.content import (
    BrokenReferenceError,
    ContentIndex,
    TranslationScope,
)

if typ.TYPE_CHECKING:
    from site_views.content import Page

    PageFactory = typ.Callable[..., Page]


def test_get_page_returns_stored_page(site_index: ContentIndex) -> None:
    """Pages should be served by their stable key."""
    page = site_index.get_page("en/post.md")
    assert page.meta.title == "Post", f"expected 'Post', got {page.meta.title!r}"


def test_unknown_page_key_is_a_broken_reference(site_index: ContentIndex) -> None:
    """Unknown keys raise BrokenReferenceError, which is also a KeyError."""
    with pytest.raises(BrokenReferenceError) as excinfo:
        site_index.get_page("missing.md")
    assert isinstance(excinfo.value, KeyError), "expected a KeyError subclass"
    assert excinfo.value.kind == "page"
    assert str(excinfo.value) == "Unknown page key 'missing.md' in content index."


def test_section_path_is_relative_path(site_index: ContentIndex) -> None:
    """Section references resolve to the section's relative path."""
    assert site_index.get_section_path("blog/2024") == "blog/2024"


def test_unknown_section_key_raises(site_index: ContentIndex) -> None:
    """Section lookups share the broken-reference fault."""
    with pytest.raises(BrokenReferenceError):
        site_index.get_section_path("nowhere")


def test_translation_groups_are_scoped(site_index: ContentIndex) -> None:
    """Pages and sections sharing a canonical id never join the same group."""
    pages = site_index.get_translation_group("post.md", TranslationScope.PAGE)
    sections = site_index.get_translation_group(
        "blog/_index.md", TranslationScope.SECTION
    )
    assert pages == ("en/post.md", "fr/post.md"), f"unexpected page group {pages!r}"
    assert sections == ("blog", "fr/blog"), f"unexpected section group {sections!r}"
    assert (
        site_index.get_translation_group("post.md", TranslationScope.SECTION) == ()
    ), "expected no section group for a page canonical id"


def test_missing_translation_group_is_empty(site_index: ContentIndex) -> None:
    """Untranslated content has an empty group, not an error."""
    assert site_index.get_translation_group("older.md", TranslationScope.PAGE) == ()


def test_explicit_groups_are_deduplicated(page_factory: PageFactory) -> None:
    """Repeated members in a supplied group collapse in first-seen order."""
    first = page_factory("en/a.md", canonical="a.md")
    second = page_factory("de/a.md", lang="de", canonical="a.md")
    index = ContentIndex(
        {first.key: first, second.key: second},
        {},
        {(TranslationScope.PAGE, "a.md"): ("de/a.md", "en/a.md", "de/a.md")},
    )
    assert index.get_translation_group("a.md", TranslationScope.PAGE) == (
        "de/a.md",
        "en/a.md",
    )


def test_index_mappings_are_read_only(site_index: ContentIndex) -> None:
    """Consumers cannot mutate the index through its public mappings."""
    with pytest.raises(TypeError):
        site_index.pages["new.md"] = site_index.get_page("en/post.md")  # type: ignore[index]


def test_lookup_by_path(site_index: ContentIndex) -> None:
    """Pages and sections can be fetched by source or relative path."""
    assert site_index.get_page_by_path("fr/post.md").lang == "fr"
    assert site_index.get_section_by_path("blog/_index.md").key == "blog"
    assert site_index.get_section_by_path("blog").key == "blog"
    with pytest.raises(BrokenReferenceError):
        site_index.get_page_by_path("nope.md")
