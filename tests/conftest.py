"""Shared fixtures describing a small bilingual blog.

The ``site_index`` fixture mirrors a typical content graph: an English blog
section with a yearly subsection, a French translation of the blog section,
and an English post with a French translation. ``ring_index`` links three
pages into a navigation cycle to exercise recursion limits.
"""

from __future__ import annotations

import datetime as dt
import types
import typing as typ

import pytest

from site_views.content import (
    ContentIndex,
    FileInfo,
    Heading,
    Page,
    PageMeta,
    Section,
    SectionMeta,
)
from site_views.logging_setup import configure_logging

SITE_ROOT = "https://example.invalid"


@pytest.fixture(autouse=True, scope="session")
def _stderr_logging() -> None:
    """Route log events to stderr so stdout holds command output only."""
    configure_logging()


def make_page(
    key: str,
    *,
    lang: str = "en",
    canonical: str | None = None,
    title: str | None = None,
    published: dt.datetime | None = None,
    **fields: typ.Any,
) -> Page:
    """Build a page whose source and relative paths equal ``key``."""
    slug = key.rsplit("/", 1)[-1].removesuffix(".md")
    meta = PageMeta(
        title=title,
        date=published.date().isoformat() if published else None,
        datetime=published,
        extra=types.MappingProxyType({"author": "ada"}),
        taxonomies=types.MappingProxyType({"tags": ("rust", "python")}),
    )
    return Page(
        key=key,
        file=FileInfo(path=key, relative=key, canonical=canonical or key),
        lang=lang,
        permalink=f"{SITE_ROOT}/{lang}/{slug}/",
        slug=slug,
        path=f"/{lang}/{slug}/",
        content=f"<p>{title or slug}</p>",
        meta=meta,
        **fields,
    )


def make_section(
    key: str,
    *,
    lang: str = "en",
    canonical: str | None = None,
    title: str | None = None,
    **fields: typ.Any,
) -> Section:
    """Build a section whose relative path equals ``key``."""
    source = f"{key}/_index.md"
    return Section(
        key=key,
        file=FileInfo(path=source, relative=key, canonical=canonical or source),
        lang=lang,
        permalink=f"{SITE_ROOT}/{key}/",
        path=f"/{key}/",
        content=f"<p>{title or key}</p>",
        meta=SectionMeta(title=title),
        **fields,
    )


@pytest.fixture
def site_index() -> ContentIndex:
    """Return an index holding a bilingual blog."""
    post = make_page(
        "en/post.md",
        canonical="post.md",
        title="Post",
        published=dt.datetime(2024, 3, 15, 9, 30, tzinfo=dt.UTC),
        ancestors=("blog", "blog/2024"),
        toc=(Heading(title="Intro", id="intro", permalink="#intro", level=1),),
        word_count=120,
        reading_time=1,
        components=("gallery",),
        assets=("cover.png",),
        summary="A post.",
    )
    translated = make_page(
        "fr/post.md",
        lang="fr",
        canonical="post.md",
        title="Billet",
        ancestors=("fr/blog",),
    )
    older = make_page(
        "en/older.md",
        title="Older",
        ancestors=("blog",),
        later="en/post.md",
    )
    blog = make_section(
        "blog",
        title="Blog",
        canonical="blog/_index.md",
        pages=("en/older.md", "en/post.md"),
        subsections=("blog/2024",),
    )
    yearly = make_section(
        "blog/2024",
        title="2024",
        ancestors=("blog",),
        includers=("blog",),
    )
    blog_fr = make_section(
        "fr/blog",
        lang="fr",
        title="Blogue",
        canonical="blog/_index.md",
        pages=("fr/post.md",),
    )
    return ContentIndex.build(
        pages=[post, translated, older], sections=[blog, yearly, blog_fr]
    )


@pytest.fixture
def ring_index() -> ContentIndex:
    """Return three pages whose navigation pointers form a cycle."""
    pages = [
        make_page("a.md", title="A", later="b.md", earlier="c.md", lighter="b.md"),
        make_page("b.md", title="B", later="c.md", earlier="a.md", title_prev="a.md"),
        make_page("c.md", title="C", later="a.md", earlier="b.md", title_next="a.md"),
    ]
    return ContentIndex.build(pages=pages)


@pytest.fixture
def page_factory() -> typ.Callable[..., Page]:
    """Return the page builder used by the shared fixtures."""
    return make_page


@pytest.fixture
def section_factory() -> typ.Callable[..., Section]:
    """Return the section builder used by the shared fixtures."""
    return make_section
