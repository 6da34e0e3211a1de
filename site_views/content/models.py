"""Typed dataclasses describing the content graph consumed by the projectors."""

from __future__ import annotations

import dataclasses as dc
import datetime as dt  # noqa: TC003 - used for runtime type metadata
import enum
import typing as typ

ContentKey = str


class ContentGraphError(ValueError):
    """Raised when a content graph description is invalid or incomplete."""


class BrokenReferenceError(KeyError):
    """Raised when a stored key does not resolve inside the content index.

    Projections never catch this error.
    """

    def __init__(self, kind: str, key: ContentKey) -> None:
        super().__init__(key)
        self.kind = kind
        self.key = key

    def __str__(self) -> str:
        return f"Unknown {self.kind} key '{self.key}' in content index."


class TranslationScope(enum.Enum):
    """Namespace a translation group lives in; pages and sections never mix."""

    PAGE = "page"
    SECTION = "section"


@dc.dataclass(frozen=True, slots=True)
class FileInfo:
    """Source file identity of a page or section.

    Attributes
    ----------
    path : str
        Source path of the markdown file, as used by ``get_page`` lookups in
        templates.
    relative : str
        Path relative to the content root; sections are referenced by it.
    canonical : str
        Language-independent identity joining translations of one document.
    """

    path: str
    relative: str
    canonical: str


@dc.dataclass(frozen=True, slots=True)
class Heading:
    """Table-of-contents entry with nested child headings."""

    title: str
    id: str
    permalink: str
    level: int
    children: tuple[Heading, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class PageMeta:
    """Front matter of a page."""

    title: str | None = None
    description: str | None = None
    date: str | None = None
    updated: str | None = None
    datetime: dt.datetime | None = None
    draft: bool = False
    extra: typ.Mapping[str, typ.Any] = dc.field(default_factory=dict)
    taxonomies: typ.Mapping[str, tuple[str, ...]] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class SectionMeta:
    """Front matter of a section."""

    title: str | None = None
    description: str | None = None
    draft: bool = False
    extra: typ.Mapping[str, typ.Any] = dc.field(default_factory=dict)


@dc.dataclass(frozen=True, slots=True)
class Page:
    """A fully processed page as held by the content index.

    Navigation pointers hold the keys of sibling pages computed upstream by
    the sorting step; ``None`` means the page has no neighbour for that
    ordering.
    """

    key: ContentKey
    file: FileInfo
    lang: str
    permalink: str
    slug: str
    path: str
    content: str = ""
    meta: PageMeta = dc.field(default_factory=PageMeta)
    summary: str | None = None
    toc: tuple[Heading, ...] = ()
    word_count: int | None = None
    reading_time: int | None = None
    components: tuple[str, ...] = ()
    assets: tuple[str, ...] = ()
    ancestors: tuple[ContentKey, ...] = ()
    lighter: ContentKey | None = None
    heavier: ContentKey | None = None
    earlier: ContentKey | None = None
    later: ContentKey | None = None
    earlier_updated: ContentKey | None = None
    later_updated: ContentKey | None = None
    title_prev: ContentKey | None = None
    title_next: ContentKey | None = None


@dc.dataclass(frozen=True, slots=True)
class Section:
    """A fully processed section as held by the content index."""

    key: ContentKey
    file: FileInfo
    lang: str
    permalink: str
    path: str
    content: str = ""
    meta: SectionMeta = dc.field(default_factory=SectionMeta)
    toc: tuple[Heading, ...] = ()
    word_count: int | None = None
    reading_time: int | None = None
    components: tuple[str, ...] = ()
    assets: tuple[str, ...] = ()
    pages: tuple[ContentKey, ...] = ()
    subsections: tuple[ContentKey, ...] = ()
    includers: tuple[ContentKey, ...] = ()
    ancestors: tuple[ContentKey, ...] = ()


__all__ = [
    "BrokenReferenceError",
    "ContentGraphError",
    "ContentKey",
    "FileInfo",
    "Heading",
    "Page",
    "PageMeta",
    "Section",
    "SectionMeta",
    "TranslationScope",
]
