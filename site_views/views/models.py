"""View records handed to templates.

Views are frozen snapshots built per render request. Their collection fields
reference the tuples and read-only mappings owned by the content index rather
than copying them, so a view is only meaningful while its index is alive.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from site_views.content.models import Heading


@dc.dataclass(frozen=True, slots=True)
class TranslatedContent:
    """Minimal reference to the same content in another language.

    Attributes
    ----------
    lang : str
        Language tag of the translation.
    permalink : str
        Absolute URL of the translation.
    title : str | None
        Title of the translation, when it has one.
    path : str
        Source path of the translation; templates pass it to ``get_page`` or
        ``get_section`` to fetch the full entity.
    """

    lang: str
    permalink: str
    title: str | None
    path: str


@dc.dataclass(frozen=True, slots=True)
class PageView:
    """Template-facing projection of a page.

    The eight navigation fields hold basic-fidelity views of sibling pages on
    a full projection and are always ``None`` on a basic one, so nesting never
    goes deeper than one level.
    """

    relative_path: str
    content: str
    permalink: str
    slug: str
    ancestors: tuple[str, ...]
    title: str | None
    description: str | None
    updated: str | None
    date: str | None
    year: int | None
    month: int | None
    day: int | None
    taxonomies: typ.Mapping[str, tuple[str, ...]]
    extra: typ.Mapping[str, typ.Any]
    path: str
    components: tuple[str, ...]
    summary: str | None
    toc: tuple[Heading, ...]
    word_count: int | None
    reading_time: int | None
    assets: tuple[str, ...]
    draft: bool
    lang: str
    lighter: PageView | None
    heavier: PageView | None
    earlier_updated: PageView | None
    later_updated: PageView | None
    earlier: PageView | None
    later: PageView | None
    title_prev: PageView | None
    title_next: PageView | None
    translations: tuple[TranslatedContent, ...]


@dc.dataclass(frozen=True, slots=True)
class SectionView:
    """Template-facing projection of a section.

    Subsections and includers are relative paths only; sections may include
    each other, and paths keep the record finite.
    """

    relative_path: str
    content: str
    permalink: str
    draft: bool
    ancestors: tuple[str, ...]
    title: str | None
    description: str | None
    extra: typ.Mapping[str, typ.Any]
    path: str
    components: tuple[str, ...]
    toc: tuple[Heading, ...]
    word_count: int | None
    reading_time: int | None
    lang: str
    assets: tuple[str, ...]
    pages: tuple[PageView, ...]
    subsections: tuple[str, ...]
    translations: tuple[TranslatedContent, ...]
    includers: tuple[str, ...]


__all__ = ["PageView", "SectionView", "TranslatedContent"]
