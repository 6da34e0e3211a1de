"""Project sections into :class:`SectionView` records.

Sections form a tree, and includers can make two sections point at each
other. Views therefore embed child pages (at basic fidelity) but refer to
subsections and includers by relative path only.
"""

from __future__ import annotations

import typing as typ

import structlog

from .models import PageView, SectionView
from .pages import Fidelity, project_page
from .translations import section_translations

if typ.TYPE_CHECKING:
    from site_views.content.index import ContentIndex
    from site_views.content.models import Section

logger = structlog.get_logger(__name__)


def project_section(
    section: Section,
    index: ContentIndex | None,
    *,
    fidelity: Fidelity = Fidelity.FULL,
) -> SectionView:
    """Build the template view of ``section``.

    Parameters
    ----------
    section : Section
        Section to project.
    index : ContentIndex or None
        Index used to resolve ancestors, translations, subsection and
        includer paths and, at full fidelity, child pages. Without an index
        every relational field is empty and no lookup happens.
    fidelity : Fidelity, optional
        ``Fidelity.FULL`` (default) embeds basic views of the child pages;
        ``Fidelity.BASIC`` leaves ``pages`` empty.

    Returns
    -------
    SectionView
        A finite view; sections never nest other section views.

    Raises
    ------
    ValueError
        If a full projection is requested without an index.
    BrokenReferenceError
        If any stored key is missing from the index.
    """
    if fidelity is Fidelity.FULL and index is None:
        msg = "A full section projection needs a content index."
        raise ValueError(msg)

    pages: tuple[PageView, ...] = ()
    if index is None:
        ancestors: tuple[str, ...] = ()
        subsections: tuple[str, ...] = ()
        includers: tuple[str, ...] = ()
        translations = ()
    else:
        if fidelity is Fidelity.FULL:
            pages = tuple(
                project_page(index.get_page(key), index, fidelity=Fidelity.BASIC)
                for key in section.pages
            )
        subsections = tuple(index.get_section_path(key) for key in section.subsections)
        includers = tuple(index.get_section_path(key) for key in section.includers)
        ancestors = tuple(index.get_section_path(key) for key in section.ancestors)
        translations = section_translations(section, index)

    meta = section.meta
    view = SectionView(
        relative_path=section.file.relative,
        content=section.content,
        permalink=section.permalink,
        draft=meta.draft,
        ancestors=ancestors,
        title=meta.title,
        description=meta.description,
        extra=meta.extra,
        path=section.path,
        components=section.components,
        toc=section.toc,
        word_count=section.word_count,
        reading_time=section.reading_time,
        lang=section.lang,
        assets=section.assets,
        pages=pages,
        subsections=subsections,
        translations=translations,
        includers=includers,
    )
    logger.debug(
        "section_projected",
        key=section.key,
        fidelity=fidelity.value,
        pages=len(pages),
    )
    return view


def project_section_full(section: Section, index: ContentIndex) -> SectionView:
    """Project ``section`` together with basic views of its pages."""
    return project_section(section, index, fidelity=Fidelity.FULL)


def project_section_basic(
    section: Section, index: ContentIndex | None = None
) -> SectionView:
    """Project ``section`` without fetching its pages."""
    return project_section(section, index, fidelity=Fidelity.BASIC)


__all__ = ["project_section", "project_section_basic", "project_section_full"]
