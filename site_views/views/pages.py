"""Project pages into :class:`PageView` records.

A page points at up to eight sibling pages (by weight, date, update date and
title). Those pointers may chain through the whole site or loop back, so a
full projection follows each of them exactly once and projects the target at
basic fidelity, which never follows pointers.

Example
-------
>>> from site_views.views import Fidelity, project_page
>>> view = project_page(page, index, fidelity=Fidelity.FULL)  # doctest: +SKIP
>>> view.later.later is None  # doctest: +SKIP
True
"""

from __future__ import annotations

import enum
import typing as typ

import structlog

from site_views._constants import NAVIGATION_FIELDS

from .models import PageView
from .translations import page_translations

if typ.TYPE_CHECKING:
    import datetime as dt

    from site_views.content.index import ContentIndex
    from site_views.content.models import ContentKey, Page

logger = structlog.get_logger(__name__)


class Fidelity(enum.Enum):
    """How far a projection follows references to other pages."""

    FULL = "full"
    BASIC = "basic"


def project_page(
    page: Page,
    index: ContentIndex | None,
    *,
    fidelity: Fidelity = Fidelity.FULL,
) -> PageView:
    """Build the template view of ``page``.

    Parameters
    ----------
    page : Page
        Page to project.
    index : ContentIndex or None
        Index used to resolve ancestors, translations and, at full fidelity,
        navigation pointers. A basic projection without an index leaves every
        reference field empty.
    fidelity : Fidelity, optional
        ``Fidelity.FULL`` (default) nests basic views of sibling pages;
        ``Fidelity.BASIC`` leaves all navigation fields ``None``.

    Returns
    -------
    PageView
        A self-contained view whose nesting depth is at most one.

    Raises
    ------
    ValueError
        If a full projection is requested without an index.
    BrokenReferenceError
        If any stored key is missing from the index. No partial view is
        returned.
    """
    if fidelity is Fidelity.FULL and index is None:
        msg = "A full page projection needs a content index."
        raise ValueError(msg)

    year, month, day = _date_parts(page.meta.datetime)
    if index is not None:
        ancestors = tuple(index.get_section_path(key) for key in page.ancestors)
        translations = page_translations(page, index)
    else:
        ancestors = ()
        translations = ()

    navigation: dict[str, PageView | None]
    if index is not None and fidelity is Fidelity.FULL:
        navigation = {
            name: _sibling(getattr(page, name), index) for name in NAVIGATION_FIELDS
        }
    else:
        navigation = dict.fromkeys(NAVIGATION_FIELDS)

    meta = page.meta
    view = PageView(
        relative_path=page.file.relative,
        content=page.content,
        permalink=page.permalink,
        slug=page.slug,
        ancestors=ancestors,
        title=meta.title,
        description=meta.description,
        updated=meta.updated,
        date=meta.date,
        year=year,
        month=month,
        day=day,
        taxonomies=meta.taxonomies,
        extra=meta.extra,
        path=page.path,
        components=page.components,
        summary=page.summary,
        toc=page.toc,
        word_count=page.word_count,
        reading_time=page.reading_time,
        assets=page.assets,
        draft=meta.draft,
        lang=page.lang,
        translations=translations,
        **navigation,
    )
    logger.debug(
        "page_projected",
        key=page.key,
        fidelity=fidelity.value,
        translations=len(translations),
    )
    return view


def project_page_full(page: Page, index: ContentIndex) -> PageView:
    """Project ``page`` with its sibling pages nested one level deep."""
    return project_page(page, index, fidelity=Fidelity.FULL)


def project_page_basic(page: Page, index: ContentIndex | None = None) -> PageView:
    """Project ``page`` without following navigation pointers."""
    return project_page(page, index, fidelity=Fidelity.BASIC)


def _sibling(key: ContentKey | None, index: ContentIndex) -> PageView | None:
    """Return the basic view of the page under ``key``, if there is one."""
    if key is None:
        return None
    return project_page(index.get_page(key), index, fidelity=Fidelity.BASIC)


def _date_parts(
    value: dt.datetime | None,
) -> tuple[int | None, int | None, int | None]:
    """Split a stored date-time into year, month and day."""
    if value is None:
        return None, None, None
    return value.year, value.month, value.day


__all__ = ["Fidelity", "project_page", "project_page_basic", "project_page_full"]
