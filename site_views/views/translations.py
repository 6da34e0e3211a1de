"""Resolve the other-language siblings of a page or section."""

from __future__ import annotations

import typing as typ

from site_views.content.models import TranslationScope

from .models import TranslatedContent

if typ.TYPE_CHECKING:
    from site_views.content.index import ContentIndex
    from site_views.content.models import ContentKey, Page, Section


def resolve_translations(
    index: ContentIndex,
    canonical_id: str,
    scope: TranslationScope,
    *,
    exclude: ContentKey,
) -> tuple[TranslatedContent, ...]:
    """Return references to every other member of a translation group.

    Parameters
    ----------
    index : ContentIndex
        Index holding the translation groups and the entities they name.
    canonical_id : str
        Language-independent identity of the entity being projected.
    scope : TranslationScope
        Whether the group joins pages or sections.
    exclude : str
        Key of the entity being projected; it never lists itself.

    Returns
    -------
    tuple[TranslatedContent, ...]
        One reference per other member, in the group's stored order. Empty
        when the identity has no group.

    Raises
    ------
    BrokenReferenceError
        If a group member is missing from the index.
    """
    fetch: typ.Callable[[ContentKey], Page | Section]
    if scope is TranslationScope.PAGE:
        fetch = index.get_page
    else:
        fetch = index.get_section
    references: list[TranslatedContent] = []
    for key in index.get_translation_group(canonical_id, scope):
        if key == exclude:
            continue
        other = fetch(key)
        references.append(
            TranslatedContent(
                lang=other.lang,
                permalink=other.permalink,
                title=other.meta.title,
                path=other.file.path,
            )
        )
    return tuple(references)


def page_translations(page: Page, index: ContentIndex) -> tuple[TranslatedContent, ...]:
    """Return the translations of ``page``."""
    return resolve_translations(
        index, page.file.canonical, TranslationScope.PAGE, exclude=page.key
    )


def section_translations(
    section: Section, index: ContentIndex
) -> tuple[TranslatedContent, ...]:
    """Return the translations of ``section``."""
    return resolve_translations(
        index, section.file.canonical, TranslationScope.SECTION, exclude=section.key
    )


__all__ = ["page_translations", "resolve_translations", "section_translations"]
