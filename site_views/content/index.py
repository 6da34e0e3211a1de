"""Read-only content index shared by every projection of a render pass.

The index owns all pages and sections of a site and the translation groups
joining them across languages. It never changes once built, so any number of
projections may read it concurrently.

Example
-------
>>> from site_views.content import ContentIndex, FileInfo, Page
>>> page = Page(
...     key="post",
...     file=FileInfo("en/post.md", "en/post.md", "post.md"),
...     lang="en",
...     permalink="https://example.invalid/post/",
...     slug="post",
...     path="/post/",
... )
>>> index = ContentIndex.build(pages=[page])
>>> index.get_page("post").slug
'post'
"""

from __future__ import annotations

import collections.abc as cabc
import types
import typing as typ

import structlog

from .models import (
    BrokenReferenceError,
    ContentKey,
    Page,
    Section,
    TranslationScope,
)

logger = structlog.get_logger(__name__)

TranslationGroups = typ.Mapping[tuple[TranslationScope, str], tuple[ContentKey, ...]]


class ContentIndex:
    """Immutable store mapping stable keys to pages, sections and groups."""

    def __init__(
        self,
        pages: typ.Mapping[ContentKey, Page],
        sections: typ.Mapping[ContentKey, Section],
        translations: TranslationGroups,
    ) -> None:
        """Wrap already-keyed entities and translation groups.

        Parameters
        ----------
        pages : Mapping[str, Page]
            Pages keyed by their stable key, in site order.
        sections : Mapping[str, Section]
            Sections keyed by their stable key, in site order.
        translations : Mapping[tuple[TranslationScope, str], tuple[str, ...]]
            Translation groups keyed by scope and canonical identity. Each
            group lists every member, including the entity being resolved.
        """
        self._pages = types.MappingProxyType(dict(pages))
        self._sections = types.MappingProxyType(dict(sections))
        self._translations = types.MappingProxyType(
            {key: _dedupe(members) for key, members in translations.items()}
        )
        self._page_paths = types.MappingProxyType(_path_lookup(self._pages.values()))
        self._section_paths = types.MappingProxyType(
            _path_lookup(self._sections.values())
        )

    @classmethod
    def build(
        cls,
        *,
        pages: cabc.Iterable[Page] = (),
        sections: cabc.Iterable[Section] = (),
    ) -> ContentIndex:
        """Index entities by key and group translations by canonical identity.

        Groups keep the order in which members were supplied.
        """
        page_map: dict[ContentKey, Page] = {}
        section_map: dict[ContentKey, Section] = {}
        groups: dict[tuple[TranslationScope, str], list[ContentKey]] = {}
        for page in pages:
            page_map[page.key] = page
            groups.setdefault((TranslationScope.PAGE, page.file.canonical), []).append(
                page.key
            )
        for section in sections:
            section_map[section.key] = section
            groups.setdefault(
                (TranslationScope.SECTION, section.file.canonical), []
            ).append(section.key)
        translations = {
            key: tuple(members) for key, members in groups.items() if len(members) > 1
        }
        return cls(page_map, section_map, translations)

    @property
    def pages(self) -> typ.Mapping[ContentKey, Page]:
        """Return a read-only view of every page keyed by its stable key."""
        return self._pages

    @property
    def sections(self) -> typ.Mapping[ContentKey, Section]:
        """Return a read-only view of every section keyed by its stable key."""
        return self._sections

    @property
    def translations(self) -> TranslationGroups:
        """Return a read-only view of the translation groups."""
        return self._translations

    def get_page(self, key: ContentKey) -> Page:
        """Return the page stored under ``key``.

        Raises
        ------
        BrokenReferenceError
            If no page is stored under ``key``.
        """
        try:
            return self._pages[key]
        except KeyError:
            logger.error("broken_reference", kind="page", key=key)
            raise BrokenReferenceError("page", key) from None

    def get_section(self, key: ContentKey) -> Section:
        """Return the section stored under ``key``.

        Raises
        ------
        BrokenReferenceError
            If no section is stored under ``key``.
        """
        try:
            return self._sections[key]
        except KeyError:
            logger.error("broken_reference", kind="section", key=key)
            raise BrokenReferenceError("section", key) from None

    def get_section_path(self, key: ContentKey) -> str:
        """Return the relative path of the section stored under ``key``."""
        return self.get_section(key).file.relative

    def get_page_by_path(self, path: str) -> Page:
        """Return the page whose source or relative path is ``path``."""
        try:
            key = self._page_paths[path]
        except KeyError:
            raise BrokenReferenceError("page path", path) from None
        return self._pages[key]

    def get_section_by_path(self, path: str) -> Section:
        """Return the section whose source or relative path is ``path``."""
        try:
            key = self._section_paths[path]
        except KeyError:
            raise BrokenReferenceError("section path", path) from None
        return self._sections[key]

    def get_translation_group(
        self, canonical_id: str, scope: TranslationScope
    ) -> tuple[ContentKey, ...]:
        """Return every key sharing ``canonical_id`` in ``scope``.

        An unknown canonical identity yields an empty group; untranslated
        content is the common case, not an error.
        """
        return self._translations.get((scope, canonical_id), ())

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(pages={len(self._pages)}, "
            f"sections={len(self._sections)}, "
            f"translations={len(self._translations)})"
        )


def _path_lookup(entities: cabc.Iterable[Page | Section]) -> dict[str, ContentKey]:
    """Map source and relative paths to keys; the first entity claiming a path wins."""
    lookup: dict[str, ContentKey] = {}
    for entity in entities:
        lookup.setdefault(entity.file.path, entity.key)
        lookup.setdefault(entity.file.relative, entity.key)
    return lookup


def _dedupe(members: cabc.Iterable[ContentKey]) -> tuple[ContentKey, ...]:
    """Drop repeated keys while keeping first-seen order."""
    return tuple(dict.fromkeys(members))


__all__ = ["ContentIndex", "TranslationGroups"]
