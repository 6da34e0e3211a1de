"""Report stored keys that do not resolve inside a content index.

Projections treat a broken key as fatal and abort on the first one they hit.
This module walks the whole graph up front so a build can list every broken
reference at once instead.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from site_views._constants import NAVIGATION_FIELDS

from .models import TranslationScope

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .index import ContentIndex


@dc.dataclass(frozen=True, slots=True)
class BrokenReference:
    """A stored key whose target is missing from the index.

    Attributes
    ----------
    owner_kind : str
        ``"page"``, ``"section"`` or ``"translation"``.
    owner_key : str
        Key of the entity (or canonical id of the group) holding the key.
    relation : str
        Field the key was stored in, e.g. ``"earlier"`` or ``"includers"``.
    target : str
        The key that failed to resolve.
    """

    owner_kind: str
    owner_key: str
    relation: str
    target: str

    def describe(self) -> str:
        """Return a one-line human readable description."""
        return (
            f"{self.owner_kind} '{self.owner_key}' {self.relation} -> "
            f"missing '{self.target}'"
        )


def find_broken_references(index: ContentIndex) -> list[BrokenReference]:
    """Return every unresolvable key in ``index`` in site order."""
    return list(_iter_broken(index))


def _iter_broken(index: ContentIndex) -> cabc.Iterator[BrokenReference]:
    pages = index.pages
    sections = index.sections
    for key, page in pages.items():
        for relation in NAVIGATION_FIELDS:
            target = getattr(page, relation)
            if target is not None and target not in pages:
                yield BrokenReference("page", key, relation, target)
        for target in page.ancestors:
            if target not in sections:
                yield BrokenReference("page", key, "ancestors", target)
    for key, section in sections.items():
        for relation, targets, store in (
            ("pages", section.pages, pages),
            ("subsections", section.subsections, sections),
            ("includers", section.includers, sections),
            ("ancestors", section.ancestors, sections),
        ):
            for target in targets:
                if target not in store:
                    yield BrokenReference("section", key, relation, target)
    for (scope, canonical), members in index.translations.items():
        store = pages if scope is TranslationScope.PAGE else sections
        for target in members:
            if target not in store:
                yield BrokenReference("translation", canonical, scope.value, target)


__all__ = ["BrokenReference", "find_broken_references"]
