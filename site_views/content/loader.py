"""Load a content graph snapshot from YAML into a :class:`ContentIndex`."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import structlog
from ruamel.yaml import YAML

from site_views._constants import NAVIGATION_FIELDS

from .helpers import (
    DEFAULT_LANG,
    _build_taxonomies,
    _build_toc,
    _date_text,
    _default_slug,
    _derive_canonical,
    _frozen_mapping,
    _optional_int,
    _optional_str,
    _parse_timestamp,
    _str_tuple,
    _url_path,
)
from .index import ContentIndex
from .models import (
    ContentGraphError,
    FileInfo,
    Page,
    PageMeta,
    Section,
    SectionMeta,
)

logger = structlog.get_logger(__name__)


def load_content_index(path: Path) -> ContentIndex:
    """Load the YAML snapshot of a content graph.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML file describing sections and pages.

    Returns
    -------
    ContentIndex
        Index holding every page and section, with translation groups
        derived from canonical identities in declaration order.

    Raises
    ------
    FileNotFoundError
        If the file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    ContentGraphError
        If an entry is missing required fields or holds malformed values.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from site_views.content import load_content_index
    >>> index = load_content_index(Path("content/graph.yaml"))  # doctest: +SKIP
    >>> index.get_page("blog/post.md").lang  # doctest: +SKIP
    'en'
    """
    if not path.exists():
        msg = f"Content graph '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    defaults = _table(raw, "defaults")
    default_lang = _optional_str(defaults.get("lang")) or DEFAULT_LANG

    sections: list[Section] = []
    for key, payload in _table(raw, "sections").items():
        match payload:
            case dict():
                sections.append(
                    _build_section(key=str(key), payload=payload, lang=default_lang)
                )
            case _:
                msg = f"Section '{key}' must be a mapping."
                raise ContentGraphError(msg)

    pages: list[Page] = []
    for key, payload in _table(raw, "pages").items():
        match payload:
            case dict():
                pages.append(
                    _build_page(key=str(key), payload=payload, lang=default_lang)
                )
            case _:
                msg = f"Page '{key}' must be a mapping."
                raise ContentGraphError(msg)

    index = ContentIndex.build(pages=pages, sections=sections)
    logger.debug(
        "content_graph_loaded",
        path=str(path),
        pages=len(index.pages),
        sections=len(index.sections),
        translation_groups=len(index.translations),
    )
    return index


def _table(raw: typ.Mapping[str, typ.Any], name: str) -> dict[str, typ.Any]:
    """Return the top-level mapping ``name``, or an empty one when absent."""
    match raw.get(name):
        case None:
            return {}
        case dict() as table:
            return table
        case _:
            msg = f"Top-level '{name}' must be a mapping."
            raise ContentGraphError(msg)


def _build_file_info(
    *, key: str, payload: typ.Mapping[str, typ.Any], lang: str
) -> FileInfo:
    """Resolve source, relative and canonical paths for one entry."""
    source = _optional_str(payload.get("source")) or key
    relative = _optional_str(payload.get("relative")) or source
    canonical = _optional_str(payload.get("canonical")) or _derive_canonical(
        source, lang
    )
    return FileInfo(path=source, relative=relative, canonical=canonical)


def _require_permalink(payload: typ.Mapping[str, typ.Any], owner: str) -> str:
    permalink = _optional_str(payload.get("permalink"))
    if not permalink:
        msg = f"'{owner}' is missing 'permalink'."
        raise ContentGraphError(msg)
    return permalink


def _build_page(*, key: str, payload: typ.Mapping[str, typ.Any], lang: str) -> Page:
    """Build a Page for a single entry using defaults and overrides."""
    owner = f"page {key}"
    page_lang = _optional_str(payload.get("lang")) or lang
    file_info = _build_file_info(key=key, payload=payload, lang=page_lang)
    permalink = _require_permalink(payload, owner)
    date_value = payload.get("date")
    meta = PageMeta(
        title=_optional_str(payload.get("title")),
        description=_optional_str(payload.get("description")),
        date=_date_text(date_value),
        updated=_date_text(payload.get("updated")),
        datetime=_parse_timestamp(date_value),
        draft=bool(payload.get("draft", False)),
        extra=_frozen_mapping(payload.get("extra"), field="extra", owner=owner),
        taxonomies=_build_taxonomies(payload.get("taxonomies"), owner=owner),
    )
    navigation = {
        name: _optional_str(payload.get(name)) for name in NAVIGATION_FIELDS
    }
    return Page(
        key=key,
        file=file_info,
        lang=page_lang,
        permalink=permalink,
        slug=_optional_str(payload.get("slug")) or _default_slug(file_info.path),
        path=_optional_str(payload.get("path")) or _url_path(permalink),
        content=str(payload.get("content", "")),
        meta=meta,
        summary=_optional_str(payload.get("summary")),
        toc=_build_toc(payload.get("toc"), owner=owner),
        word_count=_optional_int(
            payload.get("word_count"), field="word_count", owner=owner
        ),
        reading_time=_optional_int(
            payload.get("reading_time"), field="reading_time", owner=owner
        ),
        components=_str_tuple(
            payload.get("components"), field="components", owner=owner
        ),
        assets=_str_tuple(payload.get("assets"), field="assets", owner=owner),
        ancestors=_str_tuple(payload.get("ancestors"), field="ancestors", owner=owner),
        **navigation,
    )


def _build_section(
    *, key: str, payload: typ.Mapping[str, typ.Any], lang: str
) -> Section:
    """Build a Section for a single entry using defaults and overrides."""
    owner = f"section {key}"
    section_lang = _optional_str(payload.get("lang")) or lang
    file_info = _build_file_info(key=key, payload=payload, lang=section_lang)
    permalink = _require_permalink(payload, owner)
    meta = SectionMeta(
        title=_optional_str(payload.get("title")),
        description=_optional_str(payload.get("description")),
        draft=bool(payload.get("draft", False)),
        extra=_frozen_mapping(payload.get("extra"), field="extra", owner=owner),
    )
    return Section(
        key=key,
        file=file_info,
        lang=section_lang,
        permalink=permalink,
        path=_optional_str(payload.get("path")) or _url_path(permalink),
        content=str(payload.get("content", "")),
        meta=meta,
        toc=_build_toc(payload.get("toc"), owner=owner),
        word_count=_optional_int(
            payload.get("word_count"), field="word_count", owner=owner
        ),
        reading_time=_optional_int(
            payload.get("reading_time"), field="reading_time", owner=owner
        ),
        components=_str_tuple(
            payload.get("components"), field="components", owner=owner
        ),
        assets=_str_tuple(payload.get("assets"), field="assets", owner=owner),
        pages=_str_tuple(payload.get("pages"), field="pages", owner=owner),
        subsections=_str_tuple(
            payload.get("subsections"), field="subsections", owner=owner
        ),
        includers=_str_tuple(payload.get("includers"), field="includers", owner=owner),
        ancestors=_str_tuple(payload.get("ancestors"), field="ancestors", owner=owner),
    )


__all__ = ["load_content_index"]
