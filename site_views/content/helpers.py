"""Utility helpers shared by the content graph loader."""

from __future__ import annotations

import datetime as dt
import posixpath
import types
import typing as typ
from urllib.parse import urlsplit

from .models import ContentGraphError, Heading

DEFAULT_LANG = "en"


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _optional_int(value: object | None, *, field: str, owner: str) -> int | None:
    """Return ``value`` as an int, rejecting anything that is not a whole number."""
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"'{owner}' field '{field}' must be an integer, got {value!r}."
        raise ContentGraphError(msg)
    return value


def _str_tuple(value: object | None, *, field: str, owner: str) -> tuple[str, ...]:
    """Normalize a YAML scalar or sequence into a tuple of strings."""
    match value:
        case None:
            return ()
        case str():
            return (value,)
        case list() | tuple():
            return tuple(str(item) for item in value)
        case _:
            msg = f"'{owner}' field '{field}' must be a string or a list."
            raise ContentGraphError(msg)


def _frozen_mapping(value: object | None, *, field: str, owner: str) -> typ.Mapping:
    """Return a read-only copy of a YAML mapping, or an empty one."""
    if value is None:
        return types.MappingProxyType({})
    if not isinstance(value, dict):
        msg = f"'{owner}' field '{field}' must be a mapping."
        raise ContentGraphError(msg)
    return types.MappingProxyType(dict(value))


def _build_taxonomies(
    value: object | None, *, owner: str
) -> typ.Mapping[str, tuple[str, ...]]:
    """Build a read-only taxonomy mapping of name to ordered term list."""
    raw = _frozen_mapping(value, field="taxonomies", owner=owner)
    return types.MappingProxyType(
        {
            str(name): _str_tuple(terms, field=f"taxonomies.{name}", owner=owner)
            for name, terms in raw.items()
        }
    )


def _build_toc(value: object | None, *, owner: str) -> tuple[Heading, ...]:
    """Build table-of-contents headings from a nested YAML list."""
    if value is None:
        return ()
    if not isinstance(value, list):
        msg = f"'{owner}' field 'toc' must be a list of headings."
        raise ContentGraphError(msg)
    headings: list[Heading] = []
    for entry in value:
        if not isinstance(entry, dict) or "title" not in entry:
            msg = f"'{owner}' has a toc entry without a title."
            raise ContentGraphError(msg)
        title = str(entry["title"])
        anchor = str(entry.get("id") or _slugify(title))
        headings.append(
            Heading(
                title=title,
                id=anchor,
                permalink=str(entry.get("permalink") or f"#{anchor}"),
                level=int(entry.get("level", 1)),
                children=_build_toc(entry.get("children"), owner=owner),
            )
        )
    return tuple(headings)


def _slugify(value: str) -> str:
    """Convert a string into a lowercase hyphen-separated slug."""
    cleaned = "".join(char if char.isalnum() else "-" for char in value.lower())
    return "-".join(part for part in cleaned.split("-") if part)


def _derive_canonical(source: str, lang: str) -> str:
    """Return the language-independent identity of ``source``.

    Both conventions for translated files are understood: a language
    directory prefix (``fr/post.md``) and a language suffix before the
    extension (``post.fr.md``).

    >>> _derive_canonical("fr/post.md", "fr")
    'post.md'
    >>> _derive_canonical("blog/post.fr.md", "fr")
    'blog/post.md'
    >>> _derive_canonical("blog/post.md", "en")
    'blog/post.md'
    """
    head, _, rest = source.partition("/")
    if rest and head == lang:
        return rest
    directory, filename = posixpath.split(source)
    stem, ext = posixpath.splitext(filename)
    suffix = f".{lang}"
    if stem.endswith(suffix):
        return posixpath.join(directory, stem[: -len(suffix)] + ext)
    return source


def _url_path(permalink: str) -> str:
    """Return the path component of ``permalink``, defaulting to ``/``."""
    return urlsplit(permalink).path or "/"


def _default_slug(source: str) -> str:
    """Derive a page slug from the file name when none is configured."""
    stem = posixpath.splitext(posixpath.basename(source))[0]
    if stem in {"index", "_index"}:
        stem = posixpath.basename(posixpath.dirname(source))
    return _slugify(stem.split(".", 1)[0])


def _parse_timestamp(value: dt.datetime | dt.date | str | None) -> dt.datetime | None:
    """Return a datetime parsed from ``value``, or None.

    Plain dates become midnight datetimes. Timezone information is kept as
    written; the year/month/day split uses the wall-clock date of the
    source.
    """
    match value:
        case dt.datetime():
            return value
        case dt.date():
            return dt.datetime(value.year, value.month, value.day)
        case str() as text:
            sanitized = text.strip()
            if not sanitized:
                return None
            if sanitized.endswith("Z"):
                sanitized = sanitized[:-1] + "+00:00"
            try:
                return dt.datetime.fromisoformat(sanitized)
            except ValueError:
                return None
        case _:
            return None


def _date_text(value: object | None) -> str | None:
    """Return the front-matter spelling of a date value."""
    match value:
        case dt.date():
            return value.isoformat()
        case _:
            return _optional_str(value)


__all__ = [
    "DEFAULT_LANG",
    "_build_taxonomies",
    "_build_toc",
    "_date_text",
    "_default_slug",
    "_derive_canonical",
    "_frozen_mapping",
    "_optional_int",
    "_optional_str",
    "_parse_timestamp",
    "_slugify",
    "_str_tuple",
    "_url_path",
]
