"""Turn views into plain data for template engines and JSON output."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ

import msgspec.json

if typ.TYPE_CHECKING:
    from .models import PageView, SectionView


def _enc_hook(value: object) -> object:
    """Encode the read-only mappings views share with the content index."""
    if isinstance(value, cabc.Mapping):
        return dict(value)
    msg = f"Objects of type {type(value).__name__} are not serializable."
    raise NotImplementedError(msg)


def to_context(view: PageView | SectionView) -> dict[str, typ.Any]:
    """Return ``view`` as nested builtins keyed by field name.

    Tuples become lists and mappings become dicts; field names and ordering
    are kept, and ``None`` fields stay present so templates can test them.
    """
    encoded = msgspec.json.encode(view, enc_hook=_enc_hook)
    return typ.cast("dict[str, typ.Any]", msgspec.json.decode(encoded))


def to_json(view: PageView | SectionView, *, indent: int = 2) -> str:
    """Return ``view`` encoded as a JSON document."""
    encoded = msgspec.json.encode(view, enc_hook=_enc_hook)
    if indent:
        encoded = msgspec.json.format(encoded, indent=indent)
    return encoded.decode("utf-8")


__all__ = ["to_context", "to_json"]
