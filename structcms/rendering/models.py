"""Wire records consumed by the section renderer."""

from __future__ import annotations

import typing as typ

import msgspec


class SectionData(msgspec.Struct, kw_only=True, omit_defaults=True):
    """A section as stored on a page: a type tag plus untyped data.

    Attributes
    ----------
    type : str
        Name of the section definition the data belongs to.
    data : dict[str, Any]
        Field values keyed by field name. Not validated here.
    id : str or None
        Optional opaque identifier some callers attach for stable UI keys.
        Passed through untouched.
    """

    type: str
    data: dict[str, typ.Any] = msgspec.field(default_factory=dict)
    id: str | None = None


__all__ = ["SectionData"]
