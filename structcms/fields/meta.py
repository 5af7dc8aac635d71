"""Encode and decode semantic field metadata carried by msgspec schemas.

msgspec has no slot for CMS-specific field kinds, so the kind travels in the
``description`` of a ``msgspec.Meta`` annotation as a prefixed JSON payload.
The same string surfaces in ``msgspec.json.schema`` output, which lets schema
consumers outside Python classify fields without importing this package.

Examples
--------
>>> encode_field_meta("richtext")
'__structcms_field__{"fieldType":"richtext","version":1}'
>>> decode_field_meta(encode_field_meta("image"))
FieldMeta(field_type='image', version=1)
>>> decode_field_meta("Plain prose written by a person.") is None
True
"""

from __future__ import annotations

import types
import typing as typ

import msgspec

from .._constants import FIELD_META_PREFIX, FIELD_META_VERSION
from ..errors import FieldDefinitionError

FieldType = typ.Literal[
    "string", "text", "richtext", "image", "reference", "array", "object"
]
FIELD_TYPES: tuple[FieldType, ...] = typ.get_args(FieldType)

_UNION_ORIGINS = (typ.Union, types.UnionType)
_NONE_TYPE = type(None)


class FieldMeta(msgspec.Struct, frozen=True):
    """Semantic tag attached to a field schema.

    Attributes
    ----------
    field_type : FieldType
        Editing/rendering kind of the field, independent of its structure.
    version : int
        Metadata format version. Payloads written before versioning existed
        carry no version and decode as ``1``.
    """

    field_type: FieldType = msgspec.field(name="fieldType")
    version: int = FIELD_META_VERSION


def encode_field_meta(field_type: FieldType) -> str:
    """Return the description string that tags a schema as ``field_type``."""
    if field_type not in FIELD_TYPES:
        msg = f"Unknown field type '{field_type}'. Known types: {', '.join(FIELD_TYPES)}"
        raise FieldDefinitionError(msg)
    payload = msgspec.json.encode(FieldMeta(field_type=field_type))
    return f"{FIELD_META_PREFIX}{payload.decode('utf-8')}"


def decode_field_meta(description: object) -> FieldMeta | None:
    """Parse a description string produced by :func:`encode_field_meta`.

    Parameters
    ----------
    description : object
        Candidate description. Anything that is not a string starting with
        the structcms prefix is ignored.

    Returns
    -------
    FieldMeta or None
        The decoded metadata, or ``None`` when the description is absent,
        foreign, malformed JSON, or names an unknown field type. This function
        never raises.
    """
    if not isinstance(description, str) or not description.startswith(
        FIELD_META_PREFIX
    ):
        return None
    payload = description[len(FIELD_META_PREFIX) :]
    try:
        return msgspec.json.decode(payload, type=FieldMeta)
    except (msgspec.MsgspecError, UnicodeError):
        return None


def describe(schema: object) -> str | None:
    """Return the effective ``Meta.description`` of ``schema``.

    Only the outermost ``Annotated`` layer counts; when several ``Meta``
    annotations carry a description the last one wins, matching how msgspec
    merges them.
    """
    if typ.get_origin(schema) is not typ.Annotated:
        return None
    description: str | None = None
    for item in getattr(schema, "__metadata__", ()):
        if isinstance(item, msgspec.Meta) and item.description is not None:
            description = item.description
    return description


def get_field_meta(schema: object) -> FieldMeta | None:
    """Return the field metadata attached directly to ``schema``."""
    return decode_field_meta(describe(schema))


def is_field_type(schema: object, field_type: FieldType) -> bool:
    """Report whether ``schema`` is tagged with ``field_type``."""
    meta = get_field_meta(schema)
    return meta is not None and meta.field_type == field_type


def _unwrap(schema: object) -> object | None:
    """Strip one ``Annotated`` or ``X | None`` layer, or return ``None``."""
    if typ.get_origin(schema) is typ.Annotated:
        return typ.get_args(schema)[0]
    if typ.get_origin(schema) in _UNION_ORIGINS:
        members = [arg for arg in typ.get_args(schema) if arg is not _NONE_TYPE]
        if len(members) == 1:
            return members[0]
    return None


def resolve_field_meta(schema: object) -> FieldMeta | None:
    """Return the metadata of ``schema``, looking through optional wrappers.

    Hand-written annotations such as ``fields.text() | None`` put the tag one
    level down; this walks ``Annotated`` and single-member unions until a tag
    is found.
    """
    current: object | None = schema
    while current is not None:
        meta = get_field_meta(current)
        if meta is not None:
            return meta
        current = _unwrap(current)
    return None


def is_optional(schema: object) -> bool:
    """Report whether ``schema`` accepts ``None``."""
    current: object = schema
    while typ.get_origin(current) is typ.Annotated:
        current = typ.get_args(current)[0]
    if current is None or current is _NONE_TYPE or current is typ.Any:
        return True
    if typ.get_origin(current) in _UNION_ORIGINS:
        return any(is_optional(arg) for arg in typ.get_args(current))
    return False


__all__ = [
    "FIELD_TYPES",
    "FieldMeta",
    "FieldType",
    "decode_field_meta",
    "describe",
    "encode_field_meta",
    "get_field_meta",
    "is_field_type",
    "is_optional",
    "resolve_field_meta",
]
