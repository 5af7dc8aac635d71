"""Semantic field kinds layered over msgspec schemas.

This subpackage holds the metadata codec that tags a msgspec annotation with
a CMS field kind, and the catalog of constructors (:data:`fields`) that
produce tagged annotations. Consumers classify a field with
:func:`get_field_meta` or :func:`is_field_type`.

Examples
--------
>>> from structcms.fields import fields, get_field_meta
>>> get_field_meta(fields.richtext()).field_type
'richtext'
"""

from .constructors import (
    array,
    build_struct,
    fields,
    image,
    optional,
    reference,
    refine,
    richtext,
    string,
    text,
)
from .meta import (
    FIELD_TYPES,
    FieldMeta,
    FieldType,
    decode_field_meta,
    describe,
    encode_field_meta,
    get_field_meta,
    is_field_type,
    is_optional,
    resolve_field_meta,
)

__all__ = [
    "FIELD_TYPES",
    "FieldMeta",
    "FieldType",
    "array",
    "build_struct",
    "decode_field_meta",
    "describe",
    "encode_field_meta",
    "fields",
    "get_field_meta",
    "image",
    "is_field_type",
    "is_optional",
    "optional",
    "reference",
    "refine",
    "resolve_field_meta",
    "richtext",
    "string",
    "text",
]
