"""Content modeling core for structcms.

Applications declare typed content sections, page types, and navigations,
collect them in a read-only registry, and dispatch stored section records to
their own render functions. Field schemas are msgspec annotations carrying a
semantic field kind, so editors can pick an input widget per field.

Exports
-------
- ``fields``: catalog of field constructors (``fields.string()``...).
- ``define_section`` / ``define_page_type`` / ``define_navigation``.
- ``create_registry``: build the name index used by every consumer.
- ``create_section_renderer``: map section types to render functions.

Examples
--------
>>> from structcms import create_registry, define_section, fields
>>> hero = define_section(name="hero", fields={"title": fields.string()})
>>> create_registry(sections=[hero]).get_section("hero") is hero
True
"""

from __future__ import annotations

from .definitions import (
    DEFAULT_NAVIGATION_ITEM_SCHEMA,
    FieldDescriptor,
    NavigationDefinition,
    NavigationItem,
    PageTypeDefinition,
    SectionDefinition,
    define_navigation,
    define_page_type,
    define_section,
)
from .errors import (
    ContentModelError,
    DuplicateDefinitionError,
    FieldDefinitionError,
    StructCMSError,
)
from .fields import (
    FIELD_TYPES,
    FieldMeta,
    FieldType,
    decode_field_meta,
    encode_field_meta,
    fields,
    get_field_meta,
    is_field_type,
    resolve_field_meta,
)
from .registry import Registry, create_registry
from .rendering import SectionData, SectionRenderer, create_section_renderer

__all__ = [
    "DEFAULT_NAVIGATION_ITEM_SCHEMA",
    "FIELD_TYPES",
    "ContentModelError",
    "DuplicateDefinitionError",
    "FieldDefinitionError",
    "FieldDescriptor",
    "FieldMeta",
    "FieldType",
    "NavigationDefinition",
    "NavigationItem",
    "PageTypeDefinition",
    "Registry",
    "SectionData",
    "SectionDefinition",
    "SectionRenderer",
    "StructCMSError",
    "create_registry",
    "create_section_renderer",
    "decode_field_meta",
    "define_navigation",
    "define_page_type",
    "define_section",
    "encode_field_meta",
    "fields",
    "get_field_meta",
    "is_field_type",
    "resolve_field_meta",
]
