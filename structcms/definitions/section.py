"""Section definitions: named, independently schemed content blocks."""

from __future__ import annotations

import dataclasses as dc
import re
import types
import typing as typ

import msgspec

from .._constants import SECTION_STRUCT_TEMPLATE
from ..fields.constructors import build_struct
from ..fields.meta import FieldType, is_optional, resolve_field_meta

if typ.TYPE_CHECKING:
    import collections.abc as cabc

StructT = typ.TypeVar("StructT", bound=msgspec.Struct)

_CAMEL_BOUNDARY = re.compile(r"([A-Z])")
_SEPARATORS = re.compile(r"[_\-\s]+")


def field_label(name: str) -> str:
    """Turn a snake_case or camelCase field name into a human label.

    Examples
    --------
    >>> field_label("heroTitle")
    'Hero Title'
    >>> field_label("cta_button_text")
    'Cta button text'
    """
    spaced = _SEPARATORS.sub(" ", _CAMEL_BOUNDARY.sub(r" \1", name)).strip()
    return spaced[:1].upper() + spaced[1:]


def _struct_name(section_name: str) -> str:
    words = [word for word in _SEPARATORS.split(section_name) if word]
    stem = "".join(word[:1].upper() + word[1:] for word in words if word.isalnum())
    return SECTION_STRUCT_TEMPLATE.format(name=stem)


@dc.dataclass(frozen=True, slots=True)
class FieldDescriptor:
    """Editor-facing summary of one section field.

    Attributes
    ----------
    name : str
        Key of the field in the section's data mapping.
    label : str
        Human-readable label derived from ``name``.
    field_type : FieldType or None
        Semantic kind, or ``None`` for schemas without structcms metadata.
        Editors fall back to a single-line text input in that case.
    required : bool
        Whether the field must be present in section data.
    """

    name: str
    label: str
    field_type: FieldType | None
    required: bool


@dc.dataclass(frozen=True, slots=True)
class SectionDefinition(typ.Generic[StructT]):
    """A named section bound to the msgspec struct that validates its data.

    ``StructT`` is the static data type of the section. It exists for type
    checkers only; instances of it are produced by :meth:`validate`.
    """

    name: str
    schema: type[StructT]
    fields: cabc.Mapping[str, typ.Any]

    def validate(self, data: typ.Any) -> StructT:
        """Convert raw section data into the section struct.

        Raises
        ------
        msgspec.ValidationError
            If ``data`` does not match the section schema.
        """
        return msgspec.convert(data, self.schema)

    def json_schema(self) -> dict[str, typ.Any]:
        """Return the JSON schema of the section data, field tags included."""
        return msgspec.json.schema(self.schema)

    def describe_fields(self) -> list[FieldDescriptor]:
        """Classify each field in declaration order."""
        descriptors: list[FieldDescriptor] = []
        for name, schema in self.fields.items():
            meta = resolve_field_meta(schema)
            descriptors.append(
                FieldDescriptor(
                    name=name,
                    label=field_label(name),
                    field_type=meta.field_type if meta else None,
                    required=not is_optional(schema),
                )
            )
        return descriptors


def define_section(
    *, name: str, fields: cabc.Mapping[str, typ.Any]
) -> SectionDefinition[typ.Any]:
    """Define a section from a mapping of field names to field schemas.

    Parameters
    ----------
    name : str
        Stable identifier used for registry lookups and as the ``type`` tag of
        section records.
    fields : Mapping[str, Any]
        Field schemas, typically built with :data:`structcms.fields.fields`.
        Plain msgspec-compatible annotations are accepted too.

    Returns
    -------
    SectionDefinition
        The definition, holding a read-only copy of ``fields``.

    Examples
    --------
    >>> from structcms.fields import fields
    >>> hero = define_section(
    ...     name="hero",
    ...     fields={"title": fields.string(min_length=1), "image": fields.optional(fields.image())},
    ... )
    >>> hero.validate({"title": "Welcome"}).image is None
    True
    """
    shape = dict(fields)
    schema = build_struct(_struct_name(name), shape)
    return SectionDefinition(
        name=name, schema=schema, fields=types.MappingProxyType(shape)
    )


__all__ = ["FieldDescriptor", "SectionDefinition", "define_section", "field_label"]
