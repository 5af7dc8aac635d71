"""Field constructors for declaring CMS content schemas.

Every constructor returns a plain msgspec type annotation tagged with a
:class:`~structcms.fields.meta.FieldMeta` in its description slot. The scalar
kinds are all structurally ``str``; the tag is what tells an editor that one
string is rich text and another is an image reference.

Examples
--------
>>> from structcms.fields import fields, is_field_type
>>> title = fields.string(min_length=1, max_length=100)
>>> is_field_type(title, "string")
True
>>> gallery = fields.array(fields.image(), max_length=12)
>>> is_field_type(gallery, "array")
True
"""

from __future__ import annotations

import typing as typ

import msgspec

from .._constants import OBJECT_STRUCT_NAME
from ..errors import FieldDefinitionError
from .meta import FieldType, describe, encode_field_meta, get_field_meta, is_optional

if typ.TYPE_CHECKING:
    import collections.abc as cabc

_RESERVED_META_KEYS = frozenset({"description"})


def _tag(schema: object, field_type: FieldType) -> typ.Any:
    return typ.Annotated[schema, msgspec.Meta(description=encode_field_meta(field_type))]


def _check_schema(schema: object) -> None:
    """Make msgspec resolve ``schema`` now; raises ``TypeError`` if it can't.

    msgspec only checks that constraints fit their type when a decoder is
    built, which would otherwise happen at the first validation.
    """
    msgspec.json.Decoder(schema)


def _pascal(field_name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in field_name.split("_"))


def _nested_structs(schema: object) -> cabc.Iterator[type[msgspec.Struct]]:
    """Yield the struct classes reachable through wrappers of ``schema``."""
    origin = typ.get_origin(schema)
    if origin is None:
        if isinstance(schema, type) and issubclass(schema, msgspec.Struct):
            yield schema
        return
    args = typ.get_args(schema)
    if origin is typ.Annotated:
        args = args[:1]
    for arg in args:
        yield from _nested_structs(arg)


def _claim_name(struct: type[msgspec.Struct], name: str) -> None:
    """Rename an anonymous object struct and, recursively, its own objects.

    JSON schema ``$defs`` are keyed by class name, so every nested object in
    one section needs its own. Structs that already carry a name keep it.
    """
    if struct.__name__ != OBJECT_STRUCT_NAME:
        return
    struct.__name__ = struct.__qualname__ = name
    for field_name, schema in struct.__annotations__.items():
        for nested in _nested_structs(schema):
            _claim_name(nested, f"{name}{_pascal(field_name)}")


def refine(schema: typ.Any, **constraints: typ.Any) -> typ.Any:
    """Attach extra ``msgspec.Meta`` constraints to ``schema``.

    Nested ``Annotated`` aliases flatten and ``description`` is refused here,
    so the field tag stays the effective description however many
    refinements are chained.

    Parameters
    ----------
    schema : Any
        Field schema, usually produced by one of the constructors.
    **constraints : Any
        Keyword arguments accepted by ``msgspec.Meta`` (``min_length``,
        ``max_length``, ``pattern``, ``ge``, ``title``, ``examples``...).

    Returns
    -------
    Any
        A new annotation wrapping ``schema``.

    Raises
    ------
    FieldDefinitionError
        If ``description`` is supplied (the slot carries the field tag), the
        constraints are rejected by msgspec, or they do not apply to the
        type of ``schema`` (``min_length`` on an object, ``ge`` on a string).
    """
    if not constraints:
        return schema
    reserved = _RESERVED_META_KEYS.intersection(constraints)
    if reserved:
        msg = "The 'description' slot carries field metadata; use 'title' instead."
        raise FieldDefinitionError(msg)
    try:
        refined = typ.Annotated[schema, msgspec.Meta(**constraints)]
        _check_schema(refined)
    except (TypeError, ValueError) as exc:
        msg = f"Invalid field constraints {sorted(constraints)}: {exc}"
        raise FieldDefinitionError(msg) from exc
    return refined


def optional(schema: typ.Any) -> typ.Any:
    """Return ``schema | None`` with the field tag kept at the outer level."""
    if is_optional(schema):
        return schema
    wrapped = typ.Optional[schema]  # noqa: UP007 - Annotated aliases need typing.Optional
    tag = describe(schema)
    if get_field_meta(schema) is None:
        return wrapped
    return typ.Annotated[wrapped, msgspec.Meta(description=tag)]


def string(**constraints: typ.Any) -> typ.Any:
    """Short, single-line text."""
    return refine(_tag(str, "string"), **constraints)


def text(**constraints: typ.Any) -> typ.Any:
    """Long-form, multi-line text."""
    return refine(_tag(str, "text"), **constraints)


def richtext(**constraints: typ.Any) -> typ.Any:
    """HTML produced by a WYSIWYG editor."""
    return refine(_tag(str, "richtext"), **constraints)


def image(**constraints: typ.Any) -> typ.Any:
    """Media asset reference, stored as an opaque ID or URL."""
    return refine(_tag(str, "image"), **constraints)


def reference(**constraints: typ.Any) -> typ.Any:
    """Reference to another content entity, stored as an opaque slug or ID."""
    return refine(_tag(str, "reference"), **constraints)


def array(item_schema: typ.Any, **constraints: typ.Any) -> typ.Any:
    """Homogeneous ordered sequence of ``item_schema`` values."""
    return refine(_tag(list[item_schema], "array"), **constraints)


def object(  # noqa: A001 - mirrors the field kind name
    shape: cabc.Mapping[str, typ.Any], *, name: str = OBJECT_STRUCT_NAME
) -> typ.Any:
    """Nested object built from a name-to-schema mapping.

    Parameters
    ----------
    shape : Mapping[str, Any]
        Field schemas of the nested object. Optional members default to
        ``None``.
    name : str, optional
        Class name for the generated struct, visible in reprs and JSON schema
        ``$defs``. Left at the default, the enclosing section renames it
        after its own struct and the field, e.g. ``HeroSectionCta``.
    """
    return _tag(build_struct(name, shape), "object")


def build_struct(
    name: str, shape: cabc.Mapping[str, typ.Any]
) -> type[msgspec.Struct]:
    """Build a ``msgspec.Struct`` subclass from a name-to-schema mapping.

    Fields keep their declared order; members whose schema accepts ``None``
    default to ``None`` and every other member is required. Nested objects
    still carrying the default struct name are renamed after ``name`` and
    their field.

    Raises
    ------
    FieldDefinitionError
        If the shape is empty, a field name is not an identifier, or msgspec
        cannot resolve one of the member schemas.
    """
    if not shape:
        msg = f"'{name}' needs at least one field."
        raise FieldDefinitionError(msg)
    members: list[tuple[str, typ.Any] | tuple[str, typ.Any, None]] = []
    for field_name, schema in shape.items():
        if not field_name.isidentifier():
            msg = f"Field name '{field_name}' in '{name}' is not a valid identifier."
            raise FieldDefinitionError(msg)
        if is_optional(schema):
            members.append((field_name, schema, None))
        else:
            members.append((field_name, schema))
    try:
        struct = msgspec.defstruct(name, members, kw_only=True)
        _check_schema(struct)
    except (TypeError, ValueError) as exc:
        msg = f"Cannot build '{name}': {exc}"
        raise FieldDefinitionError(msg) from exc
    if name != OBJECT_STRUCT_NAME:
        for field_name, schema in shape.items():
            for nested in _nested_structs(schema):
                _claim_name(nested, f"{name}{_pascal(field_name)}")
    return struct


class _FieldNamespace:
    """Attribute access to the field constructors, e.g. ``fields.text()``."""

    string = staticmethod(string)
    text = staticmethod(text)
    richtext = staticmethod(richtext)
    image = staticmethod(image)
    reference = staticmethod(reference)
    array = staticmethod(array)
    object = staticmethod(object)
    optional = staticmethod(optional)
    refine = staticmethod(refine)

    def __repr__(self) -> str:
        return "<structcms fields>"


fields = _FieldNamespace()

__all__ = [
    "array",
    "build_struct",
    "fields",
    "image",
    "object",
    "optional",
    "reference",
    "refine",
    "richtext",
    "string",
    "text",
]
