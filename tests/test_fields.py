"""Unit tests for the field constructor catalog.

Each constructor must produce a msgspec annotation that validates the right
structure and carries decodable metadata, including after structural
refinements are chained on top of it.
"""

from __future__ import annotations

import typing as typ

import msgspec
import pytest

from structcms.errors import FieldDefinitionError
from structcms.fields import (
    build_struct,
    fields,
    get_field_meta,
    is_field_type,
    optional,
    refine,
)


@pytest.mark.parametrize(
    ("constructor", "field_type"),
    [
        (fields.string, "string"),
        (fields.text, "text"),
        (fields.richtext, "richtext"),
        (fields.image, "image"),
        (fields.reference, "reference"),
    ],
)
def test_scalar_constructors_are_tagged_strings(constructor, field_type: str) -> None:
    schema = constructor()
    assert is_field_type(schema, field_type), f"{field_type} tag missing"
    assert msgspec.convert("hello", schema) == "hello"
    with pytest.raises(msgspec.ValidationError):
        msgspec.convert(12, schema)


def test_string_constraints_are_enforced_and_tag_kept() -> None:
    schema = fields.string(min_length=1, max_length=5)
    assert is_field_type(schema, "string")
    assert msgspec.convert("abc", schema) == "abc"
    with pytest.raises(msgspec.ValidationError):
        msgspec.convert("", schema)
    with pytest.raises(msgspec.ValidationError):
        msgspec.convert("abcdef", schema)


def test_chained_refinements_keep_the_tag() -> None:
    """Refining a refined field must not lose the field metadata."""
    schema = refine(refine(fields.text(), min_length=2), max_length=4)
    meta = get_field_meta(schema)
    assert meta is not None, "Expected tag to survive chained refinements"
    assert meta.field_type == "text"
    with pytest.raises(msgspec.ValidationError):
        msgspec.convert("a", schema)
    with pytest.raises(msgspec.ValidationError):
        msgspec.convert("abcde", schema)


def test_refine_without_constraints_returns_schema_unchanged() -> None:
    schema = fields.image()
    assert refine(schema) is schema


def test_refine_rejects_description() -> None:
    with pytest.raises(FieldDefinitionError, match="description"):
        refine(fields.string(), description="Title shown above the fold")


def test_refine_rejects_unknown_constraints() -> None:
    with pytest.raises(FieldDefinitionError, match="Invalid field constraints"):
        fields.string(longest=3)


def test_array_wraps_item_schema() -> None:
    schema = fields.array(fields.image(), max_length=2)
    assert is_field_type(schema, "array")
    assert msgspec.convert(["a.png", "b.png"], schema) == ["a.png", "b.png"]
    with pytest.raises(msgspec.ValidationError):
        msgspec.convert(["a.png", "b.png", "c.png"], schema)
    with pytest.raises(msgspec.ValidationError):
        msgspec.convert([1], schema)


def test_object_builds_nested_struct() -> None:
    schema = fields.object(
        {"label": fields.string(), "icon": fields.optional(fields.image())}
    )
    assert is_field_type(schema, "object")
    value = msgspec.convert({"label": "Docs"}, schema)
    assert value.label == "Docs"
    assert value.icon is None
    with pytest.raises(msgspec.ValidationError):
        msgspec.convert({"icon": "x.png"}, schema)


def test_object_requires_fields() -> None:
    with pytest.raises(FieldDefinitionError, match="at least one field"):
        fields.object({})


def test_object_rejects_invalid_field_names() -> None:
    with pytest.raises(FieldDefinitionError, match="not a valid identifier"):
        fields.object({"cta-label": fields.string()})


def test_optional_keeps_tag_and_accepts_none() -> None:
    schema = optional(fields.richtext())
    assert is_field_type(schema, "richtext")
    assert msgspec.convert(None, schema) is None
    assert msgspec.convert("<p>x</p>", schema) == "<p>x</p>"


def test_optional_is_idempotent() -> None:
    schema = optional(fields.text())
    assert optional(schema) is schema


def test_field_tag_appears_in_json_schema() -> None:
    """Schema consumers outside Python can read the tag from JSON schema."""
    schema = msgspec.json.schema(fields.richtext(min_length=1))
    assert schema["type"] == "string"
    assert schema["minLength"] == 1
    meta = get_field_meta(fields.richtext())
    assert meta is not None
    assert schema["description"].endswith('{"fieldType":"richtext","version":1}')


@pytest.mark.parametrize(
    "build",
    [
        lambda: refine(fields.object({"label": fields.string()}), min_length=1),
        lambda: refine(optional(fields.string()), min_length=1),
        lambda: fields.string(ge=1),
    ],
    ids=["length-on-object", "length-on-optional", "bound-on-string"],
)
def test_mismatched_constraints_fail_when_defined(build) -> None:
    with pytest.raises(FieldDefinitionError, match="Invalid field constraints"):
        build()


def test_build_struct_rejects_unresolvable_member_schemas() -> None:
    with pytest.raises(FieldDefinitionError, match="Cannot build 'CardSection'"):
        build_struct("CardSection", {"count": typ.Annotated[int, msgspec.Meta(min_length=1)]})


def test_standalone_object_keeps_default_struct_name() -> None:
    schema = fields.object({"label": fields.string()})
    assert typ.get_args(schema)[0].__name__ == "ObjectField"


def test_nested_objects_are_named_after_their_path() -> None:
    cta = fields.object(
        {"label": fields.string(), "link": fields.object({"href": fields.reference()})}
    )
    gallery = fields.array(fields.object({"src": fields.image()}))
    struct = build_struct("HeroSection", {"cta": cta, "gallery_items": gallery})
    assert typ.get_args(cta)[0].__name__ == "HeroSectionCta"
    hints = struct.__annotations__
    assert "HeroSectionCtaLink" in repr(typ.get_args(cta)[0].__annotations__["link"])
    assert "HeroSectionGalleryItems" in repr(hints["gallery_items"])
