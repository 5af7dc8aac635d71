"""Helpers that turn content model mappings into field schemas."""

from __future__ import annotations

import typing as typ

from ..errors import ContentModelError, FieldDefinitionError
from ..fields import FIELD_TYPES, fields

CONSTRAINT_KEYS: tuple[str, ...] = (
    "min_length",
    "max_length",
    "pattern",
    "title",
    "examples",
)
_SCALAR_TYPES = frozenset({"string", "text", "richtext", "image", "reference"})


def _require_mapping(value: object, where: str) -> typ.Mapping[str, typ.Any]:
    """Return ``value`` when it is a mapping, else raise ContentModelError."""
    match value:
        case dict():
            return value
        case _:
            msg = f"'{where}' must be a mapping."
            raise ContentModelError(msg)


def _normalize_names(value: object, where: str) -> list[str]:
    """Normalize a list of names, rejecting blanks and non-lists."""
    match value:
        case None:
            return []
        case list() as items:
            pass
        case _:
            msg = f"'{where}' must be a list of names."
            raise ContentModelError(msg)
    names: list[str] = []
    for item in items:
        text = str(item).strip() if item is not None else ""
        if not text:
            msg = f"'{where}' contains an empty name."
            raise ContentModelError(msg)
        names.append(text)
    return names


def _build_field(spec: object, where: str) -> typ.Any:
    """Build a field schema from a spec such as ``{type: string, min_length: 1}``.

    A bare string is shorthand for ``{type: <string>}``.
    """
    match spec:
        case str() as field_type:
            payload: typ.Mapping[str, typ.Any] = {"type": field_type}
        case {"type": str(), **_rest}:
            payload = spec
        case _:
            msg = f"Field '{where}' needs a 'type' naming one of: {', '.join(FIELD_TYPES)}."
            raise ContentModelError(msg)

    field_type = payload["type"]
    constraints = {key: payload[key] for key in CONSTRAINT_KEYS if key in payload}
    try:
        if field_type in _SCALAR_TYPES:
            schema = getattr(fields, field_type)(**constraints)
        elif field_type == "array":
            if "items" not in payload:
                msg = f"Array field '{where}' requires 'items'."
                raise ContentModelError(msg)
            item_schema = _build_field(payload["items"], f"{where}.items")
            schema = fields.array(item_schema, **constraints)
        elif field_type == "object":
            shape = _build_shape(payload.get("fields"), f"{where}.fields")
            schema = fields.refine(fields.object(shape), **constraints)
        else:
            msg = (
                f"Field '{where}' has unknown type '{field_type}'. "
                f"Known types: {', '.join(FIELD_TYPES)}."
            )
            raise ContentModelError(msg)
    except FieldDefinitionError as exc:
        msg = f"Field '{where}' is invalid: {exc}"
        raise ContentModelError(msg) from exc

    match payload.get("optional", False):
        case True:
            schema = fields.optional(schema)
        case False:
            pass
        case other:
            msg = f"Field '{where}' has 'optional: {other!r}'; use true or false."
            raise ContentModelError(msg)
    return schema


def _build_shape(payload: object, where: str) -> dict[str, typ.Any]:
    """Build a name-to-schema mapping from a ``fields`` block."""
    mapping = _require_mapping(payload, where)
    if not mapping:
        msg = f"'{where}' must declare at least one field."
        raise ContentModelError(msg)
    return {
        str(name): _build_field(spec, f"{where}.{name}")
        for name, spec in mapping.items()
    }


__all__ = [
    "CONSTRAINT_KEYS",
    "_build_field",
    "_build_shape",
    "_normalize_names",
    "_require_mapping",
]
