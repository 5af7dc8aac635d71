"""Load content model YAML into structcms definitions."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from ..definitions import (
    NavigationDefinition,
    PageTypeDefinition,
    SectionDefinition,
    define_navigation,
    define_page_type,
    define_section,
)
from ..errors import ContentModelError
from ..fields import build_struct
from .helpers import _build_shape, _normalize_names, _require_mapping
from .models import ContentModel


def load_content_model(path: Path) -> ContentModel:
    """Load the YAML file describing sections, page types, and navigations.

    Parameters
    ----------
    path : Path
        Filesystem path to the content model (for example, ``content.yaml``).

    Returns
    -------
    ContentModel
        Definitions in file order, plus the ``settings.strict`` flag.

    Raises
    ------
    FileNotFoundError
        If the file does not exist at ``path``.
    ContentModelError
        If the top-level structure is not a mapping, no sections are declared,
        or any section, field, page type, or navigation entry is invalid.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> model = load_content_model(Path("content.yaml"))  # doctest: +SKIP
    >>> registry = model.build_registry()  # doctest: +SKIP
    >>> registry.get_page_type("landing").allowed_sections  # doctest: +SKIP
    ('hero', 'content')
    """
    if not path.exists():
        msg = f"Content model file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    model = parse_content_model(loaded)
    model.source = path
    return model


def parse_content_model(raw: object) -> ContentModel:
    """Build a :class:`ContentModel` from an already parsed mapping."""
    match raw:
        case dict():
            payload: dict[str, typ.Any] = dict(raw)
        case _:
            msg = "Top-level content model structure must be a mapping."
            raise ContentModelError(msg)

    settings = _require_mapping(payload.get("settings") or {}, "settings")
    sections_raw = payload.get("sections") or {}
    if not sections_raw:
        msg = "No sections defined in content model."
        raise ContentModelError(msg)

    sections = [
        _build_section(str(name), spec)
        for name, spec in _require_mapping(sections_raw, "sections").items()
    ]
    page_types = [
        _build_page_type(str(name), spec)
        for name, spec in _require_mapping(
            payload.get("page_types") or {}, "page_types"
        ).items()
    ]
    navigations = [
        _build_navigation(str(name), spec)
        for name, spec in _require_mapping(
            payload.get("navigations") or {}, "navigations"
        ).items()
    ]
    return ContentModel(
        sections=sections,
        page_types=page_types,
        navigations=navigations,
        strict=bool(settings.get("strict", False)),
    )


def _build_section(name: str, spec: object) -> SectionDefinition[typ.Any]:
    """Build one section definition from its mapping."""
    where = f"sections.{name}"
    payload = _require_mapping(spec, where)
    shape = _build_shape(payload.get("fields"), f"{where}.fields")
    return define_section(name=name, fields=shape)


def _build_page_type(name: str, spec: object) -> PageTypeDefinition:
    """Build one page type; a bare list is shorthand for its allowed sections."""
    where = f"page_types.{name}"
    match spec:
        case list():
            allowed = spec
        case {"allowed_sections": allowed}:
            pass
        case _:
            msg = f"'{where}' requires 'allowed_sections'."
            raise ContentModelError(msg)
    return define_page_type(
        name=name,
        allowed_sections=_normalize_names(allowed, f"{where}.allowed_sections"),
    )


def _build_navigation(name: str, spec: object) -> NavigationDefinition[typ.Any]:
    """Build one navigation; ``fields`` declares a custom item schema."""
    where = f"navigations.{name}"
    payload = _require_mapping(spec or {}, where)
    item_fields = payload.get("fields")
    if item_fields is None:
        return define_navigation(name=name)
    shape = _build_shape(item_fields, f"{where}.fields")
    return define_navigation(name=name, schema=build_struct(f"{name}Item", shape))


__all__ = ["load_content_model", "parse_content_model"]
