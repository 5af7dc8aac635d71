"""Runtime lookup of sections, page types, and navigations by name.

The registry is built once at startup from the application's definitions and
is read-only afterwards: it exposes no way to add or remove entries, so any
number of threads may query it without locking. To change its contents,
build a new registry.

Examples
--------
>>> from structcms.definitions import define_page_type, define_section
>>> from structcms.fields import fields
>>> hero = define_section(name="hero", fields={"title": fields.string()})
>>> registry = create_registry(
...     sections=[hero],
...     page_types=[define_page_type(name="landing", allowed_sections=["hero"])],
... )
>>> registry.get_section("hero").name
'hero'
>>> registry.get_section("missing") is None
True
"""

from __future__ import annotations

import logging
import types
import typing as typ

from .errors import DuplicateDefinitionError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .definitions import (
        NavigationDefinition,
        PageTypeDefinition,
        SectionDefinition,
    )

logger = logging.getLogger(__name__)

_DefinitionT = typ.TypeVar("_DefinitionT")


class _Named(typ.Protocol):
    name: str


def _index(
    kind: str, definitions: cabc.Iterable[_DefinitionT], *, strict: bool
) -> types.MappingProxyType[str, _DefinitionT]:
    """Index ``definitions`` by name; later entries replace earlier ones."""
    indexed: dict[str, _DefinitionT] = {}
    for definition in definitions:
        name = typ.cast("_Named", definition).name
        if name in indexed:
            if strict:
                raise DuplicateDefinitionError(kind, name)
            logger.debug("Replacing earlier %s definition named %r", kind, name)
        indexed[name] = definition
    return types.MappingProxyType(indexed)


class Registry:
    """Read-only index of content model definitions.

    Lookups of unknown names return ``None`` and never raise.
    """

    __slots__ = ("_navigations", "_page_types", "_sections")

    def __init__(
        self,
        sections: cabc.Iterable[SectionDefinition[typ.Any]],
        page_types: cabc.Iterable[PageTypeDefinition] = (),
        navigations: cabc.Iterable[NavigationDefinition[typ.Any]] = (),
        *,
        strict: bool = False,
    ) -> None:
        """Index the given definitions.

        Parameters
        ----------
        sections : Iterable[SectionDefinition]
            Section definitions, indexed by ``name``.
        page_types : Iterable[PageTypeDefinition], optional
            Page type definitions; defaults to none.
        navigations : Iterable[NavigationDefinition], optional
            Navigation definitions; defaults to none.
        strict : bool, optional
            When ``True``, raise :class:`DuplicateDefinitionError` on a repeated
            name instead of letting the later definition win.
        """
        self._sections = _index("section", sections, strict=strict)
        self._page_types = _index("page type", page_types, strict=strict)
        self._navigations = _index("navigation", navigations, strict=strict)

    def __repr__(self) -> str:
        return (
            f"Registry(sections={list(self._sections)!r}, "
            f"page_types={list(self._page_types)!r}, "
            f"navigations={list(self._navigations)!r})"
        )

    def get_section(self, name: str) -> SectionDefinition[typ.Any] | None:
        """Return the section named ``name``, if registered."""
        return self._sections.get(name)

    def get_all_sections(self) -> tuple[SectionDefinition[typ.Any], ...]:
        """Return every registered section in registration order."""
        return tuple(self._sections.values())

    def get_page_type(self, name: str) -> PageTypeDefinition | None:
        """Return the page type named ``name``, if registered."""
        return self._page_types.get(name)

    def get_all_page_types(self) -> tuple[PageTypeDefinition, ...]:
        """Return every registered page type in registration order."""
        return tuple(self._page_types.values())

    def get_navigation(self, name: str) -> NavigationDefinition[typ.Any] | None:
        """Return the navigation named ``name``, if registered."""
        return self._navigations.get(name)

    def get_all_navigations(self) -> tuple[NavigationDefinition[typ.Any], ...]:
        """Return every registered navigation in registration order."""
        return tuple(self._navigations.values())

    def sections_for_page_type(
        self, name: str
    ) -> tuple[SectionDefinition[typ.Any], ...]:
        """Resolve a page type's allow-list to registered sections.

        Unknown page types yield an empty tuple. Allowed names without a
        registered section are skipped, and repeated names appear once.
        """
        page_type = self._page_types.get(name)
        if page_type is None:
            return ()
        resolved: dict[str, SectionDefinition[typ.Any]] = {}
        for section_name in page_type.allowed_sections:
            section = self._sections.get(section_name)
            if section is not None:
                resolved.setdefault(section_name, section)
        return tuple(resolved.values())


def create_registry(
    *,
    sections: cabc.Iterable[SectionDefinition[typ.Any]],
    page_types: cabc.Iterable[PageTypeDefinition] | None = None,
    navigations: cabc.Iterable[NavigationDefinition[typ.Any]] | None = None,
    strict: bool = False,
) -> Registry:
    """Build a :class:`Registry` from the application's definitions."""
    return Registry(
        sections,
        page_types or (),
        navigations or (),
        strict=strict,
    )


__all__ = ["Registry", "create_registry"]
