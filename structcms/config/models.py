"""Typed containers for content models loaded from configuration files."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path  # noqa: TC003 - used for runtime type metadata

from ..registry import Registry

if typ.TYPE_CHECKING:
    from ..definitions import (
        NavigationDefinition,
        PageTypeDefinition,
        SectionDefinition,
    )


@dc.dataclass(slots=True)
class ContentModel:
    """Definitions declared in a content model file.

    Attributes
    ----------
    sections : list[SectionDefinition]
        Sections in file order.
    page_types : list[PageTypeDefinition]
        Page types in file order.
    navigations : list[NavigationDefinition]
        Navigations in file order.
    strict : bool
        Whether duplicate names should be rejected when building a registry.
    source : Path or None
        File the model was read from, when known.
    """

    sections: list[SectionDefinition[typ.Any]]
    page_types: list[PageTypeDefinition] = dc.field(default_factory=list)
    navigations: list[NavigationDefinition[typ.Any]] = dc.field(
        default_factory=list
    )
    strict: bool = False
    source: Path | None = None

    def build_registry(self) -> Registry:
        """Return a registry indexing every definition in this model."""
        return Registry(
            self.sections,
            self.page_types,
            self.navigations,
            strict=self.strict,
        )


__all__ = ["ContentModel"]
