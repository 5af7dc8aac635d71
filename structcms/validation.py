"""Check stored page documents against a registry.

This is the check an API handler runs before persisting a page: the page type
must exist, each section type must be registered and allowed on that page
type, and each section's data must satisfy its schema. Problems are collected
rather than raised so a caller can report all of them at once.
"""

from __future__ import annotations

import typing as typ

import msgspec

from .rendering.models import SectionData

if typ.TYPE_CHECKING:
    from .registry import Registry


class PageDocument(msgspec.Struct, kw_only=True, rename="camel"):
    """A page as exchanged with storage: its type plus ordered sections."""

    page_type: str
    sections: list[SectionData] = msgspec.field(default_factory=list)
    title: str | None = None
    slug: str | None = None


def validate_page(registry: Registry, page: PageDocument) -> list[str]:
    """Return human-readable problems with ``page``; empty when it is valid."""
    page_type = registry.get_page_type(page.page_type)
    if page_type is None:
        return [f"Unknown page type '{page.page_type}'."]
    problems: list[str] = []
    for index, section in enumerate(page.sections):
        definition = registry.get_section(section.type)
        if definition is None:
            problems.append(f"Section {index}: unknown section type '{section.type}'.")
            continue
        if not page_type.allows(section.type):
            problems.append(
                f"Section {index}: '{section.type}' is not allowed on "
                f"'{page_type.name}' pages."
            )
        try:
            definition.validate(section.data)
        except msgspec.ValidationError as exc:
            problems.append(f"Section {index} ({section.type}): {exc}")
    return problems


__all__ = ["PageDocument", "validate_page"]
