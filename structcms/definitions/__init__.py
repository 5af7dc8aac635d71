"""Definitions of sections, page types, and navigations.

Application code declares its content model once at import time with
:func:`define_section`, :func:`define_page_type`, and
:func:`define_navigation`, then hands the results to
:func:`structcms.registry.create_registry`. Every definition is a frozen
dataclass.
"""

from .navigation import (
    DEFAULT_NAVIGATION_ITEM_SCHEMA,
    NavigationDefinition,
    NavigationItem,
    define_navigation,
)
from .page_type import PageTypeDefinition, define_page_type
from .section import FieldDescriptor, SectionDefinition, define_section, field_label

__all__ = [
    "DEFAULT_NAVIGATION_ITEM_SCHEMA",
    "FieldDescriptor",
    "NavigationDefinition",
    "NavigationItem",
    "PageTypeDefinition",
    "SectionDefinition",
    "define_navigation",
    "define_page_type",
    "define_section",
    "field_label",
]
