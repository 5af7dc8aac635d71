"""Navigation definitions and the default recursive menu item schema."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

import msgspec

if typ.TYPE_CHECKING:
    import collections.abc as cabc

ItemT = typ.TypeVar("ItemT")


class NavigationItem(msgspec.Struct, kw_only=True, omit_defaults=True):
    """Default menu entry: a link with optional nested entries.

    Nesting depth is unbounded. Items form a tree by construction, so no
    cycle detection takes place.
    """

    label: str
    href: str
    children: list[NavigationItem] | None = None


DEFAULT_NAVIGATION_ITEM_SCHEMA: type[NavigationItem] = NavigationItem


@dc.dataclass(frozen=True, slots=True)
class NavigationDefinition(typ.Generic[ItemT]):
    """A named navigation bound to the schema of its items.

    ``ItemT`` is the static item type; it has no runtime representation
    beyond ``schema`` itself.
    """

    name: str
    schema: typ.Any

    def validate(self, items: cabc.Iterable[typ.Any]) -> list[ItemT]:
        """Convert raw navigation items into ``schema`` instances.

        Raises
        ------
        msgspec.ValidationError
            If any item, at any depth, does not match the schema.
        """
        return msgspec.convert(list(items), list[self.schema])


@typ.overload
def define_navigation(
    *, name: str, schema: None = None
) -> NavigationDefinition[NavigationItem]: ...


@typ.overload
def define_navigation(
    *, name: str, schema: type[ItemT]
) -> NavigationDefinition[ItemT]: ...


def define_navigation(
    *, name: str, schema: typ.Any | None = None
) -> NavigationDefinition[typ.Any]:
    """Define a navigation, defaulting to :class:`NavigationItem` items.

    Examples
    --------
    >>> main = define_navigation(name="main")
    >>> main.schema is NavigationItem
    True
    >>> main.validate([{"label": "Home", "href": "/"}])[0].label
    'Home'
    """
    item_schema = DEFAULT_NAVIGATION_ITEM_SCHEMA if schema is None else schema
    return NavigationDefinition(name=name, schema=item_schema)


__all__ = [
    "DEFAULT_NAVIGATION_ITEM_SCHEMA",
    "NavigationDefinition",
    "NavigationItem",
    "define_navigation",
]
