"""Page type definitions: which sections a page may contain."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(frozen=True, slots=True)
class PageTypeDefinition:
    """A named allow-list of section names.

    Attributes
    ----------
    name : str
        Identifier of the page type.
    allowed_sections : tuple[str, ...]
        Section names permitted on pages of this type, in declaration order.
        Duplicates are kept as given.
    """

    name: str
    allowed_sections: tuple[str, ...]

    def allows(self, section_name: str) -> bool:
        """Report whether ``section_name`` may appear on this page type."""
        return section_name in self.allowed_sections


def define_page_type(
    *, name: str, allowed_sections: cabc.Iterable[str]
) -> PageTypeDefinition:
    """Define a page type, copying ``allowed_sections`` at call time.

    Examples
    --------
    >>> sections = ["hero", "text"]
    >>> landing = define_page_type(name="landing", allowed_sections=sections)
    >>> sections.append("gallery")
    >>> landing.allowed_sections
    ('hero', 'text')
    """
    return PageTypeDefinition(name=name, allowed_sections=tuple(allowed_sections))


__all__ = ["PageTypeDefinition", "define_page_type"]
