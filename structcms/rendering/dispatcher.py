"""Dispatch section records to caller-supplied render functions.

A page is an ordered list of heterogeneous sections. The renderer looks up a
component by each section's ``type`` and calls it with the section data and
a caller-chosen key. One broken component must not take the rest of the page
down with it, so component errors are logged and treated as if no component
were registered; the optional fallback then gets a chance to render. The
fallback itself is not guarded: an error there is a configuration problem
and propagates.

Examples
--------
>>> render = create_section_renderer(
...     components={"hero": lambda data, key: f"<h1>{data['title']}</h1>"},
... )
>>> render(SectionData(type="hero", data={"title": "Hi"}), 0)
'<h1>Hi</h1>'
>>> render(SectionData(type="unknown"), 1) is None
True
"""

from __future__ import annotations

import inspect
import logging
import types
import typing as typ

from .._constants import RENDER_ERROR_TEMPLATE
from .models import SectionData

if typ.TYPE_CHECKING:
    import collections.abc as cabc

logger = logging.getLogger(__name__)

R = typ.TypeVar("R")
R_co = typ.TypeVar("R_co", covariant=True)
SectionKey = int | str


class SectionComponent(typ.Protocol[R_co]):
    """Render function for one section type."""

    def __call__(self, data: cabc.Mapping[str, typ.Any], key: SectionKey, /) -> R_co:
        """Render ``data``; ``key`` is echoed from the caller unchanged."""
        ...


SectionLike = typ.Union[SectionData, typ.Mapping[str, typ.Any]]


def _unpack(section: SectionLike) -> tuple[str, typ.Any]:
    match section:
        case SectionData(type=section_type, data=data):
            return section_type, data
        case {"type": section_type, **rest}:
            return str(section_type), rest.get("data", {})
        case _:
            msg = f"Section records need a 'type'; got {section!r}."
            raise TypeError(msg)


class SectionRenderer(typ.Generic[R]):
    """Map section type tags to render functions with per-section isolation."""

    def __init__(
        self,
        components: cabc.Mapping[str, SectionComponent[R]],
        *,
        fallback: SectionComponent[R] | None = None,
    ) -> None:
        """Snapshot the component table.

        Parameters
        ----------
        components : Mapping[str, SectionComponent]
            Render functions keyed by section type. Copied, so later changes
            to the caller's mapping have no effect.
        fallback : SectionComponent, optional
            Render function used for unknown types and for types whose
            component raised.
        """
        self._components = types.MappingProxyType(dict(components))
        self._fallback = fallback

    @property
    def components(self) -> cabc.Mapping[str, SectionComponent[R]]:
        """Read-only view of the registered components."""
        return self._components

    @property
    def fallback(self) -> SectionComponent[R] | None:
        """The configured fallback, if any."""
        return self._fallback

    def __call__(self, section: SectionLike, key: SectionKey) -> R | None:
        """Render ``section``; see :meth:`render`."""
        return self.render(section, key)

    def render(self, section: SectionLike, key: SectionKey) -> R | None:
        """Render one section.

        Parameters
        ----------
        section : SectionData or Mapping
            Section record with ``type`` and ``data``.
        key : int or str
            Opaque identity passed through to the render function, typically
            the section's index in the page.

        Returns
        -------
        R or None
            The component's result, the fallback's result, or ``None`` when
            neither produced one.

        Raises
        ------
        Exception
            Whatever the fallback raises. Component errors never propagate.

        Notes
        -----
        A component that returns an awaitable counts as failed here, since
        its outcome is unknown until awaited; use :meth:`render_async` for
        asynchronous components.
        """
        section_type, data = _unpack(section)
        component = self._components.get(section_type)
        if component is not None:
            try:
                result = component(data, key)
                if inspect.isawaitable(result):
                    if inspect.iscoroutine(result):
                        result.close()
                    msg = "component returned an awaitable; use render_async"
                    raise TypeError(msg)
            except Exception as exc:  # noqa: BLE001 - isolate component failures
                self._log_failure(section_type, key, exc)
            else:
                return result
        if self._fallback is not None:
            return self._fallback(data, key)
        return None

    async def render_async(self, section: SectionLike, key: SectionKey) -> R | None:
        """Render one section, awaiting components that return awaitables.

        Awaiting happens inside the same failure boundary as the call, so an
        asynchronous component failure falls through to the fallback exactly
        like a synchronous one. Cancellation is not intercepted.
        """
        section_type, data = _unpack(section)
        component = self._components.get(section_type)
        if component is not None:
            try:
                result = component(data, key)
                if inspect.isawaitable(result):
                    result = await result
            except Exception as exc:  # noqa: BLE001 - isolate component failures
                self._log_failure(section_type, key, exc)
            else:
                return typ.cast("R", result)
        if self._fallback is not None:
            result = self._fallback(data, key)
            if inspect.isawaitable(result):
                result = await result
            return typ.cast("R", result)
        return None

    def render_all(self, sections: cabc.Iterable[SectionLike]) -> list[R]:
        """Render sections in order, keyed by index, dropping ``None`` results."""
        rendered: list[R] = []
        for index, section in enumerate(sections):
            result = self.render(section, index)
            if result is not None:
                rendered.append(result)
        return rendered

    @staticmethod
    def _log_failure(section_type: str, key: SectionKey, exc: Exception) -> None:
        logger.error(RENDER_ERROR_TEMPLATE, section_type, key, exc, exc_info=exc)


def create_section_renderer(
    *,
    components: cabc.Mapping[str, SectionComponent[R]],
    fallback: SectionComponent[R] | None = None,
) -> SectionRenderer[R]:
    """Build a :class:`SectionRenderer` for ``components``."""
    return SectionRenderer(components, fallback=fallback)


__all__ = [
    "SectionComponent",
    "SectionKey",
    "SectionLike",
    "SectionRenderer",
    "create_section_renderer",
]
