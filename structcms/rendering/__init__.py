"""Section rendering dispatch for structcms pages."""

from .dispatcher import (
    SectionComponent,
    SectionKey,
    SectionLike,
    SectionRenderer,
    create_section_renderer,
)
from .models import SectionData

__all__ = [
    "SectionComponent",
    "SectionData",
    "SectionKey",
    "SectionLike",
    "SectionRenderer",
    "create_section_renderer",
]
