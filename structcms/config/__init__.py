"""Load content models declared in YAML files.

This subpackage parses a project's content model file (sections with their
fields, page types with their allowed sections, and navigations) into
structcms definitions. The primary entry point is :func:`load_content_model`,
which returns a :class:`ContentModel` ready to be turned into a registry.

Examples
--------
>>> from pathlib import Path
>>> from structcms.config import load_content_model
>>> model = load_content_model(Path("content.yaml"))  # doctest: +SKIP
>>> model.build_registry().get_section("hero")  # doctest: +SKIP
SectionDefinition(name='hero', ...)
"""

from .loader import load_content_model, parse_content_model
from .models import ContentModel

__all__ = ["ContentModel", "load_content_model", "parse_content_model"]
