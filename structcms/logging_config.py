"""Logging setup for the structcms command line.

The library itself only creates module loggers; applications embedding it
configure handlers themselves. The CLI calls :func:`configure_logging` so
render and registry messages reach stderr.
"""

from __future__ import annotations

import logging
import sys

DEFAULT_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def configure_logging(*, level: int = logging.INFO, fmt: str = DEFAULT_FORMAT) -> None:
    """Send structcms log records to stderr at ``level``."""
    handler = logging.StreamHandler(stream=sys.stderr)
    handler.setFormatter(logging.Formatter(fmt))
    package_logger = logging.getLogger("structcms")
    package_logger.handlers.clear()
    package_logger.addHandler(handler)
    package_logger.setLevel(level)


__all__ = ["DEFAULT_FORMAT", "configure_logging"]
