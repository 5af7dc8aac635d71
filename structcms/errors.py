"""Exception types raised by structcms."""

from __future__ import annotations


class StructCMSError(ValueError):
    """Base class for structcms configuration and definition errors."""


class FieldDefinitionError(StructCMSError):
    """Raised when a field schema is built or refined with invalid options."""


class DuplicateDefinitionError(StructCMSError):
    """Raised by a strict registry when two definitions share a name."""

    def __init__(self, kind: str, name: str) -> None:
        self.kind = kind
        self.name = name
        super().__init__(
            f'Duplicate {kind} name: "{name}". Each {kind} must have a unique name.'
        )


class ContentModelError(StructCMSError):
    """Raised when a content model file is invalid or incomplete."""


__all__ = [
    "ContentModelError",
    "DuplicateDefinitionError",
    "FieldDefinitionError",
    "StructCMSError",
]
