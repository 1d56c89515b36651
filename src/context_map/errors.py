"""Exceptions for context map precondition violations.

Absence and type mismatch are never errors; these are raised only for caller misuse.
"""

from __future__ import annotations


class ContextMapError(Exception):
    """Base class for context map failures."""


class InvalidKeyError(ContextMapError, TypeError):
    """Raised when a key is not a string."""


class InvalidMappingError(ContextMapError, TypeError):
    """Raised when a source is not a string-keyed mapping or cannot be converted to one."""


class InvalidTypeDescriptorError(ContextMapError, TypeError):
    """Raised when a requested type is not a class or a tuple of classes."""


__all__ = [
    "ContextMapError",
    "InvalidKeyError",
    "InvalidMappingError",
    "InvalidTypeDescriptorError",
]
