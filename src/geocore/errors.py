"""Exception types raised by geocore.

Both concrete errors derive from ``ValueError`` so callers that already
guard numpy-style argument errors keep working.
"""

from __future__ import annotations


class GeometryError(Exception):
    """Base class for errors raised by geocore itself."""


class SizeMismatchError(GeometryError, ValueError):
    """Input length or shape does not fit the receiving type.

    Raised by flattening/unflattening operations (e.g. ``Matrix4.assign``
    given more than 16 values) and by binary operations on operands of
    different sizes.
    """


class DeserializationError(GeometryError, ValueError):
    """Payload matches none of the supported binary layouts."""
