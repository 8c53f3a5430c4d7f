"""Primitives: exceptions."""

from __future__ import annotations

from .exceptions import (
    FieldNotFoundError,
    FilterArityError,
    JSONAPIError,
    MissingQueryTargetError,
    MissingResourceIdError,
    PreconditionError,
    SchemaError,
    UnsupportedOperatorError,
    UnsupportedPaginationError,
    ValueFormattingError,
)

__all__ = [
    "FieldNotFoundError",
    "FilterArityError",
    "JSONAPIError",
    "MissingQueryTargetError",
    "MissingResourceIdError",
    "PreconditionError",
    "SchemaError",
    "UnsupportedOperatorError",
    "UnsupportedPaginationError",
    "ValueFormattingError",
]
