"""Formatter protocols - wire keys and wire values."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.fields import Attribute, FieldDefinition


@runtime_checkable
class IKeyFormatter(Protocol):
    """Map a field (or a bare serialized name) to its wire key."""

    def format(self, field: FieldDefinition | str) -> str:
        ...


@runtime_checkable
class IValueFormatter(Protocol):
    """Map an attribute value to its wire string."""

    def format_value(self, value: Any, attribute: Attribute) -> str:
        ...
