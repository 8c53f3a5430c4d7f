"""IResourceSchemaAccessor - Protocol for resource schema lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ..domain.fields import FieldDefinition, Relationship


@runtime_checkable
class IResourceSchemaAccessor(Protocol):
    """
    Read-only view of the declared resource schemas.

    Implementations must not change after configuration; the router calls
    them from any thread without locking.
    """

    def field_named(
        self, resource_type: str, name: str
    ) -> FieldDefinition | None:
        """
        Return the field ``name`` of ``resource_type``.
        Returns None when the type or the field is unknown.
        """
        ...

    def linked_type(self, relationship: Relationship) -> str:
        """Return the resource type a relationship points to."""
        ...
