"""Resource schemas and resource instances."""

from __future__ import annotations

from pydantic import Field, model_validator

from ..primitives.exceptions import SchemaError
from .fields import Attribute, FieldDefinition, Relationship
from .value_object import ValueObject


class ResourceSchema(ValueObject):
    """
    Declared shape of one resource type.

    Fields keep their declaration order.  Names must be unique.

    Example::

        ResourceSchema(
            resource_type="articles",
            fields=(
                Attribute(name="title"),
                Attribute.date("createdAt"),
                Relationship.to_one("author", "people"),
            ),
        )
    """

    resource_type: str
    fields: tuple[FieldDefinition, ...] = ()

    @model_validator(mode="after")
    def _check_unique_names(self) -> ResourceSchema:
        seen: set[str] = set()
        for f in self.fields:
            if f.name in seen:
                raise SchemaError(
                    f"Duplicate field '{f.name}' on resource type "
                    f"'{self.resource_type}'"
                )
            seen.add(f.name)
        return self

    def field_named(self, name: str) -> FieldDefinition | None:
        """Return the field called ``name`` or ``None``."""
        for f in self.fields:
            if f.name == name:
                return f
        return None

    def extend(self, *fields: FieldDefinition) -> ResourceSchema:
        """Return a copy with ``fields`` appended.  Names must stay unique."""
        return self.evolve(fields=(*self.fields, *fields))

    @property
    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    @property
    def attributes(self) -> list[Attribute]:
        return [f for f in self.fields if isinstance(f, Attribute)]

    @property
    def relationships(self) -> list[Relationship]:
        return [f for f in self.fields if isinstance(f, Relationship)]


class RelationshipLinks(ValueObject):
    """Links the server delivered for one relationship of one resource."""

    self_url: str | None = None
    related_url: str | None = None


class Resource(ValueObject):
    """
    A resource instance, reduced to what URL building needs.

    Attributes:
        resource_type: Type name of the resource.
        id: Server-assigned id; ``None`` for resources not yet created.
        url: Canonical URL of the resource, if the server supplied one.
        relationships: Server-supplied links keyed by relationship name.
        is_loaded: Whether the resource's attributes have been fetched.
    """

    resource_type: str
    id: str | None = None
    url: str | None = None
    relationships: dict[str, RelationshipLinks] = Field(default_factory=dict)
    is_loaded: bool = False

    def links_for(self, relationship_name: str) -> RelationshipLinks | None:
        return self.relationships.get(relationship_name)
