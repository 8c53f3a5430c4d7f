"""InMemorySchemaRegistry — dict-backed resource schema accessor."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jsonapi_core.ports.schema import IResourceSchemaAccessor
from jsonapi_core.primitives.exceptions import SchemaError

if TYPE_CHECKING:
    from jsonapi_core.domain.fields import FieldDefinition, Relationship
    from jsonapi_core.domain.resource import ResourceSchema

logger = logging.getLogger("jsonapi.core.schema")


class InMemorySchemaRegistry(IResourceSchemaAccessor):
    """In-memory implementation of ``IResourceSchemaAccessor``.

    Stores schemas in a plain dict keyed by their ``resource_type``.
    Register everything before handing the registry to a router.
    """

    def __init__(self, *schemas: ResourceSchema) -> None:
        self._schemas: dict[str, ResourceSchema] = {}
        self.register_all(*schemas)

    def register(self, schema: ResourceSchema) -> None:
        existing = self._schemas.get(schema.resource_type)
        if existing is not None and existing != schema:
            raise SchemaError(
                f"Duplicate schema for resource type '{schema.resource_type}'"
            )
        self._schemas[schema.resource_type] = schema
        logger.debug(
            "Registered schema %s (%d fields)",
            schema.resource_type,
            len(schema.fields),
        )

    def register_all(self, *schemas: ResourceSchema) -> None:
        for schema in schemas:
            self.register(schema)

    def get(self, resource_type: str) -> ResourceSchema:
        try:
            return self._schemas[resource_type]
        except KeyError:
            raise SchemaError(
                f"Resource type '{resource_type}' is not registered"
            ) from None

    def has(self, resource_type: str) -> bool:
        return resource_type in self._schemas

    @property
    def resource_types(self) -> list[str]:
        return list(self._schemas)

    def field_named(
        self, resource_type: str, name: str
    ) -> FieldDefinition | None:
        schema = self._schemas.get(resource_type)
        if schema is None:
            return None
        return schema.field_named(name)

    def linked_type(self, relationship: Relationship) -> str:
        return relationship.linked_type
