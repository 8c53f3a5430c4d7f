"""Domain primitives: field definitions, resource schemas, resources."""

from __future__ import annotations

from .fields import BOOLEAN, DATE, PLAIN, URL, Attribute, FieldDefinition, Relationship
from .resource import RelationshipLinks, Resource, ResourceSchema
from .value_object import ValueObject

__all__: list[str] = [
    "Attribute",
    "BOOLEAN",
    "DATE",
    "FieldDefinition",
    "PLAIN",
    "Relationship",
    "RelationshipLinks",
    "Resource",
    "ResourceSchema",
    "URL",
    "ValueObject",
]
