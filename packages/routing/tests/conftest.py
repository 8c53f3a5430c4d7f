"""Shared fixtures for routing tests."""

from __future__ import annotations

import pytest

from jsonapi_core.adapters.memory import InMemorySchemaRegistry
from jsonapi_core.domain import Attribute, Relationship, ResourceSchema
from jsonapi_routing import JSONAPIRouter

BASE_URL = "https://api.example.com/v1"


@pytest.fixture
def schema() -> InMemorySchemaRegistry:
    """A blog schema plus Drupal-style ``--`` grouped types."""
    return InMemorySchemaRegistry(
        ResourceSchema(
            resource_type="articles",
            fields=(
                Attribute(name="title"),
                Attribute(name="body"),
                Attribute.date("createdAt"),
                Attribute.boolean("isPublished", serialized_name="published"),
                Relationship.to_one("author", "people"),
                Relationship.to_many_of("comments", "comments"),
            ),
        ),
        ResourceSchema(
            resource_type="people",
            fields=(
                Attribute(name="firstName"),
                Attribute(name="lastName"),
                Relationship.to_one("company", "companies"),
            ),
        ),
        ResourceSchema(
            resource_type="companies",
            fields=(Attribute(name="name"),),
        ),
        ResourceSchema(
            resource_type="comments",
            fields=(Attribute(name="body"), Attribute.date("createdAt")),
        ),
        ResourceSchema(
            resource_type="node--article",
            fields=(
                Attribute(name="title"),
                Attribute(name="status"),
                Attribute.date("created"),
                Relationship.to_one("uid", "user--user"),
            ),
        ),
        ResourceSchema(
            resource_type="user--user",
            fields=(Attribute(name="name"), Attribute(name="mail")),
        ),
    )


@pytest.fixture
def router(schema: InMemorySchemaRegistry) -> JSONAPIRouter:
    return JSONAPIRouter(schema, BASE_URL)
