"""Shared fixtures for core tests."""

from __future__ import annotations

import pytest

from jsonapi_core.adapters.memory import InMemorySchemaRegistry
from jsonapi_core.domain import Attribute, Relationship, ResourceSchema


@pytest.fixture
def article_schema() -> ResourceSchema:
    return ResourceSchema(
        resource_type="articles",
        fields=(
            Attribute(name="title"),
            Attribute.date("createdAt"),
            Attribute.boolean("isPublished", serialized_name="published"),
            Relationship.to_one("author", "people"),
            Relationship.to_many_of("comments", "comments"),
        ),
    )


@pytest.fixture
def person_schema() -> ResourceSchema:
    return ResourceSchema(
        resource_type="people",
        fields=(
            Attribute(name="firstName"),
            Relationship.to_one("company", "companies"),
        ),
    )


@pytest.fixture
def schema_registry(article_schema, person_schema) -> InMemorySchemaRegistry:
    return InMemorySchemaRegistry(article_schema, person_schema)
