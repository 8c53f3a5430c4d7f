"""Tests for field definitions, resource schemas and resources."""

from __future__ import annotations

import pytest
from pydantic import TypeAdapter, ValidationError

from jsonapi_core.domain import (
    Attribute,
    FieldDefinition,
    Relationship,
    RelationshipLinks,
    Resource,
    ResourceSchema,
)
from jsonapi_core.primitives.exceptions import SchemaError


class TestFields:
    def test_serialized_name_defaults_to_name(self) -> None:
        attr = Attribute(name="title")
        assert attr.serialized_name == "title"
        assert attr.format == "plain"
        assert attr.kind == "attribute"

    def test_explicit_serialized_name(self) -> None:
        attr = Attribute.boolean("isPublished", serialized_name="published")
        assert attr.name == "isPublished"
        assert attr.serialized_name == "published"
        assert attr.format == "boolean"

    def test_format_factories(self) -> None:
        assert Attribute.date("createdAt").format == "date"
        assert Attribute.url("homepage").format == "url"

    def test_relationship_factories(self) -> None:
        author = Relationship.to_one("author", "people")
        comments = Relationship.to_many_of("comments", "comments")
        assert author.linked_type == "people"
        assert author.to_many is False
        assert comments.to_many is True
        assert comments.kind == "relationship"

    def test_fields_are_frozen(self) -> None:
        attr = Attribute(name="title")
        with pytest.raises(ValidationError):
            attr.name = "other"  # type: ignore[misc]

    def test_structural_equality_and_hash(self) -> None:
        a = Relationship.to_one("author", "people")
        b = Relationship.to_one("author", "people")
        assert a == b
        assert hash(a) == hash(b)
        assert a != Attribute(name="author")

    def test_discriminated_union_parses_by_kind(self) -> None:
        adapter = TypeAdapter(FieldDefinition)
        parsed = adapter.validate_python(
            {"kind": "relationship", "name": "author", "linked_type": "people"}
        )
        assert isinstance(parsed, Relationship)
        parsed = adapter.validate_python({"kind": "attribute", "name": "title"})
        assert isinstance(parsed, Attribute)


class TestResourceSchema:
    def test_field_named(self, article_schema: ResourceSchema) -> None:
        assert article_schema.field_named("title") == Attribute(name="title")
        assert article_schema.field_named("nope") is None

    def test_field_partitions(self, article_schema: ResourceSchema) -> None:
        assert [a.name for a in article_schema.attributes] == [
            "title",
            "createdAt",
            "isPublished",
        ]
        assert [r.name for r in article_schema.relationships] == [
            "author",
            "comments",
        ]
        assert article_schema.field_names[0] == "title"

    def test_duplicate_field_names_rejected(self) -> None:
        with pytest.raises(SchemaError, match="Duplicate field 'title'"):
            ResourceSchema(
                resource_type="articles",
                fields=(Attribute(name="title"), Attribute.date("title")),
            )

    def test_schema_is_hashable(self, article_schema: ResourceSchema) -> None:
        assert {article_schema: 1}[article_schema] == 1

    def test_extend_returns_new_schema(self, article_schema: ResourceSchema) -> None:
        extended = article_schema.extend(Attribute.url("homepage"))
        assert extended.field_names[-1] == "homepage"
        assert extended.field_named("author") == article_schema.field_named("author")
        assert "homepage" not in article_schema.field_names

    def test_extend_keeps_names_unique(self, article_schema: ResourceSchema) -> None:
        with pytest.raises(SchemaError, match="Duplicate field 'title'"):
            article_schema.extend(Attribute(name="title"))


class TestResource:
    def test_defaults(self) -> None:
        resource = Resource(resource_type="articles")
        assert resource.id is None
        assert resource.url is None
        assert resource.relationships == {}
        assert resource.is_loaded is False

    def test_links_for(self) -> None:
        links = RelationshipLinks(self_url="https://api.example.com/x")
        resource = Resource(
            resource_type="articles", id="1", relationships={"author": links}
        )
        assert resource.links_for("author") is links
        assert resource.links_for("comments") is None
