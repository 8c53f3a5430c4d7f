"""Tests for PathResolver."""

from __future__ import annotations

import logging

import pytest

from jsonapi_core.domain import Attribute, Relationship
from jsonapi_core.formatting import AsIsKeyFormatter, DasherizedKeyFormatter
from jsonapi_routing.resolver import PathResolver


@pytest.fixture
def resolver(schema) -> PathResolver:
    return PathResolver(schema, AsIsKeyFormatter())


class TestPathResolver:
    def test_single_attribute(self, resolver: PathResolver) -> None:
        resolved = resolver.resolve("articles", "title")
        assert resolved.keys == ["title"]
        assert resolved.resource_type == "articles"
        assert resolved.attribute == Attribute(name="title")
        assert resolved.field == resolved.attribute

    def test_relationship_chain(self, resolver: PathResolver) -> None:
        resolved = resolver.resolve("articles", "author.company")
        assert resolved.key_path == "author.company"
        assert resolved.resource_type == "companies"
        assert resolved.attribute is None
        assert isinstance(resolved.field, Relationship)

    def test_attribute_through_relationships(self, resolver: PathResolver) -> None:
        resolved = resolver.resolve("articles", "author.company.name")
        assert resolved.key_path == "author.company.name"
        assert resolved.resource_type == "companies"
        assert resolved.attribute == Attribute(name="name")

    def test_serialized_names_and_casing(self, schema) -> None:
        resolver = PathResolver(schema, DasherizedKeyFormatter())
        assert resolver.resolve("articles", "isPublished").key_path == "published"
        assert (
            resolver.resolve("articles", "author.firstName").key_path
            == "author.first-name"
        )

    def test_unknown_segment_passes_through(
        self, resolver: PathResolver, caplog
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="jsonapi.routing")
        resolved = resolver.resolve("articles", "author.nickName")
        assert resolved.keys == ["author", "nickName"]
        assert resolved.resource_type == "people"
        assert resolved.attribute is None
        assert resolved.field is None
        assert "Unresolved segment 'nickName'" in caplog.text

    def test_unknown_segment_keeps_current_type(self, resolver: PathResolver) -> None:
        resolved = resolver.resolve("articles", "extra.author.firstName")
        assert resolved.keys == ["extra", "author", "firstName"]
        assert resolved.resource_type == "people"
        assert resolved.attribute == Attribute(name="firstName")

    def test_attribute_in_the_middle_is_not_recorded(
        self, resolver: PathResolver
    ) -> None:
        resolved = resolver.resolve("articles", "title.length")
        assert resolved.keys == ["title", "length"]
        assert resolved.attribute is None
        assert resolved.resource_type == "articles"

    def test_untyped_root_passes_everything_through(
        self, resolver: PathResolver
    ) -> None:
        resolved = resolver.resolve(None, "author.firstName")
        assert resolved.keys == ["author", "firstName"]
        assert resolved.resource_type is None

    def test_unknown_root_type(self, resolver: PathResolver) -> None:
        resolved = resolver.resolve("unknown", "title")
        assert resolved.keys == ["title"]
        assert resolved.resource_type == "unknown"
