"""Tests for key formatters and the value formatter registry."""

from __future__ import annotations

import datetime
import logging
from typing import Any

import pytest

from jsonapi_core.domain import Attribute, Relationship
from jsonapi_core.formatting import (
    AsIsKeyFormatter,
    BooleanValueFormatter,
    DasherizedKeyFormatter,
    DateValueFormatter,
    UnderscoredKeyFormatter,
    URLValueFormatter,
    ValueFormatter,
    ValueFormatterRegistry,
    build_default_registry,
    stringify,
)
from jsonapi_core.ports import IKeyFormatter, IValueFormatter
from jsonapi_core.primitives.exceptions import ValueFormattingError

# -- Key formatters ----------------------------------------------------------


@pytest.mark.parametrize(
    ("formatter", "expected"),
    [
        (AsIsKeyFormatter(), "createdAt"),
        (DasherizedKeyFormatter(), "created-at"),
        (UnderscoredKeyFormatter(), "created_at"),
    ],
)
def test_key_formatters_on_fields(formatter: Any, expected: str) -> None:
    assert formatter.format(Attribute.date("createdAt")) == expected


def test_key_formatter_uses_serialized_name():
    rel = Relationship.to_one("writer", "people", serialized_name="authorName")
    assert DasherizedKeyFormatter().format(rel) == "author-name"


def test_key_formatter_accepts_plain_names():
    assert DasherizedKeyFormatter().format("first_name") == "first-name"
    assert UnderscoredKeyFormatter().format("first-name") == "first_name"
    assert AsIsKeyFormatter().format("firstName") == "firstName"


def test_key_formatters_satisfy_protocol():
    assert isinstance(AsIsKeyFormatter(), IKeyFormatter)
    assert isinstance(build_default_registry(), IValueFormatter)


# -- Built in value formatters ------------------------------------------------


class TestDateValueFormatter:
    attr = Attribute.date("createdAt")

    def test_utc_datetime_uses_z(self) -> None:
        value = datetime.datetime(2024, 5, 1, 12, 30, tzinfo=datetime.timezone.utc)
        assert DateValueFormatter().format(value, self.attr) == "2024-05-01T12:30:00Z"

    def test_offset_datetime_keeps_offset(self) -> None:
        tz = datetime.timezone(datetime.timedelta(hours=2))
        value = datetime.datetime(2024, 5, 1, 12, 30, tzinfo=tz)
        assert (
            DateValueFormatter().format(value, self.attr)
            == "2024-05-01T12:30:00+02:00"
        )

    def test_naive_datetime_and_date(self) -> None:
        formatter = DateValueFormatter()
        assert (
            formatter.format(datetime.datetime(2024, 5, 1, 8, 0), self.attr)
            == "2024-05-01T08:00:00"
        )
        assert formatter.format(datetime.date(2024, 5, 1), self.attr) == "2024-05-01"

    def test_string_passes_through(self) -> None:
        assert DateValueFormatter().format("2024-05-01", self.attr) == "2024-05-01"

    def test_rejects_other_types(self) -> None:
        with pytest.raises(ValueFormattingError, match="expected a date"):
            DateValueFormatter().format(42, self.attr)


class TestURLValueFormatter:
    attr = Attribute.url("homepage")

    def test_absolute_url_unchanged(self) -> None:
        formatter = URLValueFormatter("https://api.example.com/")
        assert (
            formatter.format("https://other.example.com/a", self.attr)
            == "https://other.example.com/a"
        )

    def test_relative_url_resolved_against_base(self) -> None:
        formatter = URLValueFormatter("https://api.example.com/v1/")
        assert formatter.format("people/1", self.attr) == (
            "https://api.example.com/v1/people/1"
        )

    def test_without_base(self) -> None:
        assert URLValueFormatter().format("people/1", self.attr) == "people/1"

    def test_rejects_non_strings(self) -> None:
        with pytest.raises(ValueFormattingError):
            URLValueFormatter().format(1, self.attr)


class TestBooleanValueFormatter:
    attr = Attribute.boolean("isPublished")

    def test_lowercase(self) -> None:
        assert BooleanValueFormatter().format(True, self.attr) == "true"
        assert BooleanValueFormatter().format(False, self.attr) == "false"

    def test_rejects_non_bool(self) -> None:
        with pytest.raises(ValueFormattingError):
            BooleanValueFormatter().format("yes", self.attr)


# -- Registry ----------------------------------------------------------------


class _UpperFormatter(ValueFormatter):
    @property
    def handles(self) -> str:
        return "upper"

    def format(self, value: Any, attribute: Attribute) -> str:  # noqa: ARG002
        return str(value).upper()


class TestValueFormatterRegistry:
    def test_default_registry_formats(self) -> None:
        registry = build_default_registry()
        assert registry.supported_formats == {"date", "url", "boolean"}
        assert registry.format_value(True, Attribute.boolean("x")) == "true"

    def test_unregistered_format_falls_back_to_stringify(self) -> None:
        registry = ValueFormatterRegistry()
        assert registry.format_value(12, Attribute(name="views")) == "12"
        assert registry.format_value(False, Attribute(name="flag")) == "false"

    def test_none_is_null(self) -> None:
        registry = build_default_registry()
        assert registry.format_value(None, Attribute.date("createdAt")) == "null"

    def test_register_and_unregister(self, caplog) -> None:
        caplog.set_level(logging.DEBUG, logger="jsonapi.core.formatting")
        upper = Attribute(name="x", format="upper")
        registry = ValueFormatterRegistry()
        registry.register(_UpperFormatter())
        assert registry.has("upper")
        assert registry.format_value("abc", upper) == "ABC"
        assert "_UpperFormatter" in caplog.text

        registry.unregister("upper")
        assert registry.get("upper") is None
        assert registry.format_value("abc", upper) == "abc"

    def test_register_replaces_existing(self) -> None:
        registry = build_default_registry()
        replacement = DateValueFormatter()
        registry.register(replacement)
        assert registry.get("date") is replacement


def test_stringify():
    assert stringify(None) == "null"
    assert stringify(True) == "true"
    assert stringify(3.5) == "3.5"
    assert stringify("x") == "x"
