"""Exception hierarchy for the JSON:API toolkit.

Two families live here.  ``PreconditionError`` and its subclasses signal
caller misuse: the router refuses to produce a URL rather than emit a
malformed one.  Degraded-but-valid outcomes (an unknown path segment, a
filter without a derivable group) never raise and so have no exception.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any


class JSONAPIError(Exception):
    """Root exception for the entire toolkit."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class PreconditionError(JSONAPIError):
    """Base class for fail-fast programming errors."""


class MissingQueryTargetError(PreconditionError):
    """Raised when a query has neither a URL nor a resource type."""

    def __init__(self) -> None:
        super().__init__(
            "Cannot build URL for query. "
            "Query does not have a URL, nor a resource type."
        )


class FieldNotFoundError(PreconditionError):
    """
    A field that must exist on a resource type does not.

    Uses fuzzy matching to suggest similar field names::

        Field 'createdat' does not exist on 'articles'.
        Did you mean: createdAt?
    """

    def __init__(
        self,
        field: str,
        resource_type: str,
        available_fields: list[str] | None = None,
    ) -> None:
        self.field = field
        self.resource_type = resource_type
        self.available_fields = list(available_fields or [])
        self.suggestions = get_close_matches(
            field, self.available_fields, n=3, cutoff=0.6
        )

        message = f"Field '{field}' does not exist on '{resource_type}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FIELD_NOT_FOUND",
            "field": self.field,
            "resource_type": self.resource_type,
            "suggestions": self.suggestions,
            "available_fields": sorted(self.available_fields),
        }


class FilterArityError(PreconditionError):
    """Wrong number of values for a range or set operator."""

    def __init__(self, operator: str, expected: str, received: int) -> None:
        self.operator = operator
        self.expected = expected
        self.received = received
        super().__init__(
            f"{expected.capitalize()} required for query filter expressions "
            f"of type '{operator}', got {received}."
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "FILTER_ARITY",
            "operator": self.operator,
            "expected": self.expected,
            "received": self.received,
        }


class UnsupportedOperatorError(PreconditionError):
    """
    Operator outside the set the encoder knows how to write.

    Provides fuzzy-matched suggestions when the operator was given by name.
    """

    def __init__(self, operator: str, supported: list[str]) -> None:
        self.operator = operator
        self.supported = supported
        self.suggestions = get_close_matches(operator, supported, n=3, cutoff=0.6)

        message = f"Unsupported filter operator: '{operator}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Supported operators: {', '.join(supported)}."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "UNSUPPORTED_OPERATOR",
            "operator": self.operator,
            "suggestions": self.suggestions,
            "supported": list(self.supported),
        }


class UnsupportedPaginationError(PreconditionError):
    """Pagination variant the encoder has no rule for."""

    def __init__(self, pagination: object) -> None:
        self.pagination = pagination
        super().__init__(
            "The built in router only supports PageBasedPagination and "
            f"OffsetBasedPagination, got {type(pagination).__name__}."
        )


class MissingResourceIdError(PreconditionError):
    """A URL must be derived from a resource that has no id."""

    def __init__(self, resource_type: str) -> None:
        self.resource_type = resource_type
        super().__init__(
            f"Cannot build a URL for a '{resource_type}' resource without an id."
        )


class SchemaError(JSONAPIError):
    """Raised when a resource schema is declared or looked up incorrectly."""


class ValueFormattingError(JSONAPIError):
    """Raised when a value formatter cannot format the given value."""

    def __init__(self, value: object, format_name: str, reason: str) -> None:
        self.value = value
        self.format_name = format_name
        super().__init__(
            f"Cannot format {value!r} as '{format_name}': {reason}"
        )
