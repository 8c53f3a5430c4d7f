"""Filter operator kinds and their wire symbols."""

from __future__ import annotations

from enum import Enum

from jsonapi_core.primitives.exceptions import UnsupportedOperatorError


class FilterOperator(str, Enum):
    """Comparison operators a filter predicate can carry."""

    EQUAL_TO = "equal_to"
    NOT_EQUAL_TO = "not_equal_to"
    GREATER_THAN = "greater_than"
    GREATER_THAN_OR_EQUAL_TO = "greater_than_or_equal_to"
    LESS_THAN = "less_than"
    LESS_THAN_OR_EQUAL_TO = "less_than_or_equal_to"
    BETWEEN = "between"
    IN = "in"

    # String matching
    BEGINS_WITH = "begins_with"
    CONTAINS = "contains"
    ENDS_WITH = "ends_with"

    # Part of the predicate vocabulary, but the built in encoder cannot
    # write them.
    LIKE = "like"
    MATCHES = "matches"


# Condition-style operators and the symbol written to ``[operator]``.
OPERATOR_SYMBOLS: dict[FilterOperator, str] = {
    FilterOperator.BETWEEN: "BETWEEN",
    FilterOperator.BEGINS_WITH: "STARTS_WITH",
    FilterOperator.CONTAINS: "CONTAINS",
    FilterOperator.ENDS_WITH: "ENDS_WITH",
    FilterOperator.GREATER_THAN: ">",
    FilterOperator.GREATER_THAN_OR_EQUAL_TO: ">=",
    FilterOperator.IN: "IN",
    FilterOperator.LESS_THAN: "<",
    FilterOperator.LESS_THAN_OR_EQUAL_TO: "<=",
    FilterOperator.NOT_EQUAL_TO: "<>",
}

SUPPORTED_OPERATORS: frozenset[FilterOperator] = frozenset(
    {FilterOperator.EQUAL_TO, *OPERATOR_SYMBOLS}
)

# Map common names to FilterOperator members
_OP_ALIASES: dict[str, FilterOperator] = {
    "eq": FilterOperator.EQUAL_TO,
    "=": FilterOperator.EQUAL_TO,
    "==": FilterOperator.EQUAL_TO,
    "ne": FilterOperator.NOT_EQUAL_TO,
    "!=": FilterOperator.NOT_EQUAL_TO,
    "<>": FilterOperator.NOT_EQUAL_TO,
    "gt": FilterOperator.GREATER_THAN,
    ">": FilterOperator.GREATER_THAN,
    "gte": FilterOperator.GREATER_THAN_OR_EQUAL_TO,
    ">=": FilterOperator.GREATER_THAN_OR_EQUAL_TO,
    "lt": FilterOperator.LESS_THAN,
    "<": FilterOperator.LESS_THAN,
    "lte": FilterOperator.LESS_THAN_OR_EQUAL_TO,
    "<=": FilterOperator.LESS_THAN_OR_EQUAL_TO,
    "startswith": FilterOperator.BEGINS_WITH,
    "starts_with": FilterOperator.BEGINS_WITH,
    "endswith": FilterOperator.ENDS_WITH,
    "in_": FilterOperator.IN,
}


def resolve_operator(op: FilterOperator | str) -> FilterOperator:
    """
    Return the FilterOperator for ``op``.

    Accepts a member, a member value (``"greater_than"``) or a common alias
    (``"gt"``, ``">"``).

    Raises:
        UnsupportedOperatorError: If ``op`` names no known operator.
    """
    if isinstance(op, FilterOperator):
        return op
    key = str(op).strip().lower()
    try:
        return FilterOperator(key)
    except ValueError:
        pass
    alias = _OP_ALIASES.get(key)
    if alias is None:
        raise UnsupportedOperatorError(
            str(op), [member.value for member in FilterOperator]
        )
    return alias
