"""
FilterEncoder — one resolved predicate -> JSON:API filter parameters.

``equal_to`` filters use the plain form::

    filter[author.name]=Jane,John

Every other operator uses the condition form, grouped by the suffix of the
resource type after its last ``--`` (``node--article`` -> ``article``)::

    filter[article][condition][path]=title
    filter[article][condition][operator]=STARTS_WITH
    filter[article][condition][value]=Hello

See the Drupal JSON:API module's filtering documentation for the server
side of this convention.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from jsonapi_core.primitives.exceptions import (
    FilterArityError,
    UnsupportedOperatorError,
)

from .operators import OPERATOR_SYMBOLS, FilterOperator, resolve_operator
from .query_string import QueryItem

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger("jsonapi.routing")

GROUP_SEPARATOR = "--"


def derive_group(resource_type: str | None) -> str | None:
    """Suffix of ``resource_type`` after the last ``--``, else ``None``."""
    if not resource_type:
        return None
    index = resource_type.rfind(GROUP_SEPARATOR)
    if index < 0:
        return None
    return resource_type[index + len(GROUP_SEPARATOR) :]


class FilterEncoder:
    """Encode filter predicates into query items.

    Subclass and override :meth:`encode` to support other filtering
    strategies; delegate to ``super().encode`` for the built in ones.
    """

    def encode(
        self,
        key_path: str,
        resource_type: str | None,
        values: Sequence[str],
        operator: FilterOperator | str,
    ) -> list[QueryItem]:
        """
        Return the query items for one filter.

        Args:
            key_path: Formatted, dot-joined key path.
            resource_type: Resource type reached by resolving ``key_path``.
            values: Formatted values.  Callers substitute ``["null"]`` for
                a missing value.
            operator: The comparison.

        Raises:
            UnsupportedOperatorError: Operator outside the built in set.
            FilterArityError: ``between`` without exactly two values, or
                ``in`` without any value.
        """
        op = resolve_operator(operator)
        if op is FilterOperator.EQUAL_TO:
            return [QueryItem(f"filter[{key_path}]", ",".join(values))]

        symbol = self.symbol_for(op)
        self._check_arity(op, values)

        group = derive_group(resource_type)
        if group is None:
            # Condition filters need a group. TODO: decide whether ungrouped
            # types should fall back to filter[<path>][condition] instead.
            logger.debug(
                "Dropping '%s' filter on '%s': resource type %r has no group",
                op.value,
                key_path,
                resource_type,
            )
            return []

        prefix = f"filter[{group}][condition]"
        items = [
            QueryItem(f"{prefix}[path]", key_path),
            QueryItem(f"{prefix}[operator]", symbol),
        ]
        items.extend(self._value_items(prefix, op, values))
        return items

    def symbol_for(self, operator: FilterOperator) -> str:
        symbol = OPERATOR_SYMBOLS.get(operator)
        if symbol is None:
            raise UnsupportedOperatorError(
                operator.value,
                [FilterOperator.EQUAL_TO.value]
                + [op.value for op in OPERATOR_SYMBOLS],
            )
        return symbol

    def _check_arity(self, op: FilterOperator, values: Sequence[str]) -> None:
        if op is FilterOperator.BETWEEN and len(values) != 2:
            raise FilterArityError(
                op.value, "exactly 2 values (the lower and upper bounds)", len(values)
            )
        if op is FilterOperator.IN and not values:
            raise FilterArityError(op.value, "at least one value", 0)

    def _value_items(
        self, prefix: str, op: FilterOperator, values: Sequence[str]
    ) -> list[QueryItem]:
        if op is FilterOperator.BETWEEN:
            return [
                QueryItem(f"{prefix}[value][{index}]", value)
                for index, value in enumerate(values)
            ]
        if op is FilterOperator.IN:
            return [QueryItem(f"{prefix}[value][]", value) for value in values]
        return [QueryItem(f"{prefix}[value]", ",".join(values))]
