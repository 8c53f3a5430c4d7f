"""PaginationEncoder — pagination variant -> ``page[...]`` parameters."""

from __future__ import annotations

from typing import Any

from jsonapi_core.primitives.exceptions import UnsupportedPaginationError

from .query import OffsetBasedPagination, PageBasedPagination
from .query_string import QueryItem


class PaginationEncoder:
    """
    Encode page-based and offset-based pagination.

    Add support for other strategies by subclassing and overriding
    :meth:`encode`, delegating to ``super().encode`` for these two.
    """

    def encode(self, pagination: Any) -> list[QueryItem]:
        if isinstance(pagination, PageBasedPagination):
            return [
                QueryItem("page[number]", str(pagination.page_number)),
                QueryItem("page[size]", str(pagination.page_size)),
            ]
        if isinstance(pagination, OffsetBasedPagination):
            return [
                QueryItem("page[offset]", str(pagination.offset)),
                QueryItem("page[limit]", str(pagination.limit)),
            ]
        raise UnsupportedPaginationError(pagination)
