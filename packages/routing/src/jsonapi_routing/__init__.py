"""JSON:API URL building — query descriptors, path resolution, encoders."""

from __future__ import annotations

from .config import RouterConfig
from .filters import FilterEncoder, derive_group
from .operators import OPERATOR_SYMBOLS, FilterOperator, resolve_operator
from .pagination import PaginationEncoder
from .query import (
    FilterPredicate,
    OffsetBasedPagination,
    PageBasedPagination,
    Pagination,
    Query,
    SortDescriptor,
)
from .query_string import QueryItem, QueryItems, encode_query, parse_query
from .resolver import PathResolver, ResolvedPath
from .router import JSONAPIRouter

__all__ = [
    # Query descriptor
    "FilterOperator",
    "FilterPredicate",
    "OffsetBasedPagination",
    "PageBasedPagination",
    "Pagination",
    "Query",
    "SortDescriptor",
    "resolve_operator",
    "OPERATOR_SYMBOLS",
    # Encoding
    "FilterEncoder",
    "PaginationEncoder",
    "PathResolver",
    "QueryItem",
    "QueryItems",
    "ResolvedPath",
    "derive_group",
    "encode_query",
    "parse_query",
    # Router
    "JSONAPIRouter",
    "RouterConfig",
]
