"""
JSONAPIRouter — builds JSON:API URLs for resource types, relationships and queries.

Filters
=======
``equal_to`` filters use ``filter[<path>]``.  Other operators use the
grouped condition form written by :class:`FilterEncoder`.  Override
:meth:`JSONAPIRouter.query_items_for_filter` (or pass another encoder) to
add other filtering strategies.

Pagination
==========
Only :class:`PageBasedPagination` and :class:`OffsetBasedPagination` are
supported.  Override :meth:`JSONAPIRouter.query_items_for_pagination` (or
pass another encoder) to add others.

A router holds no per-call state: one instance may serve any number of
threads as long as its schema and formatters are not reconfigured.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

from jsonapi_core.adapters.memory.schema_registry import InMemorySchemaRegistry
from jsonapi_core.domain.fields import Relationship
from jsonapi_core.formatting.keys import AsIsKeyFormatter
from jsonapi_core.formatting.values import NULL, build_default_registry, stringify
from jsonapi_core.primitives.exceptions import (
    FieldNotFoundError,
    MissingQueryTargetError,
    MissingResourceIdError,
)

from .filters import FilterEncoder
from .operators import FilterOperator
from .pagination import PaginationEncoder
from .query_string import QueryItem, QueryItems, encode_query
from .resolver import PathResolver, ResolvedPath

if TYPE_CHECKING:
    from collections.abc import Sequence

    from jsonapi_core.domain.fields import FieldDefinition
    from jsonapi_core.domain.resource import Resource
    from jsonapi_core.ports.formatting import IKeyFormatter, IValueFormatter
    from jsonapi_core.ports.schema import IResourceSchemaAccessor

    from .config import RouterConfig
    from .query import FilterPredicate, Query

logger = logging.getLogger("jsonapi.routing")

# An explicitly empty collection is an arity error for these, not ``null``.
_COLLECTION_OPERATORS = frozenset({FilterOperator.BETWEEN, FilterOperator.IN})


def _append_path(url: str, segment: str) -> str:
    """Append one percent-encoded path segment, keeping query and fragment."""
    scheme, netloc, path, query, fragment = urlsplit(url)
    path = path.rstrip("/") + "/" + quote(segment.strip("/"), safe="")
    return urlunsplit((scheme, netloc, path, query, fragment))



def _with_trailing_slash(url: str) -> str:
    """End the path with ``/`` so relative joins stay under it."""
    scheme, netloc, path, query, fragment = urlsplit(url)
    if not path.endswith("/"):
        path += "/"
    return urlunsplit((scheme, netloc, path, query, fragment))

class JSONAPIRouter:
    """Build URLs for resource types, relationships and queries."""

    def __init__(
        self,
        schema: IResourceSchemaAccessor,
        base_url: str,
        *,
        key_formatter: IKeyFormatter | None = None,
        value_formatters: IValueFormatter | None = None,
        filter_encoder: FilterEncoder | None = None,
        pagination_encoder: PaginationEncoder | None = None,
    ) -> None:
        """
        Initialize the router.

        Args:
            schema: Resource schema accessor used to resolve paths.
            base_url: Root of the API; a trailing slash is optional.
            key_formatter: Maps fields to wire keys (default: as-is).
            value_formatters: Maps attribute values to wire strings
                (default: ``build_default_registry(base_url)``).
            filter_encoder: Writes filter parameters.
            pagination_encoder: Writes pagination parameters.
        """
        if not base_url:
            raise ValueError("base_url is required")
        self.schema = schema
        self.base_url = _with_trailing_slash(base_url)
        self.key_formatter = key_formatter or AsIsKeyFormatter()
        self.value_formatters = (
            value_formatters
            if value_formatters is not None
            else build_default_registry(self.base_url)
        )
        self.filter_encoder = filter_encoder or FilterEncoder()
        self.pagination_encoder = pagination_encoder or PaginationEncoder()
        self._resolver = PathResolver(schema, self.key_formatter)

    @classmethod
    def from_config(
        cls, schema: IResourceSchemaAccessor, config: RouterConfig
    ) -> JSONAPIRouter:
        return cls(
            schema,
            config.base_url,
            key_formatter=config.key_formatter,
            value_formatters=config.value_formatters,
        )

    # -- resource and relationship URLs --------------------------------------

    def url_for_resource_type(self, resource_type: str) -> str:
        """URL of the collection of ``resource_type``."""
        return _append_path(self.base_url, resource_type)

    def url_for_relationship(
        self, relationship: Relationship | str, resource: Resource
    ) -> str:
        """
        URL of a relationship of ``resource``.

        A server-supplied self link is returned verbatim.  Otherwise the
        URL is ``<resource url>/relationships/<key>``.

        Raises:
            FieldNotFoundError: ``relationship`` names no relationship.
            MissingResourceIdError: The URL must be derived from the
                resource's id and it has none.
        """
        if isinstance(relationship, str):
            relationship = self._relationship_named(
                resource.resource_type, relationship
            )

        links = resource.links_for(relationship.name)
        if links is not None and links.self_url:
            return links.self_url

        if resource.url:
            resource_url = urljoin(self.base_url, resource.url)
        elif resource.id is not None:
            resource_url = _append_path(
                self.url_for_resource_type(resource.resource_type), resource.id
            )
        else:
            raise MissingResourceIdError(resource.resource_type)

        key = self.key_formatter.format(relationship)
        return _append_path(_append_path(resource_url, "relationships"), key)

    build_relationship_url = url_for_relationship

    # -- queries -------------------------------------------------------------

    def url_for_query(self, query: Query) -> str:
        """
        URL representing ``query``.

        Raises:
            MissingQueryTargetError: The query has neither a URL nor a
                resource type.
            FieldNotFoundError: A sort key is not a field of the root type.
            FilterArityError: ``between``/``in`` with a wrong value count.
            UnsupportedOperatorError: A filter operator the encoder cannot
                write.
            UnsupportedPaginationError: A pagination variant the encoder
                cannot write.
        """
        if query.url is not None:
            url = urljoin(self.base_url, query.url)
            pre_built = True
        elif query.resource_type is not None:
            url = self.url_for_resource_type(query.resource_type)
            pre_built = False
        else:
            raise MissingQueryTargetError()

        scheme, netloc, path, existing_query, fragment = urlsplit(url)
        root_type = query.resource_type
        items = QueryItems()

        # Resource IDs
        if not pre_built and query.resource_ids:
            if len(query.resource_ids) == 1:
                path = urlsplit(_append_path(path, query.resource_ids[0])).path
            else:
                items.append(QueryItem("filter[id]", ",".join(query.resource_ids)))

        # Includes
        if query.includes:
            resolved = [
                self._resolver.resolve(root_type, include).key_path
                for include in query.includes
                if include
            ]
            if resolved:
                items.append(QueryItem("include", ",".join(resolved)))

        # Filters
        for predicate in query.filters:
            path_info = self._resolver.resolve(root_type, predicate.key_path)
            values = self._format_filter_values(predicate, path_info)
            items.extend(
                self.query_items_for_filter(
                    path_info.key_path,
                    path_info.resource_type,
                    values,
                    predicate.operator,
                )
            )

        # Fields
        for resource_type, names in query.fields.items():
            keys = [self._field_key(resource_type, name) for name in names]
            items.append(QueryItem(f"fields[{resource_type}]", ",".join(keys)))

        # Sorting
        if query.sort_descriptors:
            tokens = []
            for descriptor in query.sort_descriptors:
                key = self.key_formatter.format(
                    self._sort_field(root_type, descriptor.key)
                )
                tokens.append(key if descriptor.ascending else f"-{key}")
            items.append(QueryItem("sort", ",".join(tokens)))

        # Pagination
        if query.pagination is not None:
            items.extend(self.query_items_for_pagination(query.pagination))

        # Compose URL; existing query parameters stay as they were.
        added = encode_query(items)
        if existing_query and added:
            final_query = f"{existing_query}&{added}"
        else:
            final_query = existing_query or added
        result = urlunsplit((scheme, netloc, path, final_query, fragment))
        logger.debug(
            "Built URL for %s with %d query item(s): %s",
            root_type or query.url,
            len(items),
            result,
        )
        return result

    build_url = url_for_query

    # -- extension points ----------------------------------------------------

    def query_items_for_filter(
        self,
        key_path: str,
        resource_type: str | None,
        values: Sequence[str],
        operator: FilterOperator | str,
    ) -> list[QueryItem]:
        """Query items for one filter.  Override for other strategies."""
        return self.filter_encoder.encode(key_path, resource_type, values, operator)

    def query_items_for_pagination(self, pagination: Any) -> list[QueryItem]:
        """Query items for pagination.  Override for other strategies."""
        return self.pagination_encoder.encode(pagination)

    # -- internals -----------------------------------------------------------

    def _format_filter_values(
        self, predicate: FilterPredicate, path_info: ResolvedPath
    ) -> list[str]:
        raw = predicate.values
        if not raw:
            collection = predicate.operator in _COLLECTION_OPERATORS
            if predicate.value is None or not collection:
                return [NULL]
            return []
        attribute = path_info.attribute
        if attribute is None:
            return [stringify(value) for value in raw]
        return [self.value_formatters.format_value(value, attribute) for value in raw]

    def _field_key(self, resource_type: str, name: str) -> str:
        field = self.schema.field_named(resource_type, name)
        return self.key_formatter.format(field if field is not None else name)

    def _sort_field(self, resource_type: str | None, name: str) -> FieldDefinition:
        field = (
            self.schema.field_named(resource_type, name)
            if resource_type is not None
            else None
        )
        if field is None:
            raise FieldNotFoundError(
                name,
                resource_type or "<untyped query>",
                self._known_fields(resource_type),
            )
        return field

    def _relationship_named(self, resource_type: str, name: str) -> Relationship:
        field = self.schema.field_named(resource_type, name)
        if not isinstance(field, Relationship):
            raise FieldNotFoundError(
                name, resource_type, self._known_fields(resource_type)
            )
        return field

    def _known_fields(self, resource_type: str | None) -> list[str]:
        # Only the in-memory registry can enumerate fields for suggestions.
        if (
            resource_type is not None
            and isinstance(self.schema, InMemorySchemaRegistry)
            and self.schema.has(resource_type)
        ):
            return self.schema.get(resource_type).field_names
        return []
