"""
Query descriptor — what to fetch, independent of how it is written.

``Query`` is immutable.  Every refinement returns a new instance, so a
base query can be shared and specialised freely::

    query = (
        Query(resource_type="articles")
        .include("author.company")
        .where_attribute("status", in_=["draft", "review"])
        .add_descending_order("createdAt")
        .paginate(PageBasedPagination(page_number=2, page_size=20))
    )

The router turns a query into a URL; the query itself never looks at a
schema.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import TYPE_CHECKING, Annotated, Any, Literal

from pydantic import Field, field_validator

from jsonapi_core.domain.value_object import ValueObject
from jsonapi_core.primitives.exceptions import MissingResourceIdError

from .operators import FilterOperator, resolve_operator

if TYPE_CHECKING:
    from jsonapi_core.domain.resource import Resource


class FilterPredicate(ValueObject):
    """
    One independent filter: ``key_path <operator> value``.

    Attributes:
        key_path: Dotted path relative to the query's resource type,
            e.g. ``"author.company.name"``.
        value: A constant, a collection of constants, or ``None``.
        operator: The comparison; names and aliases are accepted.
    """

    key_path: str
    value: Any = None
    operator: FilterOperator = FilterOperator.EQUAL_TO

    @field_validator("operator", mode="before")
    @classmethod
    def _resolve_operator(cls, v: Any) -> FilterOperator:
        return resolve_operator(v)

    @property
    def values(self) -> list[Any]:
        """Right-hand side as a list; ``None`` is the empty list.

        Sets are sorted so the written URL does not depend on hash order.
        """
        if self.value is None:
            return []
        if isinstance(self.value, list | tuple):
            return list(self.value)
        if isinstance(self.value, set | frozenset):
            try:
                return sorted(self.value)
            except TypeError:
                return sorted(self.value, key=repr)
        return [self.value]


class SortDescriptor(ValueObject):
    key: str
    ascending: bool = True

    @classmethod
    def parse(cls, token: str) -> SortDescriptor:
        """``"-createdAt"`` -> descending on ``createdAt``."""
        token = token.strip()
        if token.startswith("-"):
            return cls(key=token[1:], ascending=False)
        return cls(key=token, ascending=True)


class PageBasedPagination(ValueObject):
    kind: Literal["page"] = "page"
    page_number: int = Field(ge=0)
    page_size: int = Field(ge=1)


class OffsetBasedPagination(ValueObject):
    kind: Literal["offset"] = "offset"
    offset: int = Field(ge=0)
    limit: int = Field(ge=1)


Pagination = Annotated[
    PageBasedPagination | OffsetBasedPagination,
    Field(discriminator="kind"),
]


@dataclass(frozen=True)
class Query:
    """
    Immutable description of a JSON:API fetch.

    Attributes:
        resource_type: Root resource type; paths are resolved against it.
        url: Pre-built URL. When set it wins over ``resource_type`` for the
            base, and ``resource_ids`` are not written into the path.
        resource_ids: Ids to fetch. One id becomes a path segment, several
            become a ``filter[id]`` parameter.
        includes: Dotted relationship paths to include.
        filters: Flat list of independent predicates.
        fields: Sparse fieldsets, resource type -> field names.
        sort_descriptors: Ordering, in priority order.
        pagination: Page- or offset-based pagination.
    """

    resource_type: str | None = None
    url: str | None = None
    resource_ids: tuple[str, ...] | None = None
    includes: tuple[str, ...] = ()
    filters: tuple[FilterPredicate, ...] = ()
    fields: Mapping[str, tuple[str, ...]] = field(default_factory=dict)
    sort_descriptors: tuple[SortDescriptor, ...] = ()
    pagination: PageBasedPagination | OffsetBasedPagination | None = None

    def __post_init__(self) -> None:
        # Detach from the caller's mapping; the query must not change later.
        fields = {rt: tuple(names) for rt, names in self.fields.items()}
        object.__setattr__(self, "fields", MappingProxyType(fields))

    # -- constructors --------------------------------------------------------

    @classmethod
    def for_url(cls, url: str, resource_type: str | None = None) -> Query:
        """Query a pre-built URL, optionally typed for path resolution."""
        return cls(resource_type=resource_type, url=url)

    @classmethod
    def for_ids(cls, resource_type: str, *resource_ids: str) -> Query:
        return cls(resource_type=resource_type, resource_ids=tuple(resource_ids))

    @classmethod
    def for_resource(cls, resource: Resource) -> Query:
        """Query a single existing resource by its id."""
        if resource.id is None:
            raise MissingResourceIdError(resource.resource_type)
        return cls(resource_type=resource.resource_type, resource_ids=(resource.id,))

    # -- includes ------------------------------------------------------------

    def include(self, *paths: str) -> Query:
        """Return a copy that also includes ``paths``."""
        return replace(self, includes=(*self.includes, *paths))

    def remove_include(self, *paths: str) -> Query:
        return replace(
            self, includes=tuple(p for p in self.includes if p not in paths)
        )

    # -- filters -------------------------------------------------------------

    def where(
        self,
        key_path: str,
        operator: FilterOperator | str = FilterOperator.EQUAL_TO,
        value: Any = None,
    ) -> Query:
        """Return a copy with one more filter predicate."""
        predicate = FilterPredicate(key_path=key_path, value=value, operator=operator)
        return replace(self, filters=(*self.filters, predicate))

    def where_attribute(self, name: str, **condition: Any) -> Query:
        """
        Keyword form of :meth:`where`.

        Exactly one keyword naming the operator is expected::

            query.where_attribute("title", equal_to="Hello")
            query.where_attribute("views", between=(10, 100))
            query.where_attribute("status", in_=["draft", "review"])
        """
        if len(condition) != 1:
            raise TypeError(
                "where_attribute() expects exactly one operator keyword, "
                f"got {sorted(condition)}"
            )
        ((op, value),) = condition.items()
        return self.where(name, op, value)

    def where_relationship(self, name: str, target: Resource | str) -> Query:
        """Filter on the id of a related resource."""
        if isinstance(target, str):
            target_id: str | None = target
        else:
            target_id = target.id
            if target_id is None:
                raise MissingResourceIdError(target.resource_type)
        return self.where(name, FilterOperator.EQUAL_TO, target_id)

    # -- sparse fieldsets ----------------------------------------------------

    def restrict_fields(self, resource_type: str, *names: str) -> Query:
        """Return a copy whose fieldset for ``resource_type`` adds ``names``."""
        fields = dict(self.fields)
        fields[resource_type] = (*fields.get(resource_type, ()), *names)
        return replace(self, fields=fields)

    # -- sorting -------------------------------------------------------------

    def add_ascending_order(self, key: str) -> Query:
        return self._add_sort(SortDescriptor(key=key, ascending=True))

    def add_descending_order(self, key: str) -> Query:
        return self._add_sort(SortDescriptor(key=key, ascending=False))

    def order_by(self, *tokens: str) -> Query:
        """Append orderings given as ``"key"`` / ``"-key"`` tokens."""
        result = self
        for token in tokens:
            result = result._add_sort(SortDescriptor.parse(token))
        return result

    def _add_sort(self, descriptor: SortDescriptor) -> Query:
        return replace(self, sort_descriptors=(*self.sort_descriptors, descriptor))

    # -- pagination ----------------------------------------------------------

    def paginate(
        self, pagination: PageBasedPagination | OffsetBasedPagination | None
    ) -> Query:
        return replace(self, pagination=pagination)
