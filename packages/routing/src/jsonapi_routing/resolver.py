"""
Path resolution — dotted key paths against resource schemas.

Each segment is looked up on the *current* resource type.  Relationships
advance the current type, attributes do not.  Segments the schema does not
know are passed through verbatim: schemas may be partial, and resolution
degrades instead of failing.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, NamedTuple

from jsonapi_core.domain.fields import Attribute, Relationship

if TYPE_CHECKING:
    from jsonapi_core.domain.fields import FieldDefinition
    from jsonapi_core.ports.formatting import IKeyFormatter
    from jsonapi_core.ports.schema import IResourceSchemaAccessor

logger = logging.getLogger("jsonapi.routing")


class ResolvedPath(NamedTuple):
    """
    Outcome of resolving one key path.

    Attributes:
        keys: One wire key per segment, formatted where the segment resolved.
        resource_type: Resource type reached after the last relationship.
        attribute: The final segment's attribute, if it resolved to one.
        field: The final segment's field definition, ``None`` if unresolved.
    """

    keys: list[str]
    resource_type: str | None
    attribute: Attribute | None
    field: FieldDefinition | None

    @property
    def key_path(self) -> str:
        return ".".join(self.keys)


class PathResolver:
    """Walk dotted key paths through an ``IResourceSchemaAccessor``."""

    def __init__(
        self,
        schema: IResourceSchemaAccessor,
        key_formatter: IKeyFormatter,
    ) -> None:
        self._schema = schema
        self._key_formatter = key_formatter

    def resolve(self, resource_type: str | None, key_path: str) -> ResolvedPath:
        parts = key_path.split(".")
        keys: list[str] = []
        current = resource_type
        attribute: Attribute | None = None
        last: FieldDefinition | None = None

        for index, part in enumerate(parts):
            field = (
                self._schema.field_named(current, part)
                if current is not None
                else None
            )
            last = field
            if field is None:
                logger.debug(
                    "Unresolved segment '%s' of '%s' on %s; passing through",
                    part,
                    key_path,
                    current,
                )
                keys.append(part)
                continue

            keys.append(self._key_formatter.format(field))
            if isinstance(field, Relationship):
                current = self._schema.linked_type(field)
            elif index == len(parts) - 1:
                attribute = field

        return ResolvedPath(
            keys=keys,
            resource_type=current,
            attribute=attribute,
            field=last,
        )
