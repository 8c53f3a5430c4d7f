"""
Field definitions of a resource schema.

A field is either an :class:`Attribute` or a :class:`Relationship`.  The
two form a closed union discriminated on ``kind``, so code that branches on
the field kind can do so exhaustively::

    if isinstance(field, Relationship):
        ...  # traverse to field.linked_type
    else:
        ...  # attribute: format its value
"""

from __future__ import annotations

from typing import Annotated, Any, Literal

from pydantic import Field, model_validator

from .value_object import ValueObject

PLAIN = "plain"
DATE = "date"
URL = "url"
BOOLEAN = "boolean"


class _BaseField(ValueObject):
    name: str
    serialized_name: str = ""

    @model_validator(mode="before")
    @classmethod
    def _default_serialized_name(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("serialized_name"):
            data = {**data, "serialized_name": data.get("name")}
        return data


class Attribute(_BaseField):
    """
    A plain value field.

    Attributes:
        name: Name used by callers (filters, sorts, includes).
        serialized_name: Name used on the wire, before key formatting.
        format: Formatting identity looked up in the value formatter registry.
    """

    kind: Literal["attribute"] = "attribute"
    format: str = PLAIN

    @classmethod
    def date(cls, name: str, serialized_name: str | None = None) -> Attribute:
        return cls(name=name, serialized_name=serialized_name or name, format=DATE)

    @classmethod
    def url(cls, name: str, serialized_name: str | None = None) -> Attribute:
        return cls(name=name, serialized_name=serialized_name or name, format=URL)

    @classmethod
    def boolean(cls, name: str, serialized_name: str | None = None) -> Attribute:
        return cls(name=name, serialized_name=serialized_name or name, format=BOOLEAN)


class Relationship(_BaseField):
    """
    A link to one or many resources of ``linked_type``.

    Attributes:
        linked_type: Resource type name of the related resource(s).
        to_many: ``True`` for to-many relationships.
    """

    kind: Literal["relationship"] = "relationship"
    linked_type: str
    to_many: bool = False

    @classmethod
    def to_one(
        cls, name: str, linked_type: str, serialized_name: str | None = None
    ) -> Relationship:
        return cls(
            name=name,
            serialized_name=serialized_name or name,
            linked_type=linked_type,
        )

    @classmethod
    def to_many_of(
        cls, name: str, linked_type: str, serialized_name: str | None = None
    ) -> Relationship:
        return cls(
            name=name,
            serialized_name=serialized_name or name,
            linked_type=linked_type,
            to_many=True,
        )


FieldDefinition = Annotated[
    Attribute | Relationship,
    Field(discriminator="kind"),
]
