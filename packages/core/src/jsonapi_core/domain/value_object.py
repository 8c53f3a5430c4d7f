"""Immutable value object base for schema and query descriptors."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict

_VO = TypeVar("_VO", bound="ValueObject")


def _freeze(value: Any) -> Any:
    if isinstance(value, dict):
        return tuple(sorted((k, _freeze(v)) for k, v in value.items()))
    if isinstance(value, list | tuple):
        return tuple(_freeze(v) for v in value)
    if isinstance(value, set | frozenset):
        return frozenset(_freeze(v) for v in value)
    return value


class ValueObject(BaseModel):
    """Frozen pydantic model compared and hashed by its dumped fields.

    Two instances are equal when they have the same class and the same
    field values, so field definitions and predicates can be used as
    dictionary keys and collected in sets.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self.model_dump() == other.model_dump()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self).__qualname__, _freeze(self.model_dump())))

    def evolve(self: _VO, **changes: Any) -> _VO:
        """Return a re-validated copy with ``changes`` applied.

        Unlike ``model_copy(update=...)`` this runs the model's validators,
        so invariants such as unique field names still hold.
        """
        return type(self).model_validate({**self.model_dump(), **changes})
