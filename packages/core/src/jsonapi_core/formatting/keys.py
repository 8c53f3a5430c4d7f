"""
Key formatters: serialized field name -> wire key.

All formatters are stateless and safe to share between threads.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..domain.fields import FieldDefinition

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])([A-Z])")


class KeyFormatter(ABC):
    """
    Base for key formatters.

    Fields are formatted from their ``serialized_name``; bare strings are
    taken to be serialized names already (sparse fieldsets list names).
    """

    def format(self, field: FieldDefinition | str) -> str:
        name = field if isinstance(field, str) else field.serialized_name
        return self.format_name(name)

    @abstractmethod
    def format_name(self, name: str) -> str:
        ...


class AsIsKeyFormatter(KeyFormatter):
    """Use serialized names verbatim."""

    def format_name(self, name: str) -> str:
        return name


class DasherizedKeyFormatter(KeyFormatter):
    """``createdAt`` / ``created_at`` -> ``created-at``."""

    def format_name(self, name: str) -> str:
        return _CAMEL_BOUNDARY.sub(r"-\1", name).lower().replace("_", "-")


class UnderscoredKeyFormatter(KeyFormatter):
    """``createdAt`` / ``created-at`` -> ``created_at``."""

    def format_name(self, name: str) -> str:
        return _CAMEL_BOUNDARY.sub(r"_\1", name).lower().replace("-", "_")
