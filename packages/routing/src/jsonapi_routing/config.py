"""Router configuration."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from jsonapi_core.formatting.keys import AsIsKeyFormatter

if TYPE_CHECKING:
    from jsonapi_core.ports.formatting import IKeyFormatter, IValueFormatter


@dataclass(frozen=True)
class RouterConfig:
    """Configuration for a JSON:API router.

    Attributes:
        base_url: Root of the API, e.g. ``https://api.example.com/v1``.
        key_formatter: Maps fields to wire keys (default: as-is).
        value_formatters: Maps attribute values to wire strings
            (default: the date/URL/boolean registry).
    """

    base_url: str
    key_formatter: IKeyFormatter = field(default_factory=AsIsKeyFormatter)
    value_formatters: IValueFormatter | None = None
