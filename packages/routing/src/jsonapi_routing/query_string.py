"""
Query items — ordered, duplicate-preserving query string parts.

JSON:API filters rely on repeated parameter names (``[value][]`` for
``in``), so nothing here ever merges or deduplicates by name.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import NamedTuple
from urllib.parse import quote, unquote

# Brackets stay readable; commas separate list values.
_NAME_SAFE = "[]"
_VALUE_SAFE = "[],:/@"


class QueryItem(NamedTuple):
    name: str
    value: str | None


class QueryItems:
    """Accumulates query items in insertion order."""

    def __init__(self, items: Iterable[QueryItem] = ()) -> None:
        self._items: list[QueryItem] = list(items)

    def append(self, item: QueryItem) -> None:
        # Same-named items are kept, the IN filter depends on it.
        self._items.append(item)

    def extend(self, items: Iterable[QueryItem]) -> None:
        for item in items:
            self.append(item)

    def __iter__(self) -> Iterator[QueryItem]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def as_list(self) -> list[QueryItem]:
        return list(self._items)


def encode_query(items: Iterable[QueryItem]) -> str:
    """Encode items to ``name=value&...``; ``None`` values emit the bare name."""
    parts: list[str] = []
    for name, value in items:
        encoded = quote(name, safe=_NAME_SAFE)
        if value is not None:
            encoded += "=" + quote(value, safe=_VALUE_SAFE)
        parts.append(encoded)
    return "&".join(parts)


def parse_query(query: str) -> list[QueryItem]:
    """Decode a raw query string into items, keeping order and blanks."""
    if query.startswith("?"):
        query = query[1:]
    items: list[QueryItem] = []
    for part in query.split("&"):
        if not part:
            continue
        name, sep, value = part.partition("=")
        items.append(QueryItem(unquote(name), unquote(value) if sep else None))
    return items
