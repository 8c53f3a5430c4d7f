"""Default key and value formatters."""

from __future__ import annotations

from .keys import (
    AsIsKeyFormatter,
    DasherizedKeyFormatter,
    KeyFormatter,
    UnderscoredKeyFormatter,
)
from .values import (
    NULL,
    BooleanValueFormatter,
    DateValueFormatter,
    URLValueFormatter,
    ValueFormatter,
    ValueFormatterRegistry,
    build_default_registry,
    stringify,
)

__all__ = [
    "AsIsKeyFormatter",
    "BooleanValueFormatter",
    "DasherizedKeyFormatter",
    "DateValueFormatter",
    "KeyFormatter",
    "NULL",
    "URLValueFormatter",
    "UnderscoredKeyFormatter",
    "ValueFormatter",
    "ValueFormatterRegistry",
    "build_default_registry",
    "stringify",
]
