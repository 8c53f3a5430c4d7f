"""jsonapi-core — Foundation package for the JSON:API toolkit.

Resource model, collaborator ports, default formatters. Pydantic only.
"""

from __future__ import annotations

# ── Adapters ────────────────────────────────────────────────────
from .adapters.memory import InMemorySchemaRegistry

# ── Domain ───────────────────────────────────────────────────────
from .domain import (
    Attribute,
    FieldDefinition,
    Relationship,
    RelationshipLinks,
    Resource,
    ResourceSchema,
    ValueObject,
)

# ── Formatting ───────────────────────────────────────────────────
from .formatting import (
    AsIsKeyFormatter,
    BooleanValueFormatter,
    DasherizedKeyFormatter,
    DateValueFormatter,
    KeyFormatter,
    UnderscoredKeyFormatter,
    URLValueFormatter,
    ValueFormatter,
    ValueFormatterRegistry,
    build_default_registry,
)

# ── Ports ────────────────────────────────────────────────────────
from .ports import IKeyFormatter, IResourceSchemaAccessor, IValueFormatter

# ── Primitives ──────────────────────────────────────────────────
from .primitives import (
    FieldNotFoundError,
    FilterArityError,
    JSONAPIError,
    MissingQueryTargetError,
    MissingResourceIdError,
    PreconditionError,
    SchemaError,
    UnsupportedOperatorError,
    UnsupportedPaginationError,
    ValueFormattingError,
)

__all__: list[str] = [
    # Adapters
    "InMemorySchemaRegistry",
    # Domain
    "Attribute",
    "FieldDefinition",
    "Relationship",
    "RelationshipLinks",
    "Resource",
    "ResourceSchema",
    "ValueObject",
    # Formatting
    "AsIsKeyFormatter",
    "BooleanValueFormatter",
    "DasherizedKeyFormatter",
    "DateValueFormatter",
    "KeyFormatter",
    "URLValueFormatter",
    "UnderscoredKeyFormatter",
    "ValueFormatter",
    "ValueFormatterRegistry",
    "build_default_registry",
    # Ports
    "IKeyFormatter",
    "IResourceSchemaAccessor",
    "IValueFormatter",
    # Primitives
    "FieldNotFoundError",
    "FilterArityError",
    "JSONAPIError",
    "MissingQueryTargetError",
    "MissingResourceIdError",
    "PreconditionError",
    "SchemaError",
    "UnsupportedOperatorError",
    "UnsupportedPaginationError",
    "ValueFormattingError",
]
