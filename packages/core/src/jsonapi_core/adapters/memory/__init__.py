from .schema_registry import InMemorySchemaRegistry

__all__ = [
    "InMemorySchemaRegistry",
]
