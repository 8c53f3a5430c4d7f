from jsonapi_core.ports.formatting import IKeyFormatter, IValueFormatter
from jsonapi_core.ports.schema import IResourceSchemaAccessor

__all__ = [
    "IKeyFormatter",
    "IResourceSchemaAccessor",
    "IValueFormatter",
]
