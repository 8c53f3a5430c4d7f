"""
Value formatting strategy.

Provides the ValueFormatter base and a registry that maps an attribute's
formatting identity (``Attribute.format``) to the formatter that writes
its values on the wire.

New formats are added by subclassing ValueFormatter and registering via
``register()``.
"""

from __future__ import annotations

import datetime
import logging
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any
from urllib.parse import urljoin

from ..domain.fields import BOOLEAN, DATE, URL
from ..primitives.exceptions import ValueFormattingError

if TYPE_CHECKING:
    from ..domain.fields import Attribute

logger = logging.getLogger("jsonapi.core.formatting")

NULL = "null"


def stringify(value: Any) -> str:
    """Default wire representation: ``None`` -> ``null``, bools lower-cased."""
    if value is None:
        return NULL
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ValueFormatter(ABC):
    """
    Strategy interface for one formatting identity.

    Each formatter is an isolated class with a single ``format`` method.
    """

    @property
    @abstractmethod
    def handles(self) -> str:
        """The ``Attribute.format`` this strategy handles."""
        ...

    @abstractmethod
    def format(self, value: Any, attribute: Attribute) -> str:
        """
        Format a non-``None`` value of ``attribute``.

        Raises:
            ValueFormattingError: If the value cannot be represented.
        """
        ...


class DateValueFormatter(ValueFormatter):
    """ISO-8601 dates; UTC datetimes use the ``Z`` suffix."""

    @property
    def handles(self) -> str:
        return DATE

    def format(self, value: Any, attribute: Attribute) -> str:  # noqa: ARG002
        if isinstance(value, datetime.datetime):
            offset = value.utcoffset()
            if offset is not None and offset == datetime.timedelta(0):
                return value.replace(tzinfo=None).isoformat() + "Z"
            return value.isoformat()
        if isinstance(value, datetime.date):
            return value.isoformat()
        if isinstance(value, str):
            return value
        raise ValueFormattingError(value, DATE, "expected a date or datetime")


class URLValueFormatter(ValueFormatter):
    """Absolute URLs; relative ones are resolved against ``base_url``."""

    def __init__(self, base_url: str | None = None) -> None:
        self._base_url = base_url

    @property
    def handles(self) -> str:
        return URL

    def format(self, value: Any, attribute: Attribute) -> str:  # noqa: ARG002
        if not isinstance(value, str):
            raise ValueFormattingError(value, URL, "expected a URL string")
        if self._base_url:
            return urljoin(self._base_url, value)
        return value


class BooleanValueFormatter(ValueFormatter):
    @property
    def handles(self) -> str:
        return BOOLEAN

    def format(self, value: Any, attribute: Attribute) -> str:  # noqa: ARG002
        if not isinstance(value, bool):
            raise ValueFormattingError(value, BOOLEAN, "expected a bool")
        return "true" if value else "false"


class ValueFormatterRegistry:
    """
    Registry of ValueFormatter instances keyed by formatting identity.

    Usage::

        registry = ValueFormatterRegistry()
        registry.register(DateValueFormatter())

        registry.format_value(published_at, Attribute.date("publishedAt"))

    Formats without a registered formatter fall back to :func:`stringify`.
    Configure the registry up front; the router only reads it.
    """

    def __init__(self) -> None:
        self._formatters: dict[str, ValueFormatter] = {}

    # -- registration --------------------------------------------------------

    def register(self, formatter: ValueFormatter) -> None:
        """Register a formatter, replacing any previous one for its format."""
        self._formatters[formatter.handles] = formatter
        logger.debug(
            "Registered value formatter %s for '%s'",
            type(formatter).__name__,
            formatter.handles,
        )

    def register_all(self, *formatters: ValueFormatter) -> None:
        for f in formatters:
            self.register(f)

    def unregister(self, format_name: str) -> None:
        self._formatters.pop(format_name, None)

    # -- look-up -------------------------------------------------------------

    def get(self, format_name: str) -> ValueFormatter | None:
        return self._formatters.get(format_name)

    def has(self, format_name: str) -> bool:
        return format_name in self._formatters

    @property
    def supported_formats(self) -> set[str]:
        return set(self._formatters.keys())

    # -- formatting ----------------------------------------------------------

    def format_value(self, value: Any, attribute: Attribute) -> str:
        """Format ``value`` for the wire using the attribute's formatter."""
        if value is None:
            return NULL
        formatter = self.get(attribute.format)
        if formatter is None:
            return stringify(value)
        return formatter.format(value, attribute)


def build_default_registry(base_url: str | None = None) -> ValueFormatterRegistry:
    """Return a registry with the date, URL and boolean formatters."""
    registry = ValueFormatterRegistry()
    registry.register_all(
        DateValueFormatter(),
        URLValueFormatter(base_url),
        BooleanValueFormatter(),
    )
    return registry
