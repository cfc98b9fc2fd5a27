"""Builds ordered query-string pairs from optional typed parameters."""

from collections.abc import Iterable
from datetime import date
from enum import Enum
from typing import Any, Self


def to_query_value(value: Any) -> str:
    """Serialize a typed parameter to its query-string form."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, date):
        return value.isoformat()
    return str(value)


class QueryBuilder:
    """Ordered (name, value) pairs, each name written at most once.

    Pairs are only emitted for parameters that were actually supplied, so an
    operation called with no optional input produces an empty query.
    """

    def __init__(self) -> None:
        self._pairs: list[tuple[str, str]] = []

    def add(self, name: str, value: Any) -> Self:
        """Append ``name`` unless ``value`` is None.

        Booleans go through ``flag`` so false is never sent.
        """
        if isinstance(value, bool):
            return self.flag(name, value)
        if value is not None:
            self._append(name, to_query_value(value))
        return self

    def flag(self, name: str, enabled: bool) -> Self:
        """Append ``name=true`` only when ``enabled``; false is never sent."""
        if enabled:
            self._append(name, "true")
        return self

    def extend(self, pairs: Iterable[tuple[str, str]] | None) -> Self:
        """Append pre-serialized pairs, e.g. ``RadiusAtLatLong.to_query()``."""
        for name, value in pairs or ():
            self._append(name, value)
        return self

    def build(self) -> tuple[tuple[str, str], ...]:
        return tuple(self._pairs)

    def _append(self, name: str, value: str) -> None:
        if any(existing == name for existing, _ in self._pairs):
            raise ValueError(f"Query parameter {name!r} is already set")
        self._pairs.append((name, value))
