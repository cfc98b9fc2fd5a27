"""MetroBus route identifier."""

from dataclasses import dataclass
from typing import Any

from wmata.domain.errors import EmptyIdentifierError


@dataclass(frozen=True)
class Route:
    """A bus route or route variant identifier, e.g. ``"A2"`` or ``"10Av1"``.

    Route identifiers are not checked against a catalog; any non-empty
    string is accepted.
    """

    id: str

    def __post_init__(self) -> None:
        if not self.id:
            raise EmptyIdentifierError("route")

    def __str__(self) -> str:
        return self.id

    @classmethod
    def from_string(cls, value: str) -> "Route":
        """Decode a route identifier, rejecting the empty string."""
        return cls(value)

    @classmethod
    def coerce(cls, value: Any) -> "Route":
        """Validator hook used by the response models."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"route identifier must be a string, got {type(value).__name__}")
        return cls.from_string(value)
