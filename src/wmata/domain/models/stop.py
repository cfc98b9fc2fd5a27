"""MetroBus stop identifier."""

import datetime
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from wmata.domain.errors import EmptyIdentifierError

if TYPE_CHECKING:
    from wmata.domain.contracts.bus_operations import BusOperations
    from wmata.domain.models.bus_responses import Predictions, StopSchedule


@dataclass(frozen=True)
class Stop:
    """A 7-digit regional bus stop identifier, e.g. ``"1001195"``.

    Only emptiness is rejected; the identifier is otherwise opaque.
    """

    id: str

    def __post_init__(self) -> None:
        if not self.id:
            raise EmptyIdentifierError("stop")

    def __str__(self) -> str:
        return self.id

    @classmethod
    def from_string(cls, value: str) -> "Stop":
        """Decode a stop identifier, rejecting the empty string."""
        return cls(value)

    @classmethod
    def coerce(cls, value: Any) -> "Stop":
        """Validator hook used by the response models."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            raise ValueError(f"stop identifier must be a string, got {type(value).__name__}")
        return cls.from_string(value)

    async def next_buses(self, client: "BusOperations") -> "Predictions":
        """Next bus arrival predictions at this stop."""
        return await client.next_buses(self)

    async def schedule(
        self, client: "BusOperations", date: datetime.date | None = None
    ) -> "StopSchedule":
        """Buses scheduled at this stop, for today or ``date``."""
        return await client.stop_schedule(self, date)
