"""Protocol for the MetroBus operations keyed by stop."""

import datetime
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from wmata.domain.models.bus_responses import Predictions, StopSchedule
    from wmata.domain.models.stop import Stop


class BusOperations(Protocol):
    """Subset of ``BusClient`` used by ``Stop`` shortcuts."""

    async def next_buses(self, stop: "Stop") -> "Predictions": ...

    async def stop_schedule(
        self, stop: "Stop", date: datetime.date | None = None
    ) -> "StopSchedule": ...
