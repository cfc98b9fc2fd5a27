"""Protocol for the MetroRail operations keyed by station or line."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from wmata.domain.models.line import Line
    from wmata.domain.models.rail_responses import (
        ElevatorAndEscalatorIncidents,
        PathBetweenStations,
        RailIncidents,
        RailPredictions,
        StationInformation,
        Stations,
        StationsParking,
        StationTimings,
        StationToStationInfos,
    )
    from wmata.domain.models.station import Station


class RailOperations(Protocol):
    """Subset of ``RailClient`` used by ``Station`` and ``Line`` shortcuts."""

    async def station_to_station(
        self,
        from_station: "Station | None" = None,
        to_station: "Station | None" = None,
    ) -> "StationToStationInfos": ...

    async def elevator_and_escalator_incidents_at(
        self, station: "Station | None" = None
    ) -> "ElevatorAndEscalatorIncidents": ...

    async def incidents_at(self, station: "Station | None" = None) -> "RailIncidents": ...

    async def next_trains(self, station: "Station") -> "RailPredictions": ...

    async def station_information(self, station: "Station") -> "StationInformation": ...

    async def parking_information(self, station: "Station") -> "StationsParking": ...

    async def timings(self, station: "Station") -> "StationTimings": ...

    async def path_from(
        self, from_station: "Station", to_station: "Station"
    ) -> "PathBetweenStations": ...

    async def stations_on(self, line: "Line | None" = None) -> "Stations": ...
