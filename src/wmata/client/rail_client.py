"""MetroRail client."""

from wmata.application.query_builder import QueryBuilder
from wmata.client.base import WmataClient
from wmata.domain.endpoints import RailEndpoint
from wmata.domain.models.line import Line
from wmata.domain.models.radius_at_lat_long import RadiusAtLatLong
from wmata.domain.models.rail_responses import (
    ElevatorAndEscalatorIncidents,
    Lines,
    PathBetweenStations,
    RailIncidents,
    RailPredictions,
    StandardRoutes,
    StationEntrances,
    StationInformation,
    Stations,
    StationsParking,
    StationTimings,
    StationToStationInfos,
    TrackCircuits,
    TrainPositions,
)
from wmata.domain.models.station import Station

# The TrainPositions service answers in XML unless asked for JSON.
_JSON_CONTENT_TYPE = ("contentType", "json")


class RailClient(WmataClient):
    """Async client for the MetroRail endpoints.

    Every method issues exactly one GET and returns the decoded model, or
    raises ``TransportError``, ``ApiError`` or ``MalformedResponseError``.
    """

    def _url(self, endpoint: RailEndpoint) -> str:
        return endpoint.resolve(self.base_url)

    async def lines(self) -> Lines:
        """Basic information on all MetroRail lines."""
        return await self._requester.fetch(Lines, self._url(RailEndpoint.LINES))

    async def entrances(self, radius_at_lat_long: RadiusAtLatLong) -> StationEntrances:
        """Station entrances within a radius of a point."""
        query = QueryBuilder().extend(radius_at_lat_long.to_query()).build()
        return await self._requester.fetch(
            StationEntrances, self._url(RailEndpoint.ENTRANCES), query
        )

    async def positions(self) -> TrainPositions:
        """Uniquely identifiable trains in service and what track circuits they occupy."""
        return await self._requester.fetch(
            TrainPositions, self._url(RailEndpoint.POSITIONS), (_JSON_CONTENT_TYPE,)
        )

    async def routes(self) -> StandardRoutes:
        """Ordered track circuits of each line's standard passenger route."""
        return await self._requester.fetch(
            StandardRoutes, self._url(RailEndpoint.ROUTES), (_JSON_CONTENT_TYPE,)
        )

    async def circuits(self) -> TrackCircuits:
        """Every track circuit with its neighbors."""
        return await self._requester.fetch(
            TrackCircuits, self._url(RailEndpoint.CIRCUITS), (_JSON_CONTENT_TYPE,)
        )

    async def station_to_station(
        self,
        from_station: Station | None = None,
        to_station: Station | None = None,
    ) -> StationToStationInfos:
        """Distance, fare and travel time between stations.

        Omitting either end widens the result to every matching pair.
        """
        query = (
            QueryBuilder()
            .add("FromStationCode", from_station)
            .add("ToStationCode", to_station)
            .build()
        )
        return await self._requester.fetch(
            StationToStationInfos, self._url(RailEndpoint.STATION_TO_STATION), query
        )

    async def elevator_and_escalator_incidents_at(
        self, station: Station | None = None
    ) -> ElevatorAndEscalatorIncidents:
        """Reported elevator and escalator outages, optionally for one station."""
        query = QueryBuilder().add("StationCode", station).build()
        return await self._requester.fetch(
            ElevatorAndEscalatorIncidents,
            self._url(RailEndpoint.ELEVATOR_AND_ESCALATOR_INCIDENTS),
            query,
        )

    async def incidents_at(self, station: Station | None = None) -> RailIncidents:
        """Reported rail incidents, optionally for one station."""
        query = QueryBuilder().add("StationCode", station).build()
        return await self._requester.fetch(
            RailIncidents, self._url(RailEndpoint.INCIDENTS), query
        )

    async def next_trains(self, station: Station) -> RailPredictions:
        """Next train arrivals at a station."""
        url = f"{self._url(RailEndpoint.NEXT_TRAINS)}/{station.value}"
        return await self._requester.fetch(RailPredictions, url)

    async def station_information(self, station: Station) -> StationInformation:
        """Location and address of a station."""
        query = QueryBuilder().add("StationCode", station).build()
        return await self._requester.fetch(
            StationInformation, self._url(RailEndpoint.STATION_INFORMATION), query
        )

    async def parking_information(self, station: Station) -> StationsParking:
        """Parking information for a station."""
        query = QueryBuilder().add("StationCode", station).build()
        return await self._requester.fetch(
            StationsParking, self._url(RailEndpoint.PARKING_INFORMATION), query
        )

    async def timings(self, station: Station) -> StationTimings:
        """Opening and first/last train times for a station."""
        query = QueryBuilder().add("StationCode", station).build()
        return await self._requester.fetch(
            StationTimings, self._url(RailEndpoint.TIMINGS), query
        )

    async def path_from(
        self, from_station: Station, to_station: Station
    ) -> PathBetweenStations:
        """Ordered stations between two stations on the same line."""
        query = (
            QueryBuilder()
            .add("FromStationCode", from_station)
            .add("ToStationCode", to_station)
            .build()
        )
        return await self._requester.fetch(
            PathBetweenStations, self._url(RailEndpoint.PATH), query
        )

    async def stations_on(self, line: Line | None = None) -> Stations:
        """Stations on a line, or every station when ``line`` is omitted."""
        query = QueryBuilder().add("LineCode", line).build()
        return await self._requester.fetch(
            Stations, self._url(RailEndpoint.STATIONS), query
        )
