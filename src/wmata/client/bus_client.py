"""MetroBus client."""

import datetime

from wmata.application.query_builder import QueryBuilder
from wmata.client.base import WmataClient
from wmata.domain.endpoints import BusEndpoint
from wmata.domain.models.bus_responses import (
    BusIncidents,
    BusPositions,
    PathDetails,
    Predictions,
    Routes,
    RouteSchedule,
    Stops,
    StopSchedule,
)
from wmata.domain.models.radius_at_lat_long import RadiusAtLatLong
from wmata.domain.models.route import Route
from wmata.domain.models.stop import Stop


class BusClient(WmataClient):
    """Async client for the MetroBus endpoints."""

    def _url(self, endpoint: BusEndpoint) -> str:
        return endpoint.resolve(self.base_url)

    async def routes(self) -> Routes:
        """Every bus route variant."""
        return await self._requester.fetch(Routes, self._url(BusEndpoint.ROUTES))

    async def stops(self, radius_at_lat_long: RadiusAtLatLong | None = None) -> Stops:
        """Bus stops, optionally limited to a search area."""
        query = QueryBuilder().extend(
            radius_at_lat_long.to_query() if radius_at_lat_long else None
        ).build()
        return await self._requester.fetch(Stops, self._url(BusEndpoint.STOPS), query)

    async def positions_along(
        self,
        route: Route | None = None,
        radius_at_lat_long: RadiusAtLatLong | None = None,
    ) -> BusPositions:
        """Bus positions, optionally filtered by route and search area."""
        query = (
            QueryBuilder()
            .add("RouteID", route)
            .extend(radius_at_lat_long.to_query() if radius_at_lat_long else None)
            .build()
        )
        return await self._requester.fetch(
            BusPositions, self._url(BusEndpoint.POSITIONS), query
        )

    async def incidents_along(self, route: Route | None = None) -> BusIncidents:
        """Reported bus incidents, optionally for one route."""
        query = QueryBuilder().add("Route", route).build()
        return await self._requester.fetch(
            BusIncidents, self._url(BusEndpoint.INCIDENTS), query
        )

    async def path(self, route: Route, date: datetime.date | None = None) -> PathDetails:
        """Shape and stops of a route variant, for today or ``date``."""
        query = QueryBuilder().add("RouteID", route).add("Date", date).build()
        return await self._requester.fetch(
            PathDetails, self._url(BusEndpoint.PATH_DETAILS), query
        )

    async def route_schedule(
        self,
        route: Route,
        date: datetime.date | None = None,
        including_variations: bool = False,
    ) -> RouteSchedule:
        """Scheduled trips of a route, optionally with its variants."""
        query = (
            QueryBuilder()
            .add("RouteID", route)
            .add("Date", date)
            .flag("IncludingVariations", including_variations)
            .build()
        )
        return await self._requester.fetch(
            RouteSchedule, self._url(BusEndpoint.ROUTE_SCHEDULE), query
        )

    async def next_buses(self, stop: Stop) -> Predictions:
        """Next bus arrival predictions at a stop."""
        query = QueryBuilder().add("StopID", stop).build()
        return await self._requester.fetch(
            Predictions, self._url(BusEndpoint.NEXT_BUSES), query
        )

    async def stop_schedule(self, stop: Stop, date: datetime.date | None = None) -> StopSchedule:
        """Scheduled arrivals at a stop, for today or ``date``."""
        query = QueryBuilder().add("StopID", stop).add("Date", date).build()
        return await self._requester.fetch(
            StopSchedule, self._url(BusEndpoint.STOP_SCHEDULE), query
        )
