"""MetroBus responses from the WMATA API."""

from pydantic import Field

from wmata.domain.models.base import WmataModel
from wmata.domain.models.fields import EasternDateTime, OptionalStopId, RouteId, StopId


class BusPosition(WmataModel):
    """Last reported position of a bus."""

    date_time: EasternDateTime
    # Minutes off schedule; positive is late, negative is early.
    deviation: float
    direction_number: int = Field(alias="DirectionNum")
    direction_text: str
    latitude: float = Field(alias="Lat")
    longitude: float = Field(alias="Lon")
    route: RouteId = Field(alias="RouteID")
    trip_end_time: EasternDateTime
    trip_headsign: str
    trip_id: str = Field(alias="TripID")
    trip_start_time: EasternDateTime
    vehicle_id: str = Field(alias="VehicleID")


class BusPositions(WmataModel):
    bus_positions: list[BusPosition]


class RouteDetails(WmataModel):
    """A bus route variant."""

    route: RouteId = Field(alias="RouteID")
    name: str
    line_description: str


class Routes(WmataModel):
    routes: list[RouteDetails]


class StopRoutes(WmataModel):
    """A bus stop and the route variants serving it on any day.

    ``stop`` is None when the API reports no regional stop ID.
    """

    stop: OptionalStopId = Field(default=None, alias="StopID")
    name: str
    latitude: float = Field(alias="Lat")
    longitude: float = Field(alias="Lon")
    routes: list[RouteId]


class Stops(WmataModel):
    stops: list[StopRoutes]


class BusIncident(WmataModel):
    """A reported bus delay or incident."""

    date_updated: EasternDateTime
    description: str
    incident_id: str = Field(alias="IncidentID")
    incident_type: str
    routes_affected: list[RouteId]


class BusIncidents(WmataModel):
    incidents: list[BusIncident] = Field(alias="BusIncidents")


class PathShape(WmataModel):
    latitude: float = Field(alias="Lat")
    longitude: float = Field(alias="Lon")
    sequence_number: int = Field(alias="SeqNum")


class PathDirection(WmataModel):
    trip_headsign: str
    direction_text: str
    direction_number: str = Field(alias="DirectionNum")
    shape: list[PathShape]
    stops: list[StopRoutes]


class PathDetails(WmataModel):
    """Ordered shape points and served stops of a route variant.

    A few routes return null for one of the two directions.
    """

    route: RouteId = Field(alias="RouteID")
    name: str
    direction_zero: PathDirection | None = Field(default=None, alias="Direction0")
    direction_one: PathDirection | None = Field(default=None, alias="Direction1")


class Prediction(WmataModel):
    """A next-bus arrival prediction."""

    direction_number: str = Field(alias="DirectionNum")
    direction_text: str
    minutes: int
    route: RouteId = Field(alias="RouteID")
    trip_id: str = Field(alias="TripID")
    vehicle_id: str = Field(alias="VehicleID")


class Predictions(WmataModel):
    predictions: list[Prediction]
    stop_name: str


class Arrival(WmataModel):
    """A scheduled stop of a trip at a bus stop."""

    schedule_time: EasternDateTime
    direction_number: str = Field(alias="DirectionNum")
    start_time: EasternDateTime
    end_time: EasternDateTime
    route: RouteId = Field(alias="RouteID")
    trip_direction_text: str
    trip_headsign: str
    trip_id: str = Field(alias="TripID")


class StopSchedule(WmataModel):
    arrivals: list[Arrival] = Field(alias="ScheduleArrivals")
    stop: StopRoutes


class StopInfo(WmataModel):
    stop: StopId = Field(alias="StopID")
    stop_name: str
    stop_sequence: int = Field(alias="StopSeq")
    time: EasternDateTime


class RouteInfo(WmataModel):
    """One scheduled trip of a route variant."""

    route: RouteId = Field(alias="RouteID")
    direction_number: str = Field(alias="DirectionNum")
    trip_direction_text: str
    trip_headsign: str
    start_time: EasternDateTime
    end_time: EasternDateTime
    stop_times: list[StopInfo]
    trip_id: str = Field(alias="TripID")


class RouteSchedule(WmataModel):
    name: str
    direction_zero: list[RouteInfo] = Field(alias="Direction0")
    direction_one: list[RouteInfo] = Field(alias="Direction1")
