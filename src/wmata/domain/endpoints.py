"""Fixed WMATA endpoint catalog.

One member per client operation. Next-train predictions take the station
code as a trailing path segment; every other identifier goes in the query
string.
"""

from enum import Enum

WMATA_BASE_URL = "https://api.wmata.com"


class _Endpoint(str, Enum):
    @property
    def url(self) -> str:
        """Absolute URL on the public API host."""
        return self.resolve(WMATA_BASE_URL)

    def resolve(self, base_url: str) -> str:
        """Absolute URL on ``base_url``."""
        return f"{base_url.rstrip('/')}{self.value}"


class RailEndpoint(_Endpoint):
    LINES = "/Rail.svc/json/jLines"
    ENTRANCES = "/Rail.svc/json/jStationEntrances"
    STATIONS = "/Rail.svc/json/jStations"
    STATION_INFORMATION = "/Rail.svc/json/jStationInfo"
    PARKING_INFORMATION = "/Rail.svc/json/jStationParking"
    PATH = "/Rail.svc/json/jPath"
    TIMINGS = "/Rail.svc/json/jStationTimes"
    STATION_TO_STATION = "/Rail.svc/json/jSrcStationToDstStationInfo"
    NEXT_TRAINS = "/StationPrediction.svc/json/GetPrediction"
    POSITIONS = "/TrainPositions/TrainPositions"
    ROUTES = "/TrainPositions/StandardRoutes"
    CIRCUITS = "/TrainPositions/TrackCircuits"
    ELEVATOR_AND_ESCALATOR_INCIDENTS = "/Incidents.svc/json/ElevatorIncidents"
    INCIDENTS = "/Incidents.svc/json/Incidents"


class BusEndpoint(_Endpoint):
    ROUTES = "/Bus.svc/json/jRoutes"
    STOPS = "/Bus.svc/json/jStops"
    POSITIONS = "/Bus.svc/json/jBusPositions"
    PATH_DETAILS = "/Bus.svc/json/jRouteDetails"
    ROUTE_SCHEDULE = "/Bus.svc/json/jRouteSchedule"
    STOP_SCHEDULE = "/Bus.svc/json/jStopSchedule"
    NEXT_BUSES = "/NextBusService.svc/json/jPredictions"
    INCIDENTS = "/Incidents.svc/json/BusIncidents"
