"""MetroRail responses from the WMATA API."""

from pydantic import Field

from wmata.domain.models.base import WmataModel
from wmata.domain.models.fields import (
    EasternDateTime,
    OptionalEasternDateTime,
    OptionalLine,
    OptionalStation,
)
from wmata.domain.models.line import Line
from wmata.domain.models.station import Station


class LineDetails(WmataModel):
    """Basic information on one MetroRail line."""

    line_code: Line
    display_name: str
    start_station_code: Station
    end_station_code: Station
    # Intermediate terminals, e.g. Mt Vernon Sq for Yellow, Silver Spring for Red.
    first_internal_destination: OptionalStation = Field(default=None, alias="InternalDestination1")
    second_internal_destination: OptionalStation = Field(default=None, alias="InternalDestination2")


class Lines(WmataModel):
    lines: list[LineDetails]


class StationEntrance(WmataModel):
    """A station entrance near a searched point."""

    description: str
    id: str = Field(alias="ID")
    latitude: float = Field(alias="Lat")
    longitude: float = Field(alias="Lon")
    name: str
    first_station_code: Station = Field(alias="StationCode1")
    second_station_code: OptionalStation = Field(default=None, alias="StationCode2")


class StationEntrances(WmataModel):
    entrances: list[StationEntrance]


class TrainPosition(WmataModel):
    """A uniquely identifiable train in service and the circuit it occupies."""

    train_id: str
    train_number: str
    car_count: int
    direction_number: int = Field(alias="DirectionNum")
    circuit_id: int
    destination_station_code: OptionalStation = None
    line_code: OptionalLine = None
    seconds_at_location: int
    service_type: str


class TrainPositions(WmataModel):
    train_positions: list[TrainPosition]


class TrackCircuitWithStation(WmataModel):
    sequence_number: int = Field(alias="SeqNum")
    circuit_id: int
    station_code: OptionalStation = None


class StandardRoute(WmataModel):
    """Ordered track circuits for one line and track number."""

    line_code: Line
    track_number: int = Field(alias="TrackNum")
    track_circuits: list[TrackCircuitWithStation]


class StandardRoutes(WmataModel):
    standard_routes: list[StandardRoute]


class TrackNeighbor(WmataModel):
    # "Left" neighbors are generally west/south, "Right" east/north.
    neighbor_type: str
    circuit_ids: list[int]


class TrackCircuit(WmataModel):
    """A track circuit and its neighbors.

    Tracks 1 and 2 are main lines; 0 and 3 are connectors and pocket tracks.
    """

    track: int
    circuit_id: int
    neighbors: list[TrackNeighbor]


class TrackCircuits(WmataModel):
    track_circuits: list[TrackCircuit]


class ElevatorAndEscalatorIncident(WmataModel):
    """A reported elevator or escalator outage."""

    unit_name: str
    unit_type: str
    unit_status: str | None = None
    station_code: Station
    station_name: str
    location_description: str
    symptom_code: str | None = None
    time_out_of_service: str
    symptom_description: str
    display_order: float
    date_out_of_service: EasternDateTime = Field(alias="DateOutOfServ")
    date_updated: EasternDateTime
    estimated_return_to_service: OptionalEasternDateTime = None


class ElevatorAndEscalatorIncidents(WmataModel):
    incidents: list[ElevatorAndEscalatorIncident] = Field(alias="ElevatorIncidents")


class RailIncident(WmataModel):
    """A significant disruption or delay to normal rail service."""

    incident_id: str = Field(alias="IncidentID")
    description: str
    start_location_full_name: str | None = None
    end_location_full_name: str | None = None
    passenger_delay: float
    delay_severity: str | None = None
    incident_type: str
    emergency_text: str | None = None
    # Semicolon separated, e.g. "BL; OR; RD;".
    lines_affected: str
    date_updated: EasternDateTime


class RailIncidents(WmataModel):
    incidents: list[RailIncident]


class RailFare(WmataModel):
    off_peak_time: float
    peak_time: float
    senior_disabled: float


class StationToStationInfo(WmataModel):
    """Distance, fare and travel time between two stations."""

    composite_miles: float
    destination_station: Station
    rail_fare: RailFare
    rail_time: int
    source_station: Station


class StationToStationInfos(WmataModel):
    station_to_station_infos: list[StationToStationInfo]


class RailPrediction(WmataModel):
    """A next-train arrival prediction.

    ``minutes`` may be numeric, ``ARR``, ``BRD``, ``---`` or empty, and
    ``line`` may be blank or ``No`` for trains without passengers, so both
    stay as plain strings.
    """

    car: str | None = None
    destination: str
    destination_code: OptionalStation = None
    destination_name: str
    group: str
    line: str
    location_code: Station
    location_name: str
    minutes: str = Field(alias="Min")


class RailPredictions(WmataModel):
    trains: list[RailPrediction]


class StationAddress(WmataModel):
    city: str
    state: str
    street: str
    zip: str


class StationInformation(WmataModel):
    """Location and address information for one station."""

    address: StationAddress
    code: Station
    latitude: float = Field(alias="Lat")
    longitude: float = Field(alias="Lon")
    first_line_code: Line = Field(alias="LineCode1")
    second_line_code: OptionalLine = Field(default=None, alias="LineCode2")
    third_line_code: OptionalLine = Field(default=None, alias="LineCode3")
    fourth_line_code: OptionalLine = Field(default=None, alias="LineCode4")
    name: str
    # Multi-platform stations (Metro Center, Gallery Pl, ...) list the other code here.
    first_station_together: OptionalStation = Field(default=None, alias="StationTogether1")
    second_station_together: OptionalStation = Field(default=None, alias="StationTogether2")


class Stations(WmataModel):
    stations: list[StationInformation]


class AllDayParking(WmataModel):
    total_count: int
    rider_cost: float | None = None
    non_rider_cost: float | None = None
    saturday_rider_cost: float | None = None
    saturday_non_rider_cost: float | None = None


class ShortTermParking(WmataModel):
    total_count: int
    notes: str | None = None


class StationParking(WmataModel):
    code: Station
    notes: str | None = None
    all_day_parking: AllDayParking
    short_term_parking: ShortTermParking


class StationsParking(WmataModel):
    stations_parking: list[StationParking]


class PathStation(WmataModel):
    """One station on the path between two stations of the same line."""

    distance_to_previous_station: int = Field(alias="DistanceToPrev")
    line_code: Line
    sequence_number: int = Field(alias="SeqNum")
    station_code: Station
    station_name: str


class PathBetweenStations(WmataModel):
    path: list[PathStation]


class TrainTime(WmataModel):
    time: str
    destination_station: Station


class StationFirstLastTrains(WmataModel):
    opening_time: str
    first_trains: list[TrainTime]
    last_trains: list[TrainTime]


class StationTime(WmataModel):
    """Opening and first/last train times for each day of the week."""

    code: Station
    station_name: str
    monday: StationFirstLastTrains
    tuesday: StationFirstLastTrains
    wednesday: StationFirstLastTrains
    thursday: StationFirstLastTrains
    friday: StationFirstLastTrains
    saturday: StationFirstLastTrains
    sunday: StationFirstLastTrains


class StationTimings(WmataModel):
    station_times: list[StationTime]
