"""MetroRail station codes and their static metadata."""

from enum import Enum
from typing import TYPE_CHECKING

from wmata.domain.errors import UnrecognizedCodeError
from wmata.domain.models.line import Line

if TYPE_CHECKING:
    from wmata.domain.contracts.rail_operations import RailOperations
    from wmata.domain.models.rail_responses import (
        ElevatorAndEscalatorIncidents,
        PathBetweenStations,
        RailIncidents,
        RailPredictions,
        StationInformation,
        StationsParking,
        StationTimings,
        StationToStationInfos,
    )


class Station(str, Enum):
    """Every MetroRail station code as defined by WMATA."""

    A01 = "A01"
    A02 = "A02"
    A03 = "A03"
    A04 = "A04"
    A05 = "A05"
    A06 = "A06"
    A07 = "A07"
    A08 = "A08"
    A09 = "A09"
    A10 = "A10"
    A11 = "A11"
    A12 = "A12"
    A13 = "A13"
    A14 = "A14"
    A15 = "A15"
    B01 = "B01"
    B02 = "B02"
    B03 = "B03"
    B04 = "B04"
    B05 = "B05"
    B06 = "B06"
    B07 = "B07"
    B08 = "B08"
    B09 = "B09"
    B10 = "B10"
    B11 = "B11"
    B35 = "B35"
    C01 = "C01"
    C02 = "C02"
    C03 = "C03"
    C04 = "C04"
    C05 = "C05"
    C06 = "C06"
    C07 = "C07"
    C08 = "C08"
    C09 = "C09"
    C10 = "C10"
    C12 = "C12"
    C13 = "C13"
    C14 = "C14"
    C15 = "C15"
    D01 = "D01"
    D02 = "D02"
    D03 = "D03"
    D04 = "D04"
    D05 = "D05"
    D06 = "D06"
    D07 = "D07"
    D08 = "D08"
    D09 = "D09"
    D10 = "D10"
    D11 = "D11"
    D12 = "D12"
    D13 = "D13"
    E01 = "E01"
    E02 = "E02"
    E03 = "E03"
    E04 = "E04"
    E05 = "E05"
    E06 = "E06"
    E07 = "E07"
    E08 = "E08"
    E09 = "E09"
    E10 = "E10"
    F01 = "F01"
    F02 = "F02"
    F03 = "F03"
    F04 = "F04"
    F05 = "F05"
    F06 = "F06"
    F07 = "F07"
    F08 = "F08"
    F09 = "F09"
    F10 = "F10"
    F11 = "F11"
    G01 = "G01"
    G02 = "G02"
    G03 = "G03"
    G04 = "G04"
    G05 = "G05"
    J02 = "J02"
    J03 = "J03"
    K01 = "K01"
    K02 = "K02"
    K03 = "K03"
    K04 = "K04"
    K05 = "K05"
    K06 = "K06"
    K07 = "K07"
    K08 = "K08"
    N01 = "N01"
    N02 = "N02"
    N03 = "N03"
    N04 = "N04"
    N06 = "N06"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Station":
        """Decode a three-character station code such as ``"A01"``.

        Raises:
            UnrecognizedCodeError: If ``code`` is not a known station code.
        """
        try:
            return cls(code)
        except ValueError:
            raise UnrecognizedCodeError("station", code) from None

    @property
    def station_name(self) -> str:
        """Display name of the station as shown on the WMATA website."""
        return _STATION_NAMES[self]

    @property
    def lines(self) -> tuple[Line, ...]:
        """Lines serving this platform."""
        return _STATION_LINES[self]

    async def to_station(
        self, client: "RailOperations", destination: "Station | None" = None
    ) -> "StationToStationInfos":
        """Distance, fare and travel time from this station.

        Without ``destination`` every pair starting here is returned.
        """
        return await client.station_to_station(self, destination)

    async def elevator_and_escalator_incidents(
        self, client: "RailOperations"
    ) -> "ElevatorAndEscalatorIncidents":
        return await client.elevator_and_escalator_incidents_at(self)

    async def incidents(self, client: "RailOperations") -> "RailIncidents":
        return await client.incidents_at(self)

    async def next_trains(self, client: "RailOperations") -> "RailPredictions":
        return await client.next_trains(self)

    async def information(self, client: "RailOperations") -> "StationInformation":
        return await client.station_information(self)

    async def parking_information(self, client: "RailOperations") -> "StationsParking":
        return await client.parking_information(self)

    async def path_to(
        self, client: "RailOperations", destination: "Station"
    ) -> "PathBetweenStations":
        """Ordered stations from here to ``destination`` on the same line."""
        return await client.path_from(self, destination)

    async def timings(self, client: "RailOperations") -> "StationTimings":
        return await client.timings(self)


_STATION_NAMES: dict[Station, str] = {
    Station.A01: "Metro Center",
    Station.A02: "Farragut North",
    Station.A03: "Dupont Circle",
    Station.A04: "Woodley Park-Zoo/Adams Morgan",
    Station.A05: "Cleveland Park",
    Station.A06: "Van Ness-UDC",
    Station.A07: "Tenleytown-AU",
    Station.A08: "Friendship Heights",
    Station.A09: "Bethesda",
    Station.A10: "Medical Center",
    Station.A11: "Grosvenor-Strathmore",
    Station.A12: "White Flint",
    Station.A13: "Twinbrook",
    Station.A14: "Rockville",
    Station.A15: "Shady Grove",
    Station.B01: "Gallery Pl-Chinatown",
    Station.B02: "Judiciary Square",
    Station.B03: "Union Station",
    Station.B04: "Rhode Island Ave-Brentwood",
    Station.B05: "Brookland-CUA",
    Station.B06: "Fort Totten",
    Station.B07: "Takoma",
    Station.B08: "Silver Spring",
    Station.B09: "Forest Glen",
    Station.B10: "Wheaton",
    Station.B11: "Glenmont",
    Station.B35: "NoMa-Gallaudet U",
    Station.C01: "Metro Center",
    Station.C02: "McPherson Square",
    Station.C03: "Farragut West",
    Station.C04: "Foggy Bottom-GWU",
    Station.C05: "Rosslyn",
    Station.C06: "Arlington Cemetery",
    Station.C07: "Pentagon",
    Station.C08: "Pentagon City",
    Station.C09: "Crystal City",
    Station.C10: "Ronald Reagan Washington National Airport",
    Station.C12: "Braddock Road",
    Station.C13: "King St-Old Town",
    Station.C14: "Eisenhower Avenue",
    Station.C15: "Huntington",
    Station.D01: "Federal Triangle",
    Station.D02: "Smithsonian",
    Station.D03: "L'Enfant Plaza",
    Station.D04: "Federal Center SW",
    Station.D05: "Capitol South",
    Station.D06: "Eastern Market",
    Station.D07: "Potomac Ave",
    Station.D08: "Stadium-Armory",
    Station.D09: "Minnesota Ave",
    Station.D10: "Deanwood",
    Station.D11: "Cheverly",
    Station.D12: "Landover",
    Station.D13: "New Carrollton",
    Station.E01: "Mt Vernon Sq 7th St-Convention Center",
    Station.E02: "Shaw-Howard U",
    Station.E03: "U Street/African-Amer Civil War Memorial/Cardozo",
    Station.E04: "Columbia Heights",
    Station.E05: "Georgia Ave-Petworth",
    Station.E06: "Fort Totten",
    Station.E07: "West Hyattsville",
    Station.E08: "Prince George's Plaza",
    Station.E09: "College Park-U of Md",
    Station.E10: "Greenbelt",
    Station.F01: "Gallery Pl-Chinatown",
    Station.F02: "Archives-Navy Memorial-Penn Quarter",
    Station.F03: "L'Enfant Plaza",
    Station.F04: "Waterfront",
    Station.F05: "Navy Yard-Ballpark",
    Station.F06: "Anacostia",
    Station.F07: "Congress Heights",
    Station.F08: "Southern Avenue",
    Station.F09: "Naylor Road",
    Station.F10: "Suitland",
    Station.F11: "Branch Ave",
    Station.G01: "Benning Road",
    Station.G02: "Capitol Heights",
    Station.G03: "Addison Road-Seat Pleasant",
    Station.G04: "Morgan Boulevard",
    Station.G05: "Largo Town Center",
    Station.J02: "Van Dorn Street",
    Station.J03: "Franconia-Springfield",
    Station.K01: "Court House",
    Station.K02: "Clarendon",
    Station.K03: "Virginia Square-GMU",
    Station.K04: "Ballston-MU",
    Station.K05: "East Falls Church",
    Station.K06: "West Falls Church-VT/UVA",
    Station.K07: "Dunn Loring-Merrifield",
    Station.K08: "Vienna/Fairfax-GMU",
    Station.N01: "McLean",
    Station.N02: "Tysons Corner",
    Station.N03: "Greensboro",
    Station.N04: "Spring Hill",
    Station.N06: "Wiehle-Reston East",
}

_LINE_GROUPS: tuple[tuple[tuple[Line, ...], tuple[str, ...]], ...] = (
    ((Line.BLUE, Line.ORANGE, Line.SILVER, Line.RED), ("A01", "C01")),
    (
        (Line.RED,),
        (
            "A02", "A03", "A04", "A05", "A06", "A07", "A08", "A09", "A10", "A11", "A12",
            "A13", "A14", "A15", "B02", "B03", "B04", "B05", "B07", "B08", "B09", "B10",
            "B11", "B35",
        ),
    ),
    ((Line.RED, Line.YELLOW, Line.GREEN), ("B01", "B06", "E06", "F01")),
    (
        (Line.BLUE, Line.ORANGE, Line.SILVER),
        ("C02", "C03", "C04", "C05", "D01", "D02", "D04", "D05", "D06", "D07", "D08"),
    ),
    ((Line.BLUE,), ("C06", "J02", "J03")),
    ((Line.BLUE, Line.YELLOW), ("C07", "C08", "C09", "C10", "C12", "C13")),
    ((Line.YELLOW,), ("C14", "C15")),
    ((Line.GREEN, Line.YELLOW, Line.BLUE, Line.ORANGE, Line.SILVER), ("D03", "F03")),
    ((Line.ORANGE,), ("D09", "D10", "D11", "D12", "D13", "K06", "K07", "K08")),
    (
        (Line.GREEN, Line.YELLOW),
        ("E01", "E02", "E03", "E04", "E05", "E07", "E08", "E09", "E10", "F02"),
    ),
    ((Line.GREEN,), ("F04", "F05", "F06", "F07", "F08", "F09", "F10", "F11")),
    ((Line.BLUE, Line.SILVER), ("G01", "G02", "G03", "G04", "G05")),
    ((Line.ORANGE, Line.SILVER), ("K01", "K02", "K03", "K04", "K05")),
    ((Line.SILVER,), ("N01", "N02", "N03", "N04", "N06")),
)

_STATION_LINES: dict[Station, tuple[Line, ...]] = {
    Station(code): lines for lines, codes in _LINE_GROUPS for code in codes
}
