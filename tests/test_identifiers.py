"""Tests for the line, station, route and stop identifier codecs."""

import pytest

from wmata.domain.errors import DecodeError, EmptyIdentifierError, UnrecognizedCodeError
from wmata.domain.models import Line, RadiusAtLatLong, Route, Station, Stop


class TestLine:
    """Tests for Line codes."""

    @pytest.mark.parametrize("line", list(Line))
    def test_code_round_trips(self, line: Line) -> None:
        """Given any line, when encoding and decoding its code, then the same line comes back."""
        assert Line.from_code(str(line)) is line

    def test_all_six_lines_are_known(self) -> None:
        """Given the line enumeration, when listing codes, then all six lines are present."""
        assert {line.value for line in Line} == {"RD", "BL", "YL", "OR", "GR", "SV"}

    def test_unknown_code_is_rejected(self) -> None:
        """Given an unknown code, when decoding, then UnrecognizedCodeError names the input."""
        with pytest.raises(UnrecognizedCodeError, match="not a valid line code: 'PK'") as exc_info:
            Line.from_code("PK")

        assert exc_info.value.code == "PK"
        assert isinstance(exc_info.value, DecodeError)

    def test_lowercase_code_is_rejected(self) -> None:
        """Given a lowercase code, when decoding, then it is not accepted."""
        with pytest.raises(UnrecognizedCodeError):
            Line.from_code("rd")


class TestStation:
    """Tests for Station codes and their metadata."""

    @pytest.mark.parametrize("station", list(Station))
    def test_every_station_has_name_and_lines(self, station: Station) -> None:
        """Given any station, when reading metadata, then a name and at least one line exist."""
        assert Station.from_code(station.value) is station
        assert station.station_name
        assert station.lines

    def test_station_count(self) -> None:
        """Given the station enumeration, when counting, then every platform code is present."""
        assert len(Station) == 95

    def test_transfer_station_platforms(self) -> None:
        """Given Metro Center, when reading both platforms, then they share name and lines."""
        assert Station.A01.station_name == "Metro Center"
        assert Station.C01.station_name == "Metro Center"
        assert set(Station.A01.lines) == {Line.RED, Line.BLUE, Line.ORANGE, Line.SILVER}

    def test_single_line_station(self) -> None:
        """Given Wiehle-Reston East, when reading lines, then only Silver serves it."""
        assert Station.N06.station_name == "Wiehle-Reston East"
        assert Station.N06.lines == (Line.SILVER,)

    @pytest.mark.parametrize("code", ["", "A00", "Z99", "a01"])
    def test_unknown_code_is_rejected(self, code: str) -> None:
        """Given an unknown code, when decoding, then UnrecognizedCodeError is raised."""
        with pytest.raises(UnrecognizedCodeError, match="station code"):
            Station.from_code(code)


class TestRoute:
    """Tests for open route identifiers."""

    @pytest.mark.parametrize("value", ["A2", "10Av1", "W47"])
    def test_any_non_empty_string_round_trips(self, value: str) -> None:
        """Given a route string, when decoding and encoding, then the string is preserved."""
        assert str(Route.from_string(value)) == value

    def test_empty_string_is_rejected(self) -> None:
        """Given an empty string, when decoding a route, then EmptyIdentifierError is raised."""
        with pytest.raises(EmptyIdentifierError, match="route identifier must not be empty"):
            Route.from_string("")

    def test_routes_compare_by_value(self) -> None:
        """Given two routes with the same id, when comparing, then they are equal and hashable."""
        assert Route("A2") == Route.from_string("A2")
        assert len({Route("A2"), Route("A2")}) == 1

    def test_coerce_rejects_non_strings(self) -> None:
        """Given a number, when coercing to a route, then ValueError is raised."""
        with pytest.raises(ValueError, match="must be a string"):
            Route.coerce(42)


class TestStop:
    """Tests for open stop identifiers."""

    def test_round_trip(self) -> None:
        """Given a stop string, when decoding and encoding, then the string is preserved."""
        assert str(Stop.from_string("1001195")) == "1001195"

    def test_empty_string_is_rejected(self) -> None:
        """Given an empty string, when decoding a stop, then EmptyIdentifierError is raised."""
        with pytest.raises(EmptyIdentifierError, match="stop identifier must not be empty"):
            Stop.from_string("")

    def test_coerce_passes_stops_through(self) -> None:
        """Given a Stop, when coercing, then the same instance is returned."""
        stop = Stop("1001195")

        assert Stop.coerce(stop) is stop


def test_radius_at_lat_long_query_order() -> None:
    """Given a search area, when rendering query pairs, then Radius, Lat, Lon come in order."""
    area = RadiusAtLatLong(radius=1000, latitude=38.8978168, longitude=-77.0404246)

    assert area.to_query() == [
        ("Radius", "1000"),
        ("Lat", "38.8978168"),
        ("Lon", "-77.0404246"),
    ]
