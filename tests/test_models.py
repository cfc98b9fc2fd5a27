"""Tests for response models."""

from datetime import datetime, timedelta

import warnings

import pytest
from pydantic import ValidationError

from wmata.domain.models import Line, Route, Station
from wmata.domain.models.bus_responses import BusIncidents, PathDetails, RouteSchedule
from wmata.domain.models.eastern_time import EASTERN_STANDARD_TIME, parse_eastern_datetime
from wmata.domain.models.rail_responses import (
    ElevatorAndEscalatorIncidents,
    StationInformation,
    StationsParking,
)

METRO_CENTER = {
    "Address": {"City": "Washington", "State": "DC", "Street": "607 13th St. NW", "Zip": "20005"},
    "Code": "A01",
    "Lat": 38.898303,
    "Lon": -77.028099,
    "LineCode1": "RD",
    "LineCode2": None,
    "LineCode3": None,
    "LineCode4": None,
    "Name": "Metro Center",
    "StationTogether1": "C01",
    "StationTogether2": "",
}

ELEVATOR_OUTAGE = {
    "UnitName": "A03N04",
    "UnitType": "ESCALATOR",
    "UnitStatus": None,
    "StationCode": "A03",
    "StationName": "Dupont Circle, Q Street Entrance",
    "LocationDescription": "Escalator between street and mezzanine",
    "SymptomCode": None,
    "TimeOutOfService": "1125",
    "SymptomDescription": "Modernization",
    "DisplayOrder": 0,
    "DateOutOfServ": "2024-01-08T11:25:00",
    "DateUpdated": "2024-01-09T06:13:42",
    "EstimatedReturnToService": "2024-06-30T23:59:59",
}


class TestStationInformation:
    """Optional station and line slots."""

    def test_null_and_blank_slots_decode_to_none(self) -> None:
        """Given null and empty-string slots, when parsing, then both become None."""
        info = StationInformation.model_validate(METRO_CENTER)

        assert info.code is Station.A01
        assert info.first_line_code is Line.RED
        assert info.second_line_code is None
        assert info.first_station_together is Station.C01
        assert info.second_station_together is None
        assert info.address.zip == "20005"
        assert info.latitude == 38.898303

    def test_unknown_code_in_optional_slot_is_rejected(self) -> None:
        """Given a non-empty unknown code in an optional slot, when parsing, then it fails."""
        with pytest.raises(ValidationError):
            StationInformation.model_validate({**METRO_CENTER, "StationTogether2": "Z99"})

    def test_unknown_required_code_is_rejected(self) -> None:
        """Given an unknown station code, when parsing, then it fails."""
        with pytest.raises(ValidationError):
            StationInformation.model_validate({**METRO_CENTER, "Code": "XYZ"})

    def test_models_are_frozen(self) -> None:
        """Given a parsed model, when assigning a field, then it is rejected."""
        info = StationInformation.model_validate(METRO_CENTER)

        with pytest.raises(ValidationError):
            info.name = "Gallery Place"  # type: ignore[misc]

    def test_unknown_keys_are_ignored(self) -> None:
        """Given an extra key, when parsing, then it is ignored."""
        info = StationInformation.model_validate({**METRO_CENTER, "NewField": 1})

        assert not hasattr(info, "new_field")


class TestEasternTimestamps:
    """Timestamps are pinned to a fixed UTC-05:00 offset."""

    def test_parses_with_fixed_offset(self) -> None:
        """Given a summer timestamp, when parsing, then the offset is still -05:00."""
        parsed = parse_eastern_datetime("2024-07-04T12:00:00")

        assert parsed == datetime(2024, 7, 4, 12, 0, tzinfo=EASTERN_STANDARD_TIME)
        assert parsed.utcoffset() == timedelta(hours=-5)

    def test_elevator_incident_dates(self) -> None:
        """Given an outage, when parsing, then aliased date fields are typed datetimes."""
        result = ElevatorAndEscalatorIncidents.model_validate(
            {"ElevatorIncidents": [ELEVATOR_OUTAGE]}
        )

        incident = result.incidents[0]
        assert incident.station_code is Station.A03
        assert incident.date_out_of_service == datetime(
            2024, 1, 8, 11, 25, tzinfo=EASTERN_STANDARD_TIME
        )
        assert incident.estimated_return_to_service is not None
        assert incident.estimated_return_to_service.year == 2024

    @pytest.mark.parametrize("value", [None, "", "soon"])
    def test_unparseable_estimated_return_is_none(self, value: str | None) -> None:
        """Given a missing or garbled return date, when parsing, then it decodes to None."""
        result = ElevatorAndEscalatorIncidents.model_validate(
            {"ElevatorIncidents": [{**ELEVATOR_OUTAGE, "EstimatedReturnToService": value}]}
        )

        assert result.incidents[0].estimated_return_to_service is None

    def test_bad_required_timestamp_fails(self) -> None:
        """Given a garbled required timestamp, when parsing, then validation fails."""
        with pytest.raises(ValidationError):
            ElevatorAndEscalatorIncidents.model_validate(
                {"ElevatorIncidents": [{**ELEVATOR_OUTAGE, "DateUpdated": "yesterday"}]}
            )


def test_bus_incidents_use_routes_affected() -> None:
    """Given a bus incident, when parsing, then affected routes are typed identifiers."""
    result = BusIncidents.model_validate(
        {
            "BusIncidents": [
                {
                    "DateUpdated": "2024-03-09T08:00:00",
                    "Description": "Detour due to construction",
                    "IncidentID": "0B0D0E4B",
                    "IncidentType": "Alert",
                    "RoutesAffected": ["A2", "A6"],
                }
            ]
        }
    )

    assert result.incidents[0].routes_affected == [Route("A2"), Route("A6")]


def test_empty_route_id_is_rejected() -> None:
    """Given an empty route identifier in a response, when parsing, then it fails."""
    with pytest.raises(ValidationError):
        BusIncidents.model_validate(
            {
                "BusIncidents": [
                    {
                        "DateUpdated": "2024-03-09T08:00:00",
                        "Description": "",
                        "IncidentID": "1",
                        "IncidentType": "Alert",
                        "RoutesAffected": [""],
                    }
                ]
            }
        )


def test_path_details_tolerate_missing_direction() -> None:
    """Given a route with one direction null, when parsing, then that direction is None."""
    result = PathDetails.model_validate(
        {"RouteID": "A2", "Name": "A2 - ANACOSTIA", "Direction0": None, "Direction1": None}
    )

    assert result.route == Route("A2")
    assert result.direction_zero is None


def test_route_schedule_serializes_route_as_string() -> None:
    """Given a parsed schedule, when dumping to JSON, then route identifiers are plain strings."""
    schedule = RouteSchedule.model_validate(
        {
            "Name": "A2",
            "Direction0": [
                {
                    "RouteID": "A2",
                    "DirectionNum": "0",
                    "TripDirectionText": "NORTH",
                    "TripHeadsign": "ANACOSTIA",
                    "StartTime": "2024-03-09T05:00:00",
                    "EndTime": "2024-03-09T05:40:00",
                    "StopTimes": [
                        {
                            "StopID": "1001195",
                            "StopName": "A",
                            "StopSeq": 1,
                            "Time": "2024-03-09T05:00:00",
                        }
                    ],
                    "TripID": "1",
                }
            ],
            "Direction1": [],
        }
    )

    dumped = schedule.model_dump(mode="json")
    assert dumped["direction_zero"][0]["route"] == "A2"
    assert dumped["direction_zero"][0]["stop_times"][0]["stop"] == "1001195"


def test_parking_notes_are_optional() -> None:
    """Given a station without parking notes, when parsing, then notes are None."""
    result = StationsParking.model_validate(
        {
            "StationsParking": [
                {
                    "Code": "K08",
                    "Notes": None,
                    "AllDayParking": {"TotalCount": 5169, "RiderCost": 5.2, "NonRiderCost": None},
                    "ShortTermParking": {"TotalCount": 0, "Notes": None},
                }
            ]
        }
    )

    parking = result.stations_parking[0]
    assert parking.code is Station.K08
    assert parking.all_day_parking.total_count == 5169
    assert parking.notes is None


class TestTimestampSerialization:
    """Timestamped models dump back to JSON cleanly."""

    def test_dump_json_emits_no_serializer_warnings(self) -> None:
        """Given a timestamped model, when dumping with warnings as errors, then it succeeds."""
        incidents = BusIncidents.model_validate_json(
            '{"BusIncidents": [{"DateUpdated": "2024-03-09T05:00:00", "Description": "Detour",'
            ' "IncidentID": "1", "IncidentType": "Alert", "RoutesAffected": ["A2"]}]}'
        )

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            dumped = incidents.model_dump_json()
            python_dump = incidents.model_dump(mode="json")

        assert '"date_updated":"2024-03-09T05:00:00-05:00"' in dumped
        assert python_dump["incidents"][0]["routes_affected"] == ["A2"]

    def test_optional_timestamp_dumps_null(self) -> None:
        """Given no return-to-service date, when dumping, then it is null without warnings."""
        result = ElevatorAndEscalatorIncidents.model_validate(
            {"ElevatorIncidents": [{**ELEVATOR_OUTAGE, "EstimatedReturnToService": None}]}
        )

        with warnings.catch_warnings():
            warnings.simplefilter("error")
            dumped = result.model_dump(mode="json")

        incident = dumped["incidents"][0]
        assert incident["estimated_return_to_service"] is None
        assert incident["date_out_of_service"] == "2024-01-08T11:25:00-05:00"

    def test_naive_datetime_is_pinned_to_eastern_standard_time(self) -> None:
        """Given a naive datetime, when validating, then the EST offset is added."""
        result = ElevatorAndEscalatorIncidents.model_validate(
            {"ElevatorIncidents": [{**ELEVATOR_OUTAGE, "DateUpdated": datetime(2024, 1, 9, 6, 0)}]}
        )

        assert result.incidents[0].date_updated.utcoffset() == timedelta(hours=-5)

    def test_aware_datetime_passes_through(self) -> None:
        """Given an aware datetime, when parsing, then its offset is kept."""
        aware = datetime(2024, 1, 9, 6, 0, tzinfo=EASTERN_STANDARD_TIME) + timedelta(hours=1)

        assert parse_eastern_datetime(aware) is aware
