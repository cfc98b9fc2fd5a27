"""Annotated field types shared by the response models."""

from datetime import datetime
from typing import Annotated, Any

from pydantic import BeforeValidator, PlainSerializer, PlainValidator

from wmata.domain.models.eastern_time import (
    parse_eastern_datetime,
    parse_optional_eastern_datetime,
)
from wmata.domain.models.line import Line
from wmata.domain.models.route import Route
from wmata.domain.models.station import Station
from wmata.domain.models.stop import Stop


def _blank_to_none(value: Any) -> Any:
    # The API sends "" for unused station/line slots (e.g. StationTogether2).
    if value == "":
        return None
    return value


def _optional_stop(value: Any) -> Stop | None:
    if value is None or value == "":
        return None
    return Stop.coerce(value)


EasternDateTime = Annotated[datetime, BeforeValidator(parse_eastern_datetime)]
OptionalEasternDateTime = Annotated[
    datetime | None, BeforeValidator(parse_optional_eastern_datetime)
]

OptionalStation = Annotated[Station | None, BeforeValidator(_blank_to_none)]
OptionalLine = Annotated[Line | None, BeforeValidator(_blank_to_none)]

RouteId = Annotated[Route, PlainValidator(Route.coerce), PlainSerializer(str, return_type=str)]
StopId = Annotated[Stop, PlainValidator(Stop.coerce), PlainSerializer(str, return_type=str)]
OptionalStopId = Annotated[
    Stop | None,
    PlainValidator(_optional_stop),
    PlainSerializer(lambda stop: str(stop) if stop is not None else None),
]
