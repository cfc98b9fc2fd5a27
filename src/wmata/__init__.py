"""Typed async client for the WMATA (Washington Metropolitan Area Transit Authority) API."""

from wmata.adapters.config.app_config import WmataConfig
from wmata.client import BusClient, RailClient
from wmata.domain.errors import (
    ApiError,
    DecodeError,
    EmptyIdentifierError,
    FetchError,
    MalformedResponseError,
    TransportError,
    UnrecognizedCodeError,
    WmataError,
)
from wmata.domain.models import Line, RadiusAtLatLong, Route, Station, Stop

__all__ = [
    "ApiError",
    "BusClient",
    "DecodeError",
    "EmptyIdentifierError",
    "FetchError",
    "Line",
    "MalformedResponseError",
    "RadiusAtLatLong",
    "RailClient",
    "Route",
    "Station",
    "Stop",
    "TransportError",
    "UnrecognizedCodeError",
    "WmataConfig",
    "WmataError",
]
