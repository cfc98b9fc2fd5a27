"""Domain models for the WMATA API."""

from wmata.domain.models.error_envelope import ErrorEnvelope
from wmata.domain.models.line import Line
from wmata.domain.models.radius_at_lat_long import RadiusAtLatLong
from wmata.domain.models.route import Route
from wmata.domain.models.station import Station
from wmata.domain.models.stop import Stop

__all__ = [
    "ErrorEnvelope",
    "Line",
    "RadiusAtLatLong",
    "Route",
    "Station",
    "Stop",
]
