"""Contracts (protocols) the identifier shortcuts call into."""

from wmata.domain.contracts.bus_operations import BusOperations
from wmata.domain.contracts.rail_operations import RailOperations

__all__ = ["BusOperations", "RailOperations"]
