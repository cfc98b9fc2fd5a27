"""Async WMATA API clients."""

from wmata.client.bus_client import BusClient
from wmata.client.rail_client import RailClient

__all__ = ["BusClient", "RailClient"]
