"""Ports (interfaces) for the ports-and-adapters architecture."""

from wmata.domain.ports.transport import Transport

__all__ = ["Transport"]
