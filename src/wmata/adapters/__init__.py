"""Adapters layer - external system integrations."""

from wmata.adapters.config import WmataConfig
from wmata.adapters.http import AiohttpTransport

__all__ = ["AiohttpTransport", "WmataConfig"]
