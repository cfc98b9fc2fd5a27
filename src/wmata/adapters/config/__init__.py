"""Configuration adapters."""

from wmata.adapters.config.app_config import WmataConfig

__all__ = ["WmataConfig"]
