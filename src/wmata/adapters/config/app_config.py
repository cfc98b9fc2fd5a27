"""12-factor configuration adapter using environment variables and TOML config."""

import tomllib
from pathlib import Path
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wmata.adapters.http.aiohttp_transport import DEFAULT_TIMEOUT_SECONDS
from wmata.domain.endpoints import WMATA_BASE_URL


def _check_timeout(v: float) -> float:
    if v <= 0:
        raise ValueError("request_timeout_seconds must be greater than 0")
    return v


def _normalize_base_url(v: str) -> str:
    if not v.startswith(("http://", "https://")):
        raise ValueError("base_url must start with http:// or https://")
    return v.rstrip("/")


class WmataConfig(BaseSettings):
    """Client configuration following 12-factor principles.

    Every field can be set through a ``WMATA_``-prefixed environment variable
    (``WMATA_API_KEY``, ``WMATA_BASE_URL``, ...) or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="WMATA_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    api_key: str = Field(
        default="", description="WMATA developer API key, sent as the api_key header"
    )
    base_url: str = Field(
        default=WMATA_BASE_URL,
        description="Scheme and host the endpoint paths are resolved against",
    )
    request_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="Total timeout for a single WMATA API request in seconds",
    )

    # Optional TOML file; its [api] table overrides the values above
    config_file: str | None = Field(
        default=None,
        description="Path to TOML configuration file with an [api] table",
    )

    @field_validator("request_timeout_seconds")
    @classmethod
    def validate_request_timeout(cls, v: float) -> float:
        """Validate the timeout is a positive number of seconds."""
        return _check_timeout(v)

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Validate the base URL is absolute HTTP(S)."""
        return _normalize_base_url(v)

    @model_validator(mode="after")
    def apply_config_file(self) -> "WmataConfig":
        """Apply the TOML overrides, then require an API key from some source."""
        if self.config_file:
            self.load_config_file()
        if not self.api_key:
            raise ValueError(
                "api_key must be set via WMATA_API_KEY or the [api] table of config_file"
            )
        return self

    def load_config_file(self) -> dict[str, Any]:
        """Load the TOML file and apply its [api] settings.

        Returns the parsed TOML document.
        """
        if not self.config_file:
            raise ValueError("config_file must be set to load a configuration file")

        config_path = Path(self.config_file)
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            toml_data = tomllib.load(f)

        api_config = toml_data.get("api", {})
        if not isinstance(api_config, dict):
            raise ValueError("TOML config 'api' must be a table")
        if "api_key" in api_config:
            self.api_key = api_config["api_key"]
        if "base_url" in api_config:
            self.base_url = _normalize_base_url(api_config["base_url"])
        if "request_timeout_seconds" in api_config:
            self.request_timeout_seconds = _check_timeout(
                float(api_config["request_timeout_seconds"])
            )

        return toml_data
