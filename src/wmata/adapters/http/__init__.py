"""HTTP transport adapters."""

from wmata.adapters.http.aiohttp_transport import DEFAULT_TIMEOUT_SECONDS, AiohttpTransport

__all__ = ["DEFAULT_TIMEOUT_SECONDS", "AiohttpTransport"]
