"""Wiring shared by the rail and bus clients."""

from typing import TYPE_CHECKING, Self

from wmata.adapters.http.aiohttp_transport import AiohttpTransport
from wmata.application.requester import Requester
from wmata.domain.endpoints import WMATA_BASE_URL
from wmata.domain.ports.transport import Transport

if TYPE_CHECKING:
    from aiohttp import ClientSession

    from wmata.adapters.config.app_config import WmataConfig


class WmataClient:
    """Holds the API key, the transport and the base URL; nothing else.

    Instances are never mutated after construction and can be shared between
    concurrent tasks.
    """

    def __init__(
        self,
        api_key: str,
        transport: Transport | None = None,
        base_url: str = WMATA_BASE_URL,
    ) -> None:
        """Initialize with an API key and an optional transport.

        Args:
            api_key: WMATA developer API key, never validated client-side.
            transport: HTTP transport; defaults to ``AiohttpTransport()``.
            base_url: Host the endpoint paths are resolved against.
        """
        self._requester = Requester(api_key, transport or AiohttpTransport())
        self._base_url = base_url

    @classmethod
    def from_config(
        cls, config: "WmataConfig", session: "ClientSession | None" = None
    ) -> Self:
        """Build a client from ``WmataConfig`` settings."""
        transport = AiohttpTransport(
            session=session, timeout_seconds=config.request_timeout_seconds
        )
        return cls(config.api_key, transport=transport, base_url=config.base_url)

    @property
    def api_key(self) -> str:
        return self._requester.api_key

    @property
    def base_url(self) -> str:
        return self._base_url
