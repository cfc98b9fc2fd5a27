"""Request pipeline shared by the rail and bus clients."""

import logging
from collections.abc import Sequence

from wmata.application.response_decoder import ModelT, decode_response
from wmata.domain.ports.transport import Transport

logger = logging.getLogger(__name__)

API_KEY_HEADER = "api_key"


class Requester:
    """Fetches one endpoint with the API key header and decodes the body.

    Holds no mutable state, so one instance can serve concurrent calls.
    """

    def __init__(self, api_key: str, transport: Transport) -> None:
        """Initialize with the WMATA API key and an HTTP transport."""
        self._api_key = api_key
        self._transport = transport

    @property
    def api_key(self) -> str:
        return self._api_key

    async def fetch(
        self,
        model: type[ModelT],
        url: str,
        query: Sequence[tuple[str, str]] = (),
    ) -> ModelT:
        """Issue a single GET to ``url`` and decode the body as ``model``.

        Raises:
            TransportError: If the HTTP request fails.
            ApiError: If the API answered with its error envelope.
            MalformedResponseError: If the body matches neither shape.
        """
        body = await self._transport.get(url, query, {API_KEY_HEADER: self._api_key})
        logger.debug(f"Decoding {len(body)} characters from {url} as {model.__name__}")
        return decode_response(body, model)
