"""aiohttp implementation of the HTTP transport port."""

import logging
from collections.abc import Mapping, Sequence

import aiohttp

from wmata.adapters.api_request_logger import log_api_request
from wmata.domain.errors import TransportError
from wmata.domain.ports.transport import Transport

logger = logging.getLogger(__name__)

# The API itself defines no timeout; bound each request so a stalled
# connection cannot hang the caller.
DEFAULT_TIMEOUT_SECONDS = 30.0


class AiohttpTransport(Transport):
    """Issues one GET per call and returns the body text for any status."""

    def __init__(
        self,
        session: aiohttp.ClientSession | None = None,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Initialize with an optional shared aiohttp session.

        Without a session, each request opens and closes its own.
        """
        self._session = session
        self._timeout = aiohttp.ClientTimeout(total=timeout_seconds)

    async def get(
        self,
        url: str,
        params: Sequence[tuple[str, str]],
        headers: Mapping[str, str],
    ) -> str:
        """Fetch ``url`` with ordered query ``params`` and return the body.

        Raises:
            TransportError: On connection, TLS, DNS or timeout failures.
        """
        log_api_request("GET", url, params=params, headers=headers)

        try:
            if self._session is not None:
                return await self._read_body(self._session, url, params, headers)
            async with aiohttp.ClientSession() as session:
                return await self._read_body(session, url, params, headers)
        except (aiohttp.ClientError, TimeoutError) as e:
            message = str(e) or e.__class__.__name__
            logger.debug(f"Transport failure for {url}: {message}")
            raise TransportError(message) from e

    async def _read_body(
        self,
        session: aiohttp.ClientSession,
        url: str,
        params: Sequence[tuple[str, str]],
        headers: Mapping[str, str],
    ) -> str:
        async with session.get(
            url,
            params=list(params) or None,
            headers=dict(headers),
            timeout=self._timeout,
        ) as response:
            # Success is decided by the body shape, not the status code.
            if response.status != 200:
                logger.debug(f"WMATA API returned status {response.status} for {url}")
            return await response.text(encoding="utf-8", errors="replace")
