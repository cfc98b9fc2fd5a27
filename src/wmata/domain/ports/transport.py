"""HTTP transport port."""

from collections.abc import Mapping, Sequence
from typing import Protocol


class Transport(Protocol):
    """Port for issuing a single HTTP GET and reading the body as text."""

    async def get(
        self,
        url: str,
        params: Sequence[tuple[str, str]],
        headers: Mapping[str, str],
    ) -> str:
        """Return the response body regardless of status code.

        Raises:
            TransportError: If the request could not be completed.
        """
        ...
