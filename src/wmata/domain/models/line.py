"""MetroRail line codes."""

from enum import Enum
from typing import TYPE_CHECKING

from wmata.domain.errors import UnrecognizedCodeError

if TYPE_CHECKING:
    from wmata.domain.contracts.rail_operations import RailOperations
    from wmata.domain.models.rail_responses import Stations


class Line(str, Enum):
    """Two-letter code of every MetroRail line."""

    RED = "RD"
    BLUE = "BL"
    YELLOW = "YL"
    ORANGE = "OR"
    GREEN = "GR"
    SILVER = "SV"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> "Line":
        """Decode a two-letter line code such as ``"RD"``.

        Raises:
            UnrecognizedCodeError: If ``code`` is not a known line code.
        """
        try:
            return cls(code)
        except ValueError:
            raise UnrecognizedCodeError("line", code) from None

    async def stations(self, client: "RailOperations") -> "Stations":
        """Stations served by this line."""
        return await client.stations_on(self)
