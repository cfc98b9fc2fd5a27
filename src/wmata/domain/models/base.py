"""Base class for models parsed from WMATA JSON bodies."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_pascal


class WmataModel(BaseModel):
    """Frozen model reading PascalCase keys into snake_case attributes."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_pascal,
        populate_by_name=True,
        extra="ignore",
    )
