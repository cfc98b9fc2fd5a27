"""Error envelope returned by the WMATA API."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field


class ErrorEnvelope(BaseModel):
    """A single-field error body, e.g. ``{"Message": "API key not valid"}``.

    The API gateway uses a lowercase ``message`` key for authentication
    failures, so both spellings are accepted.
    """

    model_config = ConfigDict(frozen=True)

    message: str = Field(validation_alias=AliasChoices("Message", "message"))
