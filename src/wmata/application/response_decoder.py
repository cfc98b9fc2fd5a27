"""Decodes WMATA response bodies into typed models."""

from typing import TypeVar

from pydantic import BaseModel, ValidationError

from wmata.domain.errors import ApiError, MalformedResponseError
from wmata.domain.models.error_envelope import ErrorEnvelope

ModelT = TypeVar("ModelT", bound=BaseModel)


def decode_response(body: str, model: type[ModelT]) -> ModelT:
    """Parse ``body`` as ``model``, falling back to the API error envelope.

    The expected shape is always tried first. Only when it fails is the body
    parsed as an error envelope; if that fails too, the error from the first
    attempt is the one reported.

    Raises:
        ApiError: If the body is a WMATA error envelope.
        MalformedResponseError: If the body matches neither shape.
    """
    try:
        return model.model_validate_json(body)
    except ValidationError as original_error:
        try:
            envelope = ErrorEnvelope.model_validate_json(body)
        except ValidationError:
            raise MalformedResponseError(original_error) from original_error
        raise ApiError(envelope.message) from None
