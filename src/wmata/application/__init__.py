"""Application layer: query building, decoding and the request pipeline."""

from wmata.application.query_builder import QueryBuilder
from wmata.application.requester import Requester
from wmata.application.response_decoder import decode_response

__all__ = ["QueryBuilder", "Requester", "decode_response"]
