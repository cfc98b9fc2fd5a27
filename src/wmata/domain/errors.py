"""Error taxonomy for the WMATA client.

Every failure surfaces as a subclass of ``WmataError``. Identifier and
response decoding failures derive from ``DecodeError``; HTTP layer failures
derive from ``FetchError``.
"""

from typing import Any


class WmataError(Exception):
    """Base class for every error raised by this library."""


class DecodeError(WmataError):
    """A string or response body could not be decoded."""


class EmptyIdentifierError(DecodeError, ValueError):
    """An open identifier (route or stop) was given an empty string."""

    def __init__(self, kind: str) -> None:
        self.kind = kind
        super().__init__(f"{kind} identifier must not be empty")


class UnrecognizedCodeError(DecodeError, ValueError):
    """A string is not a member of a closed code enumeration."""

    def __init__(self, kind: str, code: str) -> None:
        self.kind = kind
        self.code = code
        super().__init__(f"Provided string is not a valid {kind} code: {code!r}")


class ApiError(DecodeError):
    """The WMATA API answered with its own error envelope."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class MalformedResponseError(DecodeError):
    """The body matched neither the expected shape nor the error envelope.

    ``original`` is the error raised while parsing the expected shape.
    """

    def __init__(self, original: Any) -> None:
        self.original = original
        super().__init__(str(original))


class FetchError(WmataError):
    """The HTTP request could not be completed."""


class TransportError(FetchError):
    """DNS, TLS, connection or timeout failure in the HTTP layer."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)
