"""Error types raised by the AWX REST API client.

Every failure is raised to the immediate caller. Nothing here is retried
or logged; the type tells the caller which side of the wire went wrong.
"""

from typing import TYPE_CHECKING

import httpx

if TYPE_CHECKING:
    from .types import Response


class AwxError(Exception):
    """Base exception for all AWX client errors."""


class ArgumentError(AwxError):
    """Raised when a caller-supplied id or payload violates a precondition.

    Detected before any request is built, so no network call is made.
    """

    def __init__(self, argument: str, reason: str):
        super().__init__(f"{argument} {reason}")
        self.argument = argument
        self.reason = reason


class EncodingError(AwxError):
    """Raised when an outgoing payload cannot be serialized to JSON."""


class TransportError(AwxError):
    """Raised when the HTTP round trip itself fails.

    Covers connection failures, DNS errors and timeouts. The request may
    or may not have reached the server.
    """

    def __init__(self, message: str, request: httpx.Request | None = None):
        super().__init__(message)
        self.request = request


class DecodeError(AwxError):
    """Raised when a response body is not the expected JSON shape."""

    def __init__(self, message: str, body: bytes = b""):
        super().__init__(message)
        self.body = body


class APIError(AwxError):
    """Raised when the server answers with a non-2xx status.

    The error payload is kept verbatim in ``body``; AWX error vocabularies
    differ between endpoints and versions, so it is not parsed.
    """

    def __init__(
        self,
        status_code: int,
        body: str,
        response: "Response | None" = None,
    ):
        super().__init__(f"AWX API returned status {status_code}: {body}")
        self.status_code = status_code
        self.body = body
        self.response = response
