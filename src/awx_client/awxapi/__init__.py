"""AWX REST API client package.

Provides the HTTP transport, the error taxonomy and the pydantic types for
AWX responses. Resource-specific operations live in ``awx_client.services``.

Exports:
    AwxClient: HTTP client with authentication and status classification.
    types: Module containing Pydantic models for resources and payloads.
    DEFAULT_TIMEOUT: Default HTTP request timeout.
    AwxError and subclasses: Errors raised by every operation.
"""

from . import types
from .client import DEFAULT_TIMEOUT, AwxClient
from .errors import (
    APIError,
    ArgumentError,
    AwxError,
    DecodeError,
    EncodingError,
    TransportError,
)

__all__ = [
    "DEFAULT_TIMEOUT",
    "APIError",
    "ArgumentError",
    "AwxClient",
    "AwxError",
    "DecodeError",
    "EncodingError",
    "TransportError",
    "types",
]
