"""Envelope decoder for AWX API response bodies.

Turns raw JSON bytes into either a single resource or a paginated
:class:`~.types.ListEnvelope`. Top-level shape is strict, unknown fields
are ignored.
"""

from typing import TypeVar

import pydantic
import structlog

from .errors import DecodeError
from .types import ListEnvelope, Resource

logger = structlog.get_logger(__name__)

M = TypeVar("M", bound=pydantic.BaseModel)
R = TypeVar("R", bound=Resource)


def decode(content: bytes, model: type[M]) -> M:
    """Validate a JSON body against a pydantic model.

    Args:
        content: Raw response body.
        model: Model class (or parametrized generic model) to validate into.

    Returns:
        The validated model instance.

    Raises:
        DecodeError: If the body is not JSON or does not match ``model``.
    """
    try:
        return model.model_validate_json(content)
    except pydantic.ValidationError as exc:
        msg = f"Response body does not match {model.__name__}: {exc.error_count()} error(s)"
        raise DecodeError(msg, body=content) from exc


def decode_resource(content: bytes, model: type[R]) -> R:
    """Decode a single-resource body (Get, Create)."""
    return decode(content, model)


def decode_envelope(content: bytes, model: type[R]) -> ListEnvelope[R]:
    """Decode a list body into an envelope of ``model`` resources.

    Results keep the server's order.
    """
    envelope = decode(content, ListEnvelope[model])
    logger.debug(
        "Decoded list envelope",
        resource=model.__name__,
        count=envelope.count,
        page_size=len(envelope.results),
        has_next=envelope.next is not None,
    )
    return envelope
