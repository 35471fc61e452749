"""Generic CRUD service shared by every AWX resource kind.

A concrete service only names its collection path and its two models;
list/get/create/update/delete are the same composition of
``AwxClient.new_request`` + ``AwxClient.do`` + the envelope decoder for
every kind.
"""

from collections.abc import Mapping
from functools import partial
from typing import TYPE_CHECKING, Any, ClassVar, Generic, TypeVar

import structlog

from ..awxapi import decoder
from ..awxapi.errors import ArgumentError
from ..awxapi.types import ListEnvelope, Resource, ResourceRequest, Response

if TYPE_CHECKING:
    from ..awxapi.client import AwxClient

logger = structlog.get_logger(__name__)

R = TypeVar("R", bound=Resource)
Q = TypeVar("Q", bound=ResourceRequest)

API_PREFIX = "api/v2/"


class ResourceService(Generic[R, Q]):
    """List/Get/Create/Update/Delete over one AWX collection.

    Subclasses set ``base_path`` (with trailing slash), ``resource_model``
    and ``request_model``. The service keeps no state besides the shared
    client, so one instance can be used from several threads.
    """

    base_path: ClassVar[str]
    resource_model: type[R]
    request_model: type[Q]

    def __init__(self, client: "AwxClient"):
        self._client = client

    def resource_path(self, resource_id: int) -> str:
        """Return the detail path for ``resource_id``, e.g. ``api/v2/projects/7/``."""
        return f"{self.base_path}{resource_id}/"

    def list(
        self,
        params: Mapping[str, Any] | None = None,
    ) -> tuple[list[R], Response[ListEnvelope[R]]]:
        """Fetch one page of the collection.

        Pages are not followed. Read ``response.data.next`` and call again
        with e.g. ``params={"page": 2}`` to get more.

        Args:
            params: Optional query parameters (page, page_size, filters).

        Returns:
            Tuple of (results in server order, response wrapping the envelope).
        """
        request = self._client.new_request("GET", self.base_path, params=params)
        response = self._client.do(
            request,
            partial(decoder.decode_envelope, model=self.resource_model),
        )
        return response.data.results, response

    def get(self, resource_id: int) -> tuple[R, Response[R]]:
        """Fetch a single resource by id.

        Raises:
            ArgumentError: If ``resource_id`` is less than 1.
        """
        _check_id(resource_id)
        request = self._client.new_request("GET", self.resource_path(resource_id))
        response = self._client.do(
            request,
            partial(decoder.decode_resource, model=self.resource_model),
        )
        return response.data, response

    def create(self, request: Q | Mapping[str, Any] | None) -> tuple[R, Response[R]]:
        """Create a resource and return it as the server reports it.

        Server-assigned fields (``id``, ``created``, ``url``) come from the
        response body.

        Raises:
            ArgumentError: If ``request`` is None or of another resource's type.
        """
        self._check_request(request)
        http_request = self._client.new_request("POST", self.base_path, body=request)
        response = self._client.do(
            http_request,
            partial(decoder.decode_resource, model=self.resource_model),
        )
        logger.debug(
            "Created resource",
            resource=self.resource_model.__name__,
            resource_id=response.data.id if response.data else None,
        )
        return response.data, response

    def update(
        self,
        request: Q | Mapping[str, Any] | None,
        resource_id: int,
    ) -> Response[None]:
        """Partially update a resource with PATCH.

        Only fields set on ``request`` are sent. The response body is not
        decoded; call :meth:`get` to read the new state.

        Raises:
            ArgumentError: If ``resource_id`` is less than 1 or ``request`` is
                None or of another resource's type.
        """
        _check_id(resource_id)
        self._check_request(request)
        http_request = self._client.new_request(
            "PATCH",
            self.resource_path(resource_id),
            body=request,
        )
        return self._client.do(http_request)

    def delete(self, resource_id: int) -> Response[None]:
        """Delete a resource.

        Raises:
            ArgumentError: If ``resource_id`` is less than 1.
        """
        _check_id(resource_id)
        request = self._client.new_request("DELETE", self.resource_path(resource_id))
        return self._client.do(request)

    def _check_request(self, request: Any) -> None:
        if request is None:
            raise ArgumentError("request", "cannot be None")
        if isinstance(request, Mapping) or isinstance(request, self.request_model):
            return
        raise ArgumentError(
            "request",
            f"must be a {self.request_model.__name__} or a mapping, "
            f"got {type(request).__name__}",
        )


def _check_id(resource_id: int) -> None:
    if isinstance(resource_id, bool) or not isinstance(resource_id, int):
        raise ArgumentError("resource_id", f"must be an int, got {type(resource_id).__name__}")
    if resource_id < 1:
        raise ArgumentError("resource_id", "cannot be less than 1")
