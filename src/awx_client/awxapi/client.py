"""AWX REST API client.

Provides the HTTP transport shared by every resource service: request
construction, basic or token authentication, status classification and
response decoding.
"""

import json
import threading
import time
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

import httpx
import pydantic
import structlog

from .errors import APIError, DecodeError, EncodingError, TransportError
from .types import ResourceRequest, Response

if TYPE_CHECKING:
    from ..config import ClientConfig
    from ..services import (
        InventoryService,
        InventorySourceService,
        JobTemplateService,
        OrganizationService,
        ProjectService,
    )

logger = structlog.get_logger(__name__)

DEFAULT_TIMEOUT = 30.0

T = TypeVar("T")


class AwxClient:
    """HTTP client for the AWX REST API.

    Holds the base URL, credentials and timeout, all fixed at construction.
    Every resource service holds a reference to one client and goes through
    :meth:`new_request` and :meth:`do`.

    Thread-safe through thread-local storage of httpx.Client instances.
    Can be used as a context manager for automatic cleanup.
    """

    def __init__(
        self,
        base_url: str,
        username: str | None = None,
        password: str | None = None,
        token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.BaseTransport | None = None,
    ):
        """Initialize the REST API client.

        Args:
            base_url: Base URL of the AWX server (e.g., "https://awx.example.com").
            username: Username for HTTP basic authentication.
            password: Password for HTTP basic authentication.
            token: OAuth2 personal access token, used instead of basic auth.
            timeout: Request timeout in seconds (default: 30.0).
            transport: Optional httpx transport, mainly for tests.

        Raises:
            ValueError: If base_url is empty, timeout is not positive, or the
                credentials are missing or ambiguous.
        """
        if not base_url:
            msg = "base_url cannot be empty"
            raise ValueError(msg)
        if timeout <= 0:
            msg = "timeout must be positive"
            raise ValueError(msg)
        if token and (username or password):
            msg = "use either token or username/password, not both"
            raise ValueError(msg)
        if not token and not username:
            msg = "username/password or token must be provided"
            raise ValueError(msg)

        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport

        self._auth: httpx.Auth
        if token:
            self._auth = _BearerAuth(token)
        else:
            self._auth = httpx.BasicAuth(username or "", password or "")

        self._headers = {"Accept": "application/json"}

        # Use thread-local storage for httpx.Client (thread safety)
        self._local = threading.local()

        # Deferred: the services package imports this module.
        from .. import services

        self.organizations: OrganizationService = services.OrganizationService(self)
        self.projects: ProjectService = services.ProjectService(self)
        self.inventories: InventoryService = services.InventoryService(self)
        self.inventory_sources: InventorySourceService = (
            services.InventorySourceService(self)
        )
        self.job_templates: JobTemplateService = services.JobTemplateService(self)

    @classmethod
    def from_config(
        cls,
        config: "ClientConfig",
        transport: httpx.BaseTransport | None = None,
    ) -> "AwxClient":
        """Build a client from a validated :class:`~awx_client.config.ClientConfig`."""
        return cls(
            base_url=config.base_url,
            username=config.username,
            password=config.password.get_secret_value() if config.password else None,
            token=config.token.get_secret_value() if config.token else None,
            timeout=config.timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def client(self) -> httpx.Client:
        """Get or create thread-local httpx client.

        Each thread gets its own httpx.Client instance for thread safety.
        Clients are created lazily and reused within the same thread.

        Returns:
            Thread-local httpx.Client instance.
        """
        if not hasattr(self._local, "client") or self._local.client.is_closed:
            self._local.client = httpx.Client(
                base_url=self._base_url,
                headers=self._headers,
                timeout=self._timeout,
                transport=self._transport,
            )
        return self._local.client

    def __enter__(self):
        """Enter context manager."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit context manager and cleanup resources."""
        self.close()

    def close(self):
        """Close the thread-local HTTP client if open."""
        if hasattr(self._local, "client") and not self._local.client.is_closed:
            self._local.client.close()

    def new_request(
        self,
        method: str,
        path: str,
        body: pydantic.BaseModel | Mapping[str, Any] | None = None,
        params: Mapping[str, Any] | None = None,
    ) -> httpx.Request:
        """Build a request for ``path`` relative to the base URL.

        Args:
            method: HTTP method (e.g., "GET", "PATCH").
            path: API path such as "api/v2/projects/12/". The trailing
                slash is kept as given.
            body: Optional payload. Models are dumped with only the fields
                that were explicitly set.
            params: Optional query parameters (e.g., {"page": 2}).

        Returns:
            An unsent httpx.Request.

        Raises:
            EncodingError: If the body cannot be serialized to JSON.
        """
        headers = {}
        content = None
        if body is not None:
            content = _encode_body(body)
            headers["Content-Type"] = "application/json"

        return self.client.build_request(
            method,
            path.lstrip("/"),
            content=content,
            headers=headers,
            params=dict(params) if params else None,
        )

    def do(
        self,
        request: httpx.Request,
        decoder: Callable[[bytes], T] | None = None,
    ) -> Response[T]:
        """Send an authenticated request and classify the response.

        Args:
            request: Request built by :meth:`new_request`.
            decoder: Optional callable turning a 2xx body into a typed value.
                When omitted the body is not decoded.

        Returns:
            Response carrying status, headers, raw body and decoded data.

        Raises:
            TransportError: If the round trip fails (connection, DNS, timeout,
                redirect loop).
            APIError: If the server answers with a non-2xx status.
            DecodeError: If the body cannot be decompressed or ``decoder``
                rejects a 2xx body.
        """
        start_time = time.time()
        logger.debug("Making API request", method=request.method, url=str(request.url))

        try:
            http_response = self.client.send(request, auth=self._auth)
        except httpx.DecodingError as exc:
            msg = f"{request.method} {request.url} returned an undecodable body: {exc}"
            raise DecodeError(msg) from exc
        except httpx.RequestError as exc:
            msg = f"{request.method} {request.url} failed: {exc}"
            raise TransportError(msg, request=request) from exc

        duration = time.time() - start_time
        logger.debug(
            "API request completed",
            method=request.method,
            url=str(request.url),
            status_code=http_response.status_code,
            duration_seconds=round(duration, 3),
        )

        response: Response[Any] = Response(
            status_code=http_response.status_code,
            headers=http_response.headers,
            content=http_response.content,
        )
        if not response.ok:
            raise APIError(response.status_code, http_response.text, response=response)

        if decoder is None:
            return response
        return Response(
            status_code=response.status_code,
            headers=response.headers,
            content=response.content,
            data=decoder(response.content),
        )


class _BearerAuth(httpx.Auth):
    """Attach an OAuth2 token as ``Authorization: Bearer``."""

    def __init__(self, token: str):
        self._header = f"Bearer {token}"

    def auth_flow(self, request: httpx.Request):
        request.headers["Authorization"] = self._header
        yield request


def _encode_body(body: pydantic.BaseModel | Mapping[str, Any]) -> bytes:
    try:
        if isinstance(body, ResourceRequest):
            payload = body.to_payload()
        elif isinstance(body, pydantic.BaseModel):
            payload = body.model_dump(mode="json", exclude_unset=True)
        else:
            payload = dict(body)
        return json.dumps(payload, allow_nan=False).encode()
    except (TypeError, ValueError) as exc:
        msg = f"Cannot encode request body as JSON: {exc}"
        raise EncodingError(msg) from exc
