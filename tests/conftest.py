"""Shared fixtures: an in-memory AWX server behind httpx.MockTransport."""

import json
import re
from collections.abc import Iterator

import httpx
import pytest

from awx_client.awxapi import client

BASE_URL = "http://awx.test"

_DETAIL = re.compile(r"^/api/v2/(?P<kind>[a-z_]+)/(?P<id>\d+)/$")
_COLLECTION = re.compile(r"^/api/v2/(?P<kind>[a-z_]+)/$")


class FakeAwxServer:
    """Minimal stand-in for the AWX v2 CRUD surface.

    Stores resources per collection, assigns ids on POST and answers
    unknown ids with 404. Every request that reaches it is recorded.
    """

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.store: dict[str, dict[int, dict]] = {}
        self._next_id = 1

    def add(self, kind: str, **fields) -> dict:
        resource = {"id": self._next_id, **fields}
        self.store.setdefault(kind, {})[self._next_id] = resource
        self._next_id += 1
        return resource

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)

        if match := _DETAIL.match(request.url.path):
            kind, resource_id = match["kind"], int(match["id"])
            items = self.store.setdefault(kind, {})
            if resource_id not in items:
                return httpx.Response(404, json={"detail": "Not found."})
            if request.method == "GET":
                return httpx.Response(200, json=items[resource_id])
            if request.method == "PATCH":
                items[resource_id].update(json.loads(request.content))
                return httpx.Response(200, json=items[resource_id])
            if request.method == "DELETE":
                del items[resource_id]
                return httpx.Response(204)

        if match := _COLLECTION.match(request.url.path):
            kind = match["kind"]
            if request.method == "GET":
                results = list(self.store.get(kind, {}).values())
                return httpx.Response(
                    200,
                    json={
                        "count": len(results),
                        "next": None,
                        "previous": None,
                        "results": results,
                    },
                )
            if request.method == "POST":
                return httpx.Response(201, json=self.add(kind, **json.loads(request.content)))

        return httpx.Response(405, json={"detail": f'Method "{request.method}" not allowed.'})


@pytest.fixture
def awx_server() -> FakeAwxServer:
    """Empty fake AWX server."""
    return FakeAwxServer()


@pytest.fixture
def awx(awx_server: FakeAwxServer) -> Iterator[client.AwxClient]:
    """AwxClient with basic auth wired to the fake server."""
    api_client = client.AwxClient(
        base_url=BASE_URL,
        username="admin",
        password="password",
        transport=httpx.MockTransport(awx_server),
    )
    yield api_client
    api_client.close()
