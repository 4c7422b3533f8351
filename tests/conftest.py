"""Shared fixtures: a simulated ArangoDB server behind httpx.MockTransport."""

import json
from collections.abc import Callable
from typing import Any

import httpx
import pytest

from arango_dal import AsyncKind, Connection, ConnectionBuilder

URL = "http://localhost:8529"
JWT = "header.payload.signature"

type Handler = Callable[[httpx.Request], httpx.Response]


class MockServer:
    """Answers requests from a table of (method, path) routes.

    A route mounted with several responses replays them in order and then
    keeps repeating the last one.
    """

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], list[httpx.Response | Handler]] = {}
        self.requests: list[httpx.Request] = []
        self.mount("POST", "/_open/auth", json={"jwt": JWT})

    def mount(
        self,
        method: str,
        path: str,
        *,
        status: int = 200,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        response = httpx.Response(status, json=json, headers=headers)
        self.routes.setdefault((method, path), []).append(response)

    def mount_handler(self, method: str, path: str, handler: Handler) -> None:
        self.routes.setdefault((method, path), []).append(handler)

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        queue = self.routes.get((request.method, request.url.path))
        if not queue:
            return httpx.Response(
                404,
                json={"error": True, "code": 404, "errorNum": 404, "errorMessage": "unknown path"},
            )
        answer = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(answer, httpx.Response):
            return answer
        return answer(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def server() -> MockServer:
    return MockServer()


async def connect(
    server: MockServer,
    database: str | None = "test",
    async_kind: AsyncKind | None = None,
) -> Connection:
    builder = ConnectionBuilder(url=URL, password="", database=database, async_kind=async_kind)
    return await builder.build(transport=server.transport)


def arango_error(code: int, error_num: int, message: str) -> dict[str, Any]:
    return {"error": True, "code": code, "errorNum": error_num, "errorMessage": message}
