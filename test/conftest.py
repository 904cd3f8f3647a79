from __future__ import annotations

import asyncio
import json
import os
import time
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Tuple

from aiohttp.hdrs import METH_ANY
from aiohttp.test_utils import TestServer
from aiohttp.web import Application, Request, Response, route
from attr import define, field
from azure.core.credentials import AccessToken
from pytest import fixture

from fix_arm_sdk.arm_client import ArmClient
from fix_arm_sdk.config import ArmClientConfig
from fix_arm_sdk.types import Json


def load_json(service: str, name: str) -> Json:
    path = os.path.dirname(__file__) + f"/files/{service}/{name}.json"
    with open(path) as f:
        js: Json = json.load(f)
        return js


@define
class RecordedRequest:
    method: str
    path: str
    query: Dict[str, str]
    # case insensitive
    headers: Mapping[str, str]
    body: Optional[Any] = None


@define
class CannedResponse:
    status: int = 200
    body: Optional[Any] = None
    # raw text has precedence over body
    text: Optional[str] = None


@define
class FakeArm:
    """
    Fake Azure Resource Manager endpoint.
    Responses are registered per method and path. Several responses for the same route are replied in order,
    the last one is repeated. Requests to unknown routes are answered with 404 and an ARM error body.
    """

    endpoint: str = "http://127.0.0.1"
    requests: List[RecordedRequest] = field(factory=list)
    routes: Dict[Tuple[str, str], List[CannedResponse]] = field(factory=dict)

    def respond(
        self, method: str, path: str, status: int = 200, body: Optional[Any] = None, text: Optional[str] = None
    ) -> None:
        self.routes.setdefault((method, path), []).append(CannedResponse(status, body, text))

    def requests_to(self, path: str) -> List[RecordedRequest]:
        return [r for r in self.requests if r.path == path]

    async def handle(self, request: Request) -> Response:
        body = await request.json() if request.can_read_body else None
        self.requests.append(
            RecordedRequest(request.method, request.path, dict(request.query), request.headers, body)
        )
        canned = self.routes.get((request.method, request.path))
        if not canned:
            error = {"error": {"code": "ResourceNotFound", "message": f"{request.method} {request.path} not found"}}
            return Response(status=404, text=json.dumps(error), content_type="application/json")
        response = canned.pop(0) if len(canned) > 1 else canned[0]
        if response.text is not None:
            return Response(status=response.status, text=response.text, content_type="application/json")
        if response.body is None:
            return Response(status=response.status)
        return Response(status=response.status, text=json.dumps(response.body), content_type="application/json")


class StaticCredential:
    """Async token credential that hands out a fixed token and counts the token requests."""

    def __init__(self, token: str = "test_token", expires_in: int = 3600, delay: float = 0) -> None:
        self.token = token
        self.expires_in = expires_in
        self.delay = delay
        self.token_requests: List[Tuple[str, ...]] = []

    async def get_token(self, *scopes: str, **kwargs: Any) -> AccessToken:
        self.token_requests.append(scopes)
        if self.delay:
            await asyncio.sleep(self.delay)
        return AccessToken(self.token, int(time.time()) + self.expires_in)

    async def close(self) -> None:
        pass

    async def __aenter__(self) -> StaticCredential:
        return self

    async def __aexit__(self, *args: Any) -> None:
        pass


@fixture
async def arm_server() -> AsyncIterator[FakeArm]:
    fake = FakeArm()
    app = Application()
    app.add_routes([route(METH_ANY, "/{tail:.+}", fake.handle)])
    server = TestServer(app)
    await server.start_server()
    fake.endpoint = f"http://127.0.0.1:{server.port}"
    yield fake
    await server.close()


@fixture
def credential() -> StaticCredential:
    return StaticCredential()


@fixture
def arm_config(arm_server: FakeArm) -> ArmClientConfig:
    return ArmClientConfig(endpoint=arm_server.endpoint, retry_total=0, timeout=10)


@fixture
async def arm_client(credential: StaticCredential, arm_config: ArmClientConfig) -> AsyncIterator[ArmClient]:
    async with ArmClient.create(credential, arm_config) as client:  # type: ignore
        yield client
