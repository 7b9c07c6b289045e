"""
Component Test Layer Configuration

Inkress facade tests. HTTP is served by httpx.MockTransport, no network.
"""
import json
from typing import Any, Callable, Dict, List

import httpx
import pytest
import pytest_asyncio

from inkress import Inkress


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "component: marks tests as component tests"
    )


class RecordingTransport:
    """Mock transport that records requests and replies via a handler"""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.handler = handler
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    @property
    def last_json(self) -> Dict[str, Any]:
        return json.loads(self.requests[-1].content)


def ok_response(request: httpx.Request) -> httpx.Response:
    return httpx.Response(
        201,
        json={
            "state": "ok",
            "result": {
                "id": 42,
                "status": "pending",
                "total": 150.5,
                "currency": "JMD",
                "reference_id": "ref-1",
                "created_at": "2024-05-01T12:00:00Z",
                "customer": {"phone": "8765550100"},
                "provider": "inkress",
                "title": "Order #1",
                "urls": {
                    "qr_url": "https://inkress.com/qr/42",
                    "short_link": "https://ink.re/42",
                },
            },
        },
    )


@pytest.fixture
def transport():
    return RecordingTransport(ok_response)


@pytest_asyncio.fixture
async def make_client(transport):
    """Factory for Inkress clients wired to the mock transport"""
    created = []

    def _make(**kwargs) -> Inkress:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(transport))
        kwargs.setdefault("token", "tok_live")
        kwargs.setdefault("client_key", "ck_123")
        kwargs.setdefault("backend", "native")
        client = Inkress(http_client=http_client, **kwargs)
        created.append(http_client)
        return client

    yield _make

    for http_client in created:
        await http_client.aclose()


@pytest_asyncio.fixture
async def local_client():
    """Factory for Inkress clients that own their HTTP client, closed after the test"""
    created = []

    def _make(factory: Callable[..., Inkress] = Inkress, **kwargs) -> Inkress:
        client = factory(**kwargs)
        created.append(client)
        return client

    yield _make

    for client in created:
        await client.close()

@pytest.fixture
def order_payload() -> Dict[str, Any]:
    return {
        "total": 150.5,
        "title": "Order #1",
        "kind": "online",
        "customer": {"first_name": "Jane", "phone": "8765550100"},
        "reference_id": "ref-1",
        "currency_code": "JMD",
    }
