"""
Shared pytest fixtures and helpers for Webmaster tests.
"""

import json
from typing import Any, Callable, Dict, List, Optional

import httpx
import pytest

from Webmaster import WebmasterClient


BASE_URL = "https://api.webmaster.yandex.net/v4.1"
USER_ID = 12345
HOST_ID = "https:example.com:443"

Handler = Callable[[httpx.Request], httpx.Response]


def recording_transport(handler: Optional[Handler] = None) -> httpx.MockTransport:
    """Mock transport that records every request before answering it."""
    calls: List[Dict[str, Any]] = []

    def wrapped(request: httpx.Request) -> httpx.Response:
        body = request.content.decode("utf-8")
        calls.append({
            "method": request.method,
            "url": str(request.url),
            "path": request.url.raw_path.decode("ascii").split("?", 1)[0],
            "query": list(request.url.params.multi_items()),
            "payload": json.loads(body) if body else None,
            "headers": dict(request.headers),
        })
        if handler is None:
            return httpx.Response(200, json={"ok": True})
        return handler(request)

    transport = httpx.MockTransport(wrapped)
    transport.calls = calls  # type: ignore
    return transport


def make_client(handler: Optional[Handler] = None, **kwargs: Any) -> WebmasterClient:
    """WebmasterClient with a known user id and a recording mock transport."""
    transport = recording_transport(handler)
    kwargs.setdefault("user_id", USER_ID)
    client = WebmasterClient("test-token", base_url=BASE_URL, transport=transport, **kwargs)
    client._calls = transport.calls  # type: ignore
    return client


def scoped(path: str) -> str:
    return f"/v4.1/user/{USER_ID}{path}"


@pytest.fixture
def mock_transport() -> httpx.MockTransport:
    return recording_transport()


@pytest.fixture
def mock_client(mock_transport) -> WebmasterClient:
    client = WebmasterClient("test-token", user_id=USER_ID, base_url=BASE_URL, transport=mock_transport)
    client._calls = mock_transport.calls  # type: ignore
    return client
