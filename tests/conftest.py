# tests/conftest.py
import io

import httpx
import pytest
from rich.console import Console

from fake_api import app, PRODUCTS
from products_sdk import ProductsClient


class RecordingTransport(httpx.AsyncBaseTransport):
    """Passes requests through to another transport and remembers what was sent."""

    def __init__(self, inner: httpx.AsyncBaseTransport):
        self.inner = inner
        self.requests = []

    async def handle_async_request(self, request):
        self.requests.append(request)
        return await self.inner.handle_async_request(request)

    @property
    def calls(self):
        return [(r.method, r.url.raw_path.decode()) for r in self.requests]


def _console():
    return Console(file=io.StringIO(), width=200, color_system=None)


def build_client(transport, cls=ProductsClient) -> ProductsClient:
    return cls(
        base_url="http://localhost:3000",
        transport=transport,
        console=_console(),
        err_console=_console(),
    )


@pytest.fixture(autouse=True)
def reset_store():
    PRODUCTS.clear()
    yield
    PRODUCTS.clear()


@pytest.fixture
def api():
    return RecordingTransport(httpx.ASGITransport(app=app))


@pytest.fixture
def client(api):
    return build_client(api)


@pytest.fixture
def mock_client():
    """Client whose server is a plain function: mock_client(handler)."""

    def _make(handler):
        return build_client(httpx.MockTransport(handler))

    return _make


@pytest.fixture
def refused():
    def handler(request):
        raise httpx.ConnectError("Connection refused", request=request)

    return build_client(httpx.MockTransport(handler))
