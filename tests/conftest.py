import httpx
import pytest
import pytest_asyncio

from json_http.infrastructure.http_client import JsonRequestClient


class RecordingHandler:
    """MockTransport handler that remembers every request it sees."""

    def __init__(self):
        self.requests = []
        self.status = 200
        self.body = "{}"

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return httpx.Response(self.status, text=self.body)


@pytest.fixture
def handler():
    return RecordingHandler()


@pytest_asyncio.fixture
async def transport(handler):
    client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    yield client
    await client.aclose()


@pytest.fixture
def client(transport):
    return JsonRequestClient(transport)
