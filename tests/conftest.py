# tests/conftest.py
import httpx
import pytest

from restaurant_client import ApiClient, MemoryTokenStore
from restaurant_client.core.config import Settings, get_settings
from restaurant_client.tokens import reset_token_store
from restaurant_client.client import reset_api_client

BASE_URL = "http://test/api"


@pytest.fixture(scope="session")
def anyio_backend():
    # keep AnyIO on asyncio for the whole test session
    return "asyncio"


class FakeBackend:
    """Records every request and answers with the configured response."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.status = 200
        self.payload = {}
        self.content = None
        self.error = None

    def respond(self, status=200, json=None, content=None):
        self.status = status
        self.payload = json
        self.content = content

    def fail(self, exc: Exception):
        self.error = exc

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.content is not None:
            return httpx.Response(self.status, content=self.content)
        return httpx.Response(self.status, json=self.payload)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def settings():
    return Settings(_env_file=None)


@pytest.fixture
def token_store():
    return MemoryTokenStore()


@pytest.fixture
async def client(backend, token_store, settings):
    async with ApiClient(
        base_url=BASE_URL,
        token_store=token_store,
        settings=settings,
        transport=httpx.MockTransport(backend.handler),
    ) as ac:
        yield ac


@pytest.fixture(autouse=True)
def _fresh_caches():
    # settings and factories are lru_cached module-wide
    get_settings.cache_clear()
    reset_token_store()
    reset_api_client()
    yield
    get_settings.cache_clear()
    reset_token_store()
    reset_api_client()
