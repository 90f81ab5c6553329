import json
import time

import anyio
import httpx
import pytest

from restaurant_client import (
    ApiClient,
    clear_auth_token,
    get_auth_token,
    set_auth_token,
    FileTokenStore,
    MemoryTokenStore,
)
from restaurant_client.core.errors import TokenStoreError
from restaurant_client.tokens import get_token_store, reset_token_store

pytestmark = pytest.mark.anyio


# =============================================================================
# MEMORY STORE
# =============================================================================

def test_memory_store_lifecycle():
    store = MemoryTokenStore()
    assert store.read() is None

    store.write("abc")
    assert store.read() == "abc"

    store.write("def")
    assert store.read() == "def"

    store.clear()
    assert store.read() is None
    store.clear()


def test_memory_store_initial_token():
    assert MemoryTokenStore("seed").read() == "seed"
    assert MemoryTokenStore("").read() is None


def test_memory_store_empty_write_reads_none():
    store = MemoryTokenStore("abc")
    store.write("")
    assert store.read() is None


# =============================================================================
# FILE STORE
# =============================================================================

@pytest.fixture
def token_path(tmp_path):
    return tmp_path / "nested" / "session.json"


def test_file_store_persists_across_instances(token_path):
    FileTokenStore(token_path).write("abc")

    assert token_path.exists()
    assert json.loads(token_path.read_text()) == {"token": "abc"}
    assert FileTokenStore(token_path).read() == "abc"


def test_file_store_missing_file_reads_none(token_path):
    assert FileTokenStore(token_path).read() is None


def test_file_store_clear_removes_file(token_path):
    store = FileTokenStore(token_path)
    store.write("abc")
    store.clear()

    assert store.read() is None
    assert not token_path.exists()
    store.clear()


def test_file_store_clear_keeps_other_keys(token_path):
    token_path.parent.mkdir(parents=True)
    token_path.write_text(json.dumps({"token": "abc", "theme": "dark"}))

    FileTokenStore(token_path).clear()

    assert json.loads(token_path.read_text()) == {"theme": "dark"}


def test_file_store_custom_key(token_path):
    store = FileTokenStore(token_path, key="session")
    store.write("xyz")
    assert json.loads(token_path.read_text()) == {"session": "xyz"}
    assert FileTokenStore(token_path).read() is None


@pytest.mark.parametrize("content", ["", "not json", "[1, 2]", '{"token": 42}'])
def test_file_store_tolerates_bad_content(token_path, content):
    token_path.parent.mkdir(parents=True)
    token_path.write_text(content)
    assert FileTokenStore(token_path).read() is None


def test_file_store_lock_timeout(token_path):
    store = FileTokenStore(token_path, lock_timeout=0.05)
    other = FileTokenStore(token_path, lock_timeout=0.05)

    token_path.parent.mkdir(parents=True)
    with other._lock:
        with pytest.raises(TokenStoreError):
            store.read()


async def test_locked_session_file_does_not_stall_other_tasks(token_path, backend, settings):
    store = FileTokenStore(token_path, lock_timeout=0.5)
    holder = FileTokenStore(token_path, lock_timeout=0.5)
    token_path.parent.mkdir(parents=True)
    ticks = []

    async def ticker():
        for _ in range(15):
            ticks.append(time.monotonic())
            await anyio.sleep(0.02)

    async with ApiClient(
        base_url="http://test/api",
        token_store=store,
        settings=settings,
        transport=httpx.MockTransport(backend.handler),
    ) as api:
        with holder._lock:
            async with anyio.create_task_group() as tg:
                tg.start_soon(ticker)
                with pytest.raises(TokenStoreError):
                    await api.request("/user/me")

    gaps = [later - earlier for earlier, later in zip(ticks, ticks[1:])]
    assert max(gaps) < 0.25
    assert backend.requests == []


# =============================================================================
# DEFAULT STORE
# =============================================================================

def test_default_store_is_memory(monkeypatch):
    monkeypatch.delenv("TOKEN_STORE", raising=False)
    assert isinstance(get_token_store(), MemoryTokenStore)


def test_default_store_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("TOKEN_STORE", "FILE")
    monkeypatch.setenv("TOKEN_FILE", str(tmp_path / "s.json"))

    store = get_token_store()

    assert isinstance(store, FileTokenStore)
    assert store.path == tmp_path / "s.json"


def test_module_helpers(monkeypatch):
    monkeypatch.delenv("TOKEN_STORE", raising=False)

    set_auth_token("abc")
    assert get_auth_token() == "abc"

    clear_auth_token()
    assert get_auth_token() is None


def test_reset_token_store_returns_fresh_instance(monkeypatch):
    monkeypatch.delenv("TOKEN_STORE", raising=False)
    first = get_token_store()
    assert get_token_store() is first

    reset_token_store()
    assert get_token_store() is not first


# =============================================================================
# CLIENT CONTEXT
# =============================================================================

async def test_client_token_helpers(client, token_store):
    client.set_auth_token("abc")
    assert client.get_auth_token() == "abc"
    assert token_store.read() == "abc"

    client.clear_auth_token()
    assert client.get_auth_token() is None


async def test_clients_do_not_share_tokens(client, backend, settings):
    other_store = MemoryTokenStore("other")
    async with ApiClient(
        base_url="http://test/api",
        token_store=other_store,
        settings=settings,
        transport=httpx.MockTransport(backend.handler),
    ) as other:
        client.set_auth_token("mine")
        await client.request("/user/me")
        await other.request("/user/me")

    assert [r.headers["Authorization"] for r in backend.requests] == [
        "Bearer mine",
        "Bearer other",
    ]
