"""DistributedLock: owner tokens, token-checked release, hold(), TTL expiry, in-memory backend."""

import pytest

from marketplace.domain.exceptions import DecisionInProgressError
from marketplace.scalability.distributed_lock import DistributedLock, InMemoryLockBackend


class FakeRedisLockBackend:
    def __init__(self) -> None:
        self._store: dict[str, str] = {}
        self._ttl: dict[str, int] = {}

    async def set_nx_ex(self, key: str, value: str, ttl: int) -> bool:
        if key in self._store:
            return False
        self._store[key] = value
        self._ttl[key] = ttl
        return True

    async def delete_if_value(self, key: str, value: str) -> bool:
        if self._store.get(key) == value:
            del self._store[key]
            self._ttl.pop(key, None)
            return True
        return False


@pytest.fixture
def backend():
    return FakeRedisLockBackend()


@pytest.fixture
def lock(backend):
    return DistributedLock(backend=backend)


@pytest.mark.asyncio
async def test_acquire_release(lock):
    token = await lock.acquire("event-submission:sub-1", ttl=30)
    assert token is not None
    assert await lock.release("event-submission:sub-1", token) is True
    # Free again after release
    assert await lock.acquire("event-submission:sub-1", ttl=30) is not None


@pytest.mark.asyncio
async def test_acquire_fails_when_held(lock):
    await lock.acquire("seller-application:a", ttl=60)
    assert await lock.acquire("seller-application:a", ttl=60) is None


@pytest.mark.asyncio
async def test_ttl_and_prefix_passed_to_backend(backend, lock):
    token = await lock.acquire("event-submission:sub-1", ttl=45)
    assert backend._ttl["decision-lock:event-submission:sub-1"] == 45
    assert backend._store["decision-lock:event-submission:sub-1"] == token


@pytest.mark.asyncio
async def test_release_with_foreign_token_keeps_lock(backend, lock):
    token = await lock.acquire("seller-application:a", ttl=60)
    assert await lock.release("seller-application:a", "not-the-owner") is False
    assert "decision-lock:seller-application:a" in backend._store
    assert await lock.release("seller-application:a", token) is True
    assert backend._store == {}


@pytest.mark.asyncio
async def test_hold_releases_on_exit_and_on_error(backend, lock):
    async with lock.hold("event-submission:sub-1", ttl=30) as token:
        assert backend._store["decision-lock:event-submission:sub-1"] == token
    assert backend._store == {}

    with pytest.raises(RuntimeError):
        async with lock.hold("event-submission:sub-1", ttl=30):
            raise RuntimeError("publication blew up")
    assert backend._store == {}


@pytest.mark.asyncio
async def test_hold_raises_when_entity_is_busy(lock):
    async with lock.hold("seller-application:a", ttl=30):
        with pytest.raises(DecisionInProgressError) as exc:
            async with lock.hold("seller-application:a", ttl=30):
                pass
    assert "seller-application:a" in exc.value.message


@pytest.mark.asyncio
async def test_in_memory_backend_serializes_per_key():
    lock = DistributedLock(InMemoryLockBackend())
    assert await lock.acquire("seller-application:a", ttl=30) is not None
    assert await lock.acquire("seller-application:a", ttl=30) is None
    assert await lock.acquire("seller-application:b", ttl=30) is not None


@pytest.mark.asyncio
async def test_in_memory_backend_expires_entries():
    backend = InMemoryLockBackend()
    assert await backend.set_nx_ex("lock:k", "token-1", ttl=30) is True
    # Force the entry past its deadline
    backend._store["lock:k"] = ("token-1", 0.0)
    assert backend._live("lock:k") is None
    assert await backend.set_nx_ex("lock:k", "token-2", ttl=30) is True
    assert await backend.delete_if_value("lock:k", "token-1") is False
    assert await backend.delete_if_value("lock:k", "token-2") is True
