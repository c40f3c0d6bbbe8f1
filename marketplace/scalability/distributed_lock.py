"""Per-entity decision lock over Redis SET NX EX (or an in-process stand-in). Token-checked release."""

import time
import uuid
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional, Protocol

from marketplace.domain.exceptions import DecisionInProgressError


class RedisLockBackend(Protocol):
    """The two Redis operations the lock needs. Injected; no global state."""

    async def set_nx_ex(self, key: str, value: str, ttl: int) -> bool: ...
    async def delete_if_value(self, key: str, value: str) -> bool: ...


LOCK_PREFIX = "decision-lock:"


class InMemoryLockBackend:
    """Single-process lock backend with the same contract as Redis SET NX EX. For dev and single-node runs."""

    def __init__(self) -> None:
        self._store: dict[str, tuple[str, float]] = {}

    def _live(self, key: str) -> str | None:
        entry = self._store.get(key)
        if entry is None:
            return None
        value, expires_at = entry
        if time.monotonic() >= expires_at:
            del self._store[key]
            return None
        return value

    async def set_nx_ex(self, key: str, value: str, ttl: int) -> bool:
        if self._live(key) is not None:
            return False
        self._store[key] = (value, time.monotonic() + ttl)
        return True

    async def delete_if_value(self, key: str, value: str) -> bool:
        if self._live(key) == value:
            del self._store[key]
            return True
        return False


class DistributedLock:
    """
    Serializes admin decisions on one entity (e.g. "event-submission:<id>") across processes.

    acquire() hands back an owner token; release() needs that token, so a caller whose lock
    expired and was taken over cannot delete the new holder's key. The TTL bounds how long a
    crashed holder blocks the entity.
    """

    def __init__(self, backend: RedisLockBackend, key_prefix: str = LOCK_PREFIX) -> None:
        self._backend = backend
        self._prefix = key_prefix

    def _key(self, entity_key: str) -> str:
        return f"{self._prefix}{entity_key}"

    async def acquire(self, entity_key: str, ttl: int) -> Optional[str]:
        """Returns the owner token, or None when someone else holds the entity."""
        token = uuid.uuid4().hex
        if await self._backend.set_nx_ex(self._key(entity_key), token, ttl):
            return token
        return None

    async def release(self, entity_key: str, token: str) -> bool:
        """False when the lock had already expired or passed to another holder."""
        return await self._backend.delete_if_value(self._key(entity_key), token)

    @asynccontextmanager
    async def hold(self, entity_key: str, ttl: int) -> AsyncIterator[str]:
        """Hold the entity for the block or raise DecisionInProgressError straight away."""
        token = await self.acquire(entity_key, ttl)
        if token is None:
            raise DecisionInProgressError(
                f"Another decision on {entity_key} is in progress; retry shortly"
            )
        try:
            yield token
        finally:
            await self.release(entity_key, token)
