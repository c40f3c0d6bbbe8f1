# marketplace/infrastructure/cache/redis_client.py

import redis.asyncio as redis

from marketplace.config.settings import settings

_RELEASE_SCRIPT = (
    "if redis.call('get', KEYS[1]) == ARGV[1] "
    "then return redis.call('del', KEYS[1]) else return 0 end"
)


class RedisClient:
    """Backs DistributedLock when lock_backend is "redis"."""

    def __init__(self, url: str | None = None):
        self.client = redis.from_url(
            url or settings.redis_url,
            decode_responses=True,
        )

    async def set_nx_ex(self, key: str, value: str, ttl: int) -> bool:
        """Set key to value only if not exists, with TTL. Returns True if key was set."""
        return bool(await self.client.set(key, value, nx=True, ex=ttl))

    async def delete_if_value(self, key: str, value: str) -> bool:
        """Delete key only if its value equals value (atomic). Returns True if deleted."""
        result = await self.client.eval(_RELEASE_SCRIPT, 1, key, value)
        return bool(result)

    async def close(self) -> None:
        await self.client.aclose()
