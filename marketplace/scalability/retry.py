"""Bounded retry for persistence calls. Reads retry on any PersistenceError; writes only when provably unapplied."""

import logging
from typing import Any, Awaitable, Callable, TypeVar

from marketplace.application.exceptions import PersistenceError

T = TypeVar("T")

DEFAULT_MAX_RETRIES = 1


class PersistenceRetry:
    """
    Retry a store call at most max_retries times after a PersistenceError.
    Validation errors and state conflicts are never retried: only PersistenceError is caught.
    """

    def __init__(
        self,
        max_retries: int = DEFAULT_MAX_RETRIES,
        logger: logging.Logger | None = None,
    ) -> None:
        if max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        self._max_retries = max_retries
        self._logger = logger or logging.getLogger(__name__)

    async def read(
        self,
        func: Callable[..., Awaitable[T]],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """Execute a read; retry on PersistenceError."""
        return await self._call(func, args, kwargs, write=False)

    async def write(
        self,
        func: Callable[..., Awaitable[T]],
        *args: Any,
        **kwargs: Any,
    ) -> T:
        """Execute a write; retry only if the failure is marked applied=False (no partial effect)."""
        return await self._call(func, args, kwargs, write=True)

    async def _call(self, func, args, kwargs, *, write: bool):
        attempt = 0
        while True:
            try:
                return await func(*args, **kwargs)
            except PersistenceError as e:
                retryable = (not write) or e.applied is False
                if not retryable or attempt >= self._max_retries:
                    raise
                attempt += 1
                self._logger.warning(
                    "persistence_retry",
                    extra={
                        "operation": getattr(func, "__name__", repr(func)),
                        "attempt": attempt,
                        "write": write,
                        "error": e.message,
                    },
                )
