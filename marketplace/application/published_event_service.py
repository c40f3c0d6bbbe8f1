"""Read side of the public event catalog."""

import logging
from typing import List

from marketplace.application.event_repository import EventRepository
from marketplace.application.exceptions import NotFoundError
from marketplace.domain.models.event import Event
from marketplace.scalability.retry import PersistenceRetry


class PublishedEventService:
    def __init__(
        self,
        events: EventRepository,
        logger: logging.Logger,
        retry: PersistenceRetry | None = None,
    ) -> None:
        self._events = events
        self._logger = logger
        self._retry = retry or PersistenceRetry(logger=logger)

    async def list_active(self) -> List[Event]:
        return await self._retry.read(self._events.list_active)

    async def get(self, id_or_slug: str) -> Event:
        """Look up by event id, then by slug. Inactive events are not visible."""
        event = await self._retry.read(self._events.get, id_or_slug)
        if event is None:
            event = await self._retry.read(self._events.get_by_slug, id_or_slug)
        if event is None or not event.is_active:
            raise NotFoundError(f"Event not found: {id_or_slug}")
        return event
