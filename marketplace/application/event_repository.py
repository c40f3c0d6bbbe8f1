"""Published event repository protocol. Application layer depends on this; infrastructure implements it."""

from typing import List, Optional, Protocol

from marketplace.domain.models.event import Event


class EventRepository(Protocol):
    """Protocol for published events. slug and source_submission_id are unique."""

    async def add(self, event: Event) -> Event:
        """
        Insert a published event.
        Raises SlugConflictError if the slug is taken, DuplicatePublicationError if the
        source submission was already published.
        """
        ...

    async def get(self, event_id: str) -> Optional[Event]:
        ...

    async def get_by_slug(self, slug: str) -> Optional[Event]:
        ...

    async def get_by_submission(self, submission_id: str) -> Optional[Event]:
        ...

    async def slug_exists(self, slug: str) -> bool:
        ...

    async def list_active(self) -> List[Event]:
        """Active events ordered by date then time."""
        ...
