"""DB-backed published event repository. Uniqueness of slug and source submission is enforced by the table."""

from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.domain.models.event import Event
from marketplace.infrastructure.database.errors import (
    as_utc,
    commit,
    publication_conflict,
    store_errors,
)
from marketplace.infrastructure.database.models import EventRow


def _to_domain(row: EventRow) -> Event:
    return Event(
        event_id=row.event_id,
        source_submission_id=row.source_submission_id,
        seller_id=row.seller_id,
        title=row.title,
        description=row.description,
        date=row.date,
        time=row.time,
        venue=row.venue,
        ticket_price=row.ticket_price,
        organizer_email=row.organizer_email,
        image_url=row.image_url,
        slug=row.slug,
        is_active=bool(row.is_active),
        created_at=as_utc(row.created_at),
    )


class DbEventRepository:
    """Implements EventRepository on the events table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, event: Event) -> Event:
        row = EventRow(
            event_id=event.event_id,
            source_submission_id=event.source_submission_id,
            seller_id=event.seller_id,
            title=event.title,
            description=event.description,
            date=event.date,
            time=event.time,
            venue=event.venue,
            ticket_price=event.ticket_price,
            organizer_email=event.organizer_email,
            image_url=event.image_url,
            slug=event.slug,
            is_active=event.is_active,
            created_at=event.created_at,
        )
        try:
            async with store_errors(self._session, "event insert"):
                self._session.add(row)
                await self._session.flush()
        except IntegrityError as e:
            raise publication_conflict(e, event.slug, event.source_submission_id) from e
        await commit(self._session, "event insert")
        return event

    async def _one(self, *criteria) -> Optional[Event]:
        async with store_errors(self._session, "event lookup"):
            result = await self._session.execute(
                select(EventRow).where(*criteria).execution_options(populate_existing=True)
            )
            row = result.scalar_one_or_none()
        return _to_domain(row) if row is not None else None

    async def get(self, event_id: str) -> Optional[Event]:
        return await self._one(EventRow.event_id == event_id)

    async def get_by_slug(self, slug: str) -> Optional[Event]:
        return await self._one(EventRow.slug == slug)

    async def get_by_submission(self, submission_id: str) -> Optional[Event]:
        return await self._one(EventRow.source_submission_id == submission_id)

    async def slug_exists(self, slug: str) -> bool:
        async with store_errors(self._session, "slug lookup"):
            result = await self._session.execute(
                select(EventRow.event_id).where(EventRow.slug == slug).limit(1)
            )
            found = result.first()
        return found is not None

    async def list_active(self) -> List[Event]:
        stmt = (
            select(EventRow)
            .where(EventRow.is_active.is_(True))
            .order_by(EventRow.date.asc(), EventRow.time.asc())
            .execution_options(populate_existing=True)
        )
        async with store_errors(self._session, "event list"):
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        return [_to_domain(row) for row in rows]
