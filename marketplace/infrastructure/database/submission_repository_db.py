"""DB-backed event submission repository."""

from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.domain.models.event_submission import (
    EventDetails,
    EventSubmission,
    SubmissionStatus,
)
from marketplace.infrastructure.database.errors import as_utc, commit, store_errors
from marketplace.infrastructure.database.models import EventSubmissionRow


def _to_domain(row: EventSubmissionRow) -> EventSubmission:
    return EventSubmission(
        submission_id=row.submission_id,
        seller_id=row.seller_id,
        details=EventDetails(
            title=row.title,
            description=row.description,
            date=row.date,
            time=row.time,
            venue=row.venue,
            ticket_price=row.ticket_price,
            organizer_email=row.organizer_email,
            image_url=row.image_url,
        ),
        status=SubmissionStatus(row.status),
        submitted_at=as_utc(row.submitted_at),
        decided_at=as_utc(row.decided_at),
        decided_by=row.decided_by,
        admin_feedback=row.admin_feedback,
        slug=row.slug,
    )


class DbEventSubmissionRepository:
    """Implements EventSubmissionRepository. Decisions are applied with compare-and-set on status."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, submission: EventSubmission) -> EventSubmission:
        details = submission.details
        row = EventSubmissionRow(
            submission_id=submission.submission_id,
            seller_id=submission.seller_id,
            title=details.title,
            description=details.description,
            date=details.date,
            time=details.time,
            venue=details.venue,
            ticket_price=details.ticket_price,
            organizer_email=details.organizer_email,
            image_url=details.image_url,
            status=submission.status.value,
            submitted_at=submission.submitted_at,
        )
        async with store_errors(self._session, "submission insert"):
            self._session.add(row)
            await self._session.flush()
        await commit(self._session, "submission insert")
        return submission

    async def get(self, submission_id: str) -> Optional[EventSubmission]:
        async with store_errors(self._session, "submission lookup"):
            result = await self._session.execute(
                select(EventSubmissionRow)
                .where(EventSubmissionRow.submission_id == submission_id)
                .execution_options(populate_existing=True)
            )
            row = result.scalar_one_or_none()
        return _to_domain(row) if row is not None else None

    async def compare_and_set(
        self,
        submission: EventSubmission,
        expected_status: SubmissionStatus,
    ) -> bool:
        stmt = (
            update(EventSubmissionRow)
            .where(
                EventSubmissionRow.submission_id == submission.submission_id,
                EventSubmissionRow.status == expected_status.value,
            )
            .values(
                status=submission.status.value,
                decided_at=submission.decided_at,
                decided_by=submission.decided_by,
                admin_feedback=submission.admin_feedback,
                slug=submission.slug,
            )
            .execution_options(synchronize_session=False)
        )
        async with store_errors(self._session, "submission status update"):
            result = await self._session.execute(stmt)
        if result.rowcount != 1:
            await self._session.rollback()
            return False
        await commit(self._session, "submission status update")
        return True

    async def list(
        self,
        *,
        seller_id: Optional[str] = None,
        status: Optional[SubmissionStatus] = None,
    ) -> List[EventSubmission]:
        stmt = select(EventSubmissionRow).execution_options(populate_existing=True)
        if seller_id is not None:
            stmt = stmt.where(EventSubmissionRow.seller_id == seller_id)
        if status is not None:
            stmt = stmt.where(EventSubmissionRow.status == status.value)
        stmt = stmt.order_by(EventSubmissionRow.submitted_at.desc())
        async with store_errors(self._session, "submission list"):
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        return [_to_domain(row) for row in rows]
