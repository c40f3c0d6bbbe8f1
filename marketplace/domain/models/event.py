"""Domain model for published, customer-visible events."""

from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import Decimal
from typing import Optional

from marketplace.domain.models.event_submission import EventSubmission, SubmissionStatus


@dataclass(frozen=True)
class Event:
    """Public event. Created only by approving an EventSubmission; one per submission."""

    event_id: str
    source_submission_id: str
    seller_id: str
    title: str
    description: str
    date: date
    time: time
    venue: str
    ticket_price: Decimal
    organizer_email: str
    slug: str
    is_active: bool
    created_at: datetime
    image_url: Optional[str] = None

    @classmethod
    def from_submission(cls, submission: EventSubmission, event_id: str, now: datetime) -> "Event":
        """Materialize the public record of an approved submission."""
        if submission.status != SubmissionStatus.APPROVED or not submission.slug:
            raise ValueError("only approved submissions with a slug can be published")
        details = submission.details
        return cls(
            event_id=event_id,
            source_submission_id=submission.submission_id,
            seller_id=submission.seller_id,
            title=details.title,
            description=details.description,
            date=details.date,
            time=details.time,
            venue=details.venue,
            ticket_price=details.ticket_price,
            organizer_email=details.organizer_email,
            image_url=details.image_url,
            slug=submission.slug,
            is_active=True,
            created_at=now,
        )
