"""Pydantic schemas for event submissions."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from marketplace.domain.models.event_submission import (
    EventDetails,
    EventSubmission,
    SubmissionStatus,
)


class EventSubmissionRequest(BaseModel):
    """Request schema for submitting an event for review. ticket_price is required and non-negative."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    date: dt.date
    time: dt.time
    venue: str = Field(..., min_length=1, max_length=255)
    ticket_price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    organizer_email: EmailStr
    image_url: Optional[str] = Field(None, max_length=500)

    def to_details(self) -> EventDetails:
        return EventDetails(
            title=self.title.strip(),
            description=self.description.strip(),
            date=self.date,
            time=self.time,
            venue=self.venue.strip(),
            ticket_price=self.ticket_price,
            organizer_email=str(self.organizer_email),
            image_url=self.image_url,
        )


class SubmissionReceiptResponse(BaseModel):
    """Returned by submit: the new submission's id and echoed status."""

    submission_id: str
    title: str
    status: SubmissionStatus
    submitted_at: dt.datetime


class EventSubmissionResponse(BaseModel):
    submission_id: str
    seller_id: str
    title: str
    description: str
    date: dt.date
    time: dt.time
    venue: str
    ticket_price: Decimal
    organizer_email: str
    image_url: Optional[str] = None
    status: SubmissionStatus
    submitted_at: dt.datetime
    decided_at: Optional[dt.datetime] = None
    decided_by: Optional[str] = None
    admin_feedback: Optional[str] = None
    slug: Optional[str] = None

    @classmethod
    def from_domain(cls, submission: EventSubmission) -> "EventSubmissionResponse":
        details = submission.details
        return cls(
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
            status=submission.status,
            submitted_at=submission.submitted_at,
            decided_at=submission.decided_at,
            decided_by=submission.decided_by,
            admin_feedback=submission.admin_feedback,
            slug=submission.slug,
        )
