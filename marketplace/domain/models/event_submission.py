"""Domain model for event submissions."""

from dataclasses import dataclass, replace
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from typing import Dict, FrozenSet, Optional

from marketplace.domain.exceptions import InvalidStatusTransitionError


class SubmissionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


_SUBMISSION_TRANSITIONS: Dict[SubmissionStatus, FrozenSet[SubmissionStatus]] = {
    SubmissionStatus.PENDING: frozenset({SubmissionStatus.APPROVED, SubmissionStatus.REJECTED}),
    SubmissionStatus.APPROVED: frozenset(),
    SubmissionStatus.REJECTED: frozenset(),
}


def validate_submission_transition(current: SubmissionStatus, new: SubmissionStatus) -> None:
    allowed = _SUBMISSION_TRANSITIONS.get(current, frozenset())
    if new not in allowed:
        raise InvalidStatusTransitionError(
            f"Invalid submission status transition from {current.value} to {new.value}"
        )


@dataclass(frozen=True)
class EventDetails:
    """Fields a seller proposes for a publishable event."""

    title: str
    description: str
    date: date
    time: time
    venue: str
    ticket_price: Decimal
    organizer_email: str
    image_url: Optional[str] = None


@dataclass(frozen=True)
class EventSubmission:
    """
    A seller's proposed event. Terminal states: APPROVED (exactly one Event published), REJECTED.
    The slug is assigned once, at approval.
    """

    submission_id: str
    seller_id: str
    details: EventDetails
    status: SubmissionStatus
    submitted_at: datetime
    decided_at: Optional[datetime] = None
    decided_by: Optional[str] = None
    admin_feedback: Optional[str] = None
    slug: Optional[str] = None

    def approve(
        self,
        now: datetime,
        slug: str,
        decided_by: Optional[str] = None,
        feedback: Optional[str] = None,
    ) -> "EventSubmission":
        validate_submission_transition(self.status, SubmissionStatus.APPROVED)
        return replace(
            self,
            status=SubmissionStatus.APPROVED,
            decided_at=now,
            decided_by=decided_by,
            admin_feedback=feedback,
            slug=slug,
        )

    def with_slug(self, slug: str) -> "EventSubmission":
        """Re-point an approved submission at another slug (only before its Event exists)."""
        if self.status != SubmissionStatus.APPROVED:
            raise InvalidStatusTransitionError("slug can only change on an approved submission")
        return replace(self, slug=slug)

    def reject(
        self,
        now: datetime,
        feedback: str,
        decided_by: Optional[str] = None,
    ) -> "EventSubmission":
        validate_submission_transition(self.status, SubmissionStatus.REJECTED)
        return replace(
            self,
            status=SubmissionStatus.REJECTED,
            decided_at=now,
            decided_by=decided_by,
            admin_feedback=feedback,
        )
