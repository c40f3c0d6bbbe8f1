"""Domain models. Pure business entities."""

from marketplace.domain.models.account import Account, Role, SellerStatus
from marketplace.domain.models.decision import SellerDecision, SubmissionDecision
from marketplace.domain.models.event import Event
from marketplace.domain.models.event_submission import (
    EventDetails,
    EventSubmission,
    SubmissionStatus,
)
from marketplace.domain.models.seller_application import (
    ApplicationStatus,
    SellerApplication,
    SellerApplicationDetails,
)

__all__ = [
    "Account",
    "ApplicationStatus",
    "Event",
    "EventDetails",
    "EventSubmission",
    "Role",
    "SellerApplication",
    "SellerApplicationDetails",
    "SellerDecision",
    "SellerStatus",
    "SubmissionDecision",
    "SubmissionStatus",
]
