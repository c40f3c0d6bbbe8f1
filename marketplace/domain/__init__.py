"""Domain layer: models, schemas, validators, exceptions. Pure business logic only."""

from marketplace.domain.exceptions import (
    AlreadyPendingError,
    AlreadySellerError,
    DecisionInProgressError,
    DomainError,
    DomainValidationError,
    InvalidEmailError,
    InvalidStatusTransitionError,
    InvalidTicketPriceError,
    NotAnApprovedSellerError,
    NotPendingError,
    ReapplyTooSoonError,
    StateConflictError,
)
from marketplace.domain.models import (
    Account,
    ApplicationStatus,
    Event,
    EventDetails,
    EventSubmission,
    Role,
    SellerApplication,
    SellerApplicationDetails,
    SellerDecision,
    SellerStatus,
    SubmissionDecision,
    SubmissionStatus,
)
from marketplace.domain.slugs import numbered_slug, slugify_title

__all__ = [
    "Account",
    "AlreadyPendingError",
    "AlreadySellerError",
    "ApplicationStatus",
    "DecisionInProgressError",
    "DomainError",
    "DomainValidationError",
    "Event",
    "EventDetails",
    "EventSubmission",
    "InvalidEmailError",
    "InvalidStatusTransitionError",
    "InvalidTicketPriceError",
    "NotAnApprovedSellerError",
    "NotPendingError",
    "ReapplyTooSoonError",
    "Role",
    "SellerApplication",
    "SellerApplicationDetails",
    "SellerDecision",
    "SellerStatus",
    "StateConflictError",
    "SubmissionDecision",
    "SubmissionStatus",
    "numbered_slug",
    "slugify_title",
]
