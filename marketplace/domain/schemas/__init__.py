"""Domain schemas. Request/response and validation."""

from marketplace.domain.schemas.account import AccountRegisterRequest, AccountResponse
from marketplace.domain.schemas.decision import (
    DecisionResponse,
    SellerDecisionRequest,
    SubmissionDecisionRequest,
)
from marketplace.domain.schemas.event import EventResponse
from marketplace.domain.schemas.event_submission import (
    EventSubmissionRequest,
    EventSubmissionResponse,
    SubmissionReceiptResponse,
)
from marketplace.domain.schemas.seller_application import (
    SellerApplicationRequest,
    SellerApplicationResponse,
    SellerStatusResponse,
)

__all__ = [
    "AccountRegisterRequest",
    "AccountResponse",
    "DecisionResponse",
    "EventResponse",
    "EventSubmissionRequest",
    "EventSubmissionResponse",
    "SellerApplicationRequest",
    "SellerApplicationResponse",
    "SellerDecisionRequest",
    "SellerStatusResponse",
    "SubmissionDecisionRequest",
    "SubmissionReceiptResponse",
]
