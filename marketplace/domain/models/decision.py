"""Admin decision vocabulary."""

from enum import Enum


class SellerDecision(str, Enum):
    APPROVE = "approve"
    DENY = "deny"


class SubmissionDecision(str, Enum):
    APPROVE = "approve"
    REJECT = "reject"
