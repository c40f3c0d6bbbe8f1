"""Pydantic schemas for admin decisions."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from marketplace.domain.models.decision import SellerDecision, SubmissionDecision


class SellerDecisionRequest(BaseModel):
    decision: SellerDecision
    notes: Optional[str] = Field(None, max_length=2000)


class SubmissionDecisionRequest(BaseModel):
    decision: SubmissionDecision
    feedback: Optional[str] = Field(None, max_length=2000)


class DecisionResponse(BaseModel):
    """Outcome of an admin decision. resulting_entity_id is the published event id on approval."""

    subject_id: str
    new_status: str
    resulting_entity_id: Optional[str] = None
    slug: Optional[str] = None
    event_url: Optional[str] = None
    can_reapply_at: Optional[datetime] = None
