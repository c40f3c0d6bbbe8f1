"""Admin API router: review queue and decisions. Every route requires the review permission."""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends

from marketplace.api.dependencies import (
    get_approval_service,
    get_seller_application_service,
    require_reviewer,
)
from marketplace.application.approval_service import ApprovalService
from marketplace.application.seller_application_service import SellerApplicationService
from marketplace.domain.models.seller_application import ApplicationStatus
from marketplace.domain.schemas.decision import (
    DecisionResponse,
    SellerDecisionRequest,
    SubmissionDecisionRequest,
)
from marketplace.domain.schemas.seller_application import SellerApplicationResponse
from marketplace.security.auth_context import AuthContext

router = APIRouter()


@router.get("/seller-applications", response_model=List[SellerApplicationResponse])
async def list_seller_applications(
    auth: Annotated[AuthContext, Depends(require_reviewer)],
    service: Annotated[SellerApplicationService, Depends(get_seller_application_service)],
    status: Optional[ApplicationStatus] = None,
    account_id: Optional[str] = None,
):
    applications = await service.list_applications(account_id=account_id, status=status)
    return [SellerApplicationResponse.from_domain(a) for a in applications]


@router.post("/seller-applications/{account_id}/decision", response_model=DecisionResponse)
async def decide_seller_application(
    account_id: str,
    body: SellerDecisionRequest,
    auth: Annotated[AuthContext, Depends(require_reviewer)],
    approvals: Annotated[ApprovalService, Depends(get_approval_service)],
):
    """Approve or deny the account's pending application. 409 if nothing is pending."""
    return await approvals.decide_seller_application(
        account_id,
        body.decision,
        notes=body.notes,
        decided_by=auth.account_id,
    )


@router.post("/event-submissions/{submission_id}/decision", response_model=DecisionResponse)
async def decide_event_submission(
    submission_id: str,
    body: SubmissionDecisionRequest,
    auth: Annotated[AuthContext, Depends(require_reviewer)],
    approvals: Annotated[ApprovalService, Depends(get_approval_service)],
):
    """Approve (publishes the event under a unique slug) or reject (feedback kept verbatim)."""
    return await approvals.decide_event_submission(
        submission_id,
        body.decision,
        feedback=body.feedback,
        decided_by=auth.account_id,
    )
