"""Event submissions API router: submit, list, get."""

from typing import Annotated, List, Optional

from fastapi import APIRouter, Depends

from marketplace.api.dependencies import (
    get_auth_context,
    get_event_submission_service,
    get_rbac,
)
from marketplace.application.event_submission_service import (
    EventSubmissionService,
    SubmissionFilter,
)
from marketplace.domain.models.event_submission import SubmissionStatus
from marketplace.domain.schemas.event_submission import (
    EventSubmissionRequest,
    EventSubmissionResponse,
    SubmissionReceiptResponse,
)
from marketplace.security.auth_context import AuthContext
from marketplace.security.rbac import RBACService

router = APIRouter()


@router.post("", response_model=SubmissionReceiptResponse, status_code=201)
async def submit_event(
    body: EventSubmissionRequest,
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    rbac: Annotated[RBACService, Depends(get_rbac)],
    service: Annotated[EventSubmissionService, Depends(get_event_submission_service)],
):
    """Submit an event for review. Only approved sellers; price must be present and non-negative."""
    rbac.check_permission(auth.role, "submit")
    return await service.submit(auth.account_id, body.to_details())


@router.get("", response_model=List[EventSubmissionResponse])
async def list_submissions(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[EventSubmissionService, Depends(get_event_submission_service)],
    seller_id: Optional[str] = None,
    status: Optional[SubmissionStatus] = None,
):
    """Admins see every submission (review queue); everyone else sees their own."""
    submissions = await service.list(
        SubmissionFilter(
            viewer_id=auth.account_id,
            is_admin_view=auth.is_admin,
            seller_id=seller_id,
            status=status,
        )
    )
    return [EventSubmissionResponse.from_domain(s) for s in submissions]


@router.get("/{submission_id}", response_model=EventSubmissionResponse)
async def get_submission(
    submission_id: str,
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    service: Annotated[EventSubmissionService, Depends(get_event_submission_service)],
):
    submission = await service.get(submission_id, auth.account_id, is_admin_view=auth.is_admin)
    return EventSubmissionResponse.from_domain(submission)
