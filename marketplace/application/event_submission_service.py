"""Event submission service. Accepts events from approved sellers only."""

import logging
import uuid
from dataclasses import dataclass
from typing import List, Optional

from marketplace.application.account_repository import AccountRoleStore
from marketplace.application.exceptions import NotFoundError
from marketplace.application.submission_repository import EventSubmissionRepository
from marketplace.core.clock import Clock, utc_now
from marketplace.domain.exceptions import NotAnApprovedSellerError
from marketplace.domain.models.event_submission import (
    EventDetails,
    EventSubmission,
    SubmissionStatus,
)
from marketplace.domain.schemas.event_submission import SubmissionReceiptResponse
from marketplace.domain.validators.workflow_validator import validate_event_details
from marketplace.scalability.retry import PersistenceRetry
from marketplace.security.exceptions import AuthorizationError


@dataclass(frozen=True)
class SubmissionFilter:
    """List filter. Outside the admin view, results are limited to viewer_id's own submissions."""

    viewer_id: str
    is_admin_view: bool = False
    seller_id: Optional[str] = None
    status: Optional[SubmissionStatus] = None


class EventSubmissionService:
    def __init__(
        self,
        accounts: AccountRoleStore,
        submissions: EventSubmissionRepository,
        logger: logging.Logger,
        retry: PersistenceRetry | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._accounts = accounts
        self._submissions = submissions
        self._logger = logger
        self._retry = retry or PersistenceRetry(logger=logger)
        self._clock = clock

    async def submit(self, seller_id: str, details: EventDetails) -> SubmissionReceiptResponse:
        """Create a pending submission. Price and required fields are checked here, not at approval."""
        validate_event_details(details)
        account = await self._retry.read(self._accounts.get, seller_id)
        if account is None:
            raise NotFoundError(f"Account not found: {seller_id}")
        if not account.is_seller:
            raise NotAnApprovedSellerError(
                f"Account {seller_id} is not an approved seller "
                f"(role={account.role.value}, seller_status={account.seller_status.value})"
            )

        submission = EventSubmission(
            submission_id=str(uuid.uuid4()),
            seller_id=seller_id,
            details=details,
            status=SubmissionStatus.PENDING,
            submitted_at=self._clock(),
        )
        stored = await self._retry.write(self._submissions.add, submission)
        self._logger.info(
            "event_submitted",
            extra={"seller_id": seller_id, "submission_id": stored.submission_id},
        )
        return SubmissionReceiptResponse(
            submission_id=stored.submission_id,
            title=stored.details.title,
            status=stored.status,
            submitted_at=stored.submitted_at,
        )

    async def list(self, criteria: SubmissionFilter) -> List[EventSubmission]:
        """Submissions newest first. Non-admin views only ever see the viewer's own rows."""
        seller_id = criteria.seller_id if criteria.is_admin_view else criteria.viewer_id
        return await self._retry.read(
            self._submissions.list, seller_id=seller_id, status=criteria.status
        )

    async def get(self, submission_id: str, viewer_id: str, is_admin_view: bool = False) -> EventSubmission:
        submission = await self._retry.read(self._submissions.get, submission_id)
        if submission is None:
            raise NotFoundError(f"Event submission not found: {submission_id}")
        if not is_admin_view and submission.seller_id != viewer_id:
            raise AuthorizationError("Only the submitting seller or an admin can view this submission")
        return submission
