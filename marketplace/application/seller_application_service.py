"""Seller application service. Gates applications: one pending per account, cooldown after denial."""

import logging
import uuid
from typing import List, Optional

from marketplace.application.account_repository import AccountRoleStore
from marketplace.application.exceptions import NotFoundError, PersistenceError
from marketplace.application.seller_application_repository import SellerApplicationRepository
from marketplace.core.clock import Clock, utc_now
from marketplace.domain.exceptions import AlreadyPendingError
from marketplace.domain.models.account import Account, SellerStatus
from marketplace.domain.models.seller_application import (
    ApplicationStatus,
    SellerApplication,
    SellerApplicationDetails,
)
from marketplace.domain.schemas.seller_application import SellerStatusResponse
from marketplace.domain.validators.workflow_validator import validate_seller_application_details
from marketplace.scalability.retry import PersistenceRetry


class SellerApplicationService:
    """
    Records seller applications and answers "may I apply?". The account's seller_status is the source of truth; it moves with compare-and-set so two
    concurrent applies cannot both open an application.
    """

    def __init__(
        self,
        accounts: AccountRoleStore,
        applications: SellerApplicationRepository,
        logger: logging.Logger,
        retry: PersistenceRetry | None = None,
        clock: Clock = utc_now,
    ) -> None:
        self._accounts = accounts
        self._applications = applications
        self._logger = logger
        self._retry = retry or PersistenceRetry(logger=logger)
        self._clock = clock

    async def _get_account(self, account_id: str) -> Account:
        account = await self._retry.read(self._accounts.get, account_id)
        if account is None:
            raise NotFoundError(f"Account not found: {account_id}")
        return account

    async def apply(self, account_id: str, details: SellerApplicationDetails) -> SellerStatusResponse:
        """
        Record a seller application. Fails with AlreadyPending, AlreadySeller or ReapplyTooSoon
        depending on the account's seller status; re-submission while pending is rejected, not merged.
        """
        validate_seller_application_details(details)
        account = await self._get_account(account_id)
        now = self._clock()
        account.ensure_can_apply(now)

        # Step 1: Move the account to pending (atomic gate)
        pending = account.open_application(now)
        moved = await self._retry.write(
            self._accounts.compare_and_set, pending, account.seller_status
        )
        if not moved:
            current = await self._get_account(account_id)
            current.ensure_can_apply(now)
            raise AlreadyPendingError("You already have a pending seller application")

        # Step 2: Record the application; undo step 1 if it cannot be stored
        application = SellerApplication(
            application_id=str(uuid.uuid4()),
            account_id=account_id,
            details=details,
            status=ApplicationStatus.PENDING,
            applied_at=now,
        )
        try:
            await self._retry.write(self._applications.add, application)
        except PersistenceError as e:
            self._logger.error(
                "seller_application_store_failed",
                extra={"account_id": account_id, "error": e.message},
            )
            await self._accounts.compare_and_set(account, SellerStatus.PENDING)
            raise

        self._logger.info(
            "seller_application_submitted",
            extra={
                "account_id": account_id,
                "application_id": application.application_id,
                "business_type": details.business_type,
            },
        )
        return SellerStatusResponse.from_account(pending, now)

    async def get_status(self, account_id: str) -> SellerStatusResponse:
        """Current seller status, whether the account may apply, and days until it may reapply."""
        account = await self._get_account(account_id)
        return SellerStatusResponse.from_account(account, self._clock())

    async def list_applications(
        self,
        *,
        account_id: Optional[str] = None,
        status: Optional[ApplicationStatus] = None,
    ) -> List[SellerApplication]:
        """Applications newest first; filter by account (own history) and/or status (review queue)."""
        return await self._retry.read(
            self._applications.list, account_id=account_id, status=status
        )
