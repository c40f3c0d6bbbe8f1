"""Approval service: sole authority for deciding pending seller applications and event submissions."""

import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timedelta
from typing import Optional

from marketplace.application.account_repository import AccountRoleStore
from marketplace.application.event_repository import EventRepository
from marketplace.application.exceptions import (
    DuplicatePublicationError,
    NotFoundError,
    PublicationError,
    SlugConflictError,
)
from marketplace.application.notifications import (
    Notification,
    NotificationCollaborator,
    NotificationType,
)
from marketplace.application.seller_application_repository import SellerApplicationRepository
from marketplace.application.submission_repository import EventSubmissionRepository
from marketplace.core.clock import Clock, utc_now
from marketplace.domain.exceptions import NotPendingError
from marketplace.domain.models.account import Account, SellerStatus
from marketplace.domain.models.decision import SellerDecision, SubmissionDecision
from marketplace.domain.models.event import Event
from marketplace.domain.models.event_submission import EventSubmission, SubmissionStatus
from marketplace.domain.models.seller_application import ApplicationStatus
from marketplace.domain.schemas.decision import DecisionResponse
from marketplace.domain.slugs import numbered_slug, slugify_title
from marketplace.scalability.distributed_lock import DistributedLock
from marketplace.scalability.retry import PersistenceRetry

DEFAULT_COOLDOWN = timedelta(days=30)
DEFAULT_REJECTION_FEEDBACK = "Event submission rejected"
DEFAULT_LOCK_TTL_SECONDS = 30
MAX_SLUG_ATTEMPTS = 5
SELLER_LOCK_PREFIX = "seller-application:"
SUBMISSION_LOCK_PREFIX = "event-submission:"


class ApprovalService:
    """
    Application-layer orchestration only. No HTTP, no FastAPI, no direct infrastructure.
    Decision strategy: per-entity lock, then compare-and-set on status (the losing admin gets
    NotPending). Publishing an approved submission is compensated back to pending on failure.
    Notification failure does not undo a decision (log and return success).
    """

    def __init__(
        self,
        accounts: AccountRoleStore,
        applications: SellerApplicationRepository,
        submissions: EventSubmissionRepository,
        events: EventRepository,
        notifier: NotificationCollaborator,
        logger: logging.Logger,
        lock: Optional[DistributedLock] = None,
        retry: PersistenceRetry | None = None,
        clock: Clock = utc_now,
        cooldown: timedelta = DEFAULT_COOLDOWN,
        default_rejection_feedback: str = DEFAULT_REJECTION_FEEDBACK,
        public_base_url: str = "",
        lock_ttl_seconds: int = DEFAULT_LOCK_TTL_SECONDS,
    ) -> None:
        if cooldown <= timedelta(0):
            raise ValueError("cooldown must be positive")
        self._accounts = accounts
        self._applications = applications
        self._submissions = submissions
        self._events = events
        self._notifier = notifier
        self._logger = logger
        self._lock = lock
        self._retry = retry or PersistenceRetry(logger=logger)
        self._clock = clock
        self._cooldown = cooldown
        self._default_rejection_feedback = default_rejection_feedback
        self._public_base_url = public_base_url.rstrip("/")
        self._lock_ttl = lock_ttl_seconds

    @asynccontextmanager
    async def _serialized(self, key: str):
        """Hold the per-entity decision lock, if a lock is configured."""
        if self._lock is None:
            yield
            return
        async with self._lock.hold(key, ttl=self._lock_ttl):
            yield

    def event_url(self, slug: str) -> str:
        return f"{self._public_base_url}/events/{slug}"

    # ------------------------------------------------------------------
    # Seller applications
    # ------------------------------------------------------------------

    async def decide_seller_application(
        self,
        account_id: str,
        decision: SellerDecision,
        notes: Optional[str] = None,
        decided_by: Optional[str] = None,
    ) -> DecisionResponse:
        """
        Approve (role=seller, status=approved) or deny (status=denied, cooldown set) a pending
        seller application. Raises NotPending if the account has no pending application.
        """
        async with self._serialized(f"{SELLER_LOCK_PREFIX}{account_id}"):
            account = await self._retry.read(self._accounts.get, account_id)
            if account is None:
                raise NotFoundError(f"Account not found: {account_id}")
            if account.seller_status != SellerStatus.PENDING:
                raise NotPendingError(
                    f"Seller application for {account_id} is not pending "
                    f"(seller_status={account.seller_status.value})"
                )

            now = self._clock()
            if decision == SellerDecision.APPROVE:
                decided = account.approve_seller(now)
                application_status = ApplicationStatus.APPROVED
            else:
                decided = account.deny_seller(now, self._cooldown)
                application_status = ApplicationStatus.DENIED

            # Step 1: Transition the account (atomic gate)
            moved = await self._retry.write(
                self._accounts.compare_and_set, decided, SellerStatus.PENDING
            )
            if not moved:
                raise NotPendingError(
                    f"Seller application for {account_id} was decided concurrently"
                )

            # Step 2: Close the open application record; undo step 1 if it cannot be stored
            application = await self._retry.read(self._applications.get_pending, account_id)
            if application is not None:
                closed = application.decide(application_status, now, decided_by, notes)
                try:
                    await self._retry.write(self._applications.update, closed)
                except Exception as e:
                    self._logger.error(
                        "seller_application_close_failed",
                        extra={"account_id": account_id, "error": str(e)},
                    )
                    await self._accounts.compare_and_set(account, decided.seller_status)
                    raise

        self._logger.info(
            "seller_application_decided",
            extra={
                "account_id": account_id,
                "decision": decision.value,
                "decided_by": decided_by,
                "seller_status": decided.seller_status.value,
            },
        )

        # Step 3: Notify (best-effort)
        if decision == SellerDecision.APPROVE:
            notification = Notification(
                type=NotificationType.SELLER_APPROVED,
                account_email=decided.email,
                payload={"account_id": account_id},
            )
        else:
            notification = Notification(
                type=NotificationType.SELLER_DENIED,
                account_email=decided.email,
                payload={
                    "account_id": account_id,
                    "reason": notes,
                    "can_reapply_at": decided.can_reapply_at.isoformat(),
                },
            )
        await self._notify(notification, subject_id=account_id)

        return DecisionResponse(
            subject_id=account_id,
            new_status=decided.seller_status.value,
            resulting_entity_id=account_id,
            can_reapply_at=decided.can_reapply_at,
        )

    # ------------------------------------------------------------------
    # Event submissions
    # ------------------------------------------------------------------

    async def decide_event_submission(
        self,
        submission_id: str,
        decision: SubmissionDecision,
        feedback: Optional[str] = None,
        decided_by: Optional[str] = None,
    ) -> DecisionResponse:
        """
        Approve (assign slug, publish exactly one Event) or reject (store feedback) a pending
        submission. On approval returns the event id and slug for building the public URL.
        """
        async with self._serialized(f"{SUBMISSION_LOCK_PREFIX}{submission_id}"):
            submission = await self._retry.read(self._submissions.get, submission_id)
            if submission is None:
                raise NotFoundError(f"Event submission not found: {submission_id}")
            if submission.status != SubmissionStatus.PENDING:
                raise NotPendingError(
                    f"Event submission {submission_id} is not pending (status={submission.status.value})"
                )

            if decision == SubmissionDecision.APPROVE:
                event = await self._approve_submission(submission, feedback, decided_by)
            else:
                rejected = await self._reject_submission(submission, feedback, decided_by)
                event = None

        seller = await self._seller_for_notification(submission.seller_id)
        if event is not None:
            response = DecisionResponse(
                subject_id=submission_id,
                new_status=SubmissionStatus.APPROVED.value,
                resulting_entity_id=event.event_id,
                slug=event.slug,
                event_url=self.event_url(event.slug),
            )
            if seller is not None:
                await self._notify(
                    Notification(
                        type=NotificationType.EVENT_APPROVED,
                        account_email=seller.email,
                        payload={
                            "submission_id": submission_id,
                            "event_id": event.event_id,
                            "event_title": event.title,
                            "event_url": response.event_url,
                            "organizer_email": event.organizer_email,
                        },
                    ),
                    subject_id=submission_id,
                )
            return response

        if seller is not None:
            await self._notify(
                Notification(
                    type=NotificationType.EVENT_REJECTED,
                    account_email=seller.email,
                    payload={
                        "submission_id": submission_id,
                        "event_title": submission.details.title,
                        "reason": rejected.admin_feedback,
                    },
                ),
                subject_id=submission_id,
            )
        return DecisionResponse(
            subject_id=submission_id,
            new_status=SubmissionStatus.REJECTED.value,
        )

    async def _approve_submission(
        self,
        submission: EventSubmission,
        feedback: Optional[str],
        decided_by: Optional[str],
    ) -> Event:
        now = self._clock()
        base = slugify_title(submission.details.title)
        slug = await self._next_free_slug(base)

        # Step 1: Mark approved with its slug (atomic gate against double approval)
        approved = submission.approve(now, slug, decided_by=decided_by, feedback=feedback)
        moved = await self._retry.write(
            self._submissions.compare_and_set, approved, SubmissionStatus.PENDING
        )
        if not moved:
            raise NotPendingError(
                f"Event submission {submission.submission_id} was decided concurrently"
            )

        # Step 2: Publish exactly one Event
        try:
            event = await self._publish(approved, base, now)
        except DuplicatePublicationError:
            existing = await self._retry.read(
                self._events.get_by_submission, submission.submission_id
            )
            if existing is None:
                raise
            if existing.slug != approved.slug:
                await self._retry.write(
                    self._submissions.compare_and_set,
                    approved.with_slug(existing.slug),
                    SubmissionStatus.APPROVED,
                )
            self._logger.warning(
                "event_already_published",
                extra={"submission_id": submission.submission_id, "event_id": existing.event_id},
            )
            return existing
        except Exception as e:
            self._logger.error(
                "event_publication_failed",
                extra={"submission_id": submission.submission_id, "error": str(e)},
            )
            # Step 2b: Compensate: back to pending so a retry starts clean
            await self._submissions.compare_and_set(submission, SubmissionStatus.APPROVED)
            raise PublicationError(
                f"Event submission {submission.submission_id} could not be published and was "
                f"returned to pending: {e}"
            ) from e

        self._logger.info(
            "event_published",
            extra={
                "submission_id": submission.submission_id,
                "event_id": event.event_id,
                "slug": event.slug,
                "decided_by": decided_by,
            },
        )
        return event

    async def _publish(self, approved: EventSubmission, base: str, now: datetime) -> Event:
        """Insert the Event. A slug taken by a concurrent approval moves both records to the next counter."""
        for _ in range(MAX_SLUG_ATTEMPTS):
            event = Event.from_submission(approved, str(uuid.uuid4()), now)
            try:
                return await self._retry.write(self._events.add, event)
            except SlugConflictError:
                self._logger.warning(
                    "slug_conflict",
                    extra={"submission_id": approved.submission_id, "slug": approved.slug},
                )
                renamed = approved.with_slug(await self._next_free_slug(base))
                await self._retry.write(
                    self._submissions.compare_and_set, renamed, SubmissionStatus.APPROVED
                )
                approved = renamed
        raise SlugConflictError(f"Could not allocate a unique slug for '{base}'")

    async def _reject_submission(
        self,
        submission: EventSubmission,
        feedback: Optional[str],
        decided_by: Optional[str],
    ) -> EventSubmission:
        text = self._default_rejection_feedback if feedback is None else feedback
        rejected = submission.reject(self._clock(), text, decided_by=decided_by)
        moved = await self._retry.write(
            self._submissions.compare_and_set, rejected, SubmissionStatus.PENDING
        )
        if not moved:
            raise NotPendingError(
                f"Event submission {submission.submission_id} was decided concurrently"
            )
        self._logger.info(
            "event_submission_rejected",
            extra={"submission_id": submission.submission_id, "decided_by": decided_by},
        )
        return rejected

    async def _next_free_slug(self, base: str) -> str:
        counter = 1
        while await self._retry.read(self._events.slug_exists, numbered_slug(base, counter)):
            counter += 1
        return numbered_slug(base, counter)

    async def _seller_for_notification(self, seller_id: str) -> Optional[Account]:
        try:
            return await self._retry.read(self._accounts.get, seller_id)
        except Exception as e:
            self._logger.error(
                "notification_recipient_lookup_failed",
                extra={"seller_id": seller_id, "error": str(e)},
            )
            return None

    async def _notify(self, notification: Notification, subject_id: str) -> None:
        try:
            await self._notifier.notify(notification)
            self._logger.info(
                "notification_sent",
                extra={"type": notification.type.value, "subject_id": subject_id},
            )
        except Exception as e:
            self._logger.error(
                "notification_failed",
                extra={
                    "type": notification.type.value,
                    "subject_id": subject_id,
                    "error": str(e),
                },
            )
            # Do not re-raise: notification failure does not undo the decision.
