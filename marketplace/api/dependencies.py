"""FastAPI dependency injection: session-scoped repositories, lock, notifier, services, caller identity."""

import logging
from datetime import timedelta
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.application.account_service import AccountService
from marketplace.application.approval_service import ApprovalService
from marketplace.application.event_submission_service import EventSubmissionService
from marketplace.application.notifications import NotificationCollaborator
from marketplace.application.published_event_service import PublishedEventService
from marketplace.application.seller_application_service import SellerApplicationService
from marketplace.config.settings import get_settings
from marketplace.infrastructure.cache.redis_client import RedisClient
from marketplace.infrastructure.database.account_repository_db import DbAccountRepository
from marketplace.infrastructure.database.event_repository_db import DbEventRepository
from marketplace.infrastructure.database.seller_application_repository_db import (
    DbSellerApplicationRepository,
)
from marketplace.infrastructure.database.session import get_db
from marketplace.infrastructure.database.submission_repository_db import (
    DbEventSubmissionRepository,
)
from marketplace.infrastructure.messaging.notification_publisher import (
    LoggingNotifier,
    RabbitMQNotifier,
)
from marketplace.infrastructure.messaging.rabbitmq_publisher import RabbitMQPublisher
from marketplace.scalability.distributed_lock import DistributedLock, InMemoryLockBackend
from marketplace.scalability.retry import PersistenceRetry
from marketplace.security.auth_context import AuthContext
from marketplace.security.exceptions import AuthenticationError
from marketplace.security.rbac import RBACService

_redis_client: RedisClient | None = None
_publisher: RabbitMQPublisher | None = None
_lock: DistributedLock | None = None
_notifier: NotificationCollaborator | None = None


def get_redis_client() -> RedisClient:
    """Return singleton Redis client."""
    global _redis_client
    if _redis_client is None:
        _redis_client = RedisClient(get_settings().redis_url)
    return _redis_client


def get_publisher() -> RabbitMQPublisher:
    """Return singleton RabbitMQ publisher."""
    global _publisher
    if _publisher is None:
        _publisher = RabbitMQPublisher(get_settings().rabbitmq_url)
    return _publisher


def get_lock() -> DistributedLock:
    """Decision lock shared by every request in this process (Redis-backed when configured)."""
    global _lock
    if _lock is None:
        if get_settings().lock_backend == "redis":
            _lock = DistributedLock(get_redis_client())
        else:
            _lock = DistributedLock(InMemoryLockBackend())
    return _lock


def get_notifier() -> NotificationCollaborator:
    global _notifier
    if _notifier is None:
        if get_settings().notification_backend == "rabbitmq":
            _notifier = RabbitMQNotifier(get_publisher())
        else:
            _notifier = LoggingNotifier(logging.getLogger("marketplace.notifications"))
    return _notifier


async def shutdown_clients() -> None:
    """Close the singleton clients opened during the app's lifetime."""
    global _redis_client, _publisher, _lock, _notifier
    if _redis_client is not None:
        await _redis_client.close()
    if _publisher is not None:
        await _publisher.close()
    _redis_client = None
    _publisher = None
    _lock = None
    _notifier = None


def get_retry() -> PersistenceRetry:
    return PersistenceRetry(
        max_retries=get_settings().persistence_max_retries,
        logger=logging.getLogger("marketplace.persistence"),
    )


def get_account_repository(db: Annotated[AsyncSession, Depends(get_db)]) -> DbAccountRepository:
    return DbAccountRepository(db)


def get_seller_application_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DbSellerApplicationRepository:
    return DbSellerApplicationRepository(db)


def get_submission_repository(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DbEventSubmissionRepository:
    return DbEventSubmissionRepository(db)


def get_event_repository(db: Annotated[AsyncSession, Depends(get_db)]) -> DbEventRepository:
    return DbEventRepository(db)


def get_account_service(
    accounts: Annotated[DbAccountRepository, Depends(get_account_repository)],
    retry: Annotated[PersistenceRetry, Depends(get_retry)],
) -> AccountService:
    return AccountService(
        accounts=accounts,
        logger=logging.getLogger("marketplace.accounts"),
        retry=retry,
    )


def get_seller_application_service(
    accounts: Annotated[DbAccountRepository, Depends(get_account_repository)],
    applications: Annotated[DbSellerApplicationRepository, Depends(get_seller_application_repository)],
    retry: Annotated[PersistenceRetry, Depends(get_retry)],
) -> SellerApplicationService:
    return SellerApplicationService(
        accounts=accounts,
        applications=applications,
        logger=logging.getLogger("marketplace.seller_applications"),
        retry=retry,
    )


def get_event_submission_service(
    accounts: Annotated[DbAccountRepository, Depends(get_account_repository)],
    submissions: Annotated[DbEventSubmissionRepository, Depends(get_submission_repository)],
    retry: Annotated[PersistenceRetry, Depends(get_retry)],
) -> EventSubmissionService:
    return EventSubmissionService(
        accounts=accounts,
        submissions=submissions,
        logger=logging.getLogger("marketplace.event_submissions"),
        retry=retry,
    )


def get_approval_service(
    accounts: Annotated[DbAccountRepository, Depends(get_account_repository)],
    applications: Annotated[DbSellerApplicationRepository, Depends(get_seller_application_repository)],
    submissions: Annotated[DbEventSubmissionRepository, Depends(get_submission_repository)],
    events: Annotated[DbEventRepository, Depends(get_event_repository)],
    notifier: Annotated[NotificationCollaborator, Depends(get_notifier)],
    lock: Annotated[DistributedLock, Depends(get_lock)],
    retry: Annotated[PersistenceRetry, Depends(get_retry)],
) -> ApprovalService:
    """Build ApprovalService with injected repositories, notifier, lock, retry policy and workflow settings."""
    settings = get_settings()
    return ApprovalService(
        accounts=accounts,
        applications=applications,
        submissions=submissions,
        events=events,
        notifier=notifier,
        logger=logging.getLogger("marketplace.approvals"),
        lock=lock,
        retry=retry,
        cooldown=timedelta(days=settings.seller_reapply_cooldown_days),
        default_rejection_feedback=settings.default_rejection_feedback,
        public_base_url=settings.public_base_url,
        lock_ttl_seconds=settings.approval_lock_ttl_seconds,
    )


def get_published_event_service(
    events: Annotated[DbEventRepository, Depends(get_event_repository)],
    retry: Annotated[PersistenceRetry, Depends(get_retry)],
) -> PublishedEventService:
    return PublishedEventService(
        events=events,
        logger=logging.getLogger("marketplace.events"),
        retry=retry,
    )


def get_rbac() -> RBACService:
    return RBACService()


def get_auth_context(request: Request) -> AuthContext:
    """Extract the caller identity from request.state (set by middleware)."""
    auth = getattr(request.state, "auth", None)
    if auth is None:
        raise AuthenticationError("Authenticated account is required")
    return auth


def require_reviewer(
    auth: Annotated[AuthContext, Depends(get_auth_context)],
    rbac: Annotated[RBACService, Depends(get_rbac)],
) -> AuthContext:
    """Admin routes: the caller must hold the review permission."""
    rbac.check_permission(auth.role, "review")
    return auth
