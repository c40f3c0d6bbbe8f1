# Application layer: services that orchestrate domain and infrastructure.

from marketplace.application.account_repository import AccountRoleStore
from marketplace.application.account_service import AccountService
from marketplace.application.approval_service import ApprovalService
from marketplace.application.event_repository import EventRepository
from marketplace.application.event_submission_service import (
    EventSubmissionService,
    SubmissionFilter,
)
from marketplace.application.exceptions import (
    ApplicationError,
    DuplicatePublicationError,
    NotFoundError,
    NotificationError,
    PersistenceError,
    PublicationError,
    SlugConflictError,
)
from marketplace.application.notifications import (
    Notification,
    NotificationCollaborator,
    NotificationType,
)
from marketplace.application.published_event_service import PublishedEventService
from marketplace.application.seller_application_repository import SellerApplicationRepository
from marketplace.application.seller_application_service import SellerApplicationService
from marketplace.application.submission_repository import EventSubmissionRepository

__all__ = [
    "AccountRoleStore",
    "AccountService",
    "ApplicationError",
    "ApprovalService",
    "DuplicatePublicationError",
    "EventRepository",
    "EventSubmissionRepository",
    "EventSubmissionService",
    "NotFoundError",
    "Notification",
    "NotificationCollaborator",
    "NotificationError",
    "NotificationType",
    "PersistenceError",
    "PublicationError",
    "PublishedEventService",
    "SellerApplicationRepository",
    "SellerApplicationService",
    "SlugConflictError",
    "SubmissionFilter",
]
