"""Application-layer exceptions. Do not reuse domain exceptions."""

from typing import Optional


class ApplicationError(Exception):
    """Base for all application-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotFoundError(ApplicationError):
    """Raised when an account, application, submission or event id is unknown."""


class PersistenceError(ApplicationError):
    """
    Raised when the store fails. `applied` is False when the write provably had no effect
    (rolled back before commit), None when the outcome is unknown.
    """

    def __init__(self, message: str, applied: Optional[bool] = None) -> None:
        self.applied = applied
        super().__init__(message)


class SlugConflictError(ApplicationError):
    """Raised by the event store when a slug is already taken."""


class DuplicatePublicationError(ApplicationError):
    """Raised by the event store when the submission already has a published event."""


class PublicationError(ApplicationError):
    """Raised when an approved submission could not be published; the submission was reverted to pending."""


class NotificationError(ApplicationError):
    """Raised by notifiers when delivery fails. Best-effort: callers log and continue."""
