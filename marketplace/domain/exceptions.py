"""Domain-specific exceptions. Pure domain layer, no infrastructure."""


class DomainError(Exception):
    """Base for all domain-layer errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class DomainValidationError(DomainError):
    """Raised when domain validation rules are violated."""


class InvalidTicketPriceError(DomainValidationError):
    """Raised when a ticket price is missing or negative."""


class InvalidEmailError(DomainValidationError):
    """Raised when an email address is not valid."""


class InvalidStatusTransitionError(DomainError):
    """Raised when a seller or submission status transition is not allowed."""


class StateConflictError(DomainError):
    """Raised when an operation is not valid in the entity's current state."""


class AlreadyPendingError(StateConflictError):
    """Raised when an account applies while an application is already pending."""


class AlreadySellerError(StateConflictError):
    """Raised when an approved seller applies again."""


class ReapplyTooSoonError(StateConflictError):
    """Raised when a denied account reapplies before its cooldown has elapsed."""

    def __init__(self, message: str, days_until_reapply: int) -> None:
        self.days_until_reapply = days_until_reapply
        super().__init__(message)


class NotPendingError(StateConflictError):
    """Raised when a decision targets an application or submission that is not pending."""


class NotAnApprovedSellerError(StateConflictError):
    """Raised when an account that is not an approved seller submits an event."""


class DecisionInProgressError(StateConflictError):
    """Raised when another admin decision on the same entity holds its lock."""
