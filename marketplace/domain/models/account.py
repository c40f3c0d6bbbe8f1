"""Domain model for accounts and their seller sub-state. Pure business semantics, no ORM or infrastructure."""

import math
from dataclasses import dataclass, replace
from datetime import datetime, timedelta
from enum import Enum
from typing import Dict, FrozenSet, Optional

from marketplace.domain.exceptions import (
    AlreadyPendingError,
    AlreadySellerError,
    InvalidStatusTransitionError,
    ReapplyTooSoonError,
)

SECONDS_PER_DAY = 86400


class Role(str, Enum):
    CUSTOMER = "customer"
    SELLER = "seller"
    ADMIN = "admin"


class SellerStatus(str, Enum):
    """Seller-application sub-state of an account. Transitions are validated."""

    NONE = "none"
    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


# Allowed seller status transitions: from_status -> set of valid next statuses
_SELLER_TRANSITIONS: Dict[SellerStatus, FrozenSet[SellerStatus]] = {
    SellerStatus.NONE: frozenset({SellerStatus.PENDING}),
    SellerStatus.PENDING: frozenset({SellerStatus.APPROVED, SellerStatus.DENIED}),
    SellerStatus.DENIED: frozenset({SellerStatus.PENDING}),
    SellerStatus.APPROVED: frozenset(),
}


def validate_seller_transition(current: SellerStatus, new: SellerStatus) -> None:
    """Validate that transition from current to new is allowed. Raises if invalid."""
    allowed = _SELLER_TRANSITIONS.get(current, frozenset())
    if new not in allowed:
        raise InvalidStatusTransitionError(
            f"Invalid seller status transition from {current.value} to {new.value}"
        )


@dataclass(frozen=True)
class Account:
    """
    Account with its role and seller sub-state.
    Mutations return a new Account; the store applies them with compare-and-set on seller_status.
    Invariant: role == SELLER implies seller_status == APPROVED.
    """

    account_id: str
    email: str
    role: Role
    seller_status: SellerStatus
    created_at: datetime
    seller_applied_at: Optional[datetime] = None
    seller_approved_at: Optional[datetime] = None
    seller_denied_at: Optional[datetime] = None
    can_reapply_at: Optional[datetime] = None

    @classmethod
    def register(cls, account_id: str, email: str, now: datetime) -> "Account":
        """Signup state: customer with no seller activity."""
        return cls(
            account_id=account_id,
            email=email,
            role=Role.CUSTOMER,
            seller_status=SellerStatus.NONE,
            created_at=now,
        )

    @property
    def is_seller(self) -> bool:
        return self.role == Role.SELLER and self.seller_status == SellerStatus.APPROVED

    @property
    def has_application(self) -> bool:
        return self.seller_status != SellerStatus.NONE

    def cooldown_active(self, now: datetime) -> bool:
        return (
            self.seller_status == SellerStatus.DENIED
            and self.can_reapply_at is not None
            and now < self.can_reapply_at
        )

    def can_apply(self, now: datetime) -> bool:
        if self.seller_status == SellerStatus.NONE:
            return True
        return self.seller_status == SellerStatus.DENIED and not self.cooldown_active(now)

    def days_until_reapply(self, now: datetime) -> Optional[int]:
        """Whole days (rounded up) until a denied account may reapply, or None."""
        if not self.cooldown_active(now):
            return None
        remaining = (self.can_reapply_at - now).total_seconds()
        return math.ceil(remaining / SECONDS_PER_DAY)

    def ensure_can_apply(self, now: datetime) -> None:
        """Raise the StateConflictError naming why this account may not apply right now."""
        if self.seller_status == SellerStatus.PENDING:
            raise AlreadyPendingError("You already have a pending seller application")
        if self.seller_status == SellerStatus.APPROVED:
            raise AlreadySellerError("Account is already an approved seller")
        if self.cooldown_active(now):
            days = self.days_until_reapply(now)
            raise ReapplyTooSoonError(
                f"Seller application was denied; reapplication available in {days} days",
                days_until_reapply=days,
            )

    def open_application(self, now: datetime) -> "Account":
        validate_seller_transition(self.seller_status, SellerStatus.PENDING)
        return replace(
            self,
            seller_status=SellerStatus.PENDING,
            seller_applied_at=now,
            can_reapply_at=None,
        )

    def approve_seller(self, now: datetime) -> "Account":
        validate_seller_transition(self.seller_status, SellerStatus.APPROVED)
        return replace(
            self,
            role=Role.SELLER,
            seller_status=SellerStatus.APPROVED,
            seller_approved_at=now,
        )

    def deny_seller(self, now: datetime, cooldown: timedelta) -> "Account":
        """Deny the pending application. can_reapply_at is strictly after seller_denied_at."""
        if cooldown <= timedelta(0):
            raise ValueError("cooldown must be positive")
        validate_seller_transition(self.seller_status, SellerStatus.DENIED)
        return replace(
            self,
            seller_status=SellerStatus.DENIED,
            seller_denied_at=now,
            can_reapply_at=now + cooldown,
        )
