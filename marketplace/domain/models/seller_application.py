"""Domain model for seller applications."""

from dataclasses import dataclass, replace
from datetime import datetime
from enum import Enum
from typing import Optional

from marketplace.domain.exceptions import NotPendingError


class ApplicationStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    DENIED = "denied"


@dataclass(frozen=True)
class SellerApplicationDetails:
    """Business details a customer submits when applying for seller status."""

    business_name: str
    business_type: str
    contact_email: str
    contact_phone: Optional[str] = None
    website_url: Optional[str] = None
    description: Optional[str] = None


@dataclass(frozen=True)
class SellerApplication:
    """One application row. At most one PENDING application per account."""

    application_id: str
    account_id: str
    details: SellerApplicationDetails
    status: ApplicationStatus
    applied_at: datetime
    decided_at: Optional[datetime] = None
    decided_by: Optional[str] = None
    admin_notes: Optional[str] = None

    def decide(
        self,
        status: ApplicationStatus,
        now: datetime,
        decided_by: Optional[str],
        notes: Optional[str],
    ) -> "SellerApplication":
        if self.status != ApplicationStatus.PENDING:
            raise NotPendingError(
                f"Seller application {self.application_id} is not pending (status={self.status.value})"
            )
        if status == ApplicationStatus.PENDING:
            raise ValueError("decision status must be approved or denied")
        return replace(
            self,
            status=status,
            decided_at=now,
            decided_by=decided_by,
            admin_notes=notes,
        )
