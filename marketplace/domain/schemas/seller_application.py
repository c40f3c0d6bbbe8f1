"""Pydantic schemas for seller applications and seller status."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from marketplace.domain.models.account import Account, Role, SellerStatus
from marketplace.domain.models.seller_application import (
    ApplicationStatus,
    SellerApplication,
    SellerApplicationDetails,
)


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------

class SellerApplicationRequest(BaseModel):
    """Request schema for applying for seller status."""

    business_name: str = Field(..., min_length=1, max_length=255)
    business_type: str = Field(..., min_length=1, max_length=100)
    contact_email: EmailStr
    contact_phone: Optional[str] = Field(None, max_length=50)
    website_url: Optional[str] = Field(None, max_length=500)
    description: Optional[str] = None

    def to_details(self) -> SellerApplicationDetails:
        return SellerApplicationDetails(
            business_name=self.business_name.strip(),
            business_type=self.business_type.strip(),
            contact_email=str(self.contact_email),
            contact_phone=self.contact_phone,
            website_url=self.website_url,
            description=self.description,
        )


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------

class SellerStatusResponse(BaseModel):
    """Seller-status snapshot: current sub-state plus whether (and when) the account may apply."""

    account_id: str
    role: Role
    seller_status: SellerStatus
    can_apply: bool
    has_application: bool
    is_seller: bool
    days_until_reapply: Optional[int] = None
    seller_applied_at: Optional[datetime] = None
    seller_approved_at: Optional[datetime] = None
    seller_denied_at: Optional[datetime] = None
    can_reapply_at: Optional[datetime] = None

    @classmethod
    def from_account(cls, account: Account, now: datetime) -> "SellerStatusResponse":
        return cls(
            account_id=account.account_id,
            role=account.role,
            seller_status=account.seller_status,
            can_apply=account.can_apply(now),
            has_application=account.has_application,
            is_seller=account.is_seller,
            days_until_reapply=account.days_until_reapply(now),
            seller_applied_at=account.seller_applied_at,
            seller_approved_at=account.seller_approved_at,
            seller_denied_at=account.seller_denied_at,
            can_reapply_at=account.can_reapply_at,
        )


class SellerApplicationResponse(BaseModel):
    application_id: str
    account_id: str
    business_name: str
    business_type: str
    contact_email: str
    contact_phone: Optional[str] = None
    website_url: Optional[str] = None
    description: Optional[str] = None
    status: ApplicationStatus
    applied_at: datetime
    decided_at: Optional[datetime] = None
    decided_by: Optional[str] = None
    admin_notes: Optional[str] = None

    @classmethod
    def from_domain(cls, application: SellerApplication) -> "SellerApplicationResponse":
        details = application.details
        return cls(
            application_id=application.application_id,
            account_id=application.account_id,
            business_name=details.business_name,
            business_type=details.business_type,
            contact_email=details.contact_email,
            contact_phone=details.contact_phone,
            website_url=details.website_url,
            description=details.description,
            status=application.status,
            applied_at=application.applied_at,
            decided_at=application.decided_at,
            decided_by=application.decided_by,
            admin_notes=application.admin_notes,
        )
