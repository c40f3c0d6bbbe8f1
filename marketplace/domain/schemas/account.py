"""Pydantic schemas for account registration and reads."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, EmailStr

from marketplace.domain.models.account import Account, Role, SellerStatus


class AccountRegisterRequest(BaseModel):
    """Signup hook payload from the auth provider. The account id comes from the auth context."""

    email: EmailStr

    model_config = ConfigDict(extra="forbid")


class AccountResponse(BaseModel):
    account_id: str
    email: str
    role: Role
    seller_status: SellerStatus
    created_at: datetime
    seller_applied_at: Optional[datetime] = None
    seller_approved_at: Optional[datetime] = None
    seller_denied_at: Optional[datetime] = None
    can_reapply_at: Optional[datetime] = None

    model_config = {"from_attributes": True}

    @classmethod
    def from_domain(cls, account: Account) -> "AccountResponse":
        return cls.model_validate(account)
