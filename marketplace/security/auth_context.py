"""Caller identity supplied by the auth provider. No FastAPI."""

from dataclasses import dataclass

from marketplace.domain.models.account import Role
from marketplace.security.exceptions import AuthenticationError


@dataclass(frozen=True)
class AuthContext:
    """Current account id and role, as asserted by the auth provider in front of this service."""

    account_id: str
    role: Role

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

    @classmethod
    def from_claims(cls, account_id: str | None, role: str | None) -> "AuthContext":
        """
        Build from raw header values. Raises AuthenticationError if either is missing or the
        role is not one of customer, seller, admin.
        """
        if not account_id or not account_id.strip():
            raise AuthenticationError("Authenticated account id is required")
        if not role or not role.strip():
            raise AuthenticationError("Authenticated account role is required")
        try:
            parsed = Role(role.strip().lower())
        except ValueError as e:
            raise AuthenticationError(f"Unknown account role: {role}") from e
        return cls(account_id=account_id.strip(), role=parsed)
