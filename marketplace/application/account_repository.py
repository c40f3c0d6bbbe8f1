"""Account role store protocol. Application layer depends on this; infrastructure implements it."""

from typing import Optional, Protocol

from marketplace.domain.models.account import Account, SellerStatus


class AccountRoleStore(Protocol):
    """Holds each account's role and seller sub-state. Leaf dependency of the workflow services."""

    async def get(self, account_id: str) -> Optional[Account]:
        """Return the account, or None if not found."""
        ...

    async def add(self, account: Account) -> Account:
        """Insert a new account. Returns the stored account."""
        ...

    async def compare_and_set(self, account: Account, expected_status: SellerStatus) -> bool:
        """
        Atomically write `account` if the stored seller_status still equals expected_status.
        Returns False (and writes nothing) when the status has moved on.
        """
        ...
