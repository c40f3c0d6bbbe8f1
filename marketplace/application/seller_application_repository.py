"""Seller application repository protocol."""

from typing import List, Optional, Protocol

from marketplace.domain.models.seller_application import ApplicationStatus, SellerApplication


class SellerApplicationRepository(Protocol):
    async def add(self, application: SellerApplication) -> SellerApplication:
        ...

    async def update(self, application: SellerApplication) -> None:
        """Overwrite decision fields (status, decided_at, decided_by, admin_notes)."""
        ...

    async def get_pending(self, account_id: str) -> Optional[SellerApplication]:
        """Return the account's open application, or None."""
        ...

    async def list(
        self,
        *,
        account_id: Optional[str] = None,
        status: Optional[ApplicationStatus] = None,
    ) -> List[SellerApplication]:
        """Equality-filtered list, newest applied_at first."""
        ...
