"""DB-backed account role store. Seller status changes go through a conditional UPDATE."""

from typing import Optional

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.domain.models.account import Account, Role, SellerStatus
from marketplace.infrastructure.database.errors import as_utc, commit, store_errors
from marketplace.infrastructure.database.models import AccountRow


def _to_domain(row: AccountRow) -> Account:
    return Account(
        account_id=row.account_id,
        email=row.email,
        role=Role(row.role),
        seller_status=SellerStatus(row.seller_status),
        created_at=as_utc(row.created_at),
        seller_applied_at=as_utc(row.seller_applied_at),
        seller_approved_at=as_utc(row.seller_approved_at),
        seller_denied_at=as_utc(row.seller_denied_at),
        can_reapply_at=as_utc(row.can_reapply_at),
    )


class DbAccountRepository:
    """Implements AccountRoleStore on the accounts table."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get(self, account_id: str) -> Optional[Account]:
        async with store_errors(self._session, "account lookup"):
            result = await self._session.execute(
                select(AccountRow)
                .where(AccountRow.account_id == account_id)
                .execution_options(populate_existing=True)
            )
            row = result.scalar_one_or_none()
        return _to_domain(row) if row is not None else None

    async def add(self, account: Account) -> Account:
        """Insert; if the id already exists the stored account wins."""
        existing = await self.get(account.account_id)
        if existing is not None:
            return existing
        row = AccountRow(
            account_id=account.account_id,
            email=account.email,
            role=account.role.value,
            seller_status=account.seller_status.value,
            created_at=account.created_at,
        )
        try:
            async with store_errors(self._session, "account insert"):
                self._session.add(row)
                await self._session.flush()
        except IntegrityError:
            existing = await self.get(account.account_id)
            if existing is None:
                raise
            return existing
        await commit(self._session, "account insert")
        return account

    async def compare_and_set(self, account: Account, expected_status: SellerStatus) -> bool:
        stmt = (
            update(AccountRow)
            .where(
                AccountRow.account_id == account.account_id,
                AccountRow.seller_status == expected_status.value,
            )
            .values(
                role=account.role.value,
                seller_status=account.seller_status.value,
                seller_applied_at=account.seller_applied_at,
                seller_approved_at=account.seller_approved_at,
                seller_denied_at=account.seller_denied_at,
                can_reapply_at=account.can_reapply_at,
            )
            .execution_options(synchronize_session=False)
        )
        async with store_errors(self._session, "account status update"):
            result = await self._session.execute(stmt)
        if result.rowcount != 1:
            await self._session.rollback()
            return False
        await commit(self._session, "account status update")
        return True
