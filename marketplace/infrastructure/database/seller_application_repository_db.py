"""DB-backed seller application repository."""

from typing import List, Optional

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.domain.models.seller_application import (
    ApplicationStatus,
    SellerApplication,
    SellerApplicationDetails,
)
from marketplace.infrastructure.database.errors import as_utc, commit, store_errors
from marketplace.infrastructure.database.models import SellerApplicationRow


def _to_domain(row: SellerApplicationRow) -> SellerApplication:
    return SellerApplication(
        application_id=row.application_id,
        account_id=row.account_id,
        details=SellerApplicationDetails(
            business_name=row.business_name,
            business_type=row.business_type,
            contact_email=row.contact_email,
            contact_phone=row.contact_phone,
            website_url=row.website_url,
            description=row.description,
        ),
        status=ApplicationStatus(row.status),
        applied_at=as_utc(row.applied_at),
        decided_at=as_utc(row.decided_at),
        decided_by=row.decided_by,
        admin_notes=row.admin_notes,
    )


class DbSellerApplicationRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def add(self, application: SellerApplication) -> SellerApplication:
        details = application.details
        row = SellerApplicationRow(
            application_id=application.application_id,
            account_id=application.account_id,
            business_name=details.business_name,
            business_type=details.business_type,
            contact_email=details.contact_email,
            contact_phone=details.contact_phone,
            website_url=details.website_url,
            description=details.description,
            status=application.status.value,
            applied_at=application.applied_at,
        )
        async with store_errors(self._session, "seller application insert"):
            self._session.add(row)
            await self._session.flush()
        await commit(self._session, "seller application insert")
        return application

    async def update(self, application: SellerApplication) -> None:
        stmt = (
            update(SellerApplicationRow)
            .where(SellerApplicationRow.application_id == application.application_id)
            .values(
                status=application.status.value,
                decided_at=application.decided_at,
                decided_by=application.decided_by,
                admin_notes=application.admin_notes,
            )
            .execution_options(synchronize_session=False)
        )
        async with store_errors(self._session, "seller application update"):
            await self._session.execute(stmt)
        await commit(self._session, "seller application update")

    async def get_pending(self, account_id: str) -> Optional[SellerApplication]:
        stmt = (
            select(SellerApplicationRow)
            .where(
                SellerApplicationRow.account_id == account_id,
                SellerApplicationRow.status == ApplicationStatus.PENDING.value,
            )
            .order_by(SellerApplicationRow.applied_at.desc())
            .limit(1)
            .execution_options(populate_existing=True)
        )
        async with store_errors(self._session, "seller application lookup"):
            result = await self._session.execute(stmt)
            row = result.scalar_one_or_none()
        return _to_domain(row) if row is not None else None

    async def list(
        self,
        *,
        account_id: Optional[str] = None,
        status: Optional[ApplicationStatus] = None,
    ) -> List[SellerApplication]:
        stmt = select(SellerApplicationRow).execution_options(populate_existing=True)
        if account_id is not None:
            stmt = stmt.where(SellerApplicationRow.account_id == account_id)
        if status is not None:
            stmt = stmt.where(SellerApplicationRow.status == status.value)
        stmt = stmt.order_by(SellerApplicationRow.applied_at.desc())
        async with store_errors(self._session, "seller application list"):
            result = await self._session.execute(stmt)
            rows = result.scalars().all()
        return [_to_domain(row) for row in rows]
