"""Customer becomes a seller, submits an event, and the approved event is published."""

from decimal import Decimal

import pytest

from marketplace.application.published_event_service import PublishedEventService
from marketplace.domain.models.account import Role, SellerStatus
from marketplace.domain.models.decision import SellerDecision, SubmissionDecision
from marketplace.domain.models.event_submission import SubmissionStatus


@pytest.mark.asyncio
async def test_customer_to_published_event(
    account_service,
    seller_service,
    submission_service,
    approval_service,
    events,
    logger,
    make_business_details,
    make_event_details,
):
    account = await account_service.register("acct-a", "a@example.com")
    assert (account.role, account.seller_status) == (Role.CUSTOMER, SellerStatus.NONE)

    status = await seller_service.apply("acct-a", make_business_details())
    assert status.seller_status == SellerStatus.PENDING

    await approval_service.decide_seller_application("acct-a", SellerDecision.APPROVE)
    seller = await account_service.get("acct-a")
    assert (seller.role, seller.seller_status) == (Role.SELLER, SellerStatus.APPROVED)

    receipt = await submission_service.submit(
        "acct-a", make_event_details(title="Spring Gala!!!", ticket_price=Decimal("25"))
    )
    assert receipt.status == SubmissionStatus.PENDING

    decision = await approval_service.decide_event_submission(receipt.submission_id, SubmissionDecision.APPROVE)
    assert decision.slug.startswith("spring-gala-")

    catalog = PublishedEventService(events=events, logger=logger)
    published = await catalog.get(decision.slug)
    assert published.event_id == decision.resulting_entity_id
    assert published.is_active is True
    assert published.ticket_price == Decimal("25")
    assert [e.event_id for e in await catalog.list_active()] == [published.event_id]
