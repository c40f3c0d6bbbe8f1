"""Shared fixtures: in-memory stores with compare-and-set, recording notifier, controllable clock."""

import asyncio
from dataclasses import replace
from datetime import date, datetime, time, timedelta, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from marketplace.application.account_service import AccountService
from marketplace.application.approval_service import ApprovalService
from marketplace.application.event_submission_service import EventSubmissionService
from marketplace.application.exceptions import DuplicatePublicationError, SlugConflictError
from marketplace.application.seller_application_service import SellerApplicationService
from marketplace.domain.models.account import Account, Role, SellerStatus
from marketplace.domain.models.event_submission import EventDetails
from marketplace.domain.models.seller_application import (
    ApplicationStatus,
    SellerApplicationDetails,
)
from marketplace.scalability.distributed_lock import DistributedLock, InMemoryLockBackend
from marketplace.scalability.retry import PersistenceRetry

START = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


class FakeClock:
    def __init__(self, now: datetime = START) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


# Every fake method yields once so asyncio.gather interleaves concurrent callers.


class InMemoryAccountStore:
    def __init__(self) -> None:
        self.rows: dict[str, Account] = {}

    async def get(self, account_id):
        await asyncio.sleep(0)
        return self.rows.get(account_id)

    async def add(self, account):
        await asyncio.sleep(0)
        return self.rows.setdefault(account.account_id, account)

    async def compare_and_set(self, account, expected_status):
        await asyncio.sleep(0)
        current = self.rows.get(account.account_id)
        if current is None or current.seller_status != expected_status:
            return False
        self.rows[account.account_id] = account
        return True


class InMemorySellerApplicationRepository:
    def __init__(self) -> None:
        self.rows: dict[str, object] = {}

    async def add(self, application):
        await asyncio.sleep(0)
        self.rows[application.application_id] = application
        return application

    async def update(self, application):
        await asyncio.sleep(0)
        self.rows[application.application_id] = application

    async def get_pending(self, account_id):
        await asyncio.sleep(0)
        for application in self.rows.values():
            if application.account_id == account_id and application.status == ApplicationStatus.PENDING:
                return application
        return None

    async def list(self, *, account_id=None, status=None):
        await asyncio.sleep(0)
        rows = [
            a
            for a in self.rows.values()
            if (account_id is None or a.account_id == account_id)
            and (status is None or a.status == status)
        ]
        return sorted(rows, key=lambda a: a.applied_at, reverse=True)


class InMemorySubmissionRepository:
    def __init__(self) -> None:
        self.rows: dict[str, object] = {}

    async def add(self, submission):
        await asyncio.sleep(0)
        self.rows[submission.submission_id] = submission
        return submission

    async def get(self, submission_id):
        await asyncio.sleep(0)
        return self.rows.get(submission_id)

    async def compare_and_set(self, submission, expected_status):
        await asyncio.sleep(0)
        current = self.rows.get(submission.submission_id)
        if current is None or current.status != expected_status:
            return False
        self.rows[submission.submission_id] = submission
        return True

    async def list(self, *, seller_id=None, status=None):
        await asyncio.sleep(0)
        rows = [
            s
            for s in self.rows.values()
            if (seller_id is None or s.seller_id == seller_id)
            and (status is None or s.status == status)
        ]
        return sorted(rows, key=lambda s: s.submitted_at, reverse=True)


class InMemoryEventRepository:
    """Enforces the same uniqueness as the events table: slug and source submission."""

    def __init__(self) -> None:
        self.rows: dict[str, object] = {}

    async def add(self, event):
        await asyncio.sleep(0)
        if any(e.slug == event.slug for e in self.rows.values()):
            raise SlugConflictError(f"Slug already taken: {event.slug}")
        if any(e.source_submission_id == event.source_submission_id for e in self.rows.values()):
            raise DuplicatePublicationError(f"Submission already published: {event.source_submission_id}")
        self.rows[event.event_id] = event
        return event

    async def get(self, event_id):
        await asyncio.sleep(0)
        return self.rows.get(event_id)

    async def get_by_slug(self, slug):
        await asyncio.sleep(0)
        return next((e for e in self.rows.values() if e.slug == slug), None)

    async def get_by_submission(self, submission_id):
        await asyncio.sleep(0)
        return next((e for e in self.rows.values() if e.source_submission_id == submission_id), None)

    async def slug_exists(self, slug):
        await asyncio.sleep(0)
        return any(e.slug == slug for e in self.rows.values())

    async def list_active(self):
        await asyncio.sleep(0)
        return sorted(
            (e for e in self.rows.values() if e.is_active),
            key=lambda e: (e.date, e.time),
        )


class RecordingNotifier:
    def __init__(self) -> None:
        self.sent = []

    async def notify(self, notification):
        self.sent.append(notification)


def business_details(**overrides) -> SellerApplicationDetails:
    values = {
        "business_name": "Harbor Lights Productions",
        "business_type": "event_organizer",
        "contact_email": "owner@harborlights.example.com",
    }
    values.update(overrides)
    return SellerApplicationDetails(**values)


def event_details(**overrides) -> EventDetails:
    values = {
        "title": "Spring Gala!!!",
        "description": "An evening of music and dancing.",
        "date": date(2025, 4, 12),
        "time": time(19, 30),
        "venue": "Grand Hall",
        "ticket_price": Decimal("25"),
        "organizer_email": "gala@harborlights.example.com",
    }
    values.update(overrides)
    return EventDetails(**values)


def customer(account_id: str = "acct-a", now: datetime = START) -> Account:
    return Account.register(account_id, f"{account_id}@example.com", now)


def approved_seller(account_id: str = "seller-1", now: datetime = START) -> Account:
    return replace(
        customer(account_id, now),
        role=Role.SELLER,
        seller_status=SellerStatus.APPROVED,
        seller_applied_at=now,
        seller_approved_at=now,
    )


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def accounts():
    return InMemoryAccountStore()


@pytest.fixture
def applications():
    return InMemorySellerApplicationRepository()


@pytest.fixture
def submissions():
    return InMemorySubmissionRepository()


@pytest.fixture
def events():
    return InMemoryEventRepository()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def lock():
    return DistributedLock(InMemoryLockBackend())


@pytest.fixture
def retry(logger):
    return PersistenceRetry(max_retries=1, logger=logger)


@pytest.fixture
def account_service(accounts, logger, retry, clock):
    return AccountService(accounts=accounts, logger=logger, retry=retry, clock=clock)


@pytest.fixture
def seller_service(accounts, applications, logger, retry, clock):
    return SellerApplicationService(
        accounts=accounts,
        applications=applications,
        logger=logger,
        retry=retry,
        clock=clock,
    )


@pytest.fixture
def submission_service(accounts, submissions, logger, retry, clock):
    return EventSubmissionService(
        accounts=accounts,
        submissions=submissions,
        logger=logger,
        retry=retry,
        clock=clock,
    )


@pytest.fixture
def approval_service(accounts, applications, submissions, events, notifier, logger, lock, retry, clock):
    return ApprovalService(
        accounts=accounts,
        applications=applications,
        submissions=submissions,
        events=events,
        notifier=notifier,
        logger=logger,
        lock=lock,
        retry=retry,
        clock=clock,
        cooldown=timedelta(days=30),
        public_base_url="https://tickets.example.com",
    )


@pytest.fixture
def make_business_details():
    return business_details


@pytest.fixture
def make_event_details():
    return event_details


@pytest.fixture
def make_customer():
    return customer


@pytest.fixture
def make_seller():
    return approved_seller
