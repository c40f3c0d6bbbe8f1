"""Fixtures for API unit tests: services over in-memory stores, AsyncClient, identity headers."""

import pytest
from httpx import ASGITransport, AsyncClient

from marketplace.application.published_event_service import PublishedEventService
from marketplace.main import app


@pytest.fixture
def published_event_service(events, logger, retry):
    return PublishedEventService(events=events, logger=logger, retry=retry)


@pytest.fixture
def app_with_overrides(
    account_service,
    seller_service,
    submission_service,
    approval_service,
    published_event_service,
):
    """App with every service dependency swapped for the in-memory wiring."""
    from marketplace.api import dependencies

    app.dependency_overrides[dependencies.get_account_service] = lambda: account_service
    app.dependency_overrides[dependencies.get_seller_application_service] = lambda: seller_service
    app.dependency_overrides[dependencies.get_event_submission_service] = lambda: submission_service
    app.dependency_overrides[dependencies.get_approval_service] = lambda: approval_service
    app.dependency_overrides[dependencies.get_published_event_service] = lambda: published_event_service
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(app_with_overrides):
    """Async HTTP client for testing; uses overridden app."""
    transport = ASGITransport(app=app_with_overrides)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


def identity(account_id: str, role: str) -> dict:
    return {"X-Account-ID": account_id, "X-Account-Role": role}


@pytest.fixture
def customer_headers():
    return identity("acct-a", "customer")


@pytest.fixture
def seller_headers():
    return identity("seller-1", "seller")


@pytest.fixture
def admin_headers():
    return identity("admin-1", "admin")


@pytest.fixture
def event_payload():
    return {
        "title": "Spring Gala!!!",
        "description": "An evening of music and dancing.",
        "date": "2025-04-12",
        "time": "19:30:00",
        "venue": "Grand Hall",
        "ticket_price": 25,
        "organizer_email": "gala@harborlights.example.com",
    }


@pytest.fixture
def application_payload():
    return {
        "business_name": "Harbor Lights Productions",
        "business_type": "event_organizer",
        "contact_email": "owner@harborlights.example.com",
    }
