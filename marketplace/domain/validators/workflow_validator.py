"""Validators for seller applications and event submissions. Pure functions, no infrastructure or DB access."""

from decimal import Decimal, InvalidOperation
from typing import Optional

from email_validator import EmailNotValidError, validate_email as _check_email

from marketplace.domain.exceptions import (
    DomainValidationError,
    InvalidEmailError,
    InvalidTicketPriceError,
)
from marketplace.domain.models.event_submission import EventDetails
from marketplace.domain.models.seller_application import SellerApplicationDetails

TICKET_PRICE_MIN = Decimal("0")


def validate_required_text(field_name: str, value: Optional[str]) -> None:
    """Enforce a non-empty (after stripping) text field. Raises DomainValidationError."""
    if value is None or not str(value).strip():
        raise DomainValidationError(f"{field_name} is required and must not be empty")


def validate_email_address(field_name: str, value: Optional[str]) -> None:
    """Enforce a syntactically valid email address. Raises InvalidEmailError."""
    validate_required_text(field_name, value)
    try:
        _check_email(value, check_deliverability=False)
    except EmailNotValidError as e:
        raise InvalidEmailError(f"{field_name} is not a valid email address: {e}") from e


def validate_ticket_price(ticket_price) -> None:
    """Ticket price must be present and >= 0. Raises InvalidTicketPriceError."""
    if ticket_price is None:
        raise InvalidTicketPriceError("ticket_price is required")
    try:
        price = Decimal(str(ticket_price))
    except (InvalidOperation, ValueError) as e:
        raise InvalidTicketPriceError(f"ticket_price is not a number: {ticket_price!r}") from e
    if not price.is_finite() or price < TICKET_PRICE_MIN:
        raise InvalidTicketPriceError(
            f"ticket_price must be greater than or equal to {TICKET_PRICE_MIN}, got {ticket_price}"
        )


def validate_seller_application_details(details: SellerApplicationDetails) -> None:
    """
    Validate a seller application: business name and type required, contact email valid.
    Raises domain exceptions on violation.
    """
    validate_required_text("business_name", details.business_name)
    validate_required_text("business_type", details.business_type)
    validate_email_address("contact_email", details.contact_email)


def validate_event_details(details: EventDetails) -> None:
    """
    Validate an event submission: text fields, date/time present, organizer email, ticket price.
    Raises domain exceptions on violation.
    """
    validate_required_text("title", details.title)
    validate_required_text("description", details.description)
    validate_required_text("venue", details.venue)
    if details.date is None:
        raise DomainValidationError("date is required")
    if details.time is None:
        raise DomainValidationError("time is required")
    validate_email_address("organizer_email", details.organizer_email)
    validate_ticket_price(details.ticket_price)
