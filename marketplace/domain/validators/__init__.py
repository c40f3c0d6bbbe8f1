"""Domain validators. Pure validation functions."""

from marketplace.domain.validators.workflow_validator import (
    validate_email_address,
    validate_event_details,
    validate_required_text,
    validate_seller_application_details,
    validate_ticket_price,
)

__all__ = [
    "validate_email_address",
    "validate_event_details",
    "validate_required_text",
    "validate_seller_application_details",
    "validate_ticket_price",
]
