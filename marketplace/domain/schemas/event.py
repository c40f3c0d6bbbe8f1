"""Pydantic schema for published events."""

import datetime as dt
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel

from marketplace.domain.models.event import Event


class EventResponse(BaseModel):
    """Customer-visible event."""

    event_id: str
    slug: str
    title: str
    description: str
    date: dt.date
    time: dt.time
    venue: str
    ticket_price: Decimal
    organizer_email: str
    image_url: Optional[str] = None
    seller_id: str
    is_active: bool
    created_at: dt.datetime

    model_config = {"from_attributes": True}

    @classmethod
    def from_domain(cls, event: Event) -> "EventResponse":
        return cls.model_validate(event)
