"""Published events API router: GET /events, GET /events/{id_or_slug}."""

from typing import Annotated, List

from fastapi import APIRouter, Depends

from marketplace.api.dependencies import get_published_event_service
from marketplace.application.published_event_service import PublishedEventService
from marketplace.domain.schemas.event import EventResponse

router = APIRouter()


@router.get("", response_model=List[EventResponse])
async def list_events(
    service: Annotated[PublishedEventService, Depends(get_published_event_service)],
):
    """Active events ordered by date, then time."""
    events = await service.list_active()
    return [EventResponse.from_domain(e) for e in events]


@router.get("/{id_or_slug}", response_model=EventResponse)
async def get_event(
    id_or_slug: str,
    service: Annotated[PublishedEventService, Depends(get_published_event_service)],
):
    event = await service.get(id_or_slug)
    return EventResponse.from_domain(event)
