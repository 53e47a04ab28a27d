"""Organizer Event Routes — /api/v1/organizer/events.

Invariants:
    - Every route acts as the organizer from get_organizer_id
    - Non-integer event IDs → 400; missing or foreign events → 404
    - Create and copy return 201, delete returns 204 with no body
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.api.deps import get_organizer_id
from linkup.config import Settings, get_settings
from linkup.core.domain_types import OrganizerId
from linkup.infrastructure.database import get_db
from linkup.schemas.common import Envelope
from linkup.schemas.event import EventCreate, EventRead, EventUpdate
from linkup.services import events as event_service

router = APIRouter(prefix="/api/v1/organizer/events", tags=["organizer-events"])


@router.get("", response_model=Envelope[list[EventRead]])
async def list_events(
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    """Events of the organizer dashboard, latest start first."""
    events = await event_service.list_events(db, organizer_id)
    return Envelope(data=[EventRead.model_validate(e) for e in events])


@router.post(
    "", response_model=Envelope[EventRead], status_code=status.HTTP_201_CREATED,
)
async def create_event(
    body: EventCreate,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    settings: Settings = Depends(get_settings),
    db: AsyncSession = Depends(get_db),
):
    """Create a DRAFT event (first step of the multi-step form)."""
    event = await event_service.create_event(
        db, organizer_id, body, settings.default_cover_image,
    )
    return Envelope(data=EventRead.model_validate(event))


@router.get("/{event_id}", response_model=Envelope[EventRead])
async def get_event(
    event_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    event = await event_service.get_owned_event(db, organizer_id, event_id)
    return Envelope(data=EventRead.model_validate(event))


@router.put("/{event_id}", response_model=Envelope[EventRead])
async def update_event(
    event_id: int,
    body: EventUpdate,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    """Save a draft or edit an event; only the fields sent are changed."""
    event = await event_service.update_event(db, organizer_id, event_id, body)
    return Envelope(data=EventRead.model_validate(event))


@router.delete(
    "/{event_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_event(
    event_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    await event_service.delete_event(db, organizer_id, event_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post(
    "/{event_id}/copy", response_model=Envelope[EventRead],
    status_code=status.HTTP_201_CREATED,
)
async def copy_event(
    event_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    """Duplicate an event as a new DRAFT titled '<title> - Copy'."""
    event = await event_service.copy_event(db, organizer_id, event_id)
    return Envelope(data=EventRead.model_validate(event))
