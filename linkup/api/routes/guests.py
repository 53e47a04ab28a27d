"""Guest Routes — /api/v1/organizer/events/{event_id}/guests.

Invariants:
    - Guest email unique per event (409)
    - POST /{guest_id}/check-in is one-shot (409 on repeat)
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.api.deps import get_organizer_id
from linkup.core.domain_types import OrganizerId
from linkup.infrastructure.database import get_db
from linkup.schemas.common import Envelope
from linkup.schemas.ticketing import GuestCreate, GuestRead, GuestUpdate
from linkup.services import guests as guest_service

router = APIRouter(
    prefix="/api/v1/organizer/events/{event_id}/guests", tags=["guests"],
)


@router.get("", response_model=Envelope[list[GuestRead]])
async def list_guests(
    event_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    guests = await guest_service.list_guests(db, organizer_id, event_id)
    return Envelope(data=[GuestRead.model_validate(g) for g in guests])


@router.post(
    "", response_model=Envelope[GuestRead], status_code=status.HTTP_201_CREATED,
)
async def create_guest(
    event_id: int,
    body: GuestCreate,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    guest = await guest_service.create_guest(db, organizer_id, event_id, body)
    return Envelope(data=GuestRead.model_validate(guest))


@router.put("/{guest_id}", response_model=Envelope[GuestRead])
async def update_guest(
    event_id: int,
    guest_id: int,
    body: GuestUpdate,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    guest = await guest_service.update_guest(
        db, organizer_id, event_id, guest_id, body,
    )
    return Envelope(data=GuestRead.model_validate(guest))


@router.delete(
    "/{guest_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_guest(
    event_id: int,
    guest_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    await guest_service.delete_guest(db, organizer_id, event_id, guest_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{guest_id}/check-in", response_model=Envelope[GuestRead])
async def check_in_guest(
    event_id: int,
    guest_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    guest = await guest_service.check_in_guest(db, organizer_id, event_id, guest_id)
    return Envelope(data=GuestRead.model_validate(guest))
