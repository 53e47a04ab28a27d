"""Guest Service — guest list management and check-in.

Invariants:
    - Parent event ownership checked before every operation
    - Guest email unique per event (409 on conflict)
    - A guest's ticket type must belong to the same event (400 otherwise)
    - Check-in happens once (409 on repeat)
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.core.domain_types import OrganizerId
from linkup.core.errors import (
    AlreadyCheckedInError, InvalidRequestError, ResourceNotFoundError,
)
from linkup.core.timekeeping import utc_now
from linkup.models.guest import Guest
from linkup.schemas.ticketing import GuestCreate, GuestUpdate
from linkup.services.events import get_owned_event
from linkup.services.persistence import commit_or_conflict
from linkup.services.ticket_types import get_event_ticket_type

logger = logging.getLogger(__name__)


async def _check_ticket_type_in_event(
    db: AsyncSession, event_id: int, ticket_type_id: int | None,
) -> None:
    if ticket_type_id is None:
        return
    if not await get_event_ticket_type(db, event_id, ticket_type_id):
        raise InvalidRequestError(
            f"Ticket type {ticket_type_id} does not belong to event {event_id}",
            "ticket_type_id",
        )


async def get_owned_guest(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, guest_id: int,
) -> Guest:
    await get_owned_event(db, organizer_id, event_id)
    result = await db.execute(
        select(Guest).where(Guest.id == guest_id, Guest.event_id == event_id),
    )
    guest = result.scalar_one_or_none()
    if not guest:
        raise ResourceNotFoundError("Guest", guest_id)
    return guest


async def list_guests(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int,
) -> list[Guest]:
    await get_owned_event(db, organizer_id, event_id)
    result = await db.execute(
        select(Guest)
        .where(Guest.event_id == event_id)
        .order_by(Guest.created_at, Guest.id),
    )
    return list(result.scalars().all())


async def create_guest(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, body: GuestCreate,
) -> Guest:
    await get_owned_event(db, organizer_id, event_id)
    await _check_ticket_type_in_event(db, event_id, body.ticket_type_id)
    guest = Guest(event_id=event_id, **body.model_dump())
    db.add(guest)
    await commit_or_conflict(db, "Guest", "email", body.email)
    logger.info(f"Guest {guest.id} added", extra={"event_id": event_id})
    return guest


async def update_guest(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, guest_id: int,
    body: GuestUpdate,
) -> Guest:
    guest = await get_owned_guest(db, organizer_id, event_id, guest_id)
    changes = body.changes()
    if "ticket_type_id" in changes:
        await _check_ticket_type_in_event(db, event_id, changes["ticket_type_id"])
    for field, value in changes.items():
        setattr(guest, field, value)
    await commit_or_conflict(db, "Guest", "email", changes.get("email", guest.email))
    return guest


async def delete_guest(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, guest_id: int,
) -> None:
    guest = await get_owned_guest(db, organizer_id, event_id, guest_id)
    await db.delete(guest)
    await db.commit()
    logger.info(f"Guest {guest_id} removed", extra={"event_id": event_id})


async def check_in_guest(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, guest_id: int,
) -> Guest:
    guest = await get_owned_guest(db, organizer_id, event_id, guest_id)
    if guest.checked_in:
        raise AlreadyCheckedInError(guest_id)
    guest.checked_in = True
    guest.checked_in_at = utc_now()
    await db.commit()
    logger.info(f"Guest {guest_id} checked in", extra={"event_id": event_id})
    return guest
