"""Ticket Type Service — CRUD for the admission classes of an organizer's event.

Invariants:
    - Parent event ownership checked before every operation
    - Names unique per event (409 on conflict)
    - quantity_total never set below quantity_sold
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.core.domain_types import OrganizerId
from linkup.core.errors import ResourceNotFoundError
from linkup.core.ticketing_rules import check_capacity, check_window
from linkup.models.ticket_type import TicketType
from linkup.schemas.ticketing import TicketTypeCreate, TicketTypeUpdate
from linkup.services.events import get_owned_event
from linkup.services.persistence import commit_or_conflict

logger = logging.getLogger(__name__)


async def get_event_ticket_type(
    db: AsyncSession, event_id: int, ticket_type_id: int,
) -> TicketType | None:
    result = await db.execute(
        select(TicketType).where(
            TicketType.id == ticket_type_id, TicketType.event_id == event_id,
        ),
    )
    return result.scalar_one_or_none()


async def get_owned_ticket_type(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, ticket_type_id: int,
) -> TicketType:
    await get_owned_event(db, organizer_id, event_id)
    ticket_type = await get_event_ticket_type(db, event_id, ticket_type_id)
    if not ticket_type:
        raise ResourceNotFoundError("TicketType", ticket_type_id)
    return ticket_type


async def list_ticket_types(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int,
) -> list[TicketType]:
    await get_owned_event(db, organizer_id, event_id)
    result = await db.execute(
        select(TicketType)
        .where(TicketType.event_id == event_id)
        .order_by(TicketType.price, TicketType.id),
    )
    return list(result.scalars().all())


async def create_ticket_type(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int,
    body: TicketTypeCreate,
) -> TicketType:
    await get_owned_event(db, organizer_id, event_id)
    check_window(body.sale_start, body.sale_end, "sale_end")
    ticket_type = TicketType(event_id=event_id, **body.model_dump())
    db.add(ticket_type)
    await commit_or_conflict(db, "TicketType", "name", body.name)
    logger.info(
        f"TicketType {ticket_type.id} created", extra={"event_id": event_id},
    )
    return ticket_type


async def update_ticket_type(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int,
    ticket_type_id: int, body: TicketTypeUpdate,
) -> TicketType:
    ticket_type = await get_owned_ticket_type(
        db, organizer_id, event_id, ticket_type_id,
    )
    changes = body.changes()
    check_capacity(
        changes.get("quantity_total", ticket_type.quantity_total),
        ticket_type.quantity_sold,
    )
    check_window(
        changes.get("sale_start", ticket_type.sale_start),
        changes.get("sale_end", ticket_type.sale_end),
        "sale_end",
    )
    for field, value in changes.items():
        setattr(ticket_type, field, value)
    await commit_or_conflict(
        db, "TicketType", "name", changes.get("name", ticket_type.name),
    )
    return ticket_type


async def delete_ticket_type(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, ticket_type_id: int,
) -> None:
    ticket_type = await get_owned_ticket_type(
        db, organizer_id, event_id, ticket_type_id,
    )
    await db.delete(ticket_type)
    await db.commit()
    logger.info(
        f"TicketType {ticket_type_id} deleted", extra={"event_id": event_id},
    )
