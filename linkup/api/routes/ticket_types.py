"""Ticket Type Routes — /api/v1/organizer/events/{event_id}/ticket-types."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.api.deps import get_organizer_id
from linkup.core.domain_types import OrganizerId
from linkup.infrastructure.database import get_db
from linkup.schemas.common import Envelope
from linkup.schemas.ticketing import (
    TicketTypeCreate, TicketTypeRead, TicketTypeUpdate,
)
from linkup.services import ticket_types as ticket_type_service

router = APIRouter(
    prefix="/api/v1/organizer/events/{event_id}/ticket-types",
    tags=["ticket-types"],
)


@router.get("", response_model=Envelope[list[TicketTypeRead]])
async def list_ticket_types(
    event_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    ticket_types = await ticket_type_service.list_ticket_types(
        db, organizer_id, event_id,
    )
    return Envelope(data=[TicketTypeRead.model_validate(t) for t in ticket_types])


@router.post(
    "", response_model=Envelope[TicketTypeRead],
    status_code=status.HTTP_201_CREATED,
)
async def create_ticket_type(
    event_id: int,
    body: TicketTypeCreate,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    ticket_type = await ticket_type_service.create_ticket_type(
        db, organizer_id, event_id, body,
    )
    return Envelope(data=TicketTypeRead.model_validate(ticket_type))


@router.put("/{ticket_type_id}", response_model=Envelope[TicketTypeRead])
async def update_ticket_type(
    event_id: int,
    ticket_type_id: int,
    body: TicketTypeUpdate,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    ticket_type = await ticket_type_service.update_ticket_type(
        db, organizer_id, event_id, ticket_type_id, body,
    )
    return Envelope(data=TicketTypeRead.model_validate(ticket_type))


@router.delete(
    "/{ticket_type_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_ticket_type(
    event_id: int,
    ticket_type_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    await ticket_type_service.delete_ticket_type(
        db, organizer_id, event_id, ticket_type_id,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
