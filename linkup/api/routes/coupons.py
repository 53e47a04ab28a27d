"""Coupon Routes — /api/v1/organizer/events/{event_id}/coupons."""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.api.deps import get_organizer_id
from linkup.core.domain_types import OrganizerId
from linkup.infrastructure.database import get_db
from linkup.schemas.common import Envelope
from linkup.schemas.ticketing import CouponCreate, CouponRead, CouponUpdate
from linkup.services import coupons as coupon_service

router = APIRouter(
    prefix="/api/v1/organizer/events/{event_id}/coupons", tags=["coupons"],
)


@router.get("", response_model=Envelope[list[CouponRead]])
async def list_coupons(
    event_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    coupons = await coupon_service.list_coupons(db, organizer_id, event_id)
    return Envelope(data=[CouponRead.model_validate(c) for c in coupons])


@router.post(
    "", response_model=Envelope[CouponRead], status_code=status.HTTP_201_CREATED,
)
async def create_coupon(
    event_id: int,
    body: CouponCreate,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    coupon = await coupon_service.create_coupon(db, organizer_id, event_id, body)
    return Envelope(data=CouponRead.model_validate(coupon))


@router.put("/{coupon_id}", response_model=Envelope[CouponRead])
async def update_coupon(
    event_id: int,
    coupon_id: int,
    body: CouponUpdate,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    coupon = await coupon_service.update_coupon(
        db, organizer_id, event_id, coupon_id, body,
    )
    return Envelope(data=CouponRead.model_validate(coupon))


@router.delete(
    "/{coupon_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def delete_coupon(
    event_id: int,
    coupon_id: int,
    organizer_id: OrganizerId = Depends(get_organizer_id),
    db: AsyncSession = Depends(get_db),
):
    await coupon_service.delete_coupon(db, organizer_id, event_id, coupon_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
