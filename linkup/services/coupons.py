"""Coupon Service — event discount code management and lookup.

Invariants:
    - Parent event ownership checked before every organizer operation
    - Codes unique per event (409 on conflict)
    - Discount terms checked with merged values before every write
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.core.domain_types import OrganizerId
from linkup.core.errors import ResourceNotFoundError
from linkup.core.ticketing_rules import check_coupon_terms
from linkup.models.coupon import Coupon
from linkup.schemas.ticketing import CouponCreate, CouponUpdate
from linkup.services.events import get_owned_event
from linkup.services.persistence import commit_or_conflict

logger = logging.getLogger(__name__)


async def find_coupon(db: AsyncSession, event_id: int, code: str) -> Coupon:
    """Look up an event coupon by code (case-insensitive input) or raise 404."""
    normalized = code.strip().upper()
    result = await db.execute(
        select(Coupon).where(
            Coupon.event_id == event_id, Coupon.code == normalized,
        ),
    )
    coupon = result.scalar_one_or_none()
    if not coupon:
        raise ResourceNotFoundError("Coupon", normalized)
    return coupon


async def get_owned_coupon(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, coupon_id: int,
) -> Coupon:
    await get_owned_event(db, organizer_id, event_id)
    result = await db.execute(
        select(Coupon).where(Coupon.id == coupon_id, Coupon.event_id == event_id),
    )
    coupon = result.scalar_one_or_none()
    if not coupon:
        raise ResourceNotFoundError("Coupon", coupon_id)
    return coupon


async def list_coupons(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int,
) -> list[Coupon]:
    await get_owned_event(db, organizer_id, event_id)
    result = await db.execute(
        select(Coupon).where(Coupon.event_id == event_id).order_by(Coupon.id),
    )
    return list(result.scalars().all())


async def create_coupon(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, body: CouponCreate,
) -> Coupon:
    await get_owned_event(db, organizer_id, event_id)
    check_coupon_terms(
        body.discount_type, body.discount_value, body.valid_from, body.valid_until,
    )
    coupon = Coupon(event_id=event_id, **body.model_dump())
    db.add(coupon)
    await commit_or_conflict(db, "Coupon", "code", body.code)
    logger.info(f"Coupon {coupon.code} created", extra={"event_id": event_id})
    return coupon


async def update_coupon(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, coupon_id: int,
    body: CouponUpdate,
) -> Coupon:
    coupon = await get_owned_coupon(db, organizer_id, event_id, coupon_id)
    changes = body.changes()
    check_coupon_terms(
        changes.get("discount_type", coupon.discount_type),
        changes.get("discount_value", coupon.discount_value),
        changes.get("valid_from", coupon.valid_from),
        changes.get("valid_until", coupon.valid_until),
    )
    for field, value in changes.items():
        setattr(coupon, field, value)
    await commit_or_conflict(db, "Coupon", "code", changes.get("code", coupon.code))
    return coupon


async def delete_coupon(
    db: AsyncSession, organizer_id: OrganizerId, event_id: int, coupon_id: int,
) -> None:
    coupon = await get_owned_coupon(db, organizer_id, event_id, coupon_id)
    await db.delete(coupon)
    await db.commit()
    logger.info(f"Coupon {coupon_id} deleted", extra={"event_id": event_id})
