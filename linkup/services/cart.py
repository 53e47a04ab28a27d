"""Cart Service — the shopper's cart: add, re-quantify, remove, and price lines.

Invariants:
    - One cart per user, created on first add (never on read)
    - Product lines accumulate per variant and never exceed variant stock
    - Ticket lines: quantity 1, one per event, only for PUBLISHED events while
      on sale and not sold out
    - A cart line is only reachable through its owner's cart (404 otherwise)

Design Decisions:
    - Rules live in core/cart_rules.py and core/pricing.py; this module only
      loads rows, calls the rules, and writes
    - The cart view loads every relation eagerly (selectinload) because
      async sessions cannot lazy-load during serialization
"""

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from linkup.core.cart_rules import (
    TICKET_LINE_QUANTITY,
    check_event_on_sale,
    check_one_ticket_per_event,
    check_stock,
    check_ticket_available,
    check_ticket_quantity,
)
from linkup.core.domain_types import CartItemType, UserId
from linkup.core.errors import InvalidRequestError, ResourceNotFoundError
from linkup.core.pricing import (
    CartLine, line_total, summarize_cart, to_cents, variant_unit_price,
)
from linkup.core.timekeeping import utc_now
from linkup.models.cart import Cart, CartItem
from linkup.models.event import Event
from linkup.models.product import ProductVariant
from linkup.models.ticket_type import TicketType
from linkup.schemas.cart import (
    CartItemCreate, CartItemRead, CartLineRead, CartRead, CartSummaryRead,
)
from linkup.schemas.product import VariantRead
from linkup.schemas.ticketing import TicketTypeRead
from linkup.services.coupons import find_coupon

logger = logging.getLogger(__name__)


async def _get_cart(db: AsyncSession, user_id: UserId) -> Cart | None:
    result = await db.execute(select(Cart).where(Cart.user_id == user_id))
    return result.scalar_one_or_none()


async def get_or_create_cart(db: AsyncSession, user_id: UserId) -> Cart:
    """Return the user's cart, inserting it on first use.

    Must run before any other write in the transaction: when a concurrent
    request inserts the same user's cart first, the unique violation is
    resolved by rolling back and reading the winner's row.
    """
    cart = await _get_cart(db, user_id)
    if cart:
        return cart
    cart = Cart(user_id=user_id)
    db.add(cart)
    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        cart = await _get_cart(db, user_id)
        if cart is None:
            raise
        logger.info(
            f"Cart {cart.id} created concurrently, reusing it",
            extra={"user_id": user_id, "cart_id": cart.id},
        )
        return cart
    logger.info(f"Cart {cart.id} created", extra={"user_id": user_id, "cart_id": cart.id})
    return cart


async def _get_user_item(
    db: AsyncSession, user_id: UserId, item_id: int,
) -> CartItem:
    result = await db.execute(
        select(CartItem)
        .join(Cart, CartItem.cart_id == Cart.id)
        .where(CartItem.id == item_id, Cart.user_id == user_id),
    )
    item = result.scalar_one_or_none()
    if not item:
        raise ResourceNotFoundError("CartItem", item_id)
    return item


async def _get_variant(db: AsyncSession, variant_id: int) -> ProductVariant:
    variant = await db.get(ProductVariant, variant_id)
    if not variant:
        raise ResourceNotFoundError("ProductVariant", variant_id)
    return variant


async def _add_product_line(
    db: AsyncSession, cart: Cart, body: CartItemCreate,
) -> CartItem:
    variant = await _get_variant(db, body.product_variant_id)
    result = await db.execute(
        select(CartItem).where(
            CartItem.cart_id == cart.id,
            CartItem.item_type == CartItemType.PRODUCTS.value,
            CartItem.product_variant_id == variant.id,
        ),
    )
    existing = result.scalar_one_or_none()
    new_quantity = check_stock(
        variant.stock_quantity,
        existing.quantity if existing else 0,
        body.quantity,
    )
    if existing:
        existing.quantity = new_quantity
        return existing
    item = CartItem(
        cart_id=cart.id,
        item_type=CartItemType.PRODUCTS.value,
        product_variant_id=variant.id,
        quantity=new_quantity,
    )
    db.add(item)
    return item


async def _add_ticket_line(
    db: AsyncSession, cart: Cart, body: CartItemCreate, now: datetime,
) -> CartItem:
    ticket_type = await db.get(TicketType, body.ticket_type_id)
    if not ticket_type:
        raise ResourceNotFoundError("TicketType", body.ticket_type_id)
    event_status = await db.scalar(
        select(Event.status).where(Event.id == ticket_type.event_id),
    )
    check_event_on_sale(event_status)
    check_ticket_available(
        ticket_type.quantity_total,
        ticket_type.quantity_sold,
        ticket_type.sale_start,
        ticket_type.sale_end,
        now,
    )
    result = await db.execute(
        select(TicketType.event_id)
        .join(CartItem, CartItem.ticket_type_id == TicketType.id)
        .where(
            CartItem.cart_id == cart.id,
            CartItem.item_type == CartItemType.TICKET_TYPES.value,
        ),
    )
    check_one_ticket_per_event(result.scalars().all(), ticket_type.event_id)
    item = CartItem(
        cart_id=cart.id,
        item_type=CartItemType.TICKET_TYPES.value,
        ticket_type_id=ticket_type.id,
        quantity=TICKET_LINE_QUANTITY,
    )
    db.add(item)
    return item


async def add_item(
    db: AsyncSession, user_id: UserId, body: CartItemCreate,
) -> CartItem:
    """Add a product variant or ticket type to the user's cart."""
    cart = await get_or_create_cart(db, user_id)
    if body.item_type == CartItemType.PRODUCTS.value:
        item = await _add_product_line(db, cart, body)
    else:
        item = await _add_ticket_line(db, cart, body, utc_now())
    await db.commit()
    logger.info(
        f"Cart line {item.id} ({item.item_type}) now x{item.quantity}",
        extra={"user_id": user_id, "cart_id": cart.id},
    )
    return item


async def update_item_quantity(
    db: AsyncSession, user_id: UserId, item_id: int, quantity: int,
) -> CartItem:
    item = await _get_user_item(db, user_id, item_id)
    if item.item_type == CartItemType.PRODUCTS.value:
        variant = await _get_variant(db, item.product_variant_id)
        check_stock(variant.stock_quantity, 0, quantity)
    else:
        check_ticket_quantity(quantity)
    item.quantity = quantity
    await db.commit()
    return item


async def remove_item(db: AsyncSession, user_id: UserId, item_id: int) -> None:
    item = await _get_user_item(db, user_id, item_id)
    await db.delete(item)
    await db.commit()
    logger.info(f"Cart line {item_id} removed", extra={"user_id": user_id})


def _price_line(item: CartItem) -> CartLine:
    if item.item_type == CartItemType.PRODUCTS.value:
        variant = item.product_variant
        return CartLine(
            unit_price=variant_unit_price(
                variant.product.base_price, variant.price_offset,
            ),
            quantity=item.quantity,
        )
    return CartLine(
        unit_price=to_cents(item.ticket_type.price),
        quantity=item.quantity,
        event_id=item.ticket_type.event_id,
    )


async def get_cart_view(
    db: AsyncSession,
    user_id: UserId,
    coupon_code: str | None = None,
    coupon_event_id: int | None = None,
) -> CartRead:
    """Cart with priced lines and a summary; an empty view when no cart exists."""
    coupon = None
    if coupon_code:
        if coupon_event_id is None:
            raise InvalidRequestError(
                "event_id is required when applying a coupon", "event_id",
            )
        coupon = await find_coupon(db, coupon_event_id, coupon_code)

    result = await db.execute(
        select(Cart)
        .where(Cart.user_id == user_id)
        .options(
            selectinload(Cart.items)
            .selectinload(CartItem.product_variant)
            .selectinload(ProductVariant.product),
            selectinload(Cart.items).selectinload(CartItem.ticket_type),
        )
        .execution_options(populate_existing=True),
    )
    cart = result.scalar_one_or_none()
    items = cart.items if cart else []

    lines = []
    views = []
    for item in items:
        line = _price_line(item)
        lines.append(line)
        views.append(CartLineRead(
            **CartItemRead.model_validate(item).model_dump(),
            product_variant=(
                VariantRead.model_validate(item.product_variant)
                if item.product_variant else None
            ),
            ticket_type=(
                TicketTypeRead.model_validate(item.ticket_type)
                if item.ticket_type else None
            ),
            unit_price=line.unit_price,
            line_total=line_total(line.unit_price, line.quantity),
        ))

    summary = summarize_cart(lines, coupon, utc_now())
    return CartRead(
        id=cart.id if cart else None,
        user_id=user_id,
        items=views,
        summary=CartSummaryRead(
            **summary.to_dict(),
            coupon_code=coupon.code if coupon else None,
        ),
    )
