"""Cart Routes — /api/v1/cart for the current shopper.

Invariants:
    - GET never creates a cart (empty view with id null instead)
    - ?coupon=CODE requires ?event_id=N (400 otherwise)
"""

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.api.deps import get_user_id
from linkup.core.domain_types import UserId
from linkup.infrastructure.database import get_db
from linkup.schemas.cart import CartItemCreate, CartItemRead, CartItemUpdate, CartRead
from linkup.schemas.common import Envelope
from linkup.services import cart as cart_service

router = APIRouter(prefix="/api/v1/cart", tags=["cart"])


@router.get("", response_model=Envelope[CartRead])
async def get_cart(
    coupon: str | None = Query(None, max_length=50),
    event_id: int | None = Query(None),
    user_id: UserId = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Cart lines (newest first) with subtotal, discount and total."""
    cart = await cart_service.get_cart_view(db, user_id, coupon, event_id)
    return Envelope(data=cart)


@router.post("", response_model=Envelope[CartItemRead])
async def add_to_cart(
    body: CartItemCreate,
    user_id: UserId = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    """Add a product variant or a ticket type to the cart."""
    item = await cart_service.add_item(db, user_id, body)
    return Envelope(data=CartItemRead.model_validate(item))


@router.patch("/items/{item_id}", response_model=Envelope[CartItemRead])
async def update_cart_item(
    item_id: int,
    body: CartItemUpdate,
    user_id: UserId = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    item = await cart_service.update_item_quantity(db, user_id, item_id, body.quantity)
    return Envelope(data=CartItemRead.model_validate(item))


@router.delete(
    "/items/{item_id}", status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
)
async def remove_cart_item(
    item_id: int,
    user_id: UserId = Depends(get_user_id),
    db: AsyncSession = Depends(get_db),
):
    await cart_service.remove_item(db, user_id, item_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
