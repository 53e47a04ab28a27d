"""Product Routes — /api/v1/products.

Invariants:
    - Products always returned with their variants
    - DELETE returns the deleted product (200), unlike organizer resources
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.infrastructure.database import get_db
from linkup.schemas.common import Envelope
from linkup.schemas.product import ProductCreate, ProductRead, ProductUpdate
from linkup.services import products as product_service

router = APIRouter(prefix="/api/v1/products", tags=["products"])


@router.get("", response_model=Envelope[list[ProductRead]])
async def list_products(db: AsyncSession = Depends(get_db)):
    products = await product_service.list_products(db)
    return Envelope(data=[ProductRead.model_validate(p) for p in products])


@router.post(
    "", response_model=Envelope[ProductRead], status_code=status.HTTP_201_CREATED,
)
async def create_product(body: ProductCreate, db: AsyncSession = Depends(get_db)):
    product = await product_service.create_product(db, body)
    return Envelope(data=ProductRead.model_validate(product))


@router.get("/{product_id}", response_model=Envelope[ProductRead])
async def get_product(product_id: int, db: AsyncSession = Depends(get_db)):
    product = await product_service.get_product(db, product_id)
    return Envelope(data=ProductRead.model_validate(product))


@router.put("/{product_id}", response_model=Envelope[ProductRead])
async def update_product(
    product_id: int, body: ProductUpdate, db: AsyncSession = Depends(get_db),
):
    product = await product_service.update_product(db, product_id, body)
    return Envelope(data=ProductRead.model_validate(product))


@router.delete("/{product_id}", response_model=Envelope[ProductRead])
async def delete_product(product_id: int, db: AsyncSession = Depends(get_db)):
    product = await product_service.delete_product(db, product_id)
    return Envelope(data=ProductRead.model_validate(product))
