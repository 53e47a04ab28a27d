"""Product Service — shop products with nested variants.

Invariants:
    - Products are always returned with their variants loaded
    - Supplying variants on update replaces the whole set in one transaction
    - Duplicate SKUs surface as 409
"""

import logging

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from linkup.core.errors import ResourceNotFoundError
from linkup.core.timekeeping import utc_now
from linkup.models.product import Product, ProductVariant
from linkup.schemas.product import ProductCreate, ProductUpdate, VariantInput
from linkup.services.persistence import commit_or_conflict

logger = logging.getLogger(__name__)


def _build_variants(variants: list[VariantInput]) -> list[ProductVariant]:
    return [ProductVariant(**v.model_dump()) for v in variants]


def _first_sku(variants: list[VariantInput]) -> str | None:
    return next((v.sku for v in variants if v.sku), None)


async def get_product(db: AsyncSession, product_id: int) -> Product:
    result = await db.execute(select(Product).where(Product.id == product_id))
    product = result.scalar_one_or_none()
    if not product:
        raise ResourceNotFoundError("Product", product_id)
    return product


async def list_products(db: AsyncSession) -> list[Product]:
    result = await db.execute(select(Product).order_by(Product.id))
    return list(result.scalars().all())


async def create_product(db: AsyncSession, body: ProductCreate) -> Product:
    now = utc_now()
    product = Product(
        **body.model_dump(exclude={"variants"}),
        variants=_build_variants(body.variants),
        created_at=now,
        updated_at=now,
    )
    db.add(product)
    await commit_or_conflict(db, "ProductVariant", "sku", _first_sku(body.variants))
    logger.info(
        f"Product {product.id} created with {len(product.variants)} variant(s)",
        extra={"product_id": product.id},
    )
    return product


async def update_product(
    db: AsyncSession, product_id: int, body: ProductUpdate,
) -> Product:
    product = await get_product(db, product_id)
    changes = body.changes()
    variants = changes.pop("variants", None)
    for field, value in changes.items():
        setattr(product, field, value)
    if variants is not None:
        # Old variants are deleted before new ones are inserted, so a
        # replacement set may reuse the same SKUs.
        product.variants.clear()
        await db.flush()
        product.variants.extend(_build_variants(body.variants))
    product.updated_at = utc_now()
    await commit_or_conflict(
        db, "ProductVariant", "sku", _first_sku(body.variants or []),
    )
    logger.info(f"Product {product_id} updated", extra={"product_id": product_id})
    return product


async def delete_product(db: AsyncSession, product_id: int) -> Product:
    """Delete and return the product as it was (variants included)."""
    product = await get_product(db, product_id)
    await db.delete(product)
    await db.commit()
    logger.info(f"Product {product_id} deleted", extra={"product_id": product_id})
    return product
