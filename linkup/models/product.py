"""Product ORM — shop products and their purchasable variants.

Invariants:
    - base_price > 0 (validated at the API boundary)
    - Variant stock_quantity >= 0; sku unique across all variants when set
    - Variant unit price = base_price + price_offset

Design Decisions:
    - variants loaded with selectin: every product read returns its variants
    - delete-orphan on variants: assigning a new list replaces the variant set
"""

from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import String, Text, Integer, Numeric, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from linkup.db.base import Base


class Product(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    base_price: Mapped[Decimal] = mapped_column(Numeric(10, 2), nullable=False)
    image_url: Mapped[str | None] = mapped_column(String(500), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    variants: Mapped[list["ProductVariant"]] = relationship(
        "ProductVariant", back_populates="product",
        cascade="all, delete-orphan", lazy="selectin",
        order_by="ProductVariant.id",
    )


class ProductVariant(Base):
    __tablename__ = "product_variants"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    product_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("products.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    option1_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    option1_value: Mapped[str | None] = mapped_column(String(50), nullable=True)
    option2_name: Mapped[str | None] = mapped_column(String(50), nullable=True)
    option2_value: Mapped[str | None] = mapped_column(String(50), nullable=True)
    sku: Mapped[str | None] = mapped_column(String(100), nullable=True, unique=True)
    stock_quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    price_offset: Mapped[Decimal] = mapped_column(
        Numeric(10, 2), nullable=False, default=Decimal("0"),
    )

    product: Mapped["Product"] = relationship("Product", back_populates="variants")
