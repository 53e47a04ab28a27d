"""Initial schema — users, events and their children, products, carts.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at", sa.DateTime(timezone=True), nullable=False,
        server_default=sa.func.now(),
    )


def _event_fk() -> sa.Column:
    return sa.Column(
        "event_id", sa.Integer,
        sa.ForeignKey("events.id", ondelete="CASCADE"), nullable=False, index=True,
    )


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("password_hash", sa.String(255), nullable=True),
        _created_at(),
    )

    op.create_table(
        "user_profiles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "user_id", sa.Integer,
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False, unique=True,
        ),
        sa.Column("name", sa.String(100), nullable=False, server_default=""),
    )

    op.create_table(
        "events",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("organizer_id", sa.Integer, nullable=False, index=True),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="DRAFT"),
        sa.Column("event_type", sa.String(20), nullable=False, server_default="OFFLINE"),
        sa.Column("start_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_time", sa.DateTime(timezone=True), nullable=False),
        sa.Column("location", sa.String(300), nullable=True),
        sa.Column("online_url", sa.String(500), nullable=True),
        sa.Column("cover_image", sa.String(500), nullable=True),
        _created_at(),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
    )

    op.create_table(
        "ticket_types",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _event_fk(),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("quantity_total", sa.Integer, nullable=False),
        sa.Column("quantity_sold", sa.Integer, nullable=False, server_default="0"),
        sa.Column("sale_start", sa.DateTime(timezone=True), nullable=True),
        sa.Column("sale_end", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        sa.UniqueConstraint("event_id", "name", name="uq_ticket_types_event_name"),
    )

    op.create_table(
        "guests",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _event_fk(),
        sa.Column(
            "ticket_type_id", sa.Integer,
            sa.ForeignKey("ticket_types.id", ondelete="SET NULL"), nullable=True,
        ),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(30), nullable=True),
        sa.Column("checked_in", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("checked_in_at", sa.DateTime(timezone=True), nullable=True),
        _created_at(),
        sa.UniqueConstraint("event_id", "email", name="uq_guests_event_email"),
    )

    op.create_table(
        "coupons",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _event_fk(),
        sa.Column("code", sa.String(50), nullable=False),
        sa.Column(
            "discount_type", sa.String(20), nullable=False,
            server_default="PERCENTAGE",
        ),
        sa.Column("discount_value", sa.Numeric(10, 2), nullable=False),
        sa.Column("usage_limit", sa.Integer, nullable=True),
        sa.Column("used_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("valid_from", sa.DateTime(timezone=True), nullable=True),
        sa.Column("valid_until", sa.DateTime(timezone=True), nullable=True),
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.true()),
        _created_at(),
        sa.UniqueConstraint("event_id", "code", name="uq_coupons_event_code"),
    )

    op.create_table(
        "attachments",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        _event_fk(),
        sa.Column("file_name", sa.String(255), nullable=False),
        sa.Column("file_url", sa.String(1000), nullable=False),
        sa.Column("mime_type", sa.String(100), nullable=True),
        sa.Column("size_bytes", sa.Integer, nullable=True),
        _created_at(),
    )

    op.create_table(
        "products",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("base_price", sa.Numeric(10, 2), nullable=False),
        sa.Column("image_url", sa.String(500), nullable=True),
        _created_at(),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
    )

    op.create_table(
        "product_variants",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "product_id", sa.Integer,
            sa.ForeignKey("products.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("option1_name", sa.String(50), nullable=True),
        sa.Column("option1_value", sa.String(50), nullable=True),
        sa.Column("option2_name", sa.String(50), nullable=True),
        sa.Column("option2_value", sa.String(50), nullable=True),
        sa.Column("sku", sa.String(100), nullable=True, unique=True),
        sa.Column("stock_quantity", sa.Integer, nullable=False, server_default="0"),
        sa.Column("price_offset", sa.Numeric(10, 2), nullable=False, server_default="0"),
    )

    op.create_table(
        "carts",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer, nullable=False, unique=True),
        _created_at(),
    )

    op.create_table(
        "cart_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "cart_id", sa.Integer,
            sa.ForeignKey("carts.id", ondelete="CASCADE"),
            nullable=False, index=True,
        ),
        sa.Column("item_type", sa.String(20), nullable=False),
        sa.Column(
            "product_variant_id", sa.Integer,
            sa.ForeignKey("product_variants.id", ondelete="CASCADE"), nullable=True,
        ),
        sa.Column(
            "ticket_type_id", sa.Integer,
            sa.ForeignKey("ticket_types.id", ondelete="CASCADE"), nullable=True,
        ),
        sa.Column("quantity", sa.Integer, nullable=False, server_default="1"),
        sa.Column(
            "added_at", sa.DateTime(timezone=True), nullable=False,
            server_default=sa.func.now(),
        ),
    )


def downgrade() -> None:
    for table in (
        "cart_items", "carts", "product_variants", "products",
        "attachments", "coupons", "guests", "ticket_types",
        "events", "user_profiles", "users",
    ):
        op.drop_table(table)
