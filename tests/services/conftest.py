"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database with foreign keys ON
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe sees the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - PRAGMA foreign_keys=ON so ON DELETE CASCADE behaves as on PostgreSQL
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest
from sqlalchemy import event
from sqlalchemy.pool import StaticPool
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from linkup.db.base import Base
from linkup.infrastructure.database import get_db, DatabaseSessionManager
from linkup.models import Event, Product, ProductVariant, TicketType
import linkup.infrastructure.database as db_module
from linkup.main import app

OWN_ORGANIZER_ID = 1
OTHER_ORGANIZER_ID = 2


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, _record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


def _event(organizer_id: int, title: str, start: datetime) -> Event:
    return Event(
        organizer_id=organizer_id,
        title=title,
        status="PUBLISHED",
        event_type="OFFLINE",
        start_time=start,
        end_time=start + timedelta(hours=3),
        cover_image="cover.png",
    )


@pytest.fixture
async def seed_event(test_db):
    """A published event owned by the mock organizer."""
    ev = _event(OWN_ORGANIZER_ID, "Jazz Night", datetime(2027, 5, 1, 19, tzinfo=timezone.utc))
    test_db.add(ev)
    await test_db.commit()
    return ev


@pytest.fixture
async def foreign_event(test_db):
    """An event owned by a different organizer."""
    ev = _event(OTHER_ORGANIZER_ID, "Someone Else's Gig", datetime(2027, 6, 1, tzinfo=timezone.utc))
    test_db.add(ev)
    await test_db.commit()
    return ev


@pytest.fixture
async def seed_ticket_type(test_db, seed_event):
    ticket_type = TicketType(
        event_id=seed_event.id, name="General", price=Decimal("25.00"),
        quantity_total=100, quantity_sold=0,
    )
    test_db.add(ticket_type)
    await test_db.commit()
    return ticket_type


@pytest.fixture
async def seed_product(test_db):
    """A T-shirt with two variants (stock 5 and 0)."""
    product = Product(
        name="LinkUp Tee", base_price=Decimal("20.00"),
        variants=[
            ProductVariant(
                option1_name="size", option1_value="M", sku="TEE-M",
                stock_quantity=5, price_offset=Decimal("0"),
            ),
            ProductVariant(
                option1_name="size", option1_value="XL", sku="TEE-XL",
                stock_quantity=0, price_offset=Decimal("2.50"),
            ),
        ],
    )
    test_db.add(product)
    await test_db.commit()
    return product
