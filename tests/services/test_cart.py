"""Cart — product and ticket lines for the mock shopper.

Invariants:
    - Product lines accumulate per variant, capped by stock (409)
    - Ticket lines: quantity 1, one per event, only while on sale (409)
    - Coupons discount the matching event's ticket lines only
    - Another user's cart lines are 404
"""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from linkup.api.deps import get_user_id
from linkup.core.domain_types import UserId
from linkup.main import app
from linkup.models import Cart, Coupon, TicketType
from linkup.services import cart as cart_service

BASE = "/api/v1/cart"


def _product(variant_id: int, quantity: int = 1) -> dict:
    return {"item_type": "products", "product_variant_id": variant_id, "quantity": quantity}


def _ticket(ticket_type_id: int, quantity: int = 1) -> dict:
    return {"item_type": "ticket_types", "ticket_type_id": ticket_type_id, "quantity": quantity}


def _variant_id(product, sku: str) -> int:
    return next(v.id for v in product.variants if v.sku == sku)


@pytest.fixture
async def coupon(test_db, seed_event):
    c = Coupon(
        event_id=seed_event.id, code="JAZZ10", discount_type="PERCENTAGE",
        discount_value=Decimal("10"),
    )
    test_db.add(c)
    await test_db.commit()
    return c


async def test_empty_cart_has_no_id(client):
    res = await client.get(BASE)
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["id"] is None
    assert data["user_id"] == 1
    assert data["items"] == []
    assert Decimal(data["summary"]["total"]) == Decimal("0")


# --- Products -----------------------------------------------------------------

async def test_product_lines_accumulate(client, seed_product):
    variant_id = _variant_id(seed_product, "TEE-M")
    first = await client.post(BASE, json=_product(variant_id, 2))
    assert first.status_code == 200
    assert first.json()["data"]["quantity"] == 2

    second = await client.post(BASE, json=_product(variant_id, 3))
    assert second.json()["data"]["id"] == first.json()["data"]["id"]
    assert second.json()["data"]["quantity"] == 5


async def test_product_line_cannot_exceed_stock(client, seed_product):
    variant_id = _variant_id(seed_product, "TEE-M")
    await client.post(BASE, json=_product(variant_id, 4))
    res = await client.post(BASE, json=_product(variant_id, 2))
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "INSUFFICIENT_STOCK"


async def test_out_of_stock_variant_returns_409(client, seed_product):
    res = await client.post(BASE, json=_product(_variant_id(seed_product, "TEE-XL")))
    assert res.status_code == 409


async def test_unknown_variant_returns_404(client):
    res = await client.post(BASE, json=_product(999))
    assert res.status_code == 404


@pytest.mark.parametrize("payload", [
    {"item_type": "products", "quantity": 1},
    {"item_type": "ticket_types"},
    {"item_type": "products", "product_variant_id": 1, "quantity": 0},
    {"item_type": "gift_cards", "product_variant_id": 1},
])
async def test_invalid_add_returns_400(client, payload):
    res = await client.post(BASE, json=payload)
    assert res.status_code == 400


# --- Tickets ------------------------------------------------------------------

async def test_ticket_line_quantity_forced_to_one(client, seed_ticket_type):
    res = await client.post(BASE, json=_ticket(seed_ticket_type.id, 3))
    assert res.status_code == 200
    data = res.json()["data"]
    assert data["item_type"] == "ticket_types"
    assert data["quantity"] == 1


async def test_one_ticket_per_event(client, seed_ticket_type, test_db):
    vip = TicketType(
        event_id=seed_ticket_type.event_id, name="VIP", price=Decimal("80"),
        quantity_total=10,
    )
    test_db.add(vip)
    await test_db.commit()

    await client.post(BASE, json=_ticket(seed_ticket_type.id))
    res = await client.post(BASE, json=_ticket(vip.id))
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "TICKET_ALREADY_IN_CART"


async def test_sold_out_ticket_returns_409(client, seed_ticket_type, test_db):
    seed_ticket_type.quantity_sold = seed_ticket_type.quantity_total
    await test_db.commit()
    res = await client.post(BASE, json=_ticket(seed_ticket_type.id))
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "TICKET_UNAVAILABLE"


async def test_ticket_before_sale_start_returns_409(client, seed_ticket_type, test_db):
    seed_ticket_type.sale_start = datetime.now(timezone.utc) + timedelta(days=7)
    await test_db.commit()
    res = await client.post(BASE, json=_ticket(seed_ticket_type.id))
    assert res.status_code == 409


async def test_patch_ticket_quantity_returns_400(client, seed_ticket_type):
    added = await client.post(BASE, json=_ticket(seed_ticket_type.id))
    res = await client.patch(
        f"{BASE}/items/{added.json()['data']['id']}", json={"quantity": 2},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "TICKET_QUANTITY_FIXED"


# --- Items --------------------------------------------------------------------

async def test_patch_product_quantity(client, seed_product):
    added = await client.post(BASE, json=_product(_variant_id(seed_product, "TEE-M")))
    url = f"{BASE}/items/{added.json()['data']['id']}"

    res = await client.patch(url, json={"quantity": 5})
    assert res.status_code == 200
    assert res.json()["data"]["quantity"] == 5

    res = await client.patch(url, json={"quantity": 6})
    assert res.status_code == 409


async def test_remove_item(client, seed_product):
    added = await client.post(BASE, json=_product(_variant_id(seed_product, "TEE-M")))
    url = f"{BASE}/items/{added.json()['data']['id']}"

    assert (await client.delete(url)).status_code == 204
    assert (await client.delete(url)).status_code == 404
    assert (await client.get(BASE)).json()["data"]["items"] == []


async def test_other_users_item_returns_404(client, seed_product):
    added = await client.post(BASE, json=_product(_variant_id(seed_product, "TEE-M")))
    url = f"{BASE}/items/{added.json()['data']['id']}"

    app.dependency_overrides[get_user_id] = lambda: UserId(2)
    assert (await client.patch(url, json={"quantity": 2})).status_code == 404
    assert (await client.delete(url)).status_code == 404
    assert (await client.get(BASE)).json()["data"]["items"] == []


# --- View and summary ---------------------------------------------------------

async def test_cart_view_prices_lines_newest_first(
    client, seed_product, seed_ticket_type,
):
    await client.post(BASE, json=_product(_variant_id(seed_product, "TEE-M"), 2))
    await client.post(BASE, json=_ticket(seed_ticket_type.id))

    data = (await client.get(BASE)).json()["data"]
    assert data["id"] is not None
    assert [i["item_type"] for i in data["items"]] == ["ticket_types", "products"]

    ticket_line, product_line = data["items"]
    assert ticket_line["ticket_type"]["name"] == "General"
    assert product_line["product_variant"]["sku"] == "TEE-M"
    assert Decimal(product_line["unit_price"]) == Decimal("20.00")
    assert Decimal(product_line["line_total"]) == Decimal("40.00")
    assert Decimal(data["summary"]["subtotal"]) == Decimal("65.00")
    assert Decimal(data["summary"]["discount"]) == Decimal("0")
    assert data["summary"]["coupon_code"] is None


async def test_coupon_discounts_event_tickets_only(
    client, seed_product, seed_ticket_type, coupon,
):
    await client.post(BASE, json=_product(_variant_id(seed_product, "TEE-M"), 2))
    await client.post(BASE, json=_ticket(seed_ticket_type.id))

    res = await client.get(
        BASE, params={"coupon": "jazz10", "event_id": coupon.event_id},
    )
    assert res.status_code == 200
    summary = res.json()["data"]["summary"]
    assert Decimal(summary["subtotal"]) == Decimal("65.00")
    assert Decimal(summary["discount"]) == Decimal("2.50")
    assert Decimal(summary["total"]) == Decimal("62.50")
    assert summary["coupon_code"] == "JAZZ10"


async def test_coupon_without_event_id_returns_400(client, coupon):
    res = await client.get(BASE, params={"coupon": "JAZZ10"})
    assert res.status_code == 400


async def test_unknown_coupon_returns_404(client, seed_event):
    res = await client.get(BASE, params={"coupon": "NOPE", "event_id": seed_event.id})
    assert res.status_code == 404


async def test_coupon_without_matching_tickets_returns_400(
    client, seed_product, coupon,
):
    await client.post(BASE, json=_product(_variant_id(seed_product, "TEE-M")))
    res = await client.get(BASE, params={"coupon": "JAZZ10", "event_id": coupon.event_id})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "COUPON_NOT_APPLICABLE"


async def test_expired_coupon_returns_400(client, seed_ticket_type, coupon, test_db):
    coupon.valid_until = datetime(2020, 1, 1, tzinfo=timezone.utc)
    await test_db.commit()
    await client.post(BASE, json=_ticket(seed_ticket_type.id))
    res = await client.get(BASE, params={"coupon": "JAZZ10", "event_id": coupon.event_id})
    assert res.status_code == 400
    assert "expired" in res.json()["message"]


# --- Cart creation --------------------------------------------------------------

async def test_first_add_reuses_cart_created_concurrently(
    client, seed_product, test_db, monkeypatch,
):
    existing = Cart(user_id=1)
    test_db.add(existing)
    await test_db.commit()

    real_get_cart = cart_service._get_cart
    calls = []

    async def miss_first_lookup(db, user_id):
        calls.append(user_id)
        if len(calls) == 1:
            return None
        return await real_get_cart(db, user_id)

    monkeypatch.setattr(cart_service, "_get_cart", miss_first_lookup)

    res = await client.post(BASE, json=_product(_variant_id(seed_product, "TEE-M")))
    assert res.status_code == 200
    assert res.json()["data"]["cart_id"] == existing.id
    assert len(calls) == 2


# --- Event status -------------------------------------------------------------

@pytest.mark.parametrize("event_status", ["DRAFT", "CANCELLED", "ENDED"])
async def test_ticket_for_unpublished_event_returns_409(
    client, seed_event, seed_ticket_type, test_db, event_status,
):
    seed_event.status = event_status
    await test_db.commit()
    res = await client.post(BASE, json=_ticket(seed_ticket_type.id))
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "TICKET_UNAVAILABLE"
    assert "event not on sale" in res.json()["message"]
