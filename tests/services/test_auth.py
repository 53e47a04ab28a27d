"""Auth — registration and password login.

Invariants:
    - Email uniqueness is case-insensitive (409)
    - Unknown email and wrong password look the same (401)
    - Passwords are stored as bcrypt hashes
"""

from sqlalchemy import select

from linkup.models import User, UserProfile

CREDS = {"email": "Ada@Example.com", "password": "s3cret-pass", "name": "Ada"}


async def test_register_creates_user_and_profile(client, test_db):
    res = await client.post("/api/register", json=CREDS)
    assert res.status_code == 201
    body = res.json()
    assert body["status"] == "success"
    assert body["message"] == "Registration successful"
    user_id = body["data"]["user_id"]

    user = await test_db.scalar(select(User).where(User.id == user_id))
    assert user.email == "ada@example.com"
    assert user.password_hash.startswith("$2")
    assert "s3cret-pass" not in user.password_hash

    profile = await test_db.scalar(
        select(UserProfile).where(UserProfile.user_id == user_id),
    )
    assert profile.name == "Ada"


async def test_register_duplicate_email_returns_409(client):
    await client.post("/api/register", json=CREDS)
    res = await client.post(
        "/api/register", json={**CREDS, "email": "ADA@example.com"},
    )
    assert res.status_code == 409
    assert res.json()["error"]["code"] == "DUPLICATE_RESOURCE"


async def test_register_missing_password_returns_400(client):
    res = await client.post("/api/register", json={"email": "ada@example.com"})
    assert res.status_code == 400


async def test_login_success(client):
    registered = await client.post("/api/register", json=CREDS)
    res = await client.post(
        "/api/login",
        json={"email": " ada@example.com ", "password": CREDS["password"]},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Login successful"
    assert body["data"]["user_id"] == registered.json()["data"]["user_id"]
    assert "password" not in body["data"]


async def test_login_wrong_password_returns_401(client):
    await client.post("/api/register", json=CREDS)
    res = await client.post(
        "/api/login", json={"email": CREDS["email"], "password": "wrong"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_CREDENTIALS"


async def test_login_unknown_email_matches_wrong_password(client):
    res = await client.post(
        "/api/login", json={"email": "nobody@example.com", "password": "whatever"},
    )
    assert res.status_code == 401
    assert res.json()["message"] == "Invalid email or password"


async def test_login_user_without_password_hash_returns_401(client, test_db):
    test_db.add(User(email="oauth@example.com", password_hash=None))
    await test_db.commit()
    res = await client.post(
        "/api/login", json={"email": "oauth@example.com", "password": "anything"},
    )
    assert res.status_code == 401


async def test_long_password_registers_and_logs_in(client):
    creds = {"email": "long@example.com", "password": "p" * 100}
    res = await client.post("/api/register", json=creds)
    assert res.status_code == 201
    res = await client.post("/api/login", json=creds)
    assert res.status_code == 200


async def test_multibyte_password_over_72_bytes(client):
    password = "密碼" * 20  # 120 UTF-8 bytes
    creds = {"email": "mei@example.com", "password": password}
    assert (await client.post("/api/register", json=creds)).status_code == 201
    assert (await client.post("/api/login", json=creds)).status_code == 200
    res = await client.post(
        "/api/login", json={**creds, "password": "密碼" * 5},
    )
    assert res.status_code == 401
