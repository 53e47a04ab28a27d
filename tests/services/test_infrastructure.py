"""Infrastructure — password hashing and JSON log formatting."""

import json
import logging

from linkup.infrastructure.observability import JSONFormatter, setup_logging
from linkup.infrastructure.passwords import hash_password, verify_password


async def test_hash_then_verify():
    hashed = await hash_password("hunter2", rounds=4)
    assert hashed != "hunter2"
    assert await verify_password("hunter2", hashed)
    assert not await verify_password("hunter3", hashed)


async def test_verify_rejects_missing_or_malformed_hash():
    assert not await verify_password("x", None)
    assert not await verify_password("x", "not-a-bcrypt-hash")


def test_json_formatter_surfaces_extra_fields():
    record = logging.LogRecord(
        "linkup.test", logging.INFO, __file__, 1, "Cart %s created", (3,), None,
    )
    record.cart_id = 3
    record.user_id = 1
    log = json.loads(JSONFormatter().format(record))
    assert log["message"] == "Cart 3 created"
    assert log["level"] == "INFO"
    assert log["cart_id"] == 3
    assert log["user_id"] == 1
    assert "event_id" not in log


async def test_password_significant_up_to_72_bytes():
    hashed = await hash_password("a" * 72 + "tail-one", rounds=4)
    assert await verify_password("a" * 72 + "tail-two", hashed)
    assert not await verify_password("a" * 71, hashed)


def test_setup_logging_replaces_its_own_handler():
    root = logging.getLogger()
    before = list(root.handlers)
    previous_level = root.level
    try:
        setup_logging("DEBUG", "json")
        setup_logging("INFO", "text")
        added = [h for h in root.handlers if h not in before]
        assert len(added) == 1
        assert not isinstance(added[0].formatter, JSONFormatter)
        assert root.level == logging.INFO
    finally:
        for handler in [h for h in root.handlers if h not in before]:
            root.removeHandler(handler)
        root.setLevel(previous_level)
