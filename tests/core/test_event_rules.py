"""Event Rules — schedule check and copy semantics, no IO."""

from datetime import datetime, timedelta, timezone

import pytest

from linkup.core.errors import InvalidRequestError
from linkup.core.event_rules import check_schedule, copy_title, copyable_fields

START = datetime(2027, 5, 1, 19, tzinfo=timezone.utc)


def test_same_start_and_end_is_allowed():
    check_schedule(START, START)


def test_end_before_start_raises():
    with pytest.raises(InvalidRequestError) as exc_info:
        check_schedule(START, START - timedelta(minutes=1))
    assert exc_info.value.field == "end_time"
    assert exc_info.value.http_status == 400


def test_naive_and_aware_mix_compares_in_utc():
    check_schedule(START.replace(tzinfo=None), START + timedelta(hours=1))


def test_copy_title_appends_suffix():
    assert copy_title("Jazz Night") == "Jazz Night - Copy"


def test_copyable_fields_drops_identity_and_resets_status():
    values = {
        "id": 4, "created_at": START, "updated_at": START,
        "title": "Jazz Night", "status": "PUBLISHED", "location": "Blue Note",
    }
    data = copyable_fields(values)
    assert data == {
        "title": "Jazz Night - Copy", "status": "DRAFT", "location": "Blue Note",
    }
    assert values["title"] == "Jazz Night"
