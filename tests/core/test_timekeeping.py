"""Timekeeping — UTC normalization."""

from datetime import datetime, timedelta, timezone

from linkup.core.timekeeping import as_utc, utc_now


def test_utc_now_is_aware():
    assert utc_now().tzinfo is not None


def test_naive_treated_as_utc():
    result = as_utc(datetime(2027, 1, 1, 12))
    assert result == datetime(2027, 1, 1, 12, tzinfo=timezone.utc)


def test_aware_converted_to_utc():
    taipei = timezone(timedelta(hours=8))
    result = as_utc(datetime(2027, 1, 1, 20, tzinfo=taipei))
    assert result.hour == 12
    assert result.utcoffset() == timedelta(0)


def test_none_passes_through():
    assert as_utc(None) is None
