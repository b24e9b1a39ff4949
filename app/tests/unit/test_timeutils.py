from datetime import datetime, timedelta, timezone
from app.utils.timeutils import as_utc, to_naive_utc, utcnow


def test_naive_is_taken_as_utc():
    value = as_utc(datetime(2024, 6, 20, 12, 0))
    assert value == datetime(2024, 6, 20, 12, 0, tzinfo=timezone.utc)
    assert value.tzinfo == timezone.utc


def test_aware_is_converted_to_utc():
    value = as_utc(datetime(2024, 6, 20, 12, 0, tzinfo=timezone(timedelta(hours=2))))
    assert value == datetime(2024, 6, 20, 10, 0, tzinfo=timezone.utc)
    assert value.hour == 10


def test_none_passes_through():
    assert as_utc(None) is None
    assert to_naive_utc(None) is None


def test_to_naive_utc():
    value = to_naive_utc(datetime(2024, 6, 20, 12, 0, tzinfo=timezone(timedelta(hours=-5))))
    assert value == datetime(2024, 6, 20, 17, 0)
    assert value.tzinfo is None


def test_utcnow_is_aware():
    assert utcnow().tzinfo == timezone.utc
