from datetime import datetime, timedelta, timezone

import pytest
from jsonhal.utils.time_parser import TimestampParseError, parse_timestamp


def test_parse_timestamp_basic_cases():
    assert parse_timestamp("2006-01-02T15:04:05Z") == datetime(
        2006, 1, 2, 15, 4, 5, tzinfo=timezone.utc
    )
    assert parse_timestamp("2006-01-02t15:04:05z").tzinfo == timezone.utc
    assert parse_timestamp(" 2006-01-02T15:04:05Z ").year == 2006
    assert parse_timestamp("2006-01-02T15:04:05.25Z").microsecond == 250000
    assert parse_timestamp("2006-01-02T15:04:05-07:00").utcoffset() == timedelta(hours=-7)


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "   ",
        "2006-01-02",
        "2006-01-02T15:04:05",  # no offset
        "02/01/2006 15:04:05Z",
        "2006-13-02T15:04:05Z",
    ],
)
def test_parse_timestamp_invalid(raw):
    with pytest.raises(TimestampParseError):
        parse_timestamp(raw)


def test_parse_timestamp_none():
    with pytest.raises(TimestampParseError, match="required"):
        parse_timestamp(None)


def test_timestamp_parse_error_is_value_error():
    assert issubclass(TimestampParseError, ValueError)
