from datetime import datetime, timedelta, timezone

import pytest

from gdkit.validator import InvalidRFC3339Error, UnsupportedInputTypeError, rfc3339


def test_int_is_unsupported():
    with pytest.raises(UnsupportedInputTypeError, match="unsupported input type"):
        rfc3339(1)


def test_empty_string_is_accepted():
    assert rfc3339("") is None


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        (
            "2019-10-12T14:20:50.52+07:00",
            datetime(2019, 10, 12, 14, 20, 50, 520000, tzinfo=timezone(timedelta(hours=7))),
        ),
        (
            "2019-10-12T14:20:50.52Z",
            datetime(2019, 10, 12, 14, 20, 50, 520000, tzinfo=timezone.utc),
        ),
        (
            "2019-10-12T14:20:50-03:30",
            datetime(2019, 10, 12, 14, 20, 50, tzinfo=timezone(-timedelta(hours=3, minutes=30))),
        ),
    ],
)
def test_valid_strings(text, expected):
    result = rfc3339(text)
    assert result == expected
    assert result.utcoffset() == expected.utcoffset()


@pytest.mark.parametrize(
    "text",
    [
        "2019-10-12 14:20:50",
        "2019-10-12T14:20:50",
        "2019-02-30T14:20:50Z",
        "2019-10-12T24:20:50Z",
        "2019-10-12T14:20:50+25:00",
    ],
)
def test_broken_strings(text):
    with pytest.raises(InvalidRFC3339Error, match="RFC3339"):
        rfc3339(text)


def test_datetime_is_returned_unchanged():
    now = datetime.now()
    assert rfc3339(now) is now