"""Input validators."""

import re
from datetime import datetime, timedelta, timezone


class UnsupportedInputTypeError(TypeError):
    """Raised when a validator receives a value of a type it does not handle."""

    def __init__(self, message="unsupported input type"):
        super().__init__(message)


class InvalidRFC3339Error(ValueError):
    """Raised when a string is not an RFC 3339 timestamp."""

    def __init__(self, message="must comply with RFC3339"):
        super().__init__(message)


_RFC3339 = re.compile(
    r"([0-9]{4})-([0-9]{2})-([0-9]{2})T([0-9]{2}):([0-9]{2}):([0-9]{2})"
    r"(?:[.,]([0-9]+))?"
    r"(Z|[+-][0-9]{2}:[0-9]{2})"
)


def _parse_offset(text):
    if text == "Z":
        return timezone.utc
    hours, minutes = int(text[1:3]), int(text[4:6])
    if hours >= 24 or minutes >= 60:
        raise InvalidRFC3339Error()
    delta = timedelta(hours=hours, minutes=minutes)
    return timezone(-delta if text[0] == "-" else delta)


def _parse(text):
    match = _RFC3339.fullmatch(text)
    if match is None:
        raise InvalidRFC3339Error()
    year, month, day, hour, minute, second = (int(g) for g in match.groups()[:6])
    fraction, offset = match.group(7), match.group(8)
    microsecond = int(fraction[:6].ljust(6, "0")) if fraction else 0
    tzinfo = _parse_offset(offset)
    try:
        return datetime(year, month, day, hour, minute, second, microsecond, tzinfo=tzinfo)
    except ValueError as exc:
        raise InvalidRFC3339Error() from exc


def rfc3339(value):
    """Check that ``value`` is an RFC 3339 timestamp.

    Strings are parsed and the resulting datetime is returned; an empty string
    is accepted and gives None. Datetime objects are returned unchanged.
    """
    if isinstance(value, str):
        if value == "":
            return None
        return _parse(value)
    if isinstance(value, datetime):
        return value
    raise UnsupportedInputTypeError()