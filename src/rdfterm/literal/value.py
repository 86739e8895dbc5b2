"""Temporal value helpers backing the XSD date/time literal types.

This module converts heterogeneous inputs into Python temporal values and
renders them back in XSD form:
- Coercion of native values and objects with a to-time conversion
- Permissive parsing of bare times and full date-times (python-dateutil)
- UTC normalisation with fixed-offset zones
- Canonical component formatting with fractional seconds and "Z"

Times are represented as ``datetime.time``. The zone is either absent
(floating time) or a fixed ``datetime.timezone``; named zones are resolved to
their offset on ``ANCHOR_DATE`` when no date is available.

Reference: XML Schema Part 2: Datatypes, Section 3.2.7 (dateTime),
3.2.8 (time), 3.2.9 (date)
"""

from __future__ import annotations

import re
import warnings
from datetime import UTC, date, datetime, time, timedelta, timezone
from typing import Any

from dateutil import parser as date_parser

# Date used to anchor bare times for parsing and offset arithmetic. Only the
# time-of-day portion of a time value is ever rendered or compared.
ANCHOR_DATE = date(2000, 1, 1)

# XSD 1.0 allows "24:00:00" as an alternative lexical form of midnight
_END_OF_DAY_PATTERN = re.compile(r"\A(\s*)24(:00:00(?:\.0+)?)(?!\d)")

_ZERO_OFFSET = timedelta(0)


def _parse(text: str) -> datetime:
    """Run the permissive dateutil parser against ANCHOR_DATE.

    Raises:
        ValueError: If the text cannot be parsed or names an unknown zone
    """
    with warnings.catch_warnings():
        warnings.simplefilter("error", date_parser.UnknownTimezoneWarning)
        try:
            return date_parser.parse(text, default=datetime.combine(ANCHOR_DATE, time()))
        except date_parser.UnknownTimezoneWarning as e:
            raise ValueError(str(e)) from e


# =============================================================================
# Zone Helpers
# =============================================================================


def _fixed_zone(offset: timedelta | None) -> timezone | None:
    if offset is None:
        return None
    if offset == _ZERO_OFFSET:
        return UTC
    return timezone(offset)


def _with_fixed_zone(value: time, moment: datetime | None = None) -> time:
    """Replace the zone of a time with the equivalent fixed offset.

    Args:
        value: Time to normalise
        moment: Full date-time the time was taken from, used to resolve
                named zones. Defaults to the time on ``ANCHOR_DATE``.

    Returns:
        The same wall-clock time with a ``datetime.timezone`` or no zone
    """
    if value.tzinfo is None:
        return value

    if moment is None:
        moment = datetime.combine(ANCHOR_DATE, value)

    return value.replace(tzinfo=_fixed_zone(moment.utcoffset()))


def format_offset(offset: timedelta) -> str:
    """Format a UTC offset as ``+hh:mm`` / ``-hh:mm``."""
    sign = "-" if offset < _ZERO_OFFSET else "+"
    minutes = abs(int(offset.total_seconds())) // 60
    return f"{sign}{minutes // 60:02d}:{minutes % 60:02d}"


def _zone_suffix(offset: timedelta | None) -> str:
    if offset is None:
        return ""
    suffix = format_offset(offset)
    return "Z" if suffix == "+00:00" else suffix


def _fraction(microsecond: int) -> str:
    if not microsecond:
        return ""
    return "." + f"{microsecond:06d}".rstrip("0")


# =============================================================================
# Time Values
# =============================================================================


def supports_time_conversion(obj: Any) -> bool:
    """True if ``obj`` exposes a conversion to a time of day.

    Recognised hooks are ``timetz()`` (``datetime`` and look-alikes) and
    ``to_time()``.
    """
    return callable(getattr(obj, "timetz", None)) or callable(getattr(obj, "to_time", None))


def parse_time(text: str) -> time:
    """Parse a bare time or a full date-time and return its time of day.

    Parsing is permissive (python-dateutil); the date portion, if any, is
    dropped after its zone offset has been resolved.

    Args:
        text: Text such as "14:30:00", "14:30:00.5-05:00", "14:30:00Z" or
              "2024-05-01T14:30:00+02:00"

    Returns:
        Time with a fixed-offset zone, or no zone for floating times

    Raises:
        ValueError: If the text cannot be interpreted as a time, or names
                    a zone other than UTC or a numeric offset
        OverflowError: If a numeric field is out of range for the platform
    """
    text = _END_OF_DAY_PATTERN.sub(r"\g<1>00\g<2>", text, count=1)
    parsed = _parse(text)
    return _with_fixed_zone(parsed.timetz(), parsed)


def coerce_time(obj: Any) -> time:
    """Interpret any supported input as a time of day.

    Attempted in order:
    1. ``datetime.time`` is adopted as is (zone normalised)
    2. Objects with ``timetz()`` or ``to_time()`` are converted
    3. Anything else is parsed from ``str(obj)``

    Raises:
        ValueError: If the input cannot be interpreted as a time
        TypeError: If a conversion hook returns an unsupported type
        Exception: Whatever a conversion hook or the input's __str__ raises
    """
    if isinstance(obj, time):
        return _with_fixed_zone(obj)

    if isinstance(obj, datetime):
        return _with_fixed_zone(obj.timetz(), obj)

    if supports_time_conversion(obj):
        timetz = getattr(obj, "timetz", None)
        converted = timetz() if callable(timetz) else obj.to_time()

        if isinstance(converted, datetime):
            return _with_fixed_zone(converted.timetz(), converted)
        if isinstance(converted, time):
            return _with_fixed_zone(converted)
        raise TypeError(f"Time conversion of {type(obj).__name__} returned {type(converted).__name__}")

    return parse_time(str(obj))


def to_utc(value: time) -> time:
    """Shift a zoned time to UTC; floating times are returned unchanged."""
    if value.tzinfo is None:
        return value

    moment = datetime.combine(ANCHOR_DATE, value).astimezone(UTC)
    return moment.timetz()


def utc_triple(value: time) -> tuple[int, int, int]:
    """(hour, minute, second) of the time after UTC conversion."""
    shifted = to_utc(value)
    return shifted.hour, shifted.minute, shifted.second


def format_time(value: time) -> str:
    """Render a time in canonical XSD form.

    The time is shifted to UTC, so the zone suffix is either absent (floating
    time) or "Z". Fractional seconds are kept with trailing zeros removed.

    Examples:
        14:30:00-05:00  -> "19:30:00Z"
        10:00:00.500+02:00 -> "08:00:00.5Z"
        14:30:00 (no zone) -> "14:30:00"
    """
    shifted = to_utc(value)
    return (
        f"{shifted.hour:02d}:{shifted.minute:02d}:{shifted.second:02d}"
        f"{_fraction(shifted.microsecond)}"
        f"{_zone_suffix(shifted.utcoffset())}"
    )


# =============================================================================
# Date and Date-Time Values
# =============================================================================


def coerce_date(obj: Any) -> date:
    """Interpret any supported input as a calendar date.

    Raises:
        ValueError: If the input cannot be interpreted as a date
    """
    if isinstance(obj, datetime):
        return obj.date()
    if isinstance(obj, date):
        return obj

    return _parse(str(obj)).date()


def coerce_datetime(obj: Any) -> datetime:
    """Interpret any supported input as a date-time with a fixed-offset zone.

    Raises:
        ValueError: If the input cannot be interpreted as a date-time
    """
    if isinstance(obj, datetime):
        parsed = obj
    elif isinstance(obj, date):
        parsed = datetime.combine(obj, time())
    else:
        parsed = _parse(str(obj))

    if parsed.tzinfo is None:
        return parsed
    return parsed.replace(tzinfo=_fixed_zone(parsed.utcoffset()))


def format_date(value: date) -> str:
    return value.isoformat()


def format_datetime(value: datetime) -> str:
    """Render a date-time in canonical XSD form (UTC with "Z" when zoned)."""
    if value.tzinfo is not None:
        value = value.astimezone(UTC)

    return (
        f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
        f"T{value.hour:02d}:{value.minute:02d}:{value.second:02d}"
        f"{_fraction(value.microsecond)}"
        f"{_zone_suffix(value.utcoffset())}"
    )
