"""XSD temporal literal types.

Classes:
    - TimeLiteral: xsd:time, "hh:mm:ss[.fff][zone]"
    - DateLiteral: xsd:date, "yyyy-mm-dd[zone]"
    - DateTimeLiteral: xsd:dateTime, "yyyy-mm-ddThh:mm:ss[.fff][zone]"

Time literals compare by their UTC wall-clock time, never equal a date or
date-time literal, and canonicalize to UTC with a "Z" zone indicator.

Reference: XML Schema Part 2: Datatypes
    - Section 3.2.7 (dateTime)
    - Section 3.2.8 (time), 3.2.8.2 Canonical representation
    - Section 3.2.9 (date)
"""

from __future__ import annotations

import re
from datetime import date, datetime, time
from typing import Any, ClassVar

from typing_extensions import override

from ..exceptions import InvalidLiteralError
from ..uri import URI, XSD
from .base import Literal, LiteralKind, kind_of
from .value import (
    coerce_date,
    coerce_datetime,
    coerce_time,
    format_date,
    format_datetime,
    format_time,
    utc_triple,
)


class TimeLiteral(Literal):
    """A time literal.

    The lexical representation for time is the left truncated lexical
    representation for xsd:dateTime: "hh:mm:ss.sss" with an optional
    following time zone indicator.

    Examples:
        >>> lit = TimeLiteral("14:30:00-05:00")
        >>> lit.is_valid
        True
        >>> str(lit.canonicalize())
        '19:30:00Z'
        >>> TimeLiteral("10:00:00+02:00") == TimeLiteral("08:00:00Z")
        True
    """

    DATATYPE: ClassVar[URI] = URI(XSD.TIME)
    GRAMMAR: ClassVar[re.Pattern[str] | None] = re.compile(
        r"\A\d{2}:\d{2}:\d{2}(\.\d+)?(([\+\-]\d{2}:\d{2})|UTC|Z)?\Z"
    )
    KIND: ClassVar[LiteralKind] = LiteralKind.TIME

    value: time | None

    @override
    def _coerce(self, value: Any) -> time:
        return coerce_time(value)

    @override
    def _render(self, value: time) -> str:
        """Canonical form (XSD 3.2.8.2).

        Either the time zone is omitted or, if present, it is UTC indicated
        by "Z". Midnight is 00:00:00.
        """
        return format_time(value)

    @override
    def equals(self, other: object) -> bool:
        """Compare as times of day.

        Two valid time literals are equal when their UTC (hour, minute,
        second) match; the date portion and fractional seconds are ignored.
        A time literal never equals a date or date-time literal. Everything
        else, including invalid literals, uses lexical equality.
        """
        if not self.is_valid:
            return super().equals(other)

        match kind_of(other):
            case LiteralKind.TIME if isinstance(other, TimeLiteral):
                if not other.is_valid:
                    return super().equals(other)
                return self.utc_triple() == other.utc_triple()
            case LiteralKind.DATE | LiteralKind.DATE_TIME:
                return False
            case _:
                return super().equals(other)

    @override
    def __hash__(self) -> int:
        """Hash on the UTC (hour, minute, second) for valid literals.

        Consistent across time literals. A valid time literal can also equal
        a plain Literal of the same datatype and text through the lexical
        fallback, and the two hash differently; do not mix them in one set
        or as dict keys. Invalid literals hash on (datatype, lexical).
        """
        if self.is_valid:
            return hash((self.KIND, self.utc_triple()))
        return super().__hash__()

    def utc_triple(self) -> tuple[int, int, int]:
        """(hour, minute, second) in UTC.

        Raises:
            InvalidLiteralError: If no value was parsed
        """
        if self.value is None:
            raise InvalidLiteralError(f"Time literal has no parsed value: {self.to_s()!r}")
        return utc_triple(self.value)


class DateLiteral(Literal):
    """A date literal ("yyyy-mm-dd" with an optional time zone indicator)."""

    DATATYPE: ClassVar[URI] = URI(XSD.DATE)
    GRAMMAR: ClassVar[re.Pattern[str] | None] = re.compile(
        r"\A(-?\d{4}-\d{2}-\d{2})((?:[\+\-]\d{2}:\d{2})|UTC|Z)?\Z"
    )
    KIND: ClassVar[LiteralKind] = LiteralKind.DATE

    value: date | None

    @override
    def _coerce(self, value: Any) -> date:
        return coerce_date(value)

    @override
    def _render(self, value: date) -> str:
        return format_date(value)


class DateTimeLiteral(Literal):
    """A date-time literal ("yyyy-mm-ddThh:mm:ss.sss" with an optional time zone indicator)."""

    DATATYPE: ClassVar[URI] = URI(XSD.DATE_TIME)
    GRAMMAR: ClassVar[re.Pattern[str] | None] = re.compile(
        r"\A(-?\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(?:\.\d+)?)((?:[\+\-]\d{2}:\d{2})|UTC|Z)?\Z"
    )
    KIND: ClassVar[LiteralKind] = LiteralKind.DATE_TIME

    value: datetime | None

    @override
    def _coerce(self, value: Any) -> datetime:
        return coerce_datetime(value)

    @override
    def _render(self, value: datetime) -> str:
        return format_datetime(value)
