"""Literal terms and their XSD value semantics.

This package contains the generic Literal base and the typed literal
classes, plus new_literal() which picks the right class for an input.

Reference: RDF 1.1 Concepts and Abstract Syntax, Section 3.3
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any

from ..uri import XSD
from .base import Literal, LiteralKind, kind_of
from .temporal import DateLiteral, DateTimeLiteral, TimeLiteral

_DATATYPE_CLASSES: dict[str, type[Literal]] = {
    XSD.TIME: TimeLiteral,
    XSD.DATE: DateLiteral,
    XSD.DATE_TIME: DateTimeLiteral,
}


def _class_for_value(value: Any) -> type[Literal]:
    # datetime is a subclass of date, so it must be checked first
    if isinstance(value, datetime):
        return DateTimeLiteral
    if isinstance(value, date):
        return DateLiteral
    if isinstance(value, time):
        return TimeLiteral
    return Literal


def new_literal(value: Any, *, datatype: str | None = None, lexical: str | None = None) -> Literal:
    """Create a literal of the class matching the datatype or the value.

    Args:
        value: Raw input
        datatype: Datatype IRI; selects the literal class when known
        lexical: Lexical form overriding the one derived from value

    Returns:
        TimeLiteral, DateLiteral, DateTimeLiteral, or a plain Literal

    Examples:
        >>> new_literal("14:30:00Z", datatype=XSD.TIME)
        TimeLiteral('14:30:00Z', datatype=URI('http://www.w3.org/2001/XMLSchema#time'), is_valid=True)
    """
    if datatype is not None:
        cls = _DATATYPE_CLASSES.get(datatype, Literal)
    else:
        cls = _class_for_value(value)

    return cls(value, datatype=datatype, lexical=lexical)


__all__ = [
    "Literal",
    "LiteralKind",
    "kind_of",
    "TimeLiteral",
    "DateLiteral",
    "DateTimeLiteral",
    "new_literal",
]
