"""Generic literal term.

This module contains the Literal base class shared by all literal types:
- Datatype storage (class default, per-instance override)
- Lexical form storage and rendering
- Fail-soft construction (unparseable input leaves the value absent)
- Grammar-based validity
- Fallback equality on datatype and lexical text

Subclasses customise behaviour through class constants (DATATYPE, GRAMMAR,
KIND) and two hooks: _coerce() interprets raw input, _render() formats a
parsed value.

Reference: RDF 1.1 Concepts and Abstract Syntax, Section 3.3 (Literals)
"""

from __future__ import annotations

import copy
import logging
import re
from enum import StrEnum
from typing import Any, ClassVar, Self

from ..exceptions import InvalidLiteralError
from ..uri import URI, XSD

logger = logging.getLogger(__name__)


class LiteralKind(StrEnum):
    """Closed set of literal kinds that take part in typed equality."""

    TIME = "time"
    DATE = "date"
    DATE_TIME = "dateTime"
    OTHER = "other"


def kind_of(obj: object) -> LiteralKind:
    """Literal kind of any object (non-literals are OTHER)."""
    if isinstance(obj, Literal):
        return obj.KIND
    return LiteralKind.OTHER


class Literal:
    """A literal term: lexical form, parsed value and datatype.

    Construction never raises. Input that cannot be interpreted leaves
    ``value`` as None, which makes the literal invalid; the raw text stays
    available through ``lexical`` and ``str()``.

    Examples:
        >>> lit = Literal("chat")
        >>> str(lit), lit.is_valid
        ('chat', True)
        >>> lit.datatype
        URI('http://www.w3.org/2001/XMLSchema#string')
    """

    DATATYPE: ClassVar[URI] = URI(XSD.STRING)
    GRAMMAR: ClassVar[re.Pattern[str] | None] = None
    KIND: ClassVar[LiteralKind] = LiteralKind.OTHER

    datatype: URI
    lexical: str | None
    value: Any

    def __init__(self, value: Any, *, lexical: str | None = None, datatype: str | None = None) -> None:
        """Initialize Literal.

        Args:
            value: Raw input; a string, a native value or a convertible object
            lexical: Lexical form overriding the one derived from value
            datatype: Datatype IRI overriding the class default
        """
        self.datatype = URI(datatype) if datatype is not None else self.DATATYPE

        if lexical is not None:
            self.lexical = lexical
        elif isinstance(value, str):
            self.lexical = value
        else:
            self.lexical = None

        try:
            self.value = self._coerce(value)
        except Exception as e:
            logger.debug("Cannot interpret %s input as %s: %s", type(value).__name__, type(self).__name__, e)
            self.value = None

    def _coerce(self, value: Any) -> Any:
        """Interpret raw input as this literal's value type.

        Raises:
            Exception: Any error; the constructor records it as an absent value
        """
        return value

    def _render(self, value: Any) -> str:
        """Format a parsed value."""
        return str(value)

    @property
    def is_valid(self) -> bool:
        """True if a value was parsed and the lexical form matches GRAMMAR."""
        if self.value is None:
            return False
        if self.GRAMMAR is None:
            return True
        return self.GRAMMAR.match(self.to_s()) is not None

    @property
    def is_invalid(self) -> bool:
        return not self.is_valid

    def canonicalize(self) -> Self:
        """Replace the lexical form with the canonical rendering of the value.

        Returns:
            self, for chaining

        Raises:
            InvalidLiteralError: If no value was parsed
        """
        if self.value is None:
            raise InvalidLiteralError(
                f"Cannot canonicalize {type(self).__name__} without a parsed value: {self.to_s()!r}"
            )

        self.lexical = self._render(self.value)
        return self

    def canonical(self) -> Self:
        """Return a canonicalized copy, leaving this literal unchanged.

        Raises:
            InvalidLiteralError: If no value was parsed
        """
        return copy.copy(self).canonicalize()

    def to_s(self) -> str:
        """Lexical form, or the rendered value when no lexical form is set."""
        if self.lexical is not None:
            return self.lexical
        if self.value is None:
            return ""
        return self._render(self.value)

    def equals(self, other: object) -> bool:
        """Fallback equality: same datatype and same lexical text."""
        if not isinstance(other, Literal):
            return False
        return self.datatype == other.datatype and self.to_s() == other.to_s()

    def __eq__(self, other: object) -> bool:
        return self.equals(other)

    def __hash__(self) -> int:
        return hash((self.datatype, self.to_s()))

    def __str__(self) -> str:
        return self.to_s()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_s()!r}, datatype={self.datatype!r}, is_valid={self.is_valid})"
