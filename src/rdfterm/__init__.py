"""
rdfterm: RDF literal terms with XSD value semantics.

This library provides literal terms that know their XSD datatype, validate
their lexical form, compute canonical representations and compare by value
rather than by text where the datatype defines value equality.
"""

from __future__ import annotations

from .exceptions import InvalidLiteralError, LiteralError
from .literal import DateLiteral, DateTimeLiteral, Literal, LiteralKind, TimeLiteral, new_literal
from .uri import URI, XSD

__version__ = "0.1.0"

__all__ = [
    "__version__",
    # Identifiers
    "URI",
    "XSD",
    # Literals
    "Literal",
    "LiteralKind",
    "TimeLiteral",
    "DateLiteral",
    "DateTimeLiteral",
    "new_literal",
    # Exceptions
    "LiteralError",
    "InvalidLiteralError",
]
