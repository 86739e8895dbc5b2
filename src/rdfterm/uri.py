"""Identifier types for literal datatypes.

Reference: XML Schema Part 2: Datatypes, Section 3 (Built-in datatypes)
"""

from enum import StrEnum

XSD_NAMESPACE = "http://www.w3.org/2001/XMLSchema#"


class URI(str):
    """An IRI identifying a resource such as a literal datatype.

    Plain string semantics: two URIs are equal when their text is equal, and a
    URI compares equal to the same text given as ``str``.
    """

    def __new__(cls, value: str) -> "URI":
        return super().__new__(cls, value)

    def __repr__(self) -> str:
        return f"URI({str.__repr__(self)})"


class XSD(StrEnum):
    """XSD datatype identifiers used by the literal types."""

    STRING = XSD_NAMESPACE + "string"
    TIME = XSD_NAMESPACE + "time"
    DATE = XSD_NAMESPACE + "date"
    DATE_TIME = XSD_NAMESPACE + "dateTime"
