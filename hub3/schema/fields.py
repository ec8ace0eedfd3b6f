"""
Field definitions and value decoding rules for HUB3 line records.

A field is a fixed-length slice of a line. The raw slice is stripped of
surrounding whitespace and handed to one of three decoding rules:

- text: the stripped value as-is
- numeric: the stripped value as an integer (blank decodes to 0)
- date: ``YYYYMMDD`` rewritten as ``YYYY-MM-DD`` (blank stays blank)
"""
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, Union

FieldValue = Union[str, int]

# Blanks removed around a field: spaces, tabs, line breaks and Unicode space
# separators. ASCII control characters such as \x1c-\x1f are field content.
FIELD_BLANKS = (
    "\t\n\x0b\x0c\r "
    "\u00a0\u1680\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)

INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


class FieldKind(str, Enum):
    """Value decoding rules."""
    TEXT = "text"
    NUMERIC = "numeric"
    DATE = "date"


def decode_text(value: str) -> str:
    return value


def trim(raw: str) -> str:
    return raw.strip(FIELD_BLANKS)


def decode_numeric(value: str) -> int:
    """
    Decode an integer field.

    A blank field decodes to 0 rather than a missing value. Existing consumers
    of the report format rely on that coercion, so it is kept as-is.

    Raises:
        ValueError: if the value is not an optionally signed run of ASCII digits.
    """
    if not value:
        return 0
    if not INTEGER_PATTERN.fullmatch(value):
        raise ValueError(f"invalid integer field value: {value!r}")
    return int(value)


def decode_date(value: str) -> str:
    """Rewrite ``YYYYMMDD`` as ``YYYY-MM-DD``; blank values are returned unchanged."""
    if not value:
        return value
    return "-".join((value[0:4], value[4:6], value[6:8]))


DECODERS: Dict[FieldKind, Callable[[str], FieldValue]] = {
    FieldKind.TEXT: decode_text,
    FieldKind.NUMERIC: decode_numeric,
    FieldKind.DATE: decode_date,
}


@dataclass(frozen=True)
class FieldSpec:
    """One fixed-width field of a record layout."""

    name: str
    length: int
    kind: FieldKind = FieldKind.TEXT

    def __post_init__(self):
        if self.length <= 0:
            raise ValueError(f"Field {self.name!r} must have a positive length, got {self.length}")

    @property
    def decoder(self) -> Callable[[str], FieldValue]:
        return DECODERS[self.kind]

    def decode(self, raw: str) -> FieldValue:
        """Strip a raw slice and decode it with this field's rule."""
        return self.decoder(trim(raw))


# Shorthand constructors for layout tables

def text(name: str, length: int) -> FieldSpec:
    return FieldSpec(name, length, FieldKind.TEXT)


def num(name: str, length: int) -> FieldSpec:
    return FieldSpec(name, length, FieldKind.NUMERIC)


def date(name: str) -> FieldSpec:
    return FieldSpec(name, 8, FieldKind.DATE)


def amount(name: str) -> FieldSpec:
    return FieldSpec(name, 15, FieldKind.NUMERIC)


def currency(name: str) -> FieldSpec:
    return FieldSpec(name, 3, FieldKind.TEXT)


def oib(name: str) -> FieldSpec:
    return FieldSpec(name, 11, FieldKind.TEXT)


def sign(name: str) -> FieldSpec:
    return FieldSpec(name, 1, FieldKind.TEXT)


def record_type(name: str) -> FieldSpec:
    return FieldSpec(name, 3, FieldKind.NUMERIC)
