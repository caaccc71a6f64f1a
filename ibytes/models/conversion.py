from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from result import Result

from ibytes.models.enums import Unit


@dataclass(slots=True, frozen=True)
class Conversion:
    magnitude: int
    unit: Unit
    value: Decimal

    def __str__(self) -> str:
        return f"{self.value:f} {self.unit.label}"


class ParseErrorCode(str, Enum):
    EMPTY = "empty"
    INVALID_DIGIT = "invalid_digit"
    POS_OVERFLOW = "pos_overflow"
    NEG_OVERFLOW = "neg_overflow"


_PARSE_MESSAGES: dict[ParseErrorCode, str] = {
    ParseErrorCode.EMPTY: "cannot parse integer from empty string",
    ParseErrorCode.INVALID_DIGIT: "invalid digit found in string",
    ParseErrorCode.POS_OVERFLOW: "number too large to fit in target type",
    ParseErrorCode.NEG_OVERFLOW: "number too small to fit in target type",
}


@dataclass(slots=True, frozen=True)
class ParseError:
    code: ParseErrorCode
    text: str

    @property
    def message(self) -> str:
        return _PARSE_MESSAGES[self.code]


ParseResult = Result[int, ParseError]


class UsageError(Exception):
    """Positional arguments do not match ``[UNIT] NUMBER``."""


class UnsupportedUnitError(Exception):
    def __init__(self, unit: Unit, domain: str) -> None:
        super().__init__(f"cannot handle unit: {unit.label}")
        self.unit = unit
        self.domain = domain
