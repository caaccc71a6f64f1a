from __future__ import annotations

import re
from dataclasses import dataclass

from result import Err, Ok

from ibytes.models.conversion import ParseError, ParseErrorCode, ParseResult, UnsupportedUnitError
from ibytes.models.enums import Unit

_SIGNED = re.compile(r"[+-]?[0-9]+")
_UNSIGNED = re.compile(r"\+?[0-9]+")


@dataclass(slots=True, frozen=True)
class NumericDomain:
    """Integer range a magnitude must fit in, and the largest unit it can divide by."""

    name: str
    ceiling: Unit
    min_value: int | None = None
    max_value: int | None = None

    @property
    def signed(self) -> bool:
        return self.min_value is None or self.min_value < 0

    def supports(self, unit: Unit) -> bool:
        return unit <= self.ceiling

    def divisor(self, unit: Unit) -> int:
        if not self.supports(unit):
            raise UnsupportedUnitError(unit, self.name)
        return unit.divisor

    def parse(self, text: str) -> ParseResult:
        if not text:
            return Err(ParseError(code=ParseErrorCode.EMPTY, text=text))

        pattern = _SIGNED if self.signed else _UNSIGNED
        if pattern.fullmatch(text) is None:
            return Err(ParseError(code=ParseErrorCode.INVALID_DIGIT, text=text))

        value = int(text)
        if self.max_value is not None and value > self.max_value:
            return Err(ParseError(code=ParseErrorCode.POS_OVERFLOW, text=text))
        if self.min_value is not None and value < self.min_value:
            return Err(ParseError(code=ParseErrorCode.NEG_OVERFLOW, text=text))
        return Ok(value)


BOUNDED = NumericDomain(name="bounded", ceiling=Unit.EIB, min_value=-(2**63), max_value=2**63 - 1)
UNBOUNDED = NumericDomain(name="unbounded", ceiling=Unit.YIB, min_value=0)

DOMAINS: dict[str, NumericDomain] = {domain.name: domain for domain in (BOUNDED, UNBOUNDED)}


def get_domain(name: str) -> NumericDomain | None:
    return DOMAINS.get(name)
