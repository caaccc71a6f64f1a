from __future__ import annotations

import pytest
from result import Err, Ok

from ibytes.models.conversion import ParseErrorCode, UnsupportedUnitError
from ibytes.models.enums import Unit
from ibytes.services.domains import BOUNDED, UNBOUNDED, get_domain


class TestBoundedParse:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("0", 0),
            ("512", 512),
            ("+7", 7),
            ("-5", -5),
            ("9223372036854775807", 2**63 - 1),
            ("-9223372036854775808", -(2**63)),
        ],
    )
    def test_valid(self, text: str, expected: int) -> None:
        assert BOUNDED.parse(text) == Ok(expected)

    @pytest.mark.parametrize(
        ("text", "code"),
        [
            ("", ParseErrorCode.EMPTY),
            ("abc", ParseErrorCode.INVALID_DIGIT),
            ("12a", ParseErrorCode.INVALID_DIGIT),
            (" 12", ParseErrorCode.INVALID_DIGIT),
            ("1_000", ParseErrorCode.INVALID_DIGIT),
            ("-", ParseErrorCode.INVALID_DIGIT),
            ("+", ParseErrorCode.INVALID_DIGIT),
            ("1.5", ParseErrorCode.INVALID_DIGIT),
            ("١٢", ParseErrorCode.INVALID_DIGIT),
            ("9223372036854775808", ParseErrorCode.POS_OVERFLOW),
            ("-9223372036854775809", ParseErrorCode.NEG_OVERFLOW),
        ],
    )
    def test_invalid(self, text: str, code: ParseErrorCode) -> None:
        result = BOUNDED.parse(text)
        assert isinstance(result, Err)
        assert result.unwrap_err().code is code
        assert result.unwrap_err().text == text

    def test_messages(self) -> None:
        assert BOUNDED.parse("").unwrap_err().message == "cannot parse integer from empty string"
        assert BOUNDED.parse("x").unwrap_err().message == "invalid digit found in string"
        assert BOUNDED.parse("9" * 20).unwrap_err().message == "number too large to fit in target type"
        assert BOUNDED.parse("-" + "9" * 20).unwrap_err().message == "number too small to fit in target type"


class TestUnboundedParse:
    def test_large_values(self) -> None:
        assert UNBOUNDED.parse("1" + "0" * 60) == Ok(10**60)

    def test_plus_sign(self) -> None:
        assert UNBOUNDED.parse("+42") == Ok(42)

    def test_negative_is_invalid_digit(self) -> None:
        result = UNBOUNDED.parse("-5")
        assert isinstance(result, Err)
        assert result.unwrap_err().code is ParseErrorCode.INVALID_DIGIT


class TestDivisor:
    def test_bounded_supports_up_to_eib(self) -> None:
        assert [unit for unit in Unit if BOUNDED.supports(unit)] == list(Unit)[:7]
        assert BOUNDED.divisor(Unit.EIB) == 2**60

    @pytest.mark.parametrize("unit", [Unit.ZIB, Unit.YIB])
    def test_bounded_rejects_large_units(self, unit: Unit) -> None:
        with pytest.raises(UnsupportedUnitError, match=f"cannot handle unit: {unit.label}") as exc_info:
            BOUNDED.divisor(unit)
        assert exc_info.value.unit is unit
        assert exc_info.value.domain == "bounded"

    def test_unbounded_is_total(self) -> None:
        assert all(UNBOUNDED.supports(unit) for unit in Unit)
        assert UNBOUNDED.divisor(Unit.YIB) == 2**80


def test_get_domain() -> None:
    assert get_domain("bounded") is BOUNDED
    assert get_domain("unbounded") is UNBOUNDED
    assert get_domain("i128") is None
