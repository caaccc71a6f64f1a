from __future__ import annotations

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP

import pytest

from ibytes.models.enums import Rounding, Unit


def test_labels_in_order() -> None:
    assert [unit.label for unit in Unit] == ["bytes", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"]


def test_divisors_are_powers_of_1024() -> None:
    assert Unit.BYTES.divisor == 1
    assert Unit.KIB.divisor == 1024
    assert Unit.EIB.divisor == 2**60
    assert Unit.YIB.divisor == 2**80


@pytest.mark.parametrize(
    ("code", "unit"),
    [("k", Unit.KIB), ("m", Unit.MIB), ("g", Unit.GIB), ("t", Unit.TIB),
     ("p", Unit.PIB), ("e", Unit.EIB), ("z", Unit.ZIB), ("y", Unit.YIB)],
)
def test_from_code(code: str, unit: Unit) -> None:
    assert Unit.from_code(code) is unit
    assert unit.code == code


@pytest.mark.parametrize("code", ["K", "b", "kib", "", " k"])
def test_from_code_rejects_unknown(code: str) -> None:
    assert Unit.from_code(code) is None


def test_bytes_has_no_code() -> None:
    assert Unit.BYTES.code is None


def test_rounding_modes() -> None:
    assert Rounding("half-up").decimal_mode == ROUND_HALF_UP
    assert Rounding.HALF_EVEN.decimal_mode == ROUND_HALF_EVEN
