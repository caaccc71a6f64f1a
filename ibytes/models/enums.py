from __future__ import annotations

from decimal import ROUND_HALF_EVEN, ROUND_HALF_UP
from enum import Enum


class Unit(int, Enum):
    BYTES = 0
    KIB = 1
    MIB = 2
    GIB = 3
    TIB = 4
    PIB = 5
    EIB = 6
    ZIB = 7
    YIB = 8

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def code(self) -> str | None:
        return _UNIT_TO_CODE.get(self)

    @property
    def divisor(self) -> int:
        return 1024**self.value

    @classmethod
    def from_code(cls, code: str) -> Unit | None:
        return _CODE_TO_UNIT.get(code)


_LABELS: dict[Unit, str] = {
    Unit.BYTES: "bytes",
    Unit.KIB: "KiB",
    Unit.MIB: "MiB",
    Unit.GIB: "GiB",
    Unit.TIB: "TiB",
    Unit.PIB: "PiB",
    Unit.EIB: "EiB",
    Unit.ZIB: "ZiB",
    Unit.YIB: "YiB",
}

_CODE_TO_UNIT: dict[str, Unit] = {
    "k": Unit.KIB,
    "m": Unit.MIB,
    "g": Unit.GIB,
    "t": Unit.TIB,
    "p": Unit.PIB,
    "e": Unit.EIB,
    "z": Unit.ZIB,
    "y": Unit.YIB,
}

_UNIT_TO_CODE: dict[Unit, str] = {v: k for k, v in _CODE_TO_UNIT.items()}


class Rounding(str, Enum):
    HALF_UP = "half-up"
    HALF_EVEN = "half-even"

    @property
    def decimal_mode(self) -> str:
        return ROUND_HALF_EVEN if self is Rounding.HALF_EVEN else ROUND_HALF_UP
