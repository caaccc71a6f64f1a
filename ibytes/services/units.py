from __future__ import annotations

from ibytes.models.enums import Unit


def parse_unit_code(code: str | None) -> Unit | None:
    if code is None:
        return None
    return Unit.from_code(code)


def auto_unit(magnitude: int, ceiling: Unit = Unit.YIB) -> Unit:
    """Pick the largest unit whose divisor does not exceed *magnitude*.

    Magnitudes at or above ``ceiling.divisor`` stay in *ceiling*.
    """
    unit = Unit.BYTES
    while unit < ceiling and magnitude >= Unit(unit + 1).divisor:
        unit = Unit(unit + 1)
    return unit


def resolve_unit(selector: str | None, magnitude: int, ceiling: Unit = Unit.YIB) -> Unit:
    explicit = parse_unit_code(selector)
    if explicit is not None:
        return explicit
    return auto_unit(magnitude, ceiling)
