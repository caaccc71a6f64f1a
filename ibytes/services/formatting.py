from __future__ import annotations

from decimal import Decimal, localcontext

from ibytes.models.conversion import Conversion
from ibytes.models.enums import Rounding, Unit
from ibytes.services.domains import UNBOUNDED, NumericDomain
from ibytes.services.units import resolve_unit

PLACES_ABOVE = 2
PLACES_BELOW = 3


def _quotient(magnitude: int, divisor: int) -> Decimal:
    # m / 1024**n terminates within 10*n fractional digits, so this precision is exact.
    precision = len(str(abs(magnitude))) + divisor.bit_length() + 1
    with localcontext() as ctx:
        ctx.prec = precision
        return Decimal(magnitude) / Decimal(divisor)


def _round(value: Decimal, places: int, rounding: Rounding) -> Decimal:
    exponent = value.as_tuple().exponent
    if isinstance(exponent, int) and exponent < -places:
        with localcontext() as ctx:
            ctx.prec = max(ctx.prec, len(value.as_tuple().digits) + places)
            value = value.quantize(Decimal(1).scaleb(-places), rounding=rounding.decimal_mode)
    if value.is_zero():
        value = value.copy_abs()
    return value


def convert(
    magnitude: int,
    unit: Unit,
    domain: NumericDomain = UNBOUNDED,
    *,
    rounding: Rounding = Rounding.HALF_UP,
    places_above: int = PLACES_ABOVE,
    places_below: int = PLACES_BELOW,
) -> Conversion:
    divisor = domain.divisor(unit)
    places = places_above if magnitude > divisor else places_below
    value = _round(_quotient(magnitude, divisor), places, rounding)
    return Conversion(magnitude=magnitude, unit=unit, value=value)


def format_size(
    magnitude: int,
    unit: Unit | str | None = None,
    *,
    domain: NumericDomain = UNBOUNDED,
    rounding: Rounding = Rounding.HALF_UP,
) -> str:
    if not isinstance(unit, Unit):
        unit = resolve_unit(unit, magnitude, domain.ceiling)
    return str(convert(magnitude, unit, domain, rounding=rounding))
