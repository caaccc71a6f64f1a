from __future__ import annotations

from ibytes.models.enums import Rounding, Unit
from ibytes.services.domains import BOUNDED, UNBOUNDED, NumericDomain
from ibytes.services.formatting import convert, format_size

__version__ = "0.1.0"

__all__ = [
    "BOUNDED",
    "UNBOUNDED",
    "NumericDomain",
    "Rounding",
    "Unit",
    "convert",
    "format_size",
]
