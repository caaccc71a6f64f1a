from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ibytes.models.enums import Rounding
from ibytes.services.domains import UNBOUNDED
from ibytes.services.formatting import PLACES_ABOVE, PLACES_BELOW


@dataclass(slots=True)
class AppConfig:
    domain: str = UNBOUNDED.name
    rounding: Rounding = Rounding.HALF_UP
    places_above: int = PLACES_ABOVE
    places_below: int = PLACES_BELOW

    def to_dict(self) -> dict[str, Any]:
        return {
            "domain": self.domain,
            "rounding": self.rounding.value,
            "placesAbove": self.places_above,
            "placesBelow": self.places_below,
        }
