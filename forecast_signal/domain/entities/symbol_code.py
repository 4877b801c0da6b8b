"""Symbol code entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class DayPhase(str, Enum):
    """Day/night state encoded in a symbol code."""

    DAY = "day"
    NIGHT = "night"
    UNKNOWN = "unknown"


class PrecipType(str, Enum):
    """Precipitation type encoded in a symbol code."""

    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"

    @property
    def snow_fraction(self) -> float:
        """Share of the precipitation falling as snow."""
        mapping = {
            PrecipType.RAIN: 0.0,
            PrecipType.SLEET: 0.5,
            PrecipType.SNOW: 1.0,
        }
        return mapping[self]


@dataclass(frozen=True)
class SymbolCode:
    """A provider symbol code (e.g. 'lightsnowshowers_night') decoded once."""

    raw: str
    day_phase: DayPhase
    precip_type: PrecipType

    @classmethod
    def parse(cls, code: Optional[str]) -> "SymbolCode":
        """Decode a symbol code string into day phase and precipitation type."""
        text = str(code).lower() if code else ""

        if "day" in text:
            day_phase = DayPhase.DAY
        elif "night" in text:
            day_phase = DayPhase.NIGHT
        else:
            day_phase = DayPhase.UNKNOWN

        if "snow" in text:
            precip_type = PrecipType.SNOW
        elif "sleet" in text:
            precip_type = PrecipType.SLEET
        else:
            precip_type = PrecipType.RAIN

        return cls(raw=text, day_phase=day_phase, precip_type=precip_type)

    def is_day_at(self, hour: int) -> bool:
        """Resolve day/night, falling back to the local hour when the code is silent."""
        if self.day_phase is DayPhase.DAY:
            return True
        if self.day_phase is DayPhase.NIGHT:
            return False
        return 6 <= hour < 18

    def __str__(self) -> str:
        return self.raw
