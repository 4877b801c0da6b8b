"""Weather sample entity."""

from dataclasses import dataclass, asdict
from datetime import datetime
from typing import Any, Dict, Optional

from .symbol_code import PrecipType

SNOW_FRACTIONS = frozenset(t.snow_fraction for t in PrecipType)


@dataclass(frozen=True)
class Sample:
    """One timestamped weather observation, either "now" or a forecast step."""

    time: datetime
    temp: Optional[float] = None  # Celsius
    clouds: float = 0.0  # percent, 0-100
    precip: float = 0.0  # mm over the next hour
    precip_prob: float = 0.0  # percent, 0-100
    snow_fraction: float = 0.0  # 0 rain, 0.5 sleet, 1 snow
    is_day: bool = True
    uvi: float = 0.0

    def __post_init__(self):
        if self.snow_fraction not in SNOW_FRACTIONS:
            raise ValueError(
                f"snow_fraction must be one of {sorted(SNOW_FRACTIONS)}, got {self.snow_fraction!r}"
            )
        object.__setattr__(self, "clouds", _clamp_percent(self.clouds))
        object.__setattr__(self, "precip_prob", _clamp_percent(self.precip_prob))

    @property
    def precip_type(self) -> PrecipType:
        """Precipitation type derived from the snow fraction."""
        if self.snow_fraction < 0.25:
            return PrecipType.RAIN
        if self.snow_fraction <= 0.75:
            return PrecipType.SLEET
        return PrecipType.SNOW

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a flat dictionary."""
        return asdict(self)


def _clamp_percent(value: Optional[float]) -> float:
    if value is None:
        return 0.0
    return min(100.0, max(0.0, value))
