"""Forecast event entity."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class EventReason(str, Enum):
    """Why a forecast step was picked as the next notable change."""

    TEMP_DROP = "temp-drop"
    RAIN_STRONGER = "rain-stronger"
    RAIN_WEAKER = "rain-weaker"
    TEMP_MAX = "temp-max"
    TEMP_MIN = "temp-min"
    NONE = "none"

    @property
    def is_rain(self) -> bool:
        """True for precipitation-intensity changes."""
        return self in (EventReason.RAIN_STRONGER, EventReason.RAIN_WEAKER)


@dataclass(frozen=True)
class ForecastEvent:
    """The next notable change: an index into the forecast plus a reason."""

    index: Optional[int]  # None when nothing notable was found
    reason: EventReason

    @classmethod
    def none(cls) -> "ForecastEvent":
        """The "no event" result."""
        return cls(index=None, reason=EventReason.NONE)

    @property
    def found(self) -> bool:
        return self.reason is not EventReason.NONE and self.index is not None

    def __str__(self) -> str:
        if not self.found:
            return EventReason.NONE.value
        return f"{self.reason.value}@{self.index}"
