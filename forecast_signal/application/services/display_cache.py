"""Cache of the last successfully built display."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Tuple

from ...domain.entities.display import WeatherDisplay

# Coordinates are compared at the precision sent to the provider
LOCATION_DECIMALS = 4


def location_key(latitude: float, longitude: float) -> Tuple[float, float]:
    return (round(latitude, LOCATION_DECIMALS), round(longitude, LOCATION_DECIMALS))


@dataclass
class DisplayCache:
    """Holds the last display that was built without errors, and where for.

    Owned by the caller and handed to the service, so separate displays
    never share state.
    """

    last_display: Optional[WeatherDisplay] = None
    updated_at: Optional[datetime] = None
    location: Optional[Tuple[float, float]] = None

    def store(
        self, display: WeatherDisplay, when: datetime, latitude: float, longitude: float
    ) -> None:
        self.last_display = display
        self.updated_at = when
        self.location = location_key(latitude, longitude)

    @property
    def empty(self) -> bool:
        return self.last_display is None

    def lookup(self, latitude: float, longitude: float) -> Optional[WeatherDisplay]:
        """The cached display, only if it was built for this location."""
        if self.empty or self.location != location_key(latitude, longitude):
            return None
        return self.last_display
