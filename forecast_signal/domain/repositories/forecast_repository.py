"""Forecast repository interface."""

from abc import ABC, abstractmethod
from typing import Any, Dict


class ForecastRepository(ABC):
    """Abstract repository for raw forecast payloads."""

    @abstractmethod
    def get_forecast(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """
        Retrieve the raw provider payload for a location.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees

        Returns:
            Parsed JSON payload as returned by the provider
        """
        pass
