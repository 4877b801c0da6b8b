"""Use case for collecting a raw forecast payload."""

import logging
from typing import Any, Dict, List

from ..repositories.forecast_repository import ForecastRepository
from .normalize_timeseries import extract_timeseries

logger = logging.getLogger(__name__)


class CollectForecastUseCase:
    """Use case to collect the provider time series from a repository."""

    def __init__(self, repository: ForecastRepository):
        """
        Initialize use case.

        Args:
            repository: Repository for forecast payload access
        """
        self.repository = repository

    def execute(self, latitude: float, longitude: float) -> List[Dict[str, Any]]:
        """
        Execute the use case.

        Args:
            latitude: Latitude in decimal degrees
            longitude: Longitude in decimal degrees

        Returns:
            Raw time series entries, first entry being "now"
        """
        logger.info(f"Collecting forecast: lat={latitude}, lon={longitude}")
        payload = self.repository.get_forecast(latitude, longitude)
        timeseries = extract_timeseries(payload)
        logger.info(f"Collected {len(timeseries)} time series entries")
        return timeseries
