"""met.no Locationforecast repository implementation."""

import logging
from typing import Any, Dict, Optional

import requests

from ...domain.exceptions import ForecastFetchError
from ...domain.repositories.forecast_repository import ForecastRepository

logger = logging.getLogger(__name__)


class MetNoForecastRepository(ForecastRepository):
    """Repository for forecasts from the met.no Locationforecast 2.0 API."""

    def __init__(
        self,
        url: str,
        user_agent: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize repository.

        Args:
            url: Locationforecast endpoint ('complete' variant carries UV and probability)
            user_agent: Identifying User-Agent, required by met.no terms of service
            timeout: Request timeout in seconds
            session: Optional requests session to reuse connections
        """
        if not user_agent:
            raise ValueError("met.no requires an identifying User-Agent")
        self.url = url
        self.user_agent = user_agent
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_forecast(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Fetch the forecast payload for a location."""
        # met.no asks clients to truncate coordinates to 4 decimals
        params = {"lat": round(latitude, 4), "lon": round(longitude, 4)}
        headers = {"User-Agent": self.user_agent}

        logger.info(f"Fetching forecast from {self.url} for {params}")
        try:
            resp = self.session.get(
                self.url, params=params, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Forecast request failed: {e}")
            raise ForecastFetchError(f"Forecast request failed: {e}") from e

        if not resp.ok:
            logger.error(f"Forecast request failed: {resp.status_code} {resp.text[:200]}")
            raise ForecastFetchError(f"HTTP error! status: {resp.status_code}")

        try:
            return resp.json()
        except ValueError as e:
            logger.error(f"Forecast response is not JSON: {e}")
            raise ForecastFetchError(f"Forecast response is not JSON: {e}") from e
