"""Main service orchestrating the forecast signal pipeline."""

import logging
from datetime import datetime, timezone, tzinfo
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

import pandas as pd

from ...domain.entities.display import WeatherDisplay
from ...domain.entities.forecast_event import ForecastEvent
from ...domain.entities.sample import Sample
from ...domain.exceptions import ForecastFetchError, MalformedInputError
from ...domain.repositories.forecast_repository import ForecastRepository

# Use cases
from ...domain.use_cases.collect_forecast import CollectForecastUseCase
from ...domain.use_cases.normalize_timeseries import NormalizeTimeseriesUseCase
from ...domain.use_cases.present_event import PresentEventUseCase, determine_icon
from ...domain.use_cases.select_event import (
    SelectEventUseCase,
    precipitation_intensity_index,
    round_half_up,
)
from .display_cache import DisplayCache

logger = logging.getLogger(__name__)


class ForecastSignalService:
    """Orchestrates fetch -> normalize -> select -> present."""

    def __init__(
        self,
        forecast_repo: ForecastRepository,
        cache: Optional[DisplayCache] = None,
        tz: Optional[tzinfo] = None,
    ):
        self.forecast_repo = forecast_repo
        self.cache = cache if cache is not None else DisplayCache()

        self.collect_uc = CollectForecastUseCase(forecast_repo)
        self.normalize_uc = NormalizeTimeseriesUseCase(tz=tz)
        self.select_uc = SelectEventUseCase()
        self.present_uc = PresentEventUseCase()

    def analyze(
        self, timeseries: List[Dict[str, Any]]
    ) -> Tuple[Sample, List[Sample], ForecastEvent]:
        """Normalize a raw time series and select its next event."""
        current, forecast = self.normalize_uc.execute(timeseries)
        event = self.select_uc.execute(current, forecast)
        logger.info(f"Next event: {event}")
        return current, forecast, event

    def classify(self, timeseries: List[Dict[str, Any]]) -> WeatherDisplay:
        """
        Build the display for a raw time series without touching the cache.

        Raises:
            MalformedInputError: if the time series cannot be used
        """
        current, forecast, event = self.analyze(timeseries)

        next_event = None
        if event.found and 0 <= event.index < len(forecast):
            next_event = self.present_uc.execute(event, forecast[event.index])

        return WeatherDisplay(
            now_temp=round_half_up(current.temp),
            now_icon=determine_icon(current),
            uvi=current.uvi,
            next_event=next_event,
        )

    def refresh(
        self, latitude: Optional[float] = None, longitude: Optional[float] = None
    ) -> Optional[WeatherDisplay]:
        """
        Fetch and classify the latest forecast.

        On failure the cache is left alone and the previous display is
        returned if it was built for the same location, so the caller skips
        the update instead of showing garbage.

        Returns:
            The new display, the previous one for this location on failure, or None
        """
        if latitude is None or longitude is None:
            logger.warning("No location supplied, using fallback coordinates (0,0)")
            latitude, longitude = 0.0, 0.0

        try:
            timeseries = self.collect_uc.execute(latitude, longitude)
            display = self.classify(timeseries)
        except (ForecastFetchError, MalformedInputError) as e:
            previous = self.cache.lookup(latitude, longitude)
            if previous is None:
                logger.error(f"Forecast refresh failed, no display for this location: {e}")
            else:
                logger.error(f"Forecast refresh failed, keeping display from {self.cache.updated_at}: {e}")
            return previous

        self.cache.store(display, datetime.now(timezone.utc), latitude, longitude)
        return display

    def forecast_frame(self, timeseries: List[Dict[str, Any]]) -> pd.DataFrame:
        """Tabulate the normalized forecast, flagging the selected event row."""
        current, forecast, event = self.analyze(timeseries)

        records = []
        for i, sample in enumerate([current] + forecast):
            row = sample.to_dict()
            row["step"] = "now" if i == 0 else str(i - 1)
            row["intensity_index"] = precipitation_intensity_index(
                sample.precip, sample.precip_prob
            )
            row["icon"] = determine_icon(sample)
            row["event"] = (
                event.reason.value if i > 0 and event.index == i - 1 else ""
            )
            records.append(row)

        df = pd.DataFrame(records)
        columns = ["step"] + [c for c in df.columns if c != "step"]
        return df[columns]

    def export_forecast(self, timeseries: List[Dict[str, Any]], path: Path) -> Path:
        """Write the forecast table to CSV."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        df = self.forecast_frame(timeseries)
        df.to_csv(path, index=False)
        logger.info(f"Exported {len(df)} rows to {path}")
        return path


def resolve_timezone(name: Optional[str]) -> Optional[tzinfo]:
    """Look up an IANA timezone name; empty means system local time."""
    if not name:
        return None
    from zoneinfo import ZoneInfo

    return ZoneInfo(name)
