"""Use case for normalizing a provider time series into samples."""

import logging
import math
from datetime import datetime, tzinfo
from typing import Any, Dict, List, Optional, Tuple

from ..entities.sample import Sample
from ..entities.symbol_code import SymbolCode
from ..exceptions import MalformedInputError

logger = logging.getLogger(__name__)

DECIMALS = 2


def extract_timeseries(payload: Optional[Dict[str, Any]]) -> List[Dict[str, Any]]:
    """
    Pull the time series list out of a Locationforecast payload.

    Raises:
        MalformedInputError: if the payload carries no time series
    """
    try:
        timeseries = payload["properties"]["timeseries"]
    except (KeyError, TypeError) as e:
        raise MalformedInputError(f"Payload has no properties.timeseries: {e}") from e
    if not isinstance(timeseries, list):
        raise MalformedInputError("properties.timeseries is not a list")
    return timeseries


def _round(value: Any) -> Optional[float]:
    if value is None:
        return None
    try:
        number = float(value)
    except (TypeError, ValueError):
        return None
    # "nan" and "inf" parse as floats but carry no reading
    if not math.isfinite(number):
        return None
    return round(number, DECIMALS)


def _block(parent: Dict[str, Any], key: str) -> Dict[str, Any]:
    value = parent.get(key)
    return value if isinstance(value, dict) else {}


def _parse_time(value: Any, tz: Optional[tzinfo]) -> datetime:
    if not isinstance(value, str):
        raise ValueError(f"timestamp is not a string: {value!r}")
    dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if dt.tzinfo is not None:
        dt = dt.astimezone(tz)
    return dt


class NormalizeTimeseriesUseCase:
    """Use case to turn raw time series entries into a current sample and a forecast."""

    def __init__(self, tz: Optional[tzinfo] = None):
        """
        Initialize use case.

        Args:
            tz: Display timezone. Aware timestamps are converted to it; when None
                they are converted to the system's local time. Naive timestamps
                are taken as already local.
        """
        self.tz = tz

    def _parse_sample(self, entry: Dict[str, Any], time: datetime) -> Sample:
        data = _block(entry, "data")
        details = _block(_block(data, "instant"), "details")

        temp = _round(details.get("air_temperature"))
        clouds = _round(details.get("cloud_area_fraction"))

        next_hour = _block(data, "next_1_hours")
        if not next_hour:
            logger.debug(f"No next_1_hours block at {time.isoformat()}, using dry defaults")
            return Sample(time=time, temp=temp, clouds=clouds or 0.0)

        hour_details = _block(next_hour, "details")
        symbol = SymbolCode.parse(_block(next_hour, "summary").get("symbol_code"))

        return Sample(
            time=time,
            temp=temp,
            clouds=clouds or 0.0,
            precip=_round(hour_details.get("precipitation_amount")) or 0.0,
            precip_prob=_round(hour_details.get("probability_of_precipitation")) or 0.0,
            snow_fraction=symbol.precip_type.snow_fraction,
            is_day=symbol.is_day_at(time.hour),
            uvi=_round(hour_details.get("ultraviolet_index_clear_sky_max")) or 0.0,
        )

    def _parse_current(self, entry: Any) -> Sample:
        if not isinstance(entry, dict):
            raise MalformedInputError(f"Current entry is not an object: {entry!r}")
        try:
            time = _parse_time(entry.get("time"), self.tz)
        except ValueError as e:
            raise MalformedInputError(f"Current entry has a bad timestamp: {e}") from e

        current = self._parse_sample(entry, time)
        if current.temp is None:
            raise MalformedInputError("Current entry has no air temperature")
        return current

    def execute(
        self, timeseries: Optional[List[Dict[str, Any]]]
    ) -> Tuple[Sample, List[Sample]]:
        """
        Execute normalization.

        Args:
            timeseries: Provider entries; the first is "now", the rest the forecast

        Returns:
            Tuple of (current, forecast)

        Raises:
            MalformedInputError: if the series is absent or its first entry is unusable
        """
        if not timeseries:
            raise MalformedInputError("Time series is missing or empty")

        current = self._parse_current(timeseries[0])

        forecast: List[Sample] = []
        previous = current.time
        for position, entry in enumerate(timeseries[1:], start=1):
            if not isinstance(entry, dict):
                logger.warning(f"Skipping forecast entry {position}: not an object")
                continue
            try:
                time = _parse_time(entry.get("time"), self.tz)
            except (TypeError, ValueError) as e:
                logger.warning(f"Skipping forecast entry {position}: {e}")
                continue
            try:
                out_of_order = time <= previous
            except TypeError:
                # naive and aware timestamps mixed in one series
                out_of_order = True
            if out_of_order:
                logger.warning(
                    f"Skipping forecast entry {position}: {time.isoformat()} "
                    f"does not follow {previous.isoformat()}"
                )
                continue

            sample = self._parse_sample(entry, time)
            if sample.temp is None:
                logger.warning(f"Forecast entry {position} has no air temperature")
            forecast.append(sample)
            previous = time

        logger.info(f"Normalized time series: 1 current sample, {len(forecast)} forecast samples")
        return current, forecast
