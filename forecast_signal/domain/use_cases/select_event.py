"""Use case for selecting the next notable change in a forecast."""

import logging
import math
from typing import List, Optional, Sequence, Tuple

from ..entities.forecast_event import EventReason, ForecastEvent
from ..entities.sample import Sample

logger = logging.getLogger(__name__)

HOT_TEMP = 31.0  # heat relief only considered from this temperature up
RELIEF_TEMP = 30.0
RAIN_CHANGE_RATIO = 2.0
TEMP_CHANGE_DEGREES = 3

# Precipitation breakpoints in mm, shared with the icon rule
PRECIP_TRACE = 0.25
PRECIP_MODERATE = 2.5
PRECIP_HEAVY = 7.5
PRECIP_LIKELY_PROB = 50.0


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves upwards (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def precipitation_intensity_index(
    precip: Optional[float], prob: Optional[float]
) -> int:
    """
    Ordinal precipitation severity used for relative comparison.

    Args:
        precip: Precipitation amount in mm
        prob: Probability of precipitation in percent

    Returns:
        Index between 1 (trace or none) and 5 (heavy and likely)
    """
    precip = precip or 0.0
    likely = (prob or 0.0) > PRECIP_LIKELY_PROB

    if precip < PRECIP_TRACE:
        return 1
    if precip < PRECIP_MODERATE:
        return 3 if likely else 2
    if precip <= PRECIP_HEAVY:
        return 4 if likely else 3
    return 5 if likely else 4


def change_index(index_a: int, index_b: int) -> float:
    """Ratio between two intensity indices, always >= 1."""
    # Intensity indices start at 1; the zero guard only matters if that changes.
    if index_a == 0 or index_b == 0:
        return 1.0
    return max(index_a, index_b) / min(index_a, index_b)


class SelectEventUseCase:
    """Use case to find the single most significant upcoming change."""

    def _heat_relief(self, current: Sample, forecast: Sequence[Sample]) -> Optional[ForecastEvent]:
        if current.temp is None or current.temp < HOT_TEMP:
            return None
        for i, sample in enumerate(forecast):
            if sample.temp is not None and sample.temp <= RELIEF_TEMP:
                return ForecastEvent(index=i, reason=EventReason.TEMP_DROP)
        return None

    def _rain_change(self, current: Sample, forecast: Sequence[Sample]) -> Optional[ForecastEvent]:
        current_index = precipitation_intensity_index(current.precip, current.precip_prob)
        for i, sample in enumerate(forecast):
            sample_index = precipitation_intensity_index(sample.precip, sample.precip_prob)
            if change_index(current_index, sample_index) >= RAIN_CHANGE_RATIO:
                reason = (
                    EventReason.RAIN_STRONGER
                    if sample_index > current_index
                    else EventReason.RAIN_WEAKER
                )
                return ForecastEvent(index=i, reason=reason)
        return None

    def _temp_extremum(self, current: Sample, forecast: Sequence[Sample]) -> Optional[ForecastEvent]:
        if current.temp is None:
            return None
        temps: List[Tuple[int, float]] = [
            (i, sample.temp) for i, sample in enumerate(forecast) if sample.temp is not None
        ]
        if not temps:
            return None

        # min/max keep the first of equal values, so ties go to the earliest index
        min_index, min_temp = min(temps, key=lambda t: t[1])
        max_index, max_temp = max(temps, key=lambda t: t[1])
        now = round_half_up(current.temp)
        min_diff = abs(round_half_up(min_temp) - now)
        max_diff = abs(round_half_up(max_temp) - now)

        if min_index < max_index:
            if min_diff >= TEMP_CHANGE_DEGREES:
                return ForecastEvent(index=min_index, reason=EventReason.TEMP_MIN)
        elif max_diff >= TEMP_CHANGE_DEGREES:
            return ForecastEvent(index=max_index, reason=EventReason.TEMP_MAX)

        if min_diff > max_diff:
            return ForecastEvent(index=min_index, reason=EventReason.TEMP_MIN)
        return ForecastEvent(index=max_index, reason=EventReason.TEMP_MAX)

    def execute(self, current: Optional[Sample], forecast: Sequence[Sample]) -> ForecastEvent:
        """
        Execute event selection.

        Rules are tried in order and the first match wins: heat relief,
        precipitation intensity change, temperature extremum.

        Args:
            current: The "now" sample
            forecast: Forecast samples ordered by time

        Returns:
            ForecastEvent, with reason NONE when nothing notable was found
        """
        if current is None or not forecast:
            return ForecastEvent.none()

        for rule in (self._heat_relief, self._rain_change, self._temp_extremum):
            event = rule(current, forecast)
            if event is not None:
                logger.debug(f"Selected event {event} via {rule.__name__}")
                return event

        return ForecastEvent.none()
