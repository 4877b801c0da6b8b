"""Use case for turning a selected event into display text and icons."""

import logging
from datetime import datetime
from typing import Optional

from ..entities.display import NextEventPayload
from ..entities.forecast_event import EventReason, ForecastEvent
from ..entities.sample import Sample
from ..entities.symbol_code import PrecipType
from .select_event import (
    PRECIP_HEAVY,
    PRECIP_LIKELY_PROB,
    PRECIP_MODERATE,
    PRECIP_TRACE,
    round_half_up,
)

logger = logging.getLogger(__name__)

ARROWS = {
    EventReason.TEMP_MAX: "↑",
    EventReason.TEMP_MIN: "↓",
    EventReason.RAIN_STRONGER: "↗",
    EventReason.RAIN_WEAKER: "↘",
    EventReason.TEMP_DROP: "↘",
}

DEFAULT_ICON = "clear_day"


def _precip_level(precip: float) -> str:
    if precip < PRECIP_MODERATE:
        return "low"
    if precip <= PRECIP_HEAVY:
        return "mid"
    return "high"


def _cloud_level(clouds: float) -> str:
    if clouds < 10:
        return "clear"
    if clouds < 35:
        return "low"
    if clouds < 60:
        return "mid"
    if clouds < 85:
        return "high"
    return "full"


def determine_icon(sample: Optional[Sample]) -> str:
    """
    Pick the icon stem for a sample.

    Wet samples are named by precipitation type and intensity (rain also by
    probability); dry samples by cloud cover and day/night.

    Returns:
        Icon stem such as 'rain_mid_likely', 'snow_low', 'clouds_mid_night'
    """
    if sample is None:
        return DEFAULT_ICON

    if sample.precip >= PRECIP_TRACE:
        level = _precip_level(sample.precip)
        precip_type = sample.precip_type
        if precip_type is PrecipType.RAIN:
            chance = "likely" if sample.precip_prob >= PRECIP_LIKELY_PROB else "unlikely"
            return f"rain_{level}_{chance}"
        return f"{precip_type.value}_{level}"

    suffix = "day" if sample.is_day else "night"
    clouds = _cloud_level(sample.clouds)
    if clouds == "clear":
        return f"clear_{suffix}"
    if clouds == "full":
        return "clouds_full"
    return f"clouds_{clouds}_{suffix}"


def format_time_label(time: datetime) -> str:
    """Hour of the event rounded to the nearest hour, zero-padded."""
    hour = time.hour
    if time.minute > 30:
        hour = (hour + 1) % 24
    return f"{hour:02d}"


class PresentEventUseCase:
    """Use case to format a selected event for the display."""

    def execute(self, event: ForecastEvent, sample: Sample) -> NextEventPayload:
        """
        Execute formatting.

        Args:
            event: Selected event
            sample: The forecast sample the event points at

        Returns:
            NextEventPayload with arrow glyph, hour label and body
        """
        glyph = ARROWS.get(event.reason, "")

        if event.reason.is_rain:
            body = determine_icon(sample)
        else:
            temp = sample.temp if sample.temp is not None else 0.0
            body = f"{round_half_up(temp)}°"

        return NextEventPayload(
            arrow_glyph=glyph,
            time_label=format_time_label(sample.time),
            body=body,
            reason=event.reason,
        )
