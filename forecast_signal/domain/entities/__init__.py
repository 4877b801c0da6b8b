"""Domain entities."""

from .symbol_code import DayPhase, PrecipType, SymbolCode
from .sample import Sample
from .forecast_event import EventReason, ForecastEvent
from .display import NextEventPayload, WeatherDisplay

__all__ = [
    "DayPhase",
    "PrecipType",
    "SymbolCode",
    "Sample",
    "EventReason",
    "ForecastEvent",
    "NextEventPayload",
    "WeatherDisplay",
]
