"""Use cases - core business operations."""

from .collect_forecast import CollectForecastUseCase
from .normalize_timeseries import NormalizeTimeseriesUseCase
from .select_event import SelectEventUseCase
from .present_event import PresentEventUseCase

__all__ = [
    "CollectForecastUseCase",
    "NormalizeTimeseriesUseCase",
    "SelectEventUseCase",
    "PresentEventUseCase",
]
