"""Application services."""

from .display_cache import DisplayCache
from .forecast_signal_service import ForecastSignalService, resolve_timezone

__all__ = [
    "DisplayCache",
    "ForecastSignalService",
    "resolve_timezone",
]
