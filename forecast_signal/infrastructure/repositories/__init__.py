"""Concrete repository implementations."""

from .met_no_forecast_repository import MetNoForecastRepository
from .file_forecast_repository import FileForecastRepository

__all__ = [
    "MetNoForecastRepository",
    "FileForecastRepository",
]
