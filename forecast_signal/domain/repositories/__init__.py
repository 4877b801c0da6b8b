"""Repository interfaces."""

from .forecast_repository import ForecastRepository

__all__ = [
    "ForecastRepository",
]
