"""Forecast signal: pick the next notable weather change for a wall clock display."""

__version__ = "1.0.0"
