"""
Pytest configuration and shared fixtures for forecast signal tests.
"""

from datetime import datetime, timedelta

import pytest

from forecast_signal.domain.entities.sample import Sample

START = datetime(2024, 6, 1, 12, 0)


def build_entry(time, temp=15.0, clouds=0.0, precip=None, prob=None, uvi=None, symbol=None):
    """Build one Locationforecast time series entry."""
    entry = {
        "time": time.isoformat() if isinstance(time, datetime) else time,
        "data": {
            "instant": {
                "details": {
                    "air_temperature": temp,
                    "cloud_area_fraction": clouds,
                }
            }
        },
    }
    if symbol is not None or precip is not None or prob is not None or uvi is not None:
        details = {}
        if precip is not None:
            details["precipitation_amount"] = precip
        if prob is not None:
            details["probability_of_precipitation"] = prob
        if uvi is not None:
            details["ultraviolet_index_clear_sky_max"] = uvi
        entry["data"]["next_1_hours"] = {
            "summary": {"symbol_code": symbol or "cloudy"},
            "details": details,
        }
    return entry


@pytest.fixture
def make_entry():
    """Factory for raw time series entries."""
    return build_entry


@pytest.fixture
def make_series():
    """Factory for an hourly time series from a list of entry keyword dicts."""

    def _make(rows, start=START):
        return [
            build_entry(start + timedelta(hours=i), **row) for i, row in enumerate(rows)
        ]

    return _make


@pytest.fixture
def make_sample():
    """Factory for samples taken `hours` after the series start."""

    def _make(temp=15.0, hours=0, **kwargs):
        return Sample(time=START + timedelta(hours=hours), temp=temp, **kwargs)

    return _make


@pytest.fixture
def make_payload(make_series):
    """Factory for a full Locationforecast payload."""

    def _make(rows, start=START):
        return {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [10.75, 59.91, 10]},
            "properties": {"meta": {"units": {}}, "timeseries": make_series(rows, start)},
        }

    return _make
