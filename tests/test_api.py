"""Tests for the FastAPI application."""

import pytest
from fastapi.testclient import TestClient
from forecast_signal.application.services.display_cache import DisplayCache
from forecast_signal.application.services.forecast_signal_service import ForecastSignalService
from forecast_signal.domain.exceptions import ForecastFetchError
from forecast_signal.domain.repositories.forecast_repository import ForecastRepository
from forecast_signal.presentation.api import main as api_main


class FixedRepository(ForecastRepository):
    def __init__(self, payload):
        self.payload = payload

    def get_forecast(self, latitude, longitude):
        if isinstance(self.payload, Exception):
            raise self.payload
        return self.payload


@pytest.fixture
def client():
    return TestClient(api_main.app)


def _use_repository(monkeypatch, payload):
    service = ForecastSignalService(FixedRepository(payload), cache=DisplayCache())
    monkeypatch.setattr(api_main, "service", service)
    return service


def test_root_and_health(client):
    """Test informational endpoints."""
    assert client.get("/health").json() == {"status": "healthy"}
    assert "classify" in client.get("/").json()["endpoints"]


def test_classify(client, make_series):
    """Test classifying a posted time series."""
    series = make_series([{"temp": 11.0}, {"temp": 10.0}, {"temp": 15.0}, {"temp": 5.0}, {"temp": 12.0}])

    response = client.post("/classify", json={"timeseries": series})

    assert response.status_code == 200
    body = response.json()
    assert body["temp"] == 11
    assert body["icon"] == "clear_day.png"
    assert body["next"]["reason"] == "temp-max"
    assert body["next"]["time"] == "14"
    assert body["next"]["text"] == "14: ↑15°"
    assert body["next_text"] == "14: ↑15°"


def test_classify_malformed(client):
    """Test an empty series is rejected."""
    response = client.post("/classify", json={"timeseries": []})
    assert response.status_code == 422


def test_classify_non_finite_temperature(client, make_series):
    """Test a "nan" current temperature is rejected, not rendered."""
    series = make_series([{"temp": "nan"}, {"temp": 10.0}])

    response = client.post("/classify", json={"timeseries": series})

    assert response.status_code == 422


def test_weather(client, monkeypatch, make_payload):
    """Test the live endpoint with a stubbed provider."""
    _use_repository(monkeypatch, make_payload([{"temp": 32.0, "uvi": 8.5, "symbol": "clearsky_day"}, {"temp": 29.0}]))

    response = client.get("/weather", params={"lat": 59.9, "lon": 10.7})

    assert response.status_code == 200
    body = response.json()
    assert body["urgent"] is True
    assert body["formatted_temp"] == "!32°"
    assert body["next"]["reason"] == "temp-drop"
    assert body["next"]["arrow"] == "↘"
    assert body["updated_at"] is not None


def test_weather_unavailable(client, monkeypatch):
    """Test 503 when the provider fails and nothing is cached."""
    _use_repository(monkeypatch, ForecastFetchError("down"))
    response = client.get("/weather")
    assert response.status_code == 503


def test_weather_unavailable_for_other_location(client, monkeypatch, make_payload):
    """Test a cached display is only served back for its own location."""
    service = _use_repository(monkeypatch, make_payload([{"temp": 20.0}, {"temp": 21.0}]))
    assert client.get("/weather", params={"lat": 1.0, "lon": 1.0}).status_code == 200

    service.collect_uc.repository = FixedRepository(ForecastFetchError("down"))

    assert client.get("/weather", params={"lat": 1.0, "lon": 1.0}).status_code == 200
    assert client.get("/weather", params={"lat": 60.0, "lon": 10.0}).status_code == 503
