"""Tests for forecast repositories."""

import json
import pytest
import requests
from unittest.mock import MagicMock
from forecast_signal.domain.exceptions import ForecastFetchError, MalformedInputError
from forecast_signal.infrastructure.repositories.file_forecast_repository import FileForecastRepository
from forecast_signal.infrastructure.repositories.met_no_forecast_repository import MetNoForecastRepository

URL = "https://api.met.no/weatherapi/locationforecast/2.0/complete"


def _repo(response=None, error=None):
    session = MagicMock()
    if error is not None:
        session.get.side_effect = error
    else:
        session.get.return_value = response
    return MetNoForecastRepository(URL, "forecast-signal-tests/1.0", timeout=5, session=session), session


def test_met_no_success(make_payload):
    """Test a successful fetch sends coordinates and User-Agent."""
    payload = make_payload([{"temp": 1.0}])
    response = MagicMock(status_code=200, ok=True)
    response.json.return_value = payload
    repo, session = _repo(response)

    assert repo.get_forecast(59.913868, 10.752238) == payload

    session.get.assert_called_once_with(
        URL,
        params={"lat": 59.9139, "lon": 10.7522},
        headers={"User-Agent": "forecast-signal-tests/1.0"},
        timeout=5,
    )


def test_met_no_http_error():
    """Test error statuses raise ForecastFetchError."""
    repo, _ = _repo(MagicMock(status_code=403, ok=False, text="Forbidden"))
    with pytest.raises(ForecastFetchError, match="403"):
        repo.get_forecast(0.0, 0.0)


def test_met_no_accepts_any_success_status(make_payload):
    """Test a 2xx status other than 200 still returns the payload."""
    payload = make_payload([{"temp": 1.0}])
    response = MagicMock(status_code=203, ok=True)
    response.json.return_value = payload
    repo, _ = _repo(response)

    assert repo.get_forecast(0.0, 0.0) == payload


def test_met_no_transport_error():
    """Test connection failures raise ForecastFetchError."""
    repo, _ = _repo(error=requests.ConnectionError("no route"))
    with pytest.raises(ForecastFetchError):
        repo.get_forecast(0.0, 0.0)


def test_met_no_invalid_json():
    """Test an unparseable body raises ForecastFetchError."""
    response = MagicMock(status_code=200, ok=True)
    response.json.side_effect = ValueError("Expecting value")
    repo, _ = _repo(response)
    with pytest.raises(ForecastFetchError):
        repo.get_forecast(0.0, 0.0)


def test_met_no_requires_user_agent():
    """Test an empty User-Agent is rejected."""
    with pytest.raises(ValueError):
        MetNoForecastRepository(URL, "")


def test_file_repository_round_trip(tmp_path, make_payload):
    """Test saving and replaying a payload."""
    payload = make_payload([{"temp": 3.0}, {"temp": 4.0}])
    repo = FileForecastRepository(str(tmp_path / "saved" / "oslo.json"))

    repo.save_forecast(payload)

    assert repo.get_forecast(0.0, 0.0) == payload


def test_file_repository_missing_file(tmp_path):
    """Test a missing file is a fetch failure."""
    repo = FileForecastRepository(str(tmp_path / "missing.json"))
    with pytest.raises(ForecastFetchError, match="missing.json"):
        repo.get_forecast(0.0, 0.0)


def test_file_repository_invalid_json(tmp_path):
    """Test invalid JSON is malformed input."""
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(MalformedInputError):
        FileForecastRepository(str(path)).get_forecast(0.0, 0.0)


def test_file_repository_unreadable_path(tmp_path):
    """Test a directory in place of the file is a fetch failure."""
    with pytest.raises(ForecastFetchError):
        FileForecastRepository(str(tmp_path)).get_forecast(0.0, 0.0)
