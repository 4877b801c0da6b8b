"""FastAPI main application."""

import logging
from datetime import datetime
from typing import Any, Dict, List, Optional
from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field
from ...application.services.display_cache import DisplayCache
from ...application.services.forecast_signal_service import (
    ForecastSignalService,
    resolve_timezone,
)
from ...domain.entities.display import WeatherDisplay
from ...domain.exceptions import MalformedInputError
from ...infrastructure.repositories.met_no_forecast_repository import MetNoForecastRepository
from ...config.settings import (
    API_SETTINGS,
    DEFAULT_LOCATION,
    DISPLAY_TIMEZONE,
    LOG_FORMAT,
    LOG_LEVEL,
    MET_NO_SETTINGS,
)

logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=API_SETTINGS["title"],
    description=API_SETTINGS["description"],
    version=API_SETTINGS["version"],
)

# Initialize repository and service
forecast_repo = MetNoForecastRepository(
    url=MET_NO_SETTINGS["url"],
    user_agent=MET_NO_SETTINGS["user_agent"],
    timeout=MET_NO_SETTINGS["timeout"],
)

service = ForecastSignalService(
    forecast_repo=forecast_repo,
    cache=DisplayCache(),
    tz=resolve_timezone(DISPLAY_TIMEZONE),
)


# Request/Response models
class ClassifyRequest(BaseModel):
    """Request model for classifying a provider time series."""

    timeseries: List[Dict[str, Any]] = Field(
        ..., description="Locationforecast properties.timeseries entries, first entry is now"
    )


class NextEventResponse(BaseModel):
    """Formatted next event."""

    reason: str
    arrow: str
    time: str
    body: str
    text: str
    html: str


class WeatherResponse(BaseModel):
    """Response model for a display record."""

    temp: int
    formatted_temp: str
    icon: str
    uvi: float
    urgent: bool
    next: Optional[NextEventResponse] = None
    next_text: str
    updated_at: Optional[datetime] = Field(
        None, description="When the display was last built from live data"
    )


def to_response(
    display: WeatherDisplay, updated_at: Optional[datetime] = None
) -> WeatherResponse:
    next_event = None
    if display.next_event is not None:
        payload = display.next_event
        next_event = NextEventResponse(
            reason=payload.reason.value,
            arrow=payload.arrow_glyph,
            time=payload.time_label,
            body=payload.body,
            text=payload.to_text(),
            html=payload.to_html(),
        )
    return WeatherResponse(
        temp=display.now_temp,
        formatted_temp=display.formatted_now_temp,
        icon=display.icon_filename,
        uvi=display.uvi,
        urgent=display.urgent,
        next=next_event,
        next_text=display.next_text,
        updated_at=updated_at,
    )


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Forecast Signal API",
        "version": API_SETTINGS["version"],
        "endpoints": {
            "weather": "/weather",
            "classify": "/classify",
            "health": "/health",
        },
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/weather", response_model=WeatherResponse)
def weather(
    lat: Optional[float] = Query(None, ge=-90, le=90),
    lon: Optional[float] = Query(None, ge=-180, le=180),
) -> WeatherResponse:
    """
    Fetch the live forecast and return the display record.

    Falls back to the last successful display for the same location when
    the provider fails; `updated_at` tells how old it is.
    """
    if lat is None or lon is None:
        lat, lon = DEFAULT_LOCATION["latitude"], DEFAULT_LOCATION["longitude"]

    display = service.refresh(lat, lon)
    if display is None:
        raise HTTPException(status_code=503, detail="Forecast unavailable")
    return to_response(display, service.cache.updated_at)


@app.post("/classify", response_model=WeatherResponse)
def classify(request: ClassifyRequest) -> WeatherResponse:
    """
    Classify a time series supplied by the caller.

    Args:
        request: Raw time series entries

    Returns:
        Display record for the series
    """
    try:
        display = service.classify(request.timeseries)
    except MalformedInputError as e:
        logger.error(f"Classification error: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    return to_response(display)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
