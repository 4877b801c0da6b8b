"""Display entities handed to the rendering page."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .forecast_event import EventReason

NO_EVENT_PLACEHOLDER = "--"
UV_URGENT_THRESHOLD = 8.0


@dataclass(frozen=True)
class NextEventPayload:
    """Formatted "next event": arrow glyph, hour label and icon or temperature."""

    arrow_glyph: str
    time_label: str  # zero-padded hour, e.g. '07'
    body: str  # icon stem for rain reasons, otherwise e.g. '15°'
    reason: EventReason

    @property
    def body_is_icon(self) -> bool:
        return self.reason.is_rain

    def to_text(self) -> str:
        """Plain text rendering, e.g. '14: ↑21°'."""
        return f"{self.time_label}: {self.arrow_glyph}{self.body}"

    def to_html(self, icon_dir: str = "icons") -> str:
        """HTML fragment used by the clock page."""
        arrow_classes = "arrow-symbol"
        if self.reason.is_rain:
            arrow_classes += " rain-change-symbol"
        arrow_html = f'<span class="{arrow_classes}">{self.arrow_glyph}</span>'

        if self.body_is_icon:
            condition_html = (
                f'{arrow_html}<img src="{icon_dir}/{self.body}.png" '
                f'class="weather-icon" style="display: inline;">'
            )
        else:
            condition_html = f"{arrow_html}{self.body}"

        time_html = f'<span style="color: var(--accent-color);">{self.time_label}:</span>'
        return f"{time_html}&#8201;{condition_html}"


@dataclass(frozen=True)
class WeatherDisplay:
    """Everything the display shows: the "now" snapshot and the next event."""

    now_temp: int
    now_icon: str  # icon stem, without extension
    uvi: float = 0.0
    next_event: Optional[NextEventPayload] = None

    @property
    def urgent(self) -> bool:
        """High UV warning."""
        return self.uvi >= UV_URGENT_THRESHOLD

    @property
    def icon_filename(self) -> str:
        return f"{self.now_icon}.png"

    @property
    def formatted_now_temp(self) -> str:
        text = f"{self.now_temp}°"
        if self.urgent:
            text = f"!{text}"
        return text

    @property
    def next_text(self) -> str:
        if self.next_event is None:
            return NO_EVENT_PLACEHOLDER
        return self.next_event.to_text()

    def to_dict(self) -> Dict[str, Any]:
        """Shape written to weatherData.json."""
        return {
            "now": {
                "temp": self.now_temp,
                "icon": self.icon_filename,
                "uvi": self.uvi,
            },
            "next": (
                self.next_event.to_html()
                if self.next_event is not None
                else NO_EVENT_PLACEHOLDER
            ),
        }
