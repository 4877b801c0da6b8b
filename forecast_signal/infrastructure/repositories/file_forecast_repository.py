"""File-based forecast repository implementation."""

import json
import logging
from pathlib import Path
from typing import Any, Dict

from ...domain.exceptions import ForecastFetchError, MalformedInputError
from ...domain.repositories.forecast_repository import ForecastRepository

logger = logging.getLogger(__name__)


class FileForecastRepository(ForecastRepository):
    """Repository serving a saved provider payload from a JSON file."""

    def __init__(self, data_file: str):
        """
        Initialize repository.

        Args:
            data_file: Path to a saved Locationforecast JSON payload
        """
        self.data_file = Path(data_file)

    def get_forecast(self, latitude: float, longitude: float) -> Dict[str, Any]:
        """Load the saved payload; the location is ignored."""
        logger.info(f"Loading forecast payload from {self.data_file}")
        try:
            with open(self.data_file, "r", encoding="utf-8") as f:
                return json.load(f)
        except json.JSONDecodeError as e:
            raise MalformedInputError(f"Forecast file is not valid JSON: {e}") from e
        except OSError as e:
            logger.error(f"Cannot read forecast file {self.data_file}: {e}")
            raise ForecastFetchError(f"Cannot read forecast file {self.data_file}: {e}") from e

    def save_forecast(self, payload: Dict[str, Any]) -> None:
        """Save a payload so it can be replayed later."""
        self.data_file.parent.mkdir(parents=True, exist_ok=True)
        logger.info(f"Saving forecast payload to {self.data_file}")
        with open(self.data_file, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)
