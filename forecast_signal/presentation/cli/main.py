"""CLI interface for the forecast signal."""

import argparse
import json
import logging
import sys
from pathlib import Path

from ...application.services.display_cache import DisplayCache
from ...application.services.forecast_signal_service import (
    ForecastSignalService,
    resolve_timezone,
)
from ...domain.exceptions import ForecastFetchError, MalformedInputError
from ...domain.use_cases.normalize_timeseries import extract_timeseries
from ...infrastructure.repositories.file_forecast_repository import FileForecastRepository
from ...infrastructure.repositories.met_no_forecast_repository import MetNoForecastRepository

from ...config.settings import (
    DEFAULT_LOCATION,
    DISPLAY_TIMEZONE,
    EXPORT_DIR,
    LOG_FORMAT,
    LOG_LEVEL,
    MET_NO_SETTINGS,
    OUTPUT_FILE,
)

logger = logging.getLogger(__name__)


def build_repository(args):
    """Saved payload when --file is given, otherwise the live met.no API."""
    if getattr(args, "file", None):
        return FileForecastRepository(args.file)
    return MetNoForecastRepository(
        url=MET_NO_SETTINGS["url"],
        user_agent=MET_NO_SETTINGS["user_agent"],
        timeout=MET_NO_SETTINGS["timeout"],
    )


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--lat", type=float, default=DEFAULT_LOCATION["latitude"], help="Latitude")
    parser.add_argument("--lon", type=float, default=DEFAULT_LOCATION["longitude"], help="Longitude")
    parser.add_argument("--file", type=str, default=None, help="Saved Locationforecast JSON payload")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Next notable weather change")
    parser.add_argument(
        "--tz", type=str, default=DISPLAY_TIMEZONE, help="IANA timezone for displayed hours"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    # === show: print now + next ===
    show_parser = subparsers.add_parser("show", help="Print the current reading and the next event")
    _add_source_arguments(show_parser)

    # === write: produce weatherData.json for the clock page ===
    write_parser = subparsers.add_parser("write", help="Write the display record as JSON")
    _add_source_arguments(write_parser)
    write_parser.add_argument("--output", type=str, default=str(OUTPUT_FILE), help="Output JSON file")

    # === snapshot: save the raw provider payload ===
    snapshot_parser = subparsers.add_parser("snapshot", help="Save the raw met.no payload for replay")
    snapshot_parser.add_argument("--lat", type=float, default=DEFAULT_LOCATION["latitude"])
    snapshot_parser.add_argument("--lon", type=float, default=DEFAULT_LOCATION["longitude"])
    snapshot_parser.add_argument("--output", type=str, required=True, help="Where to save the payload")

    # === export: normalized forecast table ===
    export_parser = subparsers.add_parser("export", help="Export the normalized forecast as CSV")
    _add_source_arguments(export_parser)
    export_parser.add_argument(
        "--csv", type=str, default=str(EXPORT_DIR / "forecast.csv"), help="Output CSV file"
    )

    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=LOG_LEVEL,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )

    # === Command: snapshot ===
    if args.command == "snapshot":
        try:
            payload = build_repository(args).get_forecast(args.lat, args.lon)
            FileForecastRepository(args.output).save_forecast(payload)
        except ForecastFetchError as e:
            logger.error(f"Snapshot failed: {e}")
            return 1
        print(f"Saved payload to {args.output}")
        return 0

    try:
        service = ForecastSignalService(
            forecast_repo=build_repository(args),
            cache=DisplayCache(),
            tz=resolve_timezone(args.tz),
        )
    except Exception as e:
        logger.error(f"Failed to initialize service: {e}")
        return 1

    # === Command: export ===
    if args.command == "export":
        try:
            payload = service.forecast_repo.get_forecast(args.lat, args.lon)
            path = service.export_forecast(extract_timeseries(payload), Path(args.csv))
        except (ForecastFetchError, MalformedInputError) as e:
            logger.error(f"Export failed: {e}", exc_info=True)
            return 1
        print(f"Forecast table written to {path}")
        return 0

    display = service.refresh(args.lat, args.lon)
    if display is None:
        # Nothing usable: leave any existing output untouched
        logger.error("No forecast available, display not updated")
        return 1

    # === Command: show ===
    if args.command == "show":
        print("=" * 30)
        print(f" Now:  {display.formatted_now_temp}  {display.now_icon}")
        print(f" Next: {display.next_text}")
        print("=" * 30)

    # === Command: write ===
    elif args.command == "write":
        output = Path(args.output)
        output.parent.mkdir(parents=True, exist_ok=True)
        with open(output, "w", encoding="utf-8") as f:
            json.dump(display.to_dict(), f, ensure_ascii=False, indent=2)
        logger.info(f"Display record written to {output}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
