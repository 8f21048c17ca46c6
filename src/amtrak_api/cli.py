"""Command line interface for querying the Amtraker API."""

import argparse
import asyncio
import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from pydantic import ValidationError

from amtrak_api.client import Client
from amtrak_api.domain.errors import AmtrakApiError
from amtrak_api.domain.models import (
    Station,
    StationResponse,
    Train,
    TrainResponse,
    TrainStation,
    TrainStatus,
)

logger = logging.getLogger(__name__)

STATUS_DESCRIPTIONS = {
    TrainStatus.ENROUTE: "is enroute to",
    TrainStatus.STATION: "is currently at",
    TrainStatus.DEPARTED: "has departed",
}


def _minutes_until(when: datetime | None, now: datetime) -> str:
    """Format the time until ``when`` as minutes, or N/A when unknown."""
    if when is None:
        return "N/A"
    minutes = int((when - now).total_seconds() / 60)
    return f"{minutes} minutes"


def filter_trains(response: TrainResponse, route: str | None = None) -> list[Train]:
    """Flatten a train response, keeping only trains on the given route."""
    trains = [train for group in response.values() for train in group]
    if route is None:
        return trains
    return [train for train in trains if train.route_name.lower() == route.lower()]


def describe_train(train: Train, now: datetime) -> str:
    """Describe where a train is heading and which stop it is enroute to."""
    station = train.enroute_station()
    if station is None:
        return f"{train.train_id} train is heading to {train.destination_name}"

    eta = _minutes_until(station.arrival, now)
    return (
        f"{train.train_id} train is heading to {train.destination_name}, "
        f"currently enroute to {station.name} with an ETA of {eta}"
    )


def describe_train_at_station(train: Train, station_code: str) -> str:
    """Describe a train's status relative to one of its stops."""
    station: TrainStation | None = train.find_station(station_code)
    if station is None:
        return f"{station_code} station was not found in the \"{train.train_id}\" route"

    description = STATUS_DESCRIPTIONS.get(station.status)
    if description is None:
        return f"The status of {train.train_id} at {station.name} is unknown"
    return f"{train.train_id} train {description} {station.name} station"


def filter_stations(response: StationResponse, state: str | None = None) -> list[Station]:
    """Return stations sorted by code, keeping only those in the given state/province."""
    stations = sorted(response.values(), key=lambda s: s.code)
    if state is None:
        return stations
    return [station for station in stations if station.state.upper() == state.upper()]


def _dump(models: list[Any]) -> str:
    return json.dumps(
        [model.model_dump(mode="json") for model in models], indent=2, ensure_ascii=False
    )


async def _run_trains(client: Client, args: argparse.Namespace) -> None:
    response = await (client.trains_with_debugging() if args.debug else client.trains())
    trains = filter_trains(response, args.route)
    if args.json:
        print(_dump(trains))
        return

    now = datetime.now(UTC)
    for train in trains:
        print(describe_train(train, now))


async def _run_train(client: Client, args: argparse.Namespace) -> None:
    train_id = args.train_id
    response = await (
        client.train_with_debugging(train_id) if args.debug else client.train(train_id)
    )
    trains = filter_trains(response)
    if args.json:
        print(_dump(trains))
        return

    if not trains:
        print(f'Train "{train_id}" is not currently in the Amtrak network')
        return

    now = datetime.now(UTC)
    for train in trains:
        if args.station:
            print(describe_train_at_station(train, args.station))
        else:
            print(describe_train(train, now))


async def _run_stations(client: Client, args: argparse.Namespace) -> None:
    response = await (client.stations_with_debugging() if args.debug else client.stations())
    stations = filter_stations(response, args.state)
    if args.json:
        print(_dump(stations))
        return

    for station in stations:
        print(f"{station.code}  {station.name} ({station.city}, {station.state})")


async def _run_station(client: Client, args: argparse.Namespace) -> None:
    code = args.station_code
    response = await (
        client.station_with_debugging(code) if args.debug else client.station(code)
    )
    stations = filter_stations(response)
    if args.json:
        print(_dump(stations))
        return

    if not stations:
        print(f'Station "{code}" was not found', file=sys.stderr)
        return

    for station in stations:
        trains = ", ".join(station.trains) or "none"
        print(f'Current trains scheduled for station "{station.name}": {trains}')


COMMANDS = {
    "trains": _run_trains,
    "train": _run_train,
    "stations": _run_stations,
    "station": _run_station,
}


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        description="Amtrak train and station status",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Trains on the Keystone route and where they are heading
  amtrak-api trains --route Keystone

  # Status of train 612-5 at Philadelphia
  amtrak-api train 612-5 --station PHL

  # Stations in Pennsylvania
  amtrak-api stations --state PA

  # Trains scheduled for Philadelphia
  amtrak-api station PHL
        """,
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Report failing field paths and raw bodies on deserialization errors",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    trains_parser = subparsers.add_parser("trains", help="List all tracked trains")
    trains_parser.add_argument("--route", help="Only show trains on this route (e.g. Keystone)")
    trains_parser.add_argument("--json", action="store_true", help="Output as JSON")

    train_parser = subparsers.add_parser("train", help="Show the status of one train")
    train_parser.add_argument("train_id", help="Train id (e.g. 612-5) or train number (e.g. 612)")
    train_parser.add_argument("--station", help="Show the status at this station code")
    train_parser.add_argument("--json", action="store_true", help="Output as JSON")

    stations_parser = subparsers.add_parser("stations", help="List all stations")
    stations_parser.add_argument("--state", help="Only show stations in this state (e.g. PA)")
    stations_parser.add_argument("--json", action="store_true", help="Output as JSON")

    station_parser = subparsers.add_parser("station", help="Show trains scheduled for a station")
    station_parser.add_argument("station_code", help="Station code (e.g. PHL)")
    station_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


async def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point. Returns the process exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        return 1

    try:
        async with Client() as client:
            await COMMANDS[args.command](client, args)
    except AmtrakApiError as e:
        logger.debug(f"Command {args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return 1

    return 0


def cli_main() -> None:
    """Synchronous entry point for the CLI command."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    cli_main()
