"""Tests for the command line interface."""

import json
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock, patch

import pytest

from amtrak_api import cli
from amtrak_api.domain.errors import RequestFailedError
from amtrak_api.domain.models import Station, Train
from tests.payloads import make_station, make_train, make_train_station

NOW = datetime(2024, 5, 1, 14, 0, tzinfo=UTC)


def _train(**overrides: object) -> Train:
    return Train.model_validate(make_train(**overrides))


class TestDescribeTrain:
    """Tests for describe_train."""

    def test_when_enroute_then_eta_in_minutes(self) -> None:
        """Given an enroute stop 17 minutes away, when describing, then the ETA is shown."""
        train = _train()

        description = cli.describe_train(train, NOW)

        assert description == (
            "612-5 train is heading to New York Penn, "
            "currently enroute to Philadelphia with an ETA of 17 minutes"
        )

    def test_when_arrival_unknown_then_na(self) -> None:
        """Given an enroute stop without arrival time, when describing, then N/A is shown."""
        train = _train(stations=[make_train_station(arr=None)])

        assert cli.describe_train(train, NOW).endswith("ETA of N/A")

    def test_when_not_enroute_then_destination_only(self) -> None:
        """Given no enroute stop, when describing, then only the destination is shown."""
        train = _train(stations=[make_train_station(status="Departed")])

        assert cli.describe_train(train, NOW) == "612-5 train is heading to New York Penn"


class TestDescribeTrainAtStation:
    """Tests for describe_train_at_station."""

    @pytest.mark.parametrize(
        ("status", "expected"),
        [
            ("Enroute", "612-5 train is enroute to Philadelphia station"),
            ("Station", "612-5 train is currently at Philadelphia station"),
            ("Departed", "612-5 train has departed Philadelphia station"),
            ("", "The status of 612-5 at Philadelphia is unknown"),
        ],
    )
    def test_status_descriptions(self, status: str, expected: str) -> None:
        """Given a stop status, when describing the train there, then the status is worded."""
        train = _train(stations=[make_train_station(status=status)])

        assert cli.describe_train_at_station(train, "PHL") == expected

    def test_when_station_not_on_route(self) -> None:
        """Given a code the train does not serve, when describing, then says not found."""
        assert cli.describe_train_at_station(_train(), "BOS") == (
            'BOS station was not found in the "612-5" route'
        )


def test_filter_trains_by_route() -> None:
    """Given trains on several routes, when filtering, then only the route is kept."""
    response = {
        "612": [_train()],
        "2150": [_train(routeName="Acela", trainID="2150-1")],
    }

    assert [t.train_id for t in cli.filter_trains(response, "keystone")] == ["612-5"]
    assert len(cli.filter_trains(response)) == 2


def test_filter_stations_by_state() -> None:
    """Given stations in several states, when filtering, then sorted matches are kept."""
    response = {
        "PHL": Station.model_validate(make_station(name="Philadelphia", code="PHL", state="PA")),
        "ABE": Station.model_validate(make_station()),
        "HAR": Station.model_validate(make_station(name="Harrisburg", code="HAR", state="PA")),
    }

    assert [s.code for s in cli.filter_stations(response, "pa")] == ["HAR", "PHL"]
    assert [s.code for s in cli.filter_stations(response)] == ["ABE", "HAR", "PHL"]


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (timedelta(seconds=90), "1 minutes"),
        (timedelta(seconds=-30), "0 minutes"),
        (timedelta(seconds=-90), "-1 minutes"),
    ],
)
def test_minutes_until_truncates_toward_zero(offset: timedelta, expected: str) -> None:
    """Given a time ahead or behind, when formatting, then partial minutes are dropped."""
    assert cli._minutes_until(NOW + offset, NOW) == expected


class TestMain:
    """Tests for the CLI entry point."""

    @pytest.mark.asyncio
    async def test_when_no_command_then_help_and_exit_code_1(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given no command, when running, then help is printed and 1 is returned."""
        assert await cli.main([]) == 1
        assert "usage" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_stations_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Given the stations command with --json, when running, then JSON is printed."""
        stations = {"ABE": Station.model_validate(make_station())}

        with patch.object(cli.Client, "stations", AsyncMock(return_value=stations)):
            exit_code = await cli.main(["stations", "--state", "MD", "--json"])

        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output[0]["code"] == "ABE"
        assert output[0]["city"] == "Aberdeen"

    @pytest.mark.asyncio
    async def test_station_lists_scheduled_trains(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given the station command, when running, then scheduled trains are listed."""
        stations = {
            "PHL": Station.model_validate(
                make_station(name="Philadelphia", code="PHL", trains=["612-5", "640-5"])
            )
        }

        with patch.object(cli.Client, "station", AsyncMock(return_value=stations)):
            exit_code = await cli.main(["station", "PHL"])

        assert exit_code == 0
        assert 'station "Philadelphia": 612-5, 640-5' in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_train_not_in_network(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Given an empty train response, when running train, then says not in the network."""
        with patch.object(cli.Client, "train", AsyncMock(return_value={})):
            exit_code = await cli.main(["train", "9999"])

        assert exit_code == 0
        assert "is not currently in the Amtrak network" in capsys.readouterr().out

    @pytest.mark.asyncio
    async def test_debug_flag_uses_debugging_operation(self) -> None:
        """Given --debug, when running trains, then the debugging operation is called."""
        debugging = AsyncMock(return_value={})
        plain = AsyncMock(return_value={})

        with (
            patch.object(cli.Client, "trains_with_debugging", debugging),
            patch.object(cli.Client, "trains", plain),
        ):
            exit_code = await cli.main(["--debug", "trains"])

        assert exit_code == 0
        debugging.assert_awaited_once()
        plain.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_when_api_error_then_exit_code_1(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Given a failing request, when running, then the error is printed and 1 returned."""
        failing = AsyncMock(side_effect=RequestFailedError("connection refused"))

        with patch.object(cli.Client, "trains", failing):
            exit_code = await cli.main(["trains"])

        assert exit_code == 1
        assert "Unable to send the request: connection refused" in capsys.readouterr().err

    @pytest.mark.asyncio
    async def test_when_config_invalid_then_exit_code_1(
        self, capsys: pytest.CaptureFixture[str], monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Given a bad timeout in the environment, when running, then the error is printed."""
        monkeypatch.setenv("AMTRAK_API_TIMEOUT_SECONDS", "-5")

        exit_code = await cli.main(["trains"])

        assert exit_code == 1
        assert "invalid configuration" in capsys.readouterr().err
