"""Sample Amtraker payloads, shaped the way the API serializes them."""

from collections.abc import Awaitable, Callable
from typing import Any

# Local test server: route -> (status, body), and the factory returning its base URL
Routes = dict[str, tuple[int, str]]
ServeFactory = Callable[[Routes], Awaitable[str]]


def make_train_station(**overrides: Any) -> dict[str, Any]:
    """Build a stop as the API serializes it."""
    station: dict[str, Any] = {
        "name": "Philadelphia",
        "code": "PHL",
        "tz": "America/New_York",
        "bus": False,
        "schArr": "2024-05-01T10:15:00-04:00",
        "schDep": "2024-05-01T10:25:00-04:00",
        "arr": "2024-05-01T10:17:00-04:00",
        "dep": "2024-05-01T10:27:00-04:00",
        "arrCmnt": "2 Minutes Late",
        "depCmnt": "2 Minutes Late",
        "status": "Enroute",
        "platform": "",
    }
    station.update(overrides)
    return station


def make_train(**overrides: Any) -> dict[str, Any]:
    """Build a train as the API serializes it."""
    train: dict[str, Any] = {
        "routeName": "Keystone",
        "trainNum": "612",
        "trainNumRaw": "612",
        "trainID": "612-5",
        "lat": 40.0,
        "lon": -75.5,
        "trainTimely": "On Time",
        "iconColor": "#2a893d",
        "textColor": "#ffffff",
        "stations": [
            make_train_station(
                name="Harrisburg",
                code="HAR",
                arr=None,
                dep="2024-05-01T08:05:00-04:00",
                arrCmnt="",
                depCmnt="On Time",
                status="Departed",
            ),
            make_train_station(),
            make_train_station(
                name="New York Penn",
                code="NYP",
                schArr="2024-05-01T11:45:00-04:00",
                schDep="2024-05-01T11:45:00-04:00",
                arr="2024-05-01T11:47:00-04:00",
                dep="2024-05-01T11:47:00-04:00",
                status="",
            ),
        ],
        "heading": "E",
        "eventCode": "PAO",
        "eventTZ": "America/New_York",
        "eventName": "Paoli",
        "origCode": "HAR",
        "originTZ": "America/New_York",
        "origName": "Harrisburg",
        "destCode": "NYP",
        "destTZ": "America/New_York",
        "destName": "New York Penn",
        "trainState": "Active",
        "velocity": 78.5,
        "statusMsg": " ",
        "createdAt": "2024-05-01T09:55:12-04:00",
        "updatedAt": "2024-05-01T09:55:12-04:00",
        "lastValTS": "2024-05-01T09:54:00-04:00",
        "objectID": 1234,
        "provider": "Amtrak",
        "providerShort": "AMTK",
        "onlyOfTrainNum": True,
        "alerts": [],
    }
    train.update(overrides)
    return train


def make_station(**overrides: Any) -> dict[str, Any]:
    """Build a station as the stations endpoint serializes it."""
    station: dict[str, Any] = {
        "name": "Aberdeen",
        "code": "ABE",
        "tz": "America/New_York",
        "lat": 39.508447,
        "lon": -76.16326,
        "hasAddress": True,
        "address1": "18 East Bel Air Avenue",
        "address2": " ",
        "city": "Aberdeen",
        "state": "MD",
        "zip": "21001",
        "trains": [],
    }
    station.update(overrides)
    return station
