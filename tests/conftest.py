"""Shared fixtures and fakes for the weather agent tests."""

import copy

import pytest

from irc_client.message import parse_line
from weather_service.client import WeatherServiceError


SAMPLE_PAYLOAD = {
    "current_condition": [
        {
            "temp_F": "72",
            "temp_C": "22",
            "humidity": "40",
            "weatherCode": "113",
            "weatherDesc": [{"value": "Sunny"}],
        }
    ],
    "nearest_area": [{"areaName": [{"value": "Mountain View"}]}],
    "weather": [
        {
            "maxtempF": "88",
            "mintempF": "60",
            "hourly": [{} for _ in range(4)]
            + [{"tempF": "80", "tempC": "27", "humidity": "35", "weatherCode": "116", "weatherDesc": [{"value": "Partly cloudy"}]}],
        },
        {
            "maxtempF": "75",
            "mintempF": "55",
            "hourly": [{} for _ in range(4)]
            + [{"tempF": "70", "tempC": "21", "humidity": "50", "weatherCode": "296", "weatherDesc": [{"value": "Light rain"}]}],
        },
        {
            "maxtempF": "30",
            "mintempF": "10",
            "hourly": [{} for _ in range(4)]
            + [{"tempF": "25", "tempC": "-4", "humidity": "80", "weatherCode": "338", "weatherDesc": [{"value": "Heavy snow"}]}],
        },
    ],
}


class FakeSession:
    """Stands in for IrcSession: replays scripted lines and records what is sent."""

    def __init__(self, lines=(), fail_identify=None):
        self._items = [parse_line(x) if isinstance(x, str) else x for x in lines]
        self.fail_identify = fail_identify
        self.identified = False
        self.closed = False
        self.sent = []

    async def identify(self):
        if self.fail_identify:
            raise self.fail_identify
        self.identified = True

    async def read_message(self):
        if not self._items:
            return None
        item = self._items.pop(0)
        if isinstance(item, Exception):
            raise item
        return item

    async def send_privmsg(self, target, text):
        self.sent.append((target, text))

    async def close(self):
        self.closed = True


class FakeWeatherClient:
    def __init__(self, payload=None, error=None):
        self.payload = payload
        self.error = error
        self.queries = []

    async def fetch(self, query):
        self.queries.append(query)
        if self.error:
            raise WeatherServiceError(self.error)
        return self.payload


@pytest.fixture
def sample_payload():
    return copy.deepcopy(SAMPLE_PAYLOAD)


@pytest.fixture
def fake_weather(sample_payload):
    return FakeWeatherClient(payload=sample_payload)


@pytest.fixture
def fake_session():
    return FakeSession()
