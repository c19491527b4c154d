"""Pytest configuration - load .env before tests, shared fakes."""

import json

import httpx
import pytest
from dotenv import load_dotenv

from forecast import WeatherGovClient

# Load .env file for API keys
load_dotenv()

BASE_URL = "https://api.weather.gov"

KANSAS_CITY_ZONES = {
    "@context": {"@version": "1.1"},
    "@graph": [
        {
            "@id": "https://api.weather.gov/zones/forecast/MOZ028",
            "@type": "wx:Zone",
            "id": "MOZ028",
            "type": "public",
            "name": "Jackson",
            "state": "MO",
        },
        {
            "@id": "https://api.weather.gov/zones/forecast/KSZ105",
            "@type": "wx:Zone",
            "id": "KSZ105",
            "type": "public",
            "name": "Wyandotte",
            "state": "KS",
        },
        {
            "@id": "https://api.weather.gov/zones/forecast/KSZ104",
            "@type": "wx:Zone",
            "id": "KSZ104",
            "type": "public",
            "name": "Leavenworth",
            "state": "KS",
        },
    ],
}

JACKSON_FORECAST = {
    "@context": {"@version": "1.1"},
    "geometry": None,
    "zone": "https://api.weather.gov/zones/forecast/MOZ028",
    "updated": "2026-10-17T09:12:00-05:00",
    "periods": [
        {
            "number": 1,
            "name": "Today",
            "detailedForecast": "Sunny, with a high near 71. South wind 5 to 10 mph.",
        },
        {
            "number": 2,
            "name": "Tonight",
            "detailedForecast": "Mostly clear, with a low around 52.",
        },
        {
            "number": 3,
            "name": "Saturday",
            "detailedForecast": "A chance of showers after 1pm. Cloudy, with a high near 68.",
        },
    ],
}


class ScriptedGenerator:
    """Generation fake returning canned responses in order and recording prompts."""

    def __init__(self, *responses: str) -> None:
        self.responses = list(responses)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.responses:
            raise AssertionError(f"Unexpected generation call: {prompt[:80]}")
        return self.responses.pop(0)


class FakeWeatherGov:
    """Routes mock transport requests by path and records them."""

    def __init__(self) -> None:
        self.routes: dict[str, tuple[int, bytes]] = {}
        self.requests: list[httpx.Request] = []

    def add(self, path: str, body=None, status_code: int = 200, content: bytes | None = None) -> None:
        if content is None:
            content = json.dumps(body).encode()
        self.routes[path] = (status_code, content)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        path = request.url.raw_path.decode().split("?")[0]
        if path not in self.routes:
            return httpx.Response(404, json={"title": "Not Found"})
        status_code, content = self.routes[path]
        return httpx.Response(
            status_code,
            content=content,
            headers={"Content-Type": "application/ld+json"},
        )


@pytest.fixture
def weather_gov() -> FakeWeatherGov:
    return FakeWeatherGov()


@pytest.fixture
def weather(weather_gov):
    """WeatherGovClient backed by the in-memory fake."""
    with httpx.Client(transport=httpx.MockTransport(weather_gov)) as http:
        yield WeatherGovClient(http, base_url=BASE_URL, user_agent="test-agent")
