"""National Weather Service (api.weather.gov) zone client."""

import logging
import os
from urllib.parse import quote

import httpx
from pydantic import BaseModel, Field, StrictInt, StrictStr, ValidationError

API_BASE = "https://api.weather.gov"
USER_AGENT = "nws-zone-forecast/0.1 (chat assistant forecast tool)"
TIMEOUT = 10.0

logger = logging.getLogger(__name__)


class Zone(BaseModel):
    """Forecast zone as listed in the zones directory."""

    id: StrictStr
    name: StrictStr


class ZoneCollection(BaseModel):
    """JSON-LD zones listing. Only the @graph records are kept."""

    graph: list[Zone] = Field(alias="@graph")


class ForecastPeriod(BaseModel):
    """One named forecast period (e.g. 'Tonight')."""

    number: StrictInt
    name: StrictStr
    detailedForecast: StrictStr


class ZoneForecast(BaseModel):
    """Text forecast for a single zone."""

    updated: StrictStr
    periods: list[ForecastPeriod]


class ForecastError(Exception):
    """Base error for the forecast pipeline."""

    pass


class ExternalServiceError(ForecastError):
    """Raised when weather.gov answers with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class SchemaValidationError(ForecastError):
    """Raised when a response body does not have the expected shape."""

    pass


def make_http_client(timeout: float | None = None) -> httpx.Client:
    """Create an HTTP client suitable for WeatherGovClient."""
    if timeout is None:
        timeout = float(os.environ.get("NWS_TIMEOUT", TIMEOUT))
    return httpx.Client(timeout=timeout)


class WeatherGovClient:
    """Read-only client for the weather.gov zones and zone forecast endpoints.

    The HTTP client is injected so callers control its lifetime and tests can
    swap in a mock transport.
    """

    def __init__(
        self,
        http: httpx.Client,
        base_url: str | None = None,
        user_agent: str | None = None,
    ) -> None:
        self._http = http
        base_url = base_url or os.environ.get("NWS_API_BASE", API_BASE)
        self.base_url = base_url.rstrip("/")
        self.headers = {
            "Accept": "application/ld+json",
            "User-Agent": user_agent or os.environ.get("NWS_USER_AGENT", USER_AGENT),
        }

    def _get(self, path: str, params: dict | None = None) -> httpx.Response:
        """GET an API path, raising ExternalServiceError on non-success."""
        response = self._http.get(
            f"{self.base_url}{path}",
            params=params,
            headers=self.headers,
        )
        if not response.is_success:
            raise ExternalServiceError(
                response.reason_phrase or f"HTTP {response.status_code}",
                status_code=response.status_code,
            )
        return response

    def get_zones(self, states: frozenset[str] | set[str]) -> list[Zone]:
        """List forecast zones in the given states, in catalog order."""
        area = ",".join(sorted(states))
        response = self._get(
            "/zones",
            params={
                "area": area,
                "type": "forecast",
                "include_geometry": "false",
            },
        )

        try:
            zones = ZoneCollection.model_validate_json(response.content).graph
        except ValidationError as e:
            raise SchemaValidationError(f"Unexpected zones response: {e}") from e

        logger.info("Found %d forecast zones for %s", len(zones), area)
        return zones

    def get_zone_forecast(self, zone_id: str) -> ZoneForecast:
        """Fetch the text forecast for one zone."""
        response = self._get(f"/zones/forecast/{quote(zone_id, safe='')}/forecast")

        try:
            return ZoneForecast.model_validate_json(response.content)
        except ValidationError as e:
            raise SchemaValidationError(f"Unexpected forecast response: {e}") from e
