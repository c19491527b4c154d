"""Location-to-forecast resolution for National Weather Service zones."""

from forecast.client import (
    WeatherGovClient,
    Zone,
    ZoneForecast,
    ForecastPeriod,
    ForecastError,
    ExternalServiceError,
    SchemaValidationError,
)
from forecast.generation import OpenAIGenerator, TextGenerator
from forecast.resolver import Ambiguity, SelectionError, resolve_states, pick_zone
from forecast.pipeline import get_forecast

__all__ = [
    "WeatherGovClient",
    "Zone",
    "ZoneForecast",
    "ForecastPeriod",
    "ForecastError",
    "ExternalServiceError",
    "SchemaValidationError",
    "OpenAIGenerator",
    "TextGenerator",
    "Ambiguity",
    "SelectionError",
    "resolve_states",
    "pick_zone",
    "get_forecast",
]
