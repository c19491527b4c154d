"""Location to zone forecast pipeline."""

import logging

from forecast.client import WeatherGovClient, ZoneForecast
from forecast.generation import TextGenerator
from forecast.resolver import Ambiguity, pick_zone, resolve_states

logger = logging.getLogger(__name__)

CLARIFY_MESSAGE = "Too many location options available. Please clarify location with user."
NOT_FOUND_MESSAGE = "No state found for location. Couldn't fetch weather."
NO_ZONES_MESSAGE = "No forecast zones found for location. Couldn't fetch weather."


def get_forecast(
    location: str,
    generate: TextGenerator,
    weather: WeatherGovClient,
) -> str | ZoneForecast:
    """Resolve a free-text U.S. location to a forecast zone and fetch its forecast.

    Args:
        location: User-provided location description
        generate: Text generation capability for the two narrowing prompts
        weather: weather.gov client

    Returns:
        The zone forecast, or a short message when the location needs
        clarification or no state/zone could be found. Service, schema and
        selection errors are raised, never retried.
    """
    states = resolve_states(generate, location)
    if states is Ambiguity.CLARIFY:
        return CLARIFY_MESSAGE
    if states is Ambiguity.NOT_FOUND:
        return NOT_FOUND_MESSAGE

    zones = weather.get_zones(states)
    if not zones:
        return NO_ZONES_MESSAGE

    zone_id = pick_zone(generate, location, zones)
    forecast = weather.get_zone_forecast(zone_id)
    logger.info("Fetched %d forecast periods for %s", len(forecast.periods), zone_id)
    return forecast
