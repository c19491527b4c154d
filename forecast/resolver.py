"""LLM-backed narrowing of a location query to states and then to a zone."""

import logging
import re
from enum import Enum

from forecast.client import ForecastError, Zone
from forecast.generation import TextGenerator

logger = logging.getLogger(__name__)

STATE_CODE_PROMPT = """You are an AI assistant that assists with narrowing down general locations described by a user.
Below you will be given some user-provided text describing a location for a weather forecast and are tasked with identifying U.S. state (or multiple nearest states) that location is most likely in.
If the location is not in the U.S. (for example, "London"), respond only with the text "Not in the U.S."
If the location is actually in the U.S. (for example, "Kansas City" or "southern Florida"), return a comma-separated list of capitalized two-letter state abbreviations with no spaces, such as "MO,KS" or "FL".
If you believe the query needs clarification (for example, there are many cities named "Springfield"), respond with the text "Clarify" to request clarification on the location.
Do not include quotation marks like in the above examples, return the text plain. Do not include any extra text in your response besides what is asked of you above.

User location query: "{location}\""""

ZONE_PICK_PROMPT = """You are an AI assistant that assists with narrowing down general locations described by a user.
Below you will be given some user-provided text describing a location for a weather forecast as well as some identified forecast zones that are likely candidates. You are tasked with selecting the zone ID the user is most likely requesting a forecast for.

The user requested a forecast for "{location}".
The zones identified as likely candidates are listed below in the following format: "ZONEID: Name". Respond with only the zone ID of the most likely requested zone exactly as provided.
{candidates}
"""

# Well-formed "MO,KS" style list.
STRICT_STATES = re.compile(r"(?:[A-Z]{2}, ?)*[A-Z]{2}")
# Any comma-separated run of two-character ASCII word tokens, e.g. "mo, ks" inside prose.
LENIENT_STATES = re.compile(r"(?:\w{2}, ?)+\w{2}", re.IGNORECASE | re.ASCII)


class Ambiguity(Enum):
    """Why a location could not be narrowed to states."""

    CLARIFY = "clarify"
    NOT_FOUND = "not_found"


class SelectionError(ForecastError):
    """Raised when the zone pick response names none of the candidates."""

    pass


def _extract_states(pattern: re.Pattern[str], text: str) -> set[str]:
    """Return the state codes in the first match of pattern, or an empty set."""
    match = pattern.search(text)
    if not match:
        return set()
    return {code.strip().upper() for code in match.group(0).split(",")}


def resolve_states(generate: TextGenerator, location: str) -> frozenset[str] | Ambiguity:
    """Ask the model which U.S. states a free-text location is in.

    Returns a non-empty set of uppercase state codes, Ambiguity.CLARIFY when the
    model asks for clarification, or Ambiguity.NOT_FOUND when no codes can be
    read from its answer.
    """
    prompt = STATE_CODE_PROMPT.format(location=location)
    logger.debug("State code prompt: %s", prompt)
    text = generate(prompt)
    logger.debug("State code response: %r", text)

    if text.lower().startswith("clarify"):
        return Ambiguity.CLARIFY

    # Union of both passes. Unknown codes simply yield no zones.
    states = _extract_states(STRICT_STATES, text) | _extract_states(LENIENT_STATES, text)

    if not states:
        return Ambiguity.NOT_FOUND

    logger.info("Resolved %r to states %s", location, ",".join(sorted(states)))
    return frozenset(states)


def pick_zone(generate: TextGenerator, location: str, zones: list[Zone]) -> str:
    """Ask the model to choose one zone id from the candidates.

    The first candidate, in catalog order, whose id appears anywhere in the
    response wins. Raises SelectionError if none appears.
    """
    if not zones:
        raise ValueError("pick_zone requires at least one candidate zone")

    candidates = "\n".join(f"{zone.id}: {zone.name}" for zone in zones)
    prompt = ZONE_PICK_PROMPT.format(location=location, candidates=candidates)
    logger.debug("Zone pick prompt: %s", prompt)
    text = generate(prompt)
    logger.debug("Zone pick response: %r", text)

    for zone in zones:
        if zone.id in text:
            logger.info("Selected zone %s (%s)", zone.id, zone.name)
            return zone.id

    raise SelectionError("No zone selected. Couldn't fetch weather")
