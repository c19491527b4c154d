#!/usr/bin/env python3
"""Zone forecast tool using the National Weather Service API.

CLI: uv run weather --location "Kansas City"
Tool: Registered as GetForecast for OpenAI function calling
"""

from openai import OpenAI
from pydantic import BaseModel, Field

from forecast import (
    OpenAIGenerator,
    WeatherGovClient,
    ZoneForecast,
    get_forecast as run_pipeline,
)
from forecast.client import make_http_client


class GetForecast(BaseModel):
    """Get a text-based forecast for a given location. Only supports locations in the United States. If the query is ambiguous, this tool may request clarification. In that case, do not immediately call it again, ask the user to clarify the location and try again with more information."""

    location: str = Field(description="Free-text U.S. location, e.g. 'Kansas City' or 'southern Florida'")


def format_forecast(forecast: ZoneForecast) -> str:
    """Render a zone forecast as plain text."""
    lines = [f"Forecast updated {forecast.updated}"]
    for period in forecast.periods:
        lines.append(f"{period.name}: {period.detailedForecast}")
    return "\n".join(lines)


def get_forecast(params: GetForecast) -> str:
    """Fetch the forecast for a free-text location."""
    generate = OpenAIGenerator(OpenAI())
    with make_http_client() as http:
        result = run_pipeline(params.location, generate, WeatherGovClient(http))

    if isinstance(result, str):
        return result
    return format_forecast(result)


# ─── Dual Mode: CLI + Tool ─────────────────────────────────────────────────

def main() -> None:
    """CLI entry point."""
    from dotenv import load_dotenv
    from tools.base import run

    load_dotenv()
    run(GetForecast, get_forecast)


if __name__ == "__main__":
    main()
else:
    from tools.base import tool
    tool(GetForecast)(get_forecast)
