"""Text generation capability used by the pipeline prompts."""

import os
from typing import Protocol

from openai import OpenAI

DEFAULT_MODEL = "gpt-4o-mini"


class TextGenerator(Protocol):
    """Anything that turns a prompt into free text."""

    def __call__(self, prompt: str) -> str: ...


class OpenAIGenerator:
    """Single-prompt text generation through the OpenAI chat API."""

    def __init__(self, client: OpenAI, model: str | None = None) -> None:
        self.client = client
        self.model = model or os.environ.get("FORECAST_MODEL", DEFAULT_MODEL)

    def __call__(self, prompt: str) -> str:
        response = self.client.chat.completions.create(
            model=self.model,
            messages=[{"role": "user", "content": prompt}],
        )
        return response.choices[0].message.content or ""
