"""Tool registry base with decorator pattern."""

import argparse
from typing import Callable, TypeVar
from pydantic import BaseModel
from openai import pydantic_function_tool

T = TypeVar("T", bound=BaseModel)

# Internal registries
_TOOLS: list = []
_HANDLERS: dict[str, tuple[type[BaseModel], Callable]] = {}


def tool(model: type[T]) -> Callable[[Callable[[T], str]], Callable[[T], str]]:
    """Decorator to register a tool with its Pydantic model.

    Usage:
        @tool(GetForecast)
        def get_forecast(params: GetForecast) -> str:
            return f"Forecast for {params.location}..."
    """
    def decorator(func: Callable[[T], str]) -> Callable[[T], str]:
        _TOOLS.append(pydantic_function_tool(model))
        _HANDLERS[model.__name__] = (model, func)
        return func
    return decorator


def execute_tool(name: str, args: dict) -> str:
    """Execute a tool by name with given arguments."""
    if name not in _HANDLERS:
        return f"Error: Unknown tool '{name}'"

    model_class, handler = _HANDLERS[name]
    try:
        params = model_class(**args)
        return handler(params)
    except Exception as e:
        return f"Error executing {name}: {e}"


def get_tools() -> list:
    """Get all registered tools."""
    return _TOOLS


def run(model: type[T], handler: Callable[[T], str], argv: list[str] | None = None) -> None:
    """Run a tool from the command line.

    Each model field becomes a --flag; fields without a default are required.
    """
    parser = argparse.ArgumentParser(description=model.__doc__)
    for name, field in model.model_fields.items():
        parser.add_argument(
            f"--{name.replace('_', '-')}",
            dest=name,
            required=field.is_required(),
            default=None if field.is_required() else field.default,
            help=field.description,
        )

    args = vars(parser.parse_args(argv))
    print(handler(model(**args)), flush=True)
