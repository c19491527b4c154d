"""LLM chat assistant with tool support."""

import json
from datetime import datetime
from typing import cast
from openai import OpenAI
from openai.types.chat import ChatCompletionMessageParam
from openai.types.chat.chat_completion_message_tool_call import ChatCompletionMessageToolCall

from tools import TOOLS, execute_tool

DEFAULT_MODEL = "gpt-4o"


def get_system_prompt() -> str:
    """Generate system prompt with current timestamp."""
    now = datetime.now()
    timestamp = now.strftime("%A, %B %d, %Y at %I:%M %p")

    return f"""You are a helpful weather assistant. You can look up National Weather Service forecasts for locations in the United States.
When the forecast tool says the location needs clarification, ask the user which place they mean instead of calling the tool again.
Summarize forecasts briefly and mention when they were last updated.

Current time: {timestamp}"""


class Conversation:
    """Message history for one chat session, kept in memory only."""

    def __init__(self) -> None:
        self.messages: list[ChatCompletionMessageParam] = [
            {"role": "system", "content": get_system_prompt()},
        ]

    def add_user(self, content: str) -> None:
        self.messages.append({"role": "user", "content": content})


def process_message(
    client: OpenAI,
    user_message: str,
    model: str = DEFAULT_MODEL,
    conversation: Conversation | None = None,
) -> str:
    """Process a user message and return the assistant response.

    Handles the tool execution loop internally.

    Args:
        client: OpenAI client instance
        user_message: Text typed by the user
        model: Model to use for chat completion
        conversation: Session history to continue; a fresh one is used if omitted

    Returns:
        Final text response
    """
    if conversation is None:
        conversation = Conversation()
    conversation.add_user(user_message)
    messages = conversation.messages

    while True:
        kwargs: dict = {
            "model": model,
            "messages": messages,
        }
        if TOOLS:
            kwargs["tools"] = TOOLS

        response = client.chat.completions.create(**kwargs)  # type: ignore[arg-type]

        choice = response.choices[0]
        message = choice.message

        # No tool calls - return the response
        if not message.tool_calls:
            content = message.content or ""
            messages.append({"role": "assistant", "content": content})
            return content

        # Add assistant message with tool calls
        tool_calls = cast(list[ChatCompletionMessageToolCall], message.tool_calls)
        messages.append({
            "role": "assistant",
            "content": message.content,
            "tool_calls": [
                {
                    "id": tc.id,
                    "type": "function",
                    "function": {
                        "name": tc.function.name,
                        "arguments": tc.function.arguments,
                    },
                }
                for tc in tool_calls
            ],
        })

        # Execute each tool and add results
        for tool_call in tool_calls:
            name = tool_call.function.name
            args = json.loads(tool_call.function.arguments)

            print(f"[Tool: {name}]", flush=True)
            result = execute_tool(name, args)

            messages.append({
                "role": "tool",
                "tool_call_id": tool_call.id,
                "content": result,
            })
