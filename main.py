"""Weather Assistant - text chat with National Weather Service forecasts."""

import os
import logging

from dotenv import load_dotenv
load_dotenv()

from openai import OpenAI

from assistant import Conversation, process_message

# Configuration
MODEL = os.getenv("MODEL", "gpt-4o")
DEBUG = os.getenv("DEBUG", "").lower() in ("1", "true", "yes")


def log(msg: str) -> None:
    """Print log message with flush."""
    print(msg, flush=True)


def setup_logging(debug: bool = DEBUG) -> None:
    """Configure logging; third-party clients stay quiet unless debugging."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if not debug:
        logging.getLogger("httpx").setLevel(logging.ERROR)
        logging.getLogger("openai").setLevel(logging.ERROR)


def main() -> None:
    """Main entry point."""
    setup_logging()
    log("Starting Weather Assistant...")
    client = OpenAI()
    conversation = Conversation()

    log("Ask about the forecast anywhere in the U.S. (Ctrl-D to quit)")
    log("")

    while True:
        try:
            text = input("You: ")
        except (EOFError, KeyboardInterrupt):
            break

        if not text.strip():
            continue

        response = process_message(client, text, model=MODEL, conversation=conversation)
        log(f"Assistant: {response}")
        log("")

    log("")
    log("Goodbye.")


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        print("\n\nThank you for using Weather Assistant. Until next time.")
        exit(0)
