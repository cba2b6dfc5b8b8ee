#!/usr/bin/env python3
"""
Assistant Relay CLI

Commands:

1) serve
   - Validate AZURE_OPENAI_KEY / AZURE_OPENAI_ENDPOINT, then run the HTTP
     relay under uvicorn on PORT (default 3000). A missing variable aborts
     startup with exit code 1.

2) ask
   - Send one message to a freshly created Celesh assistant and print the
     thread, run and reply. Useful for checking credentials and the
     knowledge-base vector store without going through HTTP.

3) create-assistant
   - Create the Celesh assistant definition and print the JSON the service
     returns for it.

The HTTP app can also be started directly, e.g.:

    uvicorn runtime.api.server:app --reload
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

# Ensure project root is on sys.path when running as a script
ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

import uvicorn
from openai import OpenAIError

from configs.settings import Settings
from core.api.openai_client import build_client
from core.assistant.prompts import customer_service_assistant
from exceptions.exceptions import (
    ConfigurationError,
    ResponseShapeError,
    RunNotCompletedError,
)
from runtime.agents.assistant_runner import AssistantRunner
from runtime.api.server import create_app


# ---------------------------------------------------------------------------
# serve
# ---------------------------------------------------------------------------


def cmd_serve(settings: Settings, host: str, port: Optional[int]) -> int:
    """Start the HTTP relay after checking the required configuration."""
    settings.require()

    port = port or settings.port
    print(f"[Relay] Server running on port {port}")
    uvicorn.run(
        create_app(settings),
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )
    return 0


# ---------------------------------------------------------------------------
# ask
# ---------------------------------------------------------------------------


def cmd_ask(settings: Settings, message: str) -> int:
    """Run one chat exchange and print the result."""
    settings.require()

    runner = AssistantRunner(build_client(settings))
    options = customer_service_assistant(settings.assistant_model, settings.vector_store_id)

    print(f"[Relay] Sending message ({len(message)} chars) to {options['name']}...")
    try:
        reply = runner.run(message, options)
    except RunNotCompletedError as e:
        print(f"[Relay] Run status is {e.status}, unable to fetch messages.")
        return 1
    except (OpenAIError, ResponseShapeError) as e:
        print(f"[Relay] Error running the assistant: {e}", file=sys.stderr)
        return 1

    print(f"[Relay] Thread: {reply.thread_id}")
    print(f"[Relay] Run:    {reply.run_id} (completed)")
    print()
    print(reply.text)
    return 0


# ---------------------------------------------------------------------------
# create-assistant
# ---------------------------------------------------------------------------


def cmd_create_assistant(settings: Settings) -> int:
    """Create the Celesh assistant definition and print it."""
    settings.require()

    client = build_client(settings)
    assistant = client.create_assistant(
        **customer_service_assistant(settings.assistant_model, settings.vector_store_id)
    )
    print(f"[Relay] Assistant created: {assistant.id}")
    print(assistant.model_dump_json(indent=2))
    return 0


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Assistant Relay CLI")

    subparsers = parser.add_subparsers(dest="command", required=True)

    # serve
    p_serve = subparsers.add_parser("serve", help="Run the HTTP relay")
    p_serve.add_argument(
        "--host",
        default="0.0.0.0",
        help="Interface to bind (default: 0.0.0.0)",
    )
    p_serve.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: PORT or 3000)",
    )

    # ask
    p_ask = subparsers.add_parser(
        "ask", help="Send one message to the customer-service assistant"
    )
    p_ask.add_argument("message", help="Message text to send")

    # create-assistant
    subparsers.add_parser(
        "create-assistant",
        help="Create the customer-service assistant definition and print it",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = Settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    command: str = args.command

    try:
        if command == "serve":
            return cmd_serve(settings, host=args.host, port=args.port)
        elif command == "ask":
            return cmd_ask(settings, message=args.message)
        elif command == "create-assistant":
            return cmd_create_assistant(settings)
        else:
            parser.error(f"Unknown command: {command}")
    except ConfigurationError as e:
        print(f"[Relay] {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
