"""
FastAPI application entry point for the assistant relay.

Responsibilities:
- create the FastAPI app from an explicit Settings object
- keep the client factory and sleep function on app.state, where the
  per-request runner dependency picks them up
- install CORS handling and the JSON error handlers
- include the relay routes

Run locally with:

    uvicorn runtime.api.server:app --reload

or through the CLI (`assistant-relay serve`), which validates the
configuration before starting.
"""

import time
from typing import Callable, Optional

from fastapi import FastAPI

from configs.settings import Settings
from core.api.openai_client import build_client
from . import chat_routes
from .cors import cors_middleware
from .errors import register_exception_handlers


def create_app(
    settings: Optional[Settings] = None,
    client_factory: Optional[Callable] = None,
    sleep: Optional[Callable[[float], None]] = None,
) -> FastAPI:
    """Build the relay app.

    Parameters
    ----------
    settings:
        Configuration to serve with; read from the environment if omitted.
    client_factory:
        Callable taking Settings and returning an assistants client.
        Defaults to core.api.openai_client.build_client.
    sleep:
        Wait function used between run status checks (time.sleep).
    """
    app = FastAPI(title="Assistant Relay")

    app.state.settings = settings or Settings()
    app.state.client_factory = client_factory or build_client
    app.state.sleep = sleep or time.sleep

    app.middleware("http")(cors_middleware)
    register_exception_handlers(app)
    app.include_router(chat_routes.router)
    return app


# Configuration is read here but only enforced per request, so importing
# this module never fails on a missing variable.
app = create_app()
