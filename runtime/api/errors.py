"""Map relay exceptions to JSON error bodies.

All failures reach the client as `{"error": ...}` objects. Stack traces are
only echoed when the configured environment is `development`.
"""

import logging
import traceback
from typing import Any, Dict

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from openai import OpenAIError
from starlette.exceptions import HTTPException as StarletteHTTPException

from exceptions.exceptions import (
    ConfigurationError,
    ResponseShapeError,
    RunNotCompletedError,
)
from runtime.api.cors import CORS_HEADERS


logger = logging.getLogger(__name__)


def _error_body(request: Request, exc: Exception) -> Dict[str, Any]:
    body: Dict[str, Any] = {"error": "An error occurred", "message": str(exc)}
    if request.app.state.settings.is_development:
        body["stack"] = "".join(
            traceback.format_exception(type(exc), exc, exc.__traceback__)
        )
    return body


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    logger.warning(
        "[API] HTTP %s for %s %s reason=%r",
        exc.status_code,
        request.method,
        request.url.path,
        exc.detail,
    )
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.warning("[API] Invalid body for %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=400,
        content={
            "error": "Invalid request body",
            "details": jsonable_encoder(exc.errors()),
        },
    )


async def configuration_error_handler(request: Request, exc: ConfigurationError) -> JSONResponse:
    logger.error("[API] %s", exc)
    return JSONResponse(status_code=500, content=_error_body(request, exc))


async def run_not_completed_handler(request: Request, exc: RunNotCompletedError) -> JSONResponse:
    logger.error(
        "[API] Run %s on thread %s ended with status %s",
        exc.run_id,
        exc.thread_id,
        exc.status,
    )
    return JSONResponse(
        status_code=500,
        content={"error": "Run did not complete in time", "status": exc.status},
    )


async def response_shape_handler(request: Request, exc: ResponseShapeError) -> JSONResponse:
    logger.error("[API] Unexpected reply shape: %s", exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})


async def openai_error_handler(request: Request, exc: OpenAIError) -> JSONResponse:
    logger.error(
        "[API] Remote service error for %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(status_code=500, content=_error_body(request, exc))


# Runs in ServerErrorMiddleware, outside cors_middleware.
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "[API] Unhandled error for %s %s",
        request.method,
        request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=500,
        content=_error_body(request, exc),
        headers=CORS_HEADERS,
    )


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(ConfigurationError, configuration_error_handler)
    app.add_exception_handler(RunNotCompletedError, run_not_completed_handler)
    app.add_exception_handler(ResponseShapeError, response_shape_handler)
    app.add_exception_handler(OpenAIError, openai_error_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
