"""HTTP routes for the assistant relay.

Exposes:

- GET  /chat, /summarize, /chatconcludor -> usage hints
- POST /chat           -> {message}            -> {reply}
- POST /summarize      -> {transcript: [...]}  -> {summary}
- POST /chatconcludor  -> any JSON             -> structured chat analysis
- GET|POST /test       -> configuration presence + runtime metadata

Every POST handler validates its input before touching the remote
service, and builds its own client and runner per request.
"""

import logging
import platform
from typing import Any, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Request
from pydantic import ValidationError

from configs.settings import Settings
from core.assistant.formatting import format_payload, format_transcript, is_empty_payload
from core.assistant.prompts import (
    CHAT_CONCLUSION_RUN_INSTRUCTIONS,
    chat_conclusion_assistant,
    customer_service_assistant,
    transcript_summary_assistant,
)
from core.assistant.summary_parser import parse_chat_summary
from ..agents.assistant_runner import AssistantRunner
from ..models.api_models import (
    ChatConclusionResponse,
    ChatRequest,
    ChatResponse,
    EnvCheck,
    HealthResponse,
    InfoResponse,
    RunMetadata,
    TranscriptEntry,
    TranscriptRequest,
    TranscriptSummaryResponse,
)


logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_runner(request: Request) -> AssistantRunner:
    """Build a client and runner for this request.

    Fails with ConfigurationError before any client exists when a required
    environment variable is missing.
    """
    settings: Settings = request.app.state.settings
    settings.require()
    client = request.app.state.client_factory(settings)
    return AssistantRunner(client, sleep=request.app.state.sleep)


# --------------------------------------------------------
# Endpoint: /chat
# --------------------------------------------------------


@router.get("/chat", response_model=InfoResponse)
def chat_info() -> InfoResponse:
    return InfoResponse(
        message=(
            "Chat API is running. Please use POST method with a JSON body "
            "containing a 'message' field."
        )
    )


@router.post("/chat", response_model=ChatResponse)
def chat(
    payload: Optional[ChatRequest] = None,
    runner: AssistantRunner = Depends(get_runner),
    settings: Settings = Depends(get_settings),
) -> ChatResponse:
    """Send the message verbatim to the customer-service assistant."""
    message = payload.message if payload is not None else None
    if not message:
        raise HTTPException(status_code=400, detail="Message is required")

    logger.info("[CHAT] Received message (%d chars)", len(message))
    reply = runner.run(
        message,
        customer_service_assistant(settings.assistant_model, settings.vector_store_id),
    )
    return ChatResponse(reply=reply.text)


# --------------------------------------------------------
# Endpoint: /summarize
# --------------------------------------------------------


@router.get("/summarize", response_model=InfoResponse)
def summarize_info() -> InfoResponse:
    return InfoResponse(
        message=(
            "Summarize API is running. Please use POST method with a JSON body "
            "containing a 'transcript' array of {role, text} entries."
        )
    )


@router.post("/summarize", response_model=TranscriptSummaryResponse)
def summarize_transcript(
    payload: Optional[TranscriptRequest] = None,
    runner: AssistantRunner = Depends(get_runner),
    settings: Settings = Depends(get_settings),
) -> TranscriptSummaryResponse:
    """Summarize a `[{role, text}, ...]` transcript as plain text."""
    transcript = payload.transcript if payload is not None else None
    if not isinstance(transcript, list):
        raise HTTPException(status_code=400, detail="Transcript must be an array")
    if not transcript:
        raise HTTPException(status_code=400, detail="Transcript cannot be empty")

    try:
        entries = [TranscriptEntry(**entry) for entry in transcript]
    except (TypeError, ValidationError):
        raise HTTPException(
            status_code=400,
            detail="Each transcript entry must be an object with 'role' and 'text' strings",
        )

    content = format_transcript({"role": e.role, "text": e.text} for e in entries)
    logger.info("[SUMMARY] Summarizing transcript of %d entries", len(entries))

    reply = runner.run(content, transcript_summary_assistant(settings.assistant_model))
    return TranscriptSummaryResponse(summary=reply.text)


# --------------------------------------------------------
# Endpoint: /chatconcludor
# --------------------------------------------------------


@router.get("/chatconcludor", response_model=InfoResponse)
def chat_conclusion_info() -> InfoResponse:
    return InfoResponse(
        message=(
            "API is running. Please use POST method with a JSON body "
            "containing your data."
        )
    )


@router.post("/chatconcludor", response_model=ChatConclusionResponse)
def chat_conclusion(
    payload: Any = Body(None),
    runner: AssistantRunner = Depends(get_runner),
    settings: Settings = Depends(get_settings),
) -> ChatConclusionResponse:
    """Analyze arbitrary conversation data into conclusion, behavior and style.

    The model is asked for a three-field JSON object; when it answers in
    some other shape the fields are recovered by pattern search, so the
    response always has all three.
    """
    if is_empty_payload(payload):
        raise HTTPException(status_code=400, detail="Request body cannot be empty")

    content = format_payload(payload)
    reply = runner.run(
        content,
        chat_conclusion_assistant(settings.assistant_model),
        additional_instructions=CHAT_CONCLUSION_RUN_INSTRUCTIONS,
    )
    summary = parse_chat_summary(reply.text)

    return ChatConclusionResponse(
        chat_conclusion=summary.chat_conclusion,
        user_behavior_analysis=summary.user_behavior_analysis,
        chat_style=summary.chat_style,
        metadata=RunMetadata(thread_id=reply.thread_id, run_id=reply.run_id),
    )


# --------------------------------------------------------
# Endpoint: /test
# --------------------------------------------------------


@router.api_route("/test", methods=["GET", "POST"], response_model=HealthResponse)
def health_check(
    request: Request,
    settings: Settings = Depends(get_settings),
) -> HealthResponse:
    """
    Report which required variables are set, without their values.
    Never calls the remote service.
    """
    version = platform.python_version()
    return HealthResponse(
        message="Test endpoint is working",
        method=request.method,
        env_check=EnvCheck(**settings.env_check()),
        node_version=f"v{version}",
        python_version=version,
    )
