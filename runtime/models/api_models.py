"""
HTTP request/response models for the relay API.
"""

from pydantic import BaseModel
from typing import Any, Optional


class ChatRequest(BaseModel):
    message: Optional[str] = None


class ChatResponse(BaseModel):
    reply: str


class TranscriptEntry(BaseModel):
    role: str
    text: str


class TranscriptRequest(BaseModel):
    # Validated by the handler so a non-array gets its own 400 message.
    transcript: Optional[Any] = None


class TranscriptSummaryResponse(BaseModel):
    summary: str


class RunMetadata(BaseModel):
    thread_id: str
    run_id: str


class ChatConclusionResponse(BaseModel):
    """
    Structured analysis of arbitrary conversation data.

    The three text fields are always present; sections the model did not
    produce carry placeholder text.
    """
    chat_conclusion: str
    user_behavior_analysis: str
    chat_style: str
    metadata: RunMetadata


class InfoResponse(BaseModel):
    message: str


class EnvCheck(BaseModel):
    AZURE_OPENAI_KEY: bool
    AZURE_OPENAI_ENDPOINT: bool


class HealthResponse(BaseModel):
    message: str
    method: str
    env_check: EnvCheck
    node_version: str
    python_version: str
