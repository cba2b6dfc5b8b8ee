"""
core.assistant.summary_parser

Turn the summarizer assistant's reply into a ChatSummary.

Two stages:
  1. strict JSON decode of the outermost {...} span of the reply;
  2. if that fails, one independent regex search per field over the raw
     text, each falling back to its placeholder.

Either way every field ends up as a string, so callers always get a
well-formed summary even when the model ignores the requested format.
"""

from __future__ import annotations

import json
import logging
import re
from typing import Any, Dict, Optional

from core.assistant.models import (
    ChatSummary,
    NO_BEHAVIOR_ANALYSIS,
    NO_CHAT_STYLE,
    NO_CONCLUSION,
)


logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Field extractors
# -------------------------------------------------------------------

# Each section runs until the next section label, a blank line, or the end.
_FIELD_PATTERNS = {
    "chat_conclusion": re.compile(
        r"chat_conclusion[:\s]+(.*?)(?=user_behavior_analysis|\n\n|\Z)",
        re.IGNORECASE | re.DOTALL,
    ),
    "user_behavior_analysis": re.compile(
        r"user_behavior_analysis[:\s]+(.*?)(?=chat_style|\n\n|\Z)",
        re.IGNORECASE | re.DOTALL,
    ),
    "chat_style": re.compile(
        r"chat_style[:\s]+(.*?)(?=\n\n|\Z)",
        re.IGNORECASE | re.DOTALL,
    ),
}

_PLACEHOLDERS = {
    "chat_conclusion": NO_CONCLUSION,
    "user_behavior_analysis": NO_BEHAVIOR_ANALYSIS,
    "chat_style": NO_CHAT_STYLE,
}

# First "{" through last "}"; code fences and prose around it fall outside.
_OBJECT_SPAN = re.compile(r"\{.*\}", re.DOTALL)


# -------------------------------------------------------------------
# Internal helpers
# -------------------------------------------------------------------


def _decode_json_object(text: str) -> Optional[Dict[str, Any]]:
    match = _OBJECT_SPAN.search(text)
    if match is None:
        return None
    try:
        data = json.loads(match.group(0))
    except json.JSONDecodeError:
        return None
    return data if isinstance(data, dict) else None


def _as_field_text(value: Any, placeholder: str) -> str:
    if value is None or value == "":
        return placeholder
    if isinstance(value, str):
        return value
    return json.dumps(value, ensure_ascii=False)


def _search_field(text: str, field: str) -> str:
    match = _FIELD_PATTERNS[field].search(text)
    if match is None:
        return _PLACEHOLDERS[field]
    return match.group(1).strip() or _PLACEHOLDERS[field]


# -------------------------------------------------------------------
# Public functions
# -------------------------------------------------------------------


def parse_chat_summary(text: str) -> ChatSummary:
    """Parse the summarizer's reply, falling back to per-field regex search."""
    data = _decode_json_object(text)

    if data is not None:
        return ChatSummary(
            **{
                field: _as_field_text(data.get(field), placeholder)
                for field, placeholder in _PLACEHOLDERS.items()
            }
        )

    logger.info("[SUMMARY] Reply is not a JSON object; extracting fields by pattern")
    return ChatSummary(**{field: _search_field(text, field) for field in _PLACEHOLDERS})
