"""Shape request payloads into the text submitted as the user message."""

import json
from typing import Any, Iterable, Mapping


def format_transcript(entries: Iterable[Mapping[str, Any]]) -> str:
    """Flatten transcript entries into `role: text` lines."""
    return "\n".join(
        f"{entry.get('role', '')}: {entry.get('text', '')}" for entry in entries
    )


def is_transcript_payload(payload: Any) -> bool:
    """True for `{"transcript": [{...}, ...]}` style bodies."""
    if not isinstance(payload, dict):
        return False
    transcript = payload.get("transcript")
    return isinstance(transcript, list) and all(
        isinstance(entry, dict) for entry in transcript
    )


def format_payload(payload: Any) -> str:
    """Render an arbitrary JSON body for the summarizer assistant.

    Transcript bodies become `role: text` lines, other objects and arrays
    pretty-printed JSON, strings pass through and remaining scalars use
    their JSON spelling (`true`, `3.5`, ...).
    """
    if is_transcript_payload(payload):
        return format_transcript(payload["transcript"])
    if isinstance(payload, (dict, list)):
        return json.dumps(payload, indent=2, ensure_ascii=False)
    if isinstance(payload, str):
        return payload
    return json.dumps(payload)


def is_empty_payload(payload: Any) -> bool:
    """Falsy JSON bodies (absent, null, false, 0, `{}`, `[]`) and blank strings count as empty."""
    if isinstance(payload, str):
        return not payload.strip()
    return not payload
