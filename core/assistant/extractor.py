"""Pull the assistant's reply text out of a thread's message list."""

from typing import Any, Iterable

from exceptions.exceptions import ResponseShapeError


def extract_assistant_text(messages: Iterable[Any]) -> str:
    """Return the text of the first assistant message's first text part.

    Messages are expected newest first (the order the client lists them in),
    so this is the latest reply. Raises ResponseShapeError when no assistant
    message exists, or when it has no non-empty text part.
    """
    assistant_message = next(
        (msg for msg in messages if getattr(msg, "role", None) == "assistant"),
        None,
    )
    if assistant_message is None:
        raise ResponseShapeError("No assistant message found")

    text_part = next(
        (
            part
            for part in (getattr(assistant_message, "content", None) or [])
            if getattr(part, "type", None) == "text"
        ),
        None,
    )
    text = getattr(text_part, "text", None)
    value = getattr(text, "value", None)
    if not value:
        raise ResponseShapeError("No text content found")

    return value
