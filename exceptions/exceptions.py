"""
Custom exceptions for the assistant relay.

These exceptions are small and descriptive.
They are used across:

  - configs/
  - core/assistant/
  - runtime/agents/ and runtime/api/

The HTTP layer maps each of them to a JSON error body
(see runtime/api/errors.py).
"""


class ConfigurationError(Exception):
    """
    Raised when a required environment variable is missing or empty.

    The exception carries the names of the missing variables so callers
    can report them without ever echoing configured values.
    """

    def __init__(self, missing):
        self.missing = list(missing)
        msg = (
            "Missing required environment variables: "
            + " and/or ".join(self.missing)
        )
        super().__init__(msg)


class RunNotCompletedError(Exception):
    """
    Raised when a run leaves the polling loop without reaching `completed`.

    This covers both a failure-class status (failed, expired, cancelled, ...)
    and an exhausted attempt budget, in which case `status` is the last
    non-terminal status observed.
    """

    def __init__(self, status, thread_id=None, run_id=None):
        self.status = status
        self.thread_id = thread_id
        self.run_id = run_id
        super().__init__(f"Run did not complete in time (status: {status})")


class ResponseShapeError(Exception):
    """
    Raised when the message list returned for a thread does not contain the
    expected assistant message / text part.

    Example:
        no message with role 'assistant'   -> "No assistant message found"
        assistant message without text     -> "No text content found"
    """
