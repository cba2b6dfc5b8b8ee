"""AssistantRunner implementation.

Responsible for the one exchange every endpoint performs against the
remote Assistants API:

- create an assistant definition from the given options
- create a thread and add the user's content as a message
- start a run and poll it until it leaves the pending states
- list the thread's messages and extract the assistant's text

Every call creates a fresh assistant and thread; nothing is reused
across calls.
"""

import logging
import time
from typing import Any, Callable, Dict, Optional

from core.assistant.extractor import extract_assistant_text
from core.assistant.models import AssistantReply
from core.assistant.polling import (
    MAX_POLL_ATTEMPTS,
    POLL_INTERVAL_SECONDS,
    RunFailed,
    poll_run,
)
from exceptions.exceptions import RunNotCompletedError


logger = logging.getLogger(__name__)


class AssistantRunner:
    """Run one user message through a freshly created assistant.

    Parameters
    ----------
    client:
        An AssistantsClient (or any object exposing the same six
        methods: create_assistant, create_thread, add_message,
        create_run, retrieve_run, list_messages).
    poll_interval:
        Seconds between run status checks.
    max_attempts:
        Status re-checks allowed after the run is created.
    sleep:
        Wait function used between checks; tests inject a no-op.
    """

    def __init__(
        self,
        client,
        poll_interval: float = POLL_INTERVAL_SECONDS,
        max_attempts: int = MAX_POLL_ATTEMPTS,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.client = client
        self.poll_interval = poll_interval
        self.max_attempts = max_attempts
        self.sleep = sleep

    def run(
        self,
        content: str,
        assistant_options: Dict[str, Any],
        additional_instructions: Optional[str] = None,
    ) -> AssistantReply:
        """Submit `content` and return the assistant's reply.

        Raises
        ------
        RunNotCompletedError
            If the run ends in a failure status or is still pending after
            `max_attempts` re-checks.
        ResponseShapeError
            If the thread holds no assistant message with text.
        openai.OpenAIError
            Any transport / API failure, unchanged.
        """
        assistant = self.client.create_assistant(**assistant_options)
        thread = self.client.create_thread()
        self.client.add_message(thread.id, content)

        result = poll_run(
            lambda: self.client.create_run(
                thread.id,
                assistant.id,
                additional_instructions=additional_instructions,
            ),
            lambda run: self.client.retrieve_run(thread.id, run.id),
            interval=self.poll_interval,
            max_attempts=self.max_attempts,
            sleep=self.sleep,
        )
        run = result.run

        if isinstance(result, RunFailed):
            raise RunNotCompletedError(
                result.status,
                thread_id=thread.id,
                run_id=run.id,
            )

        logger.info(
            "[RUN] Run %s completed after %d status checks",
            run.id,
            result.attempts,
        )

        messages = self.client.list_messages(thread.id)
        text = extract_assistant_text(messages)

        return AssistantReply(
            text=text,
            thread_id=thread.id,
            run_id=run.id,
            assistant_id=assistant.id,
        )
