"""
core.api.openai_client

Thin wrapper around the Azure OpenAI Assistants API.

Used by:
  - runtime/agents/assistant_runner.py
  - cli/main.py

Only the six calls the relay needs are exposed. Transport, auth and
rate-limit failures are raised unchanged as `openai.OpenAIError`; nothing
here retries.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from openai import AzureOpenAI

from configs.settings import Settings


logger = logging.getLogger(__name__)


# -------------------------------------------------------------------
# Client construction
# -------------------------------------------------------------------


def build_azure_client(settings: Settings) -> AzureOpenAI:
    """
    Create an AzureOpenAI SDK client from settings.

    Reading the key and endpoint raises ConfigurationError when either is
    unset, so no client is ever built without credentials.
    """
    api_key = settings.azure_openai_key
    return AzureOpenAI(
        azure_endpoint=settings.azure_openai_endpoint,
        api_key=api_key,
        api_version=settings.api_version,
        default_headers={"api-key": api_key},
        max_retries=0,
    )


def build_client(settings: Settings) -> "AssistantsClient":
    """Default client factory used by the HTTP app and the CLI."""
    return AssistantsClient(build_azure_client(settings))


# -------------------------------------------------------------------
# Adapter
# -------------------------------------------------------------------


class AssistantsClient:
    """Assistants / threads / runs / messages calls over one SDK client."""

    def __init__(self, client: AzureOpenAI) -> None:
        self._client = client

    def create_assistant(self, **options: Any) -> Any:
        assistant = self._client.beta.assistants.create(**options)
        logger.info("[RUN] Assistant created: %s", assistant.id)
        return assistant

    def create_thread(self) -> Any:
        thread = self._client.beta.threads.create()
        logger.info("[RUN] Thread created: %s", thread.id)
        return thread

    def add_message(self, thread_id: str, content: str, role: str = "user") -> Any:
        return self._client.beta.threads.messages.create(
            thread_id=thread_id,
            role=role,
            content=content,
        )

    def create_run(
        self,
        thread_id: str,
        assistant_id: str,
        additional_instructions: Optional[str] = None,
    ) -> Any:
        params: Dict[str, Any] = {"assistant_id": assistant_id}
        if additional_instructions:
            params["additional_instructions"] = additional_instructions

        run = self._client.beta.threads.runs.create(thread_id=thread_id, **params)
        logger.info("[RUN] Run started: %s (status=%s)", run.id, run.status)
        return run

    def retrieve_run(self, thread_id: str, run_id: str) -> Any:
        return self._client.beta.threads.runs.retrieve(
            run_id=run_id,
            thread_id=thread_id,
        )

    def list_messages(self, thread_id: str) -> List[Any]:
        """Messages of a thread, newest first."""
        page = self._client.beta.threads.messages.list(
            thread_id=thread_id,
            order="desc",
        )
        return list(page.data)
