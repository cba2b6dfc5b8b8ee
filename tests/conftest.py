"""
Common test fixtures: environment, settings, and a fake assistants client
that records every remote call instead of making it.
"""
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from configs.settings import Settings
from runtime.api.server import create_app


def text_message(role, value):
    """A thread message with a single text part, shaped like the SDK's."""
    return SimpleNamespace(
        role=role,
        content=[SimpleNamespace(type="text", text=SimpleNamespace(value=value))],
    )


class FakeAssistantsClient:
    """
    Stand-in for core.api.openai_client.AssistantsClient.

    `statuses` are handed out one per create_run / retrieve_run call; the
    last one repeats once the list is exhausted.
    """

    def __init__(self, statuses=("completed",), reply="Hello from Celesh", messages=None):
        self.statuses = list(statuses)
        if messages is None:
            messages = [text_message("assistant", reply), text_message("user", "hi")]
        self.messages = messages
        self.calls = []
        self.assistant_options = []
        self.submitted = []
        self.run_kwargs = []

    def _next_status(self):
        if len(self.statuses) > 1:
            return self.statuses.pop(0)
        return self.statuses[0]

    def create_assistant(self, **options):
        self.calls.append("create_assistant")
        self.assistant_options.append(options)
        return SimpleNamespace(id="asst_123")

    def create_thread(self):
        self.calls.append("create_thread")
        return SimpleNamespace(id="thread_123")

    def add_message(self, thread_id, content, role="user"):
        self.calls.append("add_message")
        self.submitted.append({"thread_id": thread_id, "role": role, "content": content})

    def create_run(self, thread_id, assistant_id, additional_instructions=None):
        self.calls.append("create_run")
        self.run_kwargs.append(
            {
                "thread_id": thread_id,
                "assistant_id": assistant_id,
                "additional_instructions": additional_instructions,
            }
        )
        return SimpleNamespace(id="run_123", status=self._next_status())

    def retrieve_run(self, thread_id, run_id):
        self.calls.append("retrieve_run")
        return SimpleNamespace(id=run_id, status=self._next_status())

    def list_messages(self, thread_id):
        self.calls.append("list_messages")
        return list(self.messages)


@pytest.fixture
def env(monkeypatch):
    monkeypatch.setenv("AZURE_OPENAI_KEY", "test-key")
    monkeypatch.setenv("AZURE_OPENAI_ENDPOINT", "https://example.openai.azure.com/")
    for name in ("APP_ENV", "NODE_ENV", "PORT", "ASSISTANT_MODEL", "ASSISTANT_VECTOR_STORE_ID", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def settings(env):
    return Settings()


@pytest.fixture
def fake_client():
    return FakeAssistantsClient()


@pytest.fixture
def make_test_client():
    """Build a TestClient around a fake assistants client, with no-op sleeps."""

    def _make(settings, fake):
        app = create_app(settings, client_factory=lambda s: fake, sleep=lambda _: None)
        return TestClient(app)

    return _make


@pytest.fixture
def client(settings, fake_client, make_test_client):
    return make_test_client(settings, fake_client)
