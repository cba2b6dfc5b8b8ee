"""Tests for cli/main.py"""

from types import SimpleNamespace

import pytest
from openai import OpenAIError

from cli import main as cli_main

from conftest import FakeAssistantsClient


@pytest.fixture
def uvicorn_calls(monkeypatch):
    calls = []
    monkeypatch.setattr(cli_main.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    return calls


def test_serve_aborts_without_configuration(env, monkeypatch, uvicorn_calls, capsys):
    monkeypatch.delenv("AZURE_OPENAI_ENDPOINT")

    assert cli_main.main(["serve"]) == 1
    assert uvicorn_calls == []
    assert "AZURE_OPENAI_ENDPOINT" in capsys.readouterr().err


def test_serve_uses_port_from_environment(env, monkeypatch, uvicorn_calls):
    monkeypatch.setenv("PORT", "8123")

    assert cli_main.main(["serve"]) == 0
    app, kwargs = uvicorn_calls[0]
    assert kwargs["port"] == 8123
    assert kwargs["host"] == "0.0.0.0"
    assert app.state.settings.port == 8123


def test_serve_defaults_to_port_3000(env, uvicorn_calls):
    cli_main.main(["serve", "--host", "127.0.0.1"])

    _, kwargs = uvicorn_calls[0]
    assert kwargs["port"] == 3000
    assert kwargs["host"] == "127.0.0.1"


def test_ask_prints_reply(env, monkeypatch, capsys):
    fake = FakeAssistantsClient(reply="Welcome to Nexalaris Tech!")
    monkeypatch.setattr(cli_main, "build_client", lambda settings: fake)

    assert cli_main.main(["ask", "hi"]) == 0

    out = capsys.readouterr().out
    assert "thread_123" in out
    assert "run_123" in out
    assert "Welcome to Nexalaris Tech!" in out
    assert fake.submitted[0]["content"] == "hi"


def test_ask_reports_failed_run(env, monkeypatch, capsys):
    fake = FakeAssistantsClient(statuses=("failed",))
    monkeypatch.setattr(cli_main, "build_client", lambda settings: fake)

    assert cli_main.main(["ask", "hi"]) == 1
    assert "Run status is failed" in capsys.readouterr().out


class UnavailableClient(FakeAssistantsClient):
    def create_assistant(self, **options):
        raise OpenAIError("service unavailable")


@pytest.mark.parametrize(
    "fake, reason",
    [
        (UnavailableClient(), "service unavailable"),
        (FakeAssistantsClient(messages=[]), "No assistant message found"),
    ],
)
def test_ask_reports_assistant_errors(env, monkeypatch, capsys, fake, reason):
    monkeypatch.setattr(cli_main, "build_client", lambda settings: fake)

    assert cli_main.main(["ask", "hi"]) == 1
    assert f"Error running the assistant: {reason}" in capsys.readouterr().err


def test_create_assistant_prints_definition(env, monkeypatch, capsys):
    assistant = SimpleNamespace(id="asst_9", model_dump_json=lambda indent: '{"id": "asst_9"}')
    client = SimpleNamespace(create_assistant=lambda **options: assistant)
    monkeypatch.setattr(cli_main, "build_client", lambda settings: client)

    assert cli_main.main(["create-assistant"]) == 0
    assert '{"id": "asst_9"}' in capsys.readouterr().out


def test_unknown_command_exits():
    with pytest.raises(SystemExit):
        cli_main.main(["bogus"])
