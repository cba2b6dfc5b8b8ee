"""Tests for core/assistant/formatting.py"""

import pytest

from core.assistant.formatting import (
    format_payload,
    format_transcript,
    is_empty_payload,
    is_transcript_payload,
)


def test_transcript_lines():
    transcript = [{"role": "user", "text": "hi"}, {"role": "agent", "text": "hello"}]
    assert format_transcript(transcript) == "user: hi\nagent: hello"


def test_transcript_payload_is_flattened():
    payload = {"transcript": [{"role": "user", "text": "hi"}, {"role": "agent", "text": "hello"}]}
    assert is_transcript_payload(payload)
    assert format_payload(payload) == "user: hi\nagent: hello"


def test_transcript_of_non_objects_is_generic_json():
    payload = {"transcript": ["hi", "hello"]}
    assert not is_transcript_payload(payload)
    assert format_payload(payload) == '{\n  "transcript": [\n    "hi",\n    "hello"\n  ]\n}'


def test_object_is_pretty_printed():
    assert format_payload({"a": 1}) == '{\n  "a": 1\n}'


def test_array_is_pretty_printed():
    assert format_payload([1, 2]) == "[\n  1,\n  2\n]"


def test_non_ascii_is_kept():
    assert format_payload({"msg": "olá"}) == '{\n  "msg": "olá"\n}'


@pytest.mark.parametrize(
    "payload, expected",
    [
        ("just some text", "just some text"),
        (42, "42"),
        (3.5, "3.5"),
        (True, "true"),
    ],
)
def test_scalars(payload, expected):
    assert format_payload(payload) == expected


@pytest.mark.parametrize("payload", [None, "", "   ", {}, [], False, 0, 0.0])
def test_empty_payloads(payload):
    assert is_empty_payload(payload)


@pytest.mark.parametrize("payload", [1, True, "0", "x", {"a": None}, [None]])
def test_non_empty_payloads(payload):
    assert not is_empty_payload(payload)
