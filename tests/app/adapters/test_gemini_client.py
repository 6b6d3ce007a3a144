"""Tests for GeminiClient."""

from unittest.mock import MagicMock

import pytest
import requests

from app.adapters.gemini import GeminiClient, Turn
from app.exceptions import UpstreamError


def gemini_response(text="Hi there!", total_tokens=17):
    data = {
        "candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}],
    }
    if total_tokens is not None:
        data["usageMetadata"] = {"totalTokenCount": total_tokens}
    return data


def fake_http(status_code=200, json_data=None, text=""):
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = 200 <= status_code < 300
    resp.text = text
    resp.json.return_value = json_data
    session = MagicMock()
    session.post.return_value = resp
    return session


def make_client(session):
    return GeminiClient(
        api_key="test-key",
        model="gemini-2.0-flash",
        api_base="https://gemini.test/v1beta",
        timeout=5,
        session=session,
    )


TURNS = [Turn(role="user", text="system"), Turn(role="model", text="ok"), Turn(role="user", text="hello")]


def test_generate_success():
    session = fake_http(json_data=gemini_response())
    result = make_client(session).generate(TURNS)
    assert result.text == "Hi there!"
    assert result.tokens_used == 17

    _, kwargs = session.post.call_args
    assert session.post.call_args[0][0] == (
        "https://gemini.test/v1beta/models/gemini-2.0-flash:generateContent"
    )
    assert kwargs["params"] == {"key": "test-key"}
    assert kwargs["timeout"] == 5
    payload = kwargs["json"]
    assert [c["role"] for c in payload["contents"]] == ["user", "model", "user"]
    assert payload["contents"][2]["parts"] == [{"text": "hello"}]
    assert payload["generationConfig"]["maxOutputTokens"] == 2048
    assert payload["generationConfig"]["temperature"] == 0.9
    assert len(payload["safetySettings"]) == 4
    assert all(s["threshold"] == "BLOCK_MEDIUM_AND_ABOVE" for s in payload["safetySettings"])


def test_generate_missing_usage_defaults_to_zero():
    session = fake_http(json_data=gemini_response(total_tokens=None))
    assert make_client(session).generate(TURNS).tokens_used == 0


def test_generate_non_success_status():
    session = fake_http(status_code=429, text="quota exceeded")
    with pytest.raises(UpstreamError) as exc_info:
        make_client(session).generate(TURNS)
    assert "429" in exc_info.value.details


@pytest.mark.parametrize(
    "data",
    [
        {},
        {"candidates": []},
        {"candidates": [{"content": {"parts": []}}]},
        {"candidates": [{"finishReason": "SAFETY"}]},
        {"candidates": [{"content": {"parts": [{"text": ""}]}}]},
    ],
)
def test_generate_malformed_response(data):
    session = fake_http(json_data=data)
    with pytest.raises(UpstreamError):
        make_client(session).generate(TURNS)


def test_generate_transport_error():
    session = MagicMock()
    session.post.side_effect = requests.ConnectionError("boom")
    with pytest.raises(UpstreamError):
        make_client(session).generate(TURNS)


def test_generate_without_api_key():
    client = GeminiClient(api_key="", session=MagicMock())
    with pytest.raises(UpstreamError):
        client.generate(TURNS)
