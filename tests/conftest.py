from __future__ import annotations

import json
from types import SimpleNamespace

import pytest

from fossflow_ai.agents import diagram_agent
from fossflow_ai.models.ai_config import AIServiceConfig


class FakeCompletions:
    def __init__(self, content):
        self.content = content
        self.calls = []
        self.client_args = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        message = SimpleNamespace(content=self.content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def fake_llm(monkeypatch):
    """Route the diagram agent to a canned chat-completions response."""

    def _install(content):
        completions = FakeCompletions(content)
        client = SimpleNamespace(chat=SimpleNamespace(completions=completions))

        def _get_client(api_key, api_endpoint):
            completions.client_args.append((api_key, api_endpoint))
            return client

        monkeypatch.setattr(diagram_agent, "get_openai_client", _get_client)
        return completions

    return _install


@pytest.fixture
def ai_config():
    return AIServiceConfig(
        api_endpoint="https://llm.example.test/v1/chat/completions",
        api_key="test-key",
        model="test-model",
        temperature=0.3,
        max_tokens=1024,
    )


@pytest.fixture
def valid_payload():
    return {
        "t": "Checkout",
        "i": [["Shopper", "person"], ["Web", "desktop"], ["Orders DB", "database", "Postgres"]],
        "v": [[[[0, 0, 0], [1, 4, 0]], [[0, 1], [1, 2]]]],
        "_": {"f": "compact", "v": "1.0"},
    }


@pytest.fixture
def valid_payload_text(valid_payload):
    return "```json\n" + json.dumps(valid_payload) + "\n```"
