from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from fossflow_ai import server
from fossflow_ai.server import app
from fossflow_ai.services.diagram_service import GenerationInProgressError
from fossflow_ai.tools.schema_validator import CompactSchemaError


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_list_icons(client):
    icons = client.get("/api/icons").json()["icons"]
    assert icons[0] == {"id": "block", "name": "Block", "description": "Generic component"}
    assert len(icons) == 37


def test_list_presets(client):
    presets = client.get("/api/ai/presets").json()["presets"]
    assert presets["ollama"]["model"] == "llama3"


def test_normalize_structured_payload(client):
    payload = {"diagram": {"t": "Demo", "i": [["A", "block"], ["B", "unknown_icon_xyz"]], "v": [[[[0, 0, 0]], [[0, 1]]]]}}
    body = client.post("/api/diagrams/normalize", json=payload).json()
    assert body["diagram"]["i"] == [["A", "block", ""], ["B", "block", ""]]
    assert body["diagram"]["v"] == [[[[0, 0, 0], [1, 0, 0]], [[0, 1]]]]
    assert body["summary"].startswith("📊 Demo")


def test_normalize_text_with_host_icons(client):
    payload = {
        "text": '```json\n{"t": "x", "i": [["Fn", "aws-lambda"]], "v": []}\n```',
        "existing_icons": [{"id": "aws-lambda"}],
    }
    body = client.post("/api/diagrams/normalize", json=payload).json()
    assert body["diagram"]["i"] == [["Fn", "aws-lambda", ""]]


def test_normalize_invalid_text(client):
    response = client.post("/api/diagrams/normalize", json={"text": "{oops"})
    assert response.status_code == 400
    assert "invalid JSON" in response.json()["detail"]


def test_validate_reports_first_error(client):
    body = client.post("/api/diagrams/validate", json={"diagram": {"t": "x", "i": [["A"]]}}).json()
    assert body["valid"] is False
    assert body["field"] == "i"
    assert body["index"] == 0


def test_validate_accepts_valid(client, valid_payload):
    assert client.post("/api/diagrams/validate", json={"diagram": valid_payload}).json()["valid"] is True


def test_summary(client, valid_payload):
    body = client.post("/api/diagrams/summary", json={"diagram": valid_payload}).json()
    assert "🔲 3 item(s):" in body["summary"]


def test_generate_without_config(client, monkeypatch):
    monkeypatch.setattr(server, "load_ai_config", lambda: None)
    response = client.post("/api/diagrams/generate", json={"prompt": "shop"})
    assert response.status_code == 400


def test_generate_with_inline_config(client, fake_llm, ai_config, valid_payload_text):
    fake_llm(valid_payload_text)
    payload = {"prompt": "shop", "config": ai_config.model_dump()}
    body = client.post("/api/diagrams/generate", json=payload).json()
    assert body["raw"]["t"] == "Checkout"
    assert body["diagram"]["i"][0] == ["Shopper", "user", ""]
    assert len(body["diagram"]["v"][0][0]) == 3


def test_generate_invalid_json_from_model(client, fake_llm, ai_config):
    fake_llm("no diagram for you")
    response = client.post("/api/diagrams/generate", json={"prompt": "shop", "config": ai_config.model_dump()})
    assert response.status_code == 502
    assert "try again" in response.json()["detail"]


def test_generate_schema_error(client, monkeypatch, ai_config):
    def failing(*args, **kwargs):
        raise CompactSchemaError('Diagram must have at least one item in "i"', field="i")

    monkeypatch.setattr(server, "generate_diagram", failing)
    response = client.post("/api/diagrams/generate", json={"prompt": "shop", "config": ai_config.model_dump()})
    assert response.status_code == 502
    assert response.json()["detail"]["field"] == "i"


def test_generate_in_progress(client, monkeypatch, ai_config):
    def busy(*args, **kwargs):
        raise GenerationInProgressError()

    monkeypatch.setattr(server, "generate_diagram", busy)
    response = client.post("/api/diagrams/generate", json={"prompt": "shop", "config": ai_config.model_dump()})
    assert response.status_code == 409


def test_generate_blank_prompt(client, ai_config):
    response = client.post("/api/diagrams/generate", json={"prompt": "  ", "config": ai_config.model_dump()})
    assert response.status_code == 400


def test_generate_rejects_nan_from_model(client, fake_llm, ai_config):
    fake_llm('{"t": "x", "i": [["A", "block"]], "v": [[[[0, NaN, Infinity]], []]]}')
    response = client.post("/api/diagrams/generate", json={"prompt": "shop", "config": ai_config.model_dump()})
    assert response.status_code == 502
    assert "try again" in response.json()["detail"]
