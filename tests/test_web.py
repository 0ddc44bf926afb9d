import json

import pytest
from fastapi.testclient import TestClient

from paperforge import web
from paperforge.errors import ProviderNotConfiguredError

from conftest import FakeProvider


def _events(body: str) -> list[tuple[str, dict]]:
    events = []
    for block in body.strip().split("\n\n"):
        lines = dict(line.split(": ", 1) for line in block.splitlines())
        events.append((lines["event"], json.loads(lines["data"])))
    return events


@pytest.fixture
def client(monkeypatch):
    monkeypatch.setenv("CHAPTER_PAUSE", "0")
    monkeypatch.setattr(web, "get_provider", lambda name: FakeProvider())
    return TestClient(web.app)


PAYLOAD = {
    "theme": "A economia de Angola",
    "discipline": "Economia",
    "level": "Universidade",
    "pages": 6,
    "style": "Normal",
    "language": "Português Angola",
    "grade": "14-17",
}


def test_options(client):
    resp = client.get("/api/options")

    assert resp.status_code == 200
    assert resp.json()["level"] == ["Ensino Secundário", "Ensino Médio", "Técnico", "Universidade"]


def test_providers(client):
    resp = client.get("/api/providers")

    assert resp.status_code == 200
    ollama = next(p for p in resp.json() if p["name"] == "ollama")
    assert ollama["configured"] is True


def test_generate_streams_progress_then_document(client):
    resp = client.post("/generate", json=PAYLOAD)

    assert resp.status_code == 200
    events = _events(resp.text)
    kinds = [kind for kind, _ in events]
    assert kinds[0] == "progress"
    assert kinds[-1] == "done"
    assert kinds.count("progress") == 8
    assert events[0][1]["status"] == "Planeando estrutura para 6 páginas..."

    done = events[-1][1]
    assert done["title"] == "A economia de Angola"
    assert done["page_count"] == 7
    assert "<!--PAGE_BREAK-->" in done["html"]


def test_generate_rejects_invalid_body(client):
    resp = client.post("/generate", json={**PAYLOAD, "pages": 0})

    assert resp.status_code == 422


def test_generate_reports_missing_key(client, monkeypatch):
    def _raise(name):
        raise ProviderNotConfiguredError("Set GEMINI_API_KEY")

    monkeypatch.setattr(web, "get_provider", _raise)

    resp = client.post("/generate", json=PAYLOAD)

    events = _events(resp.text)
    assert [kind for kind, _ in events] == ["error"]
    assert "GEMINI_API_KEY" in events[0][1]["message"]


def test_generate_reports_pipeline_failure(client, monkeypatch):
    monkeypatch.setattr(
        web, "get_provider", lambda name: FakeProvider(failures=[None, RuntimeError("boom")])
    )

    events = _events(client.post("/generate", json=PAYLOAD).text)

    assert events[-1][0] == "error"
    assert events[-1][1]["message"] == "Erro ao gerar o trabalho. Por favor, tente novamente."


def test_generate_reports_missing_sdk(client, monkeypatch):
    def _raise(name):
        raise ImportError("Google GenAI SDK not installed. Run: pip install google-genai")

    monkeypatch.setattr(web, "get_provider", _raise)

    events = _events(client.post("/generate", json=PAYLOAD).text)

    assert [kind for kind, _ in events] == ["error"]
    assert "pip install google-genai" in events[0][1]["message"]
