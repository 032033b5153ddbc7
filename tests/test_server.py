# tests/test_server.py
import json

import pytest
from fastapi.testclient import TestClient

from advisor import server


@pytest.fixture
def client(engine, monkeypatch):
    monkeypatch.setattr(server, "engine", engine)
    monkeypatch.setattr(server, "chat_sessions", {})
    with TestClient(server.app) as test_client:
        yield test_client


@pytest.fixture
def chat_id(client):
    return client.post("/chats").json()["id"]


def test_health(client):
    data = client.get("/health").json()
    assert data["status"] == "healthy"
    assert data["conditions"] == 4
    assert data["active_sessions"] == 0


def test_create_chat_returns_welcome(client):
    data = client.post("/chats").json()
    assert data["id"]
    assert data["welcome"].startswith("Hello! I'm your medical health assistant.")


def test_send_message(client, chat_id):
    response = client.post(f"/chats/{chat_id}", json={"message": "I have a headache"})
    assert response.status_code == 200
    data = response.json()
    assert data["chat_id"] == chat_id
    assert "a. migraine" in data["response"]
    assert data["turn"] == 1
    assert data["is_emergency"] is False
    assert data["definition"] is None


def test_emergency_flag_does_not_change_reply(client, chat_id, engine):
    data = client.post(f"/chats/{chat_id}", json={"message": "chest pain"}).json()
    assert data["is_emergency"] is True
    assert data["response"] == engine.respond("chest pain")


def test_unknown_chat_returns_404(client):
    assert client.post("/chats/missing", json={"message": "fever"}).status_code == 404
    assert client.get("/chats/missing").status_code == 404


def test_stream_preserves_lines(client, chat_id, engine):
    response = client.post(f"/chats/{chat_id}/stream", json={"message": "fever"})
    events = [line[len("data: "):] for line in response.text.split("\n\n") if line.startswith("data: ")]
    assert events[-1] == "[DONE]"
    streamed = "".join(json.loads(e)["content"] for e in events[:-1])
    assert streamed == engine.respond("fever") + "\n"


def test_state_transcript_and_restart(client, chat_id):
    client.post(f"/chats/{chat_id}", json={"message": "hello"})

    state = client.get(f"/chats/{chat_id}").json()
    assert state["turn"] == 1
    assert [m["role"] for m in state["history"]] == ["user", "assistant"]

    transcript = client.get(f"/chats/{chat_id}/transcript").text
    assert transcript.startswith("You:\nhello")

    assert client.post(f"/chats/{chat_id}/restart").status_code == 200
    assert client.get(f"/chats/{chat_id}").json()["history"] == []


def test_delete_chat(client, chat_id):
    assert client.delete(f"/chats/{chat_id}").status_code == 200
    assert client.get(f"/chats/{chat_id}").status_code == 404


def test_diary_endpoints(client, chat_id):
    response = client.post(f"/chats/{chat_id}/diary", json={"symptom": "headache", "severity": 6, "notes": "evening"})
    assert response.status_code == 201
    assert response.json()["severity"] == 6

    entries = client.get(f"/chats/{chat_id}/diary").json()
    assert [e["symptom"] for e in entries] == ["headache"]


def test_diary_rejects_bad_severity(client, chat_id):
    response = client.post(f"/chats/{chat_id}/diary", json={"symptom": "headache", "severity": 11})
    assert response.status_code == 422


def test_terms_and_emergency(client):
    terms = client.get("/terms", params={"q": "heart"}).json()
    assert {"tachycardia", "arrhythmia"} <= {t["term"] for t in terms}

    emergency = client.get("/emergency").json()
    assert emergency["contacts"]["Emergency Services"] == "911"
    assert "Severe bleeding" in emergency["signs"]
