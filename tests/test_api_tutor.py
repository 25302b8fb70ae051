"""
Tests for tutor conversations and the streamed reply.
"""

import json

import pytest
from openai import OpenAIError

from physics_tutor.catalog.store import ResourceStore, NewResource
from physics_tutor.routers.tutor import INTERRUPTED_NOTE
from physics_tutor.tutor.prompts import TUTOR_SYSTEM_PROMPT


def _events(resp) -> list[dict]:
    return [
        json.loads(line[len("data: "):])
        for line in resp.text.splitlines()
        if line.startswith("data: ")
    ]


@pytest.fixture
def conversation(client, auth_headers):
    resp = client.post("/api/tutor/conversations", json={"title": "Gauss's law"}, headers=auth_headers)
    assert resp.status_code == 201
    return resp.json()


@pytest.fixture
def gauss_guide(db):
    store = ResourceStore(db)
    unit = store.insert(NewResource(name="Gauss's Law", type="category"))
    guide = store.insert(NewResource(
        name="Gauss's Law Guide Sheet", type="guidesheet", url="https://x/gauss.pdf", parent_id=unit,
    ))
    db.commit()
    return guide


class TestConversations:
    def test_list_own_newest_first(self, client, auth_headers, other_headers, conversation):
        second = client.post("/api/tutor/conversations", json={"title": "Torque"}, headers=auth_headers).json()
        client.post("/api/tutor/conversations", json={"title": "Not mine"}, headers=other_headers)

        titles = [c["title"] for c in client.get("/api/tutor/conversations", headers=auth_headers).json()]
        assert titles == [second["title"], conversation["title"]]

    def test_messages_of_other_user_are_404(self, client, other_headers, conversation):
        resp = client.get(f"/api/tutor/conversations/{conversation['id']}/messages", headers=other_headers)
        assert resp.status_code == 404

    def test_post_to_other_users_conversation_is_404(self, client, other_headers, conversation):
        resp = client.post(
            f"/api/tutor/conversations/{conversation['id']}/messages",
            json={"text": "hi"}, headers=other_headers,
        )
        assert resp.status_code == 404

    def test_empty_title_rejected(self, client, auth_headers):
        resp = client.post("/api/tutor/conversations", json={"title": ""}, headers=auth_headers)
        assert resp.status_code == 422


class TestStreamingReply:
    def test_reply_is_streamed_and_stored(self, client, llm, auth_headers, conversation, gauss_guide):
        llm.chunks = ["What symmetry ", "does the charge ", "distribution have?"]
        llm.responses = ['["Gauss\'s Law guide"]']

        resp = client.post(
            f"/api/tutor/conversations/{conversation['id']}/messages",
            json={"text": "How do I use Gauss's law for a sphere?"}, headers=auth_headers,
        )
        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("text/event-stream")

        events = _events(resp)
        text = "".join(e["content"] for e in events if e["type"] == "text")
        assert text == "What symmetry does the charge distribution have?"
        suggestions = next(e for e in events if e["type"] == "suggestions")
        assert suggestions["resource_ids"] == [gauss_guide]
        assert events[-1]["type"] == "done"

        messages = client.get(
            f"/api/tutor/conversations/{conversation['id']}/messages", headers=auth_headers,
        ).json()
        assert [m["role"] for m in messages] == ["user", "model"]
        assert [m["seq"] for m in messages] == [1, 2]
        assert messages[1]["text"] == text
        assert messages[1]["suggested_resource_ids"] == [gauss_guide]

    def test_history_is_sent_to_the_model(self, client, llm, auth_headers, conversation):
        url = f"/api/tutor/conversations/{conversation['id']}/messages"
        llm.chunks = ["First answer."]
        llm.responses = ["[]"]
        client.post(url, json={"text": "First question"}, headers=auth_headers)

        llm.chunks = ["Second answer."]
        llm.responses = ["[]"]
        client.post(url, json={"text": "Second question"}, headers=auth_headers)

        prompt = llm.calls[-2]
        assert prompt[0] == {"role": "system", "content": TUTOR_SYSTEM_PROMPT}
        assert prompt[1:] == [
            {"role": "user", "content": "First question"},
            {"role": "assistant", "content": "First answer."},
            {"role": "user", "content": "Second question"},
        ]

        seqs = [m["seq"] for m in client.get(url, headers=auth_headers).json()]
        assert seqs == [1, 2, 3, 4]

    def test_unusable_suggestions_are_skipped(self, client, llm, auth_headers, conversation):
        llm.chunks = ["Think about flux."]
        llm.responses = ["Sorry, no queries."]
        resp = client.post(
            f"/api/tutor/conversations/{conversation['id']}/messages",
            json={"text": "Flux?"}, headers=auth_headers,
        )
        suggestions = next(e for e in _events(resp) if e["type"] == "suggestions")
        assert suggestions["resource_ids"] == []

    def test_interrupted_stream_keeps_partial_reply(self, client, llm, auth_headers, conversation):
        llm.chunks = ["Start with "]
        llm.stream_error = OpenAIError("connection reset")
        resp = client.post(
            f"/api/tutor/conversations/{conversation['id']}/messages",
            json={"text": "Explain induction"}, headers=auth_headers,
        )
        events = _events(resp)
        assert events[-1]["type"] == "error"
        assert not any(e["type"] == "done" for e in events)

        messages = client.get(
            f"/api/tutor/conversations/{conversation['id']}/messages", headers=auth_headers,
        ).json()
        assert messages[1]["text"] == "Start with " + INTERRUPTED_NOTE
        assert messages[1]["suggested_resource_ids"] is None
