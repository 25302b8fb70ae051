"""
Tests for question generation, the question library, problem-solver help
and practice attempts.
"""

import json

import pytest
from openai import OpenAIError

from physics_tutor.content.topics import TOPICS
from physics_tutor.models import Question

MCQ_OUTPUT = json.dumps({
    "questionText": "A ball is thrown straight up at $10\\,m/s$. How high does it rise?",
    "explanation": "$h = v^2 / 2g \\approx 5.1\\,m$",
    "choices": ["A) 2.5 m", "B) 5.1 m", "C) 10 m", "D) 20 m"],
    "correctChoice": "B",
})

SVG_OUTPUT = '```svg\n<svg viewBox="0 0 100 100">\n<circle cx="50" cy="50" r="10"/>\n</svg>\n```'

SAVED = {
    "topic": "Kinematics",
    "question_type": "MCQ",
    "difficulty": "easy",
    "question_text": "A ball is thrown straight up at 10 m/s. How high does it rise?",
    "explanation": "h = v^2 / 2g",
    "choices": ["A) 2.5 m", "B) 5.1 m"],
    "correct_choice": "B) 5.1 m",
    "generate_diagram": False,
}


def _save(client, headers, **overrides):
    resp = client.post("/api/questions", json=dict(SAVED, **overrides), headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()


class TestTopics:
    def test_topics(self, client):
        assert client.get("/api/questions/topics").json() == TOPICS


class TestGenerate:
    def test_generate_mcq(self, client, llm, auth_headers):
        llm.responses = [f"Here you go:\n{MCQ_OUTPUT}"]
        resp = client.post("/api/questions/generate", json={
            "topic": "Kinematics", "question_type": "MCQ", "difficulty": "easy",
        }, headers=auth_headers)
        assert resp.status_code == 200
        body = resp.json()
        assert body["correct_choice"] == "B) 5.1 m"
        assert body["topic"] == "Kinematics"

    def test_generate_does_not_save(self, client, llm, auth_headers, db):
        llm.responses = [MCQ_OUTPUT]
        client.post("/api/questions/generate", json={
            "topic": "Kinematics", "question_type": "MCQ", "difficulty": "easy",
        }, headers=auth_headers)
        assert db.query(Question).count() == 0

    def test_unusable_output_is_502(self, client, llm, auth_headers):
        llm.responses = ["I'd rather not."]
        resp = client.post("/api/questions/generate", json={
            "topic": "Kinematics", "question_type": "FRQ", "difficulty": "hard",
        }, headers=auth_headers)
        assert resp.status_code == 502

    def test_llm_failure_is_502(self, client, llm, auth_headers):
        llm.responses = [OpenAIError("upstream down")]
        resp = client.post("/api/questions/generate", json={
            "topic": "Kinematics", "question_type": "FRQ", "difficulty": "hard",
        }, headers=auth_headers)
        assert resp.status_code == 502

    def test_bad_question_type(self, client, auth_headers):
        resp = client.post("/api/questions/generate", json={
            "topic": "Kinematics", "question_type": "TF", "difficulty": "easy",
        }, headers=auth_headers)
        assert resp.status_code == 422

    def test_requires_auth(self, client):
        resp = client.post("/api/questions/generate", json={
            "topic": "Kinematics", "question_type": "MCQ", "difficulty": "easy",
        })
        assert resp.status_code == 401


class TestLibrary:
    def test_save_and_get(self, client, auth_headers):
        saved = _save(client, auth_headers)
        body = client.get(f"/api/questions/{saved['id']}", headers=auth_headers).json()
        assert body["question_text"] == SAVED["question_text"]
        assert body["diagram"] is None

    def test_frq_drops_choices(self, client, auth_headers):
        saved = _save(client, auth_headers, question_type="FRQ", answer="5.1 m")
        assert saved["choices"] is None
        assert saved["correct_choice"] is None
        assert saved["answer"] == "5.1 m"

    def test_save_generates_diagram_in_background(self, client, llm, auth_headers):
        llm.responses = [SVG_OUTPUT]
        saved = _save(client, auth_headers, generate_diagram=True)
        body = client.get(f"/api/questions/{saved['id']}", headers=auth_headers).json()
        assert body["diagram"].startswith("<svg")

    def test_background_diagram_failure_keeps_question(self, client, llm, auth_headers):
        llm.responses = ["no drawing today"]
        saved = _save(client, auth_headers, generate_diagram=True)
        body = client.get(f"/api/questions/{saved['id']}", headers=auth_headers).json()
        assert body["diagram"] is None

    def test_other_users_question_is_404(self, client, auth_headers, other_headers):
        saved = _save(client, auth_headers)
        assert client.get(f"/api/questions/{saved['id']}", headers=other_headers).status_code == 404
        assert client.get("/api/questions/missing", headers=auth_headers).status_code == 404

    def test_filters(self, client, auth_headers, other_headers):
        _save(client, auth_headers, topic="Kinematics", difficulty="easy")
        _save(client, auth_headers, topic="Gauss's Law", difficulty="hard")
        _save(client, auth_headers, topic="Gauss's Law", difficulty="easy", question_type="FRQ")
        _save(client, other_headers, topic="Gauss's Law")

        def listed(**params):
            return client.get("/api/questions", params=params, headers=auth_headers).json()

        assert len(listed()) == 3
        assert len(listed(topic="all", question_type="all", difficulty="all")) == 3
        assert len(listed(topic="Gauss's Law")) == 2
        assert len(listed(topic="Gauss's Law", question_type="MCQ")) == 1
        assert len(listed(difficulty="easy")) == 2

    def test_newest_first(self, client, auth_headers):
        first = _save(client, auth_headers, question_text="first")
        second = _save(client, auth_headers, question_text="second")
        ids = [q["id"] for q in client.get("/api/questions", headers=auth_headers).json()]
        assert ids.index(second["id"]) < ids.index(first["id"])


class TestDiagrams:
    def test_create_and_remove(self, client, llm, auth_headers):
        saved = _save(client, auth_headers)
        llm.responses = [SVG_OUTPUT]
        created = client.post(f"/api/questions/{saved['id']}/diagram", headers=auth_headers)
        assert created.status_code == 200
        assert "<circle" in created.json()["diagram"]
        assert "\n" not in created.json()["diagram"]

        removed = client.delete(f"/api/questions/{saved['id']}/diagram", headers=auth_headers)
        assert removed.json()["diagram"] is None

    def test_output_without_svg_is_502(self, client, llm, auth_headers):
        saved = _save(client, auth_headers)
        llm.responses = ["Here is a description of the diagram instead."]
        resp = client.post(f"/api/questions/{saved['id']}/diagram", headers=auth_headers)
        assert resp.status_code == 502


class TestProblemHelp:
    def test_hint(self, client, llm, auth_headers):
        saved = _save(client, auth_headers)
        llm.responses = ["Start from energy conservation."]
        resp = client.post(f"/api/questions/{saved['id']}/hints", json={
            "hint_index": 1, "previous_hints": ["Draw the situation."],
        }, headers=auth_headers)
        assert resp.json() == {"text": "Start from energy conservation."}
        prompt = llm.calls[-1][-1]["content"]
        assert "Draw the situation." in prompt

    def test_chat(self, client, llm, auth_headers):
        llm.responses = ["What do you know about the velocity at the top?"]
        resp = client.post("/api/questions/chat", json={
            "message": "I'm stuck", "question": SAVED["question_text"], "choices": SAVED["choices"],
        }, headers=auth_headers)
        assert resp.status_code == 200
        assert resp.json()["text"].startswith("What do you know")


class TestAttempts:
    def test_attempts_update_mastery(self, client, auth_headers):
        saved = _save(client, auth_headers)
        first = client.post(f"/api/questions/{saved['id']}/attempts", json={"correct": True}, headers=auth_headers)
        assert first.status_code == 201
        assert first.json()["mastery_score"] == pytest.approx(0.3)

        second = client.post(f"/api/questions/{saved['id']}/attempts", json={"correct": False}, headers=auth_headers)
        body = second.json()
        assert body["attempts"] == 2
        assert body["correct"] == 1
        assert body["mastery_score"] == pytest.approx(0.21)
