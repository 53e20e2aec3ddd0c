"""API tests for the learning feature endpoints."""

import pytest

from edumorph.api.v1.concepts import STREAM_FAILED_MARKER
from edumorph.domain.exceptions import BackendError
from tests._helpers.fakes import FakeLLMClient


class TestAuthAndValidation:
    def test_missing_user_header(self, client):
        resp = client.post("/api/v1/vision", json={"concept": "Refraction"})

        assert resp.status_code == 401
        assert resp.json()["error"] == "HTTP_401"

    def test_blank_concept_rejected(self, client, auth_headers, llm_client):
        resp = client.post("/api/v1/vision", json={"concept": "   "}, headers=auth_headers)

        assert resp.status_code == 422
        assert resp.json()["error"] == "VALIDATION_ERROR"
        assert llm_client.prompts == []

    def test_unknown_persona_rejected(self, client, auth_headers):
        resp = client.post(
            "/api/v1/vision",
            json={"concept": "Refraction", "persona": "astronaut"},
            headers=auth_headers,
        )

        assert resp.status_code == 422

    def test_health(self, client):
        resp = client.get("/health")

        assert resp.status_code == 200
        assert resp.json()["status"] == "healthy"
        assert resp.json()["llm_backend"] == "mock"

    def test_request_id_echoed(self, client):
        resp = client.get("/", headers={"X-Request-ID": "req-1"})

        assert resp.headers["X-Request-ID"] == "req-1"


class TestVisionEndpoint:
    def test_generate_vision(self, client, auth_headers, llm_client):
        resp = client.post(
            "/api/v1/vision",
            json={"concept": "Refraction", "persona": "engineer"},
            headers=auth_headers,
        )

        assert resp.status_code == 200
        data = resp.json()
        assert len(data["useCases"]) == 3
        assert data["miniProject"].startswith("Build a light refraction simulation")
        assert "Persona: engineer" in llm_client.prompts[0]


class TestFailureMapping:
    @pytest.fixture
    def llm_client(self):
        return FakeLLMClient(error=BackendError("quota exceeded"))

    def test_backend_failure_returns_502(self, client, auth_headers):
        resp = client.post("/api/v1/vision", json={"concept": "Refraction"}, headers=auth_headers)

        assert resp.status_code == 502
        body = resp.json()
        assert body["error"] == "GENERATION_FAILED"
        assert body["detail"] == "Failed to generate application vision. Please try again."

    def test_failed_doubt_is_not_stored(self, client, auth_headers):
        resp = client.post(
            "/api/v1/doubts", json={"question": "What is a monad?"}, headers=auth_headers
        )

        assert resp.status_code == 502
        assert client.get("/api/v1/doubts/history", headers=auth_headers).json() == []


class TestUnparseableResponse:
    @pytest.fixture
    def llm_client(self):
        return FakeLLMClient(text="Sorry, I can only answer in prose today.")

    def test_quiz_without_json_returns_502(self, client, auth_headers):
        resp = client.post("/api/v1/quizzes", json={"topic": "SQL"}, headers=auth_headers)

        assert resp.status_code == 502
        assert "quiz questions" in resp.json()["detail"]


class TestRoadmapEndpoints:
    def test_create_fetch_and_toggle(self, client, auth_headers):
        created = client.post(
            "/api/v1/roadmaps",
            json={"learning_goal": "Data engineering", "level": "intermediate"},
            headers=auth_headers,
        )
        assert created.status_code == 200
        roadmap = created.json()
        assert roadmap["title"] == "Customized Learning Path for Data engineering"
        assert roadmap["total_milestones"] == 3
        assert roadmap["progress_percentage"] == 0.0

        toggled = client.post(
            "/api/v1/roadmaps/current/milestones/milestone-1/toggle", headers=auth_headers
        )
        assert toggled.status_code == 200
        assert toggled.json()["completed_milestones"] == 1
        assert toggled.json()["milestones"][0]["completed"] is True

        current = client.get("/api/v1/roadmaps/current", headers=auth_headers)
        assert current.json()["completed_milestones"] == 1

    def test_no_roadmap_yet(self, client, auth_headers):
        resp = client.get("/api/v1/roadmaps/current", headers=auth_headers)

        assert resp.status_code == 404
        assert resp.json()["error"] == "NOT_FOUND"

    def test_toggle_unknown_milestone(self, client, auth_headers):
        client.post("/api/v1/roadmaps", json={"learning_goal": "Go"}, headers=auth_headers)

        resp = client.post(
            "/api/v1/roadmaps/current/milestones/milestone-99/toggle", headers=auth_headers
        )

        assert resp.status_code == 404

    def test_roadmaps_are_per_user(self, client, auth_headers):
        client.post("/api/v1/roadmaps", json={"learning_goal": "Go"}, headers=auth_headers)

        resp = client.get("/api/v1/roadmaps/current", headers={"X-User-Id": "someone-else"})

        assert resp.status_code == 404


class TestDoubtEndpoints:
    def test_ask_and_history(self, client, auth_headers, llm_client):
        first = client.post(
            "/api/v1/doubts",
            json={"question": "What is recursion?", "subject": "CS"},
            headers=auth_headers,
        )
        assert first.status_code == 200
        assert first.json()["question"]["is_user"] is True
        assert first.json()["answer"]["is_user"] is False

        client.post(
            "/api/v1/doubts", json={"question": "And tail calls?"}, headers=auth_headers
        )

        second_prompt = llm_client.prompts[1]
        assert "Conversation Context:\nStudent: What is recursion?\nTutor:" in second_prompt
        assert "Student Question: And tail calls?" in second_prompt

        history = client.get("/api/v1/doubts/history", headers=auth_headers).json()
        assert [m["is_user"] for m in history] == [True, False, True, False]

    def test_rate_answer(self, client, auth_headers):
        asked = client.post(
            "/api/v1/doubts", json={"question": "What is a closure?"}, headers=auth_headers
        ).json()
        answer_id = asked["answer"]["id"]
        assert asked["answer"]["rating"] is None

        resp = client.post(
            f"/api/v1/doubts/messages/{answer_id}/rating",
            json={"rating": "down"},
            headers=auth_headers,
        )

        assert resp.status_code == 200
        assert resp.json()["rating"] == "down"
        history = client.get("/api/v1/doubts/history", headers=auth_headers).json()
        assert [m["rating"] for m in history] == [None, "down"]

    def test_rating_value_is_validated(self, client, auth_headers):
        asked = client.post(
            "/api/v1/doubts", json={"question": "What is a closure?"}, headers=auth_headers
        ).json()

        resp = client.post(
            f"/api/v1/doubts/messages/{asked['answer']['id']}/rating",
            json={"rating": "sideways"},
            headers=auth_headers,
        )

        assert resp.status_code == 422

    def test_rate_unknown_message(self, client, auth_headers):
        resp = client.post(
            "/api/v1/doubts/messages/no-such-id/rating",
            json={"rating": "up"},
            headers=auth_headers,
        )

        assert resp.status_code == 404
        assert resp.json()["error"] == "NOT_FOUND"


class TestConceptEndpoints:
    def test_explain_all_depths(self, client, auth_headers, llm_client):
        resp = client.post(
            "/api/v1/concepts",
            json={"topic": "Photosynthesis", "mode": "chef"},
            headers=auth_headers,
        )

        assert resp.status_code == 200
        data = resp.json()
        assert set(data["responses"]) == {"tldr", "eli5", "deepdive"}
        assert all(text for text in data["responses"].values())
        assert len(llm_client.prompts) == 3

        current = client.get("/api/v1/concepts/current", headers=auth_headers)
        assert current.json()["topic"] == "Photosynthesis"
        assert current.json()["mode"] == "chef"

    def test_no_concept_session_yet(self, client, auth_headers):
        resp = client.get("/api/v1/concepts/current", headers=auth_headers)

        assert resp.status_code == 404

    def test_explain_answer(self, client, auth_headers, llm_client):
        resp = client.post(
            "/api/v1/concepts/explain-answer",
            json={"concept": "Big-O", "question": "Why is binary search O(log n)?"},
            headers=auth_headers,
        )

        assert resp.status_code == 200
        assert resp.json()["explanation"]
        assert "Question Context: Why is binary search O(log n)?" in llm_client.prompts[0]


class TestConceptStreaming:
    @pytest.fixture
    def llm_client(self):
        return FakeLLMClient(fragments=["Hel", "lo", " world"])

    def test_stream_relays_fragments(self, client, auth_headers):
        with client.stream(
            "POST",
            "/api/v1/concepts/stream",
            json={"topic": "Greetings", "depth": "tldr"},
            headers=auth_headers,
        ) as resp:
            assert resp.status_code == 200
            assert resp.headers["content-type"].startswith("text/plain")
            body = "".join(resp.iter_text())

        assert body == "Hello world"

        current = client.get("/api/v1/concepts/current", headers=auth_headers).json()
        assert current["responses"] == {"tldr": "Hello world"}


class TestConceptStreamingFailures:
    @pytest.fixture
    def llm_client(self):
        return FakeLLMClient()

    def test_failure_before_first_fragment_returns_502(self, client, auth_headers, llm_client):
        llm_client.fragments = ["a", "b"]
        llm_client.fail_after = 0

        resp = client.post(
            "/api/v1/concepts/stream", json={"topic": "Entropy"}, headers=auth_headers
        )

        assert resp.status_code == 502
        assert resp.json()["error"] == "GENERATION_FAILED"
        assert resp.json()["detail"] == "Failed to generate concept explanation. Please try again."
        assert client.get("/api/v1/concepts/current", headers=auth_headers).status_code == 404

    def test_failure_mid_stream_ends_body_with_marker(self, client, auth_headers, llm_client):
        llm_client.fragments = ["Hel", "lo", "!"]
        llm_client.fail_after = 2

        with client.stream(
            "POST",
            "/api/v1/concepts/stream",
            json={"topic": "Greetings", "depth": "eli5"},
            headers=auth_headers,
        ) as resp:
            assert resp.status_code == 200
            body = "".join(resp.iter_text())

        assert body == "Hello" + STREAM_FAILED_MARKER
        assert client.get("/api/v1/concepts/current", headers=auth_headers).status_code == 404

    def test_empty_stream_is_a_successful_empty_body(self, client, auth_headers, llm_client):

        resp = client.post(
            "/api/v1/concepts/stream", json={"topic": "Nothing"}, headers=auth_headers
        )

        assert resp.status_code == 200
        assert resp.text == ""
        current = client.get("/api/v1/concepts/current", headers=auth_headers).json()
        assert current["responses"] == {"deepdive": ""}


class TestQuizEndpoints:
    def test_generate_submit_and_history(self, client, auth_headers):
        generated = client.post(
            "/api/v1/quizzes",
            json={"topic": "HTTP", "difficulty": "easy", "question_count": 4},
            headers=auth_headers,
        )
        assert generated.status_code == 200
        questions = generated.json()["questions"]
        assert len(questions) == 4
        assert all(0 <= q["correctAnswer"] < len(q["options"]) for q in questions)

        answers = [q["correctAnswer"] for q in questions[:3]] + [None]
        submitted = client.post(
            "/api/v1/quizzes/results",
            json={
                "topic": "HTTP",
                "difficulty": "easy",
                "questions": questions,
                "answers": answers,
                "time_taken": 95,
            },
            headers=auth_headers,
        )
        assert submitted.status_code == 200
        result = submitted.json()
        assert result["score"] == 3
        assert result["percentage"] == 75
        assert result["passed"] is True

        history = client.get("/api/v1/quizzes/history", headers=auth_headers).json()
        assert len(history) == 1
        assert history[0]["time_taken"] == 95

    def test_question_count_bounds(self, client, auth_headers):
        resp = client.post(
            "/api/v1/quizzes",
            json={"topic": "HTTP", "question_count": 50},
            headers=auth_headers,
        )

        assert resp.status_code == 422

    def test_invalid_answer_index_in_submission(self, client, auth_headers, quiz_payload):
        quiz_payload[0]["correctAnswer"] = 7

        resp = client.post(
            "/api/v1/quizzes/results",
            json={
                "topic": "algorithms",
                "difficulty": "medium",
                "questions": quiz_payload,
                "answers": [1, 1],
            },
            headers=auth_headers,
        )

        assert resp.status_code == 422
