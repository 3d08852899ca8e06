# tests/test_quiz_api.py
import pytest
from fastapi.testclient import TestClient

from app.models.article import Article

SERVICE = "app.endpoints.quiz.article_service"

ARTICLES = [
    Article(uid="a1", headline="First", content="One"),
    Article(uid="a2", headline="Second", content="Two"),
    Article(uid="a3", headline="Third", content="Three"),
]


@pytest.mark.api
class TestGetQuizAPI:
    def test_returns_collaborator_articles(self, client: TestClient, monkeypatch):
        """Test retrieving the articles chosen for a user."""
        calls = []

        async def fake_fetch(db, user_uid):
            calls.append(user_uid)
            return ARTICLES

        monkeypatch.setattr(f"{SERVICE}.fetch_articles_for_user", fake_fetch)

        response = client.get("/api/quiz", params={"userUid": "u1", "locale": "en"})
        assert response.status_code == 200
        assert response.json() == [a.model_dump() for a in ARTICLES]
        assert calls == ["u1"]

    @pytest.mark.parametrize("params, message", [
        ({"locale": "en"}, "User ID is required"),
        ({"userUid": "", "locale": "en"}, "User ID is required"),
        ({"userUid": "u1"}, "Locale is required"),
        ({"userUid": "u1", "locale": ""}, "Locale is required"),
        ({}, "User ID is required"),
        ({"locale": "en", "extra": "ignored"}, "User ID is required"),
    ])
    def test_missing_parameters(self, client: TestClient, params, message):
        """Test the message for each missing query parameter."""
        response = client.get("/api/quiz", params=params)
        assert response.status_code == 400
        assert response.json() == {"error": message}

    def test_nothing_found(self, client: TestClient, monkeypatch):
        """Test that an empty article set returns 404."""
        async def fake_fetch(db, user_uid):
            return []

        monkeypatch.setattr(f"{SERVICE}.fetch_articles_for_user", fake_fetch)
        response = client.get("/api/quiz", params={"userUid": "u1", "locale": "en"})
        assert response.status_code == 404
        assert response.json() == {"error": "Quiz questions not found"}

    def test_internal_error_hides_detail(self, client: TestClient, monkeypatch):
        """Test that an unexpected failure returns 500 without details."""
        async def fake_fetch(db, user_uid):
            raise RuntimeError("password=hunter2")

        monkeypatch.setattr(f"{SERVICE}.fetch_articles_for_user", fake_fetch)
        response = client.get("/api/quiz", params={"userUid": "u1", "locale": "en"})
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}


@pytest.mark.api
class TestPostQuizAPI:
    @pytest.mark.parametrize("returned", [True, False])
    def test_reports_correctness(self, client: TestClient, monkeypatch, valid_answer, returned):
        """Test that the stored answer's correctness is returned."""
        stored = []

        async def fake_store(db, response):
            stored.append(response)
            return returned

        monkeypatch.setattr(f"{SERVICE}.store_user_response", fake_store)
        response = client.post("/api/quiz", params={"userUid": "u1"}, json=valid_answer)
        assert response.status_code == 200
        assert response.json() == {"isCorrect": returned}
        assert len(stored) == 1
        assert stored[0].user_uid == "u1"
        assert stored[0].article_uid == valid_answer["articleUid"]
        assert stored[0].time_to_respond == valid_answer["timeToRespond"]

    def test_not_stored(self, client: TestClient, monkeypatch, valid_answer):
        """Test that an unstored answer returns 404."""
        async def fake_store(db, response):
            return None

        monkeypatch.setattr(f"{SERVICE}.store_user_response", fake_store)
        response = client.post("/api/quiz", params={"userUid": "u1"}, json=valid_answer)
        assert response.status_code == 404
        assert response.json() == {"error": "User response not stored"}

    def test_missing_user(self, client: TestClient, valid_answer):
        """Test that an answer without a user id is rejected."""
        response = client.post("/api/quiz", json=valid_answer)
        assert response.status_code == 400
        assert response.json() == {"error": "User ID is required"}

    def test_empty_body(self, client: TestClient):
        """Test that an answer without a body is rejected."""
        response = client.post("/api/quiz", params={"userUid": "u1"})
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    def test_malformed_json(self, client: TestClient):
        """Test that a malformed JSON body is rejected."""
        response = client.post(
            "/api/quiz",
            params={"userUid": "u1"},
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid request body"}

    @pytest.mark.parametrize("field, value, message", [
        ("articleUid", "", "Article ID is required"),
        ("articleUid", 3, "Invalid Article ID"),
        ("userRespondedIsHuman", "yes", "Invalid user response"),
        ("userRespondedIsFake", 0, "Invalid user response"),
        ("timeToRespond", "4200", "Invalid time to respond"),
    ])
    def test_invalid_body_fields(self, client: TestClient, valid_answer, field, value, message):
        """Test the message for each invalid body field."""
        valid_answer[field] = value
        response = client.post("/api/quiz", params={"userUid": "u1"}, json=valid_answer)
        assert response.status_code == 400
        assert response.json() == {"error": message}

    def test_internal_error_hides_detail(self, client: TestClient, monkeypatch, valid_answer):
        """Test that an unexpected failure returns 500 without details."""
        async def fake_store(db, response):
            raise ConnectionError("db down")

        monkeypatch.setattr(f"{SERVICE}.store_user_response", fake_store)
        response = client.post("/api/quiz", params={"userUid": "u1"}, json=valid_answer)
        assert response.status_code == 500
        assert response.json() == {"error": "Internal Server Error"}

    def test_oversized_time_to_respond(self, client: TestClient, monkeypatch, valid_answer):
        """Test that a response time too large for a float is rejected."""
        stored = []

        async def fake_store(db, response):
            stored.append(response)
            return True

        monkeypatch.setattr(f"{SERVICE}.store_user_response", fake_store)
        valid_answer["timeToRespond"] = int("9" * 400)
        response = client.post("/api/quiz", params={"userUid": "u1"}, json=valid_answer)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid time to respond"}
        assert stored == []

    @pytest.mark.parametrize("article_uid", [[], {}])
    def test_empty_container_article_id_is_invalid_not_missing(self, client: TestClient, valid_answer, article_uid):
        """Test that an empty list or object article id is invalid, not missing."""
        valid_answer["articleUid"] = article_uid
        response = client.post("/api/quiz", params={"userUid": "u1"}, json=valid_answer)
        assert response.status_code == 400
        assert response.json() == {"error": "Invalid Article ID"}
