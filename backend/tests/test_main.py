"""Tests for the FastAPI boundary."""

from unittest.mock import AsyncMock, patch

import pytest
from fastapi.testclient import TestClient

import config
from chef.llm import APIError, ConfigurationError, RateLimitError
from main import app
from tests.conftest import make_recipe


@pytest.fixture
def client():
    return TestClient(app)


@pytest.fixture
def mock_send():
    with patch("chef.assistant.send_message", new_callable=AsyncMock) as mock:
        yield mock


class TestChatEndpoint:

    def test_end_to_end_suggestions(self, client, mock_send, three_recipe_reply):
        mock_send.return_value = three_recipe_reply

        response = client.post("/chat", json={"message": "I have chicken and rice", "history": []})

        assert response.status_code == 200
        data = response.json()
        assert data["action"] == "suggest_from_ingredients"
        assert len(data["recipes"]) == 3
        assert data["recipe"] is None
        assert data["text"].startswith("I found **3 recipes**")

    def test_history_is_forwarded_in_order(self, client, mock_send):
        mock_send.return_value = "Sure!"
        history = [
            {"role": "user", "content": "first"},
            {"role": "assistant", "content": "second"},
            {"role": "user", "content": "third"},
        ]

        client.post("/chat", json={"message": "hello", "history": history})

        assert mock_send.call_args.args[1] == history

    def test_missing_message(self, client, mock_send):
        response = client.post("/chat", json={"history": []})
        assert response.status_code == 400
        assert response.json() == {"error": "Message is required"}
        mock_send.assert_not_called()

    def test_empty_message(self, client, mock_send):
        response = client.post("/chat", json={"message": ""})
        assert response.status_code == 400
        mock_send.assert_not_called()

    def test_not_configured(self, client, mock_send, monkeypatch):
        monkeypatch.setattr(config, "GROQ_API_KEY", "")
        response = client.post("/chat", json={"message": "hello"})
        assert response.status_code == 500
        assert response.json()["error"] == "AI service not configured"
        mock_send.assert_not_called()

    def test_configuration_error_from_provider(self, client, mock_send):
        mock_send.side_effect = ConfigurationError("GROQ_API_KEY is not set")
        response = client.post("/chat", json={"message": "hello"})
        assert response.status_code == 500
        assert response.json()["error"] == "AI service not configured"

    def test_rate_limited(self, client, mock_send):
        mock_send.side_effect = RateLimitError("API error (429): Rate limit reached")
        response = client.post("/chat", json={"message": "hello"})
        assert response.status_code == 429
        body = response.json()
        assert body["error"] == "AI rate limit reached. Please wait a moment and try again."
        assert "429" in body["details"]

    def test_unexpected_error_with_429_text(self, client, mock_send):
        mock_send.side_effect = RuntimeError("upstream said 429 Too Many Requests")
        response = client.post("/chat", json={"message": "hello"})
        assert response.status_code == 429

    def test_generic_failure(self, client, mock_send):
        mock_send.side_effect = APIError("API error (500): boom")
        response = client.post("/chat", json={"message": "hello"})
        assert response.status_code == 500
        assert response.json() == {"error": "Failed to process AI request", "details": "API error (500): boom"}


class TestOtherEndpoints:

    def test_root(self, client):
        assert client.get("/").json()["message"] == "AI Chef API is running"

    def test_health(self, client, monkeypatch):
        assert client.get("/health").json() == {"status": "healthy", "provider": "groq", "configured": True}
        monkeypatch.setattr(config, "GROQ_API_KEY", "")
        assert client.get("/health").json()["status"] == "not_configured"

    def test_quick_actions_route_to_their_actions(self, client):
        actions = {item["label"]: item["action"] for item in client.get("/quick-actions").json()}
        assert actions == {
            "Generate Recipe": "generate_recipe",
            "What Can I Cook?": "suggest_from_ingredients",
            "Substitute Ingredient": "substitute_ingredient",
            "Nutritional Info": "nutritional_info",
            "Meal Plan": "meal_plan",
            "Enhance Recipe": "enhance_recipe",
        }

    def test_recipe_record(self, client):
        response = client.post("/recipes/record", json=make_recipe("Fried Rice", tags=None))
        assert response.status_code == 200
        record = response.json()
        assert record["title"] == "Fried Rice"
        assert record["tags"] == []
        assert record["ai_generated"] is True
        assert record["status"] == "to_try"

    def test_recipe_record_rejects_non_recipe(self, client):
        response = client.post("/recipes/record", json={"title": "Just a title"})
        assert response.status_code == 422
