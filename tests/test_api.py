from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from app.main import app
from utility.quality_scorer import HeuristicQualityScorer
from utility.translation_router import TranslationRouter

client = TestClient(app)


@pytest.fixture(autouse=True)
def provider():
    provider = MagicMock()
    provider.complete = AsyncMock(return_value="Hello, how are you doing?")
    app.state.router = TranslationRouter(provider=provider)
    app.state.scorer = HeuristicQualityScorer()
    return provider


# -----------------------------
# /api/translate
# -----------------------------
def test_short_word(provider):
    response = client.post("/api/translate", json={"text": "hi", "sourceLanguage": "en", "targetLanguage": "tr"})

    assert response.status_code == 200
    data = response.json()
    assert data["translatedText"] == "merhaba"
    assert data["isShortText"] is True
    assert "needsMoreText" not in data
    provider.complete.assert_not_called()


def test_needs_more_text(provider):
    response = client.post("/api/translate", json={"text": "x", "sourceLanguage": "tr", "targetLanguage": "en"})

    assert response.status_code == 200
    data = response.json()
    assert data["translatedText"] == "x"
    assert data["needsMoreText"] is True
    assert "isShortText" not in data
    provider.complete.assert_not_called()


def test_same_language(provider):
    response = client.post(
        "/api/translate",
        json={"text": "merhaba dünya", "sourceLanguage": "tr", "targetLanguage": "tr"},
    )

    assert response.status_code == 200
    assert response.json()["translatedText"] == "merhaba dünya"
    provider.complete.assert_not_called()


def test_model_translation(provider):
    response = client.post(
        "/api/translate",
        json={"text": "Merhaba, nasılsın?", "sourceLanguage": "tr", "targetLanguage": "en"},
    )

    assert response.status_code == 200
    assert response.json() == {
        "translatedText": "Hello, how are you doing?",
        "sourceLanguage": "tr",
        "targetLanguage": "en",
        "originalText": "Merhaba, nasılsın?",
    }


@pytest.mark.parametrize("body", [
    {},
    {"text": "merhaba", "sourceLanguage": "tr"},
    {"text": "", "sourceLanguage": "tr", "targetLanguage": "en"},
])
def test_missing_parameters(body):
    response = client.post("/api/translate", json=body)

    assert response.status_code == 400
    assert response.json() == {"error": "missing parameters"}


def test_empty_upstream_result(provider):
    provider.complete.return_value = ""

    response = client.post(
        "/api/translate",
        json={"text": "merhaba dünya", "sourceLanguage": "tr", "targetLanguage": "en"},
    )

    assert response.status_code == 500
    assert response.json() == {"error": "an error occurred during translation"}


def test_upstream_exception(provider):
    provider.complete.side_effect = RuntimeError("quota exceeded for key sk-123")

    response = client.post(
        "/api/translate",
        json={"text": "merhaba dünya", "sourceLanguage": "tr", "targetLanguage": "en"},
    )

    assert response.status_code == 500
    assert "sk-123" not in response.text


# -----------------------------
# /api/quality
# -----------------------------
def test_quality_turkish_to_english():
    response = client.post("/api/quality", json={
        "originalText": "sen kimsin ve nasılsın",
        "translatedText": "who are you and how are you",
        "sourceLanguage": "tr",
        "targetLanguage": "en",
    })

    assert response.status_code == 200
    assert response.json() == {"score": 8, "feedback": ["questions should be in separate sentences"]}


def test_quality_short_text():
    response = client.post("/api/quality", json={
        "originalText": "hi",
        "translatedText": "merhaba",
        "sourceLanguage": "en",
        "targetLanguage": "tr",
        "isShortText": True,
    })

    assert response.json() == {"score": 8, "feedback": ["short text translation"]}


def test_quality_needs_more_text():
    response = client.post("/api/quality", json={
        "originalText": "x",
        "translatedText": "x",
        "sourceLanguage": "tr",
        "targetLanguage": "en",
        "needsMoreText": True,
    })

    assert response.json() == {"score": None, "feedback": []}


# -----------------------------
# /api/languages
# -----------------------------
def test_languages():
    response = client.get("/api/languages")

    assert response.status_code == 200
    data = response.json()
    assert len(data) == 12
    assert data[0] == {"code": "tr", "name": "Türkçe", "flag": "🇹🇷"}
    assert {"code": "en", "name": "English", "flag": "🇬🇧"} in data


# -----------------------------
# Startup without an API key
# -----------------------------
def test_startup_without_api_key(monkeypatch):
    monkeypatch.delenv("OPENROUTER_API_KEY", raising=False)
    monkeypatch.setattr("utility.settings.load_dotenv", lambda: None)

    with TestClient(app) as started:
        short = started.post("/api/translate", json={"text": "hi", "sourceLanguage": "en", "targetLanguage": "tr"})
        long_text = started.post(
            "/api/translate",
            json={"text": "merhaba dünya", "sourceLanguage": "tr", "targetLanguage": "en"},
        )
        languages_response = started.get("/api/languages")

    assert short.status_code == 200
    assert short.json()["translatedText"] == "merhaba"
    assert long_text.status_code == 500
    assert long_text.json() == {"error": "an error occurred during translation"}
    assert languages_response.status_code == 200
