import json

import pytest
from unittest.mock import MagicMock

from fastapi.testclient import TestClient
from google.genai import types

from videogenerator.config import Settings, get_settings


# --- Canned API responses ---

ANALYSIS_JSON = {
    "title": "Happy Cat",
    "description": "A cheerful cat portrait",
    "tags": ["cat", "pet", "happy"],
}

TELEGRAM_SEND_OK = {"ok": True, "result": {"message_id": 42}}

PHOTO_BYTES = b"\xff\xd8\xff\xe0fake-jpeg"


def gemini_response(text: str) -> types.GenerateContentResponse:
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=text)]),
            )
        ]
    )


def http_response(status_code: int, payload: dict | None = None) -> MagicMock:
    resp = MagicMock()
    resp.status_code = status_code
    resp.ok = status_code < 400
    resp.json.return_value = payload or {}
    return resp


@pytest.fixture
def upload_dir(tmp_path):
    path = tmp_path / "uploads"
    path.mkdir()
    return path


@pytest.fixture
def settings(upload_dir):
    return Settings(
        _env_file=None,
        gemini_api_key="test-gemini-key",
        telegram_bot_token="123:ABC",
        telegram_chat_id="-1001",
        upload_dir=upload_dir,
        request_timeout=5.0,
    )


@pytest.fixture
def mock_genai_client(mocker):
    client = MagicMock()
    client.models.generate_content.return_value = gemini_response(json.dumps(ANALYSIS_JSON))
    mocker.patch("videogenerator.services.gemini.genai.Client", return_value=client)
    return client


@pytest.fixture
def mock_telegram_session(mocker):
    session = MagicMock()
    session.post.return_value = http_response(200, TELEGRAM_SEND_OK)
    mocker.patch("videogenerator.services.telegram.get_session", return_value=session)
    return session


@pytest.fixture
def api_client(settings):
    """FastAPI TestClient for an app built from the test settings."""
    from videogenerator.main import create_app
    app = create_app(settings)
    app.dependency_overrides[get_settings] = lambda: settings
    return TestClient(app)
