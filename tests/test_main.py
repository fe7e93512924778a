import logging

from fastapi.testclient import TestClient

from videogenerator.config import Settings, get_settings
from videogenerator.main import app, create_app, warn_missing_secrets
from conftest import PHOTO_BYTES


class TestStartup:
    def test_warns_for_each_missing_integration(self, caplog):
        settings = Settings(_env_file=None, gemini_api_key="", telegram_bot_token="", telegram_chat_id="")
        with caplog.at_level(logging.WARNING, logger="videogenerator.main"):
            warn_missing_secrets(settings)
        assert "gemini credentials are not configured" in caplog.text
        assert "telegram credentials are not configured" in caplog.text

    def test_silent_when_configured(self, settings, caplog):
        with caplog.at_level(logging.WARNING, logger="videogenerator.main"):
            warn_missing_secrets(settings)
        assert caplog.text == ""

    def test_lifespan_runs_check(self, settings, mocker):
        check = mocker.patch("videogenerator.main.warn_missing_secrets")
        mocker.patch("videogenerator.main.get_settings", return_value=settings)
        with TestClient(app):
            pass
        check.assert_called_once_with(settings)


class TestRoutes:
    def test_generate_route_is_post_only(self, api_client):
        resp = api_client.get("/")
        assert resp.status_code == 405

    def test_settings_dependency_is_cached(self):
        assert get_settings() is get_settings()


class TestRoutePrefix:
    def _client(self, settings, prefix):
        settings = Settings(_env_file=None, **{**settings.model_dump(), "route_prefix": prefix})
        app = create_app(settings)
        app.dependency_overrides[get_settings] = lambda: settings
        return TestClient(app)

    def test_prefixed_route(self, settings, mock_genai_client, mock_telegram_session):
        client = self._client(settings, "/generate-video")
        resp = client.post(
            "/generate-video/",
            files={"photo": ("cat.jpg", PHOTO_BYTES, "image/jpeg")},
            data={"videoChoice": "slideshow", "musicChoice": "upbeat"},
        )
        assert resp.status_code == 200
        assert resp.json()["result"]["title"] == "Happy Cat"
        assert client.post("/").status_code in (404, 405)

    def test_prefix_without_slash_starts(self, settings):
        client = self._client(settings, "generate-video")
        resp = client.post("/generate-video/")
        assert resp.status_code == 400

    def test_root_prefix(self, settings):
        client = self._client(settings, "/")
        resp = client.post("/")
        assert resp.status_code == 400
        assert resp.json() == {"error": "File foto tidak ditemukan."}
