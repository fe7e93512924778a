import tempfile
from functools import lru_cache
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"
    route_prefix: str = ""
    cors_origins: list[str] = ["*"]
    upload_dir: Path = Path(tempfile.gettempdir())
    request_timeout: float = 60.0  # seconds, applied to both outbound calls
    gemini_api_key: str = ""
    gemini_model: str = "gemini-2.5-flash"
    telegram_bot_token: str = ""
    telegram_chat_id: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("route_prefix")
    @classmethod
    def normalize_route_prefix(cls, value: str) -> str:
        """Return "/name" for "name", "/name/" or "/name"; "" for "/" or ""."""
        value = value.strip().strip("/")
        return f"/{value}" if value else ""


@lru_cache
def get_settings() -> Settings:
    return Settings()
