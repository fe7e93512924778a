import logging

from videogenerator.config import Settings
from videogenerator.exceptions import ConfigurationError, UpstreamError
from videogenerator.http_client import get_session
from videogenerator.models.video import AnalysisResult

logger = logging.getLogger(__name__)

TELEGRAM_API_BASE = "https://api.telegram.org"


def _get_bot_credentials(settings: Settings) -> tuple[str, str]:
    if not settings.telegram_bot_token or not settings.telegram_chat_id:
        raise ConfigurationError(
            "Telegram bot not configured. Create a bot with @BotFather and set "
            "TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID in .env"
        )
    return settings.telegram_bot_token, settings.telegram_chat_id


def build_message(result: AnalysisResult) -> str:
    return (
        "Video baru telah dibuat!\n\n"
        f"Judul: {result.title}\n"
        f"Deskripsi: {result.description}\n"
        f"Tags: {', '.join(result.tags)}"
    )


def send_message(text: str, settings: Settings) -> dict:
    """Post ``text`` to the configured chat. Single attempt, bounded by request_timeout."""
    token, chat_id = _get_bot_credentials(settings)
    logger.info("Mengirim pesan ke Telegram...")
    resp = get_session().post(
        f"{TELEGRAM_API_BASE}/bot{token}/sendMessage",
        json={"chat_id": chat_id, "text": text},
        timeout=settings.request_timeout,
    )
    if not resp.ok:
        raise UpstreamError(
            f"Telegram sendMessage API request failed with status: {resp.status_code}"
        )
    return resp.json()
