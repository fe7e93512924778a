from fastapi import APIRouter, Depends

from videogenerator.config import Settings, get_settings
from videogenerator.models.common import IntegrationStatus, StatusResponse

router = APIRouter(prefix="/api", tags=["status"])


def integration_statuses(settings: Settings) -> dict[str, IntegrationStatus]:
    return {
        "gemini": IntegrationStatus(
            configured=bool(settings.gemini_api_key),
            model=settings.gemini_model,
        ),
        "telegram": IntegrationStatus(
            configured=bool(settings.telegram_bot_token and settings.telegram_chat_id),
        ),
    }


@router.get("/status")
def api_status(settings: Settings = Depends(get_settings)) -> StatusResponse:
    return StatusResponse(integrations=integration_statuses(settings))
