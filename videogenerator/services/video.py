"""Video generation pipeline: analyze the photo, render, notify the chat.

The steps run strictly in order since the notification text depends on the
analysis. Blocking client calls run in the threadpool so the request task
only suspends while waiting on them.
"""

import logging

from starlette.concurrency import run_in_threadpool

from videogenerator.config import Settings
from videogenerator.models.video import AnalysisResult, ProcessingChoice, UploadedPhoto
from videogenerator.services import gemini as gemini_service
from videogenerator.services import telegram as telegram_service

logger = logging.getLogger(__name__)


def render_video(photo: UploadedPhoto, choice: ProcessingChoice, result: AnalysisResult) -> None:
    # Rendering is simulated; no media is produced.
    logger.info(
        "Simulasi pemrosesan video selesai: %s (video=%s, musik=%s, judul=%r)",
        photo.filename, choice.video_choice, choice.music_choice, result.title,
    )


async def generate_video(
    photo: UploadedPhoto, choice: ProcessingChoice, settings: Settings
) -> AnalysisResult:
    photo_bytes = await run_in_threadpool(photo.read_bytes)
    result = await run_in_threadpool(
        gemini_service.analyze_photo, photo_bytes, photo.media_type, settings
    )
    render_video(photo, choice, result)
    message = telegram_service.build_message(result)
    await run_in_threadpool(telegram_service.send_message, message, settings)
    return result
