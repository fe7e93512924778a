import logging

from fastapi import APIRouter, Depends, File, Form, UploadFile
from fastapi.responses import JSONResponse

from videogenerator.config import Settings, get_settings
from videogenerator.exceptions import ValidationError
from videogenerator.models.common import ErrorResponse
from videogenerator.models.video import GenerateVideoResponse, ProcessingChoice
from videogenerator.services import video as video_service
from videogenerator.uploads import stored_upload

logger = logging.getLogger(__name__)

router = APIRouter(tags=["video"])

CHOICE_FIELDS = {"videoChoice", "musicChoice"}

MISSING_PHOTO = "File foto tidak ditemukan."
MISSING_CHOICES = "Pilihan video dan musik harus diisi."
INVALID_REQUEST = "Permintaan tidak valid."
SUCCESS_MESSAGE = "Video berhasil diproses dan dikirim ke Telegram!"
GENERIC_ERROR = "Terjadi kesalahan saat memproses permintaan."


@router.post(
    "/",
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def generate_video(
    photo: UploadFile | None = File(None),
    videoChoice: str | None = Form(None),
    musicChoice: str | None = Form(None),
    settings: Settings = Depends(get_settings),
) -> GenerateVideoResponse:
    if photo is None or not photo.filename:
        raise ValidationError(MISSING_PHOTO)

    try:
        async with stored_upload(photo, settings.upload_dir) as upload:
            if not videoChoice or not musicChoice:
                raise ValidationError(MISSING_CHOICES)

            logger.info("Backend menerima foto %s dan pilihan...", upload.filename)
            choice = ProcessingChoice(video_choice=videoChoice, music_choice=musicChoice)
            result = await video_service.generate_video(upload, choice, settings)
    except ValidationError:
        raise
    except Exception:
        logger.exception("Terjadi kesalahan saat memproses %s", photo.filename)
        return JSONResponse(
            status_code=500,
            content=ErrorResponse(error=GENERIC_ERROR).model_dump(),
        )

    return GenerateVideoResponse(message=SUCCESS_MESSAGE, result=result)
