from pathlib import Path

from pydantic import BaseModel


class ProcessingChoice(BaseModel):
    video_choice: str
    music_choice: str


class AnalysisResult(BaseModel):
    title: str
    description: str
    tags: list[str]  # 5-10 requested from the model, not enforced


class GenerateVideoResponse(BaseModel):
    message: str
    result: AnalysisResult


class UploadedPhoto(BaseModel):
    """A photo written to local disk for the duration of one request."""

    path: Path
    media_type: str
    filename: str

    def read_bytes(self) -> bytes:
        return self.path.read_bytes()
