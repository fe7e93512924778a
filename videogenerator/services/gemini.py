"""Gemini photo analysis service: turns an image into a title, description and tags."""

import json
import logging

from google import genai
from google.genai import errors as genai_errors
from google.genai import types
from pydantic import ValidationError as PydanticValidationError

from videogenerator.config import Settings
from videogenerator.exceptions import AnalysisParseError, ConfigurationError, UpstreamError
from videogenerator.models.video import AnalysisResult

logger = logging.getLogger(__name__)

ANALYSIS_PROMPT = (
    "Analisis gambar ini dan berikan judul, deskripsi singkat, dan 5-10 tag dalam format JSON.\n"
    "Judul harus menarik, deskripsi harus ringkas, dan tag harus relevan.\n"
    'Format JSON: {"title": "Judul", "description": "Deskripsi", "tags": ["tag1", "tag2", "tag3"]}'
)

ANALYSIS_SCHEMA = types.Schema(
    type=types.Type.OBJECT,
    properties={
        "title": types.Schema(type=types.Type.STRING),
        "description": types.Schema(type=types.Type.STRING),
        "tags": types.Schema(
            type=types.Type.ARRAY,
            items=types.Schema(type=types.Type.STRING),
        ),
    },
    property_ordering=["title", "description", "tags"],
)


def _get_client(settings: Settings) -> genai.Client:
    if not settings.gemini_api_key:
        raise ConfigurationError(
            "Gemini API key not configured. Get one at "
            "https://aistudio.google.com/apikey and set GEMINI_API_KEY in .env"
        )
    return genai.Client(
        api_key=settings.gemini_api_key,
        # HttpOptions.timeout is in milliseconds
        http_options=types.HttpOptions(timeout=int(settings.request_timeout * 1000)),
    )


def build_contents(photo_bytes: bytes, mime_type: str) -> list[types.Content]:
    return [
        types.Content(
            role="user",
            parts=[
                types.Part(text=ANALYSIS_PROMPT),
                types.Part.from_bytes(data=photo_bytes, mime_type=mime_type),
            ],
        )
    ]


def build_config() -> types.GenerateContentConfig:
    return types.GenerateContentConfig(
        response_mime_type="application/json",
        response_schema=ANALYSIS_SCHEMA,
    )


def _extract_text(response: types.GenerateContentResponse) -> str:
    """Return the text of the first part of the first candidate."""
    try:
        text = response.candidates[0].content.parts[0].text
    except (AttributeError, IndexError, TypeError) as exc:
        raise AnalysisParseError("Gemini response has no candidate text") from exc
    if not text:
        raise AnalysisParseError("Gemini response has no candidate text")
    return text


def parse_analysis(text: str) -> AnalysisResult:
    """Parse the JSON text produced by the model into an AnalysisResult."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise AnalysisParseError(f"Gemini returned invalid JSON: {text[:200]}") from exc
    if not isinstance(data, dict):
        raise AnalysisParseError(f"Gemini returned {type(data).__name__}, expected an object")
    try:
        return AnalysisResult(
            title=data["title"],
            description=data["description"],
            tags=data["tags"],
        )
    except (KeyError, PydanticValidationError) as exc:
        raise AnalysisParseError(f"Gemini JSON is missing title/description/tags: {exc}") from exc


def analyze_photo(photo_bytes: bytes, mime_type: str, settings: Settings) -> AnalysisResult:
    """Send one photo to Gemini and return the structured analysis. Single attempt."""
    client = _get_client(settings)
    logger.info("Memanggil Gemini API (%s) untuk menganalisis gambar...", settings.gemini_model)
    try:
        response = client.models.generate_content(
            model=settings.gemini_model,
            contents=build_contents(photo_bytes, mime_type),
            config=build_config(),
        )
    except genai_errors.APIError as exc:
        raise UpstreamError(f"AI request failed with status: {exc.code}") from exc
    return parse_analysis(_extract_text(response))
