import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from videogenerator.config import Settings, get_settings
from videogenerator.exceptions import ValidationError
from videogenerator.routers.generate import (
    CHOICE_FIELDS,
    INVALID_REQUEST,
    MISSING_CHOICES,
    MISSING_PHOTO,
    router as generate_router,
)
from videogenerator.routers.status import integration_statuses, router as status_router

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def warn_missing_secrets(settings: Settings) -> None:
    for name, status in integration_statuses(settings).items():
        if not status.configured:
            logger.warning("%s credentials are not configured; requests will fail", name)


@asynccontextmanager
async def lifespan(app: FastAPI):
    warn_missing_secrets(get_settings())
    yield


# --- Exception handlers ---

async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"error": str(exc)})


async def request_validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed form fields with the same 400 body as the explicit checks."""
    fields = {loc[-1] for loc in (err.get("loc", ()) for err in exc.errors()) if loc}
    if "photo" in fields:
        message = MISSING_PHOTO
    elif fields & CHOICE_FIELDS:
        message = MISSING_CHOICES
    else:
        message = INVALID_REQUEST
    return JSONResponse(status_code=400, content={"error": message})


# --- FastAPI app ---

def create_app(settings: Settings) -> FastAPI:
    app = FastAPI(title="Video Generator", version="0.1.0", lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.include_router(status_router)
    app.include_router(generate_router, prefix=settings.route_prefix)
    app.add_exception_handler(ValidationError, validation_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_error_handler)
    return app


settings = get_settings()
configure_logging(settings)
app = create_app(settings)


def run():
    uvicorn.run(
        "videogenerator.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
