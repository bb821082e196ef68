"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from api.config import Settings, get_settings
from api.routers import captions, health, upload
from backend.errors import CaptionServiceError
from config.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan - startup and shutdown."""
    settings = get_settings()
    setup_logging("api", log_dir=settings.log_dir, level=settings.log_level)
    logger.info("Starting Pawscribe Caption API...")
    logger.info(f"Vision model: {settings.caption_model}")
    if settings.openai_configured:
        logger.info("OpenAI API key configured")
    else:
        logger.warning(
            "OPENAI_API_KEY is not set; caption generation requests will fail"
        )
    yield
    logger.info("Shutting down Pawscribe Caption API...")


async def caption_error_handler(request: Request, exc: CaptionServiceError):
    if exc.status_code >= 500:
        logger.error(f"{request.url.path} failed: {exc} ({exc.details})")
    else:
        logger.warning(f"{request.url.path} rejected: {exc}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


async def request_validation_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"{request.url.path} invalid request body")
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": str(exc.errors())},
    )


async def unhandled_error_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled error on {request.url.path}: {exc}", exc_info=True)
    return JSONResponse(status_code=500, content={"error": "Internal server error"})


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CaptionServiceError, caption_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_error_handler)

    # Uploaded images are served back from the upload directory
    app.mount(
        "/uploads",
        StaticFiles(directory=settings.upload_dir, check_dir=False),
        name="uploads",
    )

    app.include_router(health.router)
    app.include_router(upload.router, prefix=settings.api_prefix)
    app.include_router(captions.router, prefix=settings.api_prefix)

    return app


app = create_app()


def run():
    """Console entry point."""
    import uvicorn

    settings = get_settings()
    uvicorn.run("api.main:app", host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
