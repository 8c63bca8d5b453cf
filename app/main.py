"""Application entry point and FastAPI app factory."""

from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
import sys
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.exceptions import HTTPException

from .config.settings import settings
from .controllers import models, rules, summarize, translate
from .middleware import StructuredLoggingMiddleware, TelemetryMiddleware
from .pipelines.summary import SummaryPipelineError
from .services.gemini_client import mask_api_key

logger = logging.getLogger(__name__)


def _rotating_handler(path_value: str, max_bytes: int, fmt: str) -> RotatingFileHandler:
    log_path = Path(path_value)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    handler = RotatingFileHandler(
        log_path,
        maxBytes=max_bytes,
        backupCount=5,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(fmt))
    return handler


def _configure_logging() -> None:
    """Ensure structured middleware logs stream to stdout and file."""

    logging.getLogger().handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(
        logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    )

    root_logger = logging.getLogger()
    root_logger.addHandler(stdout_handler)
    root_logger.addHandler(
        _rotating_handler(
            settings.log_file,
            1_000_000,
            "%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        )
    )
    root_logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    middleware_logger = logging.getLogger("app.middleware.structured")
    middleware_logger.handlers.clear()
    middleware_stdout = logging.StreamHandler(sys.stdout)
    middleware_stdout.setFormatter(logging.Formatter("%(message)s"))
    middleware_logger.addHandler(middleware_stdout)
    middleware_logger.setLevel(logging.INFO)
    middleware_logger.propagate = False

    # Pipeline records also reach the root handlers.
    pipeline_logger = logging.getLogger("app.pipelines.summary")
    pipeline_logger.handlers.clear()
    pipeline_logger.addHandler(
        _rotating_handler(settings.pipeline_log_file, 500_000, "%(asctime)s | %(levelname)s | %(message)s")
    )
    pipeline_logger.setLevel(logging.DEBUG if settings.debug else logging.INFO)

    transcript_logger = logging.getLogger("app.logs.transcript")
    transcript_logger.handlers.clear()
    transcript_logger.addHandler(
        _rotating_handler(settings.transcript_log_file, 500_000, "%(asctime)s | %(levelname)s | %(message)s")
    )
    transcript_logger.setLevel(logging.INFO)
    transcript_logger.propagate = False

    noisy_loggers = [
        "httpx",
        "httpcore",
        "google_genai",
        "urllib3",
        "python_multipart",
    ]
    for name in noisy_loggers:
        logging.getLogger(name).setLevel(logging.WARNING)


def _log_api_key_status() -> None:
    """Report whether the Gemini key is usable without printing it."""

    secret = settings.gemini.api_key
    api_key = secret.get_secret_value() if secret else ""
    if not api_key:
        logger.error("CRITICAL ERROR: API Key (GEMINI_API_KEY or GOOGLE_API_KEY) is missing!")
    elif api_key == "YOUR_API_KEY_HERE":
        logger.error("CRITICAL ERROR: the placeholder YOUR_API_KEY_HERE was not replaced in .env!")
    else:
        logger.info("API Key loaded: %s (Length: %d)", mask_api_key(api_key), len(api_key))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""

    _configure_logging()
    _log_api_key_status()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        description="Audio transcription, summary and translation API backed by Gemini",
    )

    app.add_middleware(TelemetryMiddleware)
    app.add_middleware(StructuredLoggingMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    app.include_router(models.router, prefix=settings.api_prefix)
    app.include_router(rules.router, prefix=settings.api_prefix)
    app.include_router(summarize.router, prefix=settings.api_prefix)
    app.include_router(translate.router, prefix=settings.api_prefix)

    @app.get("/", include_in_schema=False)
    async def root() -> dict[str, str]:
        """Root endpoint."""

        return {
            "message": f"Welcome to {settings.app_name}",
            "version": settings.app_version,
            "status": "operational",
        }

    @app.get("/health", include_in_schema=False)
    async def health_check() -> dict[str, str]:
        """Health check endpoint."""

        return {
            "status": "healthy",
            "service": settings.app_name,
            "version": settings.app_version,
        }

    @app.get("/metrics", include_in_schema=False)
    async def metrics() -> Response:
        """Expose application metrics for Prometheus scraping."""

        return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)

    @app.exception_handler(SummaryPipelineError)
    async def pipeline_exception_handler(request: Request, exc: SummaryPipelineError):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": str(exc)},
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        first_error = exc.errors()[0] if exc.errors() else {}
        location = ".".join(str(part) for part in first_error.get("loc", ()) if part != "body")
        message = first_error.get("msg", "Invalid request")
        return JSONResponse(
            status_code=400,
            content={"error": f"{location}: {message}" if location else message},
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path, exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"error": "Internal server error"},
        )

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
