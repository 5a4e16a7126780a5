"""FastAPI application entrypoint.

All routes prefixed /api. Auto-generated OpenAPI docs at /docs.

One shared httpx.AsyncClient, the ordered provider chain, the fallback
resolver, the language detection service and the in-memory storage are
created once during the lifespan and stored on app.state for injection
via Depends().
"""

from contextlib import asynccontextmanager
import logging
from typing import AsyncGenerator

import httpx
import structlog
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from universal_translator.api.routes.health import router as health_router
from universal_translator.api.routes.translate import router as translate_router
from universal_translator.api.routes.translations import router as translations_router
from universal_translator.core.config import settings
from universal_translator.core.exceptions import TranslatorServiceError
from universal_translator.db.storage import MemStorage
from universal_translator.services.language.detection import LanguageDetectionService
from universal_translator.services.translation.fallback import FallbackTranslationResolver
from universal_translator.services.translation.google import GoogleTranslateProvider
from universal_translator.services.translation.registry import build_default_providers


def _configure_logging() -> None:
    level = getattr(logging, settings.log_level.upper(), logging.INFO)
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=True,
    )
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


_configure_logging()

logger = structlog.get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup and shutdown lifecycle.

    Builds the provider chain around a single HTTP client and attaches the
    resolver, detector and storage to app.state. Retrieved in request
    handlers via Depends() in universal_translator/api/deps.py.
    """
    # --- Startup ---
    logger.info("app_startup", env=settings.app_env)

    async with httpx.AsyncClient(timeout=settings.provider_timeout_seconds) as client:
        providers = build_default_providers(settings, client)
        google = next(p for p in providers if isinstance(p, GoogleTranslateProvider))

        app.state.resolver = FallbackTranslationResolver(providers)
        app.state.language_detector = LanguageDetectionService(google=google)
        app.state.storage = MemStorage()

        logger.info("app_providers_ready", providers=app.state.resolver.available_providers)
        yield

        # --- Shutdown ---
        logger.info("app_shutdown")


app = FastAPI(
    title="Universal Translator API",
    description="Text translation with multi-provider fallback and recent history.",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS: permissive for development, locked down in production
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"] if not settings.is_production else [],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(TranslatorServiceError)
async def service_error_handler(request: Request, exc: TranslatorServiceError) -> JSONResponse:
    """Structured error response for all service exceptions."""
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict(),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed bodies and query params get the same {"error": ...} shape as every other failure."""
    logger.info("request_body_invalid", path=request.url.path, errors=len(exc.errors()))
    return JSONResponse(status_code=400, content={"error": "Invalid request"})


app.include_router(health_router, prefix="/api")
app.include_router(translate_router, prefix="/api")
app.include_router(translations_router, prefix="/api")
