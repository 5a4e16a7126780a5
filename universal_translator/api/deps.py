"""Shared FastAPI dependencies.

The storage, resolver and detection service are created once during the
FastAPI lifespan and stored on app.state. All route handlers retrieve them
via Depends(), never by direct import, so tests can swap them through
app.dependency_overrides.
"""

from fastapi import Request

from universal_translator.db.storage import Storage
from universal_translator.services.language.detection import LanguageDetectionService
from universal_translator.services.translation.fallback import FallbackTranslationResolver


def get_storage(request: Request) -> Storage:
    """Return the singleton storage from app state."""
    return request.app.state.storage


def get_resolver(request: Request) -> FallbackTranslationResolver:
    """Return the singleton fallback resolver from app state."""
    return request.app.state.resolver


def get_language_detector(request: Request) -> LanguageDetectionService:
    """Return the singleton language detection service from app state."""
    return request.app.state.language_detector
