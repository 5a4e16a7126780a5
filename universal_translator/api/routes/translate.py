"""Translation and language detection endpoints."""

import structlog
from fastapi import APIRouter, Depends

from universal_translator.api.deps import get_language_detector, get_resolver, get_storage
from universal_translator.core.exceptions import DetectionError, ValidationError
from universal_translator.db.storage import Storage
from universal_translator.models.translation import AUTO_LANGUAGE, NewTranslation
from universal_translator.schemas.translation import (
    DetectLanguageRequest,
    DetectLanguageResponse,
    TranslateRequest,
    TranslateResponse,
)
from universal_translator.services.language.detection import LanguageDetectionService
from universal_translator.services.translation.fallback import FallbackTranslationResolver

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["translate"])


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


@router.post("/translate", response_model=TranslateResponse)
async def translate(
    body: TranslateRequest | None = None,
    resolver: FallbackTranslationResolver = Depends(get_resolver),
    storage: Storage = Depends(get_storage),
) -> TranslateResponse:
    """Translate text through the provider fallback chain and record it.

    Processing order:
    1. Validate text and target language are present
    2. Resolver walks the provider chain
    3. Store the completed translation
    4. Return translation with the languages as requested
    """
    # 1. Validate
    if body is None:
        body = TranslateRequest()
    if _is_blank(body.text) or _is_blank(body.target_language):
        raise ValidationError("Missing required fields")

    source_language = (
        AUTO_LANGUAGE if _is_blank(body.source_language) else body.source_language
    )
    target_language = body.target_language

    # 2. Resolve
    translated = await resolver.translate(body.text, source_language, target_language)

    # 3. Store
    record = await storage.create_translation(
        NewTranslation(
            source_text=body.text,
            translated_text=translated,
            source_language=source_language,
            target_language=target_language,
        )
    )

    logger.info(
        "translation_completed",
        translation_id=record.id,
        source_language=source_language,
        target_language=target_language,
        text_len=len(body.text),
    )

    # 4. Respond
    return TranslateResponse(
        translated_text=translated,
        source_language=source_language,
        target_language=target_language,
    )


@router.post("/detect-language", response_model=DetectLanguageResponse)
async def detect_language(
    body: DetectLanguageRequest | None = None,
    detector: LanguageDetectionService = Depends(get_language_detector),
) -> DetectLanguageResponse:
    """Guess the language of the submitted text."""
    if body is None:
        body = DetectLanguageRequest()
    if _is_blank(body.text):
        raise ValidationError("Text is required")

    try:
        language = await detector.detect(body.text)
    except Exception as e:
        logger.error("language_detection_failed", error=str(e))
        raise DetectionError() from e
    return DetectLanguageResponse(language=language)
