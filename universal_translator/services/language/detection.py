"""Language detection: Google's detect endpoint when configured, script heuristic otherwise.

detect() never raises. Any provider failure degrades to the heuristic.
"""

import structlog

from universal_translator.core.exceptions import ProviderError
from universal_translator.services.language.heuristic import detect_script_language
from universal_translator.services.translation.google import GoogleTranslateProvider

logger = structlog.get_logger(__name__)


class LanguageDetectionService:
    """Language detection layer used by POST /api/detect-language."""

    def __init__(self, google: GoogleTranslateProvider | None = None) -> None:
        self._google = google

    async def detect(self, text: str) -> str:
        """Returns an ISO 639-1 style language code for ``text``."""
        if self._google is not None and self._google.is_available:
            try:
                return await self._google.detect(text)
            except ProviderError as e:
                logger.warning("google_detect_failed_using_heuristic", error=e.reason)
            except Exception as e:
                logger.error("google_detect_unexpected_error", error=str(e))

        language = detect_script_language(text)
        logger.debug("heuristic_detect", language=language, text_len=len(text))
        return language
