"""Google Cloud Translation (v2 REST) provider.

Primary provider. Only tried when GOOGLE_TRANSLATE_API_KEY holds a real key.
Also exposes detect(), used by the language detection service.
"""

import httpx
import structlog

from universal_translator.models.translation import AUTO_LANGUAGE
from universal_translator.services.translation.base import TranslationProvider

logger = structlog.get_logger(__name__)

_GOOGLE_TRANSLATE_URL = "https://translation.googleapis.com/language/translate/v2"
_GOOGLE_DETECT_URL = f"{_GOOGLE_TRANSLATE_URL}/detect"

# Placeholder shipped in sample .env files; treated as "not configured".
_DEMO_KEY = "demo_key"


class GoogleTranslateProvider(TranslationProvider):
    """Google Translate v2 via API key."""

    name = "google"

    def __init__(self, client: httpx.AsyncClient, api_key: str) -> None:
        super().__init__(client)
        self._api_key = api_key

    @property
    def is_available(self) -> bool:
        return bool(self._api_key) and self._api_key != _DEMO_KEY

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        body: dict[str, str] = {"q": text, "target": target_language, "format": "text"}
        if source_language != AUTO_LANGUAGE:
            body["source"] = source_language

        data = await self._request_json(
            "POST",
            _GOOGLE_TRANSLATE_URL,
            params={"key": self._api_key},
            json=body,
        )
        try:
            translated = data["data"]["translations"][0]["translatedText"]
        except (KeyError, IndexError, TypeError) as e:
            raise self._missing_field("data.translations[0].translatedText") from e
        if not translated:
            raise self._missing_field("data.translations[0].translatedText")
        return translated

    async def detect(self, text: str) -> str:
        """Return Google's top language guess for ``text``."""
        data = await self._request_json(
            "POST",
            _GOOGLE_DETECT_URL,
            params={"key": self._api_key},
            json={"q": text},
        )
        try:
            language = data["data"]["detections"][0][0]["language"]
        except (KeyError, IndexError, TypeError) as e:
            raise self._missing_field("data.detections[0][0].language") from e
        if not language:
            raise self._missing_field("data.detections[0][0].language")
        logger.debug("google_detect_ok", language=language, text_len=len(text))
        return language
