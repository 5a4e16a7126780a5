"""MyMemory provider, the last link in the fallback chain.

MyMemory answers with HTTP 200 even on logical failure, so the embedded
``responseStatus`` is checked too. It also tends to echo the input back
when it has no translation; such echoes count as failures here.
MyMemory has no auto-detection, so an ``auto`` source is replaced with the
script heuristic's guess before building the language pair.
"""

from typing import Callable

import httpx
import structlog

from universal_translator.core.exceptions import ProviderError
from universal_translator.models.translation import AUTO_LANGUAGE
from universal_translator.services.language.heuristic import detect_script_language
from universal_translator.services.translation.base import TranslationProvider

logger = structlog.get_logger(__name__)

_MYMEMORY_URL = "https://api.mymemory.translated.net/get"
_USER_AGENT = "Mozilla/5.0 (compatible; UniversalTranslator/1.0)"


class MyMemoryProvider(TranslationProvider):
    name = "mymemory"

    def __init__(
        self,
        client: httpx.AsyncClient,
        email: str = "",
        detect: Callable[[str], str] = detect_script_language,
    ) -> None:
        super().__init__(client)
        self._email = email
        self._detect = detect

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        if source_language == AUTO_LANGUAGE:
            source_language = self._detect(text)
            logger.debug("mymemory_source_guessed", source_language=source_language)

        params = {"q": text, "langpair": f"{source_language}|{target_language}"}
        # "de" raises the anonymous daily quota
        if self._email:
            params["de"] = self._email

        data = await self._request_json(
            "GET",
            _MYMEMORY_URL,
            params=params,
            headers={"User-Agent": _USER_AGENT},
        )
        try:
            status = data["responseStatus"]
            translated = data["responseData"]["translatedText"]
        except (KeyError, TypeError) as e:
            raise self._missing_field("responseData.translatedText") from e

        if str(status) != "200":
            raise ProviderError(self.name, f"responseStatus {status}")
        if not translated:
            raise self._missing_field("responseData.translatedText")
        if translated.lower() == text.lower():
            raise ProviderError(self.name, "returned the input untranslated")
        return translated
