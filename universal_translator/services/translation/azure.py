"""Microsoft Translator (v3) provider. Secondary, used only with AZURE_TRANSLATOR_KEY set."""

import httpx

from universal_translator.models.translation import AUTO_LANGUAGE
from universal_translator.services.translation.base import TranslationProvider

_AZURE_TRANSLATE_URL = "https://api.cognitive.microsofttranslator.com/translate"
_AZURE_API_VERSION = "3.0"


class AzureTranslatorProvider(TranslationProvider):
    name = "azure"

    def __init__(self, client: httpx.AsyncClient, api_key: str, region: str = "") -> None:
        super().__init__(client)
        self._api_key = api_key
        self._region = region

    @property
    def is_available(self) -> bool:
        return bool(self._api_key)

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        params = {"api-version": _AZURE_API_VERSION, "to": target_language}
        if source_language != AUTO_LANGUAGE:
            params["from"] = source_language

        headers = {"Ocp-Apim-Subscription-Key": self._api_key}
        # Multi-service and regional resources reject requests without it
        if self._region:
            headers["Ocp-Apim-Subscription-Region"] = self._region

        data = await self._request_json(
            "POST",
            _AZURE_TRANSLATE_URL,
            params=params,
            headers=headers,
            json=[{"text": text}],
        )
        try:
            translated = data[0]["translations"][0]["text"]
        except (KeyError, IndexError, TypeError) as e:
            raise self._missing_field("[0].translations[0].text") from e
        if not translated:
            raise self._missing_field("[0].translations[0].text")
        return translated
