"""Lingva Translate provider (unauthenticated Google Translate frontend)."""

from urllib.parse import quote

import httpx

from universal_translator.services.translation.base import TranslationProvider


class LingvaProvider(TranslationProvider):
    """GET {base}/api/v1/{source}/{target}/{text}. Accepts "auto" as source as-is."""

    name = "lingva"

    def __init__(self, client: httpx.AsyncClient, base_url: str = "https://lingva.ml") -> None:
        super().__init__(client)
        self._base_url = base_url.rstrip("/")

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        url = (
            f"{self._base_url}/api/v1/"
            f"{quote(source_language, safe='')}/{quote(target_language, safe='')}/"
            f"{quote(text, safe='')}"
        )
        data = await self._request_json("GET", url)
        try:
            translated = data["translation"]
        except (KeyError, TypeError) as e:
            raise self._missing_field("translation") from e
        if not translated:
            raise self._missing_field("translation")
        return translated
