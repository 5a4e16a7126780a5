"""Builds the ordered provider chain from settings.

Reordering, adding or removing a backend happens here only; the resolver
just walks whatever list it receives.
"""

import httpx

from universal_translator.core.config import Settings
from universal_translator.services.translation.azure import AzureTranslatorProvider
from universal_translator.services.translation.base import TranslationProvider
from universal_translator.services.translation.google import GoogleTranslateProvider
from universal_translator.services.translation.lingva import LingvaProvider
from universal_translator.services.translation.mymemory import MyMemoryProvider


def build_default_providers(
    settings: Settings, client: httpx.AsyncClient
) -> list[TranslationProvider]:
    """Return the providers in fallback order: keyed first, free last."""
    return [
        GoogleTranslateProvider(client, api_key=settings.google_translate_api_key),
        AzureTranslatorProvider(
            client,
            api_key=settings.azure_translator_key,
            region=settings.azure_translator_region,
        ),
        LingvaProvider(client, base_url=settings.lingva_base_url),
        MyMemoryProvider(client, email=settings.mymemory_email),
    ]
