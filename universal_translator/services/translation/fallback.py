"""Fallback translation resolver: tries each provider in order, first success wins.

Order is whatever the registry hands in (Google → Azure → Lingva → MyMemory
by default). Providers that report ``is_available == False`` are skipped
without a network call. A failed provider is never retried.
"""

from typing import Sequence

import structlog

from universal_translator.core.exceptions import AllProvidersFailedError, ProviderError
from universal_translator.services.translation.base import TranslationProvider

logger = structlog.get_logger(__name__)


class FallbackTranslationResolver:
    """Walks an ordered provider chain until one returns a translation."""

    def __init__(self, providers: Sequence[TranslationProvider]) -> None:
        self._providers = tuple(providers)
        logger.info(
            "fallback_resolver_initialized",
            providers=[p.name for p in self._providers],
            available=self.available_providers,
        )

    @property
    def available_providers(self) -> list[str]:
        """Names of the providers that will actually be tried, in order."""
        return [p.name for p in self._providers if p.is_available]

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Return the first successful provider's translation.

        Raises:
            AllProvidersFailedError: Every provider failed or was unavailable.
        """
        for provider in self._providers:
            if not provider.is_available:
                logger.debug("provider_skipped_unconfigured", provider=provider.name)
                continue
            try:
                translated = await provider.translate(text, source_language, target_language)
            except ProviderError as e:
                logger.warning(
                    "provider_failed_falling_back",
                    provider=provider.name,
                    error=e.reason,
                )
                continue
            except Exception as e:
                logger.error(
                    "provider_unexpected_error",
                    provider=provider.name,
                    error=str(e),
                )
                continue

            logger.debug("provider_translate_ok", provider=provider.name, text_len=len(text))
            return translated

        logger.error(
            "all_providers_failed",
            source_language=source_language,
            target_language=target_language,
            text_len=len(text),
        )
        raise AllProvidersFailedError()
