"""Unit tests for FallbackTranslationResolver.

Tests cover:
  - first available provider wins, later providers never called
  - failures advance down the chain, one attempt per provider
  - unavailable providers are skipped without a call
  - every provider failing raises AllProvidersFailedError
  - unexpected exceptions are absorbed like ProviderError
"""

from __future__ import annotations

import pytest

from tests.conftest import MockTranslationProvider, failing_provider
from universal_translator.core.exceptions import AllProvidersFailedError
from universal_translator.services.translation.fallback import FallbackTranslationResolver


@pytest.mark.asyncio
class TestFallbackOrder:
    """Provider ordering and short-circuiting."""

    async def test_first_provider_success_short_circuits(self) -> None:
        first = MockTranslationProvider("first", result="Hola")
        second = MockTranslationProvider("second", result="Buenas")
        resolver = FallbackTranslationResolver([first, second])

        result = await resolver.translate("Hello", "en", "es")

        assert result == "Hola"
        assert len(first.calls) == 1
        assert second.calls == []

    async def test_falls_through_to_first_success(self) -> None:
        a, b = failing_provider("a"), failing_provider("b")
        c = MockTranslationProvider("c", result="Hola")
        d = MockTranslationProvider("d", result="never")
        resolver = FallbackTranslationResolver([a, b, c, d])

        result = await resolver.translate("Hello", "auto", "es")

        assert result == "Hola"
        assert len(a.calls) == 1
        assert len(b.calls) == 1
        assert len(c.calls) == 1
        assert d.calls == []

    async def test_arguments_forwarded_unchanged(self) -> None:
        provider = MockTranslationProvider("only", result="Bonjour")
        resolver = FallbackTranslationResolver([provider])

        await resolver.translate("Hello", "auto", "fr")

        assert provider.calls == [
            {"text": "Hello", "source_language": "auto", "target_language": "fr"}
        ]

    async def test_unavailable_provider_skipped(self) -> None:
        keyed = MockTranslationProvider("keyed", result="nope", available=False)
        free = MockTranslationProvider("free", result="Hola")
        resolver = FallbackTranslationResolver([keyed, free])

        assert await resolver.translate("Hello", "en", "es") == "Hola"
        assert keyed.calls == []

    async def test_unexpected_exception_falls_back(self) -> None:
        broken = MockTranslationProvider("broken", error=RuntimeError("boom"))
        ok = MockTranslationProvider("ok", result="Hallo")
        resolver = FallbackTranslationResolver([broken, ok])

        assert await resolver.translate("Hello", "en", "de") == "Hallo"


@pytest.mark.asyncio
class TestExhaustion:
    """Total failure of the chain."""

    async def test_all_fail_raises(self) -> None:
        providers = [failing_provider(n) for n in ("a", "b", "c", "d")]
        resolver = FallbackTranslationResolver(providers)

        with pytest.raises(AllProvidersFailedError):
            await resolver.translate("Hello", "en", "es")

        # exactly one attempt each, no retries
        assert [len(p.calls) for p in providers] == [1, 1, 1, 1]

    async def test_all_unavailable_raises(self) -> None:
        resolver = FallbackTranslationResolver(
            [MockTranslationProvider("x", available=False)]
        )
        with pytest.raises(AllProvidersFailedError):
            await resolver.translate("Hello", "en", "es")

    async def test_empty_chain_raises(self) -> None:
        with pytest.raises(AllProvidersFailedError):
            await FallbackTranslationResolver([]).translate("Hello", "en", "es")


class TestAvailableProviders:
    def test_lists_only_available_in_order(self) -> None:
        resolver = FallbackTranslationResolver(
            [
                MockTranslationProvider("google", available=False),
                MockTranslationProvider("azure"),
                MockTranslationProvider("lingva"),
            ]
        )
        assert resolver.available_providers == ["azure", "lingva"]
