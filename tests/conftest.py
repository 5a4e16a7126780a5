"""Shared pytest fixtures for the Universal Translator test suite.

Provides:
  - MockTranslationProvider: configurable in-process provider with call tracking
  - mock_transport_client: factory for httpx.AsyncClient backed by MockTransport
  - storage: fresh MemStorage
  - test_settings: Settings that ignore any project .env file
  - api_app: the FastAPI app with dependency overrides cleared after each test

All external HTTP is faked; no test touches the network.
"""

from __future__ import annotations

from typing import Any, Callable, Iterator

import httpx
import pytest

from universal_translator.core.config import Settings
from universal_translator.core.exceptions import ProviderError
from universal_translator.db.storage import MemStorage
from universal_translator.services.translation.base import TranslationProvider


# ---------------------------------------------------------------------------
# Mock Translation Provider
# ---------------------------------------------------------------------------


class MockTranslationProvider(TranslationProvider):
    """Mock provider. Returns ``result`` or raises ``error``; records every call."""

    def __init__(
        self,
        name: str,
        result: str = "Mock translation",
        error: Exception | None = None,
        available: bool = True,
    ) -> None:
        super().__init__(client=None)  # type: ignore[arg-type]
        self.name = name
        self._result = result
        self._error = error
        self._available = available
        self.calls: list[dict[str, Any]] = []

    @property
    def is_available(self) -> bool:
        return self._available

    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        self.calls.append(
            {
                "text": text,
                "source_language": source_language,
                "target_language": target_language,
            }
        )
        if self._error is not None:
            raise self._error
        return self._result


def failing_provider(name: str) -> MockTranslationProvider:
    """Provider whose every call fails like a network error would."""
    return MockTranslationProvider(name, error=ProviderError(name, "transport error"))


# ---------------------------------------------------------------------------
# HTTP
# ---------------------------------------------------------------------------


Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def mock_transport_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Return a factory building an AsyncClient whose requests go to ``handler``."""

    def _factory(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _factory


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def storage() -> MemStorage:
    """Fresh in-memory storage fixture."""
    return MemStorage()


@pytest.fixture
def test_settings() -> Settings:
    """Settings with keys for both keyed providers and no .env lookup."""
    return Settings(
        _env_file=None,
        google_translate_api_key="test-google-key",
        azure_translator_key="test-azure-key",
        azure_translator_region="westeurope",
        mymemory_email="dev@example.com",
    )


@pytest.fixture
def api_app() -> Iterator[Any]:
    """The FastAPI app; dependency overrides are reset after each test."""
    from universal_translator.main import app

    yield app
    app.dependency_overrides.clear()
