"""Abstract translation provider interface.

All translation backends must inherit from this class.
The resolver never imports a concrete provider directly: the ordered
provider list is built once in the FastAPI lifespan by
universal_translator/services/translation/registry.py.
"""

from abc import ABC, abstractmethod
from typing import Any

import httpx

from universal_translator.core.exceptions import ProviderError


class TranslationProvider(ABC):
    """Abstract base class for translation providers.

    Subclasses share one ``httpx.AsyncClient`` owned by the application
    lifespan; a provider never opens or closes the client itself.
    """

    name: str = "provider"

    def __init__(self, client: httpx.AsyncClient) -> None:
        self._client = client

    @property
    def is_available(self) -> bool:
        """Whether the provider has what it needs (e.g. a credential) to be tried."""
        return True

    @abstractmethod
    async def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Translate text with exactly one outbound request.

        Args:
            text: Non-empty text to translate.
            source_language: Language code, or ``"auto"`` to let the backend detect it.
            target_language: Language code to translate into.

        Returns:
            The translated text.

        Raises:
            ProviderError: On transport failure, non-2xx status, or a response
                missing the translation field.
        """
        ...

    async def _request_json(self, method: str, url: str, **kwargs: Any) -> Any:
        """Send one request and decode its JSON body, mapping every failure to ProviderError."""
        try:
            response = await self._client.request(method, url, **kwargs)
            response.raise_for_status()
            return response.json()
        except httpx.HTTPStatusError as e:
            raise ProviderError(self.name, f"status {e.response.status_code}") from e
        except httpx.HTTPError as e:
            raise ProviderError(self.name, f"transport error: {e!r}") from e
        except ValueError as e:
            raise ProviderError(self.name, "invalid JSON body") from e

    def _missing_field(self, field: str) -> ProviderError:
        return ProviderError(self.name, f"response missing {field}")
