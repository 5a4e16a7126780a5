"""Custom exception classes for structured error handling.

Every exception that can reach the HTTP layer carries its own status code
and renders as ``{"error": "<message>"}``.
"""

from typing import Any


class TranslatorServiceError(Exception):
    """Base exception for all service errors surfaced over HTTP."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        self.message = message
        self.status_code = status_code
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message}


class ValidationError(TranslatorServiceError):
    def __init__(self, message: str = "Missing required fields") -> None:
        super().__init__(message=message, status_code=400)


class AllProvidersFailedError(TranslatorServiceError):
    def __init__(self, message: str = "Translation failed") -> None:
        super().__init__(message=message, status_code=500)


class DetectionError(TranslatorServiceError):
    def __init__(self, message: str = "Language detection failed") -> None:
        super().__init__(message=message, status_code=500)


class HistoryUnavailableError(TranslatorServiceError):
    def __init__(self, message: str = "Failed to fetch translations") -> None:
        super().__init__(message=message, status_code=500)


class UsernameTakenError(TranslatorServiceError):
    def __init__(self, message: str = "Username already exists") -> None:
        super().__init__(message=message, status_code=409)


class ProviderError(Exception):
    """A single provider attempt failed.

    Never surfaced to clients: the resolver logs it and moves on to the
    next provider in the chain.
    """

    def __init__(self, provider: str, reason: str) -> None:
        self.provider = provider
        self.reason = reason
        super().__init__(f"{provider}: {reason}")
