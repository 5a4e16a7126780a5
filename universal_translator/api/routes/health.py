"""Liveness endpoint."""

from fastapi import APIRouter, Depends

from universal_translator.api.deps import get_resolver
from universal_translator.schemas.translation import HealthResponse
from universal_translator.services.translation.fallback import FallbackTranslationResolver

router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health(
    resolver: FallbackTranslationResolver = Depends(get_resolver),
) -> HealthResponse:
    """Report liveness and which providers are configured, in fallback order."""
    return HealthResponse(status="ok", providers=resolver.available_providers)
