"""Translation history endpoint."""

import structlog
from fastapi import APIRouter, Depends, Query

from universal_translator.api.deps import get_storage
from universal_translator.core.config import settings
from universal_translator.core.exceptions import HistoryUnavailableError
from universal_translator.db.storage import Storage
from universal_translator.schemas.translation import TranslationRecordResponse

logger = structlog.get_logger(__name__)

router = APIRouter(tags=["history"])


@router.get("/translations", response_model=list[TranslationRecordResponse])
async def list_translations(
    limit: int | None = Query(default=None, ge=1, le=100),
    storage: Storage = Depends(get_storage),
) -> list[TranslationRecordResponse]:
    """Most recent translations first. Defaults to HISTORY_LIMIT entries."""
    try:
        records = await storage.get_recent_translations(limit or settings.history_limit)
    except Exception as e:
        logger.error("history_fetch_failed", error=str(e))
        raise HistoryUnavailableError() from e

    return [
        TranslationRecordResponse(
            id=r.id,
            source_text=r.source_text,
            translated_text=r.translated_text,
            source_language=r.source_language,
            target_language=r.target_language,
            created_at=r.created_at,
        )
        for r in records
    ]
