"""Translation history records."""

from dataclasses import dataclass
from datetime import datetime

AUTO_LANGUAGE = "auto"


@dataclass(frozen=True)
class NewTranslation:
    """A completed translation before the store assigns id and timestamp."""

    source_text: str
    translated_text: str
    source_language: str
    target_language: str


@dataclass(frozen=True)
class TranslationRecord:
    """A stored translation. Immutable once created."""

    id: int
    source_text: str
    translated_text: str
    source_language: str
    target_language: str
    created_at: datetime
