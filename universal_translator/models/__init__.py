"""Domain records held by the storage layer.

Individual models should be imported explicitly:
    from universal_translator.models.translation import TranslationRecord
"""

from universal_translator.models.translation import (
    AUTO_LANGUAGE,
    NewTranslation,
    TranslationRecord,
)
from universal_translator.models.user import NewUser, User

__all__ = [
    "AUTO_LANGUAGE",
    "NewTranslation",
    "TranslationRecord",
    "NewUser",
    "User",
]
