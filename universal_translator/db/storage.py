"""Storage interface and the in-memory implementation.

MemStorage is constructed once in the FastAPI lifespan and stored on
app.state. Request handlers receive it via Depends() in
universal_translator/api/deps.py, never by direct import.

Data lives for the process lifetime only; a restart loses everything.
"""

import asyncio
from abc import ABC, abstractmethod
from datetime import datetime, timezone

import structlog

from universal_translator.core.exceptions import UsernameTakenError
from universal_translator.models.translation import NewTranslation, TranslationRecord
from universal_translator.models.user import NewUser, User

logger = structlog.get_logger(__name__)

DEFAULT_RECENT_LIMIT = 10


class Storage(ABC):
    """Abstract append-and-query store for users and translations."""

    @abstractmethod
    async def get_user(self, user_id: int) -> User | None:
        ...

    @abstractmethod
    async def get_user_by_username(self, username: str) -> User | None:
        ...

    @abstractmethod
    async def create_user(self, new_user: NewUser) -> User:
        ...

    @abstractmethod
    async def create_translation(self, new_translation: NewTranslation) -> TranslationRecord:
        """Assign the next id and the current UTC time, store, and return the record."""
        ...

    @abstractmethod
    async def get_recent_translations(
        self, limit: int = DEFAULT_RECENT_LIMIT
    ) -> list[TranslationRecord]:
        """Return up to ``limit`` records, most recent first."""
        ...


class MemStorage(Storage):
    """Process-local storage backed by dicts.

    Each create holds the lock while it takes the next id and inserts,
    so ids stay unique and strictly increasing under concurrent requests.
    """

    def __init__(self) -> None:
        self._users: dict[int, User] = {}
        self._translations: dict[int, TranslationRecord] = {}
        self._next_user_id = 1
        self._next_translation_id = 1
        self._lock = asyncio.Lock()

    async def get_user(self, user_id: int) -> User | None:
        return self._users.get(user_id)

    async def get_user_by_username(self, username: str) -> User | None:
        for user in self._users.values():
            if user.username == username:
                return user
        return None

    async def create_user(self, new_user: NewUser) -> User:
        async with self._lock:
            if await self.get_user_by_username(new_user.username) is not None:
                raise UsernameTakenError()
            user = User(
                id=self._next_user_id,
                username=new_user.username,
                password=new_user.password,
            )
            self._users[user.id] = user
            self._next_user_id += 1
        logger.info("user_created", user_id=user.id)
        return user

    async def create_translation(self, new_translation: NewTranslation) -> TranslationRecord:
        async with self._lock:
            record = TranslationRecord(
                id=self._next_translation_id,
                source_text=new_translation.source_text,
                translated_text=new_translation.translated_text,
                source_language=new_translation.source_language,
                target_language=new_translation.target_language,
                created_at=datetime.now(timezone.utc),
            )
            self._translations[record.id] = record
            self._next_translation_id += 1
        logger.debug("translation_stored", translation_id=record.id)
        return record

    async def get_recent_translations(
        self, limit: int = DEFAULT_RECENT_LIMIT
    ) -> list[TranslationRecord]:
        if limit <= 0:
            return []
        ordered = sorted(
            self._translations.values(),
            key=lambda r: (r.created_at, r.id),
            reverse=True,
        )
        return ordered[:limit]
