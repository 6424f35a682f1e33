import logging
from datetime import datetime
from typing import Optional, List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wordlog.core.crypto import ContentCipher, DecryptionError, is_encrypted
from wordlog.db.repositories import UserStateRepository, VersionRepository
from wordlog.domains.history.entities import VersionEntry, Store
from wordlog.domains.history.schemas import SaveVersionRequest

logger = logging.getLogger(__name__)


class VersionStore:
    """
    Хранилище содержимого и истории версий пользователя.

    Если передан cipher, содержимое и списки слов шифруются при записи и
    расшифровываются при чтении. Ошибки расшифровки не пробрасываются:
    содержимое становится пустым, а для строк истории используются
    сохраненные массивы как открытый текст (старый формат). Ошибки базы
    данных пробрасываются вызывающему коду.
    """

    def __init__(self, session: AsyncSession, cipher: Optional[ContentCipher] = None):
        self.session = session
        self.cipher = cipher
        self.state_repository = UserStateRepository(session)
        self.version_repository = VersionRepository(session)

    async def load(self, user_id: str) -> Store:
        """Получение текущего содержимого и истории (новые версии первыми)"""
        raw_content = await self.state_repository.read_content(user_id)
        content = self._decode_content(user_id, raw_content)

        rows = await self.version_repository.read_version_rows(user_id)
        versions = [self._decode_version_row(row) for row in rows]

        return Store(content=content, versions=versions)

    async def save(
        self,
        user_id: str,
        request: SaveVersionRequest,
        moment: Optional[datetime] = None
    ) -> VersionEntry:
        """Сохранение содержимого и новой записи истории, если есть изменения"""
        entry = VersionEntry.create_entry(
            added_words=request.added_words,
            removed_words=request.removed_words,
            old_length=request.old_length,
            new_length=request.new_length,
            moment=moment
        )

        if not entry.has_changes():
            logger.debug("No changes for user %s, skipping save", user_id)
            return entry

        # Содержимое и запись истории фиксируются одной транзакцией
        try:
            await self.state_repository.upsert_content(user_id, self._encode_content(request.content))
            await self.version_repository.insert_version_row(user_id, self._encode_version_row(entry))
            await self.session.commit()
        except SQLAlchemyError:
            await self.session.rollback()
            raise

        entry.persisted = True
        logger.info(
            "Saved version %s for user %s (+%d/-%d words)",
            entry.id, user_id, len(entry.added_words), len(entry.removed_words)
        )
        return entry

    def _encode_content(self, content: str) -> str:
        if self.cipher is None or is_encrypted(content):
            return content
        return self.cipher.encrypt(content)

    def _decode_content(self, user_id: str, raw_content: Optional[str]) -> str:
        content = raw_content or ""
        if self.cipher is None or not is_encrypted(content):
            return content

        try:
            return self.cipher.decrypt(content)
        except DecryptionError:
            logger.warning("Could not decrypt content for user %s, returning empty content", user_id)
            return ""

    def _encode_version_row(self, entry: VersionEntry) -> dict:
        row = {
            "id": entry.id,
            "timestamp": entry.timestamp,
            "old_length": entry.old_length,
            "new_length": entry.new_length,
        }

        if self.cipher is not None:
            # Оба списка упаковываются в один токен в слоте added_words
            row["added_words"] = [self.cipher.pack_words(entry.added_words, entry.removed_words)]
            row["removed_words"] = []
        else:
            row["added_words"] = list(entry.added_words)
            row["removed_words"] = list(entry.removed_words)

        return row

    def _decode_version_row(self, row: dict) -> VersionEntry:
        added_words = _as_word_list(row.get("added_words"))
        removed_words = _as_word_list(row.get("removed_words"))

        if self.cipher is not None and _is_packed(added_words):
            try:
                added_words, removed_words = self.cipher.unpack_words(added_words[0])
            except DecryptionError:
                logger.warning("Could not decrypt word lists of version %s, using stored arrays", row.get("id"))

        return VersionEntry(
            id=row.get("id"),
            timestamp=row.get("timestamp") or "",
            added_words=added_words,
            removed_words=removed_words,
            old_length=row.get("old_length") or 0,
            new_length=row.get("new_length") or 0
        )


def _as_word_list(value) -> List[str]:
    if not isinstance(value, list):
        return []
    return [word for word in value if isinstance(word, str)]


def _is_packed(words: List[str]) -> bool:
    return len(words) == 1 and is_encrypted(words[0])
