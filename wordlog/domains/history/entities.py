import uuid
from datetime import datetime
from typing import Optional, List

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M"


def format_timestamp(moment: Optional[datetime] = None) -> str:
    """Время создания версии с точностью до минуты"""
    return (moment or datetime.now()).strftime(TIMESTAMP_FORMAT)


class UserIdentity:
    """Аутентифицированный пользователь, полученный из токена"""

    def __init__(self, id: str):
        self.id = id

    def __eq__(self, other) -> bool:
        if not isinstance(other, UserIdentity):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"UserIdentity(id={self.id})"


class VersionEntry:
    """Запись истории: какие слова добавлены и удалены при сохранении"""

    def __init__(
        self,
        id: uuid.UUID,
        timestamp: str,
        added_words: List[str],
        removed_words: List[str],
        old_length: int,
        new_length: int,
        persisted: bool = True
    ):
        self.id = id
        self.timestamp = timestamp
        self.added_words = list(added_words)
        self.removed_words = list(removed_words)
        self.old_length = old_length
        self.new_length = new_length
        # False, если сохранение было пропущено (изменений нет)
        self.persisted = persisted

    def has_changes(self) -> bool:
        """Есть ли что записывать в историю"""
        return (
            self.old_length != self.new_length
            or len(self.added_words) > 0
            or len(self.removed_words) > 0
        )

    @classmethod
    def create_entry(
        cls,
        added_words: List[str],
        removed_words: List[str],
        old_length: int,
        new_length: int,
        moment: Optional[datetime] = None
    ) -> "VersionEntry":
        """Создание новой записи с серверным временем"""
        return cls(
            id=uuid.uuid4(),
            timestamp=format_timestamp(moment),
            added_words=added_words,
            removed_words=removed_words,
            old_length=old_length,
            new_length=new_length,
            persisted=False
        )

    def __eq__(self, other) -> bool:
        if not isinstance(other, VersionEntry):
            return False
        return self.id == other.id

    def __repr__(self) -> str:
        return f"VersionEntry(id={self.id}, timestamp={self.timestamp}, old={self.old_length}, new={self.new_length})"


class Store:
    """Текущее содержимое пользователя и его история (новые записи первыми)"""

    def __init__(self, content: str = "", versions: Optional[List[VersionEntry]] = None):
        self.content = content
        self.versions = versions or []

    def is_empty(self) -> bool:
        return not self.content and not self.versions

    def __repr__(self) -> str:
        return f"Store(content_length={len(self.content)}, versions={len(self.versions)})"
