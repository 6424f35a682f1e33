from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select

from wordlog.db.models import AuditVersion

ROW_FIELDS = ("id", "timestamp", "added_words", "removed_words", "old_length", "new_length")


class VersionRepository:
    """Репозиторий записей истории (только добавление)"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def read_version_rows(self, user_id: str) -> List[dict]:
        """Сырые строки истории пользователя, новые первыми"""
        result = await self.session.execute(
            select(AuditVersion)
            .where(AuditVersion.user_id == user_id)
            .order_by(AuditVersion.created_at.desc())
        )
        return [self._to_row(db_version) for db_version in result.scalars().all()]

    async def insert_version_row(self, user_id: str, row: dict) -> None:
        """Добавление новой строки истории"""
        db_version = AuditVersion(
            id=row["id"],
            user_id=user_id,
            timestamp=row["timestamp"],
            added_words=row["added_words"],
            removed_words=row["removed_words"],
            old_length=row["old_length"],
            new_length=row["new_length"]
        )

        self.session.add(db_version)
        await self.session.flush()

    def _to_row(self, db_version: AuditVersion) -> dict:
        return {field: getattr(db_version, field) for field in ROW_FIELDS}
