from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite

from wordlog.db.models import UserState, utcnow

# Диалекты с поддержкой INSERT ... ON CONFLICT
_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class UserStateRepository:
    """Репозиторий текущего содержимого пользователя (одна строка на пользователя)"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def read_content(self, user_id: str) -> Optional[str]:
        """Сохраненное содержимое как есть; None если строки нет"""
        result = await self.session.execute(
            select(UserState.content).where(UserState.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def upsert_content(self, user_id: str, content: str) -> None:
        """Запись содержимого с перезаписью по user_id"""
        dialect = self.session.get_bind().dialect.name
        insert = _UPSERT_INSERTS.get(dialect)

        if insert is None:
            await self.session.merge(UserState(user_id=user_id, content=content, updated_at=utcnow()))
        else:
            stmt = insert(UserState).values(user_id=user_id, content=content, updated_at=utcnow())
            stmt = stmt.on_conflict_do_update(
                index_elements=[UserState.user_id],
                set_={"content": stmt.excluded.content, "updated_at": stmt.excluded.updated_at}
            )
            await self.session.execute(stmt)

        await self.session.flush()
