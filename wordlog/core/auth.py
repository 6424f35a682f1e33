import logging
from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from wordlog.core.security import verify_token
from wordlog.domains.history.entities import UserIdentity

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def resolve_identity(token: Optional[str]) -> Optional[UserIdentity]:
    """Получение пользователя из JWT токена; None если токен не принят"""
    if not token:
        return None

    payload = verify_token(token)
    if not payload:
        return None

    user_id = payload.get("sub")
    if not user_id:
        return None

    return UserIdentity(id=str(user_id))


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> UserIdentity:
    """Зависимость для получения текущего пользователя"""
    user = resolve_identity(credentials.credentials if credentials else None)

    if not user:
        logger.info("Rejected request without a valid bearer token")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return user
