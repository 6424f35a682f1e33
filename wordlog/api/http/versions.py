import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wordlog.config import settings
from wordlog.core.auth import get_current_user
from wordlog.core.crypto import ContentCipher, build_cipher
from wordlog.core.db import get_db
from wordlog.domains.history.diff import word_diff
from wordlog.domains.history.entities import UserIdentity, VersionEntry
from wordlog.domains.history.schemas import (
    SaveVersionRequest, SaveVersionResponse, VersionEntryResponse,
    StoreResponse, DiffRequest, DiffResponse
)
from wordlog.domains.history.services import VersionStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["versions"])


def get_cipher() -> Optional[ContentCipher]:
    """Зависимость для получения шифра из настроек"""
    return build_cipher(settings.data_enc_key)


def _entry_fields(entry: VersionEntry) -> dict:
    return dict(
        id=entry.id,
        timestamp=entry.timestamp,
        added_words=entry.added_words,
        removed_words=entry.removed_words,
        old_length=entry.old_length,
        new_length=entry.new_length
    )


@router.get("/versions", response_model=StoreResponse)
async def get_versions(
    current_user: UserIdentity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    cipher: Optional[ContentCipher] = Depends(get_cipher)
):
    """Получение содержимого и истории версий текущего пользователя"""
    version_store = VersionStore(db, cipher)

    try:
        store = await version_store.load(current_user.id)
    except SQLAlchemyError:
        logger.exception("Failed to load versions for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load versions"
        )

    return StoreResponse(
        content=store.content,
        versions=[VersionEntryResponse(**_entry_fields(entry)) for entry in store.versions]
    )


@router.post("/save-version", response_model=SaveVersionResponse)
async def save_version(
    save_request: SaveVersionRequest,
    current_user: UserIdentity = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
    cipher: Optional[ContentCipher] = Depends(get_cipher)
):
    """Сохранение новой версии для текущего пользователя"""
    version_store = VersionStore(db, cipher)

    try:
        entry = await version_store.save(current_user.id, save_request)
    except SQLAlchemyError:
        logger.exception("Failed to save version for user %s", current_user.id)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to save version"
        )

    return SaveVersionResponse(**_entry_fields(entry), persisted=entry.persisted)


@router.post("/diff", response_model=DiffResponse)
async def diff_texts(
    diff_request: DiffRequest,
    current_user: UserIdentity = Depends(get_current_user)
):
    """Сравнение двух текстов без сохранения"""
    diff = word_diff(diff_request.old_text, diff_request.new_text)

    return DiffResponse(
        added_words=diff.added_words,
        removed_words=diff.removed_words,
        old_length=len(diff_request.old_text),
        new_length=len(diff_request.new_text)
    )
