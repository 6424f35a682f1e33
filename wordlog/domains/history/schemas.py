from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel
from typing import List
import uuid


class CamelModel(BaseModel):
    """Базовая схема с camelCase именами полей в JSON"""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SaveVersionRequest(CamelModel):
    """Схема запроса на сохранение версии"""
    content: str = Field(default="", max_length=1000000)  # 1MB max content
    added_words: List[str] = Field(...)
    removed_words: List[str] = Field(...)
    old_length: int = Field(..., ge=0)
    new_length: int = Field(..., ge=0)

    @field_validator('added_words', 'removed_words')
    @classmethod
    def normalize_words(cls, v):
        if any(not word for word in v):
            raise ValueError('Words cannot be empty')
        return sorted(set(v))

    @model_validator(mode='after')
    def check_disjoint(self):
        overlap = set(self.added_words) & set(self.removed_words)
        if overlap:
            raise ValueError(f"Words cannot be both added and removed: {', '.join(sorted(overlap))}")
        return self


class VersionEntryResponse(CamelModel):
    """Схема для ответа с записью истории"""
    id: uuid.UUID
    timestamp: str
    added_words: List[str]
    removed_words: List[str]
    old_length: int
    new_length: int


class SaveVersionResponse(VersionEntryResponse):
    """Схема для ответа на сохранение: persisted=False если изменений не было"""
    persisted: bool


class StoreResponse(CamelModel):
    """Схема для ответа с содержимым и историей пользователя"""
    content: str
    versions: List[VersionEntryResponse]


class DiffRequest(CamelModel):
    """Схема запроса на сравнение двух текстов"""
    old_text: str = Field(default="", max_length=1000000)
    new_text: str = Field(default="", max_length=1000000)


class DiffResponse(CamelModel):
    """Схема для ответа со списками добавленных и удаленных слов"""
    added_words: List[str]
    removed_words: List[str]
    old_length: int
    new_length: int
