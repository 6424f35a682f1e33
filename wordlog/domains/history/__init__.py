from wordlog.domains.history.tokenizer import tokenize
from wordlog.domains.history.diff import WordDiff, word_diff
from wordlog.domains.history.entities import UserIdentity, VersionEntry, Store
from wordlog.domains.history.schemas import (
    SaveVersionRequest, VersionEntryResponse, SaveVersionResponse,
    StoreResponse, DiffRequest, DiffResponse
)
from wordlog.domains.history.services import VersionStore

__all__ = [
    "tokenize", "WordDiff", "word_diff",
    "UserIdentity", "VersionEntry", "Store",
    "SaveVersionRequest", "VersionEntryResponse", "SaveVersionResponse",
    "StoreResponse", "DiffRequest", "DiffResponse",
    "VersionStore"
]
