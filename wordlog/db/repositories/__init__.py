from wordlog.db.repositories.user_state_repository import UserStateRepository
from wordlog.db.repositories.version_repository import VersionRepository

__all__ = [
    "UserStateRepository",
    "VersionRepository"
]
