from wordlog.api.http.health import router as health_router
from wordlog.api.http.versions import router as versions_router

__all__ = [
    "health_router",
    "versions_router"
]
