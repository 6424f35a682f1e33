import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from wordlog.config import settings
from wordlog.api.http import health_router, versions_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)

app = FastAPI(
    title="Wordlog",
    description="Редактор текста с историей изменений на уровне слов",
    version="1.0.0"
)

# Настройка CORS для работы с frontend
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # В продакшене указать конкретные домены
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Подключаем роутеры
app.include_router(health_router)
app.include_router(versions_router)


@app.get("/")
async def root():
    """Корневой эндпоинт"""
    return {
        "message": "Wordlog API",
        "version": "1.0.0",
        "description": "Редактор текста с историей изменений на уровне слов",
        "docs": "/docs",
        "health": "/health"
    }
