"""Shared fixtures: in-memory SQLite database, ciphers and an API client."""
import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("JWT_SECRET", "test-secret")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from wordlog.api.http.versions import get_cipher
from wordlog.core.crypto import ContentCipher
from wordlog.core.db import Base, get_db
from wordlog.core.security import create_access_token
from wordlog.db import models  # noqa: F401
from wordlog.main import app


@pytest_asyncio.fixture
async def db_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncSession:
    session_factory = sessionmaker(bind=db_engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest.fixture
def cipher() -> ContentCipher:
    return ContentCipher("correct horse battery staple")


@pytest.fixture
def other_cipher() -> ContentCipher:
    return ContentCipher("a different secret")


@pytest.fixture
def auth_headers() -> dict:
    token = create_access_token({"sub": "user-1", "email": "user1@test.com"})
    return {"Authorization": f"Bearer {token}"}


def _client_for(db_session, cipher):
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_cipher] = lambda: cipher
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


@pytest_asyncio.fixture
async def client(db_session):
    """API client storing plaintext."""
    async with _client_for(db_session, None) as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def encrypted_client(db_session, cipher):
    """API client with at-rest encryption enabled."""
    async with _client_for(db_session, cipher) as ac:
        yield ac
    app.dependency_overrides.clear()
