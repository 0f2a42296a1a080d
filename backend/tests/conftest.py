"""
Общие фикстуры: in-memory SQLite, сессии, пользователи, HTTP клиент
"""
import os

# До импорта приложения: engine создаётся при импорте thriftshare.database
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession
from sqlalchemy.pool import StaticPool

from thriftshare.config import settings
from thriftshare.database import Base, get_db
from thriftshare.main import app
from thriftshare.models import Post
from thriftshare.schemas.user import UserUpsert
from thriftshare.services.badge_service import BadgeService
from thriftshare.services.user_service import UserService
from thriftshare.utils.auth import create_access_token


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def catalog(db):
    """Засеянный каталог бейджей"""
    await BadgeService.initialize_badges(db)
    return await BadgeService.get_catalog(db)


@pytest_asyncio.fixture
async def user(db):
    return await UserService.upsert_user(
        db,
        UserUpsert(id="user-1", username="thrifter", first_name="Anna", email="anna@example.com")
    )


@pytest_asyncio.fixture
async def other_user(db):
    return await UserService.upsert_user(
        db,
        UserUpsert(id="user-2", username="renter", first_name="Boris")
    )


@pytest.fixture
def add_posts(db):
    """Быстро добавить посты напрямую, без леджера"""
    async def _add_posts(user_id, count, likes=0, **fields):
        posts = [
            Post(user_id=user_id, image_url="/uploads/test.jpg", likes_count=likes, **fields)
            for _ in range(count)
        ]
        db.add_all(posts)
        await db.commit()
        return posts
    return _add_posts


@pytest.fixture
def auth_headers():
    def _auth_headers(user_id):
        token = create_access_token({"sub": user_id})
        return {"Authorization": f"Bearer {token}"}
    return _auth_headers


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    path = tmp_path / "uploads"
    monkeypatch.setattr(settings, "UPLOAD_DIR", str(path))
    return path


@pytest_asyncio.fixture
async def client(session_factory, upload_dir):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
