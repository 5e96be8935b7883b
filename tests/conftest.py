import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")
os.environ.setdefault("ALGORITHM", "HS256")
os.environ.setdefault("ACCESS_TOKEN_EXPIRE_MINUTES", "30")

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from movie_reviews.app import app  # noqa: E402
from movie_reviews.domain.ports.repositories.movie_repository import MovieRepository  # noqa: E402
from movie_reviews.domain.ports.repositories.review_repository import ReviewRepository  # noqa: E402
from movie_reviews.domain.ports.repositories.user_repository import UserRepository  # noqa: E402
from movie_reviews.infrastructure.adapters.services.jwt_auth_service import JWTAuthService  # noqa: E402
from movie_reviews.infrastructure.config.settings import Settings  # noqa: E402
from movie_reviews.infrastructure.persistence.database import get_session, init_models  # noqa: E402
from movie_reviews.infrastructure.persistence.models import table_registry  # noqa: E402


class BaseIntegrationTest:
    """Base class for integration tests with common setup"""

    @pytest_asyncio.fixture
    async def sqlite_engine(self):
        """Create an in-memory test database engine"""
        engine = create_async_engine(
            "sqlite+aiosqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        await init_models(engine)

        yield engine

        async with engine.begin() as conn:
            await conn.run_sync(table_registry.metadata.drop_all)
        await engine.dispose()

    @pytest_asyncio.fixture
    async def test_session(self, sqlite_engine):
        """Create test database session"""
        async with AsyncSession(sqlite_engine, expire_on_commit=False) as session:
            yield session

    @pytest_asyncio.fixture
    async def client(self, test_session):
        """Create test HTTP client with database override"""

        async def override_get_session():
            yield test_session

        app.dependency_overrides[get_session] = override_get_session

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac

        app.dependency_overrides.clear()

    @pytest.fixture
    def auth_headers(self):
        """Bearer header accepted by the auth gate"""
        token = JWTAuthService(Settings()).create_access_token("reviewer@example.com")
        return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def mock_review_repository():
    """Mock review repository for use case testing"""
    return AsyncMock(spec=ReviewRepository)


@pytest.fixture
def mock_user_repository():
    return AsyncMock(spec=UserRepository)


@pytest.fixture
def mock_movie_repository():
    return AsyncMock(spec=MovieRepository)
