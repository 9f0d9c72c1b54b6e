"""Pytest configuration and fixtures."""

import os
import sys
from collections.abc import AsyncGenerator, Generator
from pathlib import Path
from typing import Any, Optional
from uuid import uuid4

# Test environment, set before any application module reads settings
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
os.environ["BCRYPT_ROUNDS"] = "4"

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from domain.repositories.unit_of_work import IsolationLevel
from domain.services.identity_service import IdentityService
from domain.services.profile_service import ProfileService
from infrastructure.auth.jwt_provider import JWTAuthProvider
from infrastructure.auth.password_hasher import BcryptPasswordHasher
from infrastructure.auth.provider import TokenUser
from infrastructure.database.models import Base
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork

# Test database URL (SQLite in memory)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


def _enable_sqlite_foreign_keys(dbapi_connection: Any, connection_record: Any) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


@pytest.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database with all tables for each test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
    )
    event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create session factory."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
def uow_factory(session_factory: async_sessionmaker[AsyncSession]):
    """Unit of Work factory bound to the test database.

    SQLite cannot switch to READ COMMITTED, so the requested isolation level
    is accepted and dropped.
    """

    def factory(isolation_level: Optional[IsolationLevel] = None) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(session_factory)

    return factory


@pytest.fixture
def auth_provider() -> JWTAuthProvider:
    """Create auth provider for testing."""
    return JWTAuthProvider(
        secret_key="test-secret-key",
        algorithm="HS256",
        expire_minutes=30,
    )


@pytest.fixture
def password_hasher() -> BcryptPasswordHasher:
    """bcrypt hasher at the minimum cost factor."""
    return BcryptPasswordHasher(rounds=4)


@pytest.fixture
def identity_service(
    uow_factory: Any,
    auth_provider: JWTAuthProvider,
    password_hasher: BcryptPasswordHasher,
) -> IdentityService:
    return IdentityService(uow_factory, auth_provider, password_hasher)


@pytest.fixture
def profile_service(uow_factory: Any) -> ProfileService:
    return ProfileService(uow_factory)


@pytest.fixture
def registration_payload() -> dict[str, Any]:
    """A valid registration body with a unique email."""
    return {
        "email": f"user-{uuid4().hex[:8]}@example.com",
        "password": "s3cret-Passw0rd",
        "name": "Jane",
        "age": 29,
        "gender": "female",
        "profile_image": "https://cdn.example.com/u/jane.png",
    }


@pytest.fixture
def make_auth_token(auth_provider: JWTAuthProvider):
    """Build a session token for an arbitrary user id."""

    def _make(user_id: Any) -> str:
        return auth_provider.create_token(TokenUser(id=user_id))

    return _make


@pytest.fixture
def app(
    session_factory: async_sessionmaker[AsyncSession],
    identity_service: IdentityService,
    profile_service: ProfileService,
    auth_provider: JWTAuthProvider,
) -> Generator[FastAPI, None, None]:
    """
    Create the application wired to the in-memory database.

    - Overrides the auth provider to use the test signing key
    - Overrides the services to use the test Unit of Work factory
    - Overrides the raw session used by the readiness check
    """
    from api.dependencies.auth import get_auth_provider
    from api.v1.dependencies import get_identity_service, get_profile_service
    from infrastructure.database.session import get_async_session
    from main import create_app

    async def _session() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            yield session

    app = create_app()

    app.dependency_overrides[get_auth_provider] = lambda: auth_provider
    app.dependency_overrides[get_identity_service] = lambda: identity_service
    app.dependency_overrides[get_profile_service] = lambda: profile_service
    app.dependency_overrides[get_async_session] = _session

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client against the test application."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
