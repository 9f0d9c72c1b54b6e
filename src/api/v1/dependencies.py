"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Optional

from api.dependencies.auth import get_auth_provider
from domain.repositories.unit_of_work import IsolationLevel, UnitOfWorkFactory
from domain.services.identity_service import IdentityService
from domain.services.profile_service import ProfileService
from infrastructure.auth.password_hasher import BcryptPasswordHasher
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> UnitOfWorkFactory:
    """Factory for creating Unit of Work instances."""

    def factory(isolation_level: Optional[IsolationLevel] = None) -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory, isolation_level)

    return factory


@lru_cache
def get_password_hasher() -> BcryptPasswordHasher:
    """Get password hasher instance."""
    return BcryptPasswordHasher()


@lru_cache
def get_identity_service() -> IdentityService:
    """Get Identity service instance."""
    return IdentityService(
        get_uow_factory(),
        auth_provider=get_auth_provider(),
        password_hasher=get_password_hasher(),
    )


@lru_cache
def get_profile_service() -> ProfileService:
    """Get Profile service instance."""
    return ProfileService(get_uow_factory())
