"""Dependency injection factories for API v1."""

from functools import lru_cache
from typing import Callable

from domain.services.profile_orchestrator import ProfileOrchestrator
from domain.services.user_orchestrator import UserOrchestrator
from infrastructure.database.session import async_session_factory
from infrastructure.database.sqlalchemy_uow import SQLAlchemyUnitOfWork


def get_uow_factory() -> Callable[[], SQLAlchemyUnitOfWork]:
    """Factory for creating Unit of Work instances."""

    def factory() -> SQLAlchemyUnitOfWork:
        return SQLAlchemyUnitOfWork(async_session_factory)

    return factory


@lru_cache
def get_user_orchestrator() -> UserOrchestrator:
    """Get User orchestrator instance."""
    return UserOrchestrator(get_uow_factory())


@lru_cache
def get_profile_orchestrator() -> ProfileOrchestrator:
    """Get Profile orchestrator instance."""
    return ProfileOrchestrator(get_uow_factory())
