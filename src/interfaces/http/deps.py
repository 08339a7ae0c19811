from __future__ import annotations

from collections.abc import AsyncIterator, Callable

from fastapi import Depends, Request

from src.application.errors import AuthError
from src.config.settings import Settings, get_settings
from src.domain.value_objects.principal import Principal
from src.infrastructure.auth.context import AuthContext
from src.infrastructure.db.session import SQLAlchemyUnitOfWork


async def get_auth_context(request: Request) -> AuthContext:
    context = getattr(request.state, "auth_context", None)
    if context is None:
        raise AuthError("Authentication required")
    return context


async def get_principal(context: AuthContext = Depends(get_auth_context)) -> Principal:
    return context.principal


def _session_factory(request: Request):
    session_factory = getattr(request.app.state, "session_factory", None)
    if session_factory is None:
        raise RuntimeError("Session factory not configured")
    return session_factory


async def get_uow(request: Request) -> AsyncIterator[SQLAlchemyUnitOfWork]:
    uow = SQLAlchemyUnitOfWork(_session_factory(request))
    async with uow:
        yield uow


def get_uow_factory(request: Request) -> Callable[[], SQLAlchemyUnitOfWork]:
    """Fresh units of work on demand, for use cases that read concurrently."""
    session_factory = _session_factory(request)
    return lambda: SQLAlchemyUnitOfWork(session_factory)


def get_app_settings(request: Request) -> Settings:
    settings = getattr(request.app.state, "settings", None)
    return settings if settings is not None else get_settings()
