"""Database session dependencies."""

from collections.abc import AsyncGenerator, Callable
from contextlib import AbstractAsyncContextManager
from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from src.fieldops.core.db import get_session

SessionFactoryType = Callable[[], AbstractAsyncContextManager[AsyncSession]]


def get_session_factory() -> SessionFactoryType:
    """Source of sessions for requests and long-lived websocket handlers.

    Overridden in tests to bind sessions to the test engine.
    """
    return get_session


SessionFactory = Annotated[SessionFactoryType, Depends(get_session_factory)]


async def get_db_session(factory: SessionFactory) -> AsyncGenerator[AsyncSession, None]:
    """Get a database session for the duration of one request."""
    async with factory() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
