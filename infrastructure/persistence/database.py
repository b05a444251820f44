import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from config.settings import Settings
from infrastructure.persistence.models.currency import Base

logger = logging.getLogger(__name__)

DEFAULT_BUSY_TIMEOUT_MS = 5000


def connect_args_for(db_url: str, busy_timeout_ms: int = DEFAULT_BUSY_TIMEOUT_MS) -> dict:
    """Driver arguments for ``db_url``.

    SQLite locks the whole file for writing, so a second writer waits up to
    ``busy_timeout_ms`` for the lock instead of failing with "database is
    locked". Other backends need nothing extra.
    """
    if make_url(db_url).get_backend_name() == "sqlite":
        return {"timeout": busy_timeout_ms / 1000}
    return {}


class Database:
    """Async engine and unit-of-work sessions for the currency store."""

    def __init__(self, db_url: str, echo: bool = False, busy_timeout_ms: int = DEFAULT_BUSY_TIMEOUT_MS):
        self.url = make_url(db_url)
        self.engine = create_async_engine(
            db_url,
            echo=echo,
            connect_args=connect_args_for(db_url, busy_timeout_ms),
        )
        self._sessions = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)

    @classmethod
    def from_settings(cls, settings: Settings) -> "Database":
        return cls(
            settings.DATABASE_URL,
            echo=settings.DATABASE_ECHO,
            busy_timeout_ms=settings.DATABASE_BUSY_TIMEOUT_MS,
        )

    async def create_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.debug(f"Schema ready on {self.url.render_as_string(hide_password=True)}")

    async def drop_tables(self) -> None:
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)

    async def close(self) -> None:
        await self.engine.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """One transaction: committed if the block exits cleanly, rolled back otherwise."""
        async with self._sessions() as session:
            try:
                yield session
            except Exception as e:
                logger.warning(f"Rolling back currency store transaction after {e.__class__.__name__}")
                await session.rollback()
                raise
            await session.commit()
