"""
Async engine and session factory construction.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from medminder.core.config.settings import Settings, get_settings
from medminder.infrastructure.persistence.sqlalchemy.models.base import Base

logger = logging.getLogger(__name__)

SUPPORTED_ASYNC_DRIVERS = (
    "postgresql+asyncpg",
    "mysql+aiomysql",
    "sqlite+aiosqlite",
)


def create_db_engine_and_session(
    db_url: str, echo: bool = False
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create the SQLAlchemy async engine and session factory.

    Args:
        db_url: The database connection URL.
        echo: Whether to enable SQL echoing.

    Returns:
        A tuple containing the async engine and the session factory.

    Raises:
        ValueError: If the database URL is not suitable for an async driver.
    """
    logger.info("Creating database engine and session factory.")

    if not any(driver in db_url for driver in SUPPORTED_ASYNC_DRIVERS):
        url_display = db_url[: db_url.find("@")] + "@..." if "@" in db_url else db_url
        error_msg = f"Database URL '{url_display}' does not seem to use a supported async driver."
        logger.error(error_msg)
        raise ValueError(error_msg)

    try:
        if db_url.startswith("sqlite") and ":memory:" in db_url:
            # Every connection to :memory: is a new database; share one
            engine = create_async_engine(db_url, echo=echo, poolclass=StaticPool)
        else:
            engine = create_async_engine(db_url, echo=echo, pool_pre_ping=True)
        session_factory = async_sessionmaker(
            bind=engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autoflush=False,
        )
        logger.info("Database engine and session factory created successfully.")
        return engine, session_factory
    except SQLAlchemyError as e:
        logger.exception(f"Failed to create database engine or session factory: {e}")
        raise


def create_engine_from_settings(
    settings: Settings | None = None,
) -> tuple[AsyncEngine, async_sessionmaker[AsyncSession]]:
    """Create the engine and session factory from ``DATABASE_URL`` and ``DB_ECHO_LOG``."""
    settings = settings or get_settings()
    return create_db_engine_and_session(settings.DATABASE_URL, echo=settings.DB_ECHO_LOG)


async def init_models(engine: AsyncEngine) -> None:
    """Create all tables that do not exist yet."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables created.")
