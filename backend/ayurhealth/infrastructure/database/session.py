"""Async engine and session factory for the direct-database blog store."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from ayurhealth.config import Settings, get_settings

_ASYNC_DRIVERS = {
    "sqlite:///": "sqlite+aiosqlite:///",
    "postgresql://": "postgresql+asyncpg://",
    "postgres://": "postgresql+asyncpg://",
}


def _get_async_url(url: str) -> str:
    """Swap a plain driver prefix for its async driver."""
    for plain, async_prefix in _ASYNC_DRIVERS.items():
        if url.startswith(plain):
            return url.replace(plain, async_prefix, 1)
    return url


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the engine. No connection is opened until first use."""
    return create_async_engine(
        _get_async_url(settings.database_url),
        echo=settings.app_env == "development" and settings.log_level_sql.upper() == "DEBUG",
        pool_pre_ping=True,
    )


engine = build_engine(get_settings())

# Sessions are opened per request in ayurhealth.infrastructure.dependencies.
async_session_factory = async_sessionmaker(
    engine,
    class_=AsyncSession,
    expire_on_commit=False,
)
